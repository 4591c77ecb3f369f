# Copyright (c) 2024 Airbyte, Inc., all rights reserved.

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Type

from reddit_cdk.exceptions import FailureType, ResponseError


class ResponseAction(Enum):
    SUCCESS = "SUCCESS"
    RETRY = "RETRY"
    REAUTHENTICATE = "REAUTHENTICATE"
    FAIL = "FAIL"


class ReauthStrategy(Enum):
    APPLICATION_ONLY = "APPLICATION_ONLY"
    REFRESH = "REFRESH"
    SCRIPT_AUTH = "SCRIPT_AUTH"


@dataclass
class ErrorResolution:
    response_action: Optional[ResponseAction] = None
    failure_type: Optional[FailureType] = None
    error_message: Optional[str] = None
    exception_class: Optional[Type[ResponseError]] = None
    reauth_strategy: Optional[ReauthStrategy] = None
    emit_access_token_expired: bool = False


SUCCESS_RESOLUTION = ErrorResolution(
    response_action=ResponseAction.SUCCESS, failure_type=None, error_message=None
)

RETRY_RESOLUTION = ErrorResolution(
    response_action=ResponseAction.RETRY,
    failure_type=FailureType.transient_error,
    error_message="Reddit servers are busy",
)
