# Copyright (c) 2024 Airbyte, Inc., all rights reserved.

from .reddit_error_handler import RedditErrorHandler
from .response_models import (
    ErrorResolution,
    FailureType,
    ReauthStrategy,
    ResponseAction,
)

__all__ = [
    "ErrorResolution",
    "FailureType",
    "ReauthStrategy",
    "RedditErrorHandler",
    "ResponseAction",
]
