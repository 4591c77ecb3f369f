#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from reddit_cdk.http.transport import TransportResponse
    from reddit_cdk.models.endpoint import Endpoint


class FailureType(Enum):
    config_error = "config_error"
    system_error = "system_error"
    transient_error = "transient_error"


class RedditCdkException(Exception):
    """
    Base class for every error raised by reddit_cdk
    """


class ResponseError(RedditCdkException):
    """
    Raised when reddit answered with a response we can not recover from.

    Carries the response and the endpoint that produced it for diagnostics. `failure_type` tells
    whether the caller should fix its configuration (scopes, credentials), report a system error
    or try again later.
    """

    default_failure_type = FailureType.system_error

    def __init__(
        self,
        message: str,
        response: Optional["TransportResponse"] = None,
        endpoint: Optional["Endpoint"] = None,
        failure_type: Optional[FailureType] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.response = response
        self.endpoint = endpoint
        self.failure_type = failure_type or self.default_failure_type

    @property
    def status(self) -> Optional[int]:
        return self.response.status if self.response is not None else None

    def __str__(self) -> str:
        parts = [self.message]
        if self.response is not None:
            parts.append(f"Status: {self.response.status}")
        if self.endpoint is not None:
            parts.append(f"Endpoint: {self.endpoint.method.upper()} {self.endpoint.url}")
        if self.response is not None and self.response.body:
            parts.append(f"Response body: {self.response.body}")
        return "\n".join(parts)


class InsufficientScopeError(ResponseError):
    """Raised when the access token lacks a scope required by the call."""

    default_failure_type = FailureType.config_error


class NotFoundError(ResponseError):
    """Raised when reddit answers 404, usually an invalid endpoint."""


class TokenExpiredError(ResponseError):
    """Raised when the access token expired and there is no way to renew it."""

    default_failure_type = FailureType.config_error


class UnrecoverableResponseError(ResponseError):
    """Raised for any failed call that is neither retried nor reauthenticated."""


class RetryExhaustedError(ResponseError):
    """Raised when a call kept failing after the configured number of retries."""

    default_failure_type = FailureType.transient_error


class TransportError(RedditCdkException):
    """
    Raised by a transport when the request could not be performed at all (DNS, connection, TLS...)
    """


class MalformedResponseError(RedditCdkException):
    """
    Raised when a response that must hold structured data (e.g. auth data) can not be parsed
    """


class ListingError(RedditCdkException):
    """
    Raised when a listing response can not be turned into a slice or navigated
    """


class ListingIndexError(ListingError):
    """Raised when a listing call returns several listings and no usable listing_index was given."""


class ListingNavigationError(ListingError):
    """Raised when next/previous is requested on a slice with no regular (non stickied) children."""
