#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

from .auth import AuthData, AuthProvider, parse_auth_data
from .config import ProxySettings, RedditConfig
from .events import AccessTokenExpiredNotifier
from .exceptions import (
    FailureType,
    InsufficientScopeError,
    ListingError,
    ListingIndexError,
    ListingNavigationError,
    MalformedResponseError,
    NotFoundError,
    RedditCdkException,
    ResponseError,
    RetryExhaustedError,
    TokenExpiredError,
    TransportError,
    UnrecoverableResponseError,
)
from .http import RequestsTransport, Transport, TransportRequest, TransportResponse
from .models import ContextOptions, CursorState, Endpoint, ListingSlice
from .reddit_request import RedditRequest

__all__ = [
    "AccessTokenExpiredNotifier",
    "AuthData",
    "AuthProvider",
    "ContextOptions",
    "CursorState",
    "Endpoint",
    "FailureType",
    "InsufficientScopeError",
    "ListingError",
    "ListingIndexError",
    "ListingNavigationError",
    "ListingSlice",
    "MalformedResponseError",
    "NotFoundError",
    "ProxySettings",
    "RedditCdkException",
    "RedditConfig",
    "RedditRequest",
    "RequestsTransport",
    "ResponseError",
    "RetryExhaustedError",
    "TokenExpiredError",
    "Transport",
    "TransportError",
    "TransportRequest",
    "TransportResponse",
    "UnrecoverableResponseError",
    "parse_auth_data",
]
