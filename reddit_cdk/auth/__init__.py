#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

from .auth_data import AuthData, parse_auth_data
from .provider import AuthProvider, is_application_only
from .reauth import SerializedReauthenticator

__all__ = [
    "AuthData",
    "AuthProvider",
    "SerializedReauthenticator",
    "is_application_only",
    "parse_auth_data",
]
