#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

from abc import ABC, abstractmethod


class AuthProvider(ABC):
    """
    Token holder used to authenticate calls to reddit.

    Two instances are given to a client: one authenticated on behalf of a user and one using
    application only OAuth. Obtaining and storing tokens is up to the implementation; the client
    only queries the token state and asks for a new token when a call is rejected.
    """

    @abstractmethod
    def has_access_token(self) -> bool:
        """Whether a usable access token is currently held"""

    @abstractmethod
    def can_refresh_access_token(self) -> bool:
        """Whether a new access token can be obtained without user interaction"""

    @abstractmethod
    def has_refresh_token(self) -> bool:
        """Whether a permanent refresh token is held"""

    @abstractmethod
    def refresh(self) -> None:
        """Exchange the refresh token for a new access token"""

    @abstractmethod
    def auth(self) -> None:
        """Perform the configured grant again to get a new access token"""

    @abstractmethod
    def application_only_auth(self) -> None:
        """Obtain an application only access token"""

    @abstractmethod
    def get_authorization_header(self) -> str:
        """Value of the Authorization header for the current token, e.g. `bearer <token>`"""


def is_application_only(oauth: AuthProvider) -> bool:
    """
    Without an access token and no way to get a new one, calls fall back on application only OAuth.
    """
    return not oauth.has_access_token() and not oauth.can_refresh_access_token()
