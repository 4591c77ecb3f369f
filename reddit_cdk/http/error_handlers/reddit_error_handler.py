#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

from reddit_cdk.auth.provider import AuthProvider, is_application_only
from reddit_cdk.config import RedditConfig
from reddit_cdk.exceptions import (
    FailureType,
    InsufficientScopeError,
    NotFoundError,
    TokenExpiredError,
    UnrecoverableResponseError,
)
from reddit_cdk.http.error_handlers.response_models import (
    RETRY_RESOLUTION,
    SUCCESS_RESOLUTION,
    ErrorResolution,
    ReauthStrategy,
    ResponseAction,
)
from reddit_cdk.http.transport import TransportResponse
from reddit_cdk.models.endpoint import Endpoint

INSUFFICIENT_SCOPE_MESSAGE = "Insufficient scopes provided for this call"
NOT_FOUND_MESSAGE = "Page not found. Is this a valid endpoint?"
ACCESS_TOKEN_EXPIRED_MESSAGE = (
    "Access token has expired. Subscribe to the access token expired notifier "
    "to handle this gracefully in your app."
)
NO_REAUTH_MESSAGE = (
    "Access token was rejected and can not be renewed: there is no refresh token "
    "and the OAuth type is not `script`."
)
UNRECOVERABLE_MESSAGE = (
    "This call failed. Does this call require a user? Is the user missing reddit gold? "
    "Trying to change a subreddit that the user does not moderate? This is an unrecoverable "
    "error. Check the rest of the error message for more information."
)


class RedditErrorHandler:
    """
    Decides what to do with a non 2xx response from reddit.

    Checks run in order: insufficient scope, 404, 401, 5xx, anything else. `interpret_response`
    only reads the provider state; performing the reauthentication is left to the caller.
    """

    def __init__(
        self, config: RedditConfig, oauth: AuthProvider, oauth_app_only: AuthProvider
    ) -> None:
        self._config = config
        self._oauth = oauth
        self._oauth_app_only = oauth_app_only

    def interpret_response(
        self, response: TransportResponse, endpoint: Endpoint
    ) -> ErrorResolution:
        if response.is_success:
            return SUCCESS_RESOLUTION

        www_authenticate = response.headers.get("www-authenticate")
        if www_authenticate and "insufficient_scope" in www_authenticate:
            return self._fail(
                InsufficientScopeError, INSUFFICIENT_SCOPE_MESSAGE, FailureType.config_error
            )

        if response.status == 404:
            return self._fail(NotFoundError, NOT_FOUND_MESSAGE)

        if response.status == 401:
            return self._interpret_unauthorized(endpoint)

        if str(response.status).startswith("5"):
            return RETRY_RESOLUTION

        return self._fail(UnrecoverableResponseError, UNRECOVERABLE_MESSAGE)

    def _interpret_unauthorized(self, endpoint: Endpoint) -> ErrorResolution:
        if is_application_only(self._oauth) or endpoint.context_options.bypass_auth:
            return self._reauthenticate(ReauthStrategy.APPLICATION_ONLY)

        if self._oauth.can_refresh_access_token():
            if self._oauth.has_refresh_token():
                return self._reauthenticate(ReauthStrategy.REFRESH)
            if self._config.is_oauth_type("script"):
                return self._reauthenticate(ReauthStrategy.SCRIPT_AUTH)
            return self._fail(
                UnrecoverableResponseError, NO_REAUTH_MESSAGE, FailureType.config_error
            )

        return ErrorResolution(
            response_action=ResponseAction.FAIL,
            failure_type=FailureType.config_error,
            error_message=ACCESS_TOKEN_EXPIRED_MESSAGE,
            exception_class=TokenExpiredError,
            emit_access_token_expired=True,
        )

    @staticmethod
    def _reauthenticate(strategy: ReauthStrategy) -> ErrorResolution:
        return ErrorResolution(
            response_action=ResponseAction.REAUTHENTICATE,
            failure_type=FailureType.transient_error,
            error_message="Access token was rejected",
            reauth_strategy=strategy,
        )

    @staticmethod
    def _fail(
        exception_class, message: str, failure_type: FailureType = FailureType.system_error
    ) -> ErrorResolution:
        return ErrorResolution(
            response_action=ResponseAction.FAIL,
            failure_type=failure_type,
            error_message=message,
            exception_class=exception_class,
        )
