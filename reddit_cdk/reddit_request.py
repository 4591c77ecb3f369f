#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

import logging
from typing import Any, Dict, Mapping, MutableMapping, Optional, Union

from reddit_cdk.auth.provider import AuthProvider, is_application_only
from reddit_cdk.auth.reauth import SerializedReauthenticator
from reddit_cdk.config import RedditConfig
from reddit_cdk.decoders import decode_body
from reddit_cdk.events import AccessTokenExpiredNotifier
from reddit_cdk.exceptions import RetryExhaustedError
from reddit_cdk.http.error_handlers import (
    ReauthStrategy,
    RedditErrorHandler,
    ResponseAction,
)
from reddit_cdk.http.transport import Transport, TransportResponse
from reddit_cdk.listing import ListingCursor
from reddit_cdk.models.endpoint import ContextOptions, Endpoint
from reddit_cdk.models.listing import ListingSlice
from reddit_cdk.router import PathCalls, parse_path

logger = logging.getLogger("reddit_cdk")

_USER = "user"
_APP_ONLY = "app_only"


class RedditRequest:
    """
    Calls the reddit API.

    Every call goes through `call_reddit_api`, which authenticates the request, sends it and
    recovers from the failures that can be recovered from:

    - 401: a new access token is obtained (application only auth, refresh token, or a new
      `script` grant) and the call is issued again with the new token.
    - 5xx: the call is issued again as is.

    Each call is retried at most `config.max_retries` times, after which RetryExhaustedError is
    raised. Any other failure raises a ResponseError subclass holding the response and endpoint.

    When the user access token expired and can not be renewed, subscribers of `expiry_notifier`
    are notified before TokenExpiredError is raised.
    """

    def __init__(
        self,
        config: RedditConfig,
        transport: Transport,
        oauth: AuthProvider,
        oauth_app_only: AuthProvider,
        expiry_notifier: Optional[AccessTokenExpiredNotifier] = None,
    ) -> None:
        self.config = config
        self.expiry_notifier = expiry_notifier or AccessTokenExpiredNotifier()
        self._transport = transport
        self._oauth = oauth
        self._oauth_app_only = oauth_app_only
        self._error_handler = RedditErrorHandler(config, oauth, oauth_app_only)
        self._reauthenticators = {
            _USER: SerializedReauthenticator("user OAuth"),
            _APP_ONLY: SerializedReauthenticator("application only OAuth"),
        }
        self._listing_cursor = ListingCursor(self, default_limit=config.default_listing_limit)

    def is_application_only(self) -> bool:
        return is_application_only(self._oauth)

    def build_headers(
        self, context_options: Union[ContextOptions, Mapping[str, Any], None] = None
    ) -> MutableMapping[str, str]:
        options = ContextOptions.from_mapping(context_options)
        headers: Dict[str, str] = {}

        if self.config.send_user_agent:
            headers["User-Agent"] = self.config.user_agent

        if options.bypass_auth or self.is_application_only():
            headers["Authorization"] = self._oauth_app_only.get_authorization_header()
        else:
            headers["Authorization"] = self._oauth.get_authorization_header()

        return headers

    def call_reddit_api(self, endpoint: Endpoint, attempt: int = 0) -> Any:
        """
        :param endpoint: the call to perform
        :param attempt: number of retries already performed for this call
        :return: the decoded response body
        """
        response = self._transport.send(endpoint.to_request())

        if response.is_success:
            return self.handle_success_response(response, endpoint)

        retry_endpoint = self.response_error_handler(response, endpoint, attempt)
        return self.call_reddit_api(retry_endpoint, attempt + 1)

    def response_error_handler(
        self,
        response: TransportResponse,
        endpoint: Endpoint,
        attempt: int = 0,
        generations: Optional[Mapping[str, int]] = None,
    ) -> Endpoint:
        """
        Handles a failed response.

        :param generations: reauthentication generations seen when the rejected request was
            built, defaults to the ones recorded on the endpoint
        :return: the endpoint to call again, with refreshed headers
        :raises ResponseError: when the failure can not be recovered from
        """
        resolution = self._error_handler.interpret_response(response, endpoint)

        if resolution.response_action == ResponseAction.FAIL:
            if resolution.emit_access_token_expired:
                self.expiry_notifier.notify()
            logger.error(
                "%s %s failed with status %s: %s",
                endpoint.method.upper(),
                endpoint.path,
                response.status,
                resolution.error_message,
            )
            raise resolution.exception_class(
                resolution.error_message,
                response,
                endpoint,
                failure_type=resolution.failure_type,
            )

        if attempt >= self.config.max_retries:
            raise RetryExhaustedError(
                f"Giving up after {attempt} retries. Last failure: {resolution.error_message}",
                response,
                endpoint,
                failure_type=resolution.failure_type,
            )

        if resolution.response_action == ResponseAction.REAUTHENTICATE:
            self._reauthenticate(resolution.reauth_strategy, endpoint, generations)
        else:
            logger.warning(
                "%s %s answered %s, retrying (attempt %s of %s)",
                endpoint.method.upper(),
                endpoint.path,
                response.status,
                attempt + 1,
                self.config.max_retries,
            )

        return self.authorize(endpoint)

    def authorize(self, endpoint: Endpoint) -> Endpoint:
        """
        Returns a copy of the endpoint with fresh headers, recording the reauthentication
        generations they were built at. A 401 on that copy only triggers a reauthentication if
        no other call obtained a new token since.
        """
        generations = self._reauth_generations()
        return endpoint.with_headers(
            self.build_headers(endpoint.context_options), auth_generations=generations
        )

    def handle_success_response(self, response: TransportResponse, endpoint: Endpoint) -> Any:
        return decode_body(response.body, endpoint.context_options.decode_html_entities)

    def get_listing(self, endpoint: Endpoint) -> ListingSlice:
        return self._listing_cursor.get_listing(endpoint)

    def path(self, url_or_path: str) -> PathCalls:
        return PathCalls(self, parse_path(url_or_path))

    def _reauth_generations(self) -> Mapping[str, int]:
        return {name: guard.generation for name, guard in self._reauthenticators.items()}

    def _reauthenticate(
        self,
        strategy: ReauthStrategy,
        endpoint: Endpoint,
        generations: Optional[Mapping[str, int]],
    ) -> None:
        if strategy == ReauthStrategy.APPLICATION_ONLY:
            name, provider, action = (
                _APP_ONLY,
                self._oauth_app_only,
                self._oauth_app_only.application_only_auth,
            )
        elif strategy == ReauthStrategy.REFRESH:
            name, provider, action = _USER, self._oauth, self._oauth.refresh
        else:
            name, provider, action = _USER, self._oauth, self._oauth.auth

        guard = self._reauthenticators[name]
        observed = generations if generations is not None else endpoint.auth_generations
        if observed is not None:
            observed_generation = observed[name]
        else:
            # endpoint built without `authorize`: its header tells whether the token is stale
            rejected = endpoint.headers.get("Authorization")
            if rejected is not None and rejected != provider.get_authorization_header():
                logger.info("Rejected %s token was already replaced, retrying with it", name)
                return
            observed_generation = guard.generation

        logger.info("Access token rejected, reauthenticating with %s", strategy.value)
        guard.reauthenticate(action, observed_generation)
