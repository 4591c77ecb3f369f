#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, MutableMapping, Optional

import requests
from requests.structures import CaseInsensitiveDict

from reddit_cdk.config import ProxySettings, RedditConfig
from reddit_cdk.exceptions import TransportError
from reddit_cdk.http.proxy_config import configure_session

logger = logging.getLogger("reddit_cdk.http")

DEFAULT_TIMEOUT_SECONDS = 30


@dataclass
class TransportRequest:
    method: str
    url: str
    hostname: str
    path: str
    port: int
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, Any] = field(default_factory=dict)
    data: Optional[Mapping[str, Any]] = None


@dataclass
class TransportResponse:
    """
    Raw response of a transport. The body is left undecoded, `headers` is case insensitive.
    """

    status: int
    headers: MutableMapping[str, str] = field(default_factory=CaseInsensitiveDict)
    body: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.headers, CaseInsensitiveDict):
            self.headers = CaseInsensitiveDict(self.headers or {})

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300


class Transport(ABC):
    """
    Performs the network call for an endpoint. Implementations must return the response whatever
    its status code and raise TransportError only when no response was received.
    """

    @abstractmethod
    def send(self, request: TransportRequest) -> TransportResponse:
        """
        :param request: the request to perform
        :return: the raw response
        """


class RequestsTransport(Transport):
    """Transport backed by a `requests.Session`."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        proxy: Optional[ProxySettings] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._session = session or requests.Session()
        if proxy:
            configure_session(self._session, proxy)
        self._timeout = timeout

    @classmethod
    def from_config(
        cls, config: RedditConfig, session: Optional[requests.Session] = None
    ) -> "RequestsTransport":
        return cls(session=session, proxy=config.proxy)

    def send(self, request: TransportRequest) -> TransportResponse:
        logger.debug("Sending %s request to %s", request.method, request.url)
        try:
            response = self._session.request(
                method=request.method,
                url=request.url,
                headers=dict(request.headers),
                params=dict(request.params) or None,
                data=dict(request.data) if request.data is not None else None,
                timeout=self._timeout,
            )
        except requests.exceptions.RequestException as exception:
            logger.warning("%s request to %s failed: %s", request.method, request.url, exception)
            raise TransportError(
                f"{type(exception).__name__}: {exception} while calling {request.url}"
            ) from exception

        return TransportResponse(
            status=response.status_code,
            headers=CaseInsensitiveDict(response.headers),
            body=response.text,
        )
