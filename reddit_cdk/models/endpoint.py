#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

import re
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, MutableMapping, Optional, Union

from reddit_cdk.http.transport import TransportRequest

HTTP_METHODS = ("get", "post", "put", "patch", "delete", "update")
# methods whose arguments are sent in the query string, everything else is form encoded
QUERY_METHODS = ("get", "delete")
DEFAULT_PORT = 443

_PATH_VARIABLE = re.compile(r"\$(\w+)")
_CAMEL_CASE_OPTIONS = {
    "bypassAuth": "bypass_auth",
    "decodeHtmlEntities": "decode_html_entities",
    "listingIndex": "listing_index",
}


@dataclass(frozen=True)
class ContextOptions:
    """
    Options changing how a single call is performed and how its response is handled.

    Attributes:
        bypass_auth: Use application only OAuth even when a user is authenticated
        decode_html_entities: Decode HTML entities in the response body before parsing it
        listing_index: Which listing to use when a listing call returns several of them
    """

    bypass_auth: bool = False
    decode_html_entities: bool = False
    listing_index: Optional[int] = None

    @classmethod
    def from_mapping(
        cls, options: Union["ContextOptions", Mapping[str, Any], None]
    ) -> "ContextOptions":
        if options is None:
            return cls()
        if isinstance(options, ContextOptions):
            return options
        values = {}
        for key, value in options.items():
            name = _CAMEL_CASE_OPTIONS.get(key, key)
            if name in ("bypass_auth", "decode_html_entities", "listing_index"):
                values[name] = value
        return cls(**values)


@dataclass(frozen=True)
class Endpoint:
    """
    Describes exactly one call to the reddit API.

    An endpoint is never modified once built. Retrying a call with refreshed credentials means
    building a new endpoint with `with_headers`.

    Arguments whose key starts with `$` fill the matching `$name` placeholder of the path, e.g.
    path `/r/$subreddit/new` with args `{"$subreddit": "python"}` resolves to `/r/python/new`.
    """

    hostname: str
    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    args: Mapping[str, Any] = field(default_factory=dict)
    context_options: ContextOptions = field(default_factory=ContextOptions)
    port: int = DEFAULT_PORT
    # reauthentication generations seen when `headers` were built, see RedditRequest.authorize
    auth_generations: Optional[Mapping[str, int]] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        method = self.method.lower()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported method `{self.method}`. Expected one of {HTTP_METHODS}")
        # frozen dataclass, so normalization goes through object.__setattr__
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "headers", dict(self.headers or {}))
        object.__setattr__(self, "args", dict(self.args or {}))
        object.__setattr__(
            self, "context_options", ContextOptions.from_mapping(self.context_options)
        )
        if self.auth_generations is not None:
            object.__setattr__(self, "auth_generations", dict(self.auth_generations))

    def with_headers(
        self, headers: Mapping[str, str], auth_generations: Optional[Mapping[str, int]] = None
    ) -> "Endpoint":
        return replace(self, headers=dict(headers), auth_generations=auth_generations)

    def with_args(self, args: Mapping[str, Any]) -> "Endpoint":
        return replace(self, args=dict(args))

    @property
    def resolved_path(self) -> str:
        def _substitute(match: "re.Match[str]") -> str:
            key = f"${match.group(1)}"
            if key not in self.args:
                raise ValueError(f"Missing value for path variable `{key}` in `{self.path}`")
            return str(self.args[key])

        return _PATH_VARIABLE.sub(_substitute, self.path)

    @property
    def url(self) -> str:
        netloc = self.hostname if self.port == DEFAULT_PORT else f"{self.hostname}:{self.port}"
        return f"https://{netloc}{self.resolved_path}"

    @property
    def call_args(self) -> MutableMapping[str, Any]:
        """
        Arguments sent to reddit, i.e. without path variables and unset values. Booleans are
        sent as `true`/`false`, the form reddit expects.
        """
        return {
            key: _format_arg(value)
            for key, value in self.args.items()
            if not key.startswith("$") and value is not None
        }

    @property
    def query_params(self) -> MutableMapping[str, Any]:
        return self.call_args if self.method in QUERY_METHODS else {}

    @property
    def body(self) -> Optional[MutableMapping[str, Any]]:
        return None if self.method in QUERY_METHODS else self.call_args

    def to_request(self) -> TransportRequest:
        return TransportRequest(
            method=self.method.upper(),
            url=self.url,
            hostname=self.hostname,
            path=self.resolved_path,
            port=self.port,
            headers=dict(self.headers),
            params=self.query_params,
            data=self.body,
        )

    def __repr__(self) -> str:
        return (
            f"Endpoint(method={self.method!r}, hostname={self.hostname!r}, path={self.path!r}, "
            f"headers={filter_headers(self.headers)!r}, args={self.args!r}, "
            f"context_options={self.context_options!r})"
        )


def _format_arg(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def filter_headers(headers: Mapping[str, str]) -> Mapping[str, str]:
    """Returns a copy of the headers with credentials masked so they can be logged."""
    return {
        key: "****" if key.lower() == "authorization" else value for key, value in headers.items()
    }
