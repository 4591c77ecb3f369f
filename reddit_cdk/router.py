#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Union
from urllib.parse import urlparse

from reddit_cdk.models.endpoint import HTTP_METHODS, ContextOptions, Endpoint
from reddit_cdk.models.listing import ListingSlice

if TYPE_CHECKING:
    from reddit_cdk.reddit_request import RedditRequest

Args = Optional[Mapping[str, Any]]
Options = Union[ContextOptions, Mapping[str, Any], None]


def parse_path(url_or_path: str) -> str:
    """
    Keeps the path of an url, e.g. `https://www.example.com/api/v1/me?raw=1` gives `/api/v1/me`.

    Calls always go to the configured OAuth server, whatever host the url names.
    """
    path = urlparse(url_or_path).path
    if not path.startswith("/"):
        path = f"/{path}"
    return path


class PathCalls:
    """
    Entry points for one API path, one per HTTP verb plus `listing`, e.g.
    `reddit.path("/r/$subreddit/hot").listing({"$subreddit": "python", "limit": 10})`
    """

    def __init__(self, reddit_request: "RedditRequest", path: str) -> None:
        self._reddit_request = reddit_request
        self.path = path

    def __getitem__(self, verb: str) -> Callable[..., Any]:
        if verb not in HTTP_METHODS and verb != "listing":
            raise KeyError(verb)
        return getattr(self, verb)

    def get(self, args: Args = None, context_options: Options = None) -> Any:
        return self._call("get", args, context_options)

    def post(self, args: Args = None, context_options: Options = None) -> Any:
        return self._call("post", args, context_options)

    def put(self, args: Args = None, context_options: Options = None) -> Any:
        return self._call("put", args, context_options)

    def patch(self, args: Args = None, context_options: Options = None) -> Any:
        return self._call("patch", args, context_options)

    def delete(self, args: Args = None, context_options: Options = None) -> Any:
        return self._call("delete", args, context_options)

    def update(self, args: Args = None, context_options: Options = None) -> Any:
        return self._call("update", args, context_options)

    def listing(self, args: Args = None, context_options: Options = None) -> ListingSlice:
        return self._reddit_request.get_listing(self._build_endpoint("get", args, context_options))

    def _call(self, verb: str, args: Args, context_options: Options) -> Any:
        return self._reddit_request.call_reddit_api(
            self._build_endpoint(verb, args, context_options)
        )

    def _build_endpoint(self, verb: str, args: Args, context_options: Options) -> Endpoint:
        options = ContextOptions.from_mapping(context_options)
        config = self._reddit_request.config
        endpoint = Endpoint(
            hostname=config.server_oauth,
            method=verb,
            path=self.path,
            args=args or {},
            context_options=options,
            port=config.server_oauth_port,
        )
        return self._reddit_request.authorize(endpoint)

    def __repr__(self) -> str:
        return f"PathCalls(path={self.path!r})"
