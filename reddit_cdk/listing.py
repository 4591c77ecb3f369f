#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

import logging
from typing import TYPE_CHECKING, Any, Mapping, MutableMapping, Optional

from reddit_cdk.exceptions import ListingNavigationError
from reddit_cdk.models.endpoint import Endpoint
from reddit_cdk.models.listing import (
    CursorState,
    IndexedListings,
    ListingSlice,
    child_name,
    classify_listing_result,
)

if TYPE_CHECKING:
    from reddit_cdk.reddit_request import RedditRequest

logger = logging.getLogger("reddit_cdk.listing")


class ListingCursor:
    """
    Pages through a reddit listing.

    Each page is fetched through `RedditRequest.call_reddit_api` so retries and reauthentication
    apply to every page. The position in the listing travels with each slice as a CursorState.
    """

    def __init__(self, reddit_request: "RedditRequest", default_limit: int = 25) -> None:
        self._reddit_request = reddit_request
        self._default_limit = default_limit

    def get_listing(self, endpoint: Endpoint) -> ListingSlice:
        state = CursorState(
            count=0,
            limit=self._get_limit(endpoint.args),
            start=endpoint.args.get("after") or None,
        )
        return self.get_slice(endpoint, state)

    def get_slice(self, endpoint: Endpoint, state: CursorState) -> ListingSlice:
        result = self._reddit_request.call_reddit_api(endpoint)
        if not result:
            result = {}

        classified = classify_listing_result(result)
        if isinstance(classified, IndexedListings):
            listing = classified.select(endpoint.context_options.listing_index)
        else:
            listing = classified.listing

        listing_slice = ListingSlice.from_listing(listing, result, endpoint, state, self)
        logger.debug(
            "Fetched %s children (%s stickied) from %s at count %s",
            len(listing_slice.all_children),
            len(listing_slice.stickied),
            endpoint.path,
            state.count,
        )
        return listing_slice

    def next(self, current: ListingSlice) -> ListingSlice:
        if not current.children:
            raise ListingNavigationError(
                "Can not get the next page of a listing slice without non stickied children."
            )
        state = current.state.forward()
        args = self._navigation_args(
            current.endpoint,
            state,
            before=None,
            after=child_name(current.children[-1]),
        )
        return self.get_slice(self._rebuild(current.endpoint, args), state)

    def previous(self, current: ListingSlice) -> ListingSlice:
        if not current.children:
            raise ListingNavigationError(
                "Can not get the previous page of a listing slice without non stickied children."
            )
        state = current.state.backward()
        args = self._navigation_args(
            current.endpoint,
            state,
            before=child_name(current.children[0]),
            after=None,
        )
        return self.get_slice(self._rebuild(current.endpoint, args), state)

    def start(self, current: ListingSlice) -> ListingSlice:
        state = current.state.rewind()
        args = self._navigation_args(current.endpoint, state, before=None, after=state.start)
        return self.get_slice(self._rebuild(current.endpoint, args), state)

    def requery(self, current: ListingSlice) -> ListingSlice:
        return self.get_slice(current.endpoint, current.state)

    def _rebuild(self, endpoint: Endpoint, args: Mapping[str, Any]) -> Endpoint:
        return self._reddit_request.authorize(endpoint.with_args(args))

    @staticmethod
    def _navigation_args(
        endpoint: Endpoint, state: CursorState, before: Optional[str], after: Optional[str]
    ) -> MutableMapping[str, Any]:
        args = dict(endpoint.args)
        args["before"] = before
        args["after"] = after
        args["count"] = state.count
        return args

    def _get_limit(self, args: Mapping[str, Any]) -> int:
        limit = args.get("limit")
        if not limit:
            return self._default_limit
        return int(limit)
