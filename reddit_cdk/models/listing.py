#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence, Union

import dpath

from reddit_cdk.exceptions import ListingError, ListingIndexError
from reddit_cdk.models.endpoint import Endpoint

if TYPE_CHECKING:
    from reddit_cdk.listing import ListingCursor


@dataclass(frozen=True)
class CursorState:
    """
    Position in a listing.

    Attributes:
        count: number of items loaded before the current page
        limit: page size, the amount `count` moves by on next/previous
        start: `after` cursor of the very first page, used to come back to it
    """

    count: int = 0
    limit: int = 25
    start: Optional[str] = None

    def forward(self) -> "CursorState":
        return replace(self, count=self.count + self.limit)

    def backward(self) -> "CursorState":
        return replace(self, count=self.count - self.limit)

    def rewind(self) -> "CursorState":
        return replace(self, count=0)


@dataclass(frozen=True)
class SingleListing:
    listing: Mapping[str, Any]


@dataclass(frozen=True)
class IndexedListings:
    """Some endpoints (e.g. comments) answer with several listings."""

    listings: Sequence[Any]

    def select(self, listing_index: Optional[int]) -> Mapping[str, Any]:
        if listing_index is None:
            raise ListingIndexError("Must specify a `listing_index` for this listing.")
        try:
            listing = self.listings[listing_index]
        except IndexError:
            raise ListingIndexError(
                f"`listing_index` {listing_index} is out of range, the response holds "
                f"{len(self.listings)} listings."
            )
        if not isinstance(listing, Mapping):
            raise ListingError(f"Element {listing_index} of the response is not a listing.")
        return listing


ListingResult = Union[SingleListing, IndexedListings]


def classify_listing_result(result: Any) -> ListingResult:
    if result is None or result == "":
        return SingleListing(listing={})
    if isinstance(result, list):
        return IndexedListings(listings=result)
    if isinstance(result, Mapping):
        return SingleListing(listing=result)
    raise ListingError(f"Expected a listing but the response was: {result!r}")


def child_name(child: Mapping[str, Any]) -> Optional[str]:
    return dpath.get(child, ["data", "name"], default=None)


def is_stickied(child: Mapping[str, Any]) -> bool:
    return bool(dpath.get(child, ["data", "stickied"], default=False))


@dataclass(frozen=True)
class ListingSlice:
    """
    One page of a reddit listing.

    `children` and `stickied` split `all_children` in two, both keeping the original order.
    Navigating (`next`, `previous`, `start`, `requery`) calls reddit and returns a new slice;
    a slice never changes once built.
    """

    count: int
    before: Optional[str]
    after: Optional[str]
    all_children: List[Any]
    children: List[Any]
    stickied: List[Any]
    empty: bool
    raw: Any = field(repr=False)
    endpoint: Endpoint = field(repr=False)
    state: CursorState = field(repr=False)
    cursor: "ListingCursor" = field(repr=False, compare=False)

    @classmethod
    def from_listing(
        cls,
        listing: Mapping[str, Any],
        raw: Any,
        endpoint: Endpoint,
        state: CursorState,
        cursor: "ListingCursor",
    ) -> "ListingSlice":
        all_children = list(dpath.get(listing, ["data", "children"], default=None) or [])
        return cls(
            count=state.count,
            before=dpath.get(listing, ["data", "before"], default=None) or None,
            after=dpath.get(listing, ["data", "after"], default=None) or None,
            all_children=all_children,
            children=[child for child in all_children if not is_stickied(child)],
            stickied=[child for child in all_children if is_stickied(child)],
            empty=len(all_children) == 0,
            raw=raw,
            endpoint=endpoint,
            state=state,
            cursor=cursor,
        )

    def next(self) -> "ListingSlice":
        return self.cursor.next(self)

    def previous(self) -> "ListingSlice":
        return self.cursor.previous(self)

    def start(self) -> "ListingSlice":
        return self.cursor.start(self)

    def requery(self) -> "ListingSlice":
        return self.cursor.requery(self)
