#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

from unittest.mock import MagicMock

import pytest

from reddit_cdk.exceptions import ListingError, ListingIndexError
from reddit_cdk.models.endpoint import Endpoint
from reddit_cdk.models.listing import (
    CursorState,
    IndexedListings,
    ListingSlice,
    SingleListing,
    child_name,
    classify_listing_result,
    is_stickied,
)

from unit_tests.utils import link, listing_body


class TestCursorState:
    def test_forward_and_backward_move_by_limit(self):
        state = CursorState(count=0, limit=10, start="t3_a")

        assert state.forward().forward().count == 20
        assert state.forward().backward().count == 0
        assert state.count == 0

    def test_rewind_keeps_start(self):
        state = CursorState(count=50, limit=25, start="t3_a").rewind()
        assert state == CursorState(count=0, limit=25, start="t3_a")


@pytest.mark.parametrize(
    "result,expected",
    [
        pytest.param(None, SingleListing(listing={}), id="none"),
        pytest.param("", SingleListing(listing={}), id="empty_string"),
        pytest.param({"data": {}}, SingleListing(listing={"data": {}}), id="mapping"),
        pytest.param([{"data": {}}], IndexedListings(listings=[{"data": {}}]), id="list"),
    ],
)
def test_classify_listing_result(result, expected):
    assert classify_listing_result(result) == expected


def test_classify_listing_result_rejects_text():
    with pytest.raises(ListingError):
        classify_listing_result("not a listing")


def test_indexed_listings_select():
    listings = IndexedListings(listings=[{"a": 1}, {"b": 2}])

    assert listings.select(1) == {"b": 2}
    with pytest.raises(ListingIndexError):
        listings.select(None)
    with pytest.raises(ListingIndexError):
        listings.select(2)


def test_child_helpers():
    assert child_name(link("t3_a")) == "t3_a"
    assert child_name({"kind": "more"}) is None
    assert is_stickied(link("t3_a", stickied=True))
    assert not is_stickied({"data": {}})


def test_slice_partitions_keep_order():
    children = [
        link("t3_1", stickied=True),
        link("t3_2"),
        link("t3_3", stickied=True),
        link("t3_4"),
        link("t3_5"),
    ]
    listing = listing_body(children, before="t3_0", after="t3_5")
    endpoint = Endpoint(hostname="oauth.reddit.com", method="get", path="/r/test/new")

    listing_slice = ListingSlice.from_listing(
        listing, listing, endpoint, CursorState(count=25), cursor=MagicMock()
    )

    assert [child_name(child) for child in listing_slice.children] == ["t3_2", "t3_4", "t3_5"]
    assert [child_name(child) for child in listing_slice.stickied] == ["t3_1", "t3_3"]
    assert sorted(
        listing_slice.children + listing_slice.stickied, key=children.index
    ) == listing_slice.all_children
    assert listing_slice.count == 25
    assert listing_slice.before == "t3_0"
    assert listing_slice.after == "t3_5"


def test_slice_navigation_delegates_to_cursor():
    cursor = MagicMock()
    endpoint = Endpoint(hostname="oauth.reddit.com", method="get", path="/r/test/new")
    listing_slice = ListingSlice.from_listing(
        listing_body([link("t3_a")]), None, endpoint, CursorState(), cursor
    )

    listing_slice.next()
    listing_slice.previous()
    listing_slice.start()
    listing_slice.requery()

    cursor.next.assert_called_once_with(listing_slice)
    cursor.previous.assert_called_once_with(listing_slice)
    cursor.start.assert_called_once_with(listing_slice)
    cursor.requery.assert_called_once_with(listing_slice)
