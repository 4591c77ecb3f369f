#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

from .endpoint import ContextOptions, Endpoint
from .listing import CursorState, IndexedListings, ListingSlice, SingleListing

__all__ = [
    "ContextOptions",
    "CursorState",
    "Endpoint",
    "IndexedListings",
    "ListingSlice",
    "SingleListing",
]
