#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

import html
from typing import Any, Optional

import orjson


def decode_body(body: Optional[str], decode_html_entities: bool = False) -> Any:
    """
    Decodes a raw response body.

    HTML entities are decoded first when asked. The result is then parsed as JSON; a body that is
    not JSON (empty, plain text...) is returned as is.
    """
    data = body or ""
    if decode_html_entities:
        data = html.unescape(data)

    # orjson rejects integers beyond 64 bits, such a body is returned as a string
    try:
        return orjson.loads(data)
    except orjson.JSONDecodeError:
        return data
