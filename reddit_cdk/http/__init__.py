#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

from .proxy_config import configure_session
from .transport import RequestsTransport, Transport, TransportRequest, TransportResponse

__all__ = [
    "configure_session",
    "RequestsTransport",
    "Transport",
    "TransportRequest",
    "TransportResponse",
]
