#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

import json
from typing import Any, Dict, List, Optional

from reddit_cdk.auth import AuthProvider
from reddit_cdk.http.transport import Transport, TransportRequest, TransportResponse


class FakeAuthProvider(AuthProvider):
    """In memory provider handing out `bearer <prefix>-<n>` tokens, n growing on every reauth."""

    def __init__(
        self,
        prefix: str = "user",
        access_token: bool = True,
        can_refresh: bool = True,
        refresh_token: bool = True,
    ) -> None:
        self.prefix = prefix
        self.access_token = access_token
        self.can_refresh = can_refresh
        self.refresh_token = refresh_token
        self.token_version = 0
        self.calls: List[str] = []

    def has_access_token(self) -> bool:
        return self.access_token

    def can_refresh_access_token(self) -> bool:
        return self.can_refresh

    def has_refresh_token(self) -> bool:
        return self.refresh_token

    def refresh(self) -> None:
        self.calls.append("refresh")
        self._new_token()

    def auth(self) -> None:
        self.calls.append("auth")
        self._new_token()

    def application_only_auth(self) -> None:
        self.calls.append("application_only_auth")
        self._new_token()

    def get_authorization_header(self) -> str:
        return f"bearer {self.prefix}-{self.token_version}"

    def _new_token(self) -> None:
        self.access_token = True
        self.token_version += 1


class FakeTransport(Transport):
    """Answers with queued responses and records every request it was given."""

    def __init__(self, responses: Optional[List[TransportResponse]] = None) -> None:
        self.responses = list(responses or [])
        self.requests: List[TransportRequest] = []

    def queue(
        self, status: int = 200, body: Any = None, headers: Optional[Dict[str, str]] = None
    ) -> "FakeTransport":
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        self.responses.append(TransportResponse(status=status, headers=headers or {}, body=body))
        return self

    def send(self, request: TransportRequest) -> TransportResponse:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request {request.method} {request.url}")
        return self.responses.pop(0)


def listing_body(
    children: List[Dict[str, Any]], before: Optional[str] = None, after: Optional[str] = None
) -> Dict[str, Any]:
    return {
        "kind": "Listing",
        "data": {"before": before, "after": after, "children": children},
    }


def link(name: str, stickied: bool = False) -> Dict[str, Any]:
    return {"kind": "t3", "data": {"name": name, "stickied": stickied}}
