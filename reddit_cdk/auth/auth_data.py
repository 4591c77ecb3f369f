#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

from typing import Optional

from pydantic.v1 import BaseModel, Field, ValidationError

from reddit_cdk.decoders import decode_body
from reddit_cdk.exceptions import MalformedResponseError
from reddit_cdk.http.transport import TransportResponse


class AuthData(BaseModel):
    """Token data returned by reddit's `/api/v1/access_token`."""

    access_token: str
    token_type: str = "bearer"
    expires_in: Optional[int] = None
    scope: Optional[str] = None
    refresh_token: Optional[str] = Field(None, description="Only granted to `permanent` sessions")

    @property
    def authorization_header(self) -> str:
        return f"{self.token_type} {self.access_token}"


def parse_auth_data(response: TransportResponse) -> AuthData:
    """
    Parses the answer of a token request, for AuthProvider implementations.

    reddit reports grant failures (bad credentials, used authorization code...) in an `error`
    field, often with a 200 status.

    :raises MalformedResponseError: when the body is not token data or holds an error
    """
    data = decode_body(response.body)
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Failed to get auth data (status {response.status}): {data!r}"
        )
    if data.get("error"):
        raise MalformedResponseError(f"Reddit error while getting auth data: {data['error']}")

    try:
        return AuthData.parse_obj(data)
    except ValidationError as e:
        raise MalformedResponseError(f"Failed to get auth data: {e}") from e
