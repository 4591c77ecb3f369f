# Copyright (c) 2025 Airbyte, Inc., all rights reserved.
"""Client configuration models."""

from typing import Any, Mapping, Optional

from pydantic.v1 import BaseModel, Field, validator

OAUTH_TYPES = ("explicit", "implicit", "installed", "script", "app_only")

# camelCase keys used by the original javascript client configuration
_CAMEL_CASE_KEYS = {
    "userAgent": "user_agent",
    "isNode": "send_user_agent",
    "serverOAuth": "server_oauth",
    "serverOAuthPort": "server_oauth_port",
    "oauthType": "oauth_type",
    "maxRetries": "max_retries",
    "defaultListingLimit": "default_listing_limit",
}


class ProxySettings(BaseModel):
    """Configuration model for routing reddit API calls through an HTTP proxy."""

    proxy_url: str = Field(
        ...,
        title="Proxy URL",
        description="The URL of the HTTP proxy server used for both http and https calls",
        examples=["http://proxy.example.com:8080"],
    )
    proxy_ca_certificate: Optional[str] = Field(
        None,
        title="Proxy CA Certificate",
        description="Custom CA certificate for the proxy server in PEM format",
    )
    verify_ssl: bool = Field(
        True,
        title="Verify SSL",
        description="Whether TLS certificates are verified when going through the proxy",
    )

    class Config:
        title = "HTTP Proxy Configuration"
        description = "Configuration for routing HTTP requests through a proxy server"


class RedditConfig(BaseModel):
    """Configuration model for a reddit API client."""

    user_agent: str = Field(
        ...,
        title="User Agent",
        description="Value of the User-Agent header identifying this client to reddit",
        examples=["python:my-app:v1.0.0 (by /u/someone)"],
    )
    send_user_agent: bool = Field(
        True,
        title="Send User Agent",
        description="Whether the execution context allows setting the User-Agent header",
    )
    server_oauth: str = Field(
        "oauth.reddit.com",
        title="OAuth Server",
        description="Hostname serving the OAuth protected API",
    )
    server_oauth_port: int = Field(
        443,
        title="OAuth Server Port",
        description="Port of the OAuth protected API",
    )
    oauth_type: str = Field(
        "explicit",
        title="OAuth Type",
        description="OAuth application type the client authenticates as",
    )
    max_retries: int = Field(
        3,
        ge=0,
        title="Max Retries",
        description="Number of times a call is re-issued after a recoverable failure",
    )
    default_listing_limit: int = Field(
        25,
        gt=0,
        title="Default Listing Limit",
        description="Page size assumed for listings when no `limit` argument is given",
    )
    proxy: Optional[ProxySettings] = Field(
        None,
        title="Proxy",
        description="HTTP proxy used by RequestsTransport.from_config",
    )

    class Config:
        title = "Reddit Client Configuration"
        description = "Configuration for calling the reddit API"

    @validator("oauth_type")
    def validate_oauth_type(cls, value: str) -> str:
        if value not in OAUTH_TYPES:
            raise ValueError(f"oauth_type must be one of {', '.join(OAUTH_TYPES)}, got `{value}`")
        return value

    def is_oauth_type(self, name: str) -> bool:
        return self.oauth_type == name

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "RedditConfig":
        """Create a RedditConfig from a plain mapping, accepting snake_case or camelCase keys."""
        values = {}
        for key, value in config.items():
            values[_CAMEL_CASE_KEYS.get(key, key)] = value
        return cls(**values)
