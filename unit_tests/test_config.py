# Copyright (c) 2025 Airbyte, Inc., all rights reserved.

import pytest
from pydantic.v1 import ValidationError

from reddit_cdk.config import ProxySettings, RedditConfig


class TestRedditConfig:
    def test_defaults(self):
        config = RedditConfig(user_agent="tests")

        assert config.send_user_agent
        assert config.server_oauth == "oauth.reddit.com"
        assert config.server_oauth_port == 443
        assert config.oauth_type == "explicit"
        assert config.max_retries == 3
        assert config.default_listing_limit == 25
        assert config.proxy is None

    def test_missing_user_agent(self):
        with pytest.raises(ValidationError) as exc_info:
            RedditConfig()

        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == ("user_agent",)

    def test_invalid_oauth_type(self):
        with pytest.raises(ValidationError):
            RedditConfig(user_agent="tests", oauth_type="password")

    def test_negative_max_retries(self):
        with pytest.raises(ValidationError):
            RedditConfig(user_agent="tests", max_retries=-1)

    @pytest.mark.parametrize(
        "oauth_type,name,expected",
        [
            pytest.param("script", "script", True, id="same_type"),
            pytest.param("explicit", "script", False, id="other_type"),
        ],
    )
    def test_is_oauth_type(self, oauth_type, name, expected):
        assert RedditConfig(user_agent="tests", oauth_type=oauth_type).is_oauth_type(name) is expected

    def test_from_config_accepts_camel_case_keys(self):
        config = RedditConfig.from_config(
            {
                "userAgent": "tests",
                "isNode": False,
                "serverOAuth": "oauth.example.com",
                "serverOAuthPort": 8443,
                "oauthType": "script",
                "max_retries": 5,
            }
        )

        assert config == RedditConfig(
            user_agent="tests",
            send_user_agent=False,
            server_oauth="oauth.example.com",
            server_oauth_port=8443,
            oauth_type="script",
            max_retries=5,
        )

    def test_from_config_parses_proxy_section(self):
        config = RedditConfig.from_config(
            {"userAgent": "tests", "proxy": {"proxy_url": "http://proxy.example.com:8080"}}
        )

        assert config.proxy == ProxySettings(proxy_url="http://proxy.example.com:8080")
        assert config.proxy.verify_ssl

    def test_proxy_section_requires_url(self):
        with pytest.raises(ValidationError) as exc_info:
            RedditConfig(user_agent="tests", proxy={"verify_ssl": False})

        assert exc_info.value.errors()[0]["loc"] == ("proxy", "proxy_url")
