#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

import pytest

from reddit_cdk.config import RedditConfig
from reddit_cdk.reddit_request import RedditRequest
from unit_tests.utils import FakeAuthProvider, FakeTransport


@pytest.fixture
def config() -> RedditConfig:
    return RedditConfig(user_agent="python:reddit-cdk-tests:v0.1 (by /u/tester)")


@pytest.fixture
def oauth() -> FakeAuthProvider:
    return FakeAuthProvider(prefix="user")


@pytest.fixture
def oauth_app_only() -> FakeAuthProvider:
    return FakeAuthProvider(prefix="app", can_refresh=False, refresh_token=False)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def reddit(config, transport, oauth, oauth_app_only) -> RedditRequest:
    return RedditRequest(config, transport, oauth, oauth_app_only)
