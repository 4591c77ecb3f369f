#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

import pytest
import requests
import requests_mock

from reddit_cdk.exceptions import TransportError
from reddit_cdk.config import ProxySettings, RedditConfig
from reddit_cdk.http.transport import RequestsTransport, TransportResponse
from reddit_cdk.models.endpoint import Endpoint

_URL = "https://oauth.reddit.com/r/python/new"


def _request(method="get", args=None):
    return Endpoint(
        hostname="oauth.reddit.com",
        method=method,
        path="/r/python/new",
        headers={"Authorization": "bearer token", "User-Agent": "tests"},
        args=args or {},
    ).to_request()


def test_get_sends_query_string_and_headers():
    with requests_mock.Mocker() as http_mocker:
        http_mocker.get(_URL, status_code=200, text='{"ok": true}', headers={"X-Ratelimit-Used": "1"})

        response = RequestsTransport().send(_request(args={"limit": 5}))

        assert response.status == 200
        assert response.body == '{"ok": true}'
        assert response.headers["x-ratelimit-used"] == "1"
        assert http_mocker.last_request.qs == {"limit": ["5"]}
        assert http_mocker.last_request.headers["Authorization"] == "bearer token"


def test_post_sends_form_body():
    with requests_mock.Mocker() as http_mocker:
        http_mocker.post(_URL, status_code=200, text="")

        RequestsTransport().send(_request(method="post", args={"text": "hello"}))

        assert http_mocker.last_request.text == "text=hello"


def test_update_verb_is_sent_as_is():
    with requests_mock.Mocker() as http_mocker:
        http_mocker.register_uri("UPDATE", _URL, status_code=200, text="")

        response = RequestsTransport().send(_request(method="update"))

        assert response.status == 200
        assert http_mocker.last_request.method == "UPDATE"


def test_error_statuses_are_returned_not_raised():
    with requests_mock.Mocker() as http_mocker:
        http_mocker.get(_URL, status_code=503, text="busy")

        response = RequestsTransport().send(_request())

        assert response.status == 503
        assert not response.is_success


def test_network_failures_raise_transport_error():
    with requests_mock.Mocker() as http_mocker:
        http_mocker.get(_URL, exc=requests.exceptions.ConnectTimeout)

        with pytest.raises(TransportError) as exc_info:
            RequestsTransport().send(_request())

        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectTimeout)


def test_proxy_is_applied_to_session():
    session = requests.Session()
    RequestsTransport(session=session, proxy=ProxySettings(proxy_url="http://proxy.example.com:8080"))
    assert session.proxies["https"] == "http://proxy.example.com:8080"


def test_from_config_uses_proxy_section():
    session = requests.Session()
    config = RedditConfig(user_agent="tests", proxy={"proxy_url": "http://proxy.example.com:8080"})

    RequestsTransport.from_config(config, session=session)

    assert session.proxies == {
        "http": "http://proxy.example.com:8080",
        "https": "http://proxy.example.com:8080",
    }


def test_from_config_without_proxy_leaves_session_untouched():
    session = requests.Session()
    RequestsTransport.from_config(RedditConfig(user_agent="tests"), session=session)
    assert session.proxies == {}


def test_boolean_args_are_sent_lower_case():
    with requests_mock.Mocker() as http_mocker:
        http_mocker.get(_URL, status_code=200, text="{}")

        RequestsTransport().send(_request(args={"raw_json": True, "show": False}))

        assert http_mocker.last_request.url == f"{_URL}?raw_json=true&show=false"


def test_transport_response_headers_are_case_insensitive():
    response = TransportResponse(status=401, headers={"WWW-Authenticate": "Bearer"})
    assert response.headers["www-authenticate"] == "Bearer"
