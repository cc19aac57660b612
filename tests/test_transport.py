import asyncio
import json
import pytest
import respx
import httpx

from linkview.core import config
from linkview.services.transport.client import (
    Failure,
    MalformedResponse,
    Success,
    Transport,
    parse_websites,
)

URL = "http://crawler.test:8008/LIVE"


@respx.mock
def test_send_posts_option_and_website():
    route = respx.post(URL).mock(
        return_value=httpx.Response(
            200, json={"websites": {"http://a.com": True, "http://b.com": False}}
        )
    )
    outcome = asyncio.run(Transport(URL).send("RetrieveURLs", "http://site.test"))

    assert isinstance(outcome, Success)
    assert list(outcome.links.items()) == [("http://a.com", True), ("http://b.com", False)]
    sent = json.loads(route.calls.last.request.content)
    assert sent == {"option": "RetrieveURLs", "website": "http://site.test"}


@respx.mock
def test_repeated_keys_keep_first_position_and_last_flag():
    respx.post(URL).mock(
        return_value=httpx.Response(
            200, text='{"websites": {"http://a.com": true, "http://b.com": false, "http://a.com": false}}'
        )
    )
    outcome = asyncio.run(Transport(URL).send("RetrieveURLs", "http://site.test"))
    assert list(outcome.links) == ["http://a.com", "http://b.com"]
    assert outcome.links["http://a.com"] is False


@respx.mock
def test_server_error_is_failure():
    respx.post(URL).mock(return_value=httpx.Response(500))
    outcome = asyncio.run(Transport(URL).send("RetrieveURLs", "http://site.test"))
    assert isinstance(outcome, Failure)
    assert "500" in outcome.reason


@respx.mock
def test_network_error_is_failure():
    respx.post(URL).mock(side_effect=httpx.ConnectError("connection refused"))
    outcome = asyncio.run(Transport(URL).send("RetrieveURLs", "http://site.test"))
    assert isinstance(outcome, Failure)
    assert "Could not reach" in outcome.reason


def test_invalid_endpoint_is_failure(monkeypatch):
    monkeypatch.setenv("LINKVIEW_PORT", "abc")
    outcome = asyncio.run(Transport().send("RetrieveURLs", "http://site.test"))
    assert isinstance(outcome, Failure)
    assert "Could not reach http://localhost:abc/LIVE" in outcome.reason


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        "[1, 2]",
        '{"links": {}}',
        '{"websites": null}',
        '{"websites": ["http://a.com"]}',
        '{"websites": {"http://a.com": "yes"}}',
    ],
)
def test_malformed_bodies(body):
    with pytest.raises(MalformedResponse):
        parse_websites(body)


@respx.mock
def test_malformed_response_is_failure():
    respx.post(URL).mock(return_value=httpx.Response(200, json={"websites": None}))
    outcome = asyncio.run(Transport(URL).send("RetrieveURLs", ""))
    assert isinstance(outcome, Failure)
    assert "websites" in outcome.reason


def test_endpoint_from_settings(monkeypatch):
    monkeypatch.setenv("LINKVIEW_HOST", "crawler.internal")
    monkeypatch.setenv("LINKVIEW_PORT", "9000")
    monkeypatch.setenv("LINKVIEW_PATH", "links")
    assert Transport().endpoint == "http://crawler.internal:9000/links"

    monkeypatch.setenv("LINKVIEW_ENDPOINT", "https://other.test/LIVE")
    assert config.endpoint() == "https://other.test/LIVE"


def test_default_endpoint():
    assert config.endpoint() == "http://localhost:8008/LIVE"


def test_log_level(monkeypatch):
    assert config.log_level() == "INFO"
    monkeypatch.setenv("DEBUG", "true")
    assert config.log_level() == "DEBUG"


def test_bare_env_entries_fall_back_to_defaults(monkeypatch):
    monkeypatch.setattr(
        config,
        "ENV",
        {"LINKVIEW_PATH": None, "LINKVIEW_HOST": None, "LINKVIEW_LOG_LEVEL": None, "DEBUG": None},
    )
    assert config.endpoint() == "http://localhost:8008/LIVE"
    assert config.log_level() == "INFO"


def test_get_logger_is_namespaced():
    from linkview.core import logging as log

    assert log.get_logger().name == "linkview"
    assert log.get_logger("linkview.transport").name == "linkview.transport"
