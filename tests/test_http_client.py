import asyncio

import pytest
from aiohttp import ClientConnectionError
from unittest.mock import MagicMock

from company_search.clients import HttpClient, UpstreamResponse, parse_json_body
from company_search.errors import MalformedUpstreamResponse, SourceUnavailable


def response(text, content_type="application/json", status=200):
    return UpstreamResponse(url="https://registry.test", status=status, content_type=content_type, text=text)


@pytest.fixture
def fresh_client():
    # Reset singleton state
    HttpClient._instance = None
    HttpClient._initialized = False
    yield HttpClient()
    HttpClient._instance = None
    HttpClient._initialized = False


def test_parses_json_array_and_object():
    assert parse_json_body(response('  [{"name": "Acme"}]')) == [{"name": "Acme"}]
    assert parse_json_body(response('\n{"items": []}')) == {"items": []}


def test_rejects_html_content_type_even_if_body_looks_like_json():
    with pytest.raises(MalformedUpstreamResponse):
        parse_json_body(response("[]", content_type="text/html; charset=utf-8"))


def test_rejects_html_body_served_as_json():
    with pytest.raises(MalformedUpstreamResponse):
        parse_json_body(response("   <html><body>Checking your browser</body></html>"))


def test_rejects_empty_and_truncated_bodies():
    with pytest.raises(MalformedUpstreamResponse):
        parse_json_body(response(""))
    with pytest.raises(MalformedUpstreamResponse):
        parse_json_body(response('{"items": [1, 2'))


def test_malformed_response_is_a_source_failure():
    with pytest.raises(SourceUnavailable):
        parse_json_body(response("Service Unavailable", content_type="text/plain"))


def test_client_is_a_singleton(fresh_client):
    assert HttpClient() is fresh_client


@pytest.mark.asyncio
async def test_timeout_becomes_source_unavailable(fresh_client):
    session = MagicMock()
    session.closed = False
    session.request.side_effect = asyncio.TimeoutError()
    fresh_client._session = session

    with pytest.raises(SourceUnavailable) as exc:
        await fresh_client.get("https://registry.test/search", timeout=2.5)

    assert "timed out after 2.5s" in str(exc.value)


@pytest.mark.asyncio
async def test_transport_error_becomes_source_unavailable(fresh_client):
    session = MagicMock()
    session.closed = False
    session.request.side_effect = ClientConnectionError("connection reset")
    fresh_client._session = session

    with pytest.raises(SourceUnavailable) as exc:
        await fresh_client.post("https://registry.test/search", json_body={"q": "x"})

    assert "connection reset" in exc.value.cause
