"""Unit tests for the httpx transport adapter."""

import json

import httpx
import pytest

from marcsync.domain.exceptions import DecodeError, TransportError
from marcsync.infrastructure.http import HttpxTransport


def _make_transport(handler, **kwargs) -> HttpxTransport:
    return HttpxTransport(
        http_client=httpx.Client(transport=httpx.MockTransport(handler)), **kwargs
    )


def test_send_joins_base_url_and_path():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"success": True})

    transport = _make_transport(handler, base_url="https://example.test/")
    response = transport.send("GET", "/v0/collection/users", headers={})

    assert str(seen[0].url) == "https://example.test/v0/collection/users"
    assert response.status_code == 200
    assert json.loads(response.text) == {"success": True}


def test_get_carries_body():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200)

    _make_transport(handler).send(
        "GET", "/v1/entries/users", headers={}, content=b'{"filters":{}}'
    )

    assert seen[0].method == "GET"
    assert seen[0].content == b'{"filters":{}}'


def test_per_call_timeout_overrides_default():
    timeouts: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        timeouts.append(request.extensions["timeout"])
        return httpx.Response(200)

    transport = _make_transport(handler, timeout=30.0)
    transport.send("GET", "/v0/collection/a", headers={})
    transport.send("GET", "/v0/collection/a", headers={}, timeout=2.5)

    assert timeouts[0]["read"] == 30.0
    assert timeouts[1]["read"] == 2.5


def test_non_200_is_returned_not_raised():
    transport = _make_transport(lambda request: httpx.Response(404, text="nope"))

    response = transport.send("GET", "/v0/collection/a", headers={})

    assert response.status_code == 404
    assert response.reason_phrase == "Not Found"


def test_connection_failure_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as exc_info:
        _make_transport(handler).send("GET", "/v0/collection/a", headers={})

    assert isinstance(exc_info.value.cause, httpx.ConnectError)


def test_timeout_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(TransportError):
        _make_transport(handler).send("GET", "/v0/collection/a", headers={})


def test_close_leaves_injected_client_open():
    http_client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    transport = HttpxTransport(http_client=http_client)

    transport.close()

    assert not http_client.is_closed


def test_close_releases_owned_client():
    transport = HttpxTransport()
    owned = transport._get_client()

    transport.close()

    assert owned.is_closed


def test_broken_content_encoding_raises_decode_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"content-encoding": "gzip"}, content=b"not gzip")

    with pytest.raises(DecodeError):
        _make_transport(handler).send("GET", "/v0/collection/a", headers={})


def test_other_request_errors_raise_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.TooManyRedirects("exceeded redirects", request=request)

    with pytest.raises(TransportError):
        _make_transport(handler).send("GET", "/v0/collection/a", headers={})
