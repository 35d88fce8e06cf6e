import asyncio

import httpx
import pytest

from api_mcp.core.config import Settings
from api_mcp.models.outcome import Failure, HttpError, Success
from api_mcp.services.http_transport import HttpTransport


def _execute(settings, upstream, url="https://example.org/items/1", params=None):
    transport = HttpTransport(settings, transport=upstream.transport)
    return asyncio.run(transport.execute(url, params=params))


@pytest.mark.unit
def test_json_response_is_success(settings, upstream):
    fake = upstream(httpx.Response(200, json={"id": 1}, headers={"X-Trace": "abc"}))
    outcome = _execute(settings, fake)

    assert isinstance(outcome, Success)
    assert not isinstance(outcome, HttpError)
    assert outcome.status == 200
    assert outcome.status_text == "OK"
    assert outcome.data == {"id": 1}
    assert outcome.headers["x-trace"] == "abc"
    assert "error" not in outcome.to_payload()


@pytest.mark.unit
def test_request_carries_user_agent(settings, upstream):
    fake = upstream()
    _execute(settings, fake, params={"q": "a b"})

    request = fake.requests[0]
    assert request.method == "GET"
    assert request.headers["User-Agent"] == "MCP-API-Server/1.0"
    assert request.url.path == "/items/1"
    assert request.url.params["q"] == "a b"


@pytest.mark.unit
def test_error_status_is_passed_through(settings, upstream):
    fake = upstream(httpx.Response(404, json={"detail": "nope"}))
    outcome = _execute(settings, fake)

    assert isinstance(outcome, HttpError)
    assert outcome.to_payload() == {
        "status": 404,
        "statusText": "Not Found",
        "data": {"detail": "nope"},
        "headers": outcome.headers,
        "error": True,
    }


@pytest.mark.unit
def test_non_json_body_is_kept_as_text(settings, upstream):
    fake = upstream(httpx.Response(500, text="upstream exploded"))
    outcome = _execute(settings, fake)

    assert isinstance(outcome, HttpError)
    assert outcome.data == "upstream exploded"


@pytest.mark.unit
def test_empty_body_is_empty_text(settings, upstream):
    outcome = _execute(settings, upstream(httpx.Response(204)))

    assert isinstance(outcome, Success)
    assert outcome.data == ""


@pytest.mark.unit
@pytest.mark.parametrize("exc", [
    httpx.ConnectError("connection refused"),
    httpx.ReadTimeout("timed out"),
])
def test_no_response_is_network_error(settings, upstream, exc):
    outcome = _execute(settings, upstream(exc=exc))

    assert isinstance(outcome, Failure)
    assert outcome.message == f"Network error: {exc}"


@pytest.mark.unit
def test_unsendable_request_is_request_error(settings, upstream):
    outcome = _execute(settings, upstream(exc=httpx.LocalProtocolError("illegal header value")))

    assert isinstance(outcome, Failure)
    assert outcome.message == "Request error: illegal header value"


@pytest.mark.unit
def test_timeout_comes_from_settings(settings, upstream):
    fake = upstream()
    _execute(settings.model_copy(update={"REQUEST_TIMEOUT": 2.5}), fake)

    assert fake.requests[0].extensions["timeout"]["read"] == 2.5


@pytest.mark.unit
def test_default_timeout_is_ten_seconds(upstream):
    fake = upstream()
    _execute(Settings(_env_file=None), fake)

    timeout = fake.requests[0].extensions["timeout"]
    assert timeout["read"] == 10.0
    assert timeout["connect"] == 10.0
