import asyncio

import httpx
import pytest

from api_mcp.core.endpoint_registry import endpoint_registry
from api_mcp.core.errors import UpstreamFailure
from api_mcp.services.http_transport import HttpTransport
from api_mcp.tools.headlines_tool import HeadlinesTool, format_headline_table

DESCRIPTOR = endpoint_registry.find("top_news_headlines")
NEWSAPI_URL = "https://newsapi.org/v2/top-headlines"


def _run(settings, fake, arguments, api_key="test-key"):
    tool = HeadlinesTool(HttpTransport(settings, transport=fake.transport), api_key=api_key, url=NEWSAPI_URL)
    return asyncio.run(tool.execute(DESCRIPTOR, arguments))


@pytest.mark.unit
def test_table_format():
    table = format_headline_table([
        {"title": "Markets | Today", "url": "https://news.example/1"},
        {"title": None, "url": None},
    ])
    assert table == (
        "| # | Headline | Link |\n"
        "|---|----------|------|\n"
        "| 1 | Markets - Today | [Link](https://news.example/1) |\n"
        "| 2 |  |  |\n"
    )


@pytest.mark.unit
def test_headlines_payload(settings, upstream):
    articles = [
        {"title": "First", "url": "https://news.example/1"},
        {"title": "Second", "url": "https://news.example/2"},
    ]
    fake = upstream(httpx.Response(200, json={"status": "ok", "totalResults": 2, "articles": articles}))

    result = _run(settings, fake, {"country": "gb"})

    assert result["status"] == 200
    assert result["statusText"] == "OK"
    assert result["country"] == "gb"
    assert result["headlines"] == ["First", "Second"]
    assert "| 2 | Second | [Link](https://news.example/2) |" in result["table"]

    request = fake.requests[0]
    assert request.url.path == "/v2/top-headlines"
    assert request.url.params["country"] == "gb"
    assert request.url.params["apiKey"] == "test-key"


@pytest.mark.unit
def test_country_defaults_to_us(settings, upstream):
    fake = upstream(httpx.Response(200, json={"status": "ok", "articles": []}))

    result = _run(settings, fake, {})

    assert fake.requests[0].url.params["country"] == "us"
    assert result == {"message": 'No news headlines found for country code "us".'}


@pytest.mark.unit
def test_missing_api_key_is_not_sent(settings, upstream):
    fake = upstream(httpx.Response(200, json={"status": "ok", "articles": []}))

    _run(settings, fake, {"country": "us"}, api_key=None)

    assert "apiKey" not in fake.requests[0].url.params


@pytest.mark.unit
def test_upstream_status_error(settings, upstream):
    fake = upstream(httpx.Response(200, json={"status": "error", "message": "bad country"}))

    with pytest.raises(UpstreamFailure) as exc_info:
        _run(settings, fake, {"country": "zz"})
    assert str(exc_info.value) == "Failed to fetch news headlines: bad country"


@pytest.mark.unit
def test_upstream_status_error_without_message(settings, upstream):
    fake = upstream(httpx.Response(200, json={"status": "error"}))

    with pytest.raises(UpstreamFailure, match="Unknown error from NewsAPI"):
        _run(settings, fake, {"country": "us"})


@pytest.mark.unit
def test_http_error_carries_upstream_message(settings, upstream):
    fake = upstream(httpx.Response(401, json={"status": "error", "code": "apiKeyMissing",
                                              "message": "Your API key is missing."}))

    with pytest.raises(UpstreamFailure, match="Your API key is missing."):
        _run(settings, fake, {"country": "us"}, api_key=None)


@pytest.mark.unit
def test_http_error_without_json_body(settings, upstream):
    fake = upstream(httpx.Response(503, text="Service Unavailable"))

    with pytest.raises(UpstreamFailure, match="Request failed with status code 503"):
        _run(settings, fake, {"country": "us"})


@pytest.mark.unit
def test_network_failure(settings, upstream):
    fake = upstream(exc=httpx.ConnectError("name resolution failed"))

    with pytest.raises(UpstreamFailure) as exc_info:
        _run(settings, fake, {"country": "us"})
    assert str(exc_info.value) == "Failed to fetch news headlines: Network error: name resolution failed"


@pytest.mark.unit
@pytest.mark.parametrize("articles", [
    [None],
    [{"title": 42, "url": "https://news.example/1"}],
    [{"title": "Fine", "url": ["https://news.example/1"]}],
    "oops",
    {"title": "not a list"},
])
def test_malformed_articles_are_a_failure(settings, upstream, articles):
    fake = upstream(httpx.Response(200, json={"status": "ok", "articles": articles}))

    with pytest.raises(UpstreamFailure) as exc_info:
        _run(settings, fake, {"country": "us"})
    assert str(exc_info.value) == "Failed to fetch news headlines: Malformed articles in NewsAPI response"
