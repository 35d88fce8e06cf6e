# The module defines the handler for the NewsAPI.org top headlines endpoint.
# Author: API MCP Server contributors
# Date: 2025-06-12
# Version: 0.1.1

from typing import Any, Dict, List, Mapping, Optional
from .base_tool import BaseTool
from api_mcp.core.errors import UpstreamFailure
from api_mcp.models.common import EndpointDescriptor, EndpointKind
from api_mcp.models.outcome import Failure, HttpError
from api_mcp.services.http_transport import HttpTransport
from api_mcp.utils.logger import console

# Used when the call carries no country, even though the schema marks it required.
DEFAULT_COUNTRY = "us"

TABLE_HEADER = "| # | Headline | Link |\n|---|----------|------|\n"


def format_headline_table(articles: List[Dict[str, Any]]) -> str:
    """
    Renders articles as a markdown table with rank, title and link columns.
    Pipe characters inside titles are replaced by '-'.
    """
    table = TABLE_HEADER
    for rank, article in enumerate(articles, start=1):
        title = (article.get("title") or "").replace("|", "-")
        link = f"[Link]({article['url']})" if article.get("url") else ""
        table += f"| {rank} | {title} | {link} |\n"
    return table


class HeadlinesTool(BaseTool):
    """
    Fetches top headlines for a country from NewsAPI.org and returns them both
    as a list of titles and as a markdown table.

    The country is sent as a query parameter together with the configured
    API key. A payload whose `status` is not "ok" is treated as a failure
    carrying the upstream message.
    """
    kind: EndpointKind = EndpointKind.HEADLINES

    def __init__(self, transport: HttpTransport, api_key: Optional[str], url: str):
        super().__init__(transport)
        self._api_key = api_key
        self._url = url

    async def execute(self, descriptor: EndpointDescriptor, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        country = arguments.get("country") or DEFAULT_COUNTRY
        params = {"country": country}
        if self._api_key:
            params["apiKey"] = self._api_key
        else:
            console.warning(f"NEWSAPI_KEY is not set; calling '{descriptor.name}' without an API key.")

        console.info(f"[API Call] {descriptor.name}: {self._url}?country={country}")
        outcome = await self._transport.execute(self._url, params=params)

        if isinstance(outcome, Failure):
            raise self._failure(outcome.message)
        if isinstance(outcome, HttpError):
            raise self._failure(self._upstream_message(outcome.data)
                                or f"Request failed with status code {outcome.status}")

        data = outcome.data if isinstance(outcome.data, dict) else {}
        if data.get("status") != "ok":
            raise self._failure(self._upstream_message(data) or "Unknown error from NewsAPI")

        articles = data.get("articles") or []
        if not self._well_formed(articles):
            raise self._failure("Malformed articles in NewsAPI response")
        if not articles:
            console.info(f"No headlines returned for country '{country}'.")
            return {"message": f'No news headlines found for country code "{country}".'}

        console.success(f"Tool '{descriptor.name}' returned {len(articles)} headlines.")
        return {
            "status": outcome.status,
            "statusText": outcome.status_text,
            "country": country,
            "table": format_headline_table(articles),
            "headlines": [article.get("title") for article in articles],
        }

    @staticmethod
    def _well_formed(articles: Any) -> bool:
        """Articles must be a list of objects whose title and url are strings or null."""
        if not isinstance(articles, list):
            return False
        return all(
            isinstance(article, dict)
            and isinstance(article.get("title"), (str, type(None)))
            and isinstance(article.get("url"), (str, type(None)))
            for article in articles
        )

    @staticmethod
    def _upstream_message(data: Any) -> Optional[str]:
        if isinstance(data, dict):
            return data.get("message")
        return None

    @staticmethod
    def _failure(message: str) -> UpstreamFailure:
        return UpstreamFailure(f"Failed to fetch news headlines: {message}")
