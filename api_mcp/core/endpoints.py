# The module holds the static catalog of HTTP endpoints exposed as tools.
# Author: API MCP Server contributors
# Date: 2025-06-11
# Version: 0.2.0

from api_mcp.models.common import EndpointDescriptor, EndpointKind, ParameterSpec

JSONPLACEHOLDER_URL = "https://jsonplaceholder.typicode.com"
HTTPBIN_URL = "https://httpbin.org"
NEWSAPI_URL = "https://newsapi.org"

ENDPOINTS = (
    EndpointDescriptor(
        name="jsonplaceholder_user",
        description="Get user information from JSONPlaceholder",
        base_url=JSONPLACEHOLDER_URL,
        path="/users/{id}",
        parameters=(
            ParameterSpec(name="id", type="string", description="User ID", required=True),
        ),
    ),
    EndpointDescriptor(
        name="jsonplaceholder_post",
        description="Get post information from JSONPlaceholder",
        base_url=JSONPLACEHOLDER_URL,
        path="/posts/{id}",
        parameters=(
            ParameterSpec(name="id", type="string", description="Post ID", required=True),
        ),
    ),
    EndpointDescriptor(
        name="httpbin_uuid",
        description="Get UUID from httpbin",
        base_url=HTTPBIN_URL,
        path="/uuid",
    ),
    EndpointDescriptor(
        name="httpbin_status",
        description="Get specific HTTP status from httpbin",
        base_url=HTTPBIN_URL,
        path="/status/{code}",
        parameters=(
            ParameterSpec(
                name="code",
                type="string",
                description="HTTP status code (e.g., 200, 404, 500)",
                required=True,
            ),
        ),
    ),
    EndpointDescriptor(
        name="httpbin_delay",
        description="Get response after delay from httpbin",
        base_url=HTTPBIN_URL,
        path="/delay/{seconds}",
        parameters=(
            ParameterSpec(
                name="seconds",
                type="string",
                description="Number of seconds to delay (1-10)",
                required=True,
            ),
        ),
    ),
    # `country` is sent as a query parameter, not substituted into the path.
    EndpointDescriptor(
        name="top_news_headlines",
        description="Get top 10 news headlines from NewsAPI.org",
        base_url=NEWSAPI_URL,
        path="/v2/top-headlines",
        parameters=(
            ParameterSpec(
                name="country",
                type="string",
                description="Country code (e.g., us, gb, in)",
                required=True,
            ),
        ),
        kind=EndpointKind.HEADLINES,
    ),
)
