# The module executes outbound HTTP GET requests and classifies what came back.
# Author: API MCP Server contributors
# Date: 2025-06-12
# Version: 0.1.0

import httpx
from typing import Any, Dict, Optional
from api_mcp.core.config import Settings
from api_mcp.models.outcome import Failure, HttpError, Outcome, Success
from api_mcp.utils.logger import console

# No response was obtained from the remote side.
_NETWORK_ERRORS = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
    httpx.ProxyError,
)


class HttpTransport:
    """
    Sends a single GET request per call with a fixed timeout and user agent.

    The outcome is always returned, never raised:
    - any HTTP response becomes Success, or HttpError for 4xx/5xx;
    - a request that was sent but got no response becomes a
      "Network error: ..." Failure;
    - a request that could not be sent at all becomes a
      "Request error: ..." Failure.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._timeout = settings.REQUEST_TIMEOUT
        self._headers = {"User-Agent": settings.USER_AGENT}
        # Tests inject an httpx.MockTransport here.
        self._transport = transport

    async def execute(self, url: str, params: Optional[Dict[str, Any]] = None) -> Outcome:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                headers=self._headers,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url, params=params)
        except _NETWORK_ERRORS as e:
            console.error(f"Network error while calling {url}: {e}")
            return Failure(message=f"Network error: {e}")
        except (httpx.RequestError, httpx.InvalidURL) as e:
            console.error(f"Request to {url} could not be sent: {e}")
            return Failure(message=f"Request error: {e}")

        fields = dict(
            status=response.status_code,
            status_text=response.reason_phrase,
            data=self._decode_body(response),
            headers=dict(response.headers.items()),
        )
        if response.is_error:
            console.warning(f"Upstream answered {response.status_code} for {url}")
            return HttpError(**fields)
        return Success(**fields)

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        """Returns the JSON-decoded body, or the raw text when it is not JSON."""
        try:
            return response.json()
        except ValueError:
            return response.text
