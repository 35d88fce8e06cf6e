# The module defines the handler for endpoints whose arguments are substituted into the URL path.
# Author: API MCP Server contributors
# Date: 2025-06-12
# Version: 0.1.0

from typing import Any, Dict, Mapping
from .base_tool import BaseTool
from api_mcp.core.errors import UpstreamFailure
from api_mcp.core.resolver import resolve
from api_mcp.models.common import EndpointDescriptor, EndpointKind
from api_mcp.models.outcome import Failure
from api_mcp.utils.logger import console


class PathTool(BaseTool):
    """
    Resolves the path template, issues the GET and passes the response
    through untouched, error statuses included.
    """
    kind: EndpointKind = EndpointKind.PATH

    async def execute(self, descriptor: EndpointDescriptor, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        url = resolve(descriptor, arguments)
        console.info(f"[API Call] {descriptor.name}: {url}")

        outcome = await self._transport.execute(url)
        if isinstance(outcome, Failure):
            raise UpstreamFailure(outcome.message)
        return outcome.to_payload()
