# The module routes MCP tool calls to endpoint handlers and maps failures onto protocol errors.
# Author: API MCP Server contributors
# Date: 2025-06-12
# Version: 0.1.0

import json
from typing import Any, Dict, List, Mapping, Optional
import httpx
from mcp import types
from mcp.shared.exceptions import McpError
from api_mcp.core.config import Settings
from api_mcp.core.endpoint_registry import EndpointRegistry, endpoint_registry
from api_mcp.core.errors import ParameterError, UpstreamFailure
from api_mcp.core.schema import project
from api_mcp.models.common import EndpointKind
from api_mcp.services.http_transport import HttpTransport
from api_mcp.tools.base_tool import BaseTool
from api_mcp.tools.headlines_tool import HeadlinesTool
from api_mcp.tools.path_tool import PathTool
from api_mcp.utils.logger import console


class Dispatcher:
    """
    The single entry point used by the protocol layer.

    Holds one handler per endpoint kind. Every call looks the endpoint up in
    the registry and hands it to the handler of its kind. No state survives
    a call.
    """

    def __init__(self, settings: Settings,
                 registry: EndpointRegistry = endpoint_registry,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self._registry = registry
        http = HttpTransport(settings, transport=transport)
        self._handlers: Dict[EndpointKind, BaseTool] = {
            EndpointKind.PATH: PathTool(http),
            EndpointKind.HEADLINES: HeadlinesTool(http, api_key=settings.NEWSAPI_KEY, url=settings.NEWSAPI_URL),
        }

    def describe_tools(self) -> List[Dict[str, Any]]:
        """Returns the plain tool descriptions in registry order."""
        return [project(descriptor) for descriptor in self._registry.all()]

    def list_tools(self) -> List[types.Tool]:
        return [types.Tool(**description) for description in self.describe_tools()]

    async def invoke(self, name: str, arguments: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Runs a tool and returns its JSON-ready payload.

        Raises:
            McpError: METHOD_NOT_FOUND for an unknown tool, INTERNAL_ERROR for
                missing arguments or a call that produced no usable response.
                Upstream 4xx/5xx responses are returned, not raised.
        """
        descriptor = self._registry.find(name)
        if descriptor is None:
            console.error(f"Attempted to call unknown tool: {name}")
            raise McpError(types.ErrorData(code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

        handler = self._handlers[descriptor.kind]
        try:
            return await handler.execute(descriptor, arguments or {})
        except (ParameterError, UpstreamFailure) as e:
            console.error(f"Tool '{name}' failed: {e}")
            raise McpError(types.ErrorData(code=types.INTERNAL_ERROR, message=f"API call failed: {e}")) from e

    async def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]]) -> List[types.TextContent]:
        payload = await self.invoke(name, arguments)
        return [types.TextContent(type="text", text=json.dumps(payload, indent=2, ensure_ascii=False))]
