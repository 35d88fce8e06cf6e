# The module is to define the base class for all endpoint handlers.
# Author: API MCP Server contributors
# Date: 2025-06-11
# Version: 0.2.0

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping
from api_mcp.models.common import EndpointDescriptor, EndpointKind
from api_mcp.services.http_transport import HttpTransport


class BaseTool(ABC):
    """
    Abstract Base Class for endpoint handlers.

    One handler exists per endpoint kind. It turns a call against any
    descriptor of that kind into a request, runs it through the shared
    transport and returns the JSON-ready payload for the client.
    Attributes:
        kind (EndpointKind): The endpoint kind this handler serves.
    """
    kind: EndpointKind

    def __init__(self, transport: HttpTransport):
        self._transport = transport

    @abstractmethod
    async def execute(self, descriptor: EndpointDescriptor, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Runs one call. Must be implemented by all subclasses.

        Args:
            descriptor: The endpoint being called.
            arguments: The raw call arguments.

        Returns:
            The payload serialized back to the client.

        Raises:
            ParameterError: If required arguments are missing.
            UpstreamFailure: If no usable response was obtained.
        """
        pass
