# The module holds the ordered, read-only registry of endpoint descriptors.
# Author: API MCP Server contributors
# Date: 2025-06-11
# Version: 0.2.0

from typing import Dict, Iterable, Optional, Tuple
from api_mcp.core.endpoints import ENDPOINTS
from api_mcp.core.errors import DuplicateEndpointError
from api_mcp.models.common import EndpointDescriptor
from api_mcp.utils.logger import console

class EndpointRegistry:
    """
    An immutable, ordered catalog of endpoint descriptors.
    """
    def __init__(self, endpoints: Iterable[EndpointDescriptor] = ENDPOINTS):
        self._endpoints: Tuple[EndpointDescriptor, ...] = tuple(endpoints)
        self._by_name: Dict[str, EndpointDescriptor] = {}
        for endpoint in self._endpoints:
            if endpoint.name in self._by_name:
                raise DuplicateEndpointError(f"Endpoint '{endpoint.name}' is declared more than once.")
            self._by_name[endpoint.name] = endpoint
        console.debug(f"Endpoint registry loaded with {len(self._endpoints)} endpoints: {list(self._by_name)}")

    def all(self) -> Tuple[EndpointDescriptor, ...]:
        """Returns every descriptor in declaration order."""
        return self._endpoints

    def find(self, name: str) -> Optional[EndpointDescriptor]:
        """Returns the descriptor with exactly this name, or None."""
        return self._by_name.get(name)

    def __len__(self) -> int:
        return len(self._endpoints)

# Create a singleton instance for global use throughout the application.
endpoint_registry = EndpointRegistry()
