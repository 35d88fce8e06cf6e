# The module projects endpoint descriptors onto MCP tool descriptions.
# Author: API MCP Server contributors
# Date: 2025-06-12
# Version: 0.1.0

from typing import Any, Dict
from api_mcp.models.common import EndpointDescriptor


def project(descriptor: EndpointDescriptor) -> Dict[str, Any]:
    """
    Returns the tool description of an endpoint: its name, description and an
    object-typed input schema. `required` lists the required parameters in
    declaration order. Pure, never raises.
    """
    properties = {
        param.name: {"type": param.type, "description": param.description}
        for param in descriptor.parameters
    }
    return {
        "name": descriptor.name,
        "description": descriptor.description,
        "inputSchema": {
            "type": "object",
            "properties": properties,
            "required": [param.name for param in descriptor.parameters if param.required],
        },
    }
