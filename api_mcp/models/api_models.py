# The module is to define the API models for the HTTP inspection surface.
# Author: API MCP Server contributors
# Date: 2025-06-11
# Version: 0.2.0

from pydantic import BaseModel, Field
from typing import Any, Dict, List

class ToolCallRequest(BaseModel):
    """
    Defines the request body for the /v1/tools/{name}/call endpoint.
    Attributes:
        arguments (Dict[str, Any]): The tool arguments, as an MCP client would send them.
    """
    arguments: Dict[str, Any] = Field(default_factory=dict, description="The tool arguments.")

class ToolCallResponse(BaseModel):
    """
    Defines the response body for the /v1/tools/{name}/call endpoint.
    Attributes:
        tool (str): The name of the tool that was called.
        result (Any): The decoded payload the MCP client would receive as text.
    """
    tool: str
    result: Any

class ToolListResponse(BaseModel):
    """Defines the response body for the /v1/tools endpoint."""
    tools: List[Dict[str, Any]]
