# The module is to define the endpoint descriptor models for the server.
# Author: API MCP Server contributors
# Date: 2025-06-11
# Version: 0.2.0

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Tuple

# JSON-schema scalar tags a parameter may declare.
ParameterType = Literal["string", "number", "integer", "boolean"]


class EndpointKind(str, Enum):
    """
    The closed set of ways an endpoint is turned into a request.
    PATH endpoints substitute arguments into the path template and pass the
    response through untouched. HEADLINES is the NewsAPI endpoint whose
    response is reshaped into a headline table.
    """
    PATH = "path"
    HEADLINES = "headlines"


class ParameterSpec(BaseModel):
    """
    Describes one argument accepted by an endpoint.
    Attributes:
        name (str): The argument name, matching a `{name}` placeholder in the path.
        type (ParameterType): The JSON-schema type advertised to clients.
        description (str): Human readable description of the argument.
        required (bool): Whether a call without this argument must be rejected.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The argument name.")
    type: ParameterType = Field(default="string", description="The JSON-schema type of the argument.")
    description: str = Field(default="", description="Human readable description of the argument.")
    required: bool = Field(default=False, description="Whether the argument is mandatory.")


class EndpointDescriptor(BaseModel):
    """
    Static definition of one callable HTTP GET endpoint.
    Attributes:
        name (str): Unique tool name across the registry.
        description (str): Surfaced verbatim in the tool listing.
        base_url (str): Absolute origin, without a trailing slash.
        path (str): Path template with zero or more `{name}` placeholders.
        parameters (Tuple[ParameterSpec, ...]): Ordered parameter specs.
        kind (EndpointKind): Which handler turns a call into a request.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    base_url: str
    path: str
    parameters: Tuple[ParameterSpec, ...] = ()
    kind: EndpointKind = EndpointKind.PATH
