# The module is to define the outcome models of an outbound HTTP call.
# Author: API MCP Server contributors
# Date: 2025-06-12
# Version: 0.1.0

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Literal, Union


class Success(BaseModel):
    """
    The upstream service answered. The status code is carried as-is,
    whatever its class.
    """
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["success"] = Field(default="success", exclude=True)
    status: int
    status_text: str = Field(default="", alias="statusText")
    data: Any = None
    headers: Dict[str, str] = Field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        """Returns the JSON-ready body handed back to the MCP client."""
        return self.model_dump(by_alias=True)


class HttpError(Success):
    """
    The upstream service answered with an error status. It is still a valid
    tool result, only flagged with `error: true`.
    """
    kind: Literal["http_error"] = Field(default="http_error", exclude=True)
    error: Literal[True] = True


class Failure(BaseModel):
    """The request could not be completed or was rejected before sending."""
    kind: Literal["failure"] = "failure"
    message: str


Outcome = Union[Success, HttpError, Failure]
