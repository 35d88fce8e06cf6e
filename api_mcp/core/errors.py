# The module defines the exceptions raised while resolving and executing tool calls.
# Author: API MCP Server contributors
# Date: 2025-06-12
# Version: 0.1.0

from typing import List, Sequence


class ParameterError(ValueError):
    """Raised when one or more required arguments are missing from a call."""

    def __init__(self, missing: Sequence[str]):
        self.missing: List[str] = list(missing)
        super().__init__(f"Missing required parameters: {', '.join(self.missing)}")


class UpstreamFailure(RuntimeError):
    """Raised when a call produced a Failure outcome instead of a response."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DuplicateEndpointError(ValueError):
    """Raised when two endpoint descriptors share the same name."""
