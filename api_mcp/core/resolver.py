# The module turns a descriptor plus call arguments into a concrete URL.
# Author: API MCP Server contributors
# Date: 2025-06-12
# Version: 0.1.0

from urllib.parse import quote
from typing import Any, Mapping
from api_mcp.core.errors import ParameterError
from api_mcp.models.common import EndpointDescriptor

# Characters left unescaped, matching JavaScript's encodeURIComponent.
_SAFE_CHARS = "!*'()"


def is_present(value: Any) -> bool:
    """
    A value counts as provided unless it is None or an empty string.
    0 and False are provided values.
    """
    if value is None:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


def to_path_segment(value: Any) -> str:
    """Returns the percent-encoded string form of an argument value."""
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    return quote(text, safe=_SAFE_CHARS)


def resolve(descriptor: EndpointDescriptor, arguments: Mapping[str, Any]) -> str:
    """
    Builds the request URL for a PATH endpoint.

    Every provided argument replaces the first `{name}` placeholder of its
    parameter. Placeholders of absent optional parameters are left as they
    are. Arguments that match no parameter are ignored.

    Raises:
        ParameterError: If any required parameter has no provided value. All
            missing names are reported together.
    """
    path = descriptor.path
    for param in descriptor.parameters:
        value = arguments.get(param.name)
        if is_present(value):
            path = path.replace(f"{{{param.name}}}", to_path_segment(value), 1)

    missing = [
        param.name
        for param in descriptor.parameters
        if param.required and not is_present(arguments.get(param.name))
    ]
    if missing:
        raise ParameterError(missing)

    return f"{descriptor.base_url}{path}"
