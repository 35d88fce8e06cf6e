# The module exposes the tool catalog and tool calls over plain HTTP for inspection.
# Author: API MCP Server contributors
# Date: 2025-06-12
# Version: 0.1.0

from functools import lru_cache
from fastapi import APIRouter, Depends, HTTPException
from mcp import types
from mcp.shared.exceptions import McpError
from api_mcp.core.config import get_settings
from api_mcp.core.dispatcher import Dispatcher
from api_mcp.models.api_models import ToolCallRequest, ToolCallResponse, ToolListResponse

router = APIRouter()

@lru_cache
def get_dispatcher() -> Dispatcher:
    return Dispatcher(get_settings())

@router.get("", response_model=ToolListResponse, summary="List Tools")
def list_tools(dispatcher: Dispatcher = Depends(get_dispatcher)):
    """Lists every tool with the same schema served over MCP."""
    return ToolListResponse(tools=dispatcher.describe_tools())

@router.post("/{tool_name}/call", response_model=ToolCallResponse, summary="Call Tool")
async def call_tool(tool_name: str, request: ToolCallRequest,
                    dispatcher: Dispatcher = Depends(get_dispatcher)):
    """
    Calls a tool exactly as tools/call would.
    An unknown tool answers 404, any other protocol error answers 502.
    """
    try:
        result = await dispatcher.invoke(tool_name, request.arguments)
    except McpError as e:
        status_code = 404 if e.error.code == types.METHOD_NOT_FOUND else 502
        raise HTTPException(status_code=status_code, detail=e.error.message)
    return ToolCallResponse(tool=tool_name, result=result)
