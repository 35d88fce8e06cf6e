# The module is to define the API router for the inspection surface.
# Author: API MCP Server contributors
# Date: 2025-06-11
# Version: 0.2.0

from fastapi import APIRouter
from api_mcp.api.v1.endpoints import tools

api_router = APIRouter()

# Include the tools router with a '/tools' prefix
api_router.include_router(tools.router, prefix="/tools", tags=["Tools"])
