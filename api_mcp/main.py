# The module provides a FastAPI application to inspect the tools over HTTP; the MCP server runs over stdio (api_mcp.server).
# Author: API MCP Server contributors
# Date: 2025-06-11
# Version: 0.2.0

from fastapi import FastAPI
from api_mcp.api.v1.api import api_router
from api_mcp.utils.logger import console

app = FastAPI(
    title="API MCP Server",
    version="0.1.0",
    description="HTTP inspection surface for the tools served over MCP.",
)

@app.get("/", summary="Health Check", tags=["Status"])
def read_root():
    """Root endpoint to check if the service is alive."""
    console.info("Health check endpoint was hit.")
    return {"message": "API MCP Server is alive and running!"}

# Include the v1 router with a global '/v1' prefix
app.include_router(api_router, prefix="/v1")
