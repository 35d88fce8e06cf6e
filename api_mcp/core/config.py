# The module is to define the configuration settings for the API MCP server.
# Author: API MCP Server contributors
# Date: 2025-06-11
# Version: 0.2.0

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    """
    The Settings class is used to define the configuration settings for the server.
    It inherits from BaseSettings, which allows it to load environment variables
    and provides type validation for the settings.
    Attributes:
        NEWSAPI_KEY (str): API key for NewsAPI.org, only used by the headline tool.
        NEWSAPI_URL (str): Endpoint queried by the headline tool.
        REQUEST_TIMEOUT (float): Timeout in seconds for every outbound request.
        USER_AGENT (str): User-Agent header sent with every outbound request.
        SERVER_NAME (str): Name announced to MCP clients.
        SERVER_VERSION (str): Version announced to MCP clients.
        LOG_LEVEL (str): Level of the server logger.
    """
    # NEWSAPI
    NEWSAPI_KEY: Optional[str] = None
    NEWSAPI_URL: str = "https://newsapi.org/v2/top-headlines"

    # OUTBOUND HTTP
    REQUEST_TIMEOUT: float = 10.0
    USER_AGENT: str = "MCP-API-Server/1.0"

    # SERVER
    SERVER_NAME: str = "api-mcp-server"
    SERVER_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

# lru_cache to cache the settings instance.
@lru_cache
def get_settings() -> Settings:
    return Settings()
