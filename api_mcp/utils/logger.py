# This file is part of the API MCP server for logging and console management.
# Author: API MCP Server contributors
# Date: 2025-06-11
# Version: 0.2.0

import logging
from rich.logging import RichHandler
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

# Define a custom logging level for success messages
SUCCESS_LEVEL_NUM = 25

logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

def success_log(self, message, *args, **kwargs):
    if self.isEnabledFor(SUCCESS_LEVEL_NUM):
        self._log(SUCCESS_LEVEL_NUM, message, args, **kwargs)

# Register the custom success method to the logging.Logger class
if not hasattr(logging.Logger, 'success'):
    setattr(logging.Logger, 'success', success_log)

class ConsoleManager:
    """
    A singleton class that manages the diagnostic output of the server.
    It uses Rich for logging and console output. Everything goes to stderr,
    stdout is reserved for the MCP stdio stream.
    """
    def __init__(self, level: str = "INFO"):
        custom_theme = Theme({
            "logging.level.success": "bold green"
        })
        self._console = Console(theme=custom_theme, stderr=True)
        self._logger = self._setup_logger(level)

    def _setup_logger(self, level: str) -> logging.Logger:
        logger = logging.getLogger("API-MCP-Server")
        if logger.hasHandlers():
            # If logger is already configured, don't add handlers again
            return logger

        logger.setLevel(level)
        handler = RichHandler(
            console=self._console,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            keywords=["INFO", "SUCCESS", "WARNING", "ERROR", "DEBUG", "CRITICAL"],
            show_path=False
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        return logger

    def set_level(self, level: str):
        self._logger.setLevel(level)

    # Define logging methods
    def debug(self, message: str):
        self._logger.debug(message)

    def info(self, message: str):
        self._logger.info(message)

    def success(self, message: str):
        self._logger.success(message)

    def warning(self, message: str):
        self._logger.warning(message)

    def error(self, message: str):
        self._logger.error(message)

    def exception(self, message: str):
        self._logger.exception(message)

    # Define higher-level console methods
    def rule(self, title: str, style: str = "cyan"):
        self._console.rule(f"[bold {style}]{title}[/bold {style}]", style=style)

    def display_tools_table(self, tools: list, title: str):
        """Prints one row per tool with its name and required arguments."""
        table = Table(show_header=True, header_style="bold magenta", box=None, show_edge=False)
        table.add_column("Tool", style="cyan", no_wrap=True)
        table.add_column("Required", style="white")

        for tool in tools:
            required = tool["inputSchema"].get("required", [])
            table.add_row(tool["name"], ", ".join(required) or "-")

        panel = Panel(table, title=f"[bold green]✓ {title}[/bold green]", border_style="green")
        self._console.print(panel)

# Create a singleton instance for global use
console = ConsoleManager()
