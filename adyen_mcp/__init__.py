"""MCP tools for the Adyen payment platform."""

__version__ = "0.1.0"
