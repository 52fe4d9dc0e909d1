from typing import Any, Dict, List, Optional


class AdyenMCPError(Exception):
    """Base exception for the Adyen MCP server."""


class ConfigurationError(AdyenMCPError):
    """Raised when the server configuration is missing or inconsistent."""


class DuplicateToolError(AdyenMCPError):
    """Raised when two tools with the same name are added to a registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tool '{name}' is already registered")


class UnknownToolError(AdyenMCPError, KeyError):
    """Raised when a registry lookup names a tool that does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool '{name}'")

    def __str__(self) -> str:
        return self.args[0]


class ToolValidationError(AdyenMCPError):
    """Raised when raw tool arguments do not satisfy the tool's request model."""

    def __init__(self, tool_name: str, errors: Optional[List[Dict[str, Any]]] = None):
        self.tool_name = tool_name
        self.errors = errors or []
        details = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ())) or '<root>'}: {err.get('msg')}"
            for err in self.errors
        )
        message = f"Invalid arguments for tool '{tool_name}'"
        if details:
            message = f"{message}: {details}"
        super().__init__(message)
