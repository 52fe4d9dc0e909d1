# tools package for the Adyen MCP server
# Each resource module exposes `get_tools() -> list[ToolDescriptor]` in declared order.
# `build_registry()` concatenates them, in TOOL_MODULES order, into one ToolRegistry.
import logging
from types import ModuleType
from typing import Iterable

from . import (
    account_holders,
    legal_entities,
    merchant_accounts,
    modifications,
    onboarding_links,
    payment_links,
    payments,
    terminals,
)
from .base import ToolDescriptor, ToolFailure, ToolRequest, ToolResult, ToolSuccess
from .registry import ToolRegistry

logger = logging.getLogger(__name__)

TOOL_MODULES = (
    payment_links,
    modifications,
    payments,
    merchant_accounts,
    terminals,
    legal_entities,
    onboarding_links,
    account_holders,
)


def build_registry(modules: Iterable[ModuleType] = TOOL_MODULES) -> ToolRegistry:
    tools = []
    for module in modules:
        module_tools = module.get_tools()
        logger.info(f"Loaded {len(module_tools)} tools from {module.__name__}")
        tools.extend(module_tools)
    registry = ToolRegistry(tools)
    logger.info(f"Total tools registered: {len(registry)}, tool names: {list(registry.names())}")
    return registry


__all__ = [
    "TOOL_MODULES",
    "ToolDescriptor",
    "ToolFailure",
    "ToolRegistry",
    "ToolRequest",
    "ToolResult",
    "ToolSuccess",
    "build_registry",
]
