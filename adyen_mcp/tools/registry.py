"""
Tool registry.

An ordered, immutable collection of ToolDescriptors. The server builds one
at startup with `build_registry()` and passes it to whatever needs to list
or dispatch tools.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from Adyen import AdyenClient
from pydantic import ValidationError

from adyen_mcp.core.exceptions import DuplicateToolError, ToolValidationError, UnknownToolError
from adyen_mcp.tools.base import ToolDescriptor, ToolRequest, ToolResult

logger = logging.getLogger(__name__)


class ToolRegistry:
    def __init__(self, tools: Iterable[ToolDescriptor]):
        ordered: List[ToolDescriptor] = []
        index: Dict[str, ToolDescriptor] = {}
        for descriptor in tools:
            if descriptor.name in index:
                raise DuplicateToolError(descriptor.name)
            index[descriptor.name] = descriptor
            ordered.append(descriptor)
        self._tools: Tuple[ToolDescriptor, ...] = tuple(ordered)
        self._index = MappingProxyType(index)

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"ToolRegistry({list(self.names())!r})"

    def names(self) -> Tuple[str, ...]:
        return tuple(descriptor.name for descriptor in self._tools)

    def get(self, name: str) -> ToolDescriptor:
        try:
            return self._index[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def validate(self, name: str, raw_args: Optional[Dict[str, Any]]) -> ToolRequest:
        """Validate raw arguments against the named tool's request model."""
        descriptor = self.get(name)
        try:
            return descriptor.validate(raw_args)
        except ValidationError as e:
            raise ToolValidationError(name, e.errors(include_url=False)) from e

    async def dispatch(
        self,
        name: str,
        client: AdyenClient,
        raw_args: Optional[Dict[str, Any]] = None,
    ) -> ToolResult:
        """Validate `raw_args` and invoke the tool.

        Raises ToolValidationError before the tool runs when the arguments do
        not match its schema; vendor failures come back as ToolFailure.
        """
        request = self.validate(name, raw_args)
        logger.info(f"Invoking tool {name}")
        return await self.get(name).invoke(client, request)
