"""
Tool descriptors, request models and the shared invocation adapter.

Every tool module declares a pydantic request model per operation and an
async handler taking ``(client, request)``. Handlers perform exactly one
Adyen SDK call through `invoke_vendor`, which turns the outcome into a
`ToolSuccess` or a `ToolFailure` and never lets the SDK's exception escape.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional, Type, Union
from urllib.parse import quote

from Adyen import AdyenClient
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from adyen_mcp.utils.response_utils import describe_error, serialize_error

logger = logging.getLogger(__name__)


class ToolRequest(BaseModel):
    """Base class for tool request models.

    Attributes are snake_case in Python and camelCase on the wire, matching
    the Adyen API field names. Validation is strict: "10" is not an integer
    and 1 is not a string.
    """

    model_config = ConfigDict(
        strict=True,
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_params(self, exclude: Iterable[str] = ()) -> Dict[str, Any]:
        """Supplied fields keyed by their Adyen names; absent fields are left out."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude=set(exclude))

    def to_query(self, exclude: Iterable[str] = ()) -> Dict[str, str]:
        """Like to_params, with each value percent-encoded for the query string.

        The SDK joins query parameters into the URL as-is.
        """
        return {key: quote(str(value), safe="") for key, value in self.to_params(exclude).items()}


def amount(currency: str, value: int) -> Dict[str, Any]:
    return {"currency": currency, "value": value}


@dataclass(frozen=True)
class ToolSuccess:
    payload: Any

    ok = True


@dataclass(frozen=True)
class ToolFailure:
    """A failed vendor call: the operation's prefix plus the structured error."""

    prefix: str
    error: Dict[str, Any]

    ok = False

    @property
    def message(self) -> str:
        return self.prefix + serialize_error(self.error)

    def __str__(self) -> str:
        return self.message


ToolResult = Union[ToolSuccess, ToolFailure]

Handler = Callable[[AdyenClient, Any], Awaitable[ToolResult]]


@dataclass(frozen=True)
class ToolDescriptor:
    """Complete definition of a tool."""

    name: str
    description: str
    arguments: Type[ToolRequest]
    invoke: Handler

    def validate(self, raw_args: Optional[Dict[str, Any]]) -> ToolRequest:
        return self.arguments.model_validate(raw_args or {})

    def input_schema(self) -> Dict[str, Any]:
        return self.arguments.model_json_schema(by_alias=True)

    @property
    def display_title(self) -> str:
        return self.name.replace("_", " ").capitalize()


async def invoke_vendor(
    error_prefix: str,
    operation: Callable[..., Any],
    *args: Any,
    confirmation: Optional[str] = None,
    **kwargs: Any,
) -> ToolResult:
    """Run one blocking SDK call in a worker thread and normalize the outcome.

    On success the SDK response is returned unmodified, or `confirmation`
    when the operation is a pure action with no meaningful body. Any
    exception becomes a ToolFailure carrying `error_prefix`.
    """
    try:
        response = await asyncio.to_thread(operation, *args, **kwargs)
    except Exception as e:
        error = describe_error(e)
        logger.warning(f"{error_prefix}{error.get('type')}: {error.get('message')}")
        return ToolFailure(prefix=error_prefix, error=error)
    if confirmation is not None:
        return ToolSuccess(confirmation)
    return ToolSuccess(response)
