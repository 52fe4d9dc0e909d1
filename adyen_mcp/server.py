"""MCP server exposing the Adyen tool registry.

Run with `adyen-mcp` (or `python -m adyen_mcp`). The API key is read from
ADYEN_API_KEY, which may live in a .env file in the working directory.
"""
import argparse
import inspect
import logging
import sys
from types import UnionType
from typing import Annotated, Any, Dict, List, Optional, Type, Union, get_args, get_origin

from Adyen import AdyenClient
from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Strict

from adyen_mcp.core.client import build_client
from adyen_mcp.core.config import ENVIRONMENTS, load_config, validate_config
from adyen_mcp.core.exceptions import ConfigurationError, ToolValidationError
from adyen_mcp.core.logging_config import setup_logging
from adyen_mcp.tools import ToolDescriptor, ToolFailure, ToolRegistry, ToolRequest, build_registry
from adyen_mcp.utils.response_utils import to_payload

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "sse", "streamable-http")
DEFAULT_SERVER_NAME = "adyen"


def strict_annotation(annotation: Any) -> Any:
    """Mark primitive types strict, including inside Optional[...]."""
    if get_origin(annotation) in (Union, UnionType):
        return Union[tuple(strict_annotation(arg) for arg in get_args(annotation))]
    if annotation in (str, int, float, bool):
        return Annotated[annotation, Strict()]
    return annotation


def signature_for(model: Type[ToolRequest]) -> inspect.Signature:
    """Keyword-only signature mirroring the request model, using its wire names.

    FastMCP builds its own argument model from this signature, so the
    annotations are strict too: "100" must not become 100 before the
    request model sees it.
    """
    params: List[inspect.Parameter] = []
    for field_name, field in model.model_fields.items():
        params.append(
            inspect.Parameter(
                field.alias or field_name,
                inspect.Parameter.KEYWORD_ONLY,
                default=inspect.Parameter.empty if field.is_required() else None,
                annotation=strict_annotation(field.annotation),
            )
        )
    return inspect.Signature(parameters=params)


def make_tool_handler(descriptor: ToolDescriptor, registry: ToolRegistry, client: AdyenClient):
    """Wrap a descriptor as a FastMCP tool function.

    Failures are raised as ToolError so the MCP response carries isError
    instead of an error string that looks like a result.
    """

    async def _handler(**call_kwargs: Any) -> Any:
        # FastMCP passes every declared parameter; None means the caller left it out
        raw_args: Dict[str, Any] = {k: v for k, v in call_kwargs.items() if v is not None}
        try:
            result = await registry.dispatch(descriptor.name, client, raw_args)
        except ToolValidationError as e:
            raise ToolError(str(e)) from e
        if isinstance(result, ToolFailure):
            raise ToolError(result.message)
        return to_payload(result.payload)

    _handler.__name__ = descriptor.name
    _handler.__qualname__ = descriptor.name
    _handler.__doc__ = descriptor.description
    _handler.__signature__ = signature_for(descriptor.arguments)
    return _handler


def create_server(
    registry: ToolRegistry,
    client: AdyenClient,
    name: str = DEFAULT_SERVER_NAME,
    instructions: Optional[str] = None,
) -> FastMCP:
    mcp = FastMCP(name, instructions=instructions)
    for descriptor in registry:
        mcp.add_tool(
            make_tool_handler(descriptor, registry, client),
            name=descriptor.name,
            title=descriptor.display_title,
            description=descriptor.description,
        )
        logger.info(f"Added tool via add_tool: {descriptor.name} (title={descriptor.display_title})")
    logger.info(f"MCP server '{name}' created with {len(registry)} tools")
    return mcp


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="adyen-mcp", description="MCP server exposing Adyen API tools")
    p.add_argument("--config", help="Path to a config.yaml (default: $ADYEN_MCP_CONFIG or the bundled config)")
    p.add_argument("--env", choices=ENVIRONMENTS, help="Adyen environment, overrides adyen.environment")
    p.add_argument("--live-prefix", help="Live endpoint prefix, required with --env live")
    p.add_argument("--transport", choices=TRANSPORTS, help="MCP transport, overrides server.transport")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    args = parse_args(argv)

    try:
        config = load_config(args.config, validate=False)
        if args.env:
            config["adyen"]["environment"] = args.env
        if args.live_prefix:
            config["adyen"]["live_endpoint_prefix"] = args.live_prefix
        validate_config(config)
    except ConfigurationError as e:
        sys.exit(f"Error: {e}")

    log_cfg = config["logging"]
    setup_logging(
        logs_dir=log_cfg.get("dir") or None,
        log_file_name=log_cfg.get("file_name") or "server.log",
        level=log_cfg.get("level") or "INFO",
    )
    logger.info("MCP server bootstrap starting.")

    ###################################################### Adyen client ######################################################

    try:
        client = build_client(config["adyen"])
    except ConfigurationError as e:
        sys.exit(f"Error: {e}")

    ###################################################### MCP Tools ######################################################

    registry = build_registry()
    server_cfg = config["server"]
    mcp = create_server(registry, client, name=server_cfg.get("name") or DEFAULT_SERVER_NAME)

    ###################################################### Startup ######################################################

    transport = args.transport or server_cfg.get("transport") or "stdio"
    if transport not in TRANSPORTS:
        sys.exit(f"Error: server.transport must be one of {', '.join(TRANSPORTS)}, got '{transport}'")
    logger.info(f"Starting MCP server on {transport}...")
    try:
        mcp.run(transport=transport)
        logger.info("MCP server shut down.")
    except Exception:
        logger.exception("Unhandled exception running MCP server")
        print("Unhandled exception occurred. See the server log for details.", file=sys.stderr)
        sys.exit(-1)


if __name__ == "__main__":
    main()
