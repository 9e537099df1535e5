"""MCP server exposing the README resolver via the official MCP Python SDK.

One tool, ``readme``, returns the README markdown for npm package@version.
Transport defaults to stdio JSON-RPC. If --host/--port are provided via CLI,
we run with streamable HTTP transport instead.
"""

import logging
from typing import Annotated, Any, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from constants import Constants
from cli_config import apply_overrides, load_config
from common.logging_utils import extra_context, is_debug_enabled
from mcp_schemas import README_INPUT, README_PARAMS, README_TOOL_DESCRIPTION, README_TOOL_NAME, param
from mcp_validate import SchemaError, drop_unset, validate_input
from readme.errors import ResolutionError
from readme.resolver import ReadmeResolver

logger = logging.getLogger(__name__)

_NAME = param(README_PARAMS, "name")
_VERSION = param(README_PARAMS, "version")


def readme_tool(name: str, version: Optional[str] = None, resolver: Optional[ReadmeResolver] = None) -> str:
    """Validate tool arguments and resolve the README.

    Raises RuntimeError for invalid input and for resolution failures; the MCP
    layer reports those as error results carrying the message.
    """
    arguments = drop_unset({_NAME.name: name, _VERSION.name: version})
    try:
        validate_input(README_INPUT, arguments)
    except SchemaError as se:
        raise RuntimeError(str(se)) from se

    if is_debug_enabled(logger):
        logger.debug("Tool call", extra=extra_context(
            event="function_entry", component="mcp", action=README_TOOL_NAME,
            target=name
        ))
    try:
        return (resolver or ReadmeResolver()).resolve(name, version)
    except ResolutionError as e:
        logger.warning("README resolution failed: %s", e)
        raise RuntimeError(str(e)) from e


def build_server() -> FastMCP:
    """Create the FastMCP server with the readme tool registered."""
    mcp = FastMCP(Constants.MCP_SERVER_NAME)

    @mcp.tool(name=README_TOOL_NAME, description=README_TOOL_DESCRIPTION)
    def readme(
        name: Annotated[str, Field(description=_NAME.description)],
        version: Annotated[Optional[str], Field(description=_VERSION.description)] = None,
    ) -> str:
        return readme_tool(name, version)

    return mcp


def run_mcp_server(args: Any) -> None:
    """Entry point for the ``mcp`` subcommand."""
    apply_overrides(args, load_config(getattr(args, "CONFIG", None)))
    mcp = build_server()

    host = getattr(args, "MCP_HOST", None)
    port = getattr(args, "MCP_PORT", None)
    if host and port:
        mcp.settings.host = host
        mcp.settings.port = int(port)
        logger.info("%s running on http://%s:%s", Constants.MCP_SERVER_NAME, host, port)
        mcp.run(transport="streamable-http")
    else:
        logger.info("%s running on stdio", Constants.MCP_SERVER_NAME)
        mcp.run()  # defaults to stdio
