"""MCP server exposing the presentation tools over stdio."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from presento_mcp import __version__
from presento_mcp.core.errors import ProtocolError

if TYPE_CHECKING:
    from presento_mcp.config.schema import PresentoConfig
    from presento_mcp.tools.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


def _get_tools(dispatcher: Dispatcher) -> list[Tool]:
    """Render the catalog as MCP tool descriptors."""
    return [
        Tool(
            name=d.name,
            description=d.description,
            inputSchema=d.input_schema,
        )
        for d in dispatcher.list_definitions()
    ]


async def call_tool(
    dispatcher: Dispatcher, name: str, arguments: dict[str, Any] | None
) -> list[TextContent]:
    """Dispatch a tool call, raising ``McpError`` on any failure."""
    try:
        result = await dispatcher.dispatch(name, arguments or {})
    except ProtocolError as e:
        raise e.to_mcp() from e
    return list(result.content)


def create_server(
    dispatcher: Dispatcher,
    *,
    name: str = "darbot-presento",
    version: str = __version__,
) -> Server:
    """Build an MCP server wired to *dispatcher*.

    ``tools/call`` is registered as a raw request handler so that a
    ``ProtocolError`` reaches the client as a JSON-RPC error object
    rather than as a result flagged ``isError``.
    """
    server: Server = Server(name, version=version)

    @server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
    async def list_tools() -> list[Tool]:
        """List available MCP tools."""
        return _get_tools(dispatcher)

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        content = await call_tool(dispatcher, req.params.name, req.params.arguments)
        return types.ServerResult(types.CallToolResult(content=content, isError=False))

    server.request_handlers[types.CallToolRequest] = handle_call_tool
    return server


async def run_server(config: PresentoConfig) -> None:
    """Start the MCP server on stdio and serve until the client disconnects."""
    from presento_mcp.backend.client import BackendClient
    from presento_mcp.tools.dispatcher import Dispatcher

    async with BackendClient.from_config(config) as client:
        dispatcher = Dispatcher.for_backend(client)
        server = create_server(
            dispatcher,
            name=config.server.name,
            version=config.server.version,
        )
        logger.info("%s MCP server started", config.server.name)
        logger.info("API base URL: %s", client.base_url)
        logger.info(
            "Available tools: %s",
            ", ".join(d.name for d in dispatcher.list_definitions()),
        )
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
