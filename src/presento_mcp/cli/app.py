"""Main CLI application.

Click commands for presento-mcp: serve, tools, call.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import TYPE_CHECKING, Any

import click

from presento_mcp import __version__
from presento_mcp.config.loader import load_config
from presento_mcp.core.errors import ConfigError, ProtocolError

if TYPE_CHECKING:
    from presento_mcp.config.schema import LoggingConfig, PresentoConfig
    from presento_mcp.tools.base import ToolResult

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ── Helpers ──────────────────────────────────────────────────────


def _error(msg: str) -> None:
    """Print an error message to stderr and exit."""
    click.echo(f"Error: {msg}", err=True)
    sys.exit(1)


def _load_config(config_path: str | None) -> PresentoConfig:
    """Load config with user-friendly error handling."""
    try:
        return load_config(path=config_path)
    except ConfigError as e:
        _error(str(e))
        raise  # unreachable, keeps mypy happy


def _setup_logging(config: LoggingConfig) -> None:
    """Configure the root logger.

    Logs go to stderr (or a file); stdout carries the MCP transport.
    """
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        msg = f"Unknown log level: {config.level}"
        raise ConfigError(msg)

    handler: logging.Handler
    if config.file:
        handler = logging.FileHandler(config.file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)


# ── CLI group ────────────────────────────────────────────────────


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="presento-mcp")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Path to config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None) -> None:
    """presento-mcp - MCP tools for AI-generated presentations.

    Create, list, export, and track presentations from any MCP client.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ── serve ────────────────────────────────────────────────────────


@cli.command()
@click.pass_context
def serve(ctx: click.Context) -> None:
    """Start the MCP server on stdio."""
    from presento_mcp.mcp.server import run_server

    config = _load_config(ctx.obj["config_path"])
    try:
        _setup_logging(config.logging)
    except ConfigError as e:
        _error(str(e))

    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        logger.info("%s MCP server shutting down", config.server.name)


# ── tools ────────────────────────────────────────────────────────


@cli.command()
def tools() -> None:
    """List the tools advertised to MCP clients."""
    from rich.console import Console
    from rich.table import Table

    from presento_mcp.tools.catalog import list_tools

    table = Table(title="Presentation tools")
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required", no_wrap=True)

    for definition in list_tools():
        required = ", ".join(f.name for f in definition.fields if f.required)
        table.add_row(definition.name, definition.description, required or "-")

    Console().print(table)


# ── call ─────────────────────────────────────────────────────────


def _parse_args(raw: str) -> dict[str, Any]:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        msg = f"--args is not valid JSON: {e}"
        raise click.BadParameter(msg) from e
    if not isinstance(parsed, dict):
        msg = "--args must be a JSON object"
        raise click.BadParameter(msg)
    return parsed


@cli.command()
@click.argument("name")
@click.option(
    "--args",
    "raw_args",
    default="{}",
    show_default=True,
    help="Tool arguments as a JSON object.",
)
@click.pass_context
def call(ctx: click.Context, name: str, raw_args: str) -> None:
    """Invoke one tool against the configured backend."""
    args = _parse_args(raw_args)
    config = _load_config(ctx.obj["config_path"])
    try:
        result = asyncio.run(_call_async(config, name, args))
    except ProtocolError as e:
        _error(f"[{e.code.name}] {e.message}")
        return

    for block in result.content:
        click.echo(block.text)


async def _call_async(
    config: PresentoConfig, name: str, args: dict[str, Any]
) -> ToolResult:
    """Async implementation for the call command."""
    from presento_mcp.backend.client import BackendClient
    from presento_mcp.tools.dispatcher import Dispatcher

    async with BackendClient.from_config(config) as client:
        dispatcher = Dispatcher.for_backend(client)
        return await dispatcher.dispatch(name, args)
