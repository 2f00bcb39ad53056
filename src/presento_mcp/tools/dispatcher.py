"""Dispatcher -- the single entry point for tool calls.

Resolves a tool name against the catalog, validates the arguments,
runs the handler, and guarantees that every failure leaving this
module is a :class:`ProtocolError`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from presento_mcp.core.errors import BackendError, ProtocolError
from presento_mcp.tools.catalog import CATALOG
from presento_mcp.tools.handlers import PresentationTools
from presento_mcp.tools.validation import validate

if TYPE_CHECKING:
    from presento_mcp.backend.client import BackendClient
    from presento_mcp.tools.base import ToolDefinition, ToolHandler, ToolResult

logger = logging.getLogger(__name__)


class Dispatcher:
    """Routes tool calls to handlers.

    Holds only the read-only catalog and handler table, so concurrent
    dispatches need no synchronization.
    """

    def __init__(
        self,
        handlers: Mapping[str, ToolHandler],
        catalog: Mapping[str, ToolDefinition] = CATALOG,
    ) -> None:
        missing = set(catalog) - set(handlers)
        if missing:
            msg = f"No handler registered for: {', '.join(sorted(missing))}"
            raise ValueError(msg)
        extra = set(handlers) - set(catalog)
        if extra:
            msg = f"Handler without catalog entry: {', '.join(sorted(extra))}"
            raise ValueError(msg)
        self._catalog = catalog
        self._handlers = dict(handlers)

    @classmethod
    def for_backend(cls, client: BackendClient) -> Dispatcher:
        """Build a dispatcher wired to the presentation handlers."""
        return cls(PresentationTools(client).handlers())

    def list_definitions(self) -> list[ToolDefinition]:
        return list(self._catalog.values())

    def __contains__(self, name: str) -> bool:
        return name in self._catalog

    def __len__(self) -> int:
        return len(self._catalog)

    async def dispatch(self, name: str, args: Mapping[str, Any] | None) -> ToolResult:
        """Run one tool call end to end.

        Raises:
            ProtocolError: ``MethodNotFound`` for an unknown tool,
                ``InvalidParams`` for bad arguments, ``InternalError``
                for any failure while the handler runs.
        """
        definition = self._catalog.get(name)
        if definition is None:
            logger.warning("Unknown tool requested: %s", name)
            msg = f"Unknown tool: {name}"
            raise ProtocolError.method_not_found(msg)

        try:
            validated = validate(definition, args)
        except ProtocolError as e:
            logger.warning("Invalid arguments for %s: %s", name, e.message)
            raise

        logger.debug("Dispatching %s with %s", name, validated)
        try:
            return await self._handlers[name](validated)
        except ProtocolError:
            raise
        except BackendError as e:
            msg = f"Failed to communicate with presentation backend: {e}"
            raise ProtocolError.internal(msg) from e
        except Exception as e:
            logger.exception("Tool %s failed", name)
            msg = f"Tool execution failed: {e}"
            raise ProtocolError.internal(msg) from e
