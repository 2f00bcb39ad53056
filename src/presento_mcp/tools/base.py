"""Tool data types.

Defines the declarative argument schema (``FieldSpec``), tool
definitions, and the result envelope returned for every tool call.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Literal

from mcp.types import TextContent

FieldKind = Literal["string", "integer", "enum"]

_MISSING: Any = object()


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Shape of one tool argument."""

    name: str
    kind: FieldKind
    description: str
    required: bool = False
    default: Any = _MISSING
    minimum: int | None = None
    maximum: int | None = None
    min_length: int | None = None
    choices: tuple[str, ...] = ()

    @property
    def has_default(self) -> bool:
        return self.default is not _MISSING

    def json_schema(self) -> dict[str, Any]:
        """Render as a JSON Schema property."""
        schema: dict[str, Any] = {
            "type": "integer" if self.kind == "integer" else "string",
            "description": self.description,
        }
        if self.kind == "enum":
            schema["enum"] = list(self.choices)
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.maximum is not None:
            schema["maximum"] = self.maximum
        if self.min_length is not None:
            schema["minLength"] = self.min_length
        if self.has_default:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """Name, description, and argument schema of one tool."""

    name: str
    description: str
    fields: tuple[FieldSpec, ...] = ()

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON Schema for the tool's arguments, as advertised to callers."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {f.name: f.json_schema() for f in self.fields},
        }
        required = [f.name for f in self.fields if f.required]
        if required:
            schema["required"] = required
        return schema


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Content returned from a successful tool call.

    Always carries at least one block.
    """

    content: tuple[TextContent, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.content:
            msg = "ToolResult requires at least one content block"
            raise ValueError(msg)

    @classmethod
    def text(cls, *texts: str) -> ToolResult:
        return cls(tuple(TextContent(type="text", text=t) for t in texts))


ToolHandler = Callable[[dict[str, Any]], Awaitable[ToolResult]]
