"""Tool catalog -- the fixed set of tools advertised to MCP clients."""

from __future__ import annotations

from types import MappingProxyType

from presento_mcp.tools.base import FieldSpec, ToolDefinition

EXPORT_FORMATS = ("pdf", "pptx")

CREATE_PRESENTATION = ToolDefinition(
    name="create_presentation",
    description="Create a new AI-generated presentation",
    fields=(
        FieldSpec(
            name="prompt",
            kind="string",
            description="Description of the presentation topic and content",
            required=True,
            min_length=1,
        ),
        FieldSpec(
            name="slides",
            kind="integer",
            description="Number of slides to generate",
            default=8,
            minimum=1,
            maximum=20,
        ),
        FieldSpec(
            name="language",
            kind="string",
            description="Language for the presentation",
            default="English",
        ),
        FieldSpec(
            name="theme",
            kind="string",
            description="Presentation theme/template",
            default="modern",
        ),
    ),
)

LIST_PRESENTATIONS = ToolDefinition(
    name="list_presentations",
    description="List all saved presentations",
    fields=(
        FieldSpec(
            name="limit",
            kind="integer",
            description="Maximum number of presentations to return",
            default=10,
        ),
    ),
)

EXPORT_PRESENTATION = ToolDefinition(
    name="export_presentation",
    description="Export a presentation to PDF or PPTX format",
    fields=(
        FieldSpec(
            name="presentation_id",
            kind="string",
            description="ID of the presentation to export",
            required=True,
            min_length=1,
        ),
        FieldSpec(
            name="format",
            kind="enum",
            description="Export format",
            default="pdf",
            choices=EXPORT_FORMATS,
        ),
    ),
)

GET_PRESENTATION_STATUS = ToolDefinition(
    name="get_presentation_status",
    description="Get the status of a presentation generation",
    fields=(
        FieldSpec(
            name="presentation_id",
            kind="string",
            description="ID of the presentation",
            required=True,
            min_length=1,
        ),
    ),
)

TOOLS: tuple[ToolDefinition, ...] = (
    CREATE_PRESENTATION,
    LIST_PRESENTATIONS,
    EXPORT_PRESENTATION,
    GET_PRESENTATION_STATUS,
)

CATALOG = MappingProxyType({t.name: t for t in TOOLS})


def list_tools() -> list[ToolDefinition]:
    """Return every tool definition in advertised order."""
    return list(TOOLS)
