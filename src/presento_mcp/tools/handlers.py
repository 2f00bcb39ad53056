"""Tool handlers -- one backend call plus formatting per tool.

Backend responses are only partially trusted: every displayed field
falls back to a sentinel when it is missing, ``None``, or an empty
string.  Zero and ``False`` are real values and are shown as-is.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from presento_mcp.tools.base import ToolResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from presento_mcp.backend.client import BackendClient
    from presento_mcp.tools.base import ToolHandler

STATUS_GLYPHS: Mapping[str, str] = MappingProxyType(
    {
        "completed": "✅",
        "processing": "🔄",
        "failed": "❌",
        "pending": "⏳",
    }
)
UNKNOWN_GLYPH = "❓"

EMPTY_LIST_MESSAGE = (
    "📁 No presentations found. "
    "Create your first presentation using the create_presentation tool!"
)


def _as_dict(data: Any) -> dict[str, Any]:
    return data if isinstance(data, dict) else {}


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def _field(data: Mapping[str, Any], key: str, sentinel: str) -> str:
    """Return ``data[key]`` as text, or *sentinel* when it is absent."""
    value = data.get(key)
    return sentinel if _is_absent(value) else str(value)


def status_glyph(status: Any) -> str:
    """Pick the indicator glyph for a backend status string."""
    if not isinstance(status, str):
        return UNKNOWN_GLYPH
    return STATUS_GLYPHS.get(status.lower(), UNKNOWN_GLYPH)


def status_message(status: Any) -> str:
    if status == "completed":
        return "🎉 Your presentation is ready!"
    if status == "failed":
        return "❌ Generation failed. Please try again."
    return "⏳ Still processing..."


# ── Formatters ───────────────────────────────────────────────────


def format_created(args: Mapping[str, Any], data: Any) -> str:
    result = _as_dict(data)
    presentation_id = result.get("presentation_id")
    if _is_absent(presentation_id):
        presentation_id = result.get("id")
    if _is_absent(presentation_id):
        presentation_id = "N/A"
    return (
        "✅ Presentation creation started successfully!\n"
        "\n"
        "📋 **Details:**\n"
        f"- **Topic:** {args['prompt']}\n"
        f"- **Slides:** {args['slides']}\n"
        f"- **Language:** {args['language']}\n"
        f"- **Theme:** {args['theme']}\n"
        f"- **Presentation ID:** {presentation_id}\n"
        "\n"
        f"🔄 **Status:** {_field(result, 'status', 'Processing')}\n"
        "\n"
        "The presentation is being generated. "
        "You can check its status using the get_presentation_status tool."
    )


def format_list_item(index: int, item: Any) -> str:
    p = _as_dict(item)
    title = p.get("title")
    if _is_absent(title):
        title = p.get("id")
    if _is_absent(title):
        title = "Untitled"
    return (
        f"{index}. **{title}** (ID: {_field(p, 'id', 'Unknown')})\n"
        f"   - Status: {_field(p, 'status', 'Unknown')}\n"
        f"   - Created: {_field(p, 'created_at', 'Unknown')}\n"
        f"   - Slides: {_field(p, 'slide_count', 'N/A')}"
    )


def format_list(presentations: list[Any]) -> str:
    items = "\n\n".join(
        format_list_item(i, p) for i, p in enumerate(presentations, start=1)
    )
    return f"📚 **Your Presentations ({len(presentations)}):**\n\n{items}"


def format_export(presentation_id: str, fmt: str, data: Any) -> str:
    result = _as_dict(data)
    download_url = _field(result, "download_url", "Will be available shortly")
    return (
        "📄 **Export initiated successfully!**\n"
        "\n"
        f"- **Presentation ID:** {presentation_id}\n"
        f"- **Format:** {fmt.upper()}\n"
        f"- **Download URL:** {download_url}\n"
        "\n"
        "The export is being processed. "
        "The download link will be available once complete."
    )


def format_status(presentation_id: str, data: Any) -> str:
    result = _as_dict(data)
    status = result.get("status")
    lines = [
        f"{status_glyph(status)} **Presentation Status**",
        "",
        f"- **ID:** {presentation_id}",
        f"- **Status:** {_field(result, 'status', 'Unknown')}",
        f"- **Title:** {_field(result, 'title', 'Untitled')}",
        f"- **Slides:** {_field(result, 'slide_count', 'N/A')}",
        f"- **Created:** {_field(result, 'created_at', 'Unknown')}",
        f"- **Updated:** {_field(result, 'updated_at', 'Unknown')}",
        "",
        status_message(status),
    ]
    view_url = result.get("view_url")
    if not _is_absent(view_url):
        lines += ["", f"🔗 **View:** {view_url}"]
    return "\n".join(lines)


# ── Handlers ─────────────────────────────────────────────────────


class PresentationTools:
    """Handlers for the presentation tools.

    Each handler receives already-validated arguments and holds no state
    between calls.  ``BackendError`` propagates to the dispatcher.
    """

    def __init__(self, client: BackendClient) -> None:
        self.client = client

    async def create_presentation(self, args: dict[str, Any]) -> ToolResult:
        payload = {
            "prompt": args["prompt"],
            "slides": args["slides"],
            "language": args["language"],
            "theme": args["theme"],
        }
        data = await self.client.generate(payload)
        return ToolResult.text(format_created(payload, data))

    async def list_presentations(self, args: dict[str, Any]) -> ToolResult:
        data = await self.client.list_presentations(args["limit"])
        presentations = _as_dict(data).get("presentations")
        if not isinstance(presentations, list) or not presentations:
            return ToolResult.text(EMPTY_LIST_MESSAGE)
        return ToolResult.text(format_list(presentations))

    async def export_presentation(self, args: dict[str, Any]) -> ToolResult:
        presentation_id = args["presentation_id"]
        fmt = args["format"]
        data = await self.client.export(presentation_id, fmt)
        return ToolResult.text(format_export(presentation_id, fmt, data))

    async def get_presentation_status(self, args: dict[str, Any]) -> ToolResult:
        presentation_id = args["presentation_id"]
        data = await self.client.get_presentation(presentation_id)
        return ToolResult.text(format_status(presentation_id, data))

    def handlers(self) -> dict[str, ToolHandler]:
        """Map each catalog tool name to its handler."""
        return {
            "create_presentation": self.create_presentation,
            "list_presentations": self.list_presentations,
            "export_presentation": self.export_presentation,
            "get_presentation_status": self.get_presentation_status,
        }
