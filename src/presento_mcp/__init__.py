"""presento-mcp: MCP tool server for the Darbot Presento presentation backend."""

__version__ = "1.0.0"
