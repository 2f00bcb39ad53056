"""MCP protocol binding."""
