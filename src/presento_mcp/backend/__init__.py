"""HTTP client for the presentation backend."""

from presento_mcp.backend.client import BackendClient

__all__ = ["BackendClient"]
