"""Core errors shared by every layer."""

from presento_mcp.core.errors import (
    BackendError,
    ConfigError,
    ErrorCode,
    PresentoError,
    ProtocolError,
)

__all__ = [
    "BackendError",
    "ConfigError",
    "ErrorCode",
    "PresentoError",
    "ProtocolError",
]
