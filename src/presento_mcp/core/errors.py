"""Exception hierarchy for presento-mcp.

Every module imports from here. The hierarchy is:

    PresentoError
    ├── ConfigError
    ├── BackendError(status_code)
    └── ProtocolError(code)

``ProtocolError`` is the only kind that crosses the tool-call boundary;
its ``code`` is one of the JSON-RPC codes the MCP SDK uses.
"""

from __future__ import annotations

from enum import IntEnum

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class PresentoError(Exception):
    """Base exception for all presento-mcp errors."""


# ─── Configuration Errors ─────────────────────────────────────


class ConfigError(PresentoError):
    """Invalid configuration."""


# ─── Backend Errors ───────────────────────────────────────────


class BackendError(PresentoError):
    """The presentation backend was unreachable or returned a failure.

    ``status_code`` is set for HTTP failures and ``None`` for
    network-level failures (refused, DNS, timeout).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


# ─── Protocol Errors ──────────────────────────────────────────


class ErrorCode(IntEnum):
    """Error codes reported to the tool caller."""

    INVALID_PARAMS = INVALID_PARAMS
    METHOD_NOT_FOUND = METHOD_NOT_FOUND
    INTERNAL_ERROR = INTERNAL_ERROR


class ProtocolError(PresentoError):
    """A classified failure returned to the tool caller."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)

    @classmethod
    def invalid_params(cls, message: str) -> ProtocolError:
        return cls(ErrorCode.INVALID_PARAMS, message)

    @classmethod
    def method_not_found(cls, message: str) -> ProtocolError:
        return cls(ErrorCode.METHOD_NOT_FOUND, message)

    @classmethod
    def internal(cls, message: str) -> ProtocolError:
        return cls(ErrorCode.INTERNAL_ERROR, message)

    def to_mcp(self) -> McpError:
        """Convert to the MCP SDK error sent back as a JSON-RPC error."""
        return McpError(ErrorData(code=int(self.code), message=self.message))

    def __repr__(self) -> str:
        return f"ProtocolError({self.code.name}, {self.message!r})"
