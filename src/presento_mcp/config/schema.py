"""Pydantic models for presento-mcp configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field

from presento_mcp import __version__


class BackendConfig(BaseModel):
    """Connection settings for the presentation backend."""

    base_url: str | None = None
    base_url_env: str = "DARBOT_PRESENTO_API_URL"
    default_base_url: str = "http://localhost:8000"
    timeout: float = Field(default=30.0, gt=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""


class ServerConfig(BaseModel):
    """Identity advertised to MCP clients during initialization."""

    name: str = "darbot-presento"
    version: str = __version__


class PresentoConfig(BaseModel):
    """Top-level configuration for presento-mcp."""

    backend: BackendConfig = Field(default_factory=BackendConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
