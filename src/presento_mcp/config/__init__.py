"""Configuration loading and validation."""

from presento_mcp.config.loader import load_config
from presento_mcp.config.schema import (
    BackendConfig,
    LoggingConfig,
    PresentoConfig,
    ServerConfig,
)

__all__ = [
    "BackendConfig",
    "LoggingConfig",
    "PresentoConfig",
    "ServerConfig",
    "load_config",
]
