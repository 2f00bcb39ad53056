"""Configuration loading for presento-mcp.

Sources are merged lowest priority first:

    1. model defaults
    2. ``$XDG_CONFIG_HOME/presento-mcp/config.toml`` (``~/.config`` if unset)
    3. ``./presento.toml``
    4. the file named by ``$PRESENTO_CONFIG``
    5. the ``--config`` file
    6. overrides passed to :func:`load_config`

Files 2 and 3 are optional.  A path named explicitly (4 and 5) must
exist.  After validation the backend base URL is pinned: the configured
value, else ``$DARBOT_PRESENTO_API_URL``, else the local default.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from presento_mcp.core.errors import ConfigError

from .schema import PresentoConfig

CONFIG_ENV = "PRESENTO_CONFIG"


def _optional_sources() -> list[Path]:
    xdg = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    candidates = [
        Path(xdg) / "presento-mcp" / "config.toml",
        Path.cwd() / "presento.toml",
    ]
    return [p for p in candidates if p.is_file()]


def _required_source(raw: str | Path, origin: str) -> Path:
    path = Path(raw)
    if not path.is_file():
        msg = f"{origin} file not found: {raw}"
        raise ConfigError(msg)
    return path


def _config_sources(explicit: str | Path | None) -> list[Path]:
    """Every config file to read, in merge order."""
    sources = _optional_sources()
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        sources.append(_required_source(env_path, CONFIG_ENV))
    if explicit is not None:
        sources.append(_required_source(explicit, "Config"))
    return sources


def _load_table(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read config file {path}: {e}"
        raise ConfigError(msg) from e


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return *base* updated with *override*, merging nested tables."""
    result = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = _deep_merge(current, value)
        result[key] = value
    return result


def _pin_base_url(config: PresentoConfig) -> None:
    backend = config.backend
    env_url = os.environ.get(backend.base_url_env) if backend.base_url_env else None
    url = backend.base_url or env_url or backend.default_base_url
    backend.base_url = url.rstrip("/")


def load_config(
    path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> PresentoConfig:
    """Build the validated configuration.

    Args:
        path: The ``--config`` file, merged after every discovered file.
        overrides: Values merged last, above every file.

    Raises:
        ConfigError: A named file is missing or unreadable, a file is not
            valid TOML, or the merged values fail validation.
    """
    data: dict[str, Any] = {}
    for source in _config_sources(path):
        data = _deep_merge(data, _load_table(source))
    data = _deep_merge(data, overrides or {})

    try:
        config = PresentoConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Configuration validation failed: {e}"
        raise ConfigError(msg) from e

    _pin_base_url(config)
    return config
