"""Tests for configuration loading and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from presento_mcp import __version__
from presento_mcp.config.loader import _deep_merge, load_config
from presento_mcp.config.schema import (
    BackendConfig,
    LoggingConfig,
    PresentoConfig,
    ServerConfig,
)
from presento_mcp.core.errors import ConfigError

# ─── Schema Defaults ──────────────────────────────────────────


class TestSchemaDefaults:
    def test_presento_config_all_defaults(self) -> None:
        cfg = PresentoConfig()
        assert cfg.backend.base_url is None
        assert cfg.backend.default_base_url == "http://localhost:8000"
        assert cfg.backend.base_url_env == "DARBOT_PRESENTO_API_URL"
        assert cfg.backend.timeout == 30.0
        assert cfg.logging.level == "INFO"
        assert cfg.server.name == "darbot-presento"

    def test_server_version_tracks_package(self) -> None:
        assert ServerConfig().version == __version__

    def test_logging_defaults(self) -> None:
        cfg = LoggingConfig()
        assert cfg.file == ""

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            BackendConfig(timeout=0)


# ─── Base URL resolution ──────────────────────────────────────


class TestBaseUrl:
    def test_default_local_address(self) -> None:
        cfg = load_config()
        assert cfg.backend.base_url == "http://localhost:8000"

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DARBOT_PRESENTO_API_URL", "https://presento.example.com/")
        cfg = load_config()
        assert cfg.backend.base_url == "https://presento.example.com"

    def test_empty_env_var_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DARBOT_PRESENTO_API_URL", "")
        cfg = load_config()
        assert cfg.backend.base_url == "http://localhost:8000"

    def test_explicit_config_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DARBOT_PRESENTO_API_URL", "http://from-env:1")
        cfg = load_config(overrides={"backend": {"base_url": "http://from-config:2"}})
        assert cfg.backend.base_url == "http://from-config:2"

    def test_custom_env_var_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MY_BACKEND", "http://custom:9000")
        cfg = load_config(overrides={"backend": {"base_url_env": "MY_BACKEND"}})
        assert cfg.backend.base_url == "http://custom:9000"


# ─── File discovery ───────────────────────────────────────────


class TestLoadConfig:
    def test_project_file(self, tmp_path) -> None:
        (tmp_path / "presento.toml").write_text(
            '[backend]\nbase_url = "http://project:8000"\ntimeout = 5\n'
        )
        cfg = load_config()
        assert cfg.backend.base_url == "http://project:8000"
        assert cfg.backend.timeout == 5.0

    def test_user_file(self, tmp_path) -> None:
        user_dir = tmp_path / "xdg" / "presento-mcp"
        user_dir.mkdir(parents=True)
        (user_dir / "config.toml").write_text('[logging]\nlevel = "DEBUG"\n')
        cfg = load_config()
        assert cfg.logging.level == "DEBUG"

    def test_project_overrides_user(self, tmp_path) -> None:
        user_dir = tmp_path / "xdg" / "presento-mcp"
        user_dir.mkdir(parents=True)
        (user_dir / "config.toml").write_text(
            '[logging]\nlevel = "DEBUG"\nfile = "user.log"\n'
        )
        (tmp_path / "presento.toml").write_text('[logging]\nlevel = "WARNING"\n')
        cfg = load_config()
        assert cfg.logging.level == "WARNING"
        assert cfg.logging.file == "user.log"

    def test_explicit_path(self, tmp_path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text('[server]\nname = "my-presento"\n')
        cfg = load_config(path=path)
        assert cfg.server.name == "my-presento"

    def test_missing_explicit_path(self, tmp_path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(path=tmp_path / "nope.toml")

    def test_env_path(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "env.toml"
        path.write_text("[backend]\ntimeout = 12.5\n")
        monkeypatch.setenv("PRESENTO_CONFIG", str(path))
        cfg = load_config()
        assert cfg.backend.timeout == 12.5

    def test_env_path_missing(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRESENTO_CONFIG", str(tmp_path / "missing.toml"))
        with pytest.raises(ConfigError, match="PRESENTO_CONFIG"):
            load_config()

    def test_explicit_path_beats_env_path(
        self, tmp_path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / "env.toml"
        env_file.write_text('[server]\nname = "from-env"\n[backend]\ntimeout = 3\n')
        cli_file = tmp_path / "cli.toml"
        cli_file.write_text('[server]\nname = "from-cli"\n')
        monkeypatch.setenv("PRESENTO_CONFIG", str(env_file))
        cfg = load_config(path=cli_file, overrides={"logging": {"level": "ERROR"}})
        assert cfg.server.name == "from-cli"
        assert cfg.backend.timeout == 3.0
        assert cfg.logging.level == "ERROR"

    def test_invalid_toml(self, tmp_path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[backend\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path=path)

    def test_validation_failure(self) -> None:
        with pytest.raises(ConfigError, match="validation failed"):
            load_config(overrides={"backend": {"timeout": -1}})


class TestDeepMerge:
    def test_nested_merge(self) -> None:
        base = {"backend": {"timeout": 1, "base_url": "a"}}
        override = {"backend": {"timeout": 2}}
        assert _deep_merge(base, override) == {
            "backend": {"timeout": 2, "base_url": "a"}
        }

    def test_does_not_mutate_base(self) -> None:
        base = {"a": {"b": 1}}
        _deep_merge(base, {"a": {"b": 2}})
        assert base == {"a": {"b": 1}}
