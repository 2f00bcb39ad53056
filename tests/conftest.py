"""Shared test fixtures for presento-mcp."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.fixtures.backend import FakeBackend

if TYPE_CHECKING:
    from collections.abc import AsyncIterator
    from pathlib import Path

    from presento_mcp.backend.client import BackendClient
    from presento_mcp.tools.dispatcher import Dispatcher


@pytest.fixture
def backend() -> FakeBackend:
    """Fake backend with no routes; every request 404s until routed."""
    return FakeBackend()


@pytest.fixture
async def client(backend: FakeBackend) -> AsyncIterator[BackendClient]:
    async with backend.client() as c:
        yield c


@pytest.fixture
def dispatcher(client: BackendClient) -> Dispatcher:
    from presento_mcp.tools.dispatcher import Dispatcher

    return Dispatcher.for_backend(client)


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user/project config files and env out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("PRESENTO_CONFIG", raising=False)
    monkeypatch.delenv("DARBOT_PRESENTO_API_URL", raising=False)
    monkeypatch.chdir(tmp_path)
