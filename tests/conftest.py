"""Shared fixtures."""

import json
from pathlib import Path

import pytest

from responsive_size.config import CONFIG_ENV_VAR
from responsive_size.core.handler import BreakpointsHandler
from responsive_size.core.sizes import LayoutSize


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's RESPONSIVE_SIZE_CONFIG out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def changes() -> list[LayoutSize]:
    """Records categories passed to on_changed."""
    return []


@pytest.fixture
def mobile_desktop(changes: list[LayoutSize]) -> BreakpointsHandler[str, LayoutSize]:
    """Handler with only small and large populated."""
    return BreakpointsHandler.standard(
        small="mobile",
        large="desktop",
        on_changed=changes.append,
    )


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a JSON config file and return its path."""
    def _write(data: object, name: str = "breakpoints.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
