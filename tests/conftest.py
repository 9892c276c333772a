"""Shared pytest fixtures for viu tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from viu_shared.config.settings import ViuSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's VIU_* environment out of the tests."""
    monkeypatch.delenv("VIU_CONFIG", raising=False)
    monkeypatch.delenv("VIU_JSON_OUTPUT", raising=False)
    monkeypatch.delenv("VIU_VERBOSE", raising=False)


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run inside an empty temp dir so no ``viu.toml`` is discovered."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(isolated_cwd: Path) -> ViuSettings:
    """Default settings with no config file."""
    return ViuSettings.from_cli()
