"""Shared pytest fixtures for lenguard tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from lenguard.domain.adapters import ADAPTER_REGISTRY


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_adapters() -> Generator[None]:
    """Undo adapter registrations made by a test."""
    snapshot = dict(ADAPTER_REGISTRY)
    yield
    ADAPTER_REGISTRY.clear()
    ADAPTER_REGISTRY.update(snapshot)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    lg = logging.getLogger("lenguard")
    lg_level = lg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    lg.setLevel(lg_level)


@pytest.fixture
def isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no config discovery overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LENGUARD_CONFIG", raising=False)
    for name in ("LENGUARD_JSON_OUTPUT", "LENGUARD_QUIET", "LENGUARD_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
