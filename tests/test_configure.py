"""Tests for lenguard.configure and the public package surface."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

import lenguard
from lenguard.config.settings import LenguardSettings
from lenguard.domain.adapters import ADAPTER_REGISTRY


@pytest.mark.usefixtures("isolated_dir")
class TestConfigure:
    def test_defaults(self) -> None:
        plugins = lenguard.configure()
        assert isinstance(plugins, list)
        assert set not in ADAPTER_REGISTRY

    def test_hash_collections(self, isolated_dir: Path) -> None:
        (isolated_dir / "lenguard.toml").write_text("[adapters]\nhash_collections = true\n")
        lenguard.configure(LenguardSettings.from_cli(cwd=isolated_dir))
        assert lenguard.validate_length({1, 2, 3}, 3, 3).ok

    def test_plugins_disabled(self, isolated_dir: Path) -> None:
        (isolated_dir / "lenguard.toml").write_text("[adapters]\nplugins = false\n")
        assert lenguard.configure(LenguardSettings.from_cli(cwd=isolated_dir)) == []

    def test_verbose_logging(self) -> None:
        lenguard.configure(LenguardSettings.from_cli(verbose=True))
        assert logging.getLogger("lenguard").level == logging.DEBUG


class TestPublicApi:
    def test_examples_from_overview(self) -> None:
        clef = "\U0001d11e"
        assert not lenguard.validate_num_bytes(clef, 1, 3).ok
        assert lenguard.validate_num_bytes(clef, 1, 4).ok
        assert lenguard.validate_num_chars(clef, 1, 1).ok
        assert lenguard.validate_length([1, 2, 3, 4, 5], 5, 5).ok
        assert not lenguard.validate_length([1, 2, 3, 4, 5], 0, 4).ok
        for policy in lenguard.LengthPolicy:
            assert lenguard.validate(None, policy, 10, 10).ok

    def test_all_exports_resolve(self) -> None:
        for name in lenguard.__all__:
            assert hasattr(lenguard, name)
