"""Shared pytest fixtures for selectorkit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from selectorkit import css_selector_builder
from selectorkit.facade import CssSelectorBuilder


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def css() -> CssSelectorBuilder:
    """The module-level selector facade."""
    return css_selector_builder


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run each test from an empty directory with no selectorkit env vars."""
    for name in (
        "SELECTORKIT_CONFIG",
        "SELECTORKIT_JSON_OUTPUT",
        "SELECTORKIT_QUIET",
        "SELECTORKIT_VERBOSE",
        "SELECTORKIT_LOG_JSON",
        "SELECTORKIT_OUTPUT__COLOR",
        "SELECTORKIT_OUTPUT__WIDTH",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore logger state changed by configure_logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("selectorkit")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
