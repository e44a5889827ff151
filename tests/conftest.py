"""Shared pytest fixtures for foldkit tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from foldkit.config.settings import FoldkitSettings
from foldkit.services.sequence import SequenceService
from foldkit.services.telemetry import _current_span, disable_telemetry


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from FOLDKIT_* env vars and leaked global state.

    The CLI reconfigures the root logger and may enable telemetry; both are
    process-wide, so they are restored after each test.
    """
    for name in ("FOLDKIT_CONFIG", "FOLDKIT_INPUT__ELEMENT_TYPE", "FOLDKIT_OUTPUT__STYLE"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    foldkit_level = logging.getLogger("foldkit").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("foldkit").setLevel(foldkit_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no foldkit.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> FoldkitSettings:
    """Default settings, with config discovery rooted in an empty directory."""
    return FoldkitSettings.from_cli(start_dir=tmp_path)


@pytest.fixture
def service(settings: FoldkitSettings) -> SequenceService:
    return SequenceService(settings)
