"""Shared pytest fixtures for projname tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no projname env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes so a stray ``projname.toml`` never changes the outcome.
    """
    monkeypatch.chdir(tmp_path)
    for var in ("PROJNAME_CONFIG", "PROJNAME_QUIET", "PROJNAME_MODERATION__WORDLIST"):
        monkeypatch.delenv(var, raising=False)
