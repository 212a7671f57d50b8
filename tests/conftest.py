"""Shared pytest fixtures for nricctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from nricctl.config.settings import NricSettings
from nricctl.services.identifier import IdentifierService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no config overrides.

    Keeps a stray ``nricctl.toml`` or ``NRICCTL_*`` variable on the
    developer's machine from leaking into results.
    """
    monkeypatch.delenv("NRICCTL_CONFIG", raising=False)
    monkeypatch.delenv("NRICCTL_INPUT__NORMALIZE", raising=False)
    monkeypatch.delenv("NRICCTL_INPUT__IGNORE_SEPARATORS", raising=False)
    monkeypatch.delenv("NRICCTL_OUTPUT__SHOW_EXPECTED", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> NricSettings:
    """Default settings with no TOML file."""
    return NricSettings.from_cli(start=tmp_path)


@pytest.fixture
def service(settings: NricSettings) -> IdentifierService:
    return IdentifierService(settings)
