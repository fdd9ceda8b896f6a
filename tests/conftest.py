"""Shared pytest fixtures for regcheck tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from regcheck.domain.models import RegistrationRequest


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def valid_request() -> RegistrationRequest:
    """A submission that passes every rule and resolves to a user."""
    return RegistrationRequest(
        first_name="John",
        last_name="Doe",
        age=18,
        sex="M",
        country="Thailand",
    )


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config discovery leaks.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.  Tests that
    write a regcheck.toml can request ``tmp_path`` directly (pytest
    deduplicates — it's the same directory).
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("REGCHECK_CONFIG", raising=False)
    monkeypatch.delenv("REGCHECK_VALIDATION__STRATEGY", raising=False)
