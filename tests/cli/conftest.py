"""
Pytest fixtures for CLI tests.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from dd_integrations.core.config import reset_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Run each CLI test without ambient Datadog settings."""
    for name in ("DATADOG_API_KEY", "DATADOG_APP_KEY", "DATADOG_HOST", "DATADOG_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def runner() -> CliRunner:
    """Create a typer CliRunner."""
    return CliRunner()


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock DDClient with service attributes."""
    client = MagicMock()
    client.api_url = "https://api.datadoghq.com"
    return client
