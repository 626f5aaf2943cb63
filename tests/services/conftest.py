"""
Pytest fixtures for service tests.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock DDClient."""
    client = MagicMock()
    client.api_url = "https://api.datadoghq.com"
    return client
