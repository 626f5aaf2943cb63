"""
Pytest fixtures for auth tests.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_keys() -> dict[str, str]:
    """Sample key values for testing."""
    return {
        "api_key": "test_api_key",
        "app_key": "test_app_key",
    }
