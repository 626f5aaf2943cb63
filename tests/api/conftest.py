"""
Pytest fixtures for API client tests.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
from pydantic import SecretStr

from dd_integrations.api.client import DDClient
from dd_integrations.core.config import DDCredentials


@pytest.fixture
def credentials() -> DDCredentials:
    """Create test credentials."""
    return DDCredentials(
        api_key=SecretStr("test_api_key"),
        app_key=SecretStr("test_app_key"),
    )


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock requests.Session."""
    return MagicMock()


@pytest.fixture
def client(credentials: DDCredentials, mock_session: MagicMock) -> DDClient:
    """Create a DDClient with mocked session."""
    client = DDClient.from_credentials(credentials)
    client._session = mock_session
    return client


def make_response(
    status_code: int = 200,
    json_data: Any = None,
    text: str | None = None,
) -> MagicMock:
    """Create a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if text is None:
        text = json.dumps(json_data) if json_data is not None else ""
    response.text = text
    response.url = "https://api.datadoghq.com/api/test"
    return response


def sent_body(mock_session: MagicMock) -> Any:
    """Return the JSON body passed to the last session.request call."""
    return mock_session.request.call_args.kwargs["json"]


def sent_url(mock_session: MagicMock) -> str:
    """Return the URL passed to the last session.request call."""
    return mock_session.request.call_args.kwargs["url"]
