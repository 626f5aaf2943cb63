"""
Core configuration and error types for dd-integrations.
"""

from __future__ import annotations

from dd_integrations.core.config import (
    DDCredentials,
    DDToolsSettings,
    get_settings,
    reset_settings,
)
from dd_integrations.core.exceptions import (
    APIAuthenticationError,
    APIConnectionError,
    APIError,
    APINotFoundError,
    APITimeoutError,
    APIValidationError,
    ConfigurationError,
    DDToolsError,
    DecodeError,
    MissingCredentialsError,
    PayloadError,
    TransportError,
)

__all__ = [
    # Config
    "DDCredentials",
    "DDToolsSettings",
    "get_settings",
    "reset_settings",
    # Errors
    "DDToolsError",
    "ConfigurationError",
    "MissingCredentialsError",
    "PayloadError",
    "TransportError",
    "APIConnectionError",
    "APITimeoutError",
    "APIError",
    "APIValidationError",
    "APIAuthenticationError",
    "APINotFoundError",
    "DecodeError",
]
