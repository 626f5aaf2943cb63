"""
API key / application key credential attachment for the Datadog API.

Every request carries two secrets:
1. The organization API key
2. An application key scoped to a user

They are sent either as query parameters (api_key, application_key),
which is what the v1 integration endpoints document, or as the
DD-API-KEY / DD-APPLICATION-KEY headers.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import SecretStr

from dd_integrations.constants import DDAPIConfig


@dataclass(frozen=True)
class AuthKeys:
    """
    Container for the two Datadog credential values.

    Attributes:
        api_key: Plain API key value
        app_key: Plain application key value
    """

    api_key: str
    app_key: str

    def __repr__(self) -> str:
        return "AuthKeys(api_key='**********', app_key='**********')"

    def to_params(self) -> dict[str, str]:
        """Convert to query parameter dictionary for requests."""
        return {
            DDAPIConfig.API_KEY_PARAM: self.api_key,
            DDAPIConfig.APP_KEY_PARAM: self.app_key,
        }

    def to_headers(self) -> dict[str, str]:
        """Convert to header dictionary for requests."""
        return {
            DDAPIConfig.API_KEY_HEADER: self.api_key,
            DDAPIConfig.APP_KEY_HEADER: self.app_key,
        }


def build_auth_keys(api_key: str | SecretStr, app_key: str | SecretStr) -> AuthKeys:
    """
    Unwrap secrets into an AuthKeys container.

    Args:
        api_key: Datadog API key
        app_key: Datadog application key

    Returns:
        AuthKeys holding the plain values

    Example:
        >>> keys = build_auth_keys(SecretStr("abc"), "def")
        >>> requests.get(url, params=keys.to_params())
    """
    if isinstance(api_key, SecretStr):
        api_key = api_key.get_secret_value()
    if isinstance(app_key, SecretStr):
        app_key = app_key.get_secret_value()
    return AuthKeys(api_key=api_key, app_key=app_key)
