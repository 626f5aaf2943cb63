"""
Datadog HTTP API client.

Provides a session-based client with key authentication, JSON
marshalling of typed records and error mapping. Every call is a
single request/response round trip: no retries, no pagination.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from types import TracebackType
from typing import TYPE_CHECKING, Any

import requests
from pydantic import SecretStr, TypeAdapter, ValidationError

from dd_integrations.auth.keys import AuthKeys, build_auth_keys
from dd_integrations.constants import DDAPIConfig
from dd_integrations.core.config import AuthMode, DDCredentials
from dd_integrations.core.exceptions import (
    APIAuthenticationError,
    APIConnectionError,
    APIError,
    APINotFoundError,
    APITimeoutError,
    APIValidationError,
    DecodeError,
)
from dd_integrations.models.base import DDModel

if TYPE_CHECKING:
    from dd_integrations.services.aws import AWSIntegrationService
    from dd_integrations.services.gcp import GCPIntegrationService
    from dd_integrations.services.pagerduty import PagerDutyIntegrationService
    from dd_integrations.services.slack import SlackIntegrationService

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(response_model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_model)


def _error_messages(text: str) -> list[str]:
    """Extract the "errors" list from an error body, falling back to raw text."""
    if not text.strip():
        return []
    try:
        data = json.loads(text)
    except ValueError:
        return [text]
    if isinstance(data, dict) and isinstance(data.get("errors"), list):
        return [str(e) for e in data["errors"]]
    return [text]


class DDClient:
    """
    Datadog HTTP API client with API key + application key authentication.

    Usage:
        # From credentials
        client = DDClient.from_credentials(creds)

        # Direct instantiation
        client = DDClient("api_key", "app_key")

        # Raw request decoded into a record
        pd = client.request("GET", "/v1/integration/pagerduty", response_model=IntegrationPD)

        # Integration services
        accounts = client.aws.list()
    """

    BASE_PATH: str = DDAPIConfig.BASE_PATH
    DEFAULT_TIMEOUT: int = DDAPIConfig.DEFAULT_TIMEOUT

    def __init__(
        self,
        api_key: str | SecretStr,
        app_key: str | SecretStr,
        api_url: str = DDAPIConfig.DEFAULT_HOST,
        timeout: int = DEFAULT_TIMEOUT,
        auth_mode: AuthMode = "query",
    ):
        """
        Initialize the Datadog API client.

        Args:
            api_key: Datadog API key
            app_key: Datadog application key
            api_url: API host (e.g. https://api.datadoghq.eu)
            timeout: Request timeout in seconds
            auth_mode: Send keys as "query" parameters or "headers"
        """
        self._api_key = api_key if isinstance(api_key, SecretStr) else SecretStr(api_key)
        self._app_key = app_key if isinstance(app_key, SecretStr) else SecretStr(app_key)
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.auth_mode = auth_mode
        self.base_url = f"{self.api_url}{self.BASE_PATH}"
        self._session = requests.Session()
        self._services: dict[str, Any] = {}

    @classmethod
    def from_credentials(
        cls,
        credentials: DDCredentials,
        timeout: int = DEFAULT_TIMEOUT,
        auth_mode: AuthMode = "query",
    ) -> DDClient:
        """
        Create client from DDCredentials object.

        Args:
            credentials: DDCredentials instance
            timeout: Request timeout in seconds
            auth_mode: Send keys as "query" parameters or "headers"

        Returns:
            Configured DDClient instance
        """
        return cls(
            api_key=credentials.api_key,
            app_key=credentials.app_key,
            api_url=credentials.api_url,
            timeout=timeout,
            auth_mode=auth_mode,
        )

    def __enter__(self) -> DDClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def _auth_keys(self) -> AuthKeys:
        return build_auth_keys(self._api_key, self._app_key)

    def _build_headers(self, has_body: bool) -> dict[str, str]:
        """Build request headers, including credentials in header mode."""
        headers = {"Accept": "application/json"}
        if has_body:
            headers["Content-Type"] = "application/json"
        if self.auth_mode == "headers":
            headers.update(self._auth_keys().to_headers())
        return headers

    def _build_params(self, params: dict[str, Any] | None) -> dict[str, Any]:
        """Merge caller query parameters with credentials in query mode."""
        merged: dict[str, Any] = {}
        if self.auth_mode == "query":
            merged.update(self._auth_keys().to_params())
        if params:
            merged.update(params)
        return merged

    @staticmethod
    def _encode_body(json_data: DDModel | dict[str, Any] | list[Any] | None) -> Any:
        if isinstance(json_data, DDModel):
            return json_data.to_payload()
        return json_data

    def _handle_response(
        self,
        response: requests.Response,
        path: str,
        response_model: Any = None,
    ) -> Any:
        """
        Handle API response and raise appropriate exceptions.

        Args:
            response: requests.Response object
            path: Request path, for error context
            response_model: Type to decode the body into, or None to discard it

        Returns:
            Decoded response, or None when no response_model was given

        Raises:
            APIValidationError: For 400 responses
            APIAuthenticationError: For 401/403 responses
            APINotFoundError: For 404 responses
            APIError: For other non-2xx responses
            DecodeError: If the body does not match response_model
        """
        status = response.status_code
        text = response.text or ""

        if not 200 <= status < 300:
            messages = _error_messages(text)
            logger.debug(f"API error {status} on {path}: {messages}")
            if status == 400:
                raise APIValidationError(status, messages, text)
            if status in (401, 403):
                raise APIAuthenticationError(status, messages, text)
            if status == 404:
                raise APINotFoundError(status, messages, text)
            raise APIError(status, messages, text)

        if response_model is None:
            return None

        if not text.strip():
            raise DecodeError("Empty response body", body=text, path=path)

        try:
            data = json.loads(text)
        except ValueError as e:
            raise DecodeError(f"Response is not valid JSON: {e}", body=text, path=path) from e

        try:
            return _adapter(response_model).validate_python(data)
        except ValidationError as e:
            raise DecodeError(
                f"Response does not match expected shape: {e}", body=text, path=path
            ) from e

    def request(
        self,
        method: str,
        path: str,
        json_data: DDModel | dict[str, Any] | list[Any] | None = None,
        params: dict[str, Any] | None = None,
        response_model: Any = None,
    ) -> Any:
        """
        Make an authenticated request to the Datadog API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path (e.g., '/v1/integration/aws'); may carry a query string
            json_data: Request body; DDModel records omit unset fields
            params: Extra query parameters
            response_model: Type to decode the body into (model or list[model])

        Returns:
            Decoded response, or None when no response_model was given

        Raises:
            APIError: If the API returns a non-2xx status
            APIConnectionError: If connection fails
            APITimeoutError: If request times out
            DecodeError: If the response cannot be decoded
        """
        method = method.upper()
        if method not in DDAPIConfig.ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        if not path.startswith("/"):
            path = "/" + path

        url = self.base_url + path
        body = self._encode_body(json_data)

        logger.debug(f"API {method} {path}")

        try:
            response = self._session.request(
                method=method,
                url=url,
                headers=self._build_headers(body is not None),
                params=self._build_params(params),
                json=body,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise APITimeoutError(f"Request timed out: {e}", method, path) from e
        except requests.exceptions.RequestException as e:
            raise APIConnectionError(f"Connection failed: {e}", method, path) from e

        return self._handle_response(response, path, response_model)

    def get(self, path: str, params: dict[str, Any] | None = None, response_model: Any = None) -> Any:
        """Make a GET request."""
        return self.request("GET", path, params=params, response_model=response_model)

    def post(
        self,
        path: str,
        json_data: DDModel | dict[str, Any] | None = None,
        response_model: Any = None,
    ) -> Any:
        """Make a POST request."""
        return self.request("POST", path, json_data=json_data, response_model=response_model)

    def put(
        self,
        path: str,
        json_data: DDModel | dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        response_model: Any = None,
    ) -> Any:
        """Make a PUT request."""
        return self.request(
            "PUT", path, json_data=json_data, params=params, response_model=response_model
        )

    def delete(
        self,
        path: str,
        json_data: DDModel | dict[str, Any] | None = None,
        response_model: Any = None,
    ) -> Any:
        """Make a DELETE request (some integration deletes carry a body)."""
        return self.request("DELETE", path, json_data=json_data, response_model=response_model)

    # =========================================================================
    # Integration Services
    # =========================================================================

    def _service(self, name: str, factory: Any) -> Any:
        if name not in self._services:
            self._services[name] = factory(self)
        return self._services[name]

    @property
    def pagerduty(self) -> PagerDutyIntegrationService:
        """PagerDuty integration operations."""
        from dd_integrations.services.pagerduty import PagerDutyIntegrationService

        return self._service("pagerduty", PagerDutyIntegrationService)

    @property
    def slack(self) -> SlackIntegrationService:
        """Slack integration operations."""
        from dd_integrations.services.slack import SlackIntegrationService

        return self._service("slack", SlackIntegrationService)

    @property
    def aws(self) -> AWSIntegrationService:
        """AWS integration operations."""
        from dd_integrations.services.aws import AWSIntegrationService

        return self._service("aws", AWSIntegrationService)

    @property
    def gcp(self) -> GCPIntegrationService:
        """Google Cloud Platform integration operations."""
        from dd_integrations.services.gcp import GCPIntegrationService

        return self._service("gcp", GCPIntegrationService)
