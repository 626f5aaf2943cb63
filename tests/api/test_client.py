"""
Tests for the Datadog API client.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests
from pydantic import SecretStr

from dd_integrations.api.client import DDClient
from dd_integrations.core.config import DDCredentials
from dd_integrations.core.exceptions import (
    APIAuthenticationError,
    APIConnectionError,
    APIError,
    APINotFoundError,
    APITimeoutError,
    APIValidationError,
    DecodeError,
    TransportError,
)
from dd_integrations.models.gcp import IntegrationGCP
from dd_integrations.models.pagerduty import IntegrationPD, ServicePDRequest

from .conftest import make_response, sent_body, sent_url


class TestDDClientInitialization:
    """Tests for DDClient initialization."""

    def test_init_sets_base_url(self) -> None:
        """Base URL is the host plus the /api prefix."""
        client = DDClient(api_key="k", app_key="a")

        assert client.base_url == "https://api.datadoghq.com/api"

    def test_init_custom_host_strips_trailing_slash(self) -> None:
        """Custom host is used without a trailing slash."""
        client = DDClient(api_key="k", app_key="a", api_url="https://api.datadoghq.eu/")

        assert client.base_url == "https://api.datadoghq.eu/api"

    def test_init_wraps_string_keys_in_secret_str(self) -> None:
        """String keys are wrapped in SecretStr."""
        client = DDClient(api_key="plain_api", app_key="plain_app")

        assert isinstance(client._api_key, SecretStr)
        assert client._api_key.get_secret_value() == "plain_api"
        assert client._app_key.get_secret_value() == "plain_app"

    def test_init_default_timeout(self) -> None:
        """Default timeout is 30 seconds."""
        client = DDClient(api_key="k", app_key="a")

        assert client.timeout == 30

    def test_from_credentials_factory(self) -> None:
        """Factory method creates client from DDCredentials."""
        creds = DDCredentials(
            api_key=SecretStr("factory_api"),
            app_key=SecretStr("factory_app"),
            api_url="us3.datadoghq.com",
        )

        client = DDClient.from_credentials(creds, timeout=120)

        assert client.api_url == "https://us3.datadoghq.com"
        assert client.base_url == "https://us3.datadoghq.com/api"
        assert client._api_key.get_secret_value() == "factory_api"
        assert client.timeout == 120

    def test_context_manager_closes_session(self, client: DDClient, mock_session: MagicMock) -> None:
        """Leaving the with-block closes the session."""
        with client:
            pass

        mock_session.close.assert_called_once()


class TestRequestBuilding:
    """Tests for request method, URL, credentials and body."""

    def test_request_builds_full_url(self, client: DDClient, mock_session: MagicMock) -> None:
        """URL is base URL plus path."""
        mock_session.request.return_value = make_response(200)

        client.request("GET", "/v1/integration/slack")

        assert sent_url(mock_session) == "https://api.datadoghq.com/api/v1/integration/slack"

    def test_request_adds_leading_slash(self, client: DDClient, mock_session: MagicMock) -> None:
        """Path without leading slash gets one added."""
        mock_session.request.return_value = make_response(200)

        client.request("GET", "v1/integration/gcp")

        assert sent_url(mock_session).endswith("/api/v1/integration/gcp")

    def test_request_adds_credentials_as_query_params(
        self, client: DDClient, mock_session: MagicMock
    ) -> None:
        """Both keys are sent as query parameters by default."""
        mock_session.request.return_value = make_response(200)

        client.request("GET", "/v1/integration/aws")

        params = mock_session.request.call_args.kwargs["params"]
        assert params == {"api_key": "test_api_key", "application_key": "test_app_key"}
        headers = mock_session.request.call_args.kwargs["headers"]
        assert "DD-API-KEY" not in headers

    def test_request_header_auth_mode(self, credentials: DDCredentials, mock_session: MagicMock) -> None:
        """Header mode moves keys out of the query string."""
        client = DDClient.from_credentials(credentials, auth_mode="headers")
        client._session = mock_session
        mock_session.request.return_value = make_response(200)

        client.request("GET", "/v1/integration/aws")

        call_kwargs = mock_session.request.call_args.kwargs
        assert call_kwargs["headers"]["DD-API-KEY"] == "test_api_key"
        assert call_kwargs["headers"]["DD-APPLICATION-KEY"] == "test_app_key"
        assert "api_key" not in call_kwargs["params"]

    def test_request_merges_extra_params(self, client: DDClient, mock_session: MagicMock) -> None:
        """Extra query parameters are sent alongside the credentials."""
        mock_session.request.return_value = make_response(200)

        client.request("PUT", "/v1/integration/aws", params={"account_id": "123"})

        params = mock_session.request.call_args.kwargs["params"]
        assert params["account_id"] == "123"
        assert params["api_key"] == "test_api_key"

    def test_request_serializes_model_without_unset_fields(
        self, client: DDClient, mock_session: MagicMock
    ) -> None:
        """Model bodies omit fields that were never set."""
        mock_session.request.return_value = make_response(200)

        client.request("POST", "/test", json_data=ServicePDRequest(service_name="svc"))

        assert sent_body(mock_session) == {"service_name": "svc"}

    def test_request_with_body_sets_content_type(
        self, client: DDClient, mock_session: MagicMock
    ) -> None:
        """Content-Type is application/json when a body is present."""
        mock_session.request.return_value = make_response(200)

        client.request("POST", "/test", json_data={"a": 1})

        headers = mock_session.request.call_args.kwargs["headers"]
        assert headers["Content-Type"] == "application/json"

    def test_request_without_body(self, client: DDClient, mock_session: MagicMock) -> None:
        """No body and no Content-Type when json_data is None."""
        mock_session.request.return_value = make_response(200)

        client.request("DELETE", "/test")

        call_kwargs = mock_session.request.call_args.kwargs
        assert call_kwargs["json"] is None
        assert "Content-Type" not in call_kwargs["headers"]

    def test_request_empty_model_sends_empty_object(
        self, client: DDClient, mock_session: MagicMock
    ) -> None:
        """A model with nothing set still sends {}."""
        mock_session.request.return_value = make_response(200)

        client.request("PUT", "/test", json_data=ServicePDRequest())

        assert sent_body(mock_session) == {}

    def test_request_uses_timeout(self, client: DDClient, mock_session: MagicMock) -> None:
        """Request uses configured timeout."""
        client.timeout = 45
        mock_session.request.return_value = make_response(200)

        client.request("GET", "/test")

        assert mock_session.request.call_args.kwargs["timeout"] == 45

    def test_request_rejects_unsupported_method(self, client: DDClient, mock_session: MagicMock) -> None:
        """Only GET, POST, PUT and DELETE are accepted."""
        with pytest.raises(ValueError):
            client.request("PATCH", "/test")

        mock_session.request.assert_not_called()

    def test_request_lowercase_method_normalized(
        self, client: DDClient, mock_session: MagicMock
    ) -> None:
        """Method is upper-cased before sending."""
        mock_session.request.return_value = make_response(200)

        client.request("get", "/test")

        assert mock_session.request.call_args.kwargs["method"] == "GET"


class TestResponseHandling:
    """Tests for _handle_response behaviour."""

    def test_success_without_model_discards_body(
        self, client: DDClient, mock_session: MagicMock
    ) -> None:
        """No response_model means the body is ignored."""
        mock_session.request.return_value = make_response(200, text="not json at all")

        assert client.request("POST", "/test") is None

    def test_success_decodes_model(self, client: DDClient, mock_session: MagicMock) -> None:
        """Body is decoded into the given model."""
        mock_session.request.return_value = make_response(
            200,
            json_data={"subdomain": "acme", "services": [{"service_name": "svc"}], "extra": 1},
        )

        result = client.request("GET", "/test", response_model=IntegrationPD)

        assert isinstance(result, IntegrationPD)
        assert result.subdomain == "acme"
        assert result.services is not None
        assert result.services[0].service_name == "svc"

    def test_success_decodes_list(self, client: DDClient, mock_session: MagicMock) -> None:
        """List response types are supported."""
        mock_session.request.return_value = make_response(
            200, json_data=[{"project_id": "p1"}, {"project_id": "p2"}]
        )

        result = client.request("GET", "/test", response_model=list[IntegrationGCP])

        assert [r.project_id for r in result] == ["p1", "p2"]

    def test_empty_body_with_model_raises_decode_error(
        self, client: DDClient, mock_session: MagicMock
    ) -> None:
        """An empty body where a response is expected is a DecodeError."""
        mock_session.request.return_value = make_response(200, text="")

        with pytest.raises(DecodeError):
            client.request("GET", "/test", response_model=IntegrationPD)

    def test_invalid_json_raises_decode_error(self, client: DDClient, mock_session: MagicMock) -> None:
        """Unparsable body is a DecodeError carrying the raw body."""
        mock_session.request.return_value = make_response(200, text="<html>oops</html>")

        with pytest.raises(DecodeError) as exc_info:
            client.request("GET", "/test", response_model=IntegrationPD)

        assert exc_info.value.body == "<html>oops</html>"

    def test_wrong_shape_raises_decode_error(self, client: DDClient, mock_session: MagicMock) -> None:
        """A body of the wrong shape is a DecodeError, not a partial result."""
        mock_session.request.return_value = make_response(200, json_data={"services": "nope"})

        with pytest.raises(DecodeError):
            client.request("GET", "/test", response_model=IntegrationPD)

    def test_error_list_becomes_messages(self, client: DDClient, mock_session: MagicMock) -> None:
        """Structured error body populates APIError.messages."""
        mock_session.request.return_value = make_response(500, json_data={"errors": ["bad request"]})

        with pytest.raises(APIError) as exc_info:
            client.request("GET", "/test")

        assert exc_info.value.status_code == 500
        assert exc_info.value.messages == ["bad request"]

    def test_400_raises_validation_error(self, client: DDClient, mock_session: MagicMock) -> None:
        """400 maps to APIValidationError, still an APIError."""
        mock_session.request.return_value = make_response(400, json_data={"errors": ["bad request"]})

        with pytest.raises(APIValidationError) as exc_info:
            client.request("POST", "/test", json_data={})

        assert isinstance(exc_info.value, APIError)
        assert exc_info.value.messages == ["bad request"]
        assert "bad request" in str(exc_info.value)

    @pytest.mark.parametrize("status", [401, 403])
    def test_auth_failures(self, client: DDClient, mock_session: MagicMock, status: int) -> None:
        """401 and 403 map to APIAuthenticationError."""
        mock_session.request.return_value = make_response(status, json_data={"errors": ["Forbidden"]})

        with pytest.raises(APIAuthenticationError) as exc_info:
            client.request("GET", "/test")

        assert exc_info.value.status_code == status

    def test_404_raises_not_found(self, client: DDClient, mock_session: MagicMock) -> None:
        """404 maps to APINotFoundError."""
        mock_session.request.return_value = make_response(404, json_data={"errors": ["Not Found"]})

        with pytest.raises(APINotFoundError):
            client.request("GET", "/test")

    def test_error_non_json_falls_back_to_raw_text(
        self, client: DDClient, mock_session: MagicMock
    ) -> None:
        """Non-JSON error bodies become a single raw message."""
        mock_session.request.return_value = make_response(502, text="Bad Gateway")

        with pytest.raises(APIError) as exc_info:
            client.request("GET", "/test")

        assert exc_info.value.messages == ["Bad Gateway"]
        assert exc_info.value.body == "Bad Gateway"

    def test_error_json_without_errors_key_falls_back(
        self, client: DDClient, mock_session: MagicMock
    ) -> None:
        """JSON bodies without an errors list also fall back to raw text."""
        mock_session.request.return_value = make_response(500, text='{"status": "error"}')

        with pytest.raises(APIError) as exc_info:
            client.request("GET", "/test")

        assert exc_info.value.messages == ['{"status": "error"}']

    def test_error_empty_body(self, client: DDClient, mock_session: MagicMock) -> None:
        """Empty error body gives an empty message list."""
        mock_session.request.return_value = make_response(503, text="")

        with pytest.raises(APIError) as exc_info:
            client.request("GET", "/test")

        assert exc_info.value.messages == []

    def test_error_is_not_retried(self, client: DDClient, mock_session: MagicMock) -> None:
        """A failed request is sent exactly once."""
        mock_session.request.return_value = make_response(500, json_data={"errors": ["boom"]})

        with pytest.raises(APIError):
            client.request("GET", "/test")

        assert mock_session.request.call_count == 1


class TestTransportErrors:
    """Tests for connectivity failures."""

    def test_connection_error(self, client: DDClient, mock_session: MagicMock) -> None:
        """Connection failures raise APIConnectionError, a TransportError."""
        mock_session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(TransportError) as exc_info:
            client.request("GET", "/v1/integration/gcp")

        assert isinstance(exc_info.value, APIConnectionError)
        assert not isinstance(exc_info.value, APIError)
        assert exc_info.value.path == "/v1/integration/gcp"

    def test_timeout_error(self, client: DDClient, mock_session: MagicMock) -> None:
        """Timeouts raise APITimeoutError."""
        mock_session.request.side_effect = requests.exceptions.ReadTimeout("slow")

        with pytest.raises(APITimeoutError):
            client.request("GET", "/test")

    def test_connect_timeout_is_timeout(self, client: DDClient, mock_session: MagicMock) -> None:
        """ConnectTimeout is reported as a timeout."""
        mock_session.request.side_effect = requests.exceptions.ConnectTimeout("slow")

        with pytest.raises(APITimeoutError):
            client.request("GET", "/test")

    def test_other_request_exception(self, client: DDClient, mock_session: MagicMock) -> None:
        """Other requests failures still surface as transport errors."""
        mock_session.request.side_effect = requests.exceptions.SSLError("bad cert")

        with pytest.raises(TransportError):
            client.request("GET", "/test")

    def test_transport_error_chains_cause(self, client: DDClient, mock_session: MagicMock) -> None:
        """Original requests exception is kept as __cause__."""
        original = requests.exceptions.ConnectionError("refused")
        mock_session.request.side_effect = original

        with pytest.raises(APIConnectionError) as exc_info:
            client.request("GET", "/test")

        assert exc_info.value.__cause__ is original


class TestConvenienceMethods:
    """Tests for verb helpers and service properties."""

    def test_put_passes_params(self, client: DDClient, mock_session: MagicMock) -> None:
        """put() forwards params and body."""
        mock_session.request.return_value = make_response(200)

        client.put("/test", json_data={"x": 1}, params={"y": "2"})

        call_kwargs = mock_session.request.call_args.kwargs
        assert call_kwargs["method"] == "PUT"
        assert call_kwargs["json"] == {"x": 1}
        assert call_kwargs["params"]["y"] == "2"

    def test_delete_with_body(self, client: DDClient, mock_session: MagicMock) -> None:
        """delete() can carry an identifying body."""
        mock_session.request.return_value = make_response(200)

        client.delete("/test", json_data={"account_id": "1"})

        call_kwargs = mock_session.request.call_args.kwargs
        assert call_kwargs["method"] == "DELETE"
        assert call_kwargs["json"] == {"account_id": "1"}

    def test_service_properties_are_cached(self, client: DDClient) -> None:
        """Service accessors return the same instance each time."""
        assert client.pagerduty is client.pagerduty
        assert client.slack.client is client
        assert client.aws.base_path == "/v1/integration/aws"
        assert client.gcp.base_path == "/v1/integration/gcp"
