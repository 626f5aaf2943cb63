"""
Constants, default values, and API endpoints for dd-integrations.

This module provides centralized configuration for:
- Datadog API host, base path and defaults
- Integration endpoint paths
- Google service-account defaults used by the GCP integration
"""

from __future__ import annotations

from typing import Final

# =============================================================================
# Datadog API Configuration
# =============================================================================


class DDAPIConfig:
    """Datadog HTTP API configuration constants."""

    DEFAULT_HOST: Final[str] = "https://api.datadoghq.com"
    BASE_PATH: Final[str] = "/api"

    DEFAULT_TIMEOUT: Final[int] = 30

    # Credential query parameters
    API_KEY_PARAM: Final[str] = "api_key"
    APP_KEY_PARAM: Final[str] = "application_key"

    # Credential headers (alternative to query parameters)
    API_KEY_HEADER: Final[str] = "DD-API-KEY"
    APP_KEY_HEADER: Final[str] = "DD-APPLICATION-KEY"

    ALLOWED_METHODS: Final[frozenset[str]] = frozenset({"GET", "POST", "PUT", "DELETE"})


class DDEndpoints:
    """Datadog integration endpoint paths."""

    # Key check used by `ddi config test`
    VALIDATE: Final[str] = "/v1/validate"

    # =========================================================================
    # PagerDuty
    # =========================================================================
    PAGERDUTY: Final[str] = "/v1/integration/pagerduty"
    PAGERDUTY_SERVICES: Final[str] = "/v1/integration/pagerduty/configuration/services"
    PAGERDUTY_SERVICE_BY_NAME: Final[str] = (
        "/v1/integration/pagerduty/configuration/services/{service_name}"
    )

    # =========================================================================
    # Slack
    # =========================================================================
    SLACK: Final[str] = "/v1/integration/slack"

    # =========================================================================
    # AWS
    # =========================================================================
    AWS: Final[str] = "/v1/integration/aws"
    AWS_LOGS: Final[str] = "/v1/integration/aws/logs"
    AWS_LOGS_SERVICES: Final[str] = "/v1/integration/aws/logs/services"

    # =========================================================================
    # Google Cloud Platform
    # =========================================================================
    GCP: Final[str] = "/v1/integration/gcp"
    GCP_HOST_FILTERS: Final[str] = "/v1/integration/gcp/host_filters"


class GCPDefaults:
    """Standard values for a Google service-account key file."""

    TYPE: Final[str] = "service_account"
    AUTH_URI: Final[str] = "https://accounts.google.com/o/oauth2/auth"
    TOKEN_URI: Final[str] = "https://accounts.google.com/o/oauth2/token"
    AUTH_PROVIDER_X509_CERT_URL: Final[str] = "https://www.googleapis.com/oauth2/v1/certs"
    CLIENT_X509_CERT_URL: Final[str] = "https://www.googleapis.com/robot/v1/metadata/x509/{client_email}"
