"""
Google Cloud Platform integration records.

A GCP integration is a Google service account key plus optional host
filters. The create payload mirrors the JSON key file Google issues.
"""

from __future__ import annotations

from typing import Any

from dd_integrations.constants import GCPDefaults
from dd_integrations.models.base import DDModel


class IntegrationGCP(DDModel):
    """A GCP integration as returned by the listing."""

    project_id: str | None = None
    client_email: str | None = None
    host_filters: str | None = None


class IntegrationGCPCreateRequest(DDModel):
    """
    Request payload for creating a GCP integration.

    Attributes:
        type: Key type, normally "service_account"
        project_id: GCP project ID
        private_key_id: Key ID from the key file
        private_key: PEM private key from the key file
        client_email: Service account email
        client_id: Service account numeric ID
        auth_uri: OAuth2 auth endpoint
        token_uri: OAuth2 token endpoint
        auth_provider_x509_cert_url: Google's cert listing
        client_x509_cert_url: The service account's cert URL
        host_filters: Comma-separated label filters for hosts
    """

    type: str | None = None
    project_id: str | None = None
    private_key_id: str | None = None
    private_key: str | None = None
    client_email: str | None = None
    client_id: str | None = None
    auth_uri: str | None = None
    token_uri: str | None = None
    auth_provider_x509_cert_url: str | None = None
    client_x509_cert_url: str | None = None
    host_filters: str | None = None

    def with_defaults(self) -> IntegrationGCPCreateRequest:
        """
        Return a copy with Google's standard key-file values filled in.

        Only fields the caller left unset are filled. The client cert URL
        is derived from client_email and is skipped when no email is set.
        """
        defaults: dict[str, Any] = {
            "type": GCPDefaults.TYPE,
            "auth_uri": GCPDefaults.AUTH_URI,
            "token_uri": GCPDefaults.TOKEN_URI,
            "auth_provider_x509_cert_url": GCPDefaults.AUTH_PROVIDER_X509_CERT_URL,
        }
        if self.client_email:
            defaults["client_x509_cert_url"] = GCPDefaults.CLIENT_X509_CERT_URL.format(
                client_email=self.client_email
            )

        update = {k: v for k, v in defaults.items() if not self.is_set(k)}
        return self.model_copy(update=update)


class IntegrationGCPUpdateRequest(DDModel):
    """Request payload for updating host filters on a GCP integration."""

    project_id: str | None = None
    client_email: str | None = None
    host_filters: str | None = None


class IntegrationGCPDeleteRequest(DDModel):
    """Identifies the GCP integration to remove."""

    project_id: str | None = None
    client_email: str | None = None
