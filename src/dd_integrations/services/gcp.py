"""
Service for the Datadog-Google Cloud Platform integration.
"""

from __future__ import annotations

from dd_integrations.api.client import DDClient
from dd_integrations.constants import DDEndpoints
from dd_integrations.models.gcp import (
    IntegrationGCP,
    IntegrationGCPCreateRequest,
    IntegrationGCPDeleteRequest,
    IntegrationGCPUpdateRequest,
)
from dd_integrations.services.base import BaseService


class GCPIntegrationService(BaseService):
    """Service for managing Google Cloud Platform integrations."""

    @property
    def base_path(self) -> str:
        return DDEndpoints.GCP

    def list(self) -> list[IntegrationGCP]:
        """Get all GCP integrations."""
        return self._fetch(list[IntegrationGCP])

    def create(self, integration: IntegrationGCPCreateRequest) -> None:
        """
        Create a GCP integration from a service account key.

        The record is sent as given; call
        IntegrationGCPCreateRequest.with_defaults() first to fill the
        standard key-file values.

        Args:
            integration: Service account key fields
        """
        self.client.post(self.base_path, json_data=integration)

    def update(self, integration: IntegrationGCPUpdateRequest) -> None:
        """
        Update the host filters of a GCP integration.

        Args:
            integration: Project ID, client email and host filters
        """
        self.client.post(DDEndpoints.GCP_HOST_FILTERS, json_data=integration)

    def delete(self, integration: IntegrationGCPDeleteRequest) -> None:
        """
        Delete a GCP integration.

        Args:
            integration: Project ID and client email
        """
        self._remove(integration)


def gcp_service(client: DDClient) -> GCPIntegrationService:
    """Create a GCPIntegrationService instance."""
    return GCPIntegrationService(client)
