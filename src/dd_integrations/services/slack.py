"""
Service for the Datadog-Slack integration.
"""

from __future__ import annotations

from dd_integrations.api.client import DDClient
from dd_integrations.constants import DDEndpoints
from dd_integrations.models.slack import IntegrationSlackRequest
from dd_integrations.services.base import BaseService


class SlackIntegrationService(BaseService):
    """Service for managing the Slack integration."""

    @property
    def base_path(self) -> str:
        return DDEndpoints.SLACK

    def create(self, integration: IntegrationSlackRequest) -> None:
        """
        Set up the integration, or add channels to it.

        Args:
            integration: Service hooks and channels
        """
        self.client.post(self.base_path, json_data=integration)

    def update(self, integration: IntegrationSlackRequest) -> None:
        """
        Update the integration, replacing existing values with the new ones.

        Args:
            integration: Service hooks and channels
        """
        self.client.put(self.base_path, json_data=integration)

    def get(self) -> IntegrationSlackRequest:
        """Get the Slack integration."""
        return self._fetch(IntegrationSlackRequest)

    def delete(self) -> None:
        """Remove the Slack integration."""
        self._remove()


def slack_service(client: DDClient) -> SlackIntegrationService:
    """Create a SlackIntegrationService instance."""
    return SlackIntegrationService(client)
