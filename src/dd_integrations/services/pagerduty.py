"""
Service for the Datadog-PagerDuty integration.

Manages the integration as a whole and its individual service objects.
"""

from __future__ import annotations

import logging

from dd_integrations.api.client import DDClient
from dd_integrations.constants import DDEndpoints
from dd_integrations.core.exceptions import PayloadError
from dd_integrations.models.pagerduty import (
    IntegrationPD,
    IntegrationPDRequest,
    ServicePDKeyUpdate,
    ServicePDRequest,
)
from dd_integrations.services.base import BaseService

logger = logging.getLogger(__name__)


class PagerDutyIntegrationService(BaseService):
    """Service for managing the PagerDuty integration."""

    @property
    def base_path(self) -> str:
        return DDEndpoints.PAGERDUTY

    def create(self, integration: IntegrationPDRequest) -> None:
        """
        Set up the integration, or add services and schedules to it.

        Args:
            integration: Integration payload
        """
        self.client.put(self.base_path, json_data=integration)

    def update(self, integration: IntegrationPDRequest) -> None:
        """
        Update the integration, replacing existing values with the new ones.

        Args:
            integration: Integration payload
        """
        self.client.put(self.base_path, json_data=integration)

    def get(self) -> IntegrationPD:
        """Get the PagerDuty integration."""
        return self._fetch(IntegrationPD)

    def delete(self) -> None:
        """Remove the PagerDuty integration."""
        self._remove()

    # =========================================================================
    # Service Objects
    # =========================================================================

    def _service_path(self, service_name: str) -> str:
        if not service_name:
            raise PayloadError(ServicePDRequest.__name__, "service_name")
        return DDEndpoints.PAGERDUTY_SERVICE_BY_NAME.format(service_name=self._segment(service_name))

    def create_service(self, service: ServicePDRequest) -> None:
        """
        Create a single service object.

        The integration must already be activated.

        Args:
            service: Service name and key
        """
        self.client.post(DDEndpoints.PAGERDUTY_SERVICES, json_data=service)

    def update_service(self, service: ServicePDRequest) -> None:
        """
        Update a service object's key.

        Only the key is sent; the name addresses the object in the URL
        and is never part of the body.

        Args:
            service: Service with service_name set

        Raises:
            PayloadError: If service_name is not set
        """
        name = self._require(service, "service_name")
        body = ServicePDKeyUpdate()
        if service.is_set("service_key"):
            body = ServicePDKeyUpdate(service_key=service.service_key)
        logger.debug(f"Updating PagerDuty service {name}")
        self.client.put(self._service_path(name), json_data=body)

    def get_service(self, service_name: str) -> ServicePDRequest:
        """
        Get a single service object.

        The API never returns the service key, so it will be unset.

        Args:
            service_name: Service name

        Raises:
            PayloadError: If service_name is empty
        """
        return self._fetch(ServicePDRequest, self._service_path(service_name))

    def delete_service(self, service_name: str) -> None:
        """
        Delete a single service object.

        Args:
            service_name: Service name

        Raises:
            PayloadError: If service_name is empty
        """
        self._remove(path=self._service_path(service_name))


def pagerduty_service(client: DDClient) -> PagerDutyIntegrationService:
    """Create a PagerDutyIntegrationService instance."""
    return PagerDutyIntegrationService(client)
