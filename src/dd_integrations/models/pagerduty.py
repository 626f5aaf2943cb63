"""
PagerDuty integration records.

The integration holds a set of PagerDuty services (name + integration
key), the PagerDuty subdomain, schedule URLs and an API token.
"""

from __future__ import annotations

from dd_integrations.models.base import DDModel


class ServicePDRequest(DDModel):
    """
    A single PagerDuty service object.

    Attributes:
        service_name: Name Datadog uses to address the service (@pagerduty-<name>)
        service_key: PagerDuty integration key; never returned by the API
    """

    service_name: str | None = None
    service_key: str | None = None


class ServicePDKeyUpdate(DDModel):
    """Write shape for a service update; the name travels in the URL."""

    service_key: str | None = None


class IntegrationPDRequest(DDModel):
    """
    Request payload for creating and updating the PagerDuty integration.

    Attributes:
        services: Service objects to add
        subdomain: PagerDuty account subdomain
        schedules: Schedule URLs to link
        api_token: PagerDuty API token
        run_check: Validate the configuration against PagerDuty
    """

    services: list[ServicePDRequest] | None = None
    subdomain: str | None = None
    schedules: list[str] | None = None
    api_token: str | None = None
    run_check: bool | None = None


class IntegrationPD(DDModel):
    """The PagerDuty integration as returned by a GET."""

    services: list[ServicePDRequest] | None = None
    subdomain: str | None = None
    schedules: list[str] | None = None
    api_token: str | None = None
