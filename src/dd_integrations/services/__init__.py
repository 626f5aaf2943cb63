"""
Service modules for dd-integrations.

One service per Datadog integration, built on top of the API client.
"""

from __future__ import annotations

from dd_integrations.services.aws import AWSIntegrationService, aws_service
from dd_integrations.services.base import BaseService
from dd_integrations.services.gcp import GCPIntegrationService, gcp_service
from dd_integrations.services.pagerduty import PagerDutyIntegrationService, pagerduty_service
from dd_integrations.services.slack import SlackIntegrationService, slack_service

__all__ = [  # noqa: RUF022
    # Base
    "BaseService",
    # PagerDuty
    "PagerDutyIntegrationService",
    "pagerduty_service",
    # Slack
    "SlackIntegrationService",
    "slack_service",
    # AWS
    "AWSIntegrationService",
    "aws_service",
    # GCP
    "GCPIntegrationService",
    "gcp_service",
]
