"""
Pydantic models for dd-integrations.

Contains request and response records for:
- PagerDuty: integration and service objects
- Slack: service hooks and channels
- AWS: accounts and log collection
- GCP: service-account integrations
"""

from __future__ import annotations

from dd_integrations.models.aws import (
    IntegrationAWSAccount,
    IntegrationAWSAccountCreateResponse,
    IntegrationAWSAccountDeleteRequest,
    IntegrationAWSAccountGetResponse,
    IntegrationAWSLambdaARN,
    IntegrationAWSLambdaARNRequest,
    IntegrationAWSLogCollection,
    IntegrationAWSServicesLogCollection,
)
from dd_integrations.models.base import DDModel, StringBool
from dd_integrations.models.gcp import (
    IntegrationGCP,
    IntegrationGCPCreateRequest,
    IntegrationGCPDeleteRequest,
    IntegrationGCPUpdateRequest,
)
from dd_integrations.models.pagerduty import (
    IntegrationPD,
    IntegrationPDRequest,
    ServicePDKeyUpdate,
    ServicePDRequest,
)
from dd_integrations.models.slack import (
    ChannelSlackRequest,
    IntegrationSlackRequest,
    ServiceHookSlackRequest,
)

__all__ = [  # noqa: RUF022
    # Base
    "DDModel",
    "StringBool",
    # PagerDuty
    "IntegrationPD",
    "IntegrationPDRequest",
    "ServicePDRequest",
    "ServicePDKeyUpdate",
    # Slack
    "IntegrationSlackRequest",
    "ServiceHookSlackRequest",
    "ChannelSlackRequest",
    # AWS
    "IntegrationAWSAccount",
    "IntegrationAWSAccountCreateResponse",
    "IntegrationAWSAccountGetResponse",
    "IntegrationAWSAccountDeleteRequest",
    "IntegrationAWSLambdaARN",
    "IntegrationAWSLambdaARNRequest",
    "IntegrationAWSLogCollection",
    "IntegrationAWSServicesLogCollection",
    # GCP
    "IntegrationGCP",
    "IntegrationGCPCreateRequest",
    "IntegrationGCPUpdateRequest",
    "IntegrationGCPDeleteRequest",
]
