"""
Service for the Datadog-AWS integration.

Provides operations for AWS accounts and AWS log collection.
"""

from __future__ import annotations

import logging

from dd_integrations.api.client import DDClient
from dd_integrations.constants import DDEndpoints
from dd_integrations.models.aws import (
    IntegrationAWSAccount,
    IntegrationAWSAccountCreateResponse,
    IntegrationAWSAccountDeleteRequest,
    IntegrationAWSAccountGetResponse,
    IntegrationAWSLambdaARNRequest,
    IntegrationAWSLogCollection,
    IntegrationAWSServicesLogCollection,
)
from dd_integrations.services.base import BaseService

logger = logging.getLogger(__name__)


class AWSIntegrationService(BaseService):
    """
    Service for managing AWS accounts in the AWS integration.

    Usage:
        svc = AWSIntegrationService(client)
        resp = svc.create(IntegrationAWSAccount(account_id="123", role_name="DatadogRole"))
        print(resp.external_id)
    """

    @property
    def base_path(self) -> str:
        return DDEndpoints.AWS

    def create(self, account: IntegrationAWSAccount) -> IntegrationAWSAccountCreateResponse:
        """
        Add an AWS account to the integration.

        Args:
            account: Account to add

        Returns:
            Response holding the external ID for the IAM trust policy
        """
        return self.client.post(
            self.base_path,
            json_data=account,
            response_model=IntegrationAWSAccountCreateResponse,
        )

    def update(self, account: IntegrationAWSAccount) -> None:
        """
        Update an existing AWS account.

        The account is addressed by account_id and role_name query
        parameters; the full record is also sent as the body.

        Args:
            account: Account with account_id and role_name set

        Raises:
            PayloadError: If account_id or role_name is not set
        """
        params = {
            "account_id": self._require(account, "account_id"),
            "role_name": self._require(account, "role_name"),
        }
        logger.debug(f"Updating AWS account {params['account_id']}")
        self.client.put(self.base_path, json_data=account, params=params)

    def list(self) -> list[IntegrationAWSAccount]:
        """Get all AWS accounts in the integration."""
        response: IntegrationAWSAccountGetResponse = self._fetch(IntegrationAWSAccountGetResponse)
        return response.accounts or []

    def delete(self, account: IntegrationAWSAccountDeleteRequest) -> None:
        """
        Remove an AWS account from the integration.

        Args:
            account: Account ID and role name
        """
        self._remove(account)

    # =========================================================================
    # Log Collection
    # =========================================================================

    def attach_lambda_arn(self, lambda_arn: IntegrationAWSLambdaARNRequest) -> None:
        """
        Attach a log-forwarder Lambda ARN to an account.

        Args:
            lambda_arn: Account ID and Lambda ARN
        """
        self.client.post(DDEndpoints.AWS_LOGS, json_data=lambda_arn)

    def enable_log_services(self, services: IntegrationAWSServicesLogCollection) -> None:
        """
        Enable log collection for AWS services on an account.

        Args:
            services: Account ID and service names (e.g. ["s3", "elb"])
        """
        self.client.post(DDEndpoints.AWS_LOGS_SERVICES, json_data=services)

    def get_log_collection(self) -> list[IntegrationAWSLogCollection]:
        """Get the log collection configuration of every account."""
        return self._fetch(list[IntegrationAWSLogCollection], DDEndpoints.AWS_LOGS)

    def delete_log_collection(self, lambda_arn: IntegrationAWSLambdaARNRequest) -> None:
        """
        Remove the log collection configuration for an ARN and account.

        Args:
            lambda_arn: Account ID and Lambda ARN
        """
        self._remove(lambda_arn, DDEndpoints.AWS_LOGS)


def aws_service(client: DDClient) -> AWSIntegrationService:
    """Create an AWSIntegrationService instance."""
    return AWSIntegrationService(client)
