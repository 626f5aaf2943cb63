"""
AWS integration records.

Covers AWS accounts (role delegation) and AWS log collection
(Lambda forwarders and per-service log shipping).
"""

from __future__ import annotations

from dd_integrations.models.base import DDModel


class IntegrationAWSAccount(DDModel):
    """
    An AWS account in the AWS integration.

    Attributes:
        account_id: AWS account ID
        role_name: IAM role Datadog assumes
        filter_tags: EC2 tags (key:value) restricting collected hosts
        host_tags: Tags added to every host from this account
        account_specific_namespace_rules: Namespace name -> enabled
    """

    account_id: str | None = None
    role_name: str | None = None
    filter_tags: list[str] | None = None
    host_tags: list[str] | None = None
    account_specific_namespace_rules: dict[str, bool] | None = None


class IntegrationAWSAccountCreateResponse(DDModel):
    """Returned when an account is added; use external_id in the IAM trust policy."""

    external_id: str | None = None


class IntegrationAWSAccountGetResponse(DDModel):
    """Envelope of the account listing."""

    accounts: list[IntegrationAWSAccount] | None = None


class IntegrationAWSAccountDeleteRequest(DDModel):
    """Identifies the account to remove."""

    account_id: str | None = None
    role_name: str | None = None


class IntegrationAWSLambdaARNRequest(DDModel):
    """Attach or detach a log-forwarder Lambda for an account."""

    account_id: str | None = None
    lambda_arn: str | None = None


class IntegrationAWSLambdaARN(DDModel):
    """A Lambda entry in the log collection listing."""

    arn: str | None = None


class IntegrationAWSServicesLogCollection(DDModel):
    """Enable log collection for the given AWS services (e.g. s3, elb)."""

    account_id: str | None = None
    services: list[str] | None = None


class IntegrationAWSLogCollection(DDModel):
    """Log collection configuration for one account."""

    account_id: str | None = None
    lambdas: list[IntegrationAWSLambdaARN] | None = None
    services: list[str] | None = None
