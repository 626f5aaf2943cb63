"""
Slack integration records.
"""

from __future__ import annotations

from dd_integrations.models.base import DDModel, StringBool


class ServiceHookSlackRequest(DDModel):
    """Incoming-webhook hook for one Slack account."""

    account: str | None = None
    url: str | None = None


class ChannelSlackRequest(DDModel):
    """
    A Slack channel Datadog may post to.

    ``transfer_all_user_comments`` is a string-encoded boolean on the wire.
    """

    channel_name: str | None = None
    transfer_all_user_comments: StringBool | None = None
    account: str | None = None


class IntegrationSlackRequest(DDModel):
    """
    Request payload for creating and updating the Slack integration.

    Also the shape returned by a GET. ``run_check`` is a string-encoded
    boolean on the wire.
    """

    service_hooks: list[ServiceHookSlackRequest] | None = None
    channels: list[ChannelSlackRequest] | None = None
    run_check: StringBool | None = None
