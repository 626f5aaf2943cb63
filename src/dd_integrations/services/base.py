"""
Base service class for Datadog integration operations.

Provides the request plumbing shared by the integration-specific
service classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote

from dd_integrations.api.client import DDClient
from dd_integrations.core.exceptions import PayloadError
from dd_integrations.models.base import DDModel


class BaseService(ABC):
    """
    Base class for Datadog integration services.

    Each integration lives under one base path; subclasses define it and
    add one method per endpoint.

    Usage:
        class SlackIntegrationService(BaseService):
            @property
            def base_path(self) -> str:
                return "/v1/integration/slack"

        svc = SlackIntegrationService(client)
        svc.delete()
    """

    def __init__(self, client: DDClient):
        """
        Initialize service with an authenticated API client.

        Args:
            client: Configured DDClient instance
        """
        self.client = client

    @property
    @abstractmethod
    def base_path(self) -> str:
        """Return the base API path for this integration (e.g., '/v1/integration/slack')."""
        ...

    @staticmethod
    def _segment(value: str) -> str:
        """URL-quote a value interpolated into a path segment."""
        return quote(value, safe="")

    def _fetch(self, response_model: Any, path: str | None = None) -> Any:
        """GET a path and decode it into response_model."""
        return self.client.get(path or self.base_path, response_model=response_model)

    def _remove(self, data: DDModel | None = None, path: str | None = None) -> None:
        """DELETE a path, optionally with an identifying body."""
        self.client.delete(path or self.base_path, json_data=data)

    @staticmethod
    def _require(model: DDModel, field: str) -> Any:
        """Return a field's value, raising PayloadError when it is empty."""
        value = getattr(model, field)
        if value is None or value == "":
            raise PayloadError(type(model).__name__, field)
        return value
