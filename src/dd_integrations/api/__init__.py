"""
Datadog API client.
"""

from __future__ import annotations

from dd_integrations.api.client import DDClient

__all__ = ["DDClient"]
