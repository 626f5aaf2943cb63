"""
CLI command modules for dd-integrations.
"""

from __future__ import annotations

from dd_integrations.cli.commands import (
    aws,
    config,
    gcp,
    pagerduty,
    slack,
)

__all__ = [
    "aws",
    "config",
    "gcp",
    "pagerduty",
    "slack",
]
