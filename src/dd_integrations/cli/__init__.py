"""
CLI module for dd-integrations.

Provides the `ddi` command-line interface.
"""

from __future__ import annotations

from dd_integrations.cli.main import app, cli

__all__ = ["app", "cli"]
