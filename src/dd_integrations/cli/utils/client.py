"""
Client utilities for CLI commands.

Provides authenticated API client access with consistent error handling.
"""

from __future__ import annotations

import typer
from rich.console import Console

from dd_integrations.api.client import DDClient
from dd_integrations.core.config import get_settings

# Default console for error output
_console = Console()


def get_client(console: Console | None = None) -> DDClient:
    """Get authenticated Datadog API client.

    Checks for valid credentials and returns a configured client.
    Exits with error message if credentials are not configured.

    Args:
        console: Console for error output (uses default if None)

    Returns:
        Configured DDClient instance

    Raises:
        typer.Exit: If credentials not configured
    """
    console = console or _console
    settings = get_settings()

    credentials = settings.credentials
    if credentials is None:
        console.print("[red]Error: Datadog credentials not configured[/red]")
        console.print(f"Missing: {', '.join(settings.missing_credentials)}")
        console.print("Run 'ddi config show' for setup instructions")
        raise typer.Exit(1)

    return DDClient.from_credentials(
        credentials,
        timeout=settings.api_timeout,
        auth_mode=settings.auth_mode,
    )
