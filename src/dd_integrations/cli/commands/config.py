"""
Configuration management commands.

Provides commands for viewing configuration and checking credentials.
"""

from __future__ import annotations

from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from dd_integrations.cli.utils import api_errors, get_client
from dd_integrations.constants import DDEndpoints
from dd_integrations.core.config import get_settings

app = typer.Typer(help="Manage ddi configuration")
console = Console()


@app.command("show")
def show_config() -> None:
    """Show current configuration."""
    settings = get_settings()

    console.print("\n[bold cyan]General Settings[/bold cyan]")
    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="dim")
    table.add_column("Value")

    table.add_row("Debug mode", str(settings.debug))
    table.add_row("Log level", settings.log_level)
    console.print(table)

    console.print("\n[bold cyan]Datadog API[/bold cyan]")
    dd_table = Table(show_header=False, box=None)
    dd_table.add_column("Setting", style="dim")
    dd_table.add_column("Value")

    dd_table.add_row("Host", settings.host)
    dd_table.add_row("API Key", "[dim]****[/dim]" if settings.api_key.get_secret_value() else "[dim]Not set[/dim]")
    dd_table.add_row("App Key", "[dim]****[/dim]" if settings.app_key.get_secret_value() else "[dim]Not set[/dim]")
    dd_table.add_row("Auth mode", settings.auth_mode)
    dd_table.add_row("API Timeout", f"{settings.api_timeout}s")
    console.print(dd_table)

    console.print()
    if settings.has_credentials:
        console.print("[green]✓ Datadog credentials configured[/green]")
    else:
        console.print("[yellow]⚠ Datadog credentials not configured[/yellow]")
        console.print("\nSet these environment variables:")
        console.print("  export DATADOG_API_KEY=your-api-key")
        console.print("  export DATADOG_APP_KEY=your-application-key")
        console.print("  export DATADOG_HOST=https://api.datadoghq.com  # optional")


@app.command("test")
def test_connection() -> None:
    """Test Datadog API connection."""
    client = get_client(console)

    console.print(f"Testing connection to {client.api_url}...")

    with api_errors("validate credentials", console):
        response: dict[str, Any] = client.get(DDEndpoints.VALIDATE, response_model=dict[str, Any])

    if not response.get("valid", False):
        console.print("[red]✗ API key rejected[/red]")
        raise typer.Exit(1)

    console.print("[green]✓ Connected successfully![/green]")
