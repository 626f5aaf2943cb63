"""
Slack integration commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from dd_integrations.cli.utils import api_errors, get_client, load_model_file, print_json
from dd_integrations.models.slack import IntegrationSlackRequest

app = typer.Typer(help="Manage the Slack integration")
console = Console()


@app.command("get")
def get_integration(
    format: Annotated[str, typer.Option("--format", help="Output format: table, json")] = "table",
) -> None:
    """Show the Slack integration."""
    client = get_client(console)

    with api_errors("get Slack integration", console):
        integration = client.slack.get()

    if format == "json":
        print_json(integration, console)
        return

    channels = integration.channels or []
    table = Table(title=f"Slack Channels ({len(channels)})")
    table.add_column("Channel", style="cyan")
    table.add_column("Account")
    table.add_column("Transfer comments")

    for channel in channels:
        table.add_row(
            channel.channel_name or "",
            channel.account or "",
            "yes" if channel.transfer_all_user_comments else "no",
        )
    console.print(table)


@app.command("create")
def create_integration(
    file: Annotated[Path, typer.Argument(help="JSON file with service_hooks and channels")],
) -> None:
    """Set up the Slack integration, or add channels to it."""
    integration = load_model_file(file, IntegrationSlackRequest, console)
    client = get_client(console)

    with api_errors("create Slack integration", console):
        client.slack.create(integration)
    console.print("[green]Created Slack integration[/green]")


@app.command("update")
def update_integration(
    file: Annotated[Path, typer.Argument(help="JSON file with service_hooks and channels")],
) -> None:
    """Replace the Slack integration configuration."""
    integration = load_model_file(file, IntegrationSlackRequest, console)
    client = get_client(console)

    with api_errors("update Slack integration", console):
        client.slack.update(integration)
    console.print("[green]Updated Slack integration[/green]")


@app.command("delete")
def delete_integration(
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove the Slack integration."""
    if not force:
        confirm = typer.confirm("Delete the Slack integration?")
        if not confirm:
            console.print("[dim]Cancelled[/dim]")
            raise typer.Exit(0)

    client = get_client(console)
    with api_errors("delete Slack integration", console):
        client.slack.delete()
    console.print("[green]Deleted Slack integration[/green]")
