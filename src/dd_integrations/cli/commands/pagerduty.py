"""
PagerDuty integration commands.

Provides commands for the PagerDuty integration and its service objects.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from dd_integrations.cli.utils import api_errors, get_client, load_model_file, print_json
from dd_integrations.models.pagerduty import IntegrationPDRequest, ServicePDRequest

app = typer.Typer(help="Manage the PagerDuty integration")
console = Console()


@app.command("get")
def get_integration(
    format: Annotated[str, typer.Option("--format", help="Output format: table, json")] = "table",
) -> None:
    """Show the PagerDuty integration."""
    client = get_client(console)

    with api_errors("get PagerDuty integration", console):
        integration = client.pagerduty.get()

    if format == "json":
        print_json(integration, console)
        return

    console.print(f"\n[bold cyan]PagerDuty[/bold cyan] subdomain: {integration.subdomain or 'N/A'}")

    services = integration.services or []
    table = Table(title=f"Services ({len(services)})")
    table.add_column("Name", style="cyan")
    for service in services:
        table.add_row(service.service_name or "")
    console.print(table)

    for schedule in integration.schedules or []:
        console.print(f"  schedule: {schedule}")


@app.command("update")
def update_integration(
    file: Annotated[Path, typer.Argument(help="JSON file with the integration payload")],
) -> None:
    """Create or update the PagerDuty integration from a JSON file."""
    integration = load_model_file(file, IntegrationPDRequest, console)
    client = get_client(console)

    with api_errors("update PagerDuty integration", console):
        client.pagerduty.update(integration)
    console.print("[green]Updated PagerDuty integration[/green]")


@app.command("delete")
def delete_integration(
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove the PagerDuty integration."""
    if not force:
        confirm = typer.confirm("Delete the PagerDuty integration?")
        if not confirm:
            console.print("[dim]Cancelled[/dim]")
            raise typer.Exit(0)

    client = get_client(console)
    with api_errors("delete PagerDuty integration", console):
        client.pagerduty.delete()
    console.print("[green]Deleted PagerDuty integration[/green]")


# ============================================================================
# Service Objects
# ============================================================================


@app.command("service-create")
def create_service(
    name: Annotated[str, typer.Argument(help="Service name")],
    key: Annotated[str, typer.Option("--key", "-k", help="PagerDuty integration key")],
) -> None:
    """Add a service object to the integration."""
    client = get_client(console)

    with api_errors(f"create service '{name}'", console):
        client.pagerduty.create_service(ServicePDRequest(service_name=name, service_key=key))
    console.print(f"[green]Created service '{name}'[/green]")


@app.command("service-get")
def get_service(
    name: Annotated[str, typer.Argument(help="Service name")],
) -> None:
    """Show a service object (the key is never returned)."""
    client = get_client(console)

    with api_errors(f"get service '{name}'", console):
        service = client.pagerduty.get_service(name)
    print_json(service, console)


@app.command("service-update")
def update_service(
    name: Annotated[str, typer.Argument(help="Service name")],
    key: Annotated[str, typer.Option("--key", "-k", help="New PagerDuty integration key")],
) -> None:
    """Replace a service object's integration key."""
    client = get_client(console)

    with api_errors(f"update service '{name}'", console):
        client.pagerduty.update_service(ServicePDRequest(service_name=name, service_key=key))
    console.print(f"[green]Updated service '{name}'[/green]")


@app.command("service-delete")
def delete_service(
    name: Annotated[str, typer.Argument(help="Service name")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Delete a service object."""
    if not force:
        confirm = typer.confirm(f"Delete service '{name}'?")
        if not confirm:
            console.print("[dim]Cancelled[/dim]")
            raise typer.Exit(0)

    client = get_client(console)
    with api_errors(f"delete service '{name}'", console):
        client.pagerduty.delete_service(name)
    console.print(f"[green]Deleted service '{name}'[/green]")
