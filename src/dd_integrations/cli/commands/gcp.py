"""
Google Cloud Platform integration commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from dd_integrations.cli.utils import api_errors, get_client, load_model_file, print_json
from dd_integrations.models.gcp import (
    IntegrationGCPCreateRequest,
    IntegrationGCPDeleteRequest,
    IntegrationGCPUpdateRequest,
)

app = typer.Typer(help="Manage Google Cloud Platform integrations")
console = Console()


@app.command("list")
def list_integrations(
    format: Annotated[str, typer.Option("--format", help="Output format: table, json")] = "table",
) -> None:
    """List GCP integrations."""
    client = get_client(console)

    with api_errors("list GCP integrations", console):
        integrations = client.gcp.list()

    if format == "json":
        print_json(integrations, console)
        return

    if not integrations:
        console.print("[dim]No GCP integrations found[/dim]")
        return

    table = Table(title=f"GCP Integrations ({len(integrations)})")
    table.add_column("Project", style="cyan", no_wrap=True)
    table.add_column("Client email")
    table.add_column("Host filters")

    for integration in integrations:
        table.add_row(
            integration.project_id or "",
            integration.client_email or "",
            integration.host_filters or "",
        )
    console.print(table)


@app.command("create")
def create_integration(
    key_file: Annotated[Path, typer.Argument(help="Service account JSON key file")],
    host_filters: Annotated[
        str | None, typer.Option("--host-filters", help="Comma-separated label filters")
    ] = None,
    defaults: Annotated[
        bool,
        typer.Option("--defaults/--no-defaults", help="Fill standard key-file values left unset"),
    ] = True,
) -> None:
    """Create a GCP integration from a service account key file."""
    integration = load_model_file(key_file, IntegrationGCPCreateRequest, console)
    if host_filters is not None:
        integration = integration.model_copy(update={"host_filters": host_filters})
    if defaults:
        integration = integration.with_defaults()

    client = get_client(console)
    with api_errors("create GCP integration", console):
        client.gcp.create(integration)
    console.print(f"[green]Created GCP integration for {integration.project_id}[/green]")


@app.command("host-filters")
def update_host_filters(
    project_id: Annotated[str, typer.Argument(help="GCP project ID")],
    client_email: Annotated[str, typer.Argument(help="Service account email")],
    host_filters: Annotated[str, typer.Argument(help="Comma-separated label filters ('' clears)")],
) -> None:
    """Replace the host filters of a GCP integration."""
    client = get_client(console)

    with api_errors("update GCP host filters", console):
        client.gcp.update(
            IntegrationGCPUpdateRequest(
                project_id=project_id,
                client_email=client_email,
                host_filters=host_filters,
            )
        )
    console.print(f"[green]Updated host filters for {project_id}[/green]")


@app.command("delete")
def delete_integration(
    project_id: Annotated[str, typer.Argument(help="GCP project ID")],
    client_email: Annotated[str, typer.Argument(help="Service account email")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Delete a GCP integration."""
    if not force:
        confirm = typer.confirm(f"Delete GCP integration for {project_id}?")
        if not confirm:
            console.print("[dim]Cancelled[/dim]")
            raise typer.Exit(0)

    client = get_client(console)
    with api_errors("delete GCP integration", console):
        client.gcp.delete(
            IntegrationGCPDeleteRequest(project_id=project_id, client_email=client_email)
        )
    console.print(f"[green]Deleted GCP integration for {project_id}[/green]")
