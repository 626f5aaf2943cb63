"""
AWS integration commands.

Provides commands for AWS accounts and AWS log collection.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from dd_integrations.cli.utils import api_errors, get_client, load_model_file, print_json
from dd_integrations.models.aws import (
    IntegrationAWSAccount,
    IntegrationAWSAccountDeleteRequest,
    IntegrationAWSLambdaARNRequest,
    IntegrationAWSServicesLogCollection,
)

app = typer.Typer(help="Manage the AWS integration")
console = Console()


@app.command("list")
def list_accounts(
    format: Annotated[str, typer.Option("--format", help="Output format: table, json, ids")] = "table",
) -> None:
    """List AWS accounts."""
    client = get_client(console)

    with api_errors("list AWS accounts", console):
        accounts = client.aws.list()

    if format == "json":
        print_json(accounts, console)
    elif format == "ids":
        for account in accounts:
            console.print(account.account_id)
    else:
        if not accounts:
            console.print("[dim]No AWS accounts found[/dim]")
            return

        table = Table(title=f"AWS Accounts ({len(accounts)})")
        table.add_column("Account ID", style="cyan", no_wrap=True)
        table.add_column("Role")
        table.add_column("Host tags")
        table.add_column("Filter tags")

        for account in accounts:
            table.add_row(
                account.account_id or "",
                account.role_name or "",
                ", ".join(account.host_tags or []),
                ", ".join(account.filter_tags or []),
            )
        console.print(table)


@app.command("create")
def create_account(
    file: Annotated[Path, typer.Argument(help="JSON file with the account payload")],
) -> None:
    """Add an AWS account and print the external ID for its IAM role."""
    account = load_model_file(file, IntegrationAWSAccount, console)
    client = get_client(console)

    with api_errors("create AWS account", console):
        response = client.aws.create(account)
    console.print(f"[green]Created AWS account {account.account_id}[/green]")
    console.print(f"External ID: {response.external_id}")


@app.command("update")
def update_account(
    file: Annotated[Path, typer.Argument(help="JSON file with the account payload")],
) -> None:
    """Update an AWS account (account_id and role_name must be in the file)."""
    account = load_model_file(file, IntegrationAWSAccount, console)
    client = get_client(console)

    with api_errors("update AWS account", console):
        client.aws.update(account)
    console.print(f"[green]Updated AWS account {account.account_id}[/green]")


@app.command("delete")
def delete_account(
    account_id: Annotated[str, typer.Argument(help="AWS account ID")],
    role_name: Annotated[str, typer.Argument(help="IAM role name")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove an AWS account."""
    if not force:
        confirm = typer.confirm(f"Delete AWS account {account_id} ({role_name})?")
        if not confirm:
            console.print("[dim]Cancelled[/dim]")
            raise typer.Exit(0)

    client = get_client(console)
    with api_errors("delete AWS account", console):
        client.aws.delete(
            IntegrationAWSAccountDeleteRequest(account_id=account_id, role_name=role_name)
        )
    console.print(f"[green]Deleted AWS account {account_id}[/green]")


# ============================================================================
# Log Collection
# ============================================================================


@app.command("logs")
def list_log_collection(
    format: Annotated[str, typer.Option("--format", help="Output format: table, json")] = "table",
) -> None:
    """Show AWS log collection configuration."""
    client = get_client(console)

    with api_errors("get AWS log collection", console):
        collections = client.aws.get_log_collection()

    if format == "json":
        print_json(collections, console)
        return

    table = Table(title=f"AWS Log Collection ({len(collections)})")
    table.add_column("Account ID", style="cyan", no_wrap=True)
    table.add_column("Lambdas")
    table.add_column("Services")

    for collection in collections:
        table.add_row(
            collection.account_id or "",
            "\n".join(lam.arn or "" for lam in collection.lambdas or []),
            ", ".join(collection.services or []),
        )
    console.print(table)


@app.command("attach-lambda")
def attach_lambda(
    account_id: Annotated[str, typer.Argument(help="AWS account ID")],
    lambda_arn: Annotated[str, typer.Argument(help="Log forwarder Lambda ARN")],
) -> None:
    """Attach a log forwarder Lambda to an account."""
    client = get_client(console)

    with api_errors("attach Lambda", console):
        client.aws.attach_lambda_arn(
            IntegrationAWSLambdaARNRequest(account_id=account_id, lambda_arn=lambda_arn)
        )
    console.print(f"[green]Attached {lambda_arn} to {account_id}[/green]")


@app.command("detach-lambda")
def detach_lambda(
    account_id: Annotated[str, typer.Argument(help="AWS account ID")],
    lambda_arn: Annotated[str, typer.Argument(help="Log forwarder Lambda ARN")],
) -> None:
    """Remove a log forwarder Lambda from an account."""
    client = get_client(console)

    with api_errors("detach Lambda", console):
        client.aws.delete_log_collection(
            IntegrationAWSLambdaARNRequest(account_id=account_id, lambda_arn=lambda_arn)
        )
    console.print(f"[green]Detached {lambda_arn} from {account_id}[/green]")


@app.command("enable-logs")
def enable_logs(
    account_id: Annotated[str, typer.Argument(help="AWS account ID")],
    services: Annotated[
        list[str] | None, typer.Option("--service", "-s", help="AWS service (repeatable)")
    ] = None,
) -> None:
    """Enable log collection for AWS services on an account."""
    client = get_client(console)

    with api_errors("enable log collection", console):
        client.aws.enable_log_services(
            IntegrationAWSServicesLogCollection(account_id=account_id, services=services or [])
        )
    console.print(f"[green]Enabled log collection for {account_id}[/green]")
