"""
Main CLI entry point for dd-integrations.

Provides the `ddi` command with subcommands for:
- config: Configuration inspection and credential check
- pagerduty: PagerDuty integration and service objects
- slack: Slack integration
- aws: AWS accounts and log collection
- gcp: Google Cloud Platform integrations
"""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from dd_integrations import __version__
from dd_integrations.cli.commands import aws, config, gcp, pagerduty, slack
from dd_integrations.core.config import get_settings

# Main CLI app
app = typer.Typer(
    name="ddi",
    help="Datadog integrations - manage PagerDuty, Slack, AWS and GCP integrations",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Rich console for formatted output
console = Console()


def _configure_logging(debug: bool, log_level: str) -> None:
    """Route log records through rich; urllib3 stays at WARNING unless debugging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, log_level),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=debug, rich_tracebacks=True)],
    )
    if not debug:
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"ddi version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            envvar="DATADOG_DEBUG",
            help="Enable debug output",
        ),
    ] = False,
) -> None:
    """
    DDI - Datadog integrations.

    Configure the integrations Datadog keeps with PagerDuty, Slack,
    AWS and Google Cloud Platform.
    """
    settings = get_settings()
    _configure_logging(debug or settings.debug, settings.log_level)


# Register command groups
app.add_typer(config.app, name="config", help="Manage ddi configuration")
app.add_typer(pagerduty.app, name="pagerduty", help="Manage the PagerDuty integration")
app.add_typer(pagerduty.app, name="pd", help="Manage the PagerDuty integration (alias)", hidden=True)
app.add_typer(slack.app, name="slack", help="Manage the Slack integration")
app.add_typer(aws.app, name="aws", help="Manage the AWS integration")
app.add_typer(gcp.app, name="gcp", help="Manage GCP integrations")


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
