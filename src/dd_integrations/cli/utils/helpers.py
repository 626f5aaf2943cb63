"""
Helper utilities for CLI commands.

Provides common functionality for loading payload files, printing
records and reporting API failures.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console

from dd_integrations.core.exceptions import DDToolsError
from dd_integrations.models.base import DDModel

# Default console for error output
_console = Console()

M = TypeVar("M", bound=DDModel)

SECRET_FIELDS = ("api_token", "service_key", "private_key", "private_key_id")


def load_model_file(
    path: str | Path,
    model: type[M],
    console: Console | None = None,
) -> M:
    """Load a JSON file into a request record with error handling.

    Only keys present in the file become set fields, so the request
    carries exactly what the file holds.

    Args:
        path: Path to JSON file
        model: Record type to validate into
        console: Console for error output (uses default if None)

    Returns:
        Validated record

    Raises:
        typer.Exit: If file not found, invalid JSON or wrong shape
    """
    console = console or _console
    file_path = Path(path)

    if not file_path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)

    try:
        data = json.loads(file_path.read_text())
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON: {e}[/red]")
        raise typer.Exit(1) from None

    try:
        return model.model_validate(data)
    except ValidationError as e:
        console.print(f"[red]Invalid {model.__name__}: {e}[/red]")
        raise typer.Exit(1) from None


def mask_secrets(data: Any) -> Any:
    """Replace secret values in a payload dict (recursively) with '***'."""
    if isinstance(data, dict):
        return {
            k: ("***" if k in SECRET_FIELDS and v else mask_secrets(v)) for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_secrets(v) for v in data]
    return data


def print_json(data: DDModel | list[DDModel], console: Console | None = None) -> None:
    """Print one record or a list of records as masked JSON."""
    console = console or _console
    if isinstance(data, list):
        payload: Any = [item.to_payload() for item in data]
    else:
        payload = data.to_payload()
    console.print_json(data=mask_secrets(payload))


@contextmanager
def api_errors(action: str, console: Console | None = None) -> Iterator[None]:
    """Report dd-integrations errors in red and exit 1.

    Args:
        action: What was being attempted, e.g. "get Slack integration"
        console: Console for error output (uses default if None)
    """
    console = console or _console
    try:
        yield
    except DDToolsError as e:
        console.print(f"[red]Failed to {action}: {e}[/red]")
        raise typer.Exit(1) from None
