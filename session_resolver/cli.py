"""Session resolver CLI.

Developer CLI that runs the resolution and validation passes over a request
file, using the same code path as the editing session.

Request file shape:
    {
        "sessionInputs": {...},     # camelCase session input fields
        "profile": {...} | null,    # camelCase profile fields
        "muscleSelection": {"selectedGroups": [...], "selectedMuscles": {...}} | null,
        "explicit": {...} | null    # snake_case explicit form fields
    }
"""

import json
from pathlib import Path
from typing import Any

import typer
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from session_resolver.core.logger import setup_logger
from session_resolver.muscles.types import MuscleSelectionData
from session_resolver.profile.integration import create_profile_context
from session_resolver.profile.types import UserProfile
from session_resolver.resolution.debug import mapping_debug_info
from session_resolver.resolution.resolver import resolve
from session_resolver.resolution.types import ExplicitFields
from session_resolver.session.types import SessionInputs
from session_resolver.validation.validators import (
    missing_required_fields,
    panel_status,
    validate,
    validate_resolved,
)

console = Console()

app = typer.Typer(
    name="session-resolver",
    help="Session parameter resolution - resolve and validate workout requests offline",
    add_completion=False,
)


class ResolutionRequest(BaseModel):
    """Everything a single resolution pass reads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    session_inputs: SessionInputs = Field(default_factory=SessionInputs)
    profile: UserProfile | None = None
    muscle_selection: MuscleSelectionData | None = None
    explicit: ExplicitFields | None = None


def _load_request(request_file: Path) -> ResolutionRequest:
    try:
        raw = json.loads(request_file.read_text(encoding="utf-8"))
    except FileNotFoundError:
        console.print(f"[red]Error:[/red] request file not found: {request_file}")
        raise typer.Exit(2) from None
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] request file is not valid JSON: {e}")
        raise typer.Exit(2) from None

    try:
        return ResolutionRequest.model_validate(raw)
    except ValidationError as e:
        console.print(f"[red]Error:[/red] request does not match the expected shape:\n{e}")
        raise typer.Exit(2) from None


def _print_json(title: str, payload: dict[str, Any], border_style: str = "cyan") -> None:
    console.print(Panel(JSON(json.dumps(payload, ensure_ascii=False)), title=title, border_style=border_style))


@app.callback()
def main(
    debug: bool = typer.Option(False, "--log-debug", help="Enable debug logging"),
) -> None:
    setup_logger(level="DEBUG" if debug else None)


@app.command("resolve")
def resolve_command(
    request_file: Path = typer.Argument(..., help="Path to the request JSON file"),
    debug: bool = typer.Option(False, "--debug", help="Include the mapping verification block"),
) -> None:
    """Resolve a request file into the canonical generation payload."""
    request = _load_request(request_file)
    context = create_profile_context(request.profile)
    resolved = resolve(request.session_inputs, context, request.muscle_selection, request.explicit)

    _print_json("Resolved parameters", resolved.to_payload())
    if debug:
        _print_json("Mapping verification", mapping_debug_info(request.session_inputs, context, resolved), "magenta")

    logger.bind(request_file=str(request_file)).info("Resolution completed")


@app.command("validate")
def validate_command(
    request_file: Path = typer.Argument(..., help="Path to the request JSON file"),
) -> None:
    """Validate a request file; exits with code 1 when it is not submittable."""
    request = _load_request(request_file)
    context = create_profile_context(request.profile)
    resolved = resolve(request.session_inputs, context, request.muscle_selection, request.explicit)

    input_result = validate(request.session_inputs)
    resolved_result = validate_resolved(resolved)
    status = panel_status(request.session_inputs, request.explicit)
    missing = missing_required_fields(request.session_inputs, request.explicit)

    errors = {**input_result.errors, **{f"resolved.{k}": v for k, v in resolved_result.errors.items()}}
    is_valid = not errors

    table = Table(title="Panels")
    table.add_column("Panel")
    table.add_column("Filled")
    for name, filled in status.items():
        if name == "completion_percentage":
            continue
        table.add_row(name.removeprefix("has_"), "✓" if filled else "✗")
    console.print(table)

    for field, message in errors.items():
        console.print(f"  [red]✗[/red] {field}: {message}")
    if missing:
        console.print(f"[yellow]Missing required fields:[/yellow] {', '.join(missing)}")

    status_text = "Request is valid" if is_valid else "Request is invalid"
    console.print(
        Panel(
            Text(status_text, style="bold green" if is_valid else "bold red"),
            subtitle=f"Completion: {status['completion_percentage']}%",
            border_style="green" if is_valid else "red",
        )
    )

    if not is_valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
