"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..adapters.week_file import dump_week, load_week, save_week
from ..config import AppConfig
from ..domain.boundaries import validate_boundaries
from ..domain.error_keys import ErrorKey
from ..domain.exceptions import ReservationWindowsError
from ..domain.models import WEEKDAYS
from ..services.settings import APPLY_TO_ALL_PROMPT_KEY, ReservationSettingsService

app = typer.Typer(
    name="reservationwindows",
    help="Validate and normalize branch reservation time slots",
    add_completion=False
)

console = Console()

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES: Dict[str, str] = {
    ErrorKey.FORMAT.value: "Times must use the HH:mm format (00:00-23:59).",
    ErrorKey.ORDER.value: "The slot must end at least one minute after it starts.",
    ErrorKey.OVERLAP.value: "Slots on the same day must not overlap.",
    ErrorKey.OVERNIGHT_NOT_SUPPORTED.value: "Slots spanning midnight are not supported; split them into two slots.",
    ErrorKey.MAX.value: "Too many slots on this day.",
    APPLY_TO_ALL_PROMPT_KEY: "Replace the slots of every day with this day's slots?",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _build_translator(config: AppConfig):
    """Look up message text, falling back to the key itself."""
    messages = {**DEFAULT_MESSAGES, **config.messages}

    def translate(key: str) -> str:
        return messages.get(key, key)

    return translate


def _build_service(config: AppConfig) -> ReservationSettingsService:
    return ReservationSettingsService(
        translate=_build_translator(config),
        rules=config.get_slot_rules(),
        duration_rules=config.get_duration_rules(),
    )


@app.command()
def validate(
    week_file: Annotated[Path, typer.Argument(help="YAML or JSON file with the reservation week")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
):
    """
    Validate a reservation week and show the errors per day.

    Exits with status 1 when any day is invalid.
    """
    _configure_logging(verbose)

    try:
        config = AppConfig.load_or_default(config_file)
        service = _build_service(config)
        week = load_week(week_file)
    except (OSError, ValueError, ReservationWindowsError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    logger.debug("Validating %s with %s", week_file, service.slot_rules)
    verdict = service.validate(week)
    messages = service.error_messages(verdict)

    table = Table(
        title="Reservation slots",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Day", style="bold yellow")
    table.add_column("Slots")
    table.add_column("Status")

    for day in WEEKDAYS:
        slots = week.get(day.value) or []
        slot_text = ", ".join(escape(f"{start}-{end}") for start, end in slots) or "[dim]closed[/dim]"
        if day in messages:
            status = "\n".join(f"[red]✗ {escape(message)}[/red]" for message in messages[day])
        else:
            status = "[green]✓[/green]"
        table.add_row(day.value.capitalize(), slot_text, status)

    console.print()
    console.print(table)
    console.print()

    if not verdict.ok:
        console.print(f"[bold red]✗ {len(verdict.per_day)} day(s) with invalid slots.[/bold red]\n")
        raise typer.Exit(1)

    console.print("[bold green]✓ All reservation slots are valid.[/bold green]\n")


@app.command()
def normalize(
    week_file: Annotated[Path, typer.Argument(help="YAML or JSON file with the reservation week")],
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write the result here instead of stdout")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
):
    """
    Sort and deduplicate every day's slots.
    """
    _configure_logging(verbose)

    try:
        config = AppConfig.load_or_default(config_file)
        week = load_week(week_file)
    except (OSError, ValueError, ReservationWindowsError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    normalized = _build_service(config).normalize_week(week)

    if output is None:
        typer.echo(dump_week(normalized), nl=False)
        return

    try:
        save_week(normalized, output)
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[green]✓ Normalized week written to {output}[/green]")


@app.command()
def check_slot(
    start: Annotated[str, typer.Argument(help="Start time (HH:mm)")],
    end: Annotated[str, typer.Argument(help="End time (HH:mm)")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
):
    """
    Check a single slot against the boundary rules.
    """
    try:
        config = AppConfig.load_or_default(config_file)
    except (OSError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    result = validate_boundaries((start, end), min_duration=config.slots.min_duration_minutes)
    if result.ok:
        console.print(f"[green]✓ {escape(start)}-{escape(end)} is a valid slot.[/green]")
        return

    translate = _build_translator(config)
    console.print(f"[red]✗ {escape(start)}-{escape(end)}: {escape(translate(result.error.value))}[/red]")
    raise typer.Exit(1)


@app.command()
def check_duration(
    value: Annotated[str, typer.Argument(help="Reservation duration in minutes, e.g. 90 or \"90 min\"")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
):
    """
    Check a reservation duration against the configured bounds.
    """
    try:
        config = AppConfig.load_or_default(config_file)
    except (OSError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    service = _build_service(config)
    bounds = service.duration_rules
    minutes = service.sanitize_duration(value)
    if minutes is None:
        console.print(
            f"[red]✗ {escape(value)} is not a usable duration "
            f"({bounds.min_minutes}-{bounds.max_minutes} minutes).[/red]"
        )
        raise typer.Exit(1)

    console.print(f"[green]✓ Duration: {minutes} minutes[/green]")


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]reservationwindows[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
