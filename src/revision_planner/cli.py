"""CLI entry point for the revision planner."""

import logging
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from .exceptions import PlannerError
from .exporters import get_exporter
from .loader import PlannerData, load_planner
from .models import ItemKind, ScheduleResult
from .scheduler import create_scheduler
from .timeutils import parse_date

app = typer.Typer(
    name="revision-planner",
    help="Build a day-by-day revision schedule from a planner file",
    add_completion=False,
)
console = Console()

CONFIDENCE_STYLES = {"red": "bold red", "amber": "bold yellow", "green": "bold green"}


class OutputFormat(str, Enum):
    """Output format options."""

    json = "json"
    csv = "csv"
    excel = "excel"


def _load(planner_file: Path) -> PlannerData:
    """Load a planner file, exiting with an error message on failure."""
    try:
        with console.status("[bold green]Loading planner..."):
            return load_planner(planner_file)
    except PlannerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def _print_warnings(title: str, warnings: list[str]) -> None:
    if not warnings:
        return
    console.print(f"\n[bold yellow]{title} ({len(warnings)}):[/bold yellow]")
    for warning in warnings:
        console.print(f"  [yellow]• {warning}[/yellow]")


@app.command()
def schedule(
    planner_file: Annotated[
        Path,
        typer.Argument(help="Path to the planner JSON file"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Output file or directory path"),
    ] = None,
    format: Annotated[
        OutputFormat,
        typer.Option("-f", "--format", help="Output format"),
    ] = OutputFormat.json,
    study_minutes: Annotated[
        Optional[int],
        typer.Option("--study-minutes", help="Length of a study block in minutes"),
    ] = None,
    break_minutes: Annotated[
        Optional[int],
        typer.Option("--break-minutes", help="Length of a short break in minutes"),
    ] = None,
    lead_in_days: Annotated[
        Optional[int],
        typer.Option("--lead-in-days", help="Days before an exam when its entry becomes urgent"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Generate a revision schedule from a planner file."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    planner = _load(planner_file)

    try:
        scheduler = create_scheduler(
            study_block_minutes=study_minutes,
            break_block_minutes=break_minutes,
            lead_in_days=lead_in_days,
        )
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    with console.status("[bold green]Creating schedule..."):
        result = scheduler.schedule(planner.entries, planner.weekly_slots, planner.date_range)

    console.print(f"\n[bold]Revision Schedule for:[/bold] {planner_file.name}")
    console.print(f"  Entries: {len(planner.entries)}")
    console.print(f"  Weekly slots: {len(planner.weekly_slots)}")
    console.print(f"  Study blocks: {result.statistics.study_blocks}")
    console.print(f"  Study time: {_format_minutes(result.statistics.total_study_minutes)}")

    if verbose:
        _print_warnings("Planner warnings", planner.warnings)
        _show_entry_totals(result, planner)

    _print_warnings("Schedule warnings", result.warnings)

    if output:
        exporter = get_exporter(format.value)

        if format == OutputFormat.csv:
            # CSV exports to directory
            output_path = output if output.is_dir() else output.parent / output.stem
        else:
            if not output.suffix:
                output = output.with_suffix(".xlsx" if format == OutputFormat.excel else ".json")
            output_path = output

        with console.status(f"[bold green]Exporting to {format.value}..."):
            exporter.export(result, output_path)

        console.print(f"\n[bold green]✓[/bold green] Exported to: {output_path}")


@app.command()
def validate(
    planner_file: Annotated[
        Path,
        typer.Argument(help="Path to the planner JSON file"),
    ],
) -> None:
    """Validate a planner file without scheduling."""
    planner = _load(planner_file)

    console.print(f"\n[bold]Validation Results for:[/bold] {planner_file.name}")
    console.print(f"  Entries: {len(planner.entries)}")
    console.print(f"  Weekly slots: {len(planner.weekly_slots)}")
    if planner.date_range.is_valid:
        console.print(
            f"  Date range: {planner.date_range.start.isoformat()} to "
            f"{planner.date_range.end.isoformat()} ({planner.date_range.total_days} days)"
        )

    _print_warnings("Warnings", planner.warnings)

    valid = bool(planner.entries) and bool(planner.weekly_slots) and planner.date_range.is_valid
    if valid:
        console.print("\n[bold green]✓ Planner is valid[/bold green]")
    else:
        console.print("\n[bold red]✗ Planner cannot be scheduled[/bold red]")
        raise typer.Exit(1)


@app.command()
def show(
    planner_file: Annotated[
        Path,
        typer.Argument(help="Path to the planner JSON file"),
    ],
    day: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="Only show this date (YYYY-MM-DD)"),
    ] = None,
) -> None:
    """Print the schedule day by day."""
    selected: date | None = None
    if day:
        selected = parse_date(day)
        if selected is None:
            console.print(f"[bold red]Error:[/bold red] Invalid date: {day}. Use YYYY-MM-DD.")
            raise typer.Exit(1)

    planner = _load(planner_file)
    result = create_scheduler().schedule(
        planner.entries, planner.weekly_slots, planner.date_range
    )

    _print_warnings("Schedule warnings", result.warnings)

    days = result.items_by_date()
    if selected is not None:
        days = {selected: days.get(selected, [])}

    for current, items in days.items():
        table = Table(title=current.strftime("%A %d %B %Y"))
        table.add_column("Time", style="cyan")
        table.add_column("Task")
        table.add_column("RAG")
        table.add_column("Mins", justify="right", style="green")

        for item in items:
            confidence = item.confidence.value if item.confidence else ""
            rag = (
                f"[{CONFIDENCE_STYLES[confidence]}]{confidence.upper()}[/]"
                if confidence
                else ""
            )
            task = item.label if item.kind == ItemKind.STUDY else f"[dim]{item.label}[/dim]"
            table.add_row(
                f"{item.start_time}-{item.end_time}",
                task,
                rag,
                str(item.duration_minutes),
            )

        if not items:
            table.add_row("-", "[dim]Nothing scheduled[/dim]", "", "")

        console.print(table)


def _show_entry_totals(result: ScheduleResult, planner: PlannerData) -> None:
    """Show planned study time per entry."""
    table = Table(title="Study Time by Entry")
    table.add_column("Entry", style="cyan", max_width=40)
    table.add_column("RAG")
    table.add_column("Exam", style="blue")
    table.add_column("Planned", style="green", justify="right")

    by_entry = result.statistics.study_minutes_by_entry
    for entry in planner.entries:
        table.add_row(
            entry.subject_label[:40],
            entry.confidence.value.upper(),
            entry.exam_date.isoformat() if entry.exam_date else "-",
            _format_minutes(by_entry.get(entry.id, 0)),
        )

    console.print(table)


def _format_minutes(total: int) -> str:
    """Format minutes as e.g. "2h 40m"."""
    if total <= 0:
        return "0m"
    hours, minutes = divmod(total, 60)
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    return " ".join(parts)


if __name__ == "__main__":
    app()
