"""CLI for the task sequencer.

Reads a JSON task snapshot and prints sequences, execution plans and
dependency checks with rich terminal output.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from sequencer import __version__
from sequencer.config import settings
from sequencer.errors import SequencerError
from sequencer.logging import configure_logging
from sequencer.logging.colors import (
    CORAL,
    ELECTRIC_PURPLE,
    ELECTRIC_YELLOW,
    ERROR_RED,
    NEON_CYAN,
    SUCCESS_GREEN,
)
from sequencer.models.tasks import Sequence, Task
from sequencer.tasks import load_tasks
from sequencer.tools import check_dependencies, create_sequences, plan_sequence

console = Console()
app = typer.Typer(
    name="sequencer",
    help="Order tasks into dependency-respecting parallel sequences",
    add_completion=False,
    no_args_is_help=True,
)

FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="Task snapshot (default: SEQUENCER_TASKS_FILE)"),
]
AllOption = Annotated[
    bool, typer.Option("--all", "-a", help="Include done/completed/closed tasks")
]


def success(message: str) -> None:
    """Print a success message."""
    console.print(f"[{SUCCESS_GREEN}]✓[/{SUCCESS_GREEN}] {escape(message)}")


def error(message: str) -> None:
    """Print an error message."""
    console.print(f"[{ERROR_RED}]✗[/{ERROR_RED}] {escape(message)}")


def print_json(data: object) -> None:
    """Print JSON to stdout without rich wrapping."""
    print(json.dumps(data, indent=2, default=str, ensure_ascii=False))


def _load(path: Path | None) -> list[Task]:
    return load_tasks(path or settings.tasks_file)


def display_sequences_plain(sequences: list[Sequence]) -> None:
    """Display sequences as plain text."""
    if not sequences:
        print("No tasks found to compute sequences.")
        return

    print("Task Sequences:")
    print()
    for sequence in sequences:
        print(f"Sequence {sequence.number}:")
        for task in sequence.tasks:
            priority = f"[{task.priority.upper()}] " if task.priority else ""
            print(f"  {priority}{task.id} - {task.title}")
        print()


def display_sequences(sequences: list[Sequence]) -> None:
    """Display sequences as one rich table per sequence."""
    if not sequences:
        console.print(f"[{ELECTRIC_YELLOW}]No tasks found to compute sequences.[/{ELECTRIC_YELLOW}]")
        return

    for sequence in sequences:
        table = Table(title=f"Sequence {sequence.number}", border_style=NEON_CYAN)
        table.add_column("ID", style=ELECTRIC_PURPLE)
        table.add_column("Title", style=NEON_CYAN)
        table.add_column("Status", style=CORAL)
        table.add_column("Priority")
        for task in sequence.tasks:
            table.add_row(
                escape(task.id),
                escape(task.title),
                escape(task.status),
                escape(task.priority or ""),
            )
        console.print(table)


@app.callback()
def _main() -> None:
    configure_logging(level=settings.log_level, json_output=settings.log_json)


@app.command()
def sequences(
    file: FileOption = None,
    include_completed: AllOption = False,
    status: Annotated[
        str | None, typer.Option("--status", "-s", help="Only tasks whose status contains this")
    ] = None,
    plain: Annotated[bool, typer.Option("--plain", help="Plain text output")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="JSON output")] = False,
) -> None:
    """Show tasks grouped into sequences that can be worked on in parallel."""
    try:
        response = create_sequences(
            _load(file),
            include_completed=include_completed or settings.include_completed,
            filter_status=status,
        )
    except SequencerError as e:
        error(e.message)
        raise typer.Exit(1) from e

    if as_json:
        print_json(response.to_dict())
    elif plain:
        display_sequences_plain(response.sequences)
    else:
        display_sequences(response.sequences)


@app.command()
def plan(
    task_ids: Annotated[
        list[str] | None, typer.Argument(help="Task IDs to plan (default: all tasks)")
    ] = None,
    file: FileOption = None,
    include_completed: AllOption = False,
    as_json: Annotated[bool, typer.Option("--json", help="JSON output")] = False,
) -> None:
    """Plan execution phases for a set of tasks."""
    try:
        response = plan_sequence(
            _load(file),
            task_ids=task_ids,
            include_completed=include_completed or settings.include_completed,
        )
    except SequencerError as e:
        error(e.message)
        raise typer.Exit(1) from e

    if as_json:
        print_json(response.to_dict())
        return

    if response.not_found:
        error(f"Tasks not found: {', '.join(response.not_found)}")

    if not response.phases and not response.unsequenced:
        console.print(f"[{ELECTRIC_YELLOW}]No tasks found for execution planning.[/{ELECTRIC_YELLOW}]")
        return

    for phase in response.phases:
        depends = f" (after phase {phase.depends_on[0]})" if phase.depends_on else ""
        table = Table(title=f"Phase {phase.phase}{depends}", border_style=NEON_CYAN)
        table.add_column("ID", style=ELECTRIC_PURPLE)
        table.add_column("Title", style=NEON_CYAN)
        table.add_column("Status", style=CORAL)
        table.add_column("Dependencies")
        for task in phase.tasks:
            table.add_row(
                escape(task.id),
                escape(task.title),
                escape(task.status),
                escape(", ".join(task.dependencies)),
            )
        console.print(table)

    if response.unsequenced:
        console.print(f"\n[{ELECTRIC_PURPLE}]Unsequenced[/{ELECTRIC_PURPLE}]")
        for entry in response.unsequenced:
            console.print(f"  [{CORAL}]•[/{CORAL}] {escape(entry.id)} - {escape(entry.title)}")
            console.print(f"    [dim]{escape(entry.reason)}[/dim]")

    summary = response.summary
    success(
        f"{summary.total_phases} phase(s), {summary.total_tasks_in_plan} task(s) in plan, "
        f"{summary.can_start_immediately} can start immediately"
    )


@app.command()
def validate(
    task_id: Annotated[str, typer.Argument(help="Task to validate")],
    deps: Annotated[
        list[str] | None,
        typer.Option("--dep", "-d", help="Proposed dependency (repeatable, comma-separated)"),
    ] = None,
    file: FileOption = None,
) -> None:
    """Check that a task's dependencies exist."""
    try:
        result, _ = check_dependencies(_load(file), task_id, deps)
    except SequencerError as e:
        error(e.message)
        raise typer.Exit(1) from e

    for dep_id in result.valid:
        success(dep_id)
    for dep_id in result.invalid:
        error(f"{dep_id} does not exist")
    if result.sequence_number is not None:
        console.print(f"[{NEON_CYAN}]→[/{NEON_CYAN}] Sequence position: {result.sequence_number}")
    if result.cycle_error:
        error(result.cycle_error)

    if not result.passed:
        raise typer.Exit(1)


@app.command()
def serve(
    host: str = typer.Option(settings.server_host, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(settings.server_port, "--port", "-p", help="Port to listen on"),
    transport: str = typer.Option(
        "stdio", "--transport", "-t", help="Transport type (stdio, sse, streamable-http)"
    ),
) -> None:
    """Start the MCP server over the task snapshot."""
    from sequencer.server import run_server

    try:
        run_server(host=host, port=port, transport=transport)
    except KeyboardInterrupt:
        console.print(f"\n[{NEON_CYAN}]Shutting down...[/{NEON_CYAN}]")


@app.command()
def config() -> None:
    """Show current configuration."""
    table = Table(title="Configuration", border_style=NEON_CYAN)
    table.add_column("Setting", style=ELECTRIC_PURPLE)
    table.add_column("Value", style=NEON_CYAN)

    table.add_row("Tasks File", escape(str(settings.tasks_file)))
    table.add_row("Include Completed", str(settings.include_completed))
    table.add_row("Log Level", settings.log_level)
    table.add_row("Log JSON", str(settings.log_json))
    table.add_row("Server", f"{settings.server_name} @ {settings.server_host}:{settings.server_port}")

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[{ELECTRIC_PURPLE}]Sequencer[/{ELECTRIC_PURPLE}] Version {__version__}",
            border_style=NEON_CYAN,
        )
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
