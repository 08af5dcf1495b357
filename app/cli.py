from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from adapters.filesystem.event_repository import EventFileError, FileSystemEventRepository
from app.config import AppSettings, load_settings
from app.day_wiring import build_axis, build_layout_engine, render_day_page
from domain.models import DEFAULT_EVENT_TITLE
from domain.services.build_time_axis import format_time
from domain.services.project_geometry import percent

app = typer.Typer(no_args_is_help=True)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine decisions."),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _load_events(input_path: Path) -> list[Any]:
    if not input_path.exists():
        console.print(f"[red]File not found:[/] {input_path}")
        raise typer.Exit(code=1)
    try:
        return FileSystemEventRepository().load(input_path)
    except EventFileError as exc:
        console.print(f"[red]Cannot read events:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _settings(config: Path | None) -> AppSettings:
    try:
        return load_settings(config)
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/]")
        raise typer.Exit(code=1) from exc


@app.command("layout")
def layout(
    input_path: Path = typer.Argument(..., help="JSON file with event records."),
    output: Optional[Path] = typer.Option(None, help="Write the layout plan as JSON here."),
    config: Optional[Path] = typer.Option(None, help="YAML settings file."),
) -> None:
    settings = _settings(config)
    events = _load_events(input_path)
    plan = build_layout_engine(settings).build_plan(events)

    if output is not None:
        FileSystemEventRepository().save_layout(plan, output)
        console.print(f"[green]Wrote[/] {output}")
        return

    start_hour = settings.calendar.day_start_hour
    table = Table(title=settings.calendar.title)
    for column in ("#", "Title", "Start", "End", "Column", "Left %", "Width %"):
        table.add_column(column)
    for record in plan.records_in_input_order():
        interval = record.interval
        table.add_row(
            str(interval.position),
            interval.title or DEFAULT_EVENT_TITLE,
            format_time(interval.start, start_hour),
            format_time(interval.end, start_hour),
            f"{record.column_offset + 1}/{record.column_count}",
            f"{percent(record.left, 2):g}",
            f"{percent(record.width, 2):g}",
        )
    console.print(table)
    if plan.dropped:
        console.print(f"[yellow]Dropped {plan.dropped} invalid event(s)[/]")


@app.command("render")
def render(
    input_path: Path = typer.Argument(..., help="JSON file with event records."),
    output: Path = typer.Option(Path("day.html"), help="HTML file to write."),
    config: Optional[Path] = typer.Option(None, help="YAML settings file."),
) -> None:
    settings = _settings(config)
    events = _load_events(input_path)
    _, html = render_day_page(settings, events)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    console.print(f"[green]Wrote[/] {output}")


@app.command("axis")
def axis(config: Optional[Path] = typer.Option(None, help="YAML settings file.")) -> None:
    for label in build_axis(_settings(config)):
        style = "bold" if label.is_full_hour else "dim"
        console.print(f"[{style}]{label.text}[/]")


@app.command("validate")
def validate(
    input_path: Path = typer.Argument(..., help="JSON file with event records."),
    config: Optional[Path] = typer.Option(None, help="YAML settings file."),
) -> None:
    settings = _settings(config)
    events = _load_events(input_path)
    plan = build_layout_engine(settings).build_plan(events)
    valid = len(plan.records)
    console.print(f"[green]{valid} valid[/], [yellow]{plan.dropped} dropped[/] in {input_path}")


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8000, help="Port to listen on."),
) -> None:
    import uvicorn

    uvicorn.run("app.web_main:app", host=host, port=port)


if __name__ == "__main__":
    app()
