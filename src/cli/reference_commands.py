"""Commands listing and running the references."""

import typer
from loguru import logger
from rich.panel import Panel
from rich.table import Table

from src.app.references.console import console, render_all
from src.app.references.registry import (
    UnknownDemonstrationError,
    demonstrations,
    get_demonstration,
    run,
    sections,
)
from src.app.runtime.context import get_config
from src.app.runtime.logging import configure_logging

reference_app = typer.Typer(
    help="📚 Core References CLI - Runnable collections and language feature references",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

LOG_LEVEL_OPTION = typer.Option(
    None, "--log-level", "-l", help="Log level (debug, info, warning, error)"
)


def _setup_logging(log_level: str | None) -> None:
    configure_logging(get_config().logging, level=log_level)


def _run(section: str, names: list[str] | None = None) -> int:
    try:
        if names:
            entries = [get_demonstration(section, name) for name in names]
        else:
            entries = demonstrations(section)
    except UnknownDemonstrationError as e:
        console.print(f"[red]❌ {e.args[0]}[/red]")
        raise typer.Exit(code=1) from e

    console.print(
        Panel.fit(
            f"[bold green]Running {len(entries)} {section} reference(s)[/bold green]",
            border_style="green",
        )
    )
    count = render_all(run(entry) for entry in entries)
    logger.info("Ran {} demonstration(s) from section {}", count, section)
    return count


@reference_app.command("list")
def list_references(
    section: str | None = typer.Option(
        None, "--section", "-s", help="Only list this section"
    ),
) -> None:
    """📋 List the available references."""
    try:
        entries = demonstrations(section)
    except UnknownDemonstrationError as e:
        console.print(f"[red]❌ {e.args[0]}[/red]")
        raise typer.Exit(code=1) from e

    table = Table(title="Available references")
    table.add_column("Section", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Title", style="magenta")
    table.add_column("Summary")

    for entry in entries:
        table.add_row(entry.section, entry.name, entry.title, entry.summary)

    console.print(table)
    console.print(f"\n[green]Found {len(entries)} references[/green]")


@reference_app.command("run")
def run_references(
    section: str = typer.Argument(..., help=f"Section to run ({', '.join(sections())})"),
    names: list[str] | None = typer.Argument(
        None, help="Demonstrations to run (default: the whole section)"
    ),
    log_level: str | None = LOG_LEVEL_OPTION,
) -> None:
    """
    ▶️  Run references from one section.

    Without names every demonstration of the section runs, in order.
    """
    _setup_logging(log_level)
    _run(section, names)


@reference_app.command("collections")
def collections(log_level: str | None = LOG_LEVEL_OPTION) -> None:
    """🗂️  Run every collections reference."""
    _setup_logging(log_level)
    _run("collections")


@reference_app.command("features")
def features(log_level: str | None = LOG_LEVEL_OPTION) -> None:
    """✨ Run every language feature reference."""
    _setup_logging(log_level)
    _run("features")
