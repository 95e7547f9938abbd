"""Rich rendering of demonstrations."""

from collections.abc import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text

from src.app.references.registry import Demonstration

# Initialize Rich console for colored output
console = Console()


def render_demonstration(demo: Demonstration, target: Console | None = None) -> None:
    """Print one demonstration as a titled table of observations."""
    target = target or console
    table = Table(show_header=True, header_style="bold cyan", expand=False)
    table.add_column("Observation", style="bold")
    table.add_column("Value")
    table.add_column("Note", style="dim")

    for observation in demo.observations:
        value = observation.value
        table.add_row(
            Text(observation.label),
            Text(value) if isinstance(value, str) else Pretty(value),
            Text(observation.note or ""),
        )

    target.print(
        Panel(
            table,
            title=f"[bold green]{demo.title}[/bold green]",
            subtitle=f"[dim]{demo.section}.{demo.name}[/dim]",
            border_style="green",
        )
    )


def render_all(demos: Iterable[Demonstration], target: Console | None = None) -> int:
    """Render every demonstration, returning how many were printed."""
    count = 0
    for demo in demos:
        render_demonstration(demo, target)
        count += 1
    return count
