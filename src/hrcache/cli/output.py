"""Rich terminal output utilities for the CLI."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table


console = Console()


class RichOutput:
    """Provides rich terminal output with consistent styling."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the output handler.

        Args:
            console: Rich console instance (creates new one if not provided)
        """
        self.console = console or Console()

    def error(self, message: str):
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str):
        self.console.print(f"[yellow]![/yellow] {message}", style="yellow")

    def table(self, title: str, columns: list, rows: list) -> Table:
        """Build and print a table.

        Args:
            title: Table title
            columns: Column headers
            rows: Row values, one sequence per row

        Returns:
            The printed table
        """
        table = Table(title=title, show_header=True, header_style="bold magenta")
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*[str(cell) for cell in row])
        self.console.print(table)
        return table


def setup_logging(verbosity: int = 0):
    """Configure logging with Rich handler.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                show_time=True,
                show_path=(verbosity >= 2),
            )
        ],
    )


def format_duration_ms(duration_ms: int) -> str:
    """Format a duration in milliseconds as a short human-readable string."""
    seconds = duration_ms / 1000
    if seconds < 60:
        return f"{seconds:g}s"
    minutes = seconds / 60
    if minutes < 60:
        return f"{minutes:g}m"
    return f"{minutes / 60:g}h"
