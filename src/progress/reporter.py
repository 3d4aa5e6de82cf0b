"""Console reporting with Rich tables and progress bars."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from src.models.webtoon import Webtoon


@final
class CatalogReporter:
    """Prints catalog status messages and results."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the reporter.

        Args:
            console: Rich console instance. If None, creates a new one.
        """
        self.console = console or Console()

    @contextmanager
    def track_decoding(self, total_files: int) -> Iterator[DecodeProgressContext]:
        """Context manager for tracking file name decoding progress.

        Args:
            total_files: Total number of archive files to decode

        Yields:
            Context for advancing the progress bar
        """
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        ) as progress:
            task_id = progress.add_task("Decoding file names...", total=total_files)
            yield DecodeProgressContext(progress, task_id)

    def display_catalog(self, webtoons: Sequence[Webtoon], summary: str) -> None:
        """Display the catalog as a table followed by its summary.

        Args:
            webtoons: Sorted webtoons to display
            summary: Count summary line
        """
        if webtoons:
            table = Table(title="Webtoons")
            table.add_column("Platform", style="cyan")
            table.add_column("Title", style="bold")
            table.add_column("Authors")
            table.add_column("Completed", justify="center")
            table.add_column("Created", style="dim")
            table.add_column("Ext")
            table.add_column("Size", justify="right", style="green")

            for webtoon in webtoons:
                table.add_row(
                    escape(webtoon.platform),
                    escape(webtoon.title),
                    escape(webtoon.authors),
                    "✓" if webtoon.completed else "",
                    webtoon.creation_time,
                    webtoon.file_extension,
                    f"{webtoon.size:,}",
                )

            self.console.print(table)

        self.console.print(f"\n[bold]{summary}[/bold]")

    def display_error(self, message: str, exception: Exception | None = None) -> None:
        """Display an error message with optional exception details.

        Args:
            message: Error message to display
            exception: Optional exception for additional context
        """
        self.console.print(f"[red]Error: {escape(message)}[/red]")
        if exception:
            self.console.print(f"[dim]Details: {escape(str(exception))}[/dim]")

    def display_warning(self, message: str) -> None:
        """Display a warning message."""
        self.console.print(f"[yellow]Warning: {escape(message)}[/yellow]")

    def display_success(self, message: str) -> None:
        """Display a success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def display_info(self, message: str) -> None:
        """Display an info message."""
        self.console.print(f"[blue]Info: {escape(message)}[/blue]")


@final
class DecodeProgressContext:
    """Context for tracking decode progress."""

    def __init__(self, progress: Progress, task_id: TaskID) -> None:
        self.progress = progress
        self.task_id = task_id

    def update(self, advance: int = 1, description: str | None = None) -> None:
        """Advance the decode progress.

        Args:
            advance: Number of files to advance
            description: Optional description update
        """
        self.progress.update(self.task_id, advance=advance, description=description)
