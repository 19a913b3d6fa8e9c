"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Uses Rich for colored output and formatted summaries. Supports verbosity
levels and the --no-color flag.
"""

from rich.console import Console

from src.page_sync.models import UpsertSummary


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Operation completed")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    def print(self, message: str) -> None:
        """Display message without formatting."""
        self.console.print(message)

    def print_upsert_summary(self, summary: UpsertSummary) -> None:
        """Display sync summary with color coding.

        Args:
            summary: Result of the upsert run
        """
        if summary.dry_run:
            self._print_dryrun_summary(summary)
            return

        self.console.print("\n[bold]Sync Summary:[/bold]")

        if summary.created:
            self.console.print(f"  [green]+[/green] Created: {len(summary.created)} page(s)")

        if summary.updated:
            self.console.print(f"  [blue]↑[/blue] Updated: {len(summary.updated)} page(s)")

        if summary.failed_updates:
            self.console.print(
                f"  [red]✗[/red] Failed updates: {len(summary.failed_updates)} page(s)"
            )
            for name, message in summary.failed_updates:
                self.console.print(f"    • {name}: {message}")

        total = len(summary.created) + len(summary.updated) + len(summary.failed_updates)
        if total == 0:
            self.console.print("\n[yellow]No pages to sync[/yellow]")
        elif summary.failed_updates:
            self.console.print("\n[yellow]Sync completed with failed updates[/yellow]")
        else:
            self.console.print("\n[green]Sync completed successfully[/green]")

    def _print_dryrun_summary(self, summary: UpsertSummary) -> None:
        self.console.print("\n[bold]Dry Run - Changes Preview:[/bold]")

        if summary.planned_creates:
            self.console.print(
                f"\n[green]Would create ({len(summary.planned_creates)} page(s)):[/green]"
            )
            for name in summary.planned_creates:
                self.console.print(f"  • {name}")

        if summary.planned_updates:
            self.console.print(
                f"\n[blue]Would update ({len(summary.planned_updates)} page(s)):[/blue]"
            )
            for name in summary.planned_updates:
                self.console.print(f"  • {name}")

        if not summary.planned_creates and not summary.planned_updates:
            self.console.print("\n[yellow]No pages to sync[/yellow]")
