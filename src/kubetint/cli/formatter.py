# src/kubetint/cli/formatter.py
from datetime import datetime
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kubetint.io.snapshot import SnapshotInfo
from kubetint.view.render import render_markup

# Initialize the Rich console for high-quality terminal output
console = Console()

class TintFormatter:
    """
    TintFormatter: The visual heart of the CLI.
    Responsible for rendering colorized YAML, snapshot listings and status lines.
    """

    def __init__(self, out: Console = None):
        self.console = out or console

    def display_yaml(self, markup: str, raw_markup: bool = False):
        """Prints colorized YAML, either rendered or as raw viewer markup."""
        if raw_markup:
            self.console.print(markup, markup=False, highlight=False, emoji=False, soft_wrap=True)
            return
        self.console.print(render_markup(markup), soft_wrap=True)

    def show_search_summary(self, query: str, count: int):
        if count:
            self.console.print(f"[dim]🔍 {count} match(es) for[/dim] [bold cyan]{escape(query)}[/bold cyan]")
        else:
            self.console.print(f"[dim]ℹ No matches for {escape(query)}.[/dim]")

    def show_saved(self, path: str):
        self.console.print(f"[bold green]💾 Snapshot saved:[/bold green] {escape(path)}")

    def show_warning(self, message: str):
        self.console.print(f"[bold yellow]⚠️  {escape(message)}[/bold yellow]")

    def show_error(self, message: str):
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def print_snapshot_table(self, snapshots: List[SnapshotInfo], directory: str):
        """
        Builds the snapshot listing shown by 'kubetint dumps'.
        """
        if not snapshots:
            self.console.print(f"[dim]ℹ No snapshots found in {escape(directory)}.[/dim]")
            return

        table = Table(title=f"Screen Dumps: {escape(directory)}", show_header=True, header_style="bold magenta")
        table.add_column("Name", style="cyan")
        table.add_column("Saved At")
        table.add_column("Size", justify="right")
        table.add_column("Path", style="dim")

        for snap in snapshots:
            saved_at = datetime.fromtimestamp(snap.timestamp).strftime("%Y-%m-%d %H:%M:%S")
            table.add_row(escape(snap.name), saved_at, f"{snap.size} B", escape(snap.path))

        self.console.print(table)
