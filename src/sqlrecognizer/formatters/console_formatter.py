"""Rich console output formatter."""

from typing import Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.markup import escape

from ..core.models import InsertRecognition, format_value


class ConsoleFormatter:
    """Formats recognition results for rich console output."""

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize console formatter.

        Args:
            console: Rich console instance (creates new one if None)
        """
        self.console = console or Console()

    def format(self, result: InsertRecognition) -> None:
        """Print a recognition result to the console."""
        self.console.print()
        self._print_header(result)

        if result.has_errors():
            self._print_errors(result)
            return

        self._print_target(result)
        self._print_rows(result)

    def _print_header(self, result: InsertRecognition) -> None:
        title = Text("SQL Recognition Results", style="bold blue")
        panel = Panel.fit(
            f"[bold]Statement:[/bold] {result.sql[:100]}{'...' if len(result.sql) > 100 else ''}\n"
            f"[bold]Dialect:[/bold] {result.dialect}\n"
            f"[bold]Type:[/bold] {result.sql_type.value}",
            title=title,
            border_style="blue"
        )
        self.console.print(panel)

    def _print_errors(self, result: InsertRecognition) -> None:
        error_text = "\n".join(f"• {error}" for error in result.errors)
        panel = Panel(
            error_text,
            title="[red]Errors[/red]",
            border_style="red"
        )
        self.console.print(panel)

    def _print_target(self, result: InsertRecognition) -> None:
        table = Table(title="Target", show_header=True)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Table", result.table_name or "N/A")
        table.add_row("Alias", result.table_alias or "N/A")
        table.add_row(
            "Columns",
            ", ".join(result.insert_columns) if result.insert_columns is not None else "[dim](all columns)[/dim]"
        )
        table.add_row("Primary key positions", ", ".join(str(p) for p in result.primary_key_positions) or "N/A")
        if result.duplicate_key_update is not None:
            table.add_row("On duplicate key update", ", ".join(result.duplicate_key_update))

        self.console.print(table)

    def _print_rows(self, result: InsertRecognition) -> None:
        if not result.insert_rows:
            self.console.print("  [dim]No rows found[/dim]")
            return

        width = max(len(row) for row in result.insert_rows)
        headers = result.insert_columns if result.insert_columns and len(result.insert_columns) == width \
            else [f"#{i}" for i in range(width)]

        table = Table(title="Rows", show_header=True)
        table.add_column("Row", style="dim")
        for header in headers:
            table.add_column(escape(header), style="yellow")

        for index, row in enumerate(result.insert_rows):
            cells = [escape(format_value(value)) for value in row]
            cells += [""] * (width - len(cells))
            table.add_row(str(index), *cells)

        self.console.print(table)

    def format_compact(self, result: InsertRecognition) -> None:
        """Format recognition result in compact form."""
        if result.has_errors():
            self.console.print(f"[red]Error:[/red] {'; '.join(result.errors)}")
            return

        columns = f" ({', '.join(result.insert_columns)})" if result.insert_columns is not None else ""
        self.console.print(f"[bold]{result.sql_type.value}[/bold] {result.table_name}{columns}")
        for row in result.insert_rows:
            self.console.print(f"  ({', '.join(format_value(value) for value in row)})", markup=False)
