"""Rich console output helpers."""

from rich.console import Console
from rich.table import Table

console = Console()


def ok(msg: str):
    """Print success message."""
    console.print(f"  [green]✓[/green] {msg}")


def fail(msg: str):
    """Print failure message."""
    console.print(f"  [red]✗[/red] {msg}")


def dim(msg: str):
    """Print dimmed message."""
    console.print(f"  [dim]{msg}[/dim]")


def header(msg: str):
    """Print bold header."""
    console.print(f"\n[bold]{msg}[/bold]")


def summary_table(params, metrics) -> Table:
    """Build a two-column table of run parameters and final metrics."""
    table = Table(title=f"{params.method} N={params.size}", show_header=True)
    table.add_column("Quantity", style="bold")
    table.add_column("Value", justify="right")

    for key, value in params.to_mlflow().items():
        if key != "method":
            table.add_row(key, f"{value:g}" if isinstance(value, float) else str(value))
    table.add_section()
    for key, value in metrics.to_mlflow().items():
        table.add_row(key, f"{value:.4g}")
    return table
