import click
from rich.console import Console
from rich.table import Table

from ...script import OPERATIONS

console = Console()


@click.command()
def operations_command() -> None:
    table = Table(title="Writer Operations")
    table.add_column("Operation", style="cyan")
    table.add_column("Arguments", justify="right")
    for name, arity in OPERATIONS.items():
        table.add_row(name, str(arity))
    console.print(table)
