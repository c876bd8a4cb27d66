import click

from .commands.operations import operations_command
from .commands.render import render_command


@click.group()
def app() -> None:
    pass


app.add_command(render_command, name="render")
app.add_command(operations_command, name="operations")
__all__ = ["app"]
