"""Render command - Replay a call script and emit the XML document."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...config import MAX_VERBOSITY, ConfigLoader
from ...exceptions import ScriptError
from ...infrastructure.logging import ConsoleLogger
from ...script import load_script, replay
from ...writer import XmlWriter


@click.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the document to this file (default: print to stdout)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a stream_xml.toml file (default: ./stream_xml.toml if present)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def render_command(
    script: Path,
    output: Path | None,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Replay a JSON call script through the XML writer.

    SCRIPT is a JSON array of calls such as ["open", "item"] or
    ["attr", "id", "1"]. Elements still open at the end are closed
    automatically.

    Examples:

    \b
        # Print the document
        stream-xml render calls.json

    \b
        # Write the document to a file
        stream-xml render calls.json --output out.xml
    """
    try:
        config = ConfigLoader.load(config_file=config_file)
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    verbosity = min(max(config.verbosity, verbose), MAX_VERBOSITY)
    logger = ConsoleLogger(Console(stderr=True), verbosity=verbosity)

    try:
        calls = load_script(script)
    except ScriptError as exc:
        logger.error(str(exc))
        raise click.ClickException(f"Invalid call script: {script}") from exc

    logger.verbose(f"Loaded {len(calls)} call(s) from {script}")
    document = replay(calls, XmlWriter(config, logger=logger))

    if output is None:
        click.echo(document)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document, encoding="utf-8", newline="")
        logger.success(f"Wrote {output}")
    logger.log_final_stats()
