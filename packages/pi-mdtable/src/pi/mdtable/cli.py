"""CLI entry point for pi-mdtable. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import sys

import click

from pi.mdtable.config import load_config
from pi.mdtable.document import format_document
from pi.mdtable.types import NoTableFound, StructuralMismatch

logger = logging.getLogger(__name__)

# Undecodable bytes survive the round trip as lone surrogates.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _read_input(path: str) -> str:
    if path == "-":
        data = click.get_binary_stream("stdin").read()
    else:
        with open(path, "rb") as f:
            data = f.read()
    return data.decode(_ENCODING, errors=_ERRORS)


def _write_output(path: str, text: str) -> None:
    data = text.encode(_ENCODING, errors=_ERRORS)
    if path == "-":
        stdout = click.get_binary_stream("stdout")
        stdout.write(data)
        stdout.flush()
    else:
        with open(path, "wb") as f:
            f.write(data)


@click.command()
@click.argument(
    "file",
    default="-",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
@click.option(
    "--line",
    "-l",
    type=click.IntRange(min=1),
    default=None,
    help="Format the table containing this line (1-based). Default: first table.",
)
@click.option("--in-place", "-i", is_flag=True, help="Rewrite FILE instead of printing it.")
@click.option("--config", "config_path", default=None, help="Config file path")
@click.option("--debug", is_flag=True, help="Trace column rendering")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Logging level (default: warning)",
)
def main(file, line, in_place, config_path, debug, log_level):
    """Realign the Markdown pipe table in FILE (or stdin)."""
    config = load_config(config_path)
    config.debug = config.debug or debug

    level = "debug" if config.debug else log_level
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if in_place and file == "-":
        click.echo("--in-place needs a FILE argument", err=True)
        sys.exit(1)

    text = _read_input(file)
    trace = logger.debug if config.debug else None

    try:
        result = format_document(
            text,
            line - 1 if line is not None else None,
            config=config,
            trace=trace,
        )
    except NoTableFound as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    except StructuralMismatch as e:
        click.echo(f"Table contains a formatting error: {e}", err=True)
        sys.exit(1)

    _write_output(file if in_place else "-", result)


if __name__ == "__main__":
    main()
