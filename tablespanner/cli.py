"""Command-line interface for tablespanner."""

from __future__ import annotations

from typing import Optional

import typer

from . import __version__
from .config import PRETTY_INDENT, load_config
from .logging import configure_logging, get_logger
from .models import TablespannerError
from .render import render_json_table

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Calculates JSON table layouts")

SPANINFO_HELP = (
    "JSON object mapping cell identifiers to [rows, cols], the number of rows "
    'and columns the cell spans. Example: {"A": [1, 2], "E": [3, 3]}. '
    "It is an error to pass zero for these values."
)
TABLESPEC_HELP = (
    "A two-dimensional JSON array of cell identifiers for the table. "
    'Example: [["A", "B"], ["C", "D"]]. '
    "It is an error to pass non-string values, including nulls."
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tablespanner {__version__}")
        raise typer.Exit()


@app.command()
def render_command(
    spaninfo: str = typer.Argument(..., metavar="SPANINFO", help=SPANINFO_HELP),
    tablespec: str = typer.Argument(..., metavar="TABLESPEC", help=TABLESPEC_HELP),
    pretty: bool = typer.Option(False, "--pretty", help="Indent the JSON output"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    try:
        config = load_config()
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    configure_logging(config.log_level)

    indent = PRETTY_INDENT if pretty else config.json_indent
    try:
        output = render_json_table(
            spaninfo,
            tablespec,
            indent=indent,
            ensure_ascii=config.ensure_ascii,
        )
    except TablespannerError as exc:
        logger.error("cli_failed", error=str(exc), error_type=type(exc).__name__)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(output)


def main():
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
