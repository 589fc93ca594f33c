"""Command-line interface for table-of-records."""

import dataclasses
import logging
import sys
from typing import IO

import click
import yaml

from .config import TableOptions
from .loaders import FORMATS, detect_format, load_records
from .schema import describe_record_type
from .table import write_table


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


def _load(file: IO[str], fmt: str) -> list:
    if fmt == "auto":
        fmt = detect_format(file.name)
    return load_records(file, fmt)


@click.group()
@click.version_option(package_name="table-of-records")
def cli() -> None:
    """Render lists of records as bordered text tables."""
    pass


@cli.command()
@click.argument("file", type=click.File("r"), default="-")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["auto", *FORMATS]),
    default="auto",
    show_default=True,
    help="Input format (auto: .yaml/.yml is YAML, anything else JSON)",
)
@click.option(
    "--null-text",
    default=None,
    help="Text for missing values (default: $TABLE_OF_RECORDS_NULL_TEXT or empty)",
)
@click.option(
    "--crlf",
    is_flag=True,
    default=False,
    help="End lines with CRLF instead of LF",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output")
def render(file: IO[str], fmt: str, null_text: str | None, crlf: bool, verbose: bool) -> None:
    """Render a JSON or YAML list of records as a table.

    FILE defaults to standard input. The document must be a list of
    objects, or an object holding exactly one such list.
    """
    _configure_logging(verbose)

    try:
        options = TableOptions.from_environment()
        if null_text is not None:
            options = dataclasses.replace(options, null_text=null_text)
        if crlf:
            options = dataclasses.replace(options, line_terminator="\r\n")

        records = _load(file, fmt)
        write_table(records, click.get_text_stream("stdout"), options)
    except (ValueError, yaml.YAMLError) as e:
        click.echo(f"✗ Failed to render table: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.File("r"), default="-")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["auto", *FORMATS]),
    default="auto",
    show_default=True,
    help="Input format (auto: .yaml/.yml is YAML, anything else JSON)",
)
def columns(file: IO[str], fmt: str) -> None:
    """Show the columns that would be rendered for FILE."""
    try:
        records = _load(file, fmt)
    except (ValueError, yaml.YAMLError) as e:
        click.echo(f"✗ Failed to load records: {e}", err=True)
        sys.exit(1)

    descriptors = describe_record_type(type(records[0]), sample=records[0])
    if not descriptors:
        click.echo("No scalar columns found")
        return
    write_table(descriptors, click.get_text_stream("stdout"))


def main() -> None:
    """Entry point for the table-of-records console script."""
    cli()


if __name__ == "__main__":
    main()
