"""CLI entry point for hetdb.

Invoked as::

    hetdb [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m hetdb.cli.main

Commands
--------
validate    Read and validate a database file
tables      List the tables of a database with their row counts
show        Print the rows of one table
sort        Sort one table and print or write the result
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

import hetdb

if TYPE_CHECKING:
    from hetdb.schema.model import Database, TableDef

console = Console()
err_console = Console(stderr=True)

_LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def _read_or_exit(path: str) -> tuple["Database", dict[str, "TableDef"]]:
    """Read and validate a database file, exiting on error.

    Returns the database and its resolved table definitions.
    """
    try:
        db = hetdb.load(path)
        return db, hetdb.check(db)
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {escape(path)}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {escape(path)}: {escape(str(exc))}")
        sys.exit(1)
    except yaml.YAMLError as exc:
        err_console.print(f"[red]Parse error[/red] in {escape(path)}: {escape(str(exc))}")
        sys.exit(1)
    except hetdb.HetdbError as exc:
        err_console.print(f"[red]Error:[/red] {escape(path)}: {escape(str(exc))}", highlight=False, soft_wrap=True)
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="hetdb")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="HETDB_LOG_LEVEL",
    show_default=True,
    help="Logging level for diagnostic output on stderr",
)
def cli(log_level: str) -> None:
    """hetdb: human-editable text database tools."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    table = Table(show_header=False, box=None)
    table.add_row("[bold]hetdb[/bold]", f"v{hetdb.__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# validate command
# ---------------------------------------------------------------------------


@cli.command(name="validate")
@click.argument("file", type=click.Path(exists=False))
def validate_command(file: str) -> None:
    """Read and validate a database file.

    FILE is the path to the database to validate.
    """
    db, _ = _read_or_exit(file)
    console.print(f"[green]OK[/green] {file}: {len(db)} table(s), no issues found")


# ---------------------------------------------------------------------------
# tables command
# ---------------------------------------------------------------------------


@cli.command(name="tables")
@click.argument("file", type=click.Path(exists=False))
def tables_command(file: str) -> None:
    """List the tables of a database file.

    FILE is the path to the database to read.
    """
    db, _ = _read_or_exit(file)

    table = Table(title=f"Tables: {file}")
    table.add_column("Table", style="bold")
    table.add_column("Rows", justify="right")
    for name, rows in db.items():
        table.add_row(name, str(len(rows)))
    console.print(table)


# ---------------------------------------------------------------------------
# show command
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("file", type=click.Path(exists=False))
@click.argument("table_name", metavar="TABLE")
@click.option(
    "--field",
    "-f",
    "fields",
    multiple=True,
    help="Field to show; repeat for several.  Defaults to every declared field.",
)
def show_command(file: str, table_name: str, fields: tuple[str, ...]) -> None:
    """Print the rows of one table.

    FILE is the path to the database; TABLE is the table to print.
    """
    db, tabledefs = _read_or_exit(file)

    if fields:
        columns = list(fields)
    elif table_name in tabledefs:
        columns = list(tabledefs[table_name].fields)
    else:
        columns = list(hetdb.BOOTSTRAP_TABLEDEF.fields)

    try:
        records = list(hetdb.iter_rows(db, table_name, columns))
    except hetdb.UnknownTableError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        sys.exit(1)

    table = Table(title=f"{table_name} ({len(records)} row(s))", show_lines=False)
    for column in columns:
        table.add_column(column)
    for record in records:
        table.add_row(*(_cell(record[column]) for column in columns))
    console.print(table)


def _cell(value: object) -> str:
    if isinstance(value, str):
        return escape(value)
    return escape(" ".join(str(item) for item in value))  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# sort command
# ---------------------------------------------------------------------------


@cli.command(name="sort")
@click.argument("file", type=click.Path(exists=False))
@click.argument("table_name", metavar="TABLE")
@click.option(
    "--by",
    "-b",
    "fields",
    multiple=True,
    required=True,
    help="Field to sort by; repeat for secondary keys.",
)
@click.option("--reverse", is_flag=True, default=False, help="Sort in descending order")
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def sort_command(
    file: str, table_name: str, fields: tuple[str, ...], reverse: bool, output: str | None
) -> None:
    """Sort one table of a database file.

    FILE is the path to the database; TABLE is the table to sort.
    Rows with equal keys keep their original order.
    """
    db, _ = _read_or_exit(file)

    try:
        sorted_db = hetdb.sort(db, table_name, hetdb.by_fields(fields, reverse=reverse))
    except hetdb.UnknownTableError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        sys.exit(1)

    if output:
        hetdb.write(sorted_db, output)
        console.print(f"[green]Sorted database written to[/green] {output}")
    else:
        click.echo(hetdb.dumps(sorted_db), nl=False)


if __name__ == "__main__":
    cli()
