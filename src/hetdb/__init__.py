"""hetdb — a human-editable text database with a self-describing schema.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import hetdb

    # Read and validate a database file
    db = hetdb.read("site.hetdb")

    # Check an already parsed value; None means valid
    message = hetdb.validate(db)

    # Walk a table
    for name, title in hetdb.iter_fields(db, "tag", ["name", "title"]):
        print(name, title)

    # Sort a table, returning a new database
    by_name = hetdb.sort(db, "tag", hetdb.by_fields(["name"]))

    hetdb.__version__
    '0.1.0'
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from hetdb.errors import (
    ConstraintError,
    HetdbError,
    InvalidNameError,
    MissingFieldError,
    SchemaError,
    StructureError,
    UnknownTableError,
)
from hetdb.iterate import Escape, Flow, for_fields, for_rows, iter_fields, iter_rows
from hetdb.schema import BOOTSTRAP_TABLEDEF, TABLEDEF, TableDef
from hetdb.sort import by_fields

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from hetdb.schema.model import Database, Table
    from hetdb.sort.sorter import Comparator


def read(path: str | Path) -> "Database":
    """Read a hetdb file, parse it and validate it.

    Parameters
    ----------
    path:
        Path of the file to read.

    Returns
    -------
    Database
        The validated database.

    Raises
    ------
    OSError
        If the file cannot be read.
    yaml.YAMLError
        If the file is not well-formed.
    HetdbError
        If the database does not satisfy its ``_tabledef``.
    """
    from hetdb.loader.loader import read as _read

    return _read(path)


def loads(text: str) -> Any:
    """Parse hetdb text without validating it."""
    from hetdb.loader.loader import loads as _loads

    return _loads(text)


def load(path: str | Path) -> Any:
    """Read and parse a hetdb file without validating it."""
    from hetdb.loader.loader import load as _load

    return _load(path)


def dumps(db: "Database") -> str:
    """Serialize a database to hetdb text."""
    from hetdb.loader.loader import dumps as _dumps

    return _dumps(db)


def write(db: "Database", path: str | Path) -> None:
    """Write a database to ``path`` as hetdb text."""
    from hetdb.loader.loader import write as _write

    _write(db, path)


def validate(db: "Database") -> str | None:
    """Validate an already parsed database.

    Parameters
    ----------
    db:
        The database to validate.

    Returns
    -------
    str | None
        ``None`` on success, otherwise the message of the first error.
    """
    from hetdb.validator.validator import validate as _validate

    return _validate(db)


def check(db: "Database") -> dict[str, TableDef]:
    """Validate an already parsed database, raising the first error.

    Returns
    -------
    dict[str, TableDef]
        The resolved table definitions, keyed by table name.
    """
    from hetdb.validator.validator import check as _check

    return _check(db)


def sort(db: "Database", table: str, compare: "Comparator") -> dict[str, "Table"]:
    """Return a new database with ``table`` stably sorted by ``compare``.

    Parameters
    ----------
    db:
        The database to sort.  It is not modified.
    table:
        Name of the table to sort.
    compare:
        Comparator returning a negative, zero or positive number.
    """
    from hetdb.sort.sorter import sort_table

    return sort_table(db, table, compare)


__all__ = [
    "__version__",
    "BOOTSTRAP_TABLEDEF",
    "TABLEDEF",
    "TableDef",
    "Escape",
    "Flow",
    "HetdbError",
    "ConstraintError",
    "InvalidNameError",
    "MissingFieldError",
    "SchemaError",
    "StructureError",
    "UnknownTableError",
    "by_fields",
    "check",
    "dumps",
    "for_fields",
    "for_rows",
    "iter_fields",
    "iter_rows",
    "load",
    "loads",
    "read",
    "sort",
    "validate",
    "write",
]
