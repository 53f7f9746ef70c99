"""Data model: databases, tables, rows and per-table rule sets.

A database is plain nested data, exactly what the YAML loader returns::

    {
        "_tabledef": [
            {"name": "tag", "mandatory": ["name", "title"], "optional": ["main"]},
        ],
        "tag": [
            {"name": "cooking", "title": "How to Cook", "main": "true"},
        ],
    }

Mapping order is significant: tables are checked in insertion order and
rows keep their sequence order.  Nothing in hetdb mutates a database;
operations that change one return a new mapping.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Final, Union

from hetdb.schema.names import TABLEDEF

Value = Union[str, Sequence[str]]
Row = Mapping[str, Value]
Table = Sequence[Row]
Database = Mapping[str, Table]


@dataclass(frozen=True)
class TableDef:
    """Rule set for one table.

    Parameters
    ----------
    name:
        The table the rules apply to.
    mandatory:
        Fields that must be present in every row.
    optional:
        Fields that may be absent from a row.
    unique:
        Fields whose trimmed values must differ between rows.
    """

    name: str
    mandatory: tuple[str, ...] = field(default=())
    optional: tuple[str, ...] = field(default=())
    unique: tuple[str, ...] = field(default=())

    @property
    def fields(self) -> tuple[str, ...]:
        """All declared fields, mandatory first."""
        return self.mandatory + self.optional

    def allows(self, field_name: str) -> bool:
        """Return True if ``field_name`` is declared mandatory or optional."""
        return field_name in self.mandatory or field_name in self.optional


# Schema of the schema table.  Never derived from user data.
BOOTSTRAP_TABLEDEF: Final[TableDef] = TableDef(
    name=TABLEDEF,
    mandatory=("name",),
    optional=("mandatory", "optional", "unique"),
    unique=("name",),
)


def words(value: Value | None) -> tuple[str, ...]:
    """Return a word list value as a tuple of strings.

    A string is split on whitespace; a sequence of strings is taken
    as-is; ``None`` gives an empty tuple.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    return tuple(value)


def comparable(value: Value) -> str | tuple[str, ...]:
    """Return the trimmed form of a field value used for uniqueness checks."""
    if isinstance(value, str):
        return value.strip()
    return tuple(item.strip() for item in value)
