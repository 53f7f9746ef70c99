"""Row iteration over one table of a database.

Two projections are offered, each as a generator for plain ``for``
loops and as a body-driven loop:

``iter_rows`` / ``for_rows``
    Full-row mode.  Each row becomes a new ``dict`` holding exactly the
    requested fields, in request order.  A requested field absent from
    a row reads as ``""``.  Without a request list every field of the
    row is returned in the row's own order.

``iter_fields`` / ``for_fields``
    Field-binding mode.  Each row yields one value per requested field;
    a field absent from a row raises ``MissingFieldError`` and ends the
    iteration.

Body-driven loops call ``body`` once per row with keyword arguments and
inspect what it returns:

- ``None``, ``Flow.CONTINUE`` or ``Flow.SKIP``: go on with the next row.
- ``Flow.STOP``: end the loop, no error.
- ``Escape(value)``: end the loop and hand the ``Escape`` back to the
  caller, who returns ``escape.value`` from its own function.

Exceptions raised by ``body`` are not caught and reach the caller as the
same object.

Example
-------
::

    def first_main_tag(db):
        escape = for_fields(
            db, "tag", ["name", "main"],
            lambda tag_name, tag_main: Escape(tag_name) if tag_main == "true" else None,
        )
        if escape is not None:
            return escape.value
        return None
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union

from hetdb.errors import MissingFieldError, UnknownTableError
from hetdb.schema.model import Database, Table, Value


class Flow(Enum):
    """Loop outcomes consumed by the iterator itself."""

    CONTINUE = auto()
    STOP = auto()
    SKIP = auto()


@dataclass(frozen=True)
class Escape:
    """Outcome that ends the loop and carries a value back to the caller.

    Parameters
    ----------
    value:
        What the caller should return.
    """

    value: Any = None


Outcome = Union[Flow, Escape, None]
Body = Callable[..., Outcome]


def _lookup(db: Database, table: str) -> Table:
    if table not in db:
        raise UnknownTableError(table)
    return db[table]


def _project(rows: Table, fields: tuple[str, ...] | None) -> Iterator[dict[str, Value]]:
    for row in rows:
        names = fields if fields is not None else tuple(row)
        yield {name: row.get(name, "") for name in names}


def _bind(rows: Table, table: str, fields: tuple[str, ...]) -> Iterator[tuple[Value, ...]]:
    for index, row in enumerate(rows):
        values: list[Value] = []
        for field_name in fields:
            if field_name not in row:
                raise MissingFieldError(field_name, table=table, row=index)
            values.append(row[field_name])
        yield tuple(values)


def iter_rows(
    db: Database, table: str, fields: Iterable[str] | None = None
) -> Iterator[dict[str, Value]]:
    """Return an iterator of projected records for ``table``.

    Parameters
    ----------
    db:
        The database to read.
    table:
        Name of the table to iterate.
    fields:
        Fields to include, in output order.  ``None`` means every field
        present in each row.

    Raises
    ------
    UnknownTableError
        Immediately, before any row is produced.
    """
    rows = _lookup(db, table)
    return _project(rows, tuple(fields) if fields is not None else None)


def iter_fields(
    db: Database, table: str, fields: Iterable[str]
) -> Iterator[tuple[Value, ...]]:
    """Return an iterator of value tuples, one entry per requested field.

    Raises
    ------
    UnknownTableError
        Immediately, before any row is produced.
    MissingFieldError
        While iterating, at the first row lacking a requested field.
    """
    rows = _lookup(db, table)
    return _bind(rows, table, tuple(fields))


def _run(body: Body, kwargs: dict[str, Any]) -> Escape | None | Flow:
    outcome = body(**kwargs)
    if outcome is None or isinstance(outcome, (Flow, Escape)):
        return outcome
    raise TypeError(
        f"loop body must return None, a Flow member or an Escape, got {outcome!r}"
    )


def for_rows(
    db: Database,
    table: str,
    fields: Iterable[str] | None,
    body: Body,
    *,
    name: str | None = None,
) -> Escape | None:
    """Call ``body`` once per row with the projected record.

    ``fields`` selects the projected fields, ``None`` meaning every field
    of the row.  The record is passed as the keyword argument ``name``,
    which defaults to the table name::

        for_rows(db, "tag", None, lambda tag: print(tag["title"]))

    Returns
    -------
    Escape | None
        The ``Escape`` returned by ``body``, or ``None`` if the loop ran
        to completion or was stopped.
    """
    key = name if name is not None else table
    for record in iter_rows(db, table, fields):
        outcome = _run(body, {key: record})
        if outcome is Flow.STOP:
            break
        if isinstance(outcome, Escape):
            return outcome
    return None


def for_fields(
    db: Database,
    table: str,
    fields: Iterable[str],
    body: Body,
    *,
    prefix: str | None = None,
) -> Escape | None:
    """Call ``body`` once per row with one keyword argument per field.

    Each value is bound as ``prefix + field``; ``prefix`` defaults to the
    table name followed by ``_``::

        for_fields(db, "tag", ["name", "title"],
                   lambda tag_name, tag_title: print(tag_name, tag_title))

    Raises
    ------
    UnknownTableError
        Before any row is visited.
    MissingFieldError
        At the first row lacking one of ``fields``.
    """
    fields = tuple(fields)
    bind_prefix = prefix if prefix is not None else f"{table}_"
    names = [bind_prefix + field_name for field_name in fields]
    for values in iter_fields(db, table, fields):
        outcome = _run(body, dict(zip(names, values)))
        if outcome is Flow.STOP:
            break
        if isinstance(outcome, Escape):
            return outcome
    return None
