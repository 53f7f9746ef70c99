"""Stable reordering of one table's rows.

``sort_table`` never touches its input: it returns a new top-level
mapping in which only the named table has been replaced by a sorted
copy of its rows.  Every other table, and every row object, is shared
with the input.
"""
from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Sequence

from hetdb.errors import UnknownTableError
from hetdb.schema.model import Database, Row, Table, Value

logger = logging.getLogger(__name__)

Comparator = Callable[[Row, Row], int]


def sort_table(db: Database, table: str, compare: Comparator) -> dict[str, Table]:
    """Return a copy of ``db`` with ``table`` sorted by ``compare``.

    Parameters
    ----------
    db:
        The database to sort.  Left unchanged.
    table:
        Name of the table whose rows are reordered.
    compare:
        ``compare(a, b)`` returns a negative number, zero or a positive
        number.  Rows comparing equal keep their original order.

    Raises
    ------
    UnknownTableError
        ``table`` is not in ``db``.
    Exception
        Whatever ``compare`` raises, unchanged.
    """
    if table not in db:
        raise UnknownTableError(table)
    rows = sorted(db[table], key=functools.cmp_to_key(compare))
    logger.debug("Sorted %d row(s) of table %r", len(rows), table)
    return {name: rows if name == table else value for name, value in db.items()}


def _sort_key(value: Value) -> str:
    # Word lists compare as their space-joined words.
    if isinstance(value, str):
        return value.strip()
    return " ".join(item.strip() for item in value)


def by_fields(fields: Sequence[str], *, reverse: bool = False) -> Comparator:
    """Build a comparator ordering rows by ``fields``, left to right.

    Values are compared trimmed, word lists as their space-joined words;
    a field absent from a row compares as ``""``.  With ``reverse`` the
    order is descending, ties still keep their original order.
    """
    fields = tuple(fields)

    def compare(a: Row, b: Row) -> int:
        for field_name in fields:
            left = _sort_key(a.get(field_name, ""))
            right = _sort_key(b.get(field_name, ""))
            if left != right:
                result = -1 if left < right else 1
                return -result if reverse else result
        return 0

    return compare
