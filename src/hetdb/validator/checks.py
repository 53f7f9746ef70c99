"""Shape and row checks shared by the schema resolver and the validator.

Each check raises the first problem it finds and returns ``None``
otherwise.  Traversal order is fixed (rows in sequence order, then
fields) so that the same database always reports the same error.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from hetdb.errors import ConstraintError, InvalidNameError, StructureError
from hetdb.schema.model import Table, TableDef, Value, comparable
from hetdb.schema.names import is_valid_field_name, is_valid_table_name

logger = logging.getLogger(__name__)


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _is_word_list(value: object) -> bool:
    return _is_sequence(value) and all(isinstance(item, str) for item in value)  # type: ignore[union-attr]


def _is_row(row: object, word_lists: bool) -> bool:
    if not isinstance(row, Mapping):
        return False
    for key, value in row.items():
        if not isinstance(key, str):
            return False
        if isinstance(value, str):
            continue
        if not (word_lists and _is_word_list(value)):
            return False
    return True


def check_database_shape(db: object) -> None:
    """Raise ``StructureError`` unless ``db`` is a mapping keyed by strings."""
    if not isinstance(db, Mapping) or not all(isinstance(k, str) for k in db):
        raise StructureError.outer()


def check_table_name(name: str) -> None:
    if not is_valid_table_name(name):
        raise InvalidNameError.table_name(name)


def check_table_shape(name: str, table: object, *, word_lists: bool = False) -> None:
    """Raise ``StructureError`` unless ``table`` is a sequence of rows.

    Parameters
    ----------
    name:
        Table name, used in the error message.
    table:
        The value stored under ``name``.
    word_lists:
        Accept lists of strings as field values (only ``_tabledef`` rows
        hold those).
    """
    if not _is_sequence(table):
        raise StructureError.table_shape(name)
    for index, row in enumerate(table):  # type: ignore[arg-type]
        if not _is_row(row, word_lists):
            raise StructureError.row_shape(name, index)


def check_rows(name: str, table: Table, tabledef: TableDef) -> None:
    """Check every row of a well-shaped table against ``tabledef``.

    Per row the order is: field names, mandatory fields (declaration
    order), extra fields, then uniqueness of declared unique fields.

    Raises
    ------
    InvalidNameError
        A field name is not a valid identifier.
    ConstraintError
        A mandatory field is missing, a field is undeclared, or a unique
        field repeats an earlier row's trimmed value.
    """
    seen: dict[str, set[str | tuple[str, ...]]] = {f: set() for f in tabledef.unique}
    for index, row in enumerate(table):
        for field_name in row:
            if not is_valid_field_name(field_name):
                raise InvalidNameError.field_name(name, field_name, index)
        for field_name in tabledef.mandatory:
            if field_name not in row:
                raise ConstraintError.missing_mandatory(name, field_name, index)
        for field_name in row:
            if not tabledef.allows(field_name):
                raise ConstraintError.extra_field(name, field_name, index)
        for field_name in tabledef.unique:
            value: Value | None = row.get(field_name)
            if value is None:
                continue
            key = comparable(value)
            if key in seen[field_name]:
                raise ConstraintError.not_unique(name, field_name, index)
            seen[field_name].add(key)
    logger.debug("Checked %d row(s) of table %r", len(table), name)


def check_table(name: str, table: object, tabledef: TableDef, *, word_lists: bool = False) -> None:
    """Run the shape check and then the row checks on one table."""
    check_table_shape(name, table, word_lists=word_lists)
    check_rows(name, table, tabledef)  # type: ignore[arg-type]
