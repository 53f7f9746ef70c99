"""Error types raised by hetdb.

Every error carries the canonical, human-readable message as its
``str()`` value, plus the table / field / row it refers to when known,
so that callers can either show the message verbatim or react to the
location programmatically.

Hierarchy
---------
::

    HetdbError
    ├── StructureError      outer / table / row shape mismatch
    ├── SchemaError         inconsistent ``_tabledef`` content
    ├── ConstraintError     mandatory / extra / unique violations
    ├── InvalidNameError    bad table or field identifier
    ├── UnknownTableError   (also LookupError)
    └── MissingFieldError   (also LookupError)

Read failures are not wrapped: ``OSError`` and ``yaml.YAMLError``
propagate to the caller unchanged.
"""
from __future__ import annotations


class HetdbError(Exception):
    """Base class for all hetdb errors.

    Parameters
    ----------
    message:
        The canonical error message.
    table:
        Name of the offending table, if any.
    field:
        Name of the offending field, if any.
    row:
        0-based index of the offending row, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        table: str | None = None,
        field: str | None = None,
        row: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.table = table
        self.field = field
        self.row = row

    def __str__(self) -> str:
        return self.message


class StructureError(HetdbError):
    """The database, a table or a row does not have the expected shape."""

    @classmethod
    def outer(cls) -> "StructureError":
        return cls("outer structure of database not valid")

    @classmethod
    def table_shape(cls, table: str) -> "StructureError":
        return cls(f'structure of table "{table}" not valid', table=table)

    @classmethod
    def row_shape(cls, table: str, row: int) -> "StructureError":
        return cls(
            f'structure of row {row} in table "{table}" not valid',
            table=table,
            row=row,
        )


class SchemaError(HetdbError):
    """The ``_tabledef`` table is missing or inconsistent."""

    @classmethod
    def missing_tabledef(cls) -> "SchemaError":
        return cls('table "_tabledef" is missing', table="_tabledef")

    @classmethod
    def self_definition(cls) -> "SchemaError":
        return cls(
            'can\'t define "_tabledef" in table "_tabledef"', table="_tabledef"
        )

    @classmethod
    def optional_and_mandatory(cls, table: str, field: str) -> "SchemaError":
        return cls(
            f'field "{field}" in table "{table}" can\'t be optional and mandatory',
            table=table,
            field=field,
        )

    @classmethod
    def no_entry(cls, table: str) -> "SchemaError":
        return cls(f'no entry for table "{table}" in table "_tabledef"', table=table)


class ConstraintError(HetdbError):
    """A row breaks a mandatory, extra-field or uniqueness rule."""

    @classmethod
    def missing_mandatory(cls, table: str, field: str, row: int) -> "ConstraintError":
        return cls(
            f'mandatory field "{field}" in table "{table}" is missing',
            table=table,
            field=field,
            row=row,
        )

    @classmethod
    def extra_field(cls, table: str, field: str, row: int) -> "ConstraintError":
        return cls(
            f'extra field "{field}" in table "{table}"',
            table=table,
            field=field,
            row=row,
        )

    @classmethod
    def not_unique(cls, table: str, field: str, row: int) -> "ConstraintError":
        return cls(
            f'field "{field}" in table "{table}" isn\'t unique',
            table=table,
            field=field,
            row=row,
        )


class InvalidNameError(HetdbError):
    """A table or field name is not a valid identifier."""

    @classmethod
    def table_name(cls, table: str) -> "InvalidNameError":
        return cls(f'invalid table name "{table}"', table=table)

    @classmethod
    def field_name(cls, table: str, field: str, row: int | None = None) -> "InvalidNameError":
        return cls(
            f'invalid field name "{field}" in table "{table}"',
            table=table,
            field=field,
            row=row,
        )


class UnknownTableError(HetdbError, LookupError):
    """The requested table does not exist in the database."""

    def __init__(self, table: str) -> None:
        super().__init__(f'unknown table "{table}" in database', table=table)


class MissingFieldError(HetdbError, LookupError):
    """A field requested for binding is absent from a row."""

    def __init__(self, field: str, *, table: str | None = None, row: int | None = None) -> None:
        super().__init__(f'field "{field}" missing from row', table=table, field=field, row=row)
