"""hetdb Validator: check a parsed database against its own schema.

Validation is fail-fast.  Tables are visited in insertion order, rows
in sequence order and fields in declaration order; the first problem
found is raised (``check``) or returned as a message (``validate``).

Usage
-----
::

    from hetdb.validator import Validator

    validator = Validator()
    validator.check(db)              # raises HetdbError
    message = validator.validate(db)  # None when valid
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

from hetdb.errors import HetdbError, SchemaError
from hetdb.schema.model import Database, TableDef
from hetdb.schema.names import TABLEDEF
from hetdb.validator.checks import (
    check_database_shape,
    check_rows,
    check_table_name,
    check_table_shape,
)
from hetdb.validator.resolver import SchemaResolver

logger = logging.getLogger(__name__)


class Validator:
    """Validator for hetdb databases.

    Parameters
    ----------
    resolver:
        Resolver used to read ``_tabledef``.  Defaults to a
        ``SchemaResolver`` with the built-in bootstrap rules.
    """

    def __init__(self, resolver: SchemaResolver | None = None) -> None:
        self._resolver = resolver if resolver is not None else SchemaResolver()

    def check(self, db: Database) -> dict[str, TableDef]:
        """Validate ``db`` and return its resolved table definitions.

        Raises
        ------
        HetdbError
            The first problem found, in traversal order.
        """
        check_database_shape(db)
        tabledefs = self._resolver.resolve(db)
        self.check_tables(db, tabledefs)
        return tabledefs

    def check_tables(self, db: Database, tabledefs: Mapping[str, TableDef]) -> None:
        """Check every table except ``_tabledef`` against ``tabledefs``."""
        checked = 0
        for name, table in db.items():
            if name == TABLEDEF:
                continue
            check_table_name(name)
            check_table_shape(name, table)
            tabledef = tabledefs.get(name)
            if tabledef is None:
                raise SchemaError.no_entry(name)
            check_rows(name, table, tabledef)
            checked += 1
        logger.debug("Validated %d table(s)", checked)

    def validate(self, db: Database) -> str | None:
        """Return ``None`` if ``db`` is valid, else the first error message."""
        try:
            self.check(db)
        except HetdbError as exc:
            return str(exc)
        return None


def check(db: Database) -> dict[str, TableDef]:
    """Convenience function: validate ``db`` with default rules, raising on error."""
    return Validator().check(db)


def validate(db: Database) -> str | None:
    """Convenience function: validate ``db`` and return the first error message.

    Parameters
    ----------
    db:
        The parsed database.

    Returns
    -------
    str | None
        ``None`` when the database is valid.
    """
    return Validator().validate(db)
