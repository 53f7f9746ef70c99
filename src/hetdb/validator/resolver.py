"""Schema resolution: turn the ``_tabledef`` table into ``TableDef`` rules.

``_tabledef`` describes every other table, so before it can be trusted
it is itself checked against ``BOOTSTRAP_TABLEDEF``, a constant that
does not depend on the database being read.

Usage
-----
::

    from hetdb.validator import SchemaResolver

    tabledefs = SchemaResolver().resolve(db)
    tabledefs["tag"].mandatory
"""
from __future__ import annotations

import logging

from hetdb.errors import InvalidNameError, SchemaError, StructureError
from hetdb.schema.model import BOOTSTRAP_TABLEDEF, Database, TableDef, words
from hetdb.schema.names import TABLEDEF, is_valid_field_name
from hetdb.validator.checks import check_table

logger = logging.getLogger(__name__)


class SchemaResolver:
    """Build the per-table rule set from a database's ``_tabledef`` table.

    Parameters
    ----------
    bootstrap:
        Rules applied to ``_tabledef`` itself.  Defaults to
        ``BOOTSTRAP_TABLEDEF``.
    """

    def __init__(self, bootstrap: TableDef = BOOTSTRAP_TABLEDEF) -> None:
        self._bootstrap = bootstrap

    def resolve(self, db: Database) -> dict[str, TableDef]:
        """Return the ``TableDef`` of every table described in ``db``.

        The result keeps the row order of ``_tabledef``.  The first
        problem found is raised.

        Raises
        ------
        SchemaError
            ``_tabledef`` is missing, defines itself, or declares a field
            both mandatory and optional.
        StructureError, InvalidNameError, ConstraintError
            ``_tabledef`` does not satisfy the bootstrap rules.
        """
        if TABLEDEF not in db:
            raise SchemaError.missing_tabledef()
        table = db[TABLEDEF]
        check_table(TABLEDEF, table, self._bootstrap, word_lists=True)

        tabledefs: dict[str, TableDef] = {}
        for index, row in enumerate(table):
            name = row["name"]
            if not isinstance(name, str):
                raise StructureError.row_shape(TABLEDEF, index)
            name = name.strip()
            if name == TABLEDEF:
                raise SchemaError.self_definition()
            mandatory = words(row.get("mandatory"))
            optional = words(row.get("optional"))
            unique = words(row.get("unique"))
            for field_name in (*mandatory, *optional, *unique):
                if not is_valid_field_name(field_name):
                    raise InvalidNameError.field_name(name, field_name, index)
            for field_name in mandatory:
                if field_name in optional:
                    raise SchemaError.optional_and_mandatory(name, field_name)
            tabledefs[name] = TableDef(
                name=name, mandatory=mandatory, optional=optional, unique=unique
            )

        logger.debug("Resolved %d table definition(s)", len(tabledefs))
        return tabledefs


def resolve_schema(db: Database) -> dict[str, TableDef]:
    """Convenience function: resolve ``db``'s schema with the default bootstrap."""
    return SchemaResolver().resolve(db)
