"""hetdb schema module.

Exports the data model type aliases, ``TableDef``, the bootstrap
definition of ``_tabledef`` and the name validity predicates.
"""
from __future__ import annotations

from hetdb.schema.model import (
    BOOTSTRAP_TABLEDEF,
    Database,
    Row,
    Table,
    TableDef,
    Value,
    comparable,
    words,
)
from hetdb.schema.names import TABLEDEF, is_valid_field_name, is_valid_table_name

__all__ = [
    "BOOTSTRAP_TABLEDEF",
    "Database",
    "Row",
    "Table",
    "TableDef",
    "Value",
    "TABLEDEF",
    "comparable",
    "words",
    "is_valid_field_name",
    "is_valid_table_name",
]
