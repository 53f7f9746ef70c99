"""hetdb Validator module.

Exports the ``Validator`` class, the ``SchemaResolver`` and the
``check`` / ``validate`` / ``resolve_schema`` convenience functions.
"""
from __future__ import annotations

from hetdb.validator.resolver import SchemaResolver, resolve_schema
from hetdb.validator.validator import Validator, check, validate

__all__ = [
    "SchemaResolver",
    "Validator",
    "check",
    "resolve_schema",
    "validate",
]
