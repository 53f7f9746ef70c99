"""Identifier rules for table and field names.

Both kinds of name share one character rule, ``[A-Za-z0-9][A-Za-z0-9_]*``,
and may not end in ``_``.  The only name allowed to start with ``_`` is
the reserved schema table, ``_tabledef``.
"""
from __future__ import annotations

import re
from typing import Final

TABLEDEF: Final[str] = "_tabledef"

_NAME: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9][A-Za-z0-9_]*")


def _is_identifier(name: object) -> bool:
    return (
        isinstance(name, str)
        and _NAME.fullmatch(name) is not None
        and not name.endswith("_")
    )


def is_valid_table_name(name: object) -> bool:
    """Return True if ``name`` may be used as a table name."""
    return name == TABLEDEF or _is_identifier(name)


def is_valid_field_name(name: object) -> bool:
    """Return True if ``name`` may be used as a field name."""
    return _is_identifier(name)
