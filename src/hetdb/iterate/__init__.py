"""hetdb iteration module.

Exports the generator forms ``iter_rows`` / ``iter_fields``, the
body-driven loops ``for_rows`` / ``for_fields`` and their outcome types.
"""
from __future__ import annotations

from hetdb.iterate.iterator import (
    Escape,
    Flow,
    Outcome,
    for_fields,
    for_rows,
    iter_fields,
    iter_rows,
)

__all__ = [
    "Escape",
    "Flow",
    "Outcome",
    "for_fields",
    "for_rows",
    "iter_fields",
    "iter_rows",
]
