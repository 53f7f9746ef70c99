"""hetdb sort module.

Exports ``sort_table`` and the ``by_fields`` comparator builder.
"""
from __future__ import annotations

from hetdb.sort.sorter import Comparator, by_fields, sort_table

__all__ = ["Comparator", "by_fields", "sort_table"]
