"""hetdb loader module.

Exports ``read`` (load and validate), ``load`` / ``loads`` (parse only)
and ``dumps`` / ``write``.
"""
from __future__ import annotations

from hetdb.loader.loader import dumps, load, loads, read, write

__all__ = ["dumps", "load", "loads", "read", "write"]
