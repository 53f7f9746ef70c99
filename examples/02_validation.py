#!/usr/bin/env python3
"""Example: hetdb Validation

Demonstrates validating databases and interpreting the error messages
for the most common mistakes.

Usage:
    python examples/02_validation.py

Requirements:
    pip install hetdb
"""
from __future__ import annotations

import hetdb

TABLEDEF = '''
_tabledef:
  - name: link
    mandatory: [url, title]
    optional: [tags]
    unique: [url]
'''

BROKEN = {
    "missing title": TABLEDEF + '''
link:
  - url: https://example.com/bread
''',
    "duplicate url": TABLEDEF + '''
link:
  - url: https://example.com/bread
    title: Baking Bread
  - url: " https://example.com/bread "
    title: Baking Bread Again
''',
    "undeclared field": TABLEDEF + '''
link:
  - url: https://example.com/bread
    title: Baking Bread
    priority: high
''',
    "undeclared table": TABLEDEF + '''
note:
  - text: remember the milk
''',
}


def main() -> None:
    print(f"hetdb version: {hetdb.__version__}")

    for label, source in BROKEN.items():
        message = hetdb.validate(hetdb.loads(source))
        print(f"  {label:<18} -> {message}")

    # check() raises instead, with the location attached
    try:
        hetdb.check(hetdb.loads(BROKEN["missing title"]))
    except hetdb.HetdbError as error:
        print(f"\n{type(error).__name__}: table={error.table} field={error.field} row={error.row}")


if __name__ == "__main__":
    main()
