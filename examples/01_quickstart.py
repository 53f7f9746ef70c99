#!/usr/bin/env python3
"""Example: Quickstart — hetdb

Minimal working example: load a database from text, validate it,
walk a table and sort it.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install hetdb
"""
from __future__ import annotations

import hetdb

HETDB_SOURCE = '''
_tabledef:
  - name: tag
    mandatory: [name, title]
    optional: [main]
    unique: [name]

tag:
  - name: cooking
    title: How to Cook
    main: true
  - name: mechanics
    title: How to Make Things
    main: true
  - name: article
    title: An Article
    main: false
'''


def main() -> None:
    print(f"hetdb version: {hetdb.__version__}")

    # Step 1: Parse the text and validate it against its own _tabledef
    db = hetdb.loads(HETDB_SOURCE)
    hetdb.check(db)
    print(f"Loaded tables: {', '.join(db)}")

    # Step 2: Walk a table with a plain for loop
    for name, title in hetdb.iter_fields(db, "tag", ["name", "title"]):
        print(f"  {name:<10} {title}")

    # Step 3: The same walk with a loop body that stops early
    hetdb.for_fields(
        db, "tag", ["name", "main"],
        lambda tag_name, tag_main: hetdb.Flow.STOP if tag_main == "false" else print(f"  main: {tag_name}"),
    )

    # Step 4: Sort a table; the original database is untouched
    sorted_db = hetdb.sort(db, "tag", hetdb.by_fields(["name"]))
    print("\nSorted:")
    print(hetdb.dumps(sorted_db))


if __name__ == "__main__":
    main()
