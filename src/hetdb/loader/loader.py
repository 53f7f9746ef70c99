"""Reading and writing the hetdb text format.

A hetdb file is a YAML document: a mapping of table names to lists of
rows, each row a mapping of field names to strings::

    _tabledef:
      - name: tag
        mandatory: [name, title]
        optional: [main]
        unique: [name]
    tag:
      - name: cooking
        title: How to Cook
        main: true

Documents are loaded with ``yaml.BaseLoader`` so every scalar stays a
string (``true`` above is the string ``"true"``) and mapping order is
kept.  Parse and I/O errors (``yaml.YAMLError``, ``OSError``) propagate
unchanged.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from hetdb.schema.model import Database
from hetdb.validator.validator import Validator

logger = logging.getLogger(__name__)


def loads(text: str) -> Any:
    """Parse hetdb text without validating it.

    The result is whatever the document holds; ``Validator.check``
    decides whether it is a database.
    """
    return yaml.load(text, Loader=yaml.BaseLoader)  # noqa: S506


def load(path: str | Path) -> Any:
    """Read and parse a hetdb file without validating it."""
    text = Path(path).read_text(encoding="utf-8")
    logger.debug("Read %d character(s) from %s", len(text), path)
    return loads(text)


def read(path: str | Path, validator: Validator | None = None) -> Database:
    """Read, parse and validate a hetdb file.

    Parameters
    ----------
    path:
        File to read.
    validator:
        Validator to use.  Defaults to ``Validator()``.

    Returns
    -------
    Database
        The validated database.

    Raises
    ------
    OSError
        The file cannot be read.
    yaml.YAMLError
        The file is not valid YAML.
    HetdbError
        The document is not a valid database.
    """
    db = load(path)
    (validator if validator is not None else Validator()).check(db)
    return db


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def dumps(db: Database) -> str:
    """Return ``db`` as hetdb text, keeping table, row and field order."""
    return yaml.safe_dump(
        _plain(db),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def write(db: Database, path: str | Path) -> None:
    """Write ``db`` to ``path`` as hetdb text."""
    Path(path).write_text(dumps(db), encoding="utf-8")
    logger.debug("Wrote database with %d table(s) to %s", len(db), path)
