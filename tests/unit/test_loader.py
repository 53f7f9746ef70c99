"""Unit tests for hetdb.loader — the YAML text format."""
from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any

import pytest
import yaml

from hetdb.errors import ConstraintError
from hetdb.loader import dumps, load, loads, read, write

_SOURCE = textwrap.dedent("""\
    _tabledef:
      - name: tag
        mandatory: [name, title]
        optional: [main]
    tag:
      - name: cooking
        title: How to Cook
        main: true
      - name: "  spaced  "
        title: 42
""")


class TestLoads:
    def test_scalars_stay_strings(self) -> None:
        db = loads(_SOURCE)
        assert db["tag"][0]["main"] == "true"
        assert db["tag"][1]["title"] == "42"

    def test_quoted_whitespace_kept(self) -> None:
        assert loads(_SOURCE)["tag"][1]["name"] == "  spaced  "

    def test_mapping_order_kept(self) -> None:
        db = loads(_SOURCE)
        assert list(db) == ["_tabledef", "tag"]
        assert list(db["tag"][0]) == ["name", "title", "main"]

    def test_flow_lists(self) -> None:
        assert loads(_SOURCE)["_tabledef"][0]["mandatory"] == ["name", "title"]

    def test_empty_document(self) -> None:
        assert loads("") is None

    def test_malformed_text_raises_yaml_error(self) -> None:
        with pytest.raises(yaml.YAMLError):
            loads("tag: [unclosed")


class TestFiles:
    def test_load_does_not_validate(self, tmp_path: Path) -> None:
        path = tmp_path / "db.hetdb"
        path.write_text("tag: []\n", encoding="utf-8")
        assert load(path) == {"tag": []}

    def test_read_validates(self, tmp_path: Path) -> None:
        path = tmp_path / "db.hetdb"
        path.write_text(_SOURCE + "  - title: no name\n", encoding="utf-8")
        with pytest.raises(ConstraintError):
            read(path)

    def test_read_accepts_str_path(self, tmp_path: Path) -> None:
        path = tmp_path / "db.hetdb"
        path.write_text(_SOURCE, encoding="utf-8")
        assert read(str(path))["tag"][0]["name"] == "cooking"

    def test_missing_file_raises_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read(tmp_path / "unknown.hetdb")


class TestDump:
    def test_round_trip_through_text(self, tag_db: dict[str, Any]) -> None:
        assert loads(dumps(tag_db)) == tag_db

    def test_order_preserved_in_text(self, tag_db: dict[str, Any]) -> None:
        text = dumps(tag_db)
        assert text.index("_tabledef") < text.index("tag:")
        assert text.index("cooking") < text.index("mechanics") < text.index("article")

    def test_tuples_and_mappings_become_plain_yaml(self) -> None:
        from types import MappingProxyType

        db = MappingProxyType({"_tabledef": ({"name": "t", "mandatory": ("a",)},), "t": ()})
        assert loads(dumps(db)) == {"_tabledef": [{"name": "t", "mandatory": ["a"]}], "t": []}

    def test_write(self, tmp_path: Path, tag_db: dict[str, Any]) -> None:
        path = tmp_path / "out.hetdb"
        write(tag_db, path)
        assert read(path) == tag_db
