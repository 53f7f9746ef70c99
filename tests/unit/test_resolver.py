"""Unit tests for hetdb.validator.resolver — reading ``_tabledef``."""
from __future__ import annotations

from typing import Any

import pytest

from hetdb.errors import (
    ConstraintError,
    InvalidNameError,
    SchemaError,
    StructureError,
)
from hetdb.schema.model import TableDef
from hetdb.validator.resolver import SchemaResolver, resolve_schema


def _db(*tabledef_rows: dict[str, Any], **tables: Any) -> dict[str, Any]:
    return {"_tabledef": list(tabledef_rows), **tables}


class TestResolvedDefinitions:
    def test_lists_become_tuples_in_declared_order(self) -> None:
        tabledefs = resolve_schema(_db(
            {"name": "link", "mandatory": ["url", "title"], "optional": ["tags"], "unique": ["url"]},
        ))
        assert tabledefs == {
            "link": TableDef(
                name="link",
                mandatory=("url", "title"),
                optional=("tags",),
                unique=("url",),
            ),
        }

    def test_missing_lists_default_to_empty(self) -> None:
        tabledefs = resolve_schema(_db({"name": "empty"}))
        assert tabledefs["empty"] == TableDef(name="empty")

    def test_whitespace_separated_strings_accepted(self) -> None:
        tabledefs = resolve_schema(_db(
            {"name": "tag", "mandatory": "name title", "optional": " main ", "unique": "name"},
        ))
        assert tabledefs["tag"].mandatory == ("name", "title")
        assert tabledefs["tag"].optional == ("main",)
        assert tabledefs["tag"].unique == ("name",)

    def test_table_name_is_trimmed(self) -> None:
        tabledefs = resolve_schema(_db({"name": " tag ", "mandatory": ["name"]}))
        assert list(tabledefs) == ["tag"]

    def test_result_keeps_tabledef_row_order(self) -> None:
        tabledefs = resolve_schema(_db({"name": "b"}, {"name": "a"}, {"name": "c"}))
        assert list(tabledefs) == ["b", "a", "c"]

    def test_empty_tabledef_resolves_to_nothing(self) -> None:
        assert resolve_schema(_db()) == {}

    def test_resolver_instance_equivalent_to_function(self) -> None:
        db = _db({"name": "tag", "mandatory": ["name"]})
        assert SchemaResolver().resolve(db) == resolve_schema(db)


class TestTabledefErrors:
    def test_missing_tabledef(self) -> None:
        with pytest.raises(SchemaError) as exc_info:
            resolve_schema({"tag": []})
        assert str(exc_info.value) == 'table "_tabledef" is missing'

    def test_tabledef_not_a_list(self) -> None:
        with pytest.raises(StructureError) as exc_info:
            resolve_schema({"_tabledef": "name tag"})
        assert str(exc_info.value) == 'structure of table "_tabledef" not valid'

    def test_tabledef_row_not_a_mapping(self) -> None:
        with pytest.raises(StructureError) as exc_info:
            resolve_schema({"_tabledef": [{"name": "tag"}, ["name", "link"]]})
        assert str(exc_info.value) == 'structure of row 1 in table "_tabledef" not valid'

    def test_nested_mapping_value_rejected(self) -> None:
        with pytest.raises(StructureError) as exc_info:
            resolve_schema(_db({"name": "tag", "mandatory": {"name": "x"}}))
        assert str(exc_info.value) == 'structure of row 0 in table "_tabledef" not valid'

    def test_name_given_as_list_rejected(self) -> None:
        with pytest.raises(StructureError) as exc_info:
            resolve_schema(_db({"name": ["tag", "link"]}))
        assert str(exc_info.value) == 'structure of row 0 in table "_tabledef" not valid'

    def test_name_is_mandatory(self) -> None:
        with pytest.raises(ConstraintError) as exc_info:
            resolve_schema(_db({"mandatory": ["title"]}))
        assert str(exc_info.value) == 'mandatory field "name" in table "_tabledef" is missing'

    def test_unknown_tabledef_field(self) -> None:
        with pytest.raises(ConstraintError) as exc_info:
            resolve_schema(_db({"name": "tag", "primary": "name"}))
        assert str(exc_info.value) == 'extra field "primary" in table "_tabledef"'

    def test_duplicate_table_definition(self) -> None:
        with pytest.raises(ConstraintError) as exc_info:
            resolve_schema(_db({"name": "link"}, {"name": "link"}))
        assert str(exc_info.value) == 'field "name" in table "_tabledef" isn\'t unique'
        assert exc_info.value.row == 1

    def test_duplicate_detected_after_trimming(self) -> None:
        with pytest.raises(ConstraintError):
            resolve_schema(_db({"name": "link"}, {"name": "  link\t"}))

    def test_tabledef_cannot_define_itself(self) -> None:
        with pytest.raises(SchemaError) as exc_info:
            resolve_schema(_db({"name": "_tabledef", "mandatory": ["name"]}))
        assert str(exc_info.value) == 'can\'t define "_tabledef" in table "_tabledef"'

    def test_optional_and_mandatory_overlap(self) -> None:
        with pytest.raises(SchemaError) as exc_info:
            resolve_schema(_db(
                {"name": "link", "mandatory": ["url", "title"], "optional": ["title"]},
            ))
        assert str(exc_info.value) == (
            'field "title" in table "link" can\'t be optional and mandatory'
        )
        assert exc_info.value.table == "link"
        assert exc_info.value.field == "title"

    def test_invalid_declared_field_name(self) -> None:
        with pytest.raises(InvalidNameError) as exc_info:
            resolve_schema(_db({"name": "link", "optional": ["url", "bad-name"]}))
        assert str(exc_info.value) == 'invalid field name "bad-name" in table "link"'

    def test_first_problem_wins(self) -> None:
        # The overlap in row 0 comes before the self-definition in row 1.
        with pytest.raises(SchemaError) as exc_info:
            resolve_schema(_db(
                {"name": "link", "mandatory": ["url"], "optional": ["url"]},
                {"name": "_tabledef"},
            ))
        assert "can't be optional and mandatory" in str(exc_info.value)

    def test_custom_bootstrap(self) -> None:
        strict = TableDef(name="_tabledef", mandatory=("name", "mandatory"))
        with pytest.raises(ConstraintError) as exc_info:
            SchemaResolver(bootstrap=strict).resolve(_db({"name": "tag"}))
        assert str(exc_info.value) == (
            'mandatory field "mandatory" in table "_tabledef" is missing'
        )
