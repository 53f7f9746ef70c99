"""Test that the top-level quickstart API works for hetdb."""
from __future__ import annotations


def test_quickstart_imports() -> None:
    import hetdb

    assert callable(hetdb.read)
    assert callable(hetdb.validate)
    assert callable(hetdb.sort)


def test_version(expected_version: str) -> None:
    import hetdb

    assert hetdb.__version__ == expected_version


def test_package_name(package_name: str) -> None:
    import importlib

    module = importlib.import_module(package_name)
    assert module.__name__ == "hetdb"


def test_quickstart_validate_inline() -> None:
    import hetdb

    db = hetdb.loads(
        "_tabledef:\n"
        "  - name: note\n"
        "    mandatory: text\n"
        "note:\n"
        "  - text: hello\n"
    )
    assert hetdb.validate(db) is None
    assert [text for (text,) in hetdb.iter_fields(db, "note", ["text"])] == ["hello"]


def test_quickstart_error_message() -> None:
    import hetdb

    db = hetdb.loads("_tabledef: []\nnote: []\n")
    assert hetdb.validate(db) == 'no entry for table "note" in table "_tabledef"'


def test_all_exports_resolve() -> None:
    import hetdb

    for name in hetdb.__all__:
        assert hasattr(hetdb, name), name
