from __future__ import annotations

import pytest

from html2react.model.result import ConversionResult, CssVarTable, ImageImportTable


def test_image_import_table_keeps_first_identifier() -> None:
    table = ImageImportTable()
    assert table.add("logo.png", "logo") == "logo"
    assert table.add("logo.png", "somethingElse") == "logo"
    assert len(table) == 1
    assert "logo.png" in table
    assert table.get("logo.png") == "logo"
    assert table.get("missing.png") is None


def test_image_import_table_suffixes_colliding_identifiers() -> None:
    table = ImageImportTable()
    assert table.add("a-b.png", "aB") == "aB"
    assert table.add("a_b.png", "aB") == "aB2"
    assert table.add("a.b.png", "aB") == "aB3"
    assert list(table.items()) == [("a-b.png", "aB"), ("a_b.png", "aB2"), ("a.b.png", "aB3")]


def test_css_var_table_numbering_and_prefix() -> None:
    table = CssVarTable(prefix="cv")
    assert not table
    assert table.add({"--a": "1"}) == "cv-1"
    assert table.add({"--a": "1"}) == "cv-2"
    assert "cv-2" in table
    assert table.as_dict() == {"cv-1": {"--a": "1"}, "cv-2": {"--a": "1"}}
    with pytest.raises(KeyError):
        table["cv-3"]


def test_css_var_table_copies_declarations() -> None:
    decls = {"--a": "1"}
    table = CssVarTable()
    name = table.add(decls)
    decls["--b"] = "2"
    assert table[name] == {"--a": "1"}


def test_conversion_result_defaults() -> None:
    result = ConversionResult(jsx="<></>")
    assert result.body_found is False
    assert result.warnings == []
    assert not result.image_imports
    assert not result.css_vars
