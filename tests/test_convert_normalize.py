from __future__ import annotations

from html2react.convert.normalize import normalize_jsx_attributes


def test_normalize_rewrites_html_attributes() -> None:
    jsx = (
        '<div class="x" onclick="go()" stroke-width="2" data-id="1" '
        'aria-hidden="true" disabled="true">'
    )
    assert normalize_jsx_attributes(jsx) == (
        '<div className="x" onClick={() => { go() }} strokeWidth="2" data-id="1" '
        'aria-hidden="true" disabled={true}>'
    )


def test_normalize_uses_rename_tables() -> None:
    jsx = '<meta http-equiv="refresh"><input readonly="false">'
    assert normalize_jsx_attributes(jsx) == '<meta httpEquiv="refresh"><input readOnly={false}>'


def test_normalize_leaves_converted_jsx_alone() -> None:
    jsx = '<div className="a" onClick={() => { go() }} disabled={true} data-x="1" />'
    assert normalize_jsx_attributes(jsx) == jsx
