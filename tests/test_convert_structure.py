from __future__ import annotations

import logging

import pytest

from html2react.convert import convert_html_to_jsx
from html2react.convert.jsx import escape_jsx_text, jsx_tag_name, normalize_tag_name
from html2react.errors import ConversionInputError
from html2react.model.options import ConversionOptions
from html2react.model.result import CssVarTable


def test_landing_page_end_to_end(landing_page: str, landing_image_map: dict[str, str]) -> None:
    result = convert_html_to_jsx(landing_page, landing_image_map)

    assert result.body_found is True
    assert result.jsx == (
        '<div data-page="home" className="app">'
        "<header style={{ backgroundColor: '#fff' }} className=\"top custom-var-1\">"
        '<img src={logoAbc} alt="Logo" />'
        "</header>"
        "<main>"
        '<label htmlFor="email">Email</label>'
        '<input id="email" type="email" required={true} />'
        "<button onClick={() => { track('signup') }} disabled={false}>Sign up</button>"
        "</main>"
        "</div>"
    )
    assert result.image_imports.as_dict() == {"_logo_abc.png": "logoAbc"}
    assert result.css_vars.as_dict() == {"custom-var-1": {"--accent": "#f60"}}
    assert result.warnings == []


def test_body_attributes_move_to_wrapper_div() -> None:
    html = '<body class="app"><div style="color:red;--x:1px">Hi</div></body>'
    result = convert_html_to_jsx(html)

    assert result.jsx == (
        '<div className="app"><div style={{ color: \'red\' }} className="custom-var-1">Hi</div></div>'
    )
    assert result.css_vars["custom-var-1"] == {"--x": "1px"}


def test_body_without_attributes_still_gets_wrapper() -> None:
    result = convert_html_to_jsx("<html><body><p>x</p></body></html>")
    assert result.jsx == "<div><p>x</p></div>"


def test_wrapper_tag_is_configurable() -> None:
    options = ConversionOptions(wrapper_tag="section")
    result = convert_html_to_jsx('<body id="root"><p>x</p></body>', options=options)
    assert result.jsx == '<section id="root"><p>x</p></section>'


def test_document_without_body_becomes_fragment(caplog: pytest.LogCaptureFixture) -> None:
    html = '<img src="/front/assets/logo-abc.png">'
    with caplog.at_level(logging.INFO, logger="html2react"):
        result = convert_html_to_jsx(html, {"/front/assets/logo-abc.png": "_logo_abc.png"})

    assert result.jsx == "<><img src={logoAbc} /></>"
    assert result.body_found is False
    assert "No <body> tag found" in caplog.text


def test_empty_input_is_empty_fragment() -> None:
    result = convert_html_to_jsx("")
    assert result.jsx == "<></>"
    assert not result.image_imports
    assert not result.css_vars


@pytest.mark.parametrize(
    "html",
    [
        "<head><title>T</title><style>p { color: red }</style></head><body><p>ok</p></body>",
        "<body><script>var x = '<p>no</p>';</script><p>ok</p></body>",
        "<body><noscript><p>enable js</p></noscript><p>ok</p></body>",
        '<body><iframe src="https://example.com"></iframe><p>ok</p></body>',
        "<body><style>.a{}</style><p>ok</p></body>",
    ],
)
def test_discarded_elements_never_reach_output(html: str) -> None:
    result = convert_html_to_jsx(html)
    assert result.jsx == "<div><p>ok</p></div>"


def test_discarded_subtree_does_not_register_images() -> None:
    html = '<body><noscript><img src="/a/tracker.png"></noscript><p>ok</p></body>'
    result = convert_html_to_jsx(html)
    assert not result.image_imports


def test_unterminated_head_is_closed_by_body() -> None:
    result = convert_html_to_jsx("<head><title>t</title><body><p>x</p></body>")
    assert result.jsx == "<div><p>x</p></div>"
    assert result.warnings == ["Implicitly closing <head> before <body>"]


def test_mismatched_close_tag_closes_inner_elements(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="html2react"):
        result = convert_html_to_jsx("<body><div><span>a</div></body>")

    assert result.jsx == "<div><div><span>a</span></div></div>"
    assert result.warnings == ["Mismatched tag: expected </span>, got </div>"]
    assert "Mismatched tag" in caplog.text


def test_stray_close_tag_is_ignored() -> None:
    result = convert_html_to_jsx("<body><p>x</p></span></body>")
    assert result.jsx == "<div><p>x</p></div>"
    assert result.warnings == ["Stray closing tag </span> ignored"]


def test_unclosed_tags_are_closed_in_reverse_order() -> None:
    result = convert_html_to_jsx("<body><div><p>x")
    assert result.jsx == "<div><div><p>x</p></div></div>"
    assert result.warnings == ["Malformed HTML - unclosed tags: div, p"]


def test_nested_body_tag_is_ignored() -> None:
    result = convert_html_to_jsx('<body class="a"><main><body class="b">x</body></main></body>')
    assert result.jsx == '<div className="a"><main>x</main></div>'


def test_void_and_self_closing_elements() -> None:
    result = convert_html_to_jsx("<p>a<br>b<hr/></p><div/>")
    assert result.jsx == "<><p>a<br />b<hr /></p><div /></>"


def test_text_is_escaped_and_whitespace_only_text_dropped() -> None:
    result = convert_html_to_jsx("<p>a &amp; b &lt; c</p>\n   \n<p>x &gt; y</p>")
    assert result.jsx == "<><p>a &amp; b &lt; c</p><p>x &gt; y</p></>"


def test_comments_are_dropped() -> None:
    result = convert_html_to_jsx("<body><!-- nav --><p>x</p></body>")
    assert result.jsx == "<div><p>x</p></div>"


def test_svg_names_keep_their_case() -> None:
    html = (
        '<svg viewBox="0 0 10 10"><linearGradient gradientUnits="userSpaceOnUse"></linearGradient>'
        '<path stroke-width="2" xlink:href="#a"/></svg>'
    )
    result = convert_html_to_jsx(html)
    assert result.jsx == (
        '<><svg viewBox="0 0 10 10"><linearGradient gradientUnits="userSpaceOnUse"></linearGradient>'
        '<path strokeWidth="2" xlinkHref="#a" /></svg></>'
    )


def test_repeated_attribute_keeps_first_value() -> None:
    result = convert_html_to_jsx('<a href="/one" href="/two">x</a>')
    assert result.jsx == '<><a href="/one">x</a></>'


def test_css_table_numbering_continues_across_documents() -> None:
    table = CssVarTable()
    first = convert_html_to_jsx('<p style="--a: 1">x</p>', css_vars=table)
    second = convert_html_to_jsx('<p style="--b: 2">y</p>', css_vars=table)

    assert 'className="custom-var-1"' in first.jsx
    assert 'className="custom-var-2"' in second.jsx
    assert second.css_vars is table
    assert len(table) == 2


def test_tables_are_per_call() -> None:
    first = convert_html_to_jsx('<p style="--a: 1"><img src="/x/a.png"></p>')
    second = convert_html_to_jsx("<p>plain</p>")

    assert len(first.css_vars) == 1
    assert len(first.image_imports) == 1
    assert not second.css_vars
    assert not second.image_imports


def test_normalize_pass_is_opt_in() -> None:
    html = '<p>Use class="x" in markup</p>'
    plain = convert_html_to_jsx(html)
    normalized = convert_html_to_jsx(html, options=ConversionOptions(normalize=True))

    assert plain.jsx == '<><p>Use class="x" in markup</p></>'
    # The regex pass cannot tell text from attributes
    assert normalized.jsx == '<><p>Use className="x" in markup</p></>'


@pytest.mark.parametrize("bad", [None, b"<p>x</p>", 42])
def test_non_string_html_is_rejected(bad: object) -> None:
    with pytest.raises(ConversionInputError):
        convert_html_to_jsx(bad)  # type: ignore[arg-type]


@pytest.mark.parametrize("bad_map", [[("a", "b")], {"a": 1}, {1: "a.png"}])
def test_invalid_filename_map_is_rejected(bad_map: object) -> None:
    with pytest.raises(TypeError):
        convert_html_to_jsx("<p>x</p>", bad_map)  # type: ignore[arg-type]


def test_helpers() -> None:
    assert escape_jsx_text("a & <b>") == "a &amp; &lt;b&gt;"
    assert normalize_tag_name("SVG:Path") == "path"
    assert jsx_tag_name("fegaussianblur") == "feGaussianBlur"
    assert jsx_tag_name("div") == "div"


def test_self_closed_body_still_captures_content() -> None:
    result = convert_html_to_jsx('<html><body class="app"/><p>hi</p></html>')
    assert result.jsx == '<div className="app"><p>hi</p></div>'
    assert result.body_found is True


def test_braces_in_text_are_left_raw_by_default(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="html2react"):
        result = convert_html_to_jsx("<code>f(){}</code>")
    assert result.jsx == "<><code>f(){}</code></>"
    assert "braces" in caplog.text


def test_braces_in_text_can_be_escaped() -> None:
    options = ConversionOptions(escape_braces=True)
    result = convert_html_to_jsx("<code>f(){ return 1; }</code>", options=options)
    assert result.jsx == "<><code>f(){'{'} return 1; {'}'}</code></>"
    assert escape_jsx_text("{a & b}", escape_braces=True) == "{'{'}a &amp; b{'}'}"
