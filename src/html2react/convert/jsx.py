"""Streaming HTML to JSX conversion.

The document is tokenized by :class:`html.parser.HTMLParser` and converted in
a single pass. Each open element is tracked on an explicit frame stack whose
entries record what the element does to its subtree:

- ``EMIT``: the element is written to the output and must be closed again
- ``DISCARD``: the element and everything inside it is dropped
- ``BODY``: the ``<body>`` element, replaced by a wrapper around the output

Malformed markup is repaired rather than rejected: close tags that skip over
open elements close those elements first, stray close tags are ignored, and
elements left open at the end of the input are closed in stack order.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from html.parser import HTMLParser

from html2react.convert.attributes import AttributeConverter
from html2react.convert.normalize import normalize_jsx_attributes
from html2react.convert.tables import (
    DISCARDED_ELEMENTS,
    SVG_CASE_SENSITIVE_ELEMENTS,
    TRANSPARENT_ELEMENTS,
    VOID_ELEMENTS,
)
from html2react.diagnostics import log_conversion_summary, log_structural_anomaly
from html2react.errors import ConversionInputError
from html2react.model.options import ConversionOptions
from html2react.model.result import ConversionResult, CssVarTable, ImageImportTable

logger = logging.getLogger(__name__)


class FrameKind(Enum):
    EMIT = "emit"
    DISCARD = "discard"
    BODY = "body"


@dataclass(slots=True)
class Frame:
    kind: FrameKind
    tag: str
    # EMIT frames only: whether the open tag went to the body buffer
    in_body: bool = False


_BRACE_ESCAPES = {ord("{"): "{'{'}", ord("}"): "{'}'}"}


def escape_jsx_text(text: str, *, escape_braces: bool = False) -> str:
    """Escape ``&``, ``<`` and ``>`` in a text node (ampersand first).

    With ``escape_braces`` the braces JSX would read as expression delimiters
    are written as ``{'{'}`` and ``{'}'}``.
    """

    text = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    if escape_braces:
        return text.translate(_BRACE_ESCAPES)
    return text


def normalize_tag_name(name: str) -> str:
    """Lower-case a tag name and drop any namespace prefix (``svg:path`` -> ``path``)."""

    return name.lower().rpartition(":")[2]


def jsx_tag_name(tag: str) -> str:
    return SVG_CASE_SENSITIVE_ELEMENTS.get(tag, tag)


class _JsxBuilder(HTMLParser):
    """HTMLParser subclass that writes JSX while it parses."""

    def __init__(
        self, attributes: AttributeConverter, warnings: list[str], *, escape_braces: bool = False
    ) -> None:
        super().__init__(convert_charrefs=True)
        self._escape_braces = escape_braces
        self._attributes = attributes
        self._warnings = warnings
        self.stack: list[Frame] = []
        self.body_parts: list[str] = []
        self.pre_body_parts: list[str] = []
        self.body_found = False
        self.body_attrs: dict[str, str | None] | None = None
        self._body_depth = 0
        self._discard_depth = 0

    # --- Helpers ---------------------------------------------------------
    @property
    def in_body(self) -> bool:
        return self._body_depth > 0

    @property
    def discarding(self) -> bool:
        return self._discard_depth > 0

    def _write(self, text: str, in_body: bool) -> None:
        (self.body_parts if in_body else self.pre_body_parts).append(text)

    def _warn(self, message: str, *args: object) -> None:
        text = message % args if args else message
        self._warnings.append(text)
        log_structural_anomaly(text)

    def _push(self, frame: Frame) -> None:
        if frame.kind is FrameKind.DISCARD:
            self._discard_depth += 1
        elif frame.kind is FrameKind.BODY:
            self._body_depth += 1
        self.stack.append(frame)

    def _pop(self) -> Frame:
        frame = self.stack.pop()
        if frame.kind is FrameKind.DISCARD:
            self._discard_depth -= 1
        elif frame.kind is FrameKind.BODY:
            self._body_depth -= 1
        elif frame.kind is FrameKind.EMIT:
            self._write(f"</{jsx_tag_name(frame.tag)}>", frame.in_body)
        return frame

    def _close_open_head(self) -> None:
        head = next(
            (i for i, f in enumerate(self.stack) if f.kind is FrameKind.DISCARD and f.tag == "head"),
            None,
        )
        if head is None:
            return
        self._warn("Implicitly closing <head> before <body>")
        while len(self.stack) > head:
            self._pop()

    def _open(self, tag: str, attrs: list[tuple[str, str | None]], self_closing: bool) -> None:
        tag = normalize_tag_name(tag)
        closes_itself = self_closing or tag in VOID_ELEMENTS

        if tag == "body" and self.discarding:
            self._close_open_head()

        if self.discarding or tag in DISCARDED_ELEMENTS:
            if not closes_itself:
                self._push(Frame(FrameKind.DISCARD, tag))
            return

        if tag in TRANSPARENT_ELEMENTS:
            return

        if tag == "body":
            if self.in_body:
                logger.debug("Ignoring nested <body> tag")
                return
            self.body_found = True
            if self.body_attrs is None:
                self.body_attrs = _attribute_map(attrs)
            if closes_itself:
                logger.debug("Ignoring self-closing flag on <body>")
            self._push(Frame(FrameKind.BODY, tag))
            return

        in_body = self.in_body
        name = jsx_tag_name(tag)
        converted = self._attributes.convert(_attribute_map(attrs))
        if closes_itself:
            self._write(f"<{name}{converted} />", in_body)
        else:
            self._write(f"<{name}{converted}>", in_body)
            self._push(Frame(FrameKind.EMIT, tag, in_body=in_body))

    # --- HTMLParser Overrides -------------------------------------------
    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._open(tag, attrs, self_closing=False)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._open(tag, attrs, self_closing=True)

    def handle_endtag(self, tag: str) -> None:
        tag = normalize_tag_name(tag)
        if tag in VOID_ELEMENTS or (tag in TRANSPARENT_ELEMENTS and not self.discarding):
            return

        match = None
        for index in range(len(self.stack) - 1, -1, -1):
            if self.stack[index].tag == tag:
                match = index
                break

        if match is None:
            if not self.discarding:
                self._warn("Stray closing tag </%s> ignored", tag)
            return

        while len(self.stack) - 1 > match:
            frame = self.stack[-1]
            if frame.kind is FrameKind.EMIT:
                self._warn("Mismatched tag: expected </%s>, got </%s>", frame.tag, tag)
            self._pop()
        self._pop()

    def handle_data(self, data: str) -> None:
        if self.discarding or not data.strip():
            return
        if not self._escape_braces and ("{" in data or "}" in data):
            logger.debug("Text contains braces that JSX reads as expressions: %.60r", data)
        self._write(escape_jsx_text(data, escape_braces=self._escape_braces), self.in_body)

    def handle_comment(self, data: str) -> None:
        # Comments are not representable as JSX children
        pass

    def close(self) -> None:
        super().close()
        unclosed = [f.tag for f in self.stack if f.kind is FrameKind.EMIT]
        if unclosed:
            self._warn("Malformed HTML - unclosed tags: %s", ", ".join(unclosed))
        while self.stack:
            self._pop()


def _attribute_map(attrs: list[tuple[str, str | None]]) -> dict[str, str | None]:
    # The first occurrence of a repeated attribute wins, as in browsers
    result: dict[str, str | None] = {}
    for key, value in attrs:
        result.setdefault(key, value)
    return result


def _check_inputs(html: object, filename_map: object) -> None:
    if not isinstance(html, str):
        raise ConversionInputError(
            f"html must be a str, got {type(html).__name__}"
        )
    if filename_map is None:
        return
    if not isinstance(filename_map, Mapping):
        raise ConversionInputError(
            f"filename_map must be a mapping, got {type(filename_map).__name__}"
        )
    for key, value in filename_map.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ConversionInputError(
                f"filename_map entries must map str to str, got {key!r}: {value!r}"
            )


def convert_html_to_jsx(
    html: str,
    filename_map: Mapping[str, str] | None = None,
    *,
    options: ConversionOptions | None = None,
    css_vars: CssVarTable | None = None,
) -> ConversionResult:
    """Convert an HTML document into a JSX fragment.

    Only the content of ``<body>`` is kept when the document has one; its
    attributes move to a wrapper element. Without a body the whole document
    is converted and wrapped in a fragment.

    Args:
        html: Raw HTML document
        filename_map: Original asset references mapped to sanitized filenames
        options: Conversion options (defaults when omitted)
        css_vars: Existing custom property table to extend, so class numbering
            continues across several documents

    Returns:
        ConversionResult holding the JSX and the image import and CSS
        custom property tables filled during conversion

    Raises:
        ConversionInputError: If ``html`` is not a string or ``filename_map``
            is not a mapping of strings
    """

    _check_inputs(html, filename_map)
    options = options or ConversionOptions()
    imports = ImageImportTable()
    if css_vars is None:
        css_vars = CssVarTable(prefix=options.custom_var_prefix)

    attributes = AttributeConverter(filename_map or {}, imports, css_vars, options)
    warnings: list[str] = []
    builder = _JsxBuilder(attributes, warnings, escape_braces=options.escape_braces)
    builder.feed(html)
    builder.close()

    if builder.body_found:
        content = "".join(builder.body_parts)
    else:
        content = "".join(builder.pre_body_parts)
        if content:
            logger.info("No <body> tag found in HTML; converting the entire content")

    if options.normalize:
        content = normalize_jsx_attributes(content)

    if builder.body_attrs is not None:
        wrapper_attrs = attributes.convert(builder.body_attrs)
        jsx = f"<{options.wrapper_tag}{wrapper_attrs}>{content}</{options.wrapper_tag}>"
    else:
        jsx = f"<>{content}</>"

    result = ConversionResult(
        jsx=jsx,
        image_imports=imports,
        css_vars=css_vars,
        body_found=builder.body_found,
        warnings=warnings,
    )
    log_conversion_summary(result)
    return result


__all__ = [
    "Frame",
    "FrameKind",
    "convert_html_to_jsx",
    "escape_jsx_text",
    "jsx_tag_name",
    "normalize_tag_name",
]
