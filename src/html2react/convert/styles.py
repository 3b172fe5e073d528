"""Inline ``style`` attribute decomposition.

Regular declarations become a JSX style object literal; ``--*`` custom
properties cannot be expressed as style object keys and are returned
separately so the caller can move them into a generated CSS class.
"""

from __future__ import annotations

import re

_HYPHEN_LETTER_RE = re.compile(r"-([a-z])")
# Includes \u2028 and \u2029, which also end a JS string literal
_WHITESPACE_RE = re.compile(r"\s+")


def camel_case_property(prop: str) -> str:
    """Convert a CSS property name to its React style key.

    ``background-color`` -> ``backgroundColor``; vendor prefixes follow React's
    convention (``-webkit-x`` -> ``WebkitX`` but ``-ms-x`` -> ``msX``).
    """

    prop = prop.strip().lower()
    if prop.startswith("-ms-"):
        prop = prop[1:]
    return _HYPHEN_LETTER_RE.sub(lambda m: m.group(1).upper(), prop)


def split_declarations(style: str) -> list[str]:
    """Split a style attribute on ``;`` outside of parentheses and quotes.

    Keeps ``url(data:image/png;base64,...)`` in one piece.
    """

    parts: list[str] = []
    buf: list[str] = []
    depth = 0
    quote: str | None = None
    for ch in style:
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")" and depth:
            depth -= 1
        elif ch == ";" and depth == 0:
            parts.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    parts.append("".join(buf))
    return parts


def quote_style_value(value: str) -> str:
    """Return ``value`` as a JS string literal for a style object.

    Line breaks are not allowed inside a string literal, so whitespace runs
    (multi-line ``grid-template-areas`` for instance) collapse to one space.
    """

    value = _WHITESPACE_RE.sub(" ", value.strip())
    value = value.replace("\\", "\\\\")
    if "'" in value:
        # url('...') and quoted font names keep their single quotes intact
        return '"' + value.replace('"', '\\"') + '"'
    return f"'{value}'"


def convert_style(style: str) -> tuple[str | None, dict[str, str]]:
    """Split an inline style into a JSX style expression and custom properties.

    Returns ``(expression, custom_properties)`` where ``expression`` is
    ``{{ key: 'value', ... }}`` or ``None`` when no regular declaration
    survived, and ``custom_properties`` maps ``--name`` to its raw value.
    """

    entries: list[str] = []
    custom: dict[str, str] = {}
    for decl in split_declarations(style):
        prop, sep, value = decl.partition(":")
        prop = prop.strip()
        value = value.strip()
        if not sep or not prop or not value:
            continue
        if prop.startswith("--"):
            custom[prop] = value
            continue
        entries.append(f"{camel_case_property(prop)}: {quote_style_value(value)}")

    expression = "{{ " + ", ".join(entries) + " }}" if entries else None
    return expression, custom


__all__ = [
    "camel_case_property",
    "convert_style",
    "quote_style_value",
    "split_declarations",
]
