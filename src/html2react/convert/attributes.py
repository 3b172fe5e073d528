"""HTML attribute to JSX attribute conversion.

Every value written by :class:`AttributeConverter` is either a double-quoted
string literal or a ``{...}`` expression, so the result can be pasted into a
JSX opening tag as-is.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping

from html2react.convert.images import resolve_image_src
from html2react.convert.styles import convert_style
from html2react.convert.tables import (
    ATTRIBUTE_RENAMES,
    BOOLEAN_ATTRIBUTES,
    EMPTY_ATTRIBUTE_VALUES,
)
from html2react.model.options import ConversionOptions
from html2react.model.result import CssVarTable, ImageImportTable

logger = logging.getLogger(__name__)

_HYPHEN_CHAR_RE = re.compile(r"-([a-z0-9])")
# Optional `prefix:` namespace, each part a JSX identifier (hyphens allowed)
_JSX_ATTRIBUTE_NAME_RE = re.compile(r"^[A-Za-z_$][\w$-]*(?::[A-Za-z_$][\w$-]*)?$")

# React expects these prefixes verbatim
_PASSTHROUGH_PREFIXES = ("data-", "aria-")


def is_event_attribute(name: str) -> bool:
    return name.startswith("on") and len(name) > 2 and name[2:].isalpha()


def is_jsx_attribute_name(name: str) -> bool:
    """Whether ``name`` can be written as a JSX attribute (``@click``, ``:class`` cannot)."""

    return bool(_JSX_ATTRIBUTE_NAME_RE.match(name))


def is_jsx_expression(value: str) -> bool:
    return len(value) >= 2 and value.startswith("{") and value.endswith("}")


def jsx_attribute_name(name: str) -> str:
    """Return the JSX name for a (lower-cased) HTML attribute name."""

    if ":" in name:
        prefix, _, local = name.partition(":")
        return prefix + local[:1].upper() + local[1:]
    renamed = ATTRIBUTE_RENAMES.get(name)
    if renamed is not None:
        return renamed
    if is_event_attribute(name):
        return "on" + name[2].upper() + name[3:]
    if name.startswith(_PASSTHROUGH_PREFIXES):
        return name
    if "-" in name:
        return _HYPHEN_CHAR_RE.sub(lambda m: m.group(1).upper(), name)
    return name


def quote_attribute_value(value: str) -> str:
    return '"' + value.replace("&", "&amp;").replace('"', "&quot;") + '"'


def _data_attribute_value(value: str) -> str:
    try:
        parsed = json.loads(value)
    except ValueError:
        logger.debug("data attribute value is not JSON, quoting as-is: %.60r", value)
        return value
    return json.dumps(parsed, ensure_ascii=False, separators=(",", ":"))


class AttributeConverter:
    """Converts attribute maps for one document.

    Holds the per-conversion state the attributes feed: the sanitized filename
    map used for ``src`` lookups, and the image import and CSS custom property
    tables that are filled in as a side effect.
    """

    def __init__(
        self,
        filename_map: Mapping[str, str],
        imports: ImageImportTable,
        css_vars: CssVarTable,
        options: ConversionOptions,
    ) -> None:
        self.filename_map = filename_map
        self.imports = imports
        self.css_vars = css_vars
        self.options = options

    def convert(self, attrs: Mapping[str, str | None]) -> str:
        """Convert an attribute map into a JSX attribute string.

        The result starts with a space for each attribute (``' a="1" b={x}'``)
        or is empty. Class names from ``class`` and from generated custom
        property classes are merged into a single trailing ``className``,
        authored classes first.
        """

        parts: list[str] = []
        classes: list[str] = []
        generated: list[str] = []

        for key, raw in attrs.items():
            name = key.lower()
            value = "" if raw is None else raw

            if not is_jsx_attribute_name(name):
                logger.warning("Dropping attribute %r: not representable in JSX", key)
                continue

            if name in BOOLEAN_ATTRIBUTES:
                if value in EMPTY_ATTRIBUTE_VALUES and value != "":
                    continue
                parts.append(self._boolean_attribute(name, value))
                continue

            if value in EMPTY_ATTRIBUTE_VALUES:
                continue

            if name in ("class", "classname"):
                if value.strip():
                    classes.append(value.strip())
                continue

            if name == "style":
                expression, custom = convert_style(value)
                if expression is not None:
                    parts.append(f"style={expression}")
                if custom:
                    generated.append(self.css_vars.add(custom))
                continue

            jsx_name = jsx_attribute_name(name)

            if is_event_attribute(name):
                parts.append(f"{jsx_name}={{() => {{ {value} }}}}")
                continue

            if name.startswith("data-"):
                parts.append(f"{jsx_name}={quote_attribute_value(_data_attribute_value(value))}")
                continue

            if name == "src":
                value = resolve_image_src(value, self.filename_map, self.imports, self.options)

            if is_jsx_expression(value):
                parts.append(f"{jsx_name}={value}")
            else:
                parts.append(f"{jsx_name}={quote_attribute_value(value)}")

        classes.extend(generated)
        if classes:
            parts.append(f"className={quote_attribute_value(' '.join(classes))}")

        return "".join(f" {p}" for p in parts)

    def _boolean_attribute(self, name: str, value: str) -> str:
        jsx_name = jsx_attribute_name(name)
        if is_jsx_expression(value):
            return f"{jsx_name}={value}"
        lowered = value.strip().lower()
        if lowered in ("", name, "true"):
            return f"{jsx_name}={{true}}"
        if lowered == "false":
            return f"{jsx_name}={{false}}"
        return f"{jsx_name}={quote_attribute_value(value)}"


__all__ = [
    "AttributeConverter",
    "is_event_attribute",
    "is_jsx_attribute_name",
    "is_jsx_expression",
    "jsx_attribute_name",
    "quote_attribute_value",
]
