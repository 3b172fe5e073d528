from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined

from html2react.convert.render import render_css_vars, render_image_imports
from html2react.diagnostics import log_output_decision
from html2react.io import atomic_write_text
from html2react.model.result import ConversionResult

logger = logging.getLogger(__name__)

CUSTOM_VARS_FILENAME = "custom-vars.css"

_COMPONENT_TEMPLATE = """\
import React from 'react';
{% if image_imports %}{{ image_imports }}
{% endif %}{% for css in style_imports %}import '{{ css }}';
{% endfor %}
export default function {{ name }}() {
  return (
    <React.Fragment>
{{ jsx }}
    </React.Fragment>
  );
}
"""

_NAME_SPLIT_RE = re.compile(r"[^A-Za-z0-9]+")
# React treats lower-case JSX tags as DOM elements
_COMPONENT_NAME_RE = re.compile(r"^[A-Z][A-Za-z0-9_$]*$")


@dataclass(frozen=True)
class Templates:
    env: Environment

    def render_component(self, context: dict[str, Any]) -> str:
        tpl = self.env.get_template("component.jsx")
        return str(tpl.render(**context))


def create_environment() -> Templates:
    loader = DictLoader({"component.jsx": _COMPONENT_TEMPLATE})
    env = Environment(
        loader=loader,
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )
    return Templates(env=env)


def component_name_from_path(path: str | Path) -> str:
    """Derive a PascalCase component name from a file name.

    ``about-us.html`` -> ``AboutUs``; names starting with a digit get a
    ``Page`` prefix and an empty stem becomes ``Page``.
    """

    stem = Path(path).stem
    parts = [p for p in _NAME_SPLIT_RE.split(stem) if p]
    name = "".join(p[:1].upper() + p[1:] for p in parts)
    if not name:
        return "Page"
    if name[0].isdigit():
        name = "Page" + name
    return name


def validate_component_name(name: str) -> str:
    """Return ``name`` if it is a capitalized JS identifier, else raise ValueError."""

    if not _COMPONENT_NAME_RE.match(name):
        raise ValueError(
            f"Invalid component name '{name}'. "
            "Use a JavaScript identifier starting with an upper-case letter."
        )
    return name


def _relative_import(path: str) -> str:
    # Bare file names resolve next to the component
    return path if path.startswith((".", "/")) else f"./{path}"


@dataclass(frozen=True)
class ComponentFiles:
    name: str
    source: str
    custom_vars_css: str | None = None


def build_component(
    result: ConversionResult,
    name: str,
    *,
    style_imports: Sequence[str] = (),
    images_dir: str = "images-flat",
    templates: Templates | None = None,
) -> ComponentFiles:
    """Assemble the React component module for a conversion result.

    Image imports come first, then ``style_imports`` in the given order and
    finally ``custom-vars.css`` when the page produced custom property classes.
    """

    validate_component_name(name)
    templates = templates or create_environment()
    css_text: str | None = None
    styles = [_relative_import(s) for s in style_imports]
    if result.css_vars:
        css_text = render_css_vars(result.css_vars) + "\n"
        custom = _relative_import(CUSTOM_VARS_FILENAME)
        if custom not in styles:
            styles.append(custom)

    source = templates.render_component(
        {
            "name": name,
            "jsx": result.jsx,
            "image_imports": render_image_imports(result.image_imports, images_dir),
            "style_imports": styles,
        }
    )
    return ComponentFiles(name=name, source=source, custom_vars_css=css_text)


def write_component(files: ComponentFiles, out_dir: Path) -> list[Path]:
    """Write the component (and its custom property stylesheet) into ``out_dir``."""

    written: list[Path] = []
    component_path = out_dir / f"{files.name}.jsx"
    atomic_write_text(component_path, files.source)
    written.append(component_path)
    log_output_decision("component", "written", {"path": component_path})

    if files.custom_vars_css is not None:
        css_path = out_dir / CUSTOM_VARS_FILENAME
        atomic_write_text(css_path, files.custom_vars_css)
        written.append(css_path)
        log_output_decision(CUSTOM_VARS_FILENAME, "written", {"path": css_path})
    else:
        logger.debug("No custom properties for %s; skipping %s", files.name, CUSTOM_VARS_FILENAME)

    return written


__all__ = [
    "ComponentFiles",
    "Templates",
    "build_component",
    "component_name_from_path",
    "create_environment",
    "validate_component_name",
    "write_component",
]
