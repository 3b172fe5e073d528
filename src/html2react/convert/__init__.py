"""HTML to JSX conversion engine.

Public API:
- ``convert_html_to_jsx``: convert one document, returning a ConversionResult
- ``render_image_imports`` / ``render_css_vars``: serialize the side tables
- ``normalize_jsx_attributes``: regex clean-up for JSX from other sources
"""

from __future__ import annotations

from html2react.convert.jsx import convert_html_to_jsx, escape_jsx_text
from html2react.convert.normalize import normalize_jsx_attributes
from html2react.convert.render import render_css_vars, render_image_imports
from html2react.model.result import ConversionResult, CssVarTable, ImageImportTable

__all__ = [
    "ConversionResult",
    "CssVarTable",
    "ImageImportTable",
    "convert_html_to_jsx",
    "escape_jsx_text",
    "normalize_jsx_attributes",
    "render_css_vars",
    "render_image_imports",
]
