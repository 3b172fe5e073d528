"""html2react - convert captured HTML pages into React JSX."""

from __future__ import annotations

__version__ = "0.3.0"

from html2react.convert import (
    ConversionResult,
    convert_html_to_jsx,
    render_css_vars,
    render_image_imports,
)
from html2react.model.options import ConversionOptions

__all__ = [
    "__version__",
    "ConversionOptions",
    "ConversionResult",
    "convert_html_to_jsx",
    "render_css_vars",
    "render_image_imports",
]
