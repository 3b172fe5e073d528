"""Centralized diagnostic logging for HTML-to-JSX conversion.

Conversion never fails on messy markup; instead the decisions it takes while
repairing a document are reported here so they can be inspected with
``--verbose`` without cluttering the CLI output.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from html2react.model.options import ConversionOptions
    from html2react.model.result import ConversionResult

logger = logging.getLogger(__name__)


def log_conversion_options(options: ConversionOptions) -> None:
    """Log the option values a conversion runs with.

    Args:
        options: Conversion options to log
    """
    logger.info("Conversion configuration:")
    logger.info("  Images directory: %s", options.images_dir)
    logger.info("  Wrapper tag: %s", options.wrapper_tag)
    logger.info("  Custom property class prefix: %s", options.custom_var_prefix)
    logger.info("  Attribute normalization pass: %s", "enabled" if options.normalize else "disabled")
    logger.info("  Brace escaping in text: %s", "enabled" if options.escape_braces else "disabled")


def log_structural_anomaly(message: str) -> None:
    """Log a repaired structural problem (mismatched, stray or unclosed tag)."""
    logger.warning("%s", message)


def log_conversion_summary(result: ConversionResult) -> None:
    """Log what a finished conversion produced.

    Args:
        result: The conversion result
    """
    if result.body_found:
        logger.debug("Found <body> tag; converted body content only")
    logger.debug(
        "Converted %d characters of JSX (%d image imports, %d custom property classes, %d warnings)",
        len(result.jsx),
        len(result.image_imports),
        len(result.css_vars),
        len(result.warnings),
    )


def log_output_decision(target: str, decision: str, context: dict[str, Any] | None = None) -> None:
    """Log a decision about a generated output file.

    Args:
        target: Name of the output (e.g., "component", "custom-vars.css")
        decision: The decision made (e.g., "written", "skipped")
        context: Optional context information
    """
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        logger.info("%s: %s (%s)", target, decision, context_str)
    else:
        logger.info("%s: %s", target, decision)


__all__ = [
    "log_conversion_options",
    "log_conversion_summary",
    "log_output_decision",
    "log_structural_anomaly",
]
