from __future__ import annotations


class Html2ReactError(Exception):
    """Base class for errors raised by html2react."""


class ConversionInputError(Html2ReactError, TypeError):
    """The converter was called with arguments of the wrong type.

    Malformed markup never raises; this only signals a caller bug such as
    passing ``None`` or bytes instead of the HTML text.
    """


class ImageMapError(Html2ReactError, ValueError):
    """A sanitized filename map file could not be loaded."""


__all__ = [
    "Html2ReactError",
    "ConversionInputError",
    "ImageMapError",
]
