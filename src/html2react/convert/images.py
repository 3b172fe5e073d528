"""Image reference resolution for ``src`` attributes.

Local images are turned into module imports (``src={logoAbc}``) so the bundler
picks them up from the flat images directory; everything else stays a plain
string path.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from html2react.convert.tables import IMAGE_EXTENSIONS
from html2react.model.options import ConversionOptions
from html2react.model.result import ImageImportTable

logger = logging.getLogger(__name__)

_IMAGE_EXT_RE = re.compile(r"\.(?:" + "|".join(IMAGE_EXTENSIONS) + r")$", re.IGNORECASE)
_IDENT_SPLIT_RE = re.compile(r"[^A-Za-z0-9$]+")

_EXTERNAL_PREFIXES = ("data:", "http://", "https://")

# Words that cannot be used as an import binding
_RESERVED_WORDS = frozenset(
    {
        "await", "break", "case", "catch", "class", "const", "continue", "debugger",
        "default", "delete", "do", "else", "enum", "export", "extends", "false",
        "finally", "for", "function", "if", "implements", "import", "in",
        "instanceof", "interface", "let", "new", "null", "package", "private",
        "protected", "public", "return", "static", "super", "switch", "this",
        "throw", "true", "try", "typeof", "var", "void", "while", "with", "yield",
    }
)


def is_image_filename(filename: str) -> bool:
    return bool(_IMAGE_EXT_RE.search(filename))


def image_identifier(filename: str) -> str:
    """Derive a JS identifier from a sanitized image filename.

    ``_logo_abc.png`` -> ``logoAbc``. The extension is dropped, the name is
    split on ``_`` (and any other character not allowed in an identifier),
    the first part is lower-cased and the rest are capitalized.
    """

    base = _IMAGE_EXT_RE.sub("", filename)
    parts = [p for p in _IDENT_SPLIT_RE.split(base) if p]
    if not parts:
        return "image"
    name = parts[0].lower() + "".join(p[:1].upper() + p[1:].lower() for p in parts[1:])
    if name[0].isdigit():
        name = "img" + name[:1].upper() + name[1:]
    if name in _RESERVED_WORDS:
        name += "Image"
    return name


def _lookup_sanitized(src: str, filename_map: Mapping[str, str]) -> str | None:
    sanitized = filename_map.get(src)
    if sanitized is None and src.startswith("/"):
        sanitized = filename_map.get(src[1:])
    return sanitized or None


def _guess_filename(src: str, markers: tuple[str, ...]) -> str:
    path = src.split("#", 1)[0].split("?", 1)[0]
    if path.startswith("/"):
        return path.rsplit("/", 1)[-1]
    for marker in markers:
        if marker in path:
            return path.rsplit(marker, 1)[-1]
    return path.rsplit("/", 1)[-1]


def resolve_image_src(
    src: str,
    filename_map: Mapping[str, str],
    imports: ImageImportTable,
    options: ConversionOptions,
) -> str:
    """Resolve a ``src`` value to a JSX expression or a plain path.

    Returns ``{identifier}`` for images (registering the import) or an
    unquoted path string for anything that cannot be imported.
    """

    if not src or src.startswith(_EXTERNAL_PREFIXES):
        return src

    sanitized = _lookup_sanitized(src, filename_map)
    if sanitized is not None:
        if is_image_filename(sanitized):
            ident = imports.add(sanitized, image_identifier(sanitized))
            return f"{{{ident}}}"
        return f"./{options.images_dir}/{sanitized}"

    filename = _guess_filename(src, options.flat_asset_markers)
    if filename and is_image_filename(filename):
        ident = imports.add(filename, image_identifier(filename))
        return f"{{{ident}}}"

    logger.debug("Image reference left unresolved: %s", src)
    return src


__all__ = [
    "image_identifier",
    "is_image_filename",
    "resolve_image_src",
]
