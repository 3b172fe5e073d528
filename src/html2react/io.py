"""File helpers for reading converter inputs and writing generated files.

- Sanitized filename maps are JSON objects mapping the asset reference found
  in the page (URL or absolute path) to the filename chosen by the asset
  pipeline.
- Generated files are written atomically so an interrupted run never leaves a
  half-written component behind.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

from html2react.errors import ImageMapError


def load_filename_map(path: Path) -> dict[str, str]:
    """Load a sanitized filename map from a JSON file.

    Raises:
        ImageMapError: If the file cannot be read, is not valid JSON, or is
            not an object of string values
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ImageMapError(f"Cannot read image map {path}: {exc}") from exc

    data: Any
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ImageMapError(f"Image map {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ImageMapError(f"Image map {path} must be a JSON object, got {type(data).__name__}")

    bad = [k for k, v in data.items() if not isinstance(v, str)]
    if bad:
        raise ImageMapError(f"Image map {path} has non-string filenames for: {', '.join(bad[:5])}")

    return dict(data)


def atomic_write_text(path: Path, data: str, *, encoding: str = "utf-8") -> None:
    """Atomically write text to a file by writing to a temp file then replacing.

    Ensures parent directories exist and minimizes risk of partial writes.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with NamedTemporaryFile("w", encoding=encoding, dir=str(path.parent), delete=False) as tmp:
        tmp.write(data)
        tmp.flush()
        os.fsync(tmp.fileno())
        tmp_path = Path(tmp.name)
    os.replace(tmp_path, path)


__all__ = [
    "atomic_write_text",
    "load_filename_map",
]
