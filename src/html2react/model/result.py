"""Per-conversion side tables and the conversion result."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field


class ImageImportTable:
    """Ordered mapping of image filename to the identifier it is imported as.

    Insertion order is the order import statements are emitted in. A filename
    registered twice keeps its first identifier; two different filenames that
    would produce the same identifier get numeric suffixes.
    """

    def __init__(self) -> None:
        self._by_filename: dict[str, str] = {}
        self._taken: set[str] = set()

    def add(self, filename: str, identifier: str) -> str:
        existing = self._by_filename.get(filename)
        if existing is not None:
            return existing
        candidate = identifier
        n = 1
        while candidate in self._taken:
            n += 1
            candidate = f"{identifier}{n}"
        self._by_filename[filename] = candidate
        self._taken.add(candidate)
        return candidate

    def get(self, filename: str) -> str | None:
        return self._by_filename.get(filename)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._by_filename.items())

    def as_dict(self) -> dict[str, str]:
        return dict(self._by_filename)

    def __contains__(self, filename: object) -> bool:
        return filename in self._by_filename

    def __len__(self) -> int:
        return len(self._by_filename)

    def __bool__(self) -> bool:
        return bool(self._by_filename)

    def __repr__(self) -> str:
        return f"ImageImportTable({self._by_filename!r})"


class CssVarTable:
    """Generated class names mapped to the CSS custom properties they carry.

    Class names are ``<prefix>-N`` with N increasing from 1. Passing the same
    table to several conversions keeps the numbering unique across them.
    """

    def __init__(self, prefix: str = "custom-var") -> None:
        self.prefix = prefix
        self._counter = 0
        self._classes: dict[str, dict[str, str]] = {}

    def add(self, declarations: Mapping[str, str]) -> str:
        self._counter += 1
        class_name = f"{self.prefix}-{self._counter}"
        self._classes[class_name] = dict(declarations)
        return class_name

    def items(self) -> Iterator[tuple[str, dict[str, str]]]:
        return iter(self._classes.items())

    def as_dict(self) -> dict[str, dict[str, str]]:
        return {name: dict(decls) for name, decls in self._classes.items()}

    def __getitem__(self, class_name: str) -> dict[str, str]:
        return self._classes[class_name]

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    def __bool__(self) -> bool:
        return bool(self._classes)

    def __repr__(self) -> str:
        return f"CssVarTable(prefix={self.prefix!r}, classes={self._classes!r})"


@dataclass(slots=True)
class ConversionResult:
    jsx: str
    image_imports: ImageImportTable = field(default_factory=ImageImportTable)
    css_vars: CssVarTable = field(default_factory=CssVarTable)
    body_found: bool = False
    # Structural anomalies seen while parsing (also logged)
    warnings: list[str] = field(default_factory=list)


__all__ = [
    "ConversionResult",
    "CssVarTable",
    "ImageImportTable",
]
