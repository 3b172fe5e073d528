from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from html2react.builder.component import (
    build_component,
    component_name_from_path,
    validate_component_name,
    write_component,
)
from html2react.convert.jsx import convert_html_to_jsx
from html2react.model.options import ConversionOptions

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, dict[str, int | str]], None] | None


def _safe_emit(on_progress: ProgressCallback, event: str, payload: dict[str, int | str]) -> None:
    # A broken progress display must not fail the conversion
    if on_progress is None:
        return
    with contextlib.suppress(Exception):
        on_progress(event, payload)


@dataclass(slots=True)
class PageOutcome:
    source: Path
    name: str
    written: list[Path] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def convert_page(
    source: Path,
    out_dir: Path,
    *,
    name: str | None = None,
    filename_map: Mapping[str, str] | None = None,
    options: ConversionOptions | None = None,
    style_imports: Sequence[str] = (),
) -> PageOutcome:
    """Convert one HTML file into ``<out_dir>/<Name>/<Name>.jsx``."""

    options = options or ConversionOptions()
    name = name or component_name_from_path(source)
    outcome = PageOutcome(source=source, name=name)

    html = source.read_text(encoding="utf-8", errors="replace")
    result = convert_html_to_jsx(html, filename_map, options=options)
    files = build_component(
        result, name, style_imports=style_imports, images_dir=options.images_dir
    )
    outcome.written = write_component(files, out_dir / name)
    outcome.warnings = list(result.warnings)
    return outcome


def convert_pages(
    sources: Sequence[Path],
    out_dir: Path,
    *,
    component_name: str | None = None,
    filename_map: Mapping[str, str] | None = None,
    options: ConversionOptions | None = None,
    style_imports: Sequence[str] = (),
    on_progress: ProgressCallback = None,
) -> list[PageOutcome]:
    """Convert several HTML files, continuing past pages that fail.

    ``component_name`` overrides the derived name and is only meaningful for a
    single source. Every page writes to its own ``<out_dir>/<Name>/`` folder,
    so sources whose names collide are rejected before anything is written.
    """

    if component_name is not None:
        if len(sources) > 1:
            raise ValueError("component_name can only be used with a single page")
        names = [validate_component_name(component_name)]
    else:
        names = [component_name_from_path(source) for source in sources]

    seen: dict[str, Path] = {}
    for source, name in zip(sources, names):
        if name in seen:
            raise ValueError(
                f"{seen[name]} and {source} both convert to component '{name}'; "
                "rename one of them or convert them separately"
            )
        seen[name] = source

    _safe_emit(on_progress, "convert:start", {"pages": len(sources)})
    outcomes: list[PageOutcome] = []
    for source, name in zip(sources, names):
        _safe_emit(on_progress, "page:start", {"page": name})
        try:
            outcome = convert_page(
                source,
                out_dir,
                name=name,
                filename_map=filename_map,
                options=options,
                style_imports=style_imports,
            )
        except OSError as exc:
            logger.error("Failed to convert %s: %s", source, exc)
            outcome = PageOutcome(source=source, name=name, error=str(exc))
            _safe_emit(on_progress, "page:failed", {"page": name})
        else:
            _safe_emit(on_progress, "page:converted", {"page": name})
        outcomes.append(outcome)

    converted = sum(1 for o in outcomes if o.ok)
    _safe_emit(
        on_progress,
        "convert:finalized",
        {"converted": converted, "failed": len(outcomes) - converted},
    )
    return outcomes


__all__ = [
    "PageOutcome",
    "convert_page",
    "convert_pages",
]
