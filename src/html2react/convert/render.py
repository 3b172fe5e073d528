from __future__ import annotations

from html2react.model.result import CssVarTable, ImageImportTable


def render_image_imports(imports: ImageImportTable, images_dir: str = "images-flat") -> str:
    """Render one ``import x from './<images_dir>/<file>';`` line per image.

    Lines follow first-seen order; an empty table renders as ``""``.
    """

    return "\n".join(
        f"import {identifier} from './{images_dir}/{filename}';"
        for filename, identifier in imports.items()
    )


def render_css_vars(css_vars: CssVarTable) -> str:
    """Render custom property classes as CSS rule blocks.

    ``.custom-var-1 {\\n  --x: 1px;\\n}`` blocks are separated by a blank line.
    """

    blocks: list[str] = []
    for class_name, declarations in css_vars.items():
        lines = [f"  {prop}: {value};" for prop, value in declarations.items()]
        blocks.append(f".{class_name} {{\n" + "\n".join(lines) + "\n}")
    return "\n\n".join(blocks)


__all__ = ["render_css_vars", "render_image_imports"]
