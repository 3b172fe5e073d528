from __future__ import annotations

from html2react import convert_html_to_jsx, render_css_vars, render_image_imports
from html2react.model.result import CssVarTable, ImageImportTable


def test_render_image_imports_in_first_seen_order() -> None:
    imports = ImageImportTable()
    imports.add("_logo_abc.png", "logoAbc")
    imports.add("hero.jpg", "hero")

    assert render_image_imports(imports) == (
        "import logoAbc from './images-flat/_logo_abc.png';\n"
        "import hero from './images-flat/hero.jpg';"
    )
    assert render_image_imports(imports, "assets").startswith("import logoAbc from './assets/")


def test_render_empty_tables() -> None:
    assert render_image_imports(ImageImportTable()) == ""
    assert render_css_vars(CssVarTable()) == ""


def test_render_css_vars_blocks() -> None:
    table = CssVarTable()
    table.add({"--x": "1px"})
    table.add({"--a": "1", "--b": "2"})

    assert render_css_vars(table) == (
        ".custom-var-1 {\n  --x: 1px;\n}\n\n.custom-var-2 {\n  --a: 1;\n  --b: 2;\n}"
    )


def test_render_from_conversion_result() -> None:
    html = (
        '<body><img src="/front/assets/logo-abc.png">'
        '<img src="/other/logo-abc.png"><p style="--accent: #f60">x</p></body>'
    )
    result = convert_html_to_jsx(html, {"/front/assets/logo-abc.png": "_logo_abc.png"})

    assert render_image_imports(result.image_imports) == (
        "import logoAbc from './images-flat/_logo_abc.png';\n"
        "import logoAbc2 from './images-flat/logo-abc.png';"
    )
    assert render_css_vars(result.css_vars) == ".custom-var-1 {\n  --accent: #f60;\n}"
