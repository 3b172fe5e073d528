"""CLI interface for html2react."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from html2react import __version__
from html2react.builder.component import validate_component_name
from html2react.builder.pages import convert_pages
from html2react.diagnostics import log_conversion_options
from html2react.errors import ImageMapError
from html2react.io import load_filename_map
from html2react.model.options import ConversionOptions
from html2react.ui.progress import ProgressReporter

app = typer.Typer(
    name="html2react",
    help="Convert captured HTML pages into React JSX components.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


@app.command()
def convert(
    pages: Annotated[
        list[Path],
        typer.Argument(
            help="HTML files to convert",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    image_map: Annotated[
        Path | None,
        typer.Option(
            "--image-map",
            help="JSON object mapping original image URLs/paths to sanitized filenames",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
    out_dir: Annotated[
        Path,
        typer.Option(
            "--out-dir",
            help="Directory that receives one <Name>/ folder per page (default: src/pages)",
        ),
    ] = Path("src/pages"),
    component_name: Annotated[
        str | None,
        typer.Option(
            "--component-name",
            help="Component name (single page only; default: derived from the file name)",
        ),
    ] = None,
    style_import: Annotated[
        list[str] | None,
        typer.Option(
            "--style-import",
            help="Stylesheet to import from the component (repeatable)",
        ),
    ] = None,
    images_dir: Annotated[
        str,
        typer.Option("--images-dir", help="Flat image directory used in import paths"),
    ] = "images-flat",
    wrapper_tag: Annotated[
        str,
        typer.Option("--wrapper-tag", help="Element that replaces <body> (default: div)"),
    ] = "div",
    normalize: Annotated[
        bool,
        typer.Option(
            "--normalize/--no-normalize",
            help="Run the regex attribute clean-up over the generated JSX (default: no)",
        ),
    ] = False,
    escape_braces: Annotated[
        bool,
        typer.Option(
            "--escape-braces/--no-escape-braces",
            help="Write { and } in text as {'{'} and {'}'} (default: leave them raw)",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log conversion decisions and repairs"),
    ] = False,
) -> None:
    """
    Convert HTML pages into React components.

    Each page becomes <out-dir>/<Name>/<Name>.jsx. Inline CSS custom properties
    are moved into <out-dir>/<Name>/custom-vars.css, and local images become
    imports from ./images-flat/.

    Examples:

        # Convert one captured page
        html2react convert html/home.html --image-map images.json

        # Convert several pages with a shared stylesheet
        html2react convert html/*.html --style-import global.css --out-dir src/pages
    """
    _configure_logging(verbose)

    if component_name is not None and len(pages) > 1:
        typer.echo("Error: --component-name can only be used with a single page")
        raise typer.Exit(1)

    try:
        options = ConversionOptions.from_cli(
            images_dir=images_dir,
            wrapper_tag=wrapper_tag,
            normalize=normalize,
            escape_braces=escape_braces,
        )
        if component_name is not None:
            validate_component_name(component_name)
    except ValueError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(1) from exc

    filename_map: dict[str, str] = {}
    if image_map is not None:
        try:
            filename_map = load_filename_map(image_map)
        except ImageMapError as exc:
            typer.echo(f"Error: {exc}")
            raise typer.Exit(1) from exc

    log_conversion_options(options)
    typer.echo(f"📄 Pages: {len(pages)}")
    typer.echo(f"📁 Output Directory: {out_dir}")
    typer.echo(f"🖼️  Image map entries: {len(filename_map)}")

    try:
        with ProgressReporter() as pr:
            outcomes = convert_pages(
                pages,
                out_dir,
                component_name=component_name,
                filename_map=filename_map,
                options=options,
                style_imports=style_import or [],
                on_progress=pr.emit,
            )
    except ValueError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(1) from exc

    failed = 0
    for outcome in outcomes:
        if not outcome.ok:
            failed += 1
            typer.echo(f"❌ {outcome.source}: {outcome.error}")
            continue
        for path in outcome.written:
            typer.echo(f"✅ Wrote {path}")
        if outcome.warnings:
            typer.echo(f"⚠️  {outcome.name}: repaired {len(outcome.warnings)} structural issue(s)")

    if failed:
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"html2react version {__version__}")


def version_callback(value: bool) -> None:
    """Version callback for --version flag."""
    if value:
        typer.echo(f"html2react version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """
    html2react - Convert captured HTML pages into React JSX components.

    The converter keeps the page structure while rewriting it for React:

    - Attributes renamed to their JSX names (class -> className, SVG camelCase)
    - Inline styles turned into style objects; CSS custom properties moved to classes
    - Local images imported from the flat images directory
    - Scripts, styles and <head> content dropped; malformed markup repaired

    For detailed usage, run: html2react convert --help
    """
    pass


if __name__ == "__main__":  # pragma: no cover - executed only via `python -m`
    app()
