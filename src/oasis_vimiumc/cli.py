"""
oasis-vimiumc CLI.

Three modes:

- ``--list``: print the catalog and exit.
- ``--day ID --night ID``: render the given pair without prompting.
- neither: choose both palettes interactively.
"""

import logging
import os
import platform
import sys
from pathlib import Path

import typer

from oasis_vimiumc import cli_ui
from oasis_vimiumc._version import get_version
from oasis_vimiumc.core.catalog import ThemeCatalog
from oasis_vimiumc.core.config import load_config
from oasis_vimiumc.core.errors import OasisError
from oasis_vimiumc.core.renderer import CSSRenderer, RenderResult
from oasis_vimiumc.core.selector import ThemeSelector

LIST_BANNER = "=== Oasis Vimium-C Themes ==="

app = typer.Typer(
    help="Generate Vimium C stylesheets from day/night Oasis palettes.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"oasis-vimiumc version {get_version()}")
        typer.echo(f"Python {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; ``--verbose`` wins over ``LOG_LEVEL``."""
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, os.getenv("LOG_LEVEL", "WARNING").upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def show_catalog(catalog: ThemeCatalog) -> None:
    cli_ui.print_header(LIST_BANNER)
    cli_ui.print_header("Light Themes:")
    cli_ui.print_numbered(f"{theme.name} ({theme.id})" for theme in catalog.light_themes)
    cli_ui.print_header("Dark Themes:")
    cli_ui.print_numbered(f"{theme.name} ({theme.id})" for theme in catalog.dark_themes)
    cli_ui.console.print()


def show_result(result: RenderResult) -> None:
    cli_ui.console.print()
    cli_ui.print_success(f"Generated: {result.path}")
    cli_ui.print_info(f"Day theme: {result.day_name}")
    cli_ui.print_info(f"Night theme: {result.night_name}")


@app.command()
def generate(
    day: str | None = typer.Option(None, "--day", "-d", help="Day theme id (usually light)"),
    night: str | None = typer.Option(
        None, "--night", "-n", help="Night theme id (usually dark)"
    ),
    list_themes: bool = typer.Option(
        False, "--list", "-l", help="List all available themes"
    ),
    mappings_dir: Path | None = typer.Option(
        None, "--mappings-dir", help="Directory holding index.json and palette files"
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", help="Directory the stylesheet is written to"
    ),
    template: Path | None = typer.Option(
        None, "--template", "-t", help="Jinja2 template to render"
    ),
    config_file: Path | None = typer.Option(
        None, "--config", "-c", help="Config file (default: ./oasis.toml if present)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Generate a Vimium C stylesheet from a day and a night palette."""
    configure_logging(verbose)

    try:
        config = load_config(
            Path.cwd(),
            config_file=config_file,
            mappings_dir=mappings_dir,
            output_dir=output_dir,
            template_file=template,
        )
        catalog = ThemeCatalog.load(config.mappings_dir)

        if list_themes:
            show_catalog(catalog)
            return

        selector = ThemeSelector(catalog, prompt=cli_ui.ask, show_menu=cli_ui.print_menu)
        selection = selector.select_pair(day, night)
        result = CSSRenderer(config.template_file, config.output_dir).generate(selection)
    except OasisError as e:
        cli_ui.print_error(e.message)
        raise typer.Exit(code=1) from e

    show_result(result)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
