"""
backpack-theme CLI.

Commands:
- resolve: Resolve a semantic token for a color mode
- compose: Compose a component style
- describe: List semantic tokens
- export: Render the theme as CSS variables or DTCG tokens.json
- version: Show the package version
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

import typer

from ._version import get_version
from .config import CONFIG_FILE, ThemeConfig, load_config
from .errors import ThemeError
from .export import export_css_file, export_dtcg_file, generate_css_variables, generate_dtcg_tokens
from .loader import load_theme
from .site import get_site_theme
from .theme import Theme
from .tokens import ColorMode, describe

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Resolve semantic design tokens and component styles",
    no_args_is_help=True,
)


class ExportFormat(StrEnum):
    CSS = "css"
    DTCG = "dtcg"


_EXPORT_FILENAMES = {
    ExportFormat.CSS: "theme.css",
    ExportFormat.DTCG: "tokens.json",
}


@dataclass
class CliState:
    config: ThemeConfig
    theme_path: Path | None

    def load(self) -> Theme:
        """Load the configured theme, exiting with code 1 on failure."""
        path = self.theme_path or self.config.theme.source
        if path is None:
            return get_site_theme()
        try:
            return load_theme(path)
        except ThemeError as e:
            typer.echo(f"Error loading theme: {e}", err=True)
            raise typer.Exit(code=1)

    def mode(self, requested: ColorMode | None) -> ColorMode:
        return requested or self.config.theme.default_mode


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Path = typer.Option(  # noqa: B008
        Path(CONFIG_FILE),
        "--config",
        "-c",
        help="Path to backpack-theme.toml",
    ),
    theme: Path | None = typer.Option(
        None,
        "--theme",
        "-t",
        help="YAML theme file (default: [theme].source, else the built-in site theme)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: [logging].level, else LOG_LEVEL, else WARNING)",
    ),
) -> None:
    """
    Resolve semantic design tokens and component styles.
    """
    try:
        cfg = load_config(config)
    except ThemeError as e:
        typer.echo(f"Error loading config: {e}", err=True)
        raise typer.Exit(code=1)

    _configure_logging(log_level or cfg.logging.level or os.getenv("LOG_LEVEL", "WARNING"))
    ctx.obj = CliState(config=cfg, theme_path=theme)


@app.command(name="resolve")
def resolve_cmd(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Semantic token name"),
    mode: ColorMode | None = typer.Option(
        None, "--mode", "-m", case_sensitive=False, help="Color mode"
    ),
) -> None:
    """
    Resolve a semantic token to its concrete value.

    Examples:
        backpack-theme resolve t_text
        backpack-theme resolve t_text --mode dark
    """
    state: CliState = ctx.obj
    theme = state.load()
    try:
        value = theme.resolve(name, state.mode(mode))
    except ThemeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(value)


@app.command(name="compose")
def compose_cmd(
    ctx: typer.Context,
    component: str = typer.Argument(..., help="Component name (e.g. Button)"),
    variant: str | None = typer.Option(None, "--variant", "-v", help="Variant name"),
    size: str | None = typer.Option(None, "--size", "-s", help="Size name"),
    color_scheme: str | None = typer.Option(
        None, "--color-scheme", help="Accent palette passed to variant functions"
    ),
    mode: ColorMode | None = typer.Option(
        None, "--mode", "-m", case_sensitive=False, help="Color mode"
    ),
) -> None:
    """
    Compose a component style and print it as JSON.

    Examples:
        backpack-theme compose Button --variant outline --size xl
        backpack-theme compose Code --variant installer --mode dark
    """
    state: CliState = ctx.obj
    theme = state.load()
    try:
        style = theme.compose(
            component,
            variant=variant,
            size=size,
            color_scheme=color_scheme,
            mode=state.mode(mode),
        )
    except ThemeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(style, indent=2))


@app.command(name="describe")
def describe_cmd(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List semantic tokens with their default and dark values."""
    state: CliState = ctx.obj
    theme = state.load()
    tokens = describe(theme.tokens)

    if as_json:
        typer.echo(json.dumps(tokens, indent=2))
        return

    typer.echo(f"Theme: {theme.name} ({len(tokens)} tokens)")
    width = max((len(name) for name in tokens), default=0)
    for name, values in tokens.items():
        dark = values["dark"] if values["dark"] is not None else "(inherits default)"
        typer.echo(f"  {name.ljust(width)}  {values['default']}  dark: {dark}")


@app.command(name="export")
def export_cmd(
    ctx: typer.Context,
    format: ExportFormat = typer.Argument(..., case_sensitive=False, help="css or dtcg"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (default: stdout)",
    ),
    write: bool = typer.Option(
        False,
        "--write",
        "-w",
        help="Write to [export].output_dir with the default file name",
    ),
) -> None:
    """
    Export the theme's semantic tokens.

    Examples:
        backpack-theme export css                 # Print to stdout
        backpack-theme export dtcg -o tokens.json # Save to file
        backpack-theme export css --write         # Save under [export].output_dir
    """
    state: CliState = ctx.obj
    theme = state.load()

    if write and output is None:
        output = state.config.export.output_dir / _EXPORT_FILENAMES[format]

    if output is None:
        if format == ExportFormat.CSS:
            typer.echo(generate_css_variables(theme), nl=False)
        else:
            typer.echo(json.dumps(generate_dtcg_tokens(theme), indent=2))
        return

    if format == ExportFormat.CSS:
        written = export_css_file(theme, output)
    else:
        written = export_dtcg_file(theme, output)
    logger.info("Wrote %s export to %s", format, written)
    typer.echo(f"Exported {format} tokens to {written}")


@app.command(name="version")
def version_cmd() -> None:
    """Show the installed version."""
    typer.echo(f"backpack-theme {get_version()}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
