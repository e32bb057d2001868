from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from typer.main import get_command

from covhtml._meta import __version__, logger
from covhtml.cli.errors import EXIT_CANTCREAT, EXIT_CONFIG, EXIT_DATAERR, EXIT_NOINPUT
from covhtml.config import SETTINGS_FILE, resolve_config
from covhtml.coverage import read_module_path, read_profile
from covhtml.errors import ConfigError, InvalidProfileError, ProfileNotFoundError
from covhtml.io import STDOUT, write_output
from covhtml.model import PathFilter
from covhtml.output import render_html
from covhtml.report import build_report

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"


def _configure_logging(*, quiet: bool, verbose: bool) -> None:
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _fail(exc: Exception, code: int) -> typer.Exit:
    typer.echo(f"ERROR: {exc}", err=True)
    return typer.Exit(code=code)


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"covhtml {__version__}")
        raise typer.Exit


def generate_cmd(
    input_: Annotated[
        str | None,
        typer.Option("-i", "--input", help="Coverage profile to read. [default: coverage.out]"),
    ] = None,
    output: Annotated[
        str | None,
        typer.Option("-o", "--output", help="HTML file to write ('-' for stdout). [default: coverage.html]"),
    ] = None,
    theme: Annotated[
        str | None,
        typer.Option("--theme", help="Report theme: dark or light. [default: dark]"),
    ] = None,
    include: Annotated[
        str | None,
        typer.Option("--include", help="Comma-separated relative paths to include."),
    ] = None,
    exclude: Annotated[
        str | None,
        typer.Option("--exclude", help="Comma-separated relative paths to exclude."),
    ] = None,
    *,
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Emit diagnostic logging.")] = False,
    quiet: Annotated[bool, typer.Option("-q", "--quiet", help="Only log errors.")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
) -> None:
    """Render a Go coverage profile as an HTML report.

    Options fall back to the values in .covhtml.yml, then to built-in defaults.
    """
    del version
    _configure_logging(quiet=quiet, verbose=verbose)

    try:
        config = resolve_config(
            input=input_,
            output=output,
            theme=theme,
            include=include,
            exclude=exclude,
            settings_path=SETTINGS_FILE,
        )
    except ConfigError as exc:
        raise _fail(exc, EXIT_CONFIG) from exc

    try:
        profile = read_profile(Path(config.input))
    except ProfileNotFoundError as exc:
        raise _fail(exc, EXIT_NOINPUT) from exc
    except InvalidProfileError as exc:
        raise _fail(exc, EXIT_DATAERR) from exc
    except OSError as exc:
        raise _fail(exc, EXIT_NOINPUT) from exc

    cwd = Path.cwd()
    report = build_report(profile, PathFilter.from_config(config), module=read_module_path(cwd / "go.mod"))
    html = render_html(report, theme=config.theme, source_root=cwd)

    try:
        write_output(html, config.output)
    except OSError as exc:
        raise _fail(exc, EXIT_CANTCREAT) from exc

    if config.output != STDOUT:
        logger.info("wrote %s (%d files, %.1f%%)", config.output, len(report.files), report.percent)


def create_app() -> typer.Typer:
    app = typer.Typer(help="Render Go coverage profiles as HTML.", add_completion=False)
    app.command()(generate_cmd)
    return app


def main() -> None:
    app = create_app()
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]
