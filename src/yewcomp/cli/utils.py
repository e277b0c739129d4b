"""
yewcomp CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
from pathlib import Path

import typer

from yewcomp._version import get_version
from yewcomp.core.errors import ParseError
from yewcomp.core.parser import read_component_text


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        from yewcomp.backends import list_backends

        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        typer.echo(f"yewcomp version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo("")
        typer.echo(f"Backends:        {', '.join(list_backends())}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def print_vscode_parse_error(error: ParseError, root: Path) -> None:
    """Print parse error in VS Code problem-matcher format with location info."""
    if error.context:
        try:
            rel_path = Path(error.context.file).relative_to(root)
        except ValueError:
            rel_path = Path(error.context.file)

        line = error.context.line or 1
        col = error.context.column or 1
        typer.echo(f"{rel_path}:{line}:{col}: error: {error.message}", err=True)
    else:
        typer.echo(f"::error: {error.message}", err=True)


def read_source(source: str) -> tuple[str, Path]:
    """
    Read component source text from a path, or stdin when ``source`` is '-'.

    Returns:
        (text, path used for error reporting)
    """
    if source == "-":
        return typer.get_text_stream("stdin").read(), Path("<stdin>")
    path = Path(source)
    return read_component_text(path), path
