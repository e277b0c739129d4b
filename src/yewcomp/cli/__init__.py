"""
yewcomp CLI Package.

- compile.py: compile, check, inspect and backends commands
- project.py: manifest-driven build command
- utils.py: Shared utilities
"""

import typer

from yewcomp._version import get_version
from yewcomp.cli.compile import (
    backends_command,
    check_command,
    compile_command,
    inspect_command,
)
from yewcomp.cli.project import build_command
from yewcomp.cli.utils import configure_logging, version_callback

__version__ = get_version()

app = typer.Typer(
    help="""yewcomp – Yew component block compiler

Commands:
  • Single sources: compile, check, inspect
  • Project: build (reads yewcomp.toml)
  • Introspection: backends
""",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """yewcomp CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="compile")(compile_command)
app.command(name="check")(check_command)
app.command(name="inspect")(inspect_command)
app.command(name="build")(build_command)
app.command(name="backends")(backends_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "__version__",
    "app",
    "main",
    "get_version",
    "version_callback",
]
