"""
Project-level CLI commands.

Commands:
- build: Compile every component source listed by yewcomp.toml
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from yewcomp.backends import Backend, get_backend
from yewcomp.core import ir
from yewcomp.core.errors import ManifestError, ParseError, YewcompError
from yewcomp.core.fileset import discover_component_files
from yewcomp.core.manifest import load_manifest
from yewcomp.core.parser import parse_component_files

logger = logging.getLogger(__name__)


def check_output_collisions(
    modules: list[ir.ComponentModule], renderer: Backend, output_dir: Path
) -> None:
    """
    Refuse to build when two sources would be written to the same output file.

    Raises:
        ManifestError: Naming both sources and the shared output path
    """
    seen: dict[Path, Path] = {}
    for module in modules:
        target = renderer.output_path(module, output_dir)
        if target in seen:
            raise ManifestError(
                f"{seen[target]} and {module.file} would both be written to {target}; "
                "rename one of the sources"
            )
        seen[target] = module.file


def build_command(
    manifest: str = typer.Option("yewcomp.toml", "--manifest", "-m"),
    out: str | None = typer.Option(
        None, "--out", "-o", help="Output directory (default: [output] dir)"
    ),
    backend: str | None = typer.Option(
        None, "--backend", "-b", help="Backend name (default: [output] backend)"
    ),
) -> None:
    """
    Compile every component source of the project.

    Reads yewcomp.toml, discovers component sources and writes one output
    file per source into the output directory.

    Examples:
        yewcomp build                       # Use [output] settings
        yewcomp build --backend json        # Dump artifact descriptors
        yewcomp build --out src/generated   # Override output directory
    """
    manifest_path = Path(manifest).resolve()
    root = manifest_path.parent

    try:
        mf = load_manifest(manifest_path)
        files = discover_component_files(root, mf)
        if not files:
            typer.echo(
                f"No component sources (*{mf.source_extension}) found in "
                f"{', '.join(mf.source_paths)}",
                err=True,
            )
            raise typer.Exit(code=1)

        modules = parse_component_files(files)

        backend_name = backend or mf.output.backend
        renderer = get_backend(backend_name)
        options = mf.backend_options(backend_name)
        renderer.validate_config(**options)

        output_dir = Path(out) if out else root / mf.output.dir
        check_output_collisions(modules, renderer, output_dir)

        logger.info(f"Building {len(modules)} component(s) with backend '{backend_name}'")
        for module in modules:
            path = renderer.generate(module, output_dir, **options)
            typer.echo(f"Generated: {path}")
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except YewcompError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Built {len(modules)} component(s) into {output_dir}")
