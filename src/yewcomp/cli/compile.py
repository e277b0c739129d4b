"""
CLI commands for single components.

Commands:
- compile: Expand one component source into the chosen backend's output
- check: Parse and validate component sources
- inspect: Show the parsed component description
- backends: List available backends
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer

from yewcomp.backends import get_backend, get_registry
from yewcomp.compiler import compile_component
from yewcomp.core import ir
from yewcomp.core.dsl_parser_impl import parse_component
from yewcomp.core.errors import ParseError, YewcompError
from yewcomp.core.parser import parse_component_file

from .utils import print_vscode_parse_error, read_source


def _backend_options(
    backend: str, yew_crate: str | None, yewtil_crate: str | None
) -> dict[str, Any]:
    if backend != "yew":
        return {}
    options: dict[str, Any] = {}
    if yew_crate:
        options["yew_crate"] = yew_crate
    if yewtil_crate:
        options["yewtil_crate"] = yewtil_crate
    return options


def compile_command(
    source: str = typer.Argument(..., help="Component source file, or '-' to read stdin"),
    out: str | None = typer.Option(None, "--out", "-o", help="Write output to this file"),
    backend: str = typer.Option("yew", "--backend", "-b", help="Backend: 'yew' or 'json'"),
    yew_crate: str | None = typer.Option(None, "--yew-crate", help="Path of the yew crate"),
    yewtil_crate: str | None = typer.Option(
        None, "--yewtil-crate", help="Path of the yewtil crate"
    ),
) -> None:
    """
    Compile one component block and print (or write) the expanded code.
    """
    try:
        text, path = read_source(source)
        options = _backend_options(backend, yew_crate, yewtil_crate)
        output = compile_component(text, path, backend=backend, **options)
    except OSError as e:
        typer.echo(f"Error: cannot read {source}: {e}", err=True)
        raise typer.Exit(code=1)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except YewcompError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if out:
        out_path = Path(out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(output, encoding="utf-8")
        typer.echo(f"Generated: {out_path}")
    else:
        typer.echo(output, nl=False)


def check_command(
    sources: list[Path] = typer.Argument(..., help="Component source files"),
    format: str = typer.Option(
        "human", "--format", "-f", help="Output format: 'human' or 'vscode'"
    ),
) -> None:
    """
    Parse and validate component sources without generating code.

    Stops at the first invalid file.
    """
    root = Path.cwd()
    for source in sources:
        try:
            module = parse_component_file(source)
        except ParseError as e:
            if format == "vscode":
                print_vscode_parse_error(e, root)
            else:
                typer.echo(f"Parse error: {e}", err=True)
            raise typer.Exit(code=1)
        except OSError as e:
            typer.echo(f"Error: cannot read {source}: {e}", err=True)
            raise typer.Exit(code=1)

        if format != "vscode":
            typer.echo(f"OK {source} (component {module.spec.name})")

    if format != "vscode":
        typer.echo(f"All {len(sources)} component(s) are valid.")


def _format_tree(spec: ir.ComponentSpec) -> str:
    visibility = f" ({spec.visibility})" if spec.visibility else ""
    lines = [f"Component: {spec.name}{visibility}"]

    lines.append(f"  Message ({len(spec.message_variants)} variants):")
    for variant in spec.message_variants:
        detail = variant.kind.value
        if variant.kind == ir.VariantKind.TUPLE:
            detail += f": {', '.join(variant.tuple_types)}"
        elif variant.kind == ir.VariantKind.STRUCT:
            detail += f": {', '.join(f.name for f in variant.fields)}"
        lines.append(f"    - {variant.name} ({detail})")

    for title, record, fields in (
        ("Props", spec.props_name(), spec.props_fields),
        ("State", spec.state_name(), spec.state_fields),
    ):
        lines.append(f"  {title} -> {record} ({len(fields)} fields):")
        for field in fields:
            lines.append(f"    - {field.name}: {field.type}")

    for function in (spec.create_fn, spec.update_fn, spec.view_fn):
        lines.append(f"  {function.signature}")

    return "\n".join(lines)


def inspect_command(
    source: str = typer.Argument(..., help="Component source file, or '-' to read stdin"),
    format: str = typer.Option("tree", "--format", "-f", help="Output format: 'tree' or 'json'"),
) -> None:
    """
    Show the parsed description of a component.
    """
    try:
        text, path = read_source(source)
        spec = parse_component(text, path)
    except OSError as e:
        typer.echo(f"Error: cannot read {source}: {e}", err=True)
        raise typer.Exit(code=1)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)

    if format == "json":
        typer.echo(spec.model_dump_json(indent=2))
    else:
        typer.echo(_format_tree(spec))


def backends_command() -> None:
    """
    List available backends.
    """
    registry = get_registry()
    for name in registry.list_backends():
        capabilities = get_backend(name).get_capabilities()
        typer.echo(f"{name:8} {capabilities.description} (*{capabilities.file_extension})")
