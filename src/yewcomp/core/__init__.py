"""Core yewcomp functionality: lexer, parser, IR, emitter, project manifest."""

from . import ir
from .dsl_parser_impl import parse_component
from .emitter import emit
from .errors import (
    BackendError,
    ErrorContext,
    ErrorKind,
    ManifestError,
    ParseError,
    YewcompError,
)
from .fileset import discover_component_files
from .manifest import ProjectManifest, load_manifest
from .parser import parse_component_file, parse_component_files

__all__ = [
    "ir",
    "YewcompError",
    "ParseError",
    "BackendError",
    "ManifestError",
    "ErrorContext",
    "ErrorKind",
    "parse_component",
    "parse_component_file",
    "parse_component_files",
    "emit",
    "ProjectManifest",
    "load_manifest",
    "discover_component_files",
]
