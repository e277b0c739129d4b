"""
yewcomp - a compiler for Yew component blocks.

Expands a compact component description (message, props and state types
plus create/update/view functions) into the full set of Rust items the Yew
component lifecycle expects.
"""

from __future__ import annotations

from ._version import get_version
from .backends import get_backend, list_backends
from .compiler import compile_component

# Re-export commonly used types for convenience
from .core import ir
from .core.dsl_parser_impl import parse_component
from .core.emitter import emit
from .core.errors import BackendError, ManifestError, ParseError, YewcompError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "compile_component",
    "parse_component",
    "emit",
    "get_backend",
    "list_backends",
    "YewcompError",
    "ParseError",
    "BackendError",
    "ManifestError",
]
