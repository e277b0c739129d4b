"""
Single-call compilation: component source text in, rendered text out.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .backends import get_backend
from .core.dsl_parser_impl import parse_component
from .core.emitter import emit

logger = logging.getLogger(__name__)


def compile_component(
    text: str,
    file: Path | None = None,
    backend: str = "yew",
    **options: Any,
) -> str:
    """
    Parse, emit and render one component block.

    Args:
        text: Component source text
        file: Source path used in error messages
        backend: Registered backend name ('yew' or 'json')
        **options: Backend-specific options (e.g. yew_crate)

    Returns:
        Rendered output text

    Raises:
        ParseError: If the source is not a valid component block
        BackendError: If the backend is unknown or its options are invalid
    """
    renderer = get_backend(backend)
    renderer.validate_config(**options)

    spec = parse_component(text, file or Path("<input>"))
    artifacts = emit(spec)
    logger.debug(f"Rendering component {spec.name} with backend '{backend}'")
    return renderer.render(artifacts, **options)
