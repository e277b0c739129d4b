"""
Backend plugin system for yewcomp.

Backends render the artifact list produced by the emitter into text.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core import ir
from ..core.emitter import emit
from ..core.errors import BackendError

logger = logging.getLogger(__name__)


@dataclass
class BackendCapabilities:
    """
    Describes what a backend can generate.

    Used for introspection and CLI help text.
    """

    name: str
    description: str
    output_formats: list[str]  # e.g., ["rust"]
    file_extension: str = ".txt"


class Backend(ABC):
    """
    Abstract base class for all yewcomp backends.

    Backends transform the emitted artifact list into concrete text such as
    Rust source or a JSON dump of the artifact descriptors.
    """

    @abstractmethod
    def render(self, artifacts: list[ir.Artifact], **options: Any) -> str:
        """
        Render artifacts to text.

        Args:
            artifacts: Artifact list from emit(), in emission order
            **options: Backend-specific options

        Returns:
            Rendered text
        """
        pass

    def get_capabilities(self) -> BackendCapabilities:
        """
        Get backend capabilities for introspection.

        Override to provide backend metadata.
        """
        return BackendCapabilities(
            name=self.__class__.__name__,
            description="No description provided",
            output_formats=["unknown"],
        )

    def validate_config(self, **options: Any) -> None:
        """
        Validate backend-specific configuration.

        Called before rendering to catch config errors early.

        Raises:
            BackendError: If config is invalid
        """
        pass

    def output_path(self, module: ir.ComponentModule, output_dir: Path) -> Path:
        """Return the file generate() writes for ``module``: ``<stem><ext>``."""
        return output_dir / f"{module.stem}{self.get_capabilities().file_extension}"

    def generate(self, module: ir.ComponentModule, output_dir: Path, **options: Any) -> Path:
        """
        Emit and render one parsed component into ``output_dir``.

        Returns:
            Path of the written file
        """
        self.validate_config(**options)
        text = self.render(emit(module.spec), **options)

        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = self.output_path(module, output_dir)
        output_file.write_text(text, encoding="utf-8")
        logger.debug(f"Wrote {output_file}")
        return output_file


class BackendRegistry:
    """
    Registry for backend plugins.

    Supports manual registration via register() and lookup by name.
    """

    def __init__(self) -> None:
        self._backends: dict[str, type[Backend]] = {}

    def register(self, name: str, backend_class: type[Backend]) -> None:
        """
        Register a backend class.

        Args:
            name: Backend name (used in CLI: --backend <name>)
            backend_class: Backend class (must extend Backend)

        Raises:
            BackendError: If name already registered or class invalid
        """
        if name in self._backends:
            raise BackendError(
                f"Backend '{name}' is already registered. Cannot register {backend_class.__name__}."
            )

        if not issubclass(backend_class, Backend):
            raise BackendError(f"Backend class {backend_class.__name__} must extend Backend")

        self._backends[name] = backend_class

    def get(self, name: str) -> Backend:
        """
        Get a backend instance by name.

        Raises:
            BackendError: If backend not found
        """
        if name not in self._backends:
            available = list(self._backends.keys())
            raise BackendError(f"Backend '{name}' not found. Available backends: {available}")

        backend_class = self._backends[name]
        return backend_class()

    def list_backends(self) -> list[str]:
        """List all registered backend names."""
        return list(self._backends.keys())


# Global registry instance
_registry: BackendRegistry | None = None


def get_registry() -> BackendRegistry:
    """
    Get the global backend registry.

    Registers the built-in backends on first call.
    """
    global _registry
    if _registry is None:
        from .json_dump import JsonBackend
        from .yew import YewBackend

        _registry = BackendRegistry()
        _registry.register("yew", YewBackend)
        _registry.register("json", JsonBackend)
    return _registry


def get_backend(name: str) -> Backend:
    """
    Get a backend instance by name.

    Raises:
        BackendError: If backend not found
    """
    return get_registry().get(name)


def list_backends() -> list[str]:
    """List all registered backend names."""
    return get_registry().list_backends()


__all__ = [
    "Backend",
    "BackendCapabilities",
    "BackendRegistry",
    "get_registry",
    "get_backend",
    "list_backends",
]
