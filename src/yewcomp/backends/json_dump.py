"""
JSON backend for yewcomp.

Serializes the emitted artifact descriptors, so tools that target a
different syntax can consume the expansion without re-parsing sources.
"""

from typing import Any

from ..core import ir
from ..core.errors import BackendError
from . import Backend, BackendCapabilities


class JsonBackend(Backend):
    """Dump the artifact list as JSON, discriminated by each artifact's ``kind``."""

    def get_capabilities(self) -> BackendCapabilities:
        return BackendCapabilities(
            name="json",
            description="Artifact descriptors as JSON",
            output_formats=["json"],
            file_extension=".json",
        )

    def validate_config(self, **options: Any) -> None:
        indent = options.get("indent")
        if indent is not None and (not isinstance(indent, int) or indent < 0):
            raise BackendError(f"Invalid indent {indent!r}: expected a non-negative integer")

    def render(self, artifacts: list[ir.Artifact], indent: int | None = 2, **options: Any) -> str:
        self.validate_config(indent=indent)
        return ir.ArtifactList.dump_json(artifacts, indent=indent).decode("utf-8") + "\n"
