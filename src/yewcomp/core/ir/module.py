"""
Module-level IR types for yewcomp.

A ComponentModule pairs one component source file with its parsed
description.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .component import ComponentSpec


class ComponentModule(BaseModel):
    """
    A parsed component source file.

    Attributes:
        file: Source file path
        spec: The component description parsed from it
    """

    file: Path
    spec: ComponentSpec

    model_config = ConfigDict(frozen=True)

    @property
    def stem(self) -> str:
        """Base name used for generated output files."""
        return self.file.stem
