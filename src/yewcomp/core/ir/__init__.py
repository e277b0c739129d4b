"""
yewcomp Intermediate Representation (IR) types.

This package contains the component description produced by the parser
and the artifact descriptors produced by the emitter.

All types are re-exported from this package.
"""

# Output artifacts
from .artifacts import (
    Artifact,
    ArtifactKind,
    ArtifactList,
    ChangeComparison,
    ChangeDetectionSpec,
    ComponentArtifact,
    MessageEnumArtifact,
    RecordArtifact,
    RecordTrait,
    StateConstructorArtifact,
)

# Component description
from .component import (
    ComponentSpec,
    FieldSpec,
    FunctionSpec,
    VariantKind,
    VariantSpec,
)
from .location import SourceLocation
from .module import ComponentModule

# Sections
from .sections import (
    FUNCTION_SECTIONS,
    REQUIRED_SECTIONS,
    TYPE_SECTIONS,
    SectionKind,
    format_allowed,
)

__all__ = [
    # Artifacts
    "Artifact",
    "ArtifactKind",
    "ArtifactList",
    "ChangeComparison",
    "ChangeDetectionSpec",
    "ComponentArtifact",
    "MessageEnumArtifact",
    "RecordArtifact",
    "RecordTrait",
    "StateConstructorArtifact",
    # Component
    "ComponentSpec",
    "FieldSpec",
    "FunctionSpec",
    "VariantKind",
    "VariantSpec",
    "SourceLocation",
    "ComponentModule",
    # Sections
    "FUNCTION_SECTIONS",
    "REQUIRED_SECTIONS",
    "TYPE_SECTIONS",
    "SectionKind",
    "format_allowed",
]
