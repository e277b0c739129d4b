"""
Output artifact descriptors.

The emitter maps one ComponentSpec onto five artifacts, always in this order:

1. MessageEnumArtifact       - the message tagged union
2. RecordArtifact (props)    - <Name>Props
3. RecordArtifact (state)    - <Name>State
4. StateConstructorArtifact  - create_fn attached to <Name>State
5. ComponentArtifact         - the component object and its lifecycle

Descriptors are independent of any textual syntax; backends render them.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .component import FieldSpec, FunctionSpec, VariantSpec


class ArtifactKind(StrEnum):
    """Discriminator values of the artifact union."""

    MESSAGE_ENUM = "message_enum"
    PROPS_RECORD = "props_record"
    STATE_RECORD = "state_record"
    STATE_CONSTRUCTOR = "state_constructor"
    COMPONENT = "component"


class RecordTrait(StrEnum):
    """Capabilities a generated record is annotated with."""

    PROPERTIES = "properties"  # accepted as external configuration
    CLONE = "clone"
    DEBUG = "debug"
    PARTIAL_EQ = "partial_eq"


class ChangeComparison(StrEnum):
    """How the component decides that new properties require a re-render."""

    STRUCTURAL_INEQUALITY = "structural_inequality"


class MessageEnumArtifact(BaseModel):
    """The message tagged union, variants in source order."""

    kind: Literal["message_enum"] = "message_enum"
    visibility: str = ""
    name: str
    variants: list[VariantSpec] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class RecordArtifact(BaseModel):
    """A props or state record type, fields in source order."""

    kind: Literal["props_record", "state_record"]
    visibility: str = ""
    name: str
    fields: list[FieldSpec] = Field(default_factory=list)
    traits: list[RecordTrait] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class StateConstructorArtifact(BaseModel):
    """The create function, relocated onto the state record type."""

    kind: Literal["state_constructor"] = "state_constructor"
    state_name: str
    function: FunctionSpec

    model_config = ConfigDict(frozen=True)


class ChangeDetectionSpec(BaseModel):
    """
    Synthesized change detection.

    Compares the stored properties with the incoming ones, replaces the
    stored value when they differ and reports whether they differed.
    """

    comparison: ChangeComparison = ChangeComparison.STRUCTURAL_INEQUALITY

    model_config = ConfigDict(frozen=True)


class ComponentArtifact(BaseModel):
    """The component object with its lifecycle implementation."""

    kind: Literal["component"] = "component"
    visibility: str = ""
    name: str
    message_name: str
    props_name: str
    state_name: str
    update_fn: FunctionSpec
    view_fn: FunctionSpec
    change_detection: ChangeDetectionSpec = Field(default_factory=ChangeDetectionSpec)

    model_config = ConfigDict(frozen=True)


Artifact = Annotated[
    MessageEnumArtifact | RecordArtifact | StateConstructorArtifact | ComponentArtifact,
    Field(discriminator="kind"),
]

ArtifactList = TypeAdapter(list[Artifact])
