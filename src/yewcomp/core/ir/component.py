"""
Component description types for yewcomp IR.

A ComponentSpec is what the parser produces from one component block and
what the emitter consumes. Field types, variant payloads and function
bodies are kept as verbatim source text; yewcomp never interprets them.

Source syntax:

    pub struct Counter {
        type Message = { Increment, Add(i64) }
        type Props = { pub label: String }
        type State = { count: i64 }
        fn create(link: &mut ComponentLink<Counter>) -> Self { Self { count: 0 } }
        fn update(&mut self, msg: Self::Message) -> ShouldRender { ... }
        fn view(&self) -> Html { ... }
    }
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .location import SourceLocation
from .sections import SectionKind


class FieldSpec(BaseModel):
    """
    A named, typed field of a record or of a struct-like variant.

    Attributes:
        name: Field identifier
        type: Type text as written in the source
        visibility: Visibility modifier text ('' when absent)
        attributes: Attributes and doc comments preceding the field
        source: The complete declaration, verbatim
    """

    name: str
    type: str
    visibility: str = ""
    attributes: list[str] = Field(default_factory=list)
    source: str

    model_config = ConfigDict(frozen=True)


class VariantKind(StrEnum):
    """Payload shape of a message variant."""

    UNIT = "unit"
    TUPLE = "tuple"
    STRUCT = "struct"


class VariantSpec(BaseModel):
    """
    One case of the message tagged union.

    Attributes:
        name: Variant identifier
        kind: Payload shape
        tuple_types: Element types of a tuple payload
        fields: Named fields of a struct payload
        discriminant: Explicit discriminant expression, if any
        attributes: Attributes and doc comments preceding the variant
        source: The complete variant declaration, verbatim
    """

    name: str
    kind: VariantKind = VariantKind.UNIT
    tuple_types: list[str] = Field(default_factory=list)
    fields: list[FieldSpec] = Field(default_factory=list)
    discriminant: str | None = None
    attributes: list[str] = Field(default_factory=list)
    source: str

    model_config = ConfigDict(frozen=True)


class FunctionSpec(BaseModel):
    """
    A behavior function (create, update or view), carried as opaque text.

    Attributes:
        name: Declared function name
        params: Parameter list text (without the parentheses)
        return_type: Return type text, if declared
        signature: Everything from 'fn' up to the body
        body: The brace-delimited body, verbatim
        source: The complete function definition, verbatim
    """

    name: str
    params: str = ""
    return_type: str | None = None
    signature: str
    body: str
    source: str

    model_config = ConfigDict(frozen=True)


class ComponentSpec(BaseModel):
    """
    Validated description of one component block.

    All six sections are guaranteed present once a ComponentSpec exists;
    the parser refuses to build one otherwise.
    """

    name: str
    visibility: str = ""
    message_variants: list[VariantSpec]
    props_fields: list[FieldSpec]
    state_fields: list[FieldSpec]
    create_fn: FunctionSpec
    update_fn: FunctionSpec
    view_fn: FunctionSpec
    location: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)

    def props_name(self) -> str:
        """Return the name of the generated properties record."""
        return f"{self.name}Props"

    def state_name(self) -> str:
        """Return the name of the generated state record."""
        return f"{self.name}State"

    def section(
        self, kind: SectionKind
    ) -> list[VariantSpec] | list[FieldSpec] | FunctionSpec:
        """Return the payload stored for a section."""
        return {
            SectionKind.MESSAGE: self.message_variants,
            SectionKind.PROPS: self.props_fields,
            SectionKind.STATE: self.state_fields,
            SectionKind.UPDATE: self.update_fn,
            SectionKind.CREATE: self.create_fn,
            SectionKind.VIEW: self.view_fn,
        }[kind]
