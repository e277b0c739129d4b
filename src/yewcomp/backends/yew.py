"""
Yew backend for yewcomp.

Renders the emitted artifacts as Rust items implementing the Yew
``Component`` trait. Field declarations, variants and function definitions
are copied from the component source verbatim.
"""

import re
from typing import Any

from ..core import ir
from ..core.errors import BackendError
from . import Backend, BackendCapabilities

RUST_PATH = re.compile(r"^(::)?[A-Za-z_][A-Za-z0-9_]*(::[A-Za-z_][A-Za-z0-9_]*)*$")

INDENT = "    "


class YewBackend(Backend):
    """
    Generate Rust source for a Yew component.

    Maps artifacts to Rust items:
    - MessageEnumArtifact → enum Message
    - RecordArtifact → #[derive(...)] struct <Name>Props / <Name>State
    - StateConstructorArtifact → impl <Name>State { fn create ... }
    - ComponentArtifact → struct <Name> + impl yew::Component for <Name>
    """

    def get_capabilities(self) -> BackendCapabilities:
        return BackendCapabilities(
            name="yew",
            description="Rust source implementing the Yew Component trait",
            output_formats=["rust"],
            file_extension=".rs",
        )

    def validate_config(self, **options: Any) -> None:
        for key in ("yew_crate", "yewtil_crate"):
            value = options.get(key)
            if value is not None and not RUST_PATH.match(str(value)):
                raise BackendError(f"Invalid {key} {value!r}: expected a Rust path like 'yew'")

    def render(
        self,
        artifacts: list[ir.Artifact],
        yew_crate: str = "yew",
        yewtil_crate: str = "yewtil",
        **options: Any,
    ) -> str:
        """
        Render artifacts as Rust items separated by blank lines.

        Args:
            artifacts: Artifact list from emit()
            yew_crate: Path of the yew crate
            yewtil_crate: Path of the yewtil crate (provides NeqAssign)
        """
        self.validate_config(yew_crate=yew_crate, yewtil_crate=yewtil_crate)

        items = []
        for artifact in artifacts:
            if isinstance(artifact, ir.MessageEnumArtifact):
                items.append(self._render_enum(artifact))
            elif isinstance(artifact, ir.RecordArtifact):
                items.append(self._render_record(artifact, yew_crate))
            elif isinstance(artifact, ir.StateConstructorArtifact):
                items.append(self._render_state_impl(artifact))
            elif isinstance(artifact, ir.ComponentArtifact):
                items.append(self._render_component(artifact, yew_crate, yewtil_crate))
            else:
                raise BackendError(f"Unsupported artifact: {type(artifact).__name__}")

        return "\n\n".join(items) + "\n"

    def _prefix(self, visibility: str) -> str:
        return f"{visibility} " if visibility else ""

    def _block(self, header: str, entries: list[str]) -> str:
        if not entries:
            return f"{header} {{}}"
        body = "\n".join(f"{INDENT}{entry}," for entry in entries)
        return f"{header} {{\n{body}\n}}"

    def _render_enum(self, artifact: ir.MessageEnumArtifact) -> str:
        header = f"{self._prefix(artifact.visibility)}enum {artifact.name}"
        return self._block(header, [variant.source for variant in artifact.variants])

    def _derive(self, trait: ir.RecordTrait, yew_crate: str) -> str:
        return {
            ir.RecordTrait.PROPERTIES: f"{yew_crate}::Properties",
            ir.RecordTrait.CLONE: "Clone",
            ir.RecordTrait.DEBUG: "Debug",
            ir.RecordTrait.PARTIAL_EQ: "PartialEq",
        }[trait]

    def _render_record(self, artifact: ir.RecordArtifact, yew_crate: str) -> str:
        derives = ", ".join(self._derive(trait, yew_crate) for trait in artifact.traits)
        header = f"{self._prefix(artifact.visibility)}struct {artifact.name}"
        struct = self._block(header, [field.source for field in artifact.fields])
        if derives:
            return f"#[derive({derives})]\n{struct}"
        return struct

    def _render_state_impl(self, artifact: ir.StateConstructorArtifact) -> str:
        return f"impl {artifact.state_name} {{\n{INDENT}{artifact.function.source}\n}}"

    def _render_change(self, yew_crate: str, yewtil_crate: str) -> str:
        # neq_assign replaces the stored props and reports whether they differed
        signature = f"fn change(&mut self, props: Self::Properties) -> {yew_crate}::ShouldRender"
        return "\n".join(
            [
                f"{INDENT}{signature} {{",
                f"{INDENT * 2}use {yewtil_crate}::NeqAssign;",
                "",
                f"{INDENT * 2}self.props.neq_assign(props)",
                f"{INDENT}}}",
            ]
        )

    def _render_component(
        self, artifact: ir.ComponentArtifact, yew_crate: str, yewtil_crate: str
    ) -> str:
        link_type = f"{yew_crate}::ComponentLink<Self>"
        struct = self._block(
            f"{self._prefix(artifact.visibility)}struct {artifact.name}",
            [
                f"link: {link_type}",
                f"props: {artifact.props_name}",
                f"state: {artifact.state_name}",
            ],
        )

        create = "\n".join(
            [
                f"{INDENT}fn create(props: Self::Properties, mut link: {link_type}) -> Self {{",
                f"{INDENT * 2}let state = {artifact.state_name}::create(&mut link);",
                f"{INDENT * 2}Self {{",
                f"{INDENT * 3}link,",
                f"{INDENT * 3}props,",
                f"{INDENT * 3}state,",
                f"{INDENT * 2}}}",
                f"{INDENT}}}",
            ]
        )

        impl = "\n\n".join(
            [
                f"impl {yew_crate}::Component for {artifact.name} {{\n"
                f"{INDENT}type Properties = {artifact.props_name};\n"
                f"{INDENT}type Message = {artifact.message_name};",
                create,
                f"{INDENT}{artifact.update_fn.source}",
                self._render_change(yew_crate, yewtil_crate),
                f"{INDENT}{artifact.view_fn.source}\n}}",
            ]
        )

        return f"{struct}\n\n{impl}"
