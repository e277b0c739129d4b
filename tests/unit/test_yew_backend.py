"""Tests for the yew backend."""

from pathlib import Path

import pytest

from yewcomp.backends import get_backend
from yewcomp.backends.yew import YewBackend
from yewcomp.core import ir
from yewcomp.core.emitter import emit
from yewcomp.core.errors import BackendError


@pytest.fixture
def backend() -> YewBackend:
    return YewBackend()


@pytest.fixture
def rendered(backend: YewBackend, counter_spec: ir.ComponentSpec) -> str:
    return backend.render(emit(counter_spec))


class TestRenderCounter:
    """Rust output for the counter component."""

    def test_message_enum(self, rendered: str) -> None:
        assert "pub enum Message {\n    Increment,\n}" in rendered

    def test_props_record(self, rendered: str) -> None:
        assert (
            "#[derive(yew::Properties, Clone, Debug, PartialEq)]\npub struct CounterProps {}"
            in rendered
        )

    def test_state_record(self, rendered: str) -> None:
        assert (
            "#[derive(Clone, Debug, PartialEq)]\npub struct CounterState {\n    count: i64,\n}"
            in rendered
        )

    def test_state_constructor(self, rendered: str, counter_spec: ir.ComponentSpec) -> None:
        expected = (
            "impl CounterState {\n"
            "    fn create(link: &mut ComponentLink<Counter>) -> Self {\n"
            "        Self { count: 0 }\n"
            "    }\n"
            "}"
        )
        assert expected in rendered

    def test_component_struct(self, rendered: str) -> None:
        assert (
            "pub struct Counter {\n"
            "    link: yew::ComponentLink<Self>,\n"
            "    props: CounterProps,\n"
            "    state: CounterState,\n"
            "}"
        ) in rendered

    def test_component_impl(self, rendered: str) -> None:
        assert (
            "impl yew::Component for Counter {\n"
            "    type Properties = CounterProps;\n"
            "    type Message = Message;"
        ) in rendered
        assert "let state = CounterState::create(&mut link);" in rendered

    def test_change_uses_neq_assign(self, rendered: str) -> None:
        assert (
            "    fn change(&mut self, props: Self::Properties) -> yew::ShouldRender {\n"
            "        use yewtil::NeqAssign;\n"
            "\n"
            "        self.props.neq_assign(props)\n"
            "    }"
        ) in rendered

    def test_function_bodies_verbatim(
        self, rendered: str, counter_spec: ir.ComponentSpec
    ) -> None:
        for function in (counter_spec.update_fn, counter_spec.view_fn):
            assert function.body in rendered

    def test_item_order(self, rendered: str) -> None:
        positions = [
            rendered.index("enum Message"),
            rendered.index("struct CounterProps"),
            rendered.index("struct CounterState"),
            rendered.index("impl CounterState"),
            rendered.index("struct Counter {"),
            rendered.index("impl yew::Component"),
        ]
        assert positions == sorted(positions)

    def test_ends_with_newline(self, rendered: str) -> None:
        assert rendered.endswith("}\n")
        assert not rendered.endswith("\n\n")


class TestOptions:
    """Crate path options."""

    def test_custom_crate_paths(self, backend: YewBackend, counter_spec) -> None:
        text = backend.render(
            emit(counter_spec), yew_crate="::my_yew", yewtil_crate="helpers::yewtil"
        )
        assert "#[derive(::my_yew::Properties, Clone, Debug, PartialEq)]" in text
        assert "impl ::my_yew::Component for Counter" in text
        assert "use helpers::yewtil::NeqAssign;" in text
        assert "-> ::my_yew::ShouldRender" in text

    @pytest.mark.parametrize("value", ["", "yew crate", "1yew", "yew::", "yew;drop"])
    def test_invalid_crate_path(self, backend: YewBackend, value: str) -> None:
        with pytest.raises(BackendError):
            backend.validate_config(yew_crate=value)

    def test_no_visibility(self, backend: YewBackend, counter_spec) -> None:
        spec = counter_spec.model_copy(update={"visibility": ""})
        text = backend.render(emit(spec))
        assert text.startswith("enum Message {")
        assert "\nstruct Counter {" in text


class TestGenerate:
    """Backend.generate() writes one file per component."""

    def test_output_path_uses_stem(self, backend: YewBackend, counter_spec) -> None:
        module = ir.ComponentModule(file=Path("a/b/counter.yc"), spec=counter_spec)
        assert backend.output_path(module, Path("out")) == Path("out/counter.rs")

    def test_writes_rust_file(self, tmp_path: Path, counter_spec) -> None:
        module = ir.ComponentModule(file=Path("components/counter.yc"), spec=counter_spec)
        output = get_backend("yew").generate(module, tmp_path / "out")

        assert output == tmp_path / "out" / "counter.rs"
        assert "impl yew::Component for Counter" in output.read_text(encoding="utf-8")

    def test_capabilities(self, backend: YewBackend) -> None:
        capabilities = backend.get_capabilities()
        assert capabilities.name == "yew"
        assert capabilities.file_extension == ".rs"
