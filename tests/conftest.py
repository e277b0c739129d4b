"""Shared pytest fixtures for yewcomp tests."""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from yewcomp.core import ir
from yewcomp.core.dsl_parser_impl import parse_component

MESSAGE_SECTION = """\
    type Message = {
        Increment,
    }"""

PROPS_SECTION = """\
    type Props = {}"""

STATE_SECTION = """\
    type State = {
        count: i64,
    }"""

CREATE_SECTION = """\
    fn create(link: &mut ComponentLink<Counter>) -> Self {
        Self { count: 0 }
    }"""

UPDATE_SECTION = """\
    fn update(&mut self, msg: Self::Message) -> ShouldRender {
        match msg {
            Message::Increment => self.state.count += 1,
        }
        true
    }"""

VIEW_SECTION = """\
    fn view(&self) -> Html {
        html! {
            <p>{ self.state.count }</p>
        }
    }"""

SECTIONS = {
    ir.SectionKind.MESSAGE: MESSAGE_SECTION,
    ir.SectionKind.PROPS: PROPS_SECTION,
    ir.SectionKind.STATE: STATE_SECTION,
    ir.SectionKind.CREATE: CREATE_SECTION,
    ir.SectionKind.UPDATE: UPDATE_SECTION,
    ir.SectionKind.VIEW: VIEW_SECTION,
}


def build_source(
    sections: Iterable[str], name: str = "Counter", visibility: str = "pub"
) -> str:
    """Wrap section texts in a component block, one blank line between sections."""
    prefix = f"{visibility} " if visibility else ""
    body = "\n\n".join(sections)
    return f"{prefix}struct {name} {{\n{body}\n}}\n"


COUNTER_SOURCE = build_source(SECTIONS.values())


@pytest.fixture
def counter_source() -> str:
    """Return the counter component: one message, no props, a count in state."""
    return COUNTER_SOURCE


@pytest.fixture
def counter_spec(counter_source: str) -> ir.ComponentSpec:
    """Return the parsed counter component."""
    return parse_component(counter_source, Path("counter.yc"))


@pytest.fixture
def section_texts() -> dict[ir.SectionKind, str]:
    """Return the counter's section texts keyed by section."""
    return dict(SECTIONS)


@pytest.fixture
def make_source() -> Callable[..., str]:
    """Return a builder that wraps section texts in a component block."""
    return build_source


@pytest.fixture
def counter_file(tmp_path: Path, counter_source: str) -> Path:
    """Write the counter component to a temporary .yc file."""
    path = tmp_path / "counter.yc"
    path.write_text(counter_source, encoding="utf-8")
    return path
