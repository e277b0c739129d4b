"""
Property-based tests using Hypothesis.

These tests verify invariants across a wide range of inputs,
replacing the need for exhaustive example-based tests.
"""

from pathlib import Path

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from yewcomp.core import ir
from yewcomp.core.dsl_parser_impl import parse_component
from yewcomp.core.emitter import emit
from yewcomp.core.errors import ErrorKind, ParseError
from yewcomp.core.lexer import TokenType, tokenize

SECTIONS = {
    ir.SectionKind.MESSAGE: "type Message = { Increment, Add(i64) }",
    ir.SectionKind.PROPS: "type Props = { pub step: i64 }",
    ir.SectionKind.STATE: "type State = { count: i64 }",
    ir.SectionKind.CREATE: "fn create(link: &mut Link) -> Self { Self { count: 0 } }",
    ir.SectionKind.UPDATE: "fn update(&mut self, msg: Self::Message) -> ShouldRender { true }",
    ir.SectionKind.VIEW: "fn view(&self) -> Html { html! { <p>{ self.state.count }</p> } }",
}

ALL_KINDS = list(ir.REQUIRED_SECTIONS)


def source(kinds: list[ir.SectionKind]) -> str:
    body = "\n".join(f"    {SECTIONS[kind]}" for kind in kinds)
    return f"pub struct Counter {{\n{body}\n}}\n"


BASELINE = parse_component(source(ALL_KINDS), Path("p.yc"))

# Fragments that stress the parser: section keywords, delimiters and punctuation
FRAGMENTS = [
    "pub",
    "struct",
    "Counter",
    "type",
    "fn",
    "Message",
    "Props",
    "State",
    "create",
    "update",
    "view",
    "=",
    "{",
    "}",
    "(",
    ")",
    "[",
    "]",
    "<",
    ">",
    ",",
    ":",
    ";",
    "->",
    "#",
    "&self",
    "i64",
    "where",
    '"}"',
    "'a",
    "// c\n",
]


class TestSectionProperties:
    """Structural properties of component blocks."""

    @given(st.permutations(ALL_KINDS))
    @settings(max_examples=100)
    def test_section_order_does_not_matter(self, kinds: list[ir.SectionKind]) -> None:
        """Invariant: any permutation of the six sections parses to the same description."""
        spec = parse_component(source(kinds), Path("p.yc"))
        assert spec == BASELINE
        assert emit(spec) == emit(BASELINE)

    @given(
        st.sets(st.sampled_from(ALL_KINDS), min_size=1).flatmap(
            lambda dropped: st.permutations([k for k in ALL_KINDS if k not in dropped]).map(
                lambda kept: (dropped, kept)
            )
        )
    )
    @settings(max_examples=100)
    def test_missing_section_is_named(self, case) -> None:
        """Invariant: the first missing section in table order is reported."""
        dropped, kept = case
        with pytest.raises(ParseError) as exc_info:
            parse_component(source(kept), Path("p.yc"))

        expected = next(kind for kind in ALL_KINDS if kind in dropped)
        assert exc_info.value.kind == ErrorKind.MISSING_SECTION
        assert exc_info.value.section == expected
        assert exc_info.value.message == f"{expected.label} not defined"

    @given(
        st.sampled_from(ALL_KINDS),
        st.permutations(ALL_KINDS),
        st.integers(min_value=0, max_value=6),
    )
    @settings(max_examples=100)
    def test_duplicate_section_is_named(
        self, duplicated: ir.SectionKind, kinds: list[ir.SectionKind], index: int
    ) -> None:
        """Invariant: a repeated section is reported by name, wherever it appears."""
        kinds = list(kinds)
        kinds.insert(index, duplicated)
        with pytest.raises(ParseError) as exc_info:
            parse_component(source(kinds), Path("p.yc"))

        assert exc_info.value.kind == ErrorKind.DUPLICATE_SECTION
        assert exc_info.value.section == duplicated
        assert exc_info.value.message == f"{duplicated.label} defined twice"

    @given(
        st.text(alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_", min_size=1)
    )
    @settings(max_examples=100)
    def test_unknown_type_section_rejected(self, name: str) -> None:
        """Invariant: only Message, Props and State are accepted after 'type'."""
        assume(name not in ("Message", "Props", "State"))
        text = source(ALL_KINDS).replace("type Props", f"type {name}")
        with pytest.raises(ParseError) as exc_info:
            parse_component(text, Path("p.yc"))
        assert exc_info.value.kind in (ErrorKind.UNKNOWN_SECTION, ErrorKind.SYNTAX)


class TestLexerProperties:
    """Lexer robustness."""

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_tokenize_only_raises_parse_error(self, text: str) -> None:
        """Invariant: tokenize either succeeds or raises ParseError."""
        try:
            tokens = tokenize(text, Path("p.yc"))
        except ParseError:
            return
        assert tokens[-1].type == TokenType.EOF
        for token in tokens[:-1]:
            assert token.value == text[token.offset : token.end]

    @given(st.lists(st.sampled_from(FRAGMENTS), max_size=40).map(" ".join))
    @settings(max_examples=300)
    def test_parse_only_raises_parse_error(self, text: str) -> None:
        """Invariant: parse_component either succeeds or raises ParseError."""
        try:
            parse_component(text, Path("p.yc"))
        except ParseError:
            pass
