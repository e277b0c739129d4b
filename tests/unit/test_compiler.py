"""Tests for single-call compilation and file parsing."""

from pathlib import Path

import pytest

import yewcomp
from yewcomp.core.errors import BackendError, ErrorKind, ParseError
from yewcomp.core.parser import (
    parse_component_file,
    parse_component_files,
    read_component_text,
)


class TestCompileComponent:
    """compile_component(): source text in, rendered text out."""

    def test_yew_output(self, counter_source: str) -> None:
        output = yewcomp.compile_component(counter_source)
        assert "impl yew::Component for Counter" in output

    def test_json_output(self, counter_source: str) -> None:
        output = yewcomp.compile_component(counter_source, backend="json")
        assert '"kind": "component"' in output

    def test_options_forwarded(self, counter_source: str) -> None:
        output = yewcomp.compile_component(counter_source, yew_crate="web")
        assert "impl web::Component for Counter" in output

    def test_parse_error_carries_file(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            yewcomp.compile_component("struct A {}", Path("a.yc"))
        assert exc_info.value.kind == ErrorKind.MISSING_SECTION
        assert str(exc_info.value).startswith("a.yc:1:11")

    def test_backend_checked_before_parsing(self) -> None:
        with pytest.raises(BackendError):
            yewcomp.compile_component("not a component", backend="swift")

    def test_invalid_option_checked_before_parsing(self) -> None:
        with pytest.raises(BackendError):
            yewcomp.compile_component("not a component", yew_crate="bad path")


class TestParseFiles:
    """Parsing component source files."""

    def test_parse_file(self, counter_file: Path) -> None:
        module = parse_component_file(counter_file)
        assert module.stem == "counter"
        assert module.spec.name == "Counter"
        assert module.spec.location is not None
        assert module.spec.location.file == str(counter_file)

    def test_non_utf8_file_is_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.yc"
        path.write_bytes("struct Café {}\n".encode("latin-1"))

        with pytest.raises(ParseError) as exc_info:
            read_component_text(path)
        context = exc_info.value.context
        assert context is not None
        assert (context.file, context.line, context.column) == (path, 1, 11)
        assert exc_info.value.kind == ErrorKind.SYNTAX

    def test_first_failure_propagates(self, tmp_path: Path, counter_file: Path) -> None:
        broken = tmp_path / "broken.yc"
        broken.write_text("struct Broken {\n    type Model = {}\n}\n", encoding="utf-8")

        with pytest.raises(ParseError) as exc_info:
            parse_component_files([counter_file, broken])
        assert exc_info.value.context is not None
        assert exc_info.value.context.file == broken
