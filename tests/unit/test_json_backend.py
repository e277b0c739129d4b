"""Tests for the json backend and backend registry."""

import json

import pytest

from yewcomp.backends import Backend, BackendRegistry, get_backend, list_backends
from yewcomp.backends.json_dump import JsonBackend
from yewcomp.core import ir
from yewcomp.core.emitter import emit
from yewcomp.core.errors import BackendError


class TestJsonBackend:
    """Artifact descriptors as JSON."""

    def test_round_trips_through_artifact_list(self, counter_spec: ir.ComponentSpec) -> None:
        artifacts = emit(counter_spec)
        text = JsonBackend().render(artifacts)
        assert ir.ArtifactList.validate_json(text) == artifacts

    def test_kind_discriminators(self, counter_spec: ir.ComponentSpec) -> None:
        data = json.loads(JsonBackend().render(emit(counter_spec)))
        assert [item["kind"] for item in data] == [
            "message_enum",
            "props_record",
            "state_record",
            "state_constructor",
            "component",
        ]
        assert data[1]["traits"] == ["properties", "clone", "debug", "partial_eq"]

    def test_compact_output(self, counter_spec: ir.ComponentSpec) -> None:
        text = JsonBackend().render(emit(counter_spec), indent=None)
        assert text.count("\n") == 1

    def test_invalid_indent(self) -> None:
        with pytest.raises(BackendError):
            JsonBackend().validate_config(indent=-1)


class TestRegistry:
    """Backend lookup by name."""

    def test_builtin_backends(self) -> None:
        assert list_backends() == ["yew", "json"]

    def test_unknown_backend(self) -> None:
        with pytest.raises(BackendError, match="Backend 'swift' not found"):
            get_backend("swift")

    def test_register_twice(self) -> None:
        registry = BackendRegistry()
        registry.register("json", JsonBackend)
        with pytest.raises(BackendError, match="already registered"):
            registry.register("json", JsonBackend)

    def test_register_requires_backend_subclass(self) -> None:
        registry = BackendRegistry()
        with pytest.raises(BackendError, match="must extend Backend"):
            registry.register("bad", dict)  # type: ignore[arg-type]

    def test_custom_backend(self, counter_spec: ir.ComponentSpec) -> None:
        class NamesBackend(Backend):
            def render(self, artifacts, **options):
                return "\n".join(getattr(a, "name", a.kind) for a in artifacts)

        registry = BackendRegistry()
        registry.register("names", NamesBackend)
        text = registry.get("names").render(emit(counter_spec))
        assert text.splitlines()[:3] == ["Message", "CounterProps", "CounterState"]
