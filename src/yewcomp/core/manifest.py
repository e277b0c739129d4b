import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ManifestError

DEFAULT_SOURCE_EXTENSION = ".yc"


@dataclass
class OutputConfig:
    """Where and how `yewcomp build` writes generated code."""

    dir: str = "generated"
    backend: str = "yew"


@dataclass
class YewConfig:
    """Crate paths used by the yew backend.

    Examples in yewcomp.toml:

        [yew]
        crate = "yew"
        yewtil_crate = "yewtil"
    """

    crate: str = "yew"
    yewtil_crate: str = "yewtil"


@dataclass
class ProjectManifest:
    """
    Project manifest loaded from yewcomp.toml.

    Contains project metadata, component source paths, output settings
    and backend configuration.
    """

    name: str
    version: str = "0.1.0"
    source_paths: list[str] = field(default_factory=lambda: ["components/"])
    source_extension: str = DEFAULT_SOURCE_EXTENSION
    output: OutputConfig = field(default_factory=OutputConfig)
    yew: YewConfig = field(default_factory=YewConfig)

    def backend_options(self, backend: str) -> dict[str, Any]:
        """Return the manifest-configured options for a backend."""
        if backend == "yew":
            return {"yew_crate": self.yew.crate, "yewtil_crate": self.yew.yewtil_crate}
        return {}


def load_manifest(path: Path) -> ProjectManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ManifestError(f"Manifest not found: {path}")
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}")

    for section in ("project", "sources", "output", "yew"):
        if not isinstance(data.get(section, {}), dict):
            raise ManifestError(f"{path}: [{section}] must be a table")

    project = data.get("project", {})
    sources = data.get("sources", {})
    output_data = data.get("output", {})
    yew_data = data.get("yew", {})

    name = project.get("name")
    if not name:
        raise ManifestError(f"{path}: [project] name is required")

    source_paths = sources.get("paths", ["components/"])
    if not isinstance(source_paths, list) or not all(isinstance(p, str) for p in source_paths):
        raise ManifestError(f"{path}: [sources] paths must be a list of strings")

    output = OutputConfig(
        dir=_string(output_data, "dir", "generated", "[output]", path),
        backend=_string(output_data, "backend", "yew", "[output]", path),
    )

    yew = YewConfig(
        crate=_string(yew_data, "crate", "yew", "[yew]", path),
        yewtil_crate=_string(yew_data, "yewtil_crate", "yewtil", "[yew]", path),
    )

    return ProjectManifest(
        name=_string(project, "name", "", "[project]", path),
        version=_string(project, "version", "0.1.0", "[project]", path),
        source_paths=source_paths,
        source_extension=_string(
            sources, "extension", DEFAULT_SOURCE_EXTENSION, "[sources]", path
        ),
        output=output,
        yew=yew,
    )


def _string(table: dict[str, Any], key: str, default: str, section: str, path: Path) -> str:
    value = table.get(key, default)
    if not isinstance(value, str):
        raise ManifestError(f"{path}: {section} {key} must be a string, got {value!r}")
    return value
