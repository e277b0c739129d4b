import logging
from pathlib import Path

from . import ir
from .dsl_parser_impl import parse_component
from .errors import make_parse_error

logger = logging.getLogger(__name__)


def read_component_text(file: Path) -> str:
    """
    Read a component source as UTF-8.

    Raises:
        ParseError: If the file is not valid UTF-8, positioned at the first bad byte
        OSError: If the file cannot be read
    """
    data = file.read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        line_start = data.rfind(b"\n", 0, e.start) + 1
        raise make_parse_error(
            f"Source is not valid UTF-8: {e.reason}",
            file,
            data.count(b"\n", 0, e.start) + 1,
            e.start - line_start + 1,
        ) from e


def parse_component_file(file: Path) -> ir.ComponentModule:
    """
    Parse one component source file.

    Args:
        file: Path to the component source

    Returns:
        ComponentModule pairing the file with its ComponentSpec

    Raises:
        ParseError: If the source is not a valid component block
    """
    text = read_component_text(file)
    spec = parse_component(text, file)
    logger.debug(f"Parsed component {spec.name} from {file}")
    return ir.ComponentModule(file=file, spec=spec)


def parse_component_files(files: list[Path]) -> list[ir.ComponentModule]:
    """
    Parse component source files in order.

    Parsing stops at the first file that fails; its ParseError propagates.

    Args:
        files: List of component source paths

    Returns:
        List of ComponentModule objects, one per file
    """
    modules = [parse_component_file(f) for f in files]
    logger.info(f"Parsed {len(modules)} component file(s)")
    return modules
