"""
Error types for yewcomp parsing, emission and rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ir.sections import SectionKind


class YewcompError(Exception):
    """Base exception for all yewcomp errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ErrorKind(StrEnum):
    """Categories of parse failures."""

    SYNTAX = "syntax"
    DUPLICATE_SECTION = "duplicate_section"
    UNKNOWN_SECTION = "unknown_section"
    MISSING_SECTION = "missing_section"


class ParseError(YewcompError):
    """
    Raised when component source cannot be parsed.

    Examples:
    - Input not shaped like ``[vis] struct Name { ... }``
    - Unbalanced delimiters or malformed field/variant lists
    - A section defined twice, an unknown section, a missing section
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        kind: ErrorKind = ErrorKind.SYNTAX,
        section: SectionKind | None = None,
    ):
        self.kind = kind
        self.section = section
        super().__init__(message, context)


class BackendError(YewcompError):
    """
    Raised when a backend cannot render output.

    Examples:
    - Unknown backend name
    - Invalid backend options
    """

    pass


class ManifestError(YewcompError):
    """Raised when yewcomp.toml is missing required keys or cannot be read."""

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file where error occurred
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source excerpt around the error location
    """

    file: Path
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "counter.yc:10:5"
        """
        location = f"{self.file}:{self.line}:{self.column}"
        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippets start up to 2 lines before the error line
        start_line = max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def extract_snippet(text: str, line: int, context_lines: int = 2) -> str:
    """Return the source lines surrounding ``line`` (1-indexed)."""
    lines = text.split("\n")
    start = max(0, line - 1 - context_lines)
    end = min(len(lines), line + context_lines)
    return "\n".join(lines[start:end])


def make_parse_error(
    message: str,
    file: Path,
    line: int,
    column: int,
    snippet: str | None = None,
    kind: ErrorKind = ErrorKind.SYNTAX,
    section: SectionKind | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        file: Source file path
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional code snippet
        kind: Failure category
        section: Section the error is about, if any

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    return ParseError(message, context, kind=kind, section=section)
