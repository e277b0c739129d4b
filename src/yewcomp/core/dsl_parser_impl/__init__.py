"""
yewcomp component parser package.

The parser is built using mixins to separate parsing logic by construct type:

- BaseParser: token navigation, visibility, attributes, group skipping
- TypeParserMixin: message variants and named fields
- FunctionParserMixin: fn outlines with opaque bodies
- SectionParserMixin: section recognition and slot filling

Usage:
    from yewcomp.core.dsl_parser_impl import parse_component

    spec = parse_component(text, Path("counter.yc"))
"""

from pathlib import Path

from .. import ir
from ..errors import ErrorKind
from ..ir.sections import REQUIRED_SECTIONS, SectionKind, format_allowed
from ..lexer import TokenType, tokenize
from .base import BaseParser, describe_token
from .functions import FunctionParserMixin
from .sections import SectionParserMixin
from .slots import SectionSlots
from .types import TypeParserMixin


class Parser(
    BaseParser,
    TypeParserMixin,
    FunctionParserMixin,
    SectionParserMixin,
):
    """
    Complete component parser.

    Accepts exactly one component block:

        visibility? "struct" IDENTIFIER "{" section* "}"
    """

    def parse(self) -> ir.ComponentSpec:
        """
        Parse the component block and return its validated description.

        Raises:
            ParseError: On the first structural violation
        """
        visibility = self.parse_visibility()
        self.expect(TokenType.STRUCT)
        name_token = self.expect(TokenType.IDENTIFIER)
        self.expect(TokenType.LBRACE)

        slots = SectionSlots()
        while not self.match(TokenType.RBRACE, TokenType.EOF):
            if self.match(TokenType.TYPE):
                self.parse_type_section(slots)
            elif self.match(TokenType.FN):
                self.parse_function_section(slots)
            else:
                raise self.error(
                    f"{format_allowed(REQUIRED_SECTIONS)} are the only allowed params",
                    self.current_token(),
                    kind=ErrorKind.UNKNOWN_SECTION,
                )
        body_close = self.expect(TokenType.RBRACE)

        missing = slots.first_missing()
        if missing is not None:
            raise self.error(
                f"{missing.label} not defined",
                body_close,
                kind=ErrorKind.MISSING_SECTION,
                section=missing,
            )

        if not self.match(TokenType.EOF):
            token = self.current_token()
            raise self.error(f"Unexpected {describe_token(token)} after component body", token)

        return ir.ComponentSpec(
            name=name_token.value,
            visibility=visibility,
            message_variants=slots.payload(SectionKind.MESSAGE),
            props_fields=slots.payload(SectionKind.PROPS),
            state_fields=slots.payload(SectionKind.STATE),
            create_fn=slots.payload(SectionKind.CREATE),
            update_fn=slots.payload(SectionKind.UPDATE),
            view_fn=slots.payload(SectionKind.VIEW),
            location=ir.SourceLocation(
                file=str(self.file),
                line=name_token.line,
                column=name_token.column,
            ),
        )


def parse_component(text: str, file: Path = Path("<input>")) -> ir.ComponentSpec:
    """
    Parse one component block.

    Args:
        text: Component source text
        file: Source file path (for error reporting)

    Returns:
        Validated ComponentSpec

    Raises:
        ParseError: If the source is malformed or sections are missing,
            duplicated or unknown
    """
    tokens = tokenize(text, file)
    parser = Parser(tokens, file, text)
    return parser.parse()


__all__ = [
    "Parser",
    "parse_component",
    "BaseParser",
    "TypeParserMixin",
    "FunctionParserMixin",
    "SectionParserMixin",
    "SectionSlots",
]
