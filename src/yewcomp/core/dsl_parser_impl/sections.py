"""
Section parser mixin for component sources.

Recognizes the six sections of a component body, rejects unknown ones and
refuses to fill a section twice.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import ErrorKind
from ..ir.sections import FUNCTION_SECTIONS, TYPE_SECTIONS, SectionKind, format_allowed
from ..lexer import Token, TokenType
from .slots import SectionSlots

TYPE_SECTION_NAMES = {kind.value: kind for kind in TYPE_SECTIONS}
FUNCTION_SECTION_NAMES = {kind.value: kind for kind in FUNCTION_SECTIONS}


class SectionParserMixin:
    """Parser mixin for type and fn sections."""

    if TYPE_CHECKING:
        expect: Any
        error: Any
        parse_variants: Any
        parse_named_fields: Any
        parse_function: Any

    def _check_unfilled(self, slots: SectionSlots, kind: SectionKind, token: Token) -> None:
        if slots.is_filled(kind):
            raise self.error(
                f"{kind.label} defined twice",
                token,
                kind=ErrorKind.DUPLICATE_SECTION,
                section=kind,
            )

    def parse_type_section(self, slots: SectionSlots) -> None:
        """
        Parse a type section into its slot.

        Grammar:
            "type" ("Message" | "Props" | "State") "=" "{" payload "}"
        """
        self.expect(TokenType.TYPE)
        name_token = self.expect(TokenType.IDENTIFIER)

        kind = TYPE_SECTION_NAMES.get(name_token.value)
        if kind is None:
            raise self.error(
                f"{format_allowed(TYPE_SECTIONS)} are the only allowed params",
                name_token,
                kind=ErrorKind.UNKNOWN_SECTION,
            )

        self.expect(TokenType.EQUALS)
        self._check_unfilled(slots, kind, name_token)

        if kind == SectionKind.MESSAGE:
            payload = self.parse_variants()
        else:
            payload = self.parse_named_fields()
        slots.fill(kind, payload)

    def parse_function_section(self, slots: SectionSlots) -> None:
        """
        Parse a fn section into its slot.

        The whole function is parsed before its name is classified.
        """
        function, name_token = self.parse_function()

        kind = FUNCTION_SECTION_NAMES.get(function.name)
        if kind is None:
            raise self.error(
                f"{format_allowed(FUNCTION_SECTIONS)} are the only allowed params",
                name_token,
                kind=ErrorKind.UNKNOWN_SECTION,
            )
        self._check_unfilled(slots, kind, name_token)
        slots.fill(kind, function)
