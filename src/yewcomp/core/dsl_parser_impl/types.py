"""
Type-section parser mixin for component sources.

Parses the payloads of ``type Message``, ``type Props`` and ``type State``.

Syntax:

    type Message = {
        Increment,
        Add(i64),
        #[allow(dead_code)]
        Set { value: i64 },
    }

    type Props = { pub label: String, pub step: i64 }
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import TokenType
from .base import describe_token


class TypeParserMixin:
    """Parser mixin for message variants and named fields."""

    if TYPE_CHECKING:
        expect: Any
        advance: Any
        match: Any
        current_token: Any
        previous_token: Any
        source_between: Any
        parse_visibility: Any
        parse_attributes: Any
        collect_until_comma: Any
        error: Any

    def _parse_separated(self, close: TokenType, parse_item: Any) -> list[Any]:
        """Parse ``item ("," item)* ","?`` up to (not including) ``close``."""
        items = []
        while not self.match(close):
            items.append(parse_item())
            if self.match(TokenType.COMMA):
                self.advance()
            elif not self.match(close):
                token = self.current_token()
                raise self.error(
                    f"Expected ',' or {close.value!r}, got {describe_token(token)}",
                    token,
                )
        return items

    def parse_field(self) -> ir.FieldSpec:
        """
        Parse one named field.

        Grammar:
            attr* visibility? IDENTIFIER ":" type
        """
        first = self.current_token()
        attributes = self.parse_attributes()
        visibility = self.parse_visibility()
        name = self.expect(TokenType.IDENTIFIER).value
        self.expect(TokenType.COLON)
        type_first, type_last = self.collect_until_comma()

        return ir.FieldSpec(
            name=name,
            type=self.source_between(type_first, type_last),
            visibility=visibility,
            attributes=attributes,
            source=self.source_between(first, type_last),
        )

    def parse_named_fields(self) -> list[ir.FieldSpec]:
        """Parse ``{ field, ... }`` including the braces."""
        self.expect(TokenType.LBRACE)
        fields = self._parse_separated(TokenType.RBRACE, self.parse_field)
        self.expect(TokenType.RBRACE)
        return fields

    def _parse_tuple_type(self) -> str:
        first, last = self.collect_until_comma()
        return self.source_between(first, last)

    def parse_variant(self) -> ir.VariantSpec:
        """
        Parse one message variant.

        Grammar:
            attr* IDENTIFIER ( "(" types ")" | "{" fields "}" )? ("=" expr)?
        """
        first = self.current_token()
        attributes = self.parse_attributes()
        name = self.expect(TokenType.IDENTIFIER).value

        kind = ir.VariantKind.UNIT
        tuple_types: list[str] = []
        fields: list[ir.FieldSpec] = []

        if self.match(TokenType.LPAREN):
            self.advance()
            kind = ir.VariantKind.TUPLE
            tuple_types = self._parse_separated(TokenType.RPAREN, self._parse_tuple_type)
            self.expect(TokenType.RPAREN)
        elif self.match(TokenType.LBRACE):
            kind = ir.VariantKind.STRUCT
            fields = self.parse_named_fields()

        discriminant = None
        if self.match(TokenType.EQUALS):
            self.advance()
            expr_first, expr_last = self.collect_until_comma(track_angles=False)
            discriminant = self.source_between(expr_first, expr_last)

        return ir.VariantSpec(
            name=name,
            kind=kind,
            tuple_types=tuple_types,
            fields=fields,
            discriminant=discriminant,
            attributes=attributes,
            source=self.source_between(first, self.previous_token()),
        )

    def parse_variants(self) -> list[ir.VariantSpec]:
        """Parse ``{ variant, ... }`` including the braces."""
        self.expect(TokenType.LBRACE)
        variants = self._parse_separated(TokenType.RBRACE, self.parse_variant)
        self.expect(TokenType.RBRACE)
        return variants
