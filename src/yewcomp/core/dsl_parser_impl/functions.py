"""
Function-section parser mixin for component sources.

Function sections are complete function definitions. Only the outline is
parsed (name, generics, parameters, return type, where clause); the body
is carried through as opaque source text.

Syntax:

    fn update(&mut self, msg: Self::Message) -> ShouldRender {
        match msg {
            Message::Increment => self.state.count += 1,
        }
        true
    }
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import Token, TokenType
from .base import OPEN_TYPES, describe_token


class FunctionParserMixin:
    """Parser mixin for fn sections."""

    if TYPE_CHECKING:
        expect: Any
        advance: Any
        match: Any
        current_token: Any
        previous_token: Any
        source_between: Any
        skip_group: Any
        error: Any

    def _skip_generics(self) -> None:
        """Skip a ``<...>`` generic parameter list."""
        depth = 0
        while True:
            token = self.current_token()
            if token.type == TokenType.EOF:
                raise self.error("Unclosed generic parameter list", token)
            if token.type in OPEN_TYPES:
                self.skip_group()
                continue
            self.advance()
            if token.type == TokenType.LESS_THAN:
                depth += 1
            elif token.type == TokenType.GREATER_THAN:
                depth -= 1
                if depth == 0:
                    return

    def _consume_signature_token(self) -> Token:
        """Consume one token (or group) of a return type or where clause."""
        token = self.current_token()
        if token.type in (TokenType.EOF, TokenType.RBRACE, TokenType.SEMICOLON):
            raise self.error(f"Expected function body, got {describe_token(token)}", token)
        if token.type in OPEN_TYPES:
            return self.skip_group()
        return self.advance()

    def parse_function(self) -> tuple[ir.FunctionSpec, Token]:
        """
        Parse a complete function definition.

        Grammar:
            "fn" IDENTIFIER generics? "(" params ")" ("->" type)? where? block

        Returns:
            (FunctionSpec, name token)
        """
        fn_token = self.expect(TokenType.FN)
        name_token = self.expect(TokenType.IDENTIFIER)

        if self.match(TokenType.LESS_THAN):
            self._skip_generics()

        params_open = self.current_token()
        if params_open.type != TokenType.LPAREN:
            raise self.error(f"Expected '(', got {describe_token(params_open)}", params_open)
        params_close = self.skip_group()
        params = self.text[params_open.end : params_close.offset].strip()

        return_type = None
        if self.match(TokenType.ARROW):
            self.advance()
            type_first = self.current_token()
            if self.match(TokenType.LBRACE) or self._at_where():
                raise self.error(f"Expected type, got {describe_token(type_first)}", type_first)
            type_last = type_first
            while not self.match(TokenType.LBRACE) and not self._at_where():
                type_last = self._consume_signature_token()
            return_type = self.source_between(type_first, type_last)

        while not self.match(TokenType.LBRACE):
            self._consume_signature_token()
        signature_last = self.previous_token()

        body_open = self.current_token()
        body_close = self.skip_group()

        function = ir.FunctionSpec(
            name=name_token.value,
            params=params,
            return_type=return_type,
            signature=self.source_between(fn_token, signature_last),
            body=self.source_between(body_open, body_close),
            source=self.source_between(fn_token, body_close),
        )
        return function, name_token

    def _at_where(self) -> bool:
        token = self.current_token()
        return token.type == TokenType.IDENTIFIER and token.value == "where"
