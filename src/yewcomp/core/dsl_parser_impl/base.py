"""
Base parser class for component sources.

Provides common token manipulation and utility methods used by all parser mixins.
"""

from pathlib import Path

from ..errors import ErrorKind, ParseError, extract_snippet, make_parse_error
from ..ir.sections import SectionKind
from ..lexer import Token, TokenType

OPEN_TYPES = (TokenType.LBRACE, TokenType.LPAREN, TokenType.LBRACKET)
CLOSE_TYPES = (TokenType.RBRACE, TokenType.RPAREN, TokenType.RBRACKET)


def describe_token(token: Token) -> str:
    """Describe a token for 'got ...' messages."""
    if token.type == TokenType.EOF:
        return "end of input"
    return repr(token.value)


def describe_type(token_type: TokenType) -> str:
    """Describe a token type for 'Expected ...' messages."""
    if token_type == TokenType.IDENTIFIER:
        return "identifier"
    return repr(token_type.value)


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    This class provides the foundation for recursive descent parsing,
    including token navigation, matching, delimited-group skipping and
    error generation.
    """

    def __init__(self, tokens: list[Token], file: Path, text: str):
        """
        Initialize parser.

        Args:
            tokens: List of tokens from lexer
            file: Source file path (for error reporting)
            text: Source text the tokens were produced from
        """
        self.tokens = tokens
        self.file = file
        self.text = text
        self.pos = 0

    def current_token(self) -> Token:
        """Get current token."""
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[self.pos]

    def peek_token(self, offset: int = 1) -> Token:
        """Peek ahead at token."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def previous_token(self) -> Token:
        """Return the most recently consumed token."""
        return self.tokens[max(self.pos - 1, 0)]

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current_token()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def error(
        self,
        message: str,
        token: Token,
        kind: ErrorKind = ErrorKind.SYNTAX,
        section: SectionKind | None = None,
    ) -> ParseError:
        """Build a ParseError positioned at ``token``."""
        return make_parse_error(
            message,
            self.file,
            token.line,
            token.column,
            snippet=extract_snippet(self.text, token.line),
            kind=kind,
            section=section,
        )

    def expect(self, token_type: TokenType) -> Token:
        """
        Expect a specific token type and consume it.

        Raises:
            ParseError: If token doesn't match
        """
        token = self.current_token()
        if token.type != token_type:
            raise self.error(
                f"Expected {describe_type(token_type)}, got {describe_token(token)}",
                token,
            )
        return self.advance()

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current_token().type in token_types

    def skip_group(self) -> Token:
        """
        Consume a whole delimited group starting at the current opener.

        The lexer guarantees balance, so the matching closer always exists.

        Returns:
            The closing delimiter token
        """
        opener = self.current_token()
        if opener.type not in OPEN_TYPES:
            raise self.error(
                f"Expected '{{', '(' or '[', got {describe_token(opener)}",
                opener,
            )
        depth = 0
        while True:
            token = self.advance()
            if token.type in OPEN_TYPES:
                depth += 1
            elif token.type in CLOSE_TYPES:
                depth -= 1
                if depth == 0:
                    return token

    def source_between(self, first: Token, last: Token) -> str:
        """Return the verbatim source from ``first`` through ``last``."""
        return self.text[first.offset : last.end]

    def parse_visibility(self) -> str:
        """
        Parse an optional visibility modifier.

        Grammar:
            "pub" ("(" ("crate" | "self" | "super" | "in" path) ")")? | "crate"

        Returns:
            Verbatim modifier text, or '' when absent
        """
        if self.match(TokenType.PUB):
            first = self.advance()
            restricted = (TokenType.CRATE, TokenType.SELF, TokenType.SUPER, TokenType.IN)
            if self.match(TokenType.LPAREN) and self.peek_token().type in restricted:
                self.skip_group()
            return self.source_between(first, self.previous_token())

        if self.match(TokenType.CRATE) and self.peek_token().type != TokenType.PATH_SEP:
            return self.advance().value

        return ""

    def parse_attributes(self) -> list[str]:
        """Parse outer attributes (#[...]) and doc comments."""
        attributes: list[str] = []
        while self.match(TokenType.POUND, TokenType.DOC_COMMENT):
            first = self.advance()
            if first.type == TokenType.POUND:
                if not self.match(TokenType.LBRACKET):
                    raise self.error(
                        f"Expected '[', got {describe_token(self.current_token())}",
                        self.current_token(),
                    )
                self.skip_group()
            attributes.append(self.source_between(first, self.previous_token()))
        return attributes

    def collect_until_comma(self, track_angles: bool = True) -> tuple[Token, Token]:
        """
        Consume a type or expression up to the next top-level ',' or closer.

        Args:
            track_angles: Treat '<' and '>' as brackets (for types)

        Returns:
            (first, last) tokens of the consumed run

        Raises:
            ParseError: If nothing could be consumed
        """
        first = self.current_token()
        angle_depth = 0
        while True:
            token = self.current_token()
            if token.type == TokenType.EOF or token.type in CLOSE_TYPES:
                break
            if token.type == TokenType.COMMA and angle_depth == 0:
                break
            if token.type in OPEN_TYPES:
                self.skip_group()
                continue
            if track_angles:
                if token.type == TokenType.LESS_THAN:
                    angle_depth += 1
                elif token.type == TokenType.GREATER_THAN and angle_depth > 0:
                    angle_depth -= 1
            self.advance()

        if self.current_token() is first:
            kind = "type" if track_angles else "expression"
            raise self.error(f"Expected {kind}, got {describe_token(first)}", first)
        return first, self.previous_token()
