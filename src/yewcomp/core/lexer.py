"""
Lexer/Tokenizer for yewcomp component sources.

Converts raw component text into a stream of tokens with source location
tracking. Every token remembers the slice of source it came from so that
function bodies, field declarations and variants can be carried through to
the output verbatim.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import ParseError, extract_snippet, make_parse_error


class TokenType(Enum):
    """Token types in component sources."""

    # Literals
    IDENTIFIER = "IDENTIFIER"
    LIFETIME = "LIFETIME"
    STRING = "STRING"
    CHAR = "CHAR"
    NUMBER = "NUMBER"
    DOC_COMMENT = "DOC_COMMENT"

    # Keywords
    STRUCT = "struct"
    TYPE = "type"
    FN = "fn"
    PUB = "pub"
    CRATE = "crate"
    IN = "in"
    SELF = "self"
    SUPER = "super"

    # Delimiters
    LBRACE = "{"
    RBRACE = "}"
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"

    # Operators
    PATH_SEP = "::"
    ARROW = "->"
    FAT_ARROW = "=>"
    COMMA = ","
    COLON = ":"
    SEMICOLON = ";"
    EQUALS = "="
    POUND = "#"
    LESS_THAN = "<"
    GREATER_THAN = ">"
    PUNCT = "PUNCT"

    # Special
    EOF = "EOF"


KEYWORDS = {
    "struct",
    "type",
    "fn",
    "pub",
    "crate",
    "in",
    "self",
    "super",
}

OPENERS = {"{": "}", "(": ")", "[": "]"}
CLOSERS = {"}": "{", ")": "(", "]": "["}

JOINED_OPERATORS = ("::", "->", "=>")

PUNCTUATION = {
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    "=": TokenType.EQUALS,
    "#": TokenType.POUND,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
}

PUNCT_CHARS = set("+-*/%^!&|=<>@.,;:#$?~")


@dataclass
class Token:
    """
    A single token in a component source.

    Attributes:
        type: Type of token
        value: Source text of the token
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Start offset into the source text
        end: End offset (exclusive) into the source text
    """

    type: TokenType
    value: str
    line: int
    column: int
    offset: int
    end: int

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}, {self.line}:{self.column})"


def _is_ident_start(ch: str | None) -> bool:
    return ch is not None and (ch.isalpha() or ch == "_")


def _is_ident_char(ch: str | None) -> bool:
    return ch is not None and (ch.isalnum() or ch == "_")


class Lexer:
    """
    Lexer for component sources.

    Skips whitespace and comments, keeps outer doc comments as tokens and
    checks that every delimiter is balanced.
    """

    def __init__(self, text: str, file: Path):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
            file: Source file path (for error reporting)
        """
        self.text = text
        self.file = file
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []
        self.open_delimiters: list[Token] = []

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def error(self, message: str, line: int, column: int) -> ParseError:
        return make_parse_error(
            message,
            self.file,
            line,
            column,
            snippet=extract_snippet(self.text, line),
        )

    def add_token(self, token_type: TokenType, start: int, line: int, column: int) -> Token:
        token = Token(token_type, self.text[start : self.pos], line, column, start, self.pos)
        self.tokens.append(token)
        return token

    def skip_line_comment(self) -> None:
        """Skip comment (from // to end of line)."""
        while self.current_char() is not None and self.current_char() != "\n":
            self.advance()

    def skip_block_comment(self, start_line: int, start_col: int) -> None:
        """Skip a (possibly nested) /* ... */ comment."""
        depth = 0
        while True:
            ch = self.current_char()
            if ch is None:
                raise self.error("Unterminated block comment", start_line, start_col)
            if ch == "/" and self.peek_char() == "*":
                depth += 1
                self.advance()
                self.advance()
            elif ch == "*" and self.peek_char() == "/":
                depth -= 1
                self.advance()
                self.advance()
                if depth == 0:
                    return
            else:
                self.advance()

    def read_quoted(self, quote: str, start_line: int, start_col: int) -> None:
        """Read the rest of a quoted literal; the opening quote is already consumed."""
        while True:
            ch = self.current_char()
            if ch is None:
                kind = "string" if quote == '"' else "character"
                raise self.error(f"Unterminated {kind} literal", start_line, start_col)
            self.advance()
            if ch == "\\":
                if self.current_char() is not None:
                    self.advance()
            elif ch == quote:
                return

    def read_raw_string(self, start_line: int, start_col: int) -> None:
        """Read r"..." / r#"..."#; the cursor sits on the 'r'."""
        self.advance()
        hashes = 0
        while self.current_char() == "#":
            hashes += 1
            self.advance()
        if self.current_char() != '"':
            raise self.error("Malformed raw string literal", start_line, start_col)
        self.advance()
        terminator = '"' + "#" * hashes
        while True:
            if self.current_char() is None:
                raise self.error("Unterminated raw string literal", start_line, start_col)
            if self.text.startswith(terminator, self.pos):
                for _ in terminator:
                    self.advance()
                return
            self.advance()

    def read_number(self) -> None:
        """Read an integer or float literal including any suffix."""
        while _is_ident_char(self.current_char()):
            self.advance()
        peek = self.peek_char()
        if self.current_char() == "." and peek is not None and peek.isdigit():
            self.advance()
            while _is_ident_char(self.current_char()):
                self.advance()

    def read_identifier(self) -> None:
        """Read an identifier or keyword."""
        while _is_ident_char(self.current_char()):
            self.advance()

    def is_raw_string_start(self) -> bool:
        ch = self.current_char()
        if ch == "b" and self.peek_char() == "r":
            return self.peek_char(2) in ('"', "#")
        if ch != "r":
            return False
        if self.peek_char() == '"':
            return True
        # r#"..."# is a raw string, r#ident is a raw identifier
        return self.peek_char() == "#" and not _is_ident_start(self.peek_char(2))

    def read_word(self, start: int, line: int, column: int) -> None:
        """Read identifiers, keywords, raw identifiers and prefixed literals."""
        ch = self.current_char()

        if self.is_raw_string_start():
            if ch == "b":
                self.advance()
            self.read_raw_string(line, column)
            self.add_token(TokenType.STRING, start, line, column)
            return

        if ch == "b" and self.peek_char() in ('"', "'"):
            self.advance()
            quote = self.current_char()
            assert quote is not None
            self.advance()
            self.read_quoted(quote, line, column)
            token_type = TokenType.STRING if quote == '"' else TokenType.CHAR
            self.add_token(token_type, start, line, column)
            return

        if ch == "r" and self.peek_char() == "#":
            self.advance()
            self.advance()
            self.read_identifier()
            self.add_token(TokenType.IDENTIFIER, start, line, column)
            return

        self.read_identifier()
        value = self.text[start : self.pos]
        token_type = TokenType(value) if value in KEYWORDS else TokenType.IDENTIFIER
        self.add_token(token_type, start, line, column)

    def read_quote(self, start: int, line: int, column: int) -> None:
        """Read a character literal or a lifetime."""
        peek = self.peek_char()
        if peek == "\\" or (peek is not None and peek != "'" and self.peek_char(2) == "'"):
            self.advance()
            self.read_quoted("'", line, column)
            self.add_token(TokenType.CHAR, start, line, column)
        elif _is_ident_start(peek):
            self.advance()
            self.read_identifier()
            self.add_token(TokenType.LIFETIME, start, line, column)
        else:
            raise self.error("Unexpected character: \"'\"", line, column)

    def open_delimiter(self, start: int, line: int, column: int) -> None:
        ch = self.current_char()
        self.advance()
        token = self.add_token(TokenType(ch), start, line, column)
        self.open_delimiters.append(token)

    def close_delimiter(self, start: int, line: int, column: int) -> None:
        ch = self.current_char()
        assert ch is not None
        expected_opener = CLOSERS[ch]
        if not self.open_delimiters or self.open_delimiters[-1].value != expected_opener:
            raise self.error(f"Unexpected closing delimiter {ch!r}", line, column)
        self.open_delimiters.pop()
        self.advance()
        self.add_token(TokenType(ch), start, line, column)

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens ending with EOF

        Raises:
            ParseError: If a lexical error is encountered
        """
        while self.pos < len(self.text):
            ch = self.text[self.pos]

            if ch.isspace():
                self.advance()
                continue

            start = self.pos
            token_line = self.line
            token_col = self.column

            # Comments (/// and /** */ are outer doc comments)
            if ch == "/" and self.peek_char() == "/":
                is_doc = self.peek_char(2) == "/" and self.peek_char(3) != "/"
                self.skip_line_comment()
                if is_doc:
                    self.add_token(TokenType.DOC_COMMENT, start, token_line, token_col)

            elif ch == "/" and self.peek_char() == "*":
                is_doc = self.peek_char(2) == "*" and self.peek_char(3) not in ("*", "/")
                self.skip_block_comment(token_line, token_col)
                if is_doc:
                    self.add_token(TokenType.DOC_COMMENT, start, token_line, token_col)

            # Strings and characters
            elif ch == '"':
                self.advance()
                self.read_quoted('"', token_line, token_col)
                self.add_token(TokenType.STRING, start, token_line, token_col)

            elif ch == "'":
                self.read_quote(start, token_line, token_col)

            # Numbers
            elif ch.isdigit():
                self.read_number()
                self.add_token(TokenType.NUMBER, start, token_line, token_col)

            # Identifiers, keywords and prefixed literals
            elif _is_ident_start(ch):
                self.read_word(start, token_line, token_col)

            # Delimiters
            elif ch in OPENERS:
                self.open_delimiter(start, token_line, token_col)

            elif ch in CLOSERS:
                self.close_delimiter(start, token_line, token_col)

            # Operators
            elif self.text.startswith(JOINED_OPERATORS, self.pos):
                self.advance()
                self.advance()
                self.add_token(TokenType(self.text[start : self.pos]), start, token_line, token_col)

            elif ch in PUNCT_CHARS:
                self.advance()
                token_type = PUNCTUATION.get(ch, TokenType.PUNCT)
                self.add_token(token_type, start, token_line, token_col)

            else:
                raise self.error(f"Unexpected character: {ch!r}", token_line, token_col)

        if self.open_delimiters:
            opener = self.open_delimiters[-1]
            raise self.error(
                f"Unclosed delimiter {opener.value!r}",
                opener.line,
                opener.column,
            )

        self.tokens.append(
            Token(TokenType.EOF, "", self.line, self.column, self.pos, self.pos)
        )
        return self.tokens


def tokenize(text: str, file: Path) -> list[Token]:
    """
    Convenience function to tokenize component source text.

    Args:
        text: Source text
        file: Source file path

    Returns:
        List of tokens
    """
    lexer = Lexer(text, file)
    return lexer.tokenize()
