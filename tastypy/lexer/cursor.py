"""Character classification and cursor-advance helpers shared by the lexers."""

from __future__ import annotations

from tastypy.lexer.tokens import Token, TokenKind

_DIGITS = frozenset("0123456789")
_IDENTIFIER_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
_IDENTIFIER_CHARS = _IDENTIFIER_START | _DIGITS
_IDENTIFIER_CHARS_WITH_DASH = _IDENTIFIER_CHARS | {"-"}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

EOF_CHAR = "\0"


def is_digit(ch: str) -> bool:
    return ch in _DIGITS


def is_identifier_start(ch: str) -> bool:
    return ch in _IDENTIFIER_START


def is_identifier_char(ch: str) -> bool:
    return ch in _IDENTIFIER_CHARS


def is_identifier_char_with_dash(ch: str) -> bool:
    return ch in _IDENTIFIER_CHARS_WITH_DASH


def is_hex_digit(ch: str) -> bool:
    return ch in _HEX_DIGITS


def is_whitespace(ch: str) -> bool:
    return ch != EOF_CHAR and ch.isspace()


class Cursor:
    """Position over a source string with one character of lookahead.

    Reading past the end yields `EOF_CHAR` so callers can compare without bounds checks.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def current_char(self) -> str:
        if self.is_eof:
            return EOF_CHAR
        return self._source[self._position]

    def peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return EOF_CHAR
        return self._source[index]

    def advance(self, steps: int = 1) -> None:
        self._position = min(self._position + steps, len(self._source))

    def slice_from(self, start: int) -> str:
        return self._source[start : self._position]

    def make_token(self, kind: TokenKind, start: int, children: tuple[Token, ...] = ()) -> Token:
        """Token spanning `start` up to the current position."""
        return Token(kind, self.slice_from(start), start, self._position, children)

    def skip_whitespace(self) -> None:
        while is_whitespace(self.current_char()):
            self.advance()

    def read_digits(self) -> str:
        start = self._position
        while is_digit(self.current_char()):
            self.advance()
        return self.slice_from(start)

    def read_identifier(self) -> str:
        """Letters, digits, underscores."""
        start = self._position
        while is_identifier_char(self.current_char()):
            self.advance()
        return self.slice_from(start)

    def read_identifier_with_dashes(self) -> str:
        """Letters, digits, underscores, hyphens."""
        start = self._position
        while is_identifier_char_with_dash(self.current_char()):
            self.advance()
        return self.slice_from(start)

    def read_balanced(self, opener: str, closer: str) -> str:
        """Read from an `opener` through its matching `closer`, counting nesting.

        An unclosed group runs to the end of input. Returns "" when not positioned on `opener`.
        """
        if self.current_char() != opener:
            return ""
        start = self._position
        depth = 0
        while not self.is_eof:
            ch = self.current_char()
            self.advance()
            if ch == opener:
                depth += 1
            elif ch == closer:
                depth -= 1
                if depth == 0:
                    break
        return self.slice_from(start)

    def read_parenthesized(self) -> str:
        return self.read_balanced("(", ")")

    def read_quoted(self) -> str:
        """Read a quoted string starting at the quote character, honoring backslash escapes."""
        quote = self.current_char()
        start = self._position
        self.advance()
        while not self.is_eof:
            ch = self.current_char()
            if ch == "\\":
                self.advance(2)
                continue
            self.advance()
            if ch == quote:
                break
        return self.slice_from(start)
