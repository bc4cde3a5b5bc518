"""Value lexer.

Turns one style value (`'2x 1r #primary.5'`, `'calc(100% - 2x)'`) into a
token tree. Classification is optimistic: unknown units and identifiers are
still emitted as tokens and left for the diagnostic pass to judge.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from tastypy.builtins import BUILT_IN_UNITS, CSS_FUNCTIONS, CSS_UNITS, DIRECTION_MODIFIERS, PRESET_MODIFIERS
from tastypy.lexer.cursor import (
    Cursor,
    is_digit,
    is_hex_digit,
    is_identifier_char_with_dash,
    is_identifier_start,
    is_whitespace,
)
from tastypy.lexer.tokens import Token, TokenKind

if TYPE_CHECKING:
    from tastypy.config import MergedConfig

_HEX_LENGTHS = (8, 6, 4, 3)
_PUNCTUATION = frozenset("(){}[]:,;")
_CSS_FUNCTIONS = frozenset(CSS_FUNCTIONS)
_PRESET_MODIFIERS = frozenset(PRESET_MODIFIERS)
_DIRECTIONS = frozenset(DIRECTION_MODIFIERS)


@dataclass(frozen=True, slots=True)
class ValueLexerOptions:
    """Configuration the value lexer classifies against.

    `units` is the configured unit set; built-in units are always added.
    """

    tokens: tuple[str, ...] | Literal[False] = False
    units: tuple[str, ...] = ()
    presets: tuple[str, ...] = ()

    @staticmethod
    def from_config(config: MergedConfig) -> "ValueLexerOptions":
        return ValueLexerOptions(
            tokens=config.tokens,
            units=config.units if config.units is not False else (),
            presets=config.presets,
        )


class ValueLexer(Cursor):
    """Single-pass lexer for style values."""

    def __init__(self, source: str, options: ValueLexerOptions | None = None) -> None:
        super().__init__(source)
        self._options = options or ValueLexerOptions()
        self._units = frozenset((*BUILT_IN_UNITS, *self._options.units))
        self._presets = frozenset(self._options.presets)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while not self.is_eof:
            tokens.append(self._lex_token())
        return tokens

    def _lex_token(self) -> Token:
        start = self.position
        ch = self.current_char()
        next_ch = self.peek_char()

        if is_whitespace(ch):
            self.skip_whitespace()
            return self.make_token(TokenKind.WHITESPACE, start)

        if ch == "#":
            return self._lex_hash(start)

        if ch == "$":
            return self._lex_custom_property(start)

        if ch == '"' or ch == "'":
            self.read_quoted()
            return self.make_token(TokenKind.STRING, start)

        if is_digit(ch) or (ch == "." and is_digit(next_ch)):
            return self._lex_number(start)

        if (ch == "-" or ch == "+") and (is_digit(next_ch) or (next_ch == "." and is_digit(self.peek_char(2)))):
            return self._lex_number(start)

        if ch in "+-*/":
            self.advance()
            return self.make_token(TokenKind.OPERATOR, start)

        if ch in _PUNCTUATION:
            self.advance()
            return self.make_token(TokenKind.PUNCTUATION, start)

        if is_identifier_start(ch):
            return self._lex_identifier(start)

        self.advance()
        return self.make_token(TokenKind.UNKNOWN, start)

    def _lex_hash(self, start: int) -> Token:
        self.advance()  # #

        if self.current_char() == "#":
            self.advance()
            self.read_identifier_with_dashes()
            return self.make_token(TokenKind.COLOR_TOKEN_NAME, start)

        hex_length = self._match_hex_digits()
        if hex_length:
            self.advance(hex_length)
            return self.make_token(TokenKind.HEX_COLOR, start)

        self.read_identifier_with_dashes()
        if self.current_char() == ".":
            self.advance()
            if self.current_char() == "$":
                self.advance()
                self.read_identifier_with_dashes()
            else:
                self.read_digits()
        return self.make_token(TokenKind.COLOR_TOKEN, start)

    def _match_hex_digits(self) -> int:
        """Length of a 3/4/6/8-digit hex run at the cursor not followed by an identifier char, else 0."""
        run = 0
        while run < 9 and is_hex_digit(self.peek_char(run)):
            run += 1
        for length in _HEX_LENGTHS:
            if run >= length and not is_identifier_char_with_dash(self.peek_char(length)):
                return length
        return 0

    def _lex_custom_property(self, start: int) -> Token:
        self.advance()  # $
        kind = TokenKind.CUSTOM_PROPERTY
        if self.current_char() == "$":
            self.advance()
            kind = TokenKind.CUSTOM_PROPERTY_NAME
        self.read_identifier_with_dashes()
        return self.make_token(kind, start)

    def _lex_number(self, start: int) -> Token:
        if self.current_char() in "+-":
            self.advance()
        self.read_digits()
        if self.current_char() == "." and is_digit(self.peek_char()):
            self.advance()
            self.read_digits()

        if self.current_char() == "%":
            self.advance()
            return self.make_token(TokenKind.CSS_UNIT, start)

        unit = self.read_identifier()
        if not unit:
            return self.make_token(TokenKind.NUMBER, start)
        if unit in self._units:
            return self.make_token(TokenKind.CUSTOM_UNIT, start)
        if unit in CSS_UNITS:
            return self.make_token(TokenKind.CSS_UNIT, start)
        return self.make_token(TokenKind.CUSTOM_UNIT, start)

    def _lex_identifier(self, start: int) -> Token:
        name = self.read_identifier_with_dashes()

        if self.current_char() == "(":
            return self._lex_function_call(start)

        if name == "true" or name == "false":
            kind = TokenKind.BOOLEAN
        elif name in _PRESET_MODIFIERS:
            kind = TokenKind.PRESET_MODIFIER
        elif name in _DIRECTIONS:
            kind = TokenKind.DIRECTION
        elif name in self._presets:
            kind = TokenKind.PRESET
        elif name in _CSS_FUNCTIONS:
            kind = TokenKind.FUNCTION
        else:
            kind = TokenKind.IDENTIFIER
        return self.make_token(kind, start)

    def _lex_function_call(self, start: int) -> Token:
        self.advance()  # (
        args_start = self.position
        depth = 1
        while not self.is_eof:
            ch = self.current_char()
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1
                if depth == 0:
                    break
            self.advance()
        args_end = self.position
        if not self.is_eof:
            self.advance()  # )

        args = ValueLexer(self.source[args_start:args_end], self._options).lex()
        children = tuple(token.shifted(args_start) for token in args)
        return self.make_token(TokenKind.FUNCTION, start, children)


def tokenize_value(
    text: str,
    *,
    tokens: Iterable[str] | Literal[False] = False,
    units: Iterable[str] = (),
    presets: Iterable[str] = (),
) -> list[Token]:
    """Tokenize a style value. Never raises; unrecognized characters become UNKNOWN tokens."""
    options = ValueLexerOptions(
        tokens=tuple(tokens) if tokens is not False else False,
        units=tuple(units),
        presets=tuple(presets),
    )
    return ValueLexer(text, options).lex()
