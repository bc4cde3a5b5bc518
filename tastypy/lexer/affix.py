"""Selector-affix lexer for the `$` property (`'>Body>Row>'`, `'>@:hover'`, `'::before, ::after'`)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tastypy.lexer.cursor import Cursor, is_identifier_start, is_whitespace
from tastypy.lexer.state import is_sub_element
from tastypy.lexer.tokens import Token, TokenKind
from tastypy.text import TextRange


class AffixKind(Enum):
    COMBINATOR = "combinator"  # > + ~
    SUB_ELEMENT = "sub-element"  # Body, Row
    HTML_TAG = "html-tag"  # ul, li
    PSEUDO_ELEMENT = "pseudo-element"  # ::before
    PSEUDO_CLASS = "pseudo-class"  # :hover, :nth-child(2)
    CLASS_SELECTOR = "class-selector"  # .active
    ATTR_SELECTOR = "attr-selector"  # [disabled]
    PLACEHOLDER = "placeholder"  # @, where the key is inserted
    PUNCTUATION = "punctuation"  # ,


@dataclass(frozen=True, slots=True)
class AffixToken:
    kind: AffixKind
    text: str
    start: int
    end: int

    @property
    def range(self) -> TextRange:
        return TextRange(self.start, self.end)


class SelectorAffixLexer(Cursor):
    """Whitespace and unrecognized characters are skipped, not tokenized."""

    def lex(self) -> list[AffixToken]:
        tokens: list[AffixToken] = []
        while not self.is_eof:
            if is_whitespace(self.current_char()):
                self.skip_whitespace()
                continue
            token = self._lex_token()
            if token is not None:
                tokens.append(token)
        return tokens

    def _lex_token(self) -> AffixToken | None:
        start = self.position
        ch = self.current_char()

        if ch in ">+~":
            self.advance()
            return self._token(AffixKind.COMBINATOR, start)
        if ch == ",":
            self.advance()
            return self._token(AffixKind.PUNCTUATION, start)
        if ch == "@":
            self.advance()
            return self._token(AffixKind.PLACEHOLDER, start)

        if ch == ":":
            self.advance()
            kind = AffixKind.PSEUDO_CLASS
            if self.current_char() == ":":
                self.advance()
                kind = AffixKind.PSEUDO_ELEMENT
            self.read_identifier_with_dashes()
            if self.current_char() == "(":
                self.read_parenthesized()
            return self._token(kind, start)

        if ch == ".":
            self.advance()
            self.read_identifier_with_dashes()
            return self._token(AffixKind.CLASS_SELECTOR, start)

        if ch == "[":
            self.read_balanced("[", "]")
            return self._token(AffixKind.ATTR_SELECTOR, start)

        if is_identifier_start(ch):
            name = self.read_identifier_with_dashes()
            kind = AffixKind.SUB_ELEMENT if is_sub_element(name) else AffixKind.HTML_TAG
            return self._token(kind, start)

        self.advance()
        return None

    def _token(self, kind: AffixKind, start: int) -> AffixToken:
        return AffixToken(kind, self.slice_from(start), start, self.position)


def tokenize_selector_affix(text: str) -> list[AffixToken]:
    return SelectorAffixLexer(text).lex()


def selector_affix_token(text: str) -> Token:
    """The whole `$` value as one SELECTOR_AFFIX token; `tokenize_selector_affix` splits it."""
    return Token(TokenKind.SELECTOR_AFFIX, text, 0, len(text))
