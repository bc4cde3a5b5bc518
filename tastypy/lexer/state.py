"""State-key lexer.

Tokenizes keys of conditional style mappings (`'hovered & !disabled'`,
`'@media(w < 768px)'`, `':has(Body > Row)'`). Logical operators are emitted
as a flat stream; grouping parentheses are plain punctuation. Unknown
`@name` references become STATE_ALIAS tokens and are judged later.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from tastypy.builtins import SELECTOR_PSEUDO_CLASSES
from tastypy.lexer.cursor import Cursor, is_digit, is_identifier_start, is_whitespace
from tastypy.lexer.tokens import Token, TokenKind

_LOGICAL_OPERATORS = frozenset("&|!^")
_COMBINATORS = frozenset(">+~")
_COMPARISONS = frozenset("<>=")

_AT_KEYWORD_KINDS = {
    "media": TokenKind.MEDIA_STATE,
    "supports": TokenKind.SUPPORTS_STATE,
    "root": TokenKind.ROOT_STATE,
    "own": TokenKind.OWN_STATE,
}
# Bodies of these at-states are media-query-like: bare identifiers, no modifiers.
_QUERY_BODY_KINDS = frozenset({TokenKind.MEDIA_STATE, TokenKind.SUPPORTS_STATE})

_STATE_KEY_PATTERNS = (
    re.compile(r"^[a-z][a-z0-9-]*$"),
    re.compile(r"^[a-z][a-z0-9-]*="),
    re.compile(r"^[:.\[@]"),
    re.compile(r"[&|!^]"),
)


class StateKeyLexer(Cursor):
    """Single-pass lexer for state keys."""

    def __init__(self, source: str, state_aliases: Iterable[str] = ()) -> None:
        super().__init__(source)
        self._aliases = frozenset(state_aliases)

    def lex(self) -> list[Token]:
        if not self.source.strip():
            return [Token(TokenKind.DEFAULT_STATE, self.source, 0, len(self.source))]

        tokens: list[Token] = []
        while not self.is_eof:
            start = self.position
            if is_whitespace(self.current_char()):
                self.skip_whitespace()
                tokens.append(self.make_token(TokenKind.WHITESPACE, start))
                continue
            tokens.append(self._lex_token(start))
        return tokens

    def _lex_token(self, start: int) -> Token:
        ch = self.current_char()

        if ch in _LOGICAL_OPERATORS:
            self.advance()
            return self.make_token(TokenKind.STATE_OPERATOR, start)

        if ch == "(" or ch == ")":
            self.advance()
            return self.make_token(TokenKind.PUNCTUATION, start)

        if ch == ":":
            return self._lex_pseudo_class(start)

        if ch == ".":
            return self._lex_class_selector(start)

        if ch == "[":
            self.read_balanced("[", "]")
            return self.make_token(TokenKind.ATTR_SELECTOR, start)

        if ch == "@":
            return self._lex_at_state(start)

        if is_identifier_start(ch):
            return self._lex_modifier(start, quoted_escapes=True)

        self.advance()
        return self.make_token(TokenKind.UNKNOWN, start)

    # -------------------------
    # Selectors
    # -------------------------

    def _lex_pseudo_class(self, start: int) -> Token:
        self.advance()  # :
        if self.current_char() == ":":
            self.advance()
        name = self.read_identifier_with_dashes()

        if self.current_char() == "(":
            if name in SELECTOR_PSEUDO_CLASSES:
                return self._lex_selector_pseudo_class(start)
            self.read_parenthesized()
        return self.make_token(TokenKind.PSEUDO_CLASS, start)

    def _lex_selector_pseudo_class(self, start: int) -> Token:
        """`:has(...)`, `:is(...)`, `:where(...)`, `:not(...)` with a tokenized selector body."""
        children = self._lex_parenthesized_body(self._lex_selector_token)
        return self.make_token(TokenKind.PSEUDO_CLASS, start, children)

    def _lex_selector_token(self) -> Token | None:
        start = self.position
        ch = self.current_char()

        if ch in _COMBINATORS:
            self.advance()
            return self.make_token(TokenKind.STATE_OPERATOR, start)

        if ch == ",":
            self.advance()
            return self.make_token(TokenKind.PUNCTUATION, start)

        if ch == ":":
            self.advance()
            if self.current_char() == ":":
                self.advance()
            self.read_identifier_with_dashes()
            if self.current_char() == "(":
                self.read_parenthesized()
            return self.make_token(TokenKind.PSEUDO_CLASS, start)

        if ch == ".":
            return self._lex_class_selector(start)

        if ch == "[":
            self.read_balanced("[", "]")
            return self.make_token(TokenKind.ATTR_SELECTOR, start)

        if is_identifier_start(ch):
            name = self.read_identifier_with_dashes()
            kind = TokenKind.SUB_ELEMENT if is_sub_element(name) else TokenKind.BOOLEAN_MOD
            return self.make_token(kind, start)

        self.advance()
        return None

    def _lex_class_selector(self, start: int) -> Token:
        self.advance()  # .
        self.read_identifier_with_dashes()
        return self.make_token(TokenKind.CLASS_SELECTOR, start)

    # -------------------------
    # Advanced (@) states
    # -------------------------

    def _lex_at_state(self, start: int) -> Token:
        self.advance()  # @

        if self.current_char() == "(":
            children = self._lex_parenthesized_body(self._lex_condition_token)
            return self.make_token(TokenKind.CONTAINER_STATE, start, children)

        keyword = self.read_identifier_with_dashes()
        if f"@{keyword}" in self._aliases:
            return self.make_token(TokenKind.STATE_ALIAS, start)

        kind = _AT_KEYWORD_KINDS.get(keyword)
        if kind is not None:
            if self.current_char() != "(":
                return self.make_token(kind, start)
            if kind in _QUERY_BODY_KINDS:
                children = self._lex_parenthesized_body(self._lex_query_token)
            else:
                children = self._lex_parenthesized_body(self._lex_condition_token)
            return self.make_token(kind, start, children)

        if keyword == "starting":
            return self.make_token(TokenKind.STARTING_STATE, start)
        if keyword == "keyframes" or keyword == "properties":
            return self.make_token(TokenKind.AT_RULE, start)
        return self.make_token(TokenKind.STATE_ALIAS, start)

    def _lex_parenthesized_body(self, lex_inner: Callable[[], Token | None]) -> tuple[Token, ...]:
        """Lex `( ... )` at the cursor with `lex_inner`, consuming the closing paren if present."""
        self.advance()  # (
        children: list[Token] = []
        while not self.is_eof:
            self.skip_whitespace()
            if self.is_eof or self.current_char() == ")":
                break
            token = lex_inner()
            if token is not None:
                children.append(token)
        if self.current_char() == ")":
            self.advance()
        return tuple(children)

    def _lex_query_token(self) -> Token | None:
        """Token inside `@media(...)` / `@supports(...)`."""
        start = self.position
        ch = self.current_char()

        if ch in _COMPARISONS:
            return self._lex_comparison(start)
        if ch in _LOGICAL_OPERATORS:
            self.advance()
            return self.make_token(TokenKind.STATE_OPERATOR, start)
        if ch == ",":
            self.advance()
            return self.make_token(TokenKind.PUNCTUATION, start)
        if is_digit(ch) or (ch == "." and is_digit(self.peek_char())):
            return self._lex_number_with_unit(start)
        if is_identifier_start(ch):
            self.read_identifier_with_dashes()
            return self.make_token(TokenKind.IDENTIFIER, start)

        self.advance()
        return None

    def _lex_condition_token(self) -> Token | None:
        """Token inside `@(...)`, `@root(...)`, `@own(...)`."""
        start = self.position
        ch = self.current_char()

        if ch in _COMPARISONS:
            return self._lex_comparison(start)
        if ch in _LOGICAL_OPERATORS:
            self.advance()
            return self.make_token(TokenKind.STATE_OPERATOR, start)
        if ch == ",":
            self.advance()
            return self.make_token(TokenKind.PUNCTUATION, start)
        if is_digit(ch) or (ch == "." and is_digit(self.peek_char())):
            return self._lex_number_with_unit(start)
        if is_identifier_start(ch):
            return self._lex_modifier(start, quoted_escapes=False)

        self.advance()
        return None

    def _lex_comparison(self, start: int) -> Token:
        self.advance()
        if self.current_char() == "=":
            self.advance()
        return self.make_token(TokenKind.STATE_OPERATOR, start)

    def _lex_number_with_unit(self, start: int) -> Token:
        self.read_digits()
        if self.current_char() == "." and is_digit(self.peek_char()):
            self.advance()
            self.read_digits()
        unit_start = self.position
        while self.current_char().isascii() and (self.current_char().isalpha() or self.current_char() == "%"):
            self.advance()
        kind = TokenKind.CSS_UNIT if self.position > unit_start else TokenKind.NUMBER
        return self.make_token(kind, start)

    # -------------------------
    # Modifiers
    # -------------------------

    def _lex_modifier(self, start: int, *, quoted_escapes: bool) -> Token:
        """`hovered` or `theme=dark` / `size="large"`."""
        self.read_identifier_with_dashes()
        if self.current_char() != "=":
            return self.make_token(TokenKind.BOOLEAN_MOD, start)

        self.advance()  # =
        quote = self.current_char()
        if quote == '"' or quote == "'":
            if quoted_escapes:
                self.read_quoted()
            else:
                self.advance()
                while not self.is_eof and self.current_char() != quote:
                    self.advance()
                if self.current_char() == quote:
                    self.advance()
        else:
            self.read_identifier_with_dashes()
        return self.make_token(TokenKind.VALUE_MOD, start)


def tokenize_state_key(text: str, state_aliases: Iterable[str] = ()) -> list[Token]:
    """Tokenize a state key. An empty or blank key is a single DEFAULT_STATE token."""
    return StateKeyLexer(text, state_aliases).lex()


def is_state_key(key: str) -> bool:
    """Whether `key` looks like a state key rather than a style property name."""
    if key == "":
        return True
    return any(pattern.search(key) for pattern in _STATE_KEY_PATTERNS)


def is_sub_element(key: str) -> bool:
    """Capitalized keys name sub-elements (`Title`, `Body`)."""
    return key[:1].isascii() and key[:1].isupper()
