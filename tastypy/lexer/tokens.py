"""Lexer tokens shared by the value and state-key grammars."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, replace
from enum import IntEnum

from tastypy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Trivia / fallback
    # -------------------------
    WHITESPACE = 1
    UNKNOWN = 2

    # -------------------------
    # Value grammar
    # -------------------------
    COLOR_TOKEN = 10  # #primary, #purple.5, #dark.$alpha
    HEX_COLOR = 11  # #fff, #aabbcc
    CUSTOM_PROPERTY = 12  # $spacing
    CUSTOM_PROPERTY_NAME = 13  # $$rotation
    COLOR_TOKEN_NAME = 14  # ##accent
    CUSTOM_UNIT = 15  # 2x, 1r
    CSS_UNIT = 16  # 16px, 1.5em, 50%
    NUMBER = 17
    BOOLEAN = 18
    PRESET = 19  # h1, t2
    PRESET_MODIFIER = 20  # strong, italic
    DIRECTION = 21  # top, inline-start
    FUNCTION = 22  # calc(...), rgb(...)
    STRING = 23
    IDENTIFIER = 24
    OPERATOR = 25  # + - * /
    PUNCTUATION = 26  # ( ) { } [ ] : , ;

    # -------------------------
    # State-key grammar
    # -------------------------
    DEFAULT_STATE = 40  # ''
    BOOLEAN_MOD = 41  # hovered
    VALUE_MOD = 42  # theme=danger
    PSEUDO_CLASS = 43  # :hover, ::before, :has(Body)
    CLASS_SELECTOR = 44  # .active
    ATTR_SELECTOR = 45  # [aria-expanded="true"]
    MEDIA_STATE = 46  # @media(w < 768px)
    CONTAINER_STATE = 47  # @(card, w >= 400px)
    SUPPORTS_STATE = 48  # @supports(display: grid)
    ROOT_STATE = 49  # @root(theme=dark)
    OWN_STATE = 50  # @own(hovered)
    STARTING_STATE = 51  # @starting
    STATE_OPERATOR = 52  # & | ! ^, comparisons, combinators
    STATE_ALIAS = 53  # @mobile

    # -------------------------
    # Structural markers
    # -------------------------
    SUB_ELEMENT = 60  # Title, Body
    SELECTOR_AFFIX = 61  # the whole `$` property value
    AT_RULE = 62  # @keyframes, @properties

    @property
    def is_trivia(self) -> bool:
        return self == TokenKind.WHITESPACE

    @property
    def is_at_state(self) -> bool:
        return self in (
            TokenKind.MEDIA_STATE,
            TokenKind.CONTAINER_STATE,
            TokenKind.SUPPORTS_STATE,
            TokenKind.ROOT_STATE,
            TokenKind.OWN_STATE,
            TokenKind.STARTING_STATE,
        )


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexical unit.

    `start`/`end` are offsets into the string that was tokenized, and
    `text == source[start:end]`. Children use the same coordinate space.
    """

    kind: TokenKind
    text: str
    start: int
    end: int
    children: tuple[Token, ...] = ()

    @property
    def range(self) -> TextRange:
        return TextRange(self.start, self.end)

    @property
    def name(self) -> str:
        """Text before an argument list or opacity suffix (`calc` for `calc(1x)`, `#red` for `#red.5`)."""
        head = self.text.split("(", 1)[0]
        if self.kind == TokenKind.COLOR_TOKEN:
            return head.split(".", 1)[0]
        return head

    def shifted(self, delta: int) -> Token:
        """Rebase this token (and its children) by `delta` characters."""
        if delta == 0:
            return self
        return replace(
            self,
            start=self.start + delta,
            end=self.end + delta,
            children=tuple(child.shifted(delta) for child in self.children),
        )


def iter_tokens(tokens: Sequence[Token], depth: int = 0) -> Iterator[tuple[Token, int]]:
    """Depth-first walk yielding `(token, depth)`, parents before children."""
    for token in tokens:
        yield token, depth
        if token.children:
            yield from iter_tokens(token.children, depth + 1)


def visit_tokens(tokens: Sequence[Token], visitor: Callable[[Token, int], None]) -> None:
    for token, depth in iter_tokens(tokens):
        visitor(token, depth)


def collect_tokens(tokens: Sequence[Token], predicate: Callable[[Token], bool]) -> list[Token]:
    return [token for token, _ in iter_tokens(tokens) if predicate(token)]


def find_token(tokens: Sequence[Token], predicate: Callable[[Token], bool]) -> Token | None:
    for token, _ in iter_tokens(tokens):
        if predicate(token):
            return token
    return None


def significant(tokens: Sequence[Token]) -> list[Token]:
    """Top-level tokens without whitespace."""
    return [token for token in tokens if not token.kind.is_trivia]


def dump_tokens(tokens: Sequence[Token]) -> None:
    """Print the token tree with kind, range, and text for debugging."""
    for i, (token, depth) in enumerate(iter_tokens(tokens)):
        indent = "  " * depth
        print(f"{i:03d} {indent}{token.kind.name:<20} range={token.range.as_tuple()} text={token.text!r}")
