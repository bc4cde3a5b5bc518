"""Lexers for style values, state keys and selector affixes."""

from tastypy.lexer.affix import (
    AffixKind,
    AffixToken,
    SelectorAffixLexer,
    selector_affix_token,
    tokenize_selector_affix,
)
from tastypy.lexer.cursor import Cursor
from tastypy.lexer.state import StateKeyLexer, is_state_key, is_sub_element, tokenize_state_key
from tastypy.lexer.tokens import (
    Token,
    TokenKind,
    collect_tokens,
    dump_tokens,
    find_token,
    iter_tokens,
    significant,
    visit_tokens,
)
from tastypy.lexer.value import ValueLexer, ValueLexerOptions, tokenize_value

__all__ = [
    "AffixKind",
    "AffixToken",
    "Cursor",
    "SelectorAffixLexer",
    "StateKeyLexer",
    "Token",
    "TokenKind",
    "ValueLexer",
    "ValueLexerOptions",
    "collect_tokens",
    "dump_tokens",
    "find_token",
    "is_state_key",
    "is_sub_element",
    "iter_tokens",
    "selector_affix_token",
    "significant",
    "tokenize_selector_affix",
    "tokenize_state_key",
    "tokenize_value",
]
