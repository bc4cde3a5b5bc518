"""State-key checks.

Token rules run over the top-level tokens of a key. The bracket-balance
pass works on the raw key text and is independent of tokenization.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from tastypy.analysis.local_defs import LocalDefinitions
from tastypy.config.model import MergedConfig
from tastypy.diagnostics import (
    STATE_INVALID_SYNTAX,
    STATE_MISMATCHED_BRACKET,
    STATE_OWN_OUTSIDE_SUB_ELEMENT,
    STATE_UNCLOSED_BRACKET,
    STATE_UNKNOWN_ALIAS,
    STATE_UNMATCHED_BRACKET,
    Diagnostic,
    make_diagnostic,
)
from tastypy.lexer.state import tokenize_state_key
from tastypy.lexer.tokens import Token, TokenKind
from tastypy.text import TextRange
from tastypy.validation.suggest import find_similar

_CLOSER_FOR = {"(": ")", "[": "]"}
_OPENER_FOR = {")": "(", "]": "["}


@dataclass(frozen=True, slots=True)
class StateContext:
    base_offset: int
    config: MergedConfig
    local_definitions: LocalDefinitions
    inside_sub_element: bool = False

    def host_range(self, token: Token) -> TextRange:
        return token.range.shift(self.base_offset)


class StateRule(Protocol):
    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    def check(self, token: Token, context: StateContext) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class StateSyntaxRule:
    code: str = STATE_INVALID_SYNTAX.code
    name: str = "stateSyntax"

    def check(self, token: Token, context: StateContext) -> list[Diagnostic]:
        if token.kind != TokenKind.UNKNOWN:
            return []
        return [make_diagnostic(STATE_INVALID_SYNTAX, context.host_range(token), text=token.text)]


@dataclass(frozen=True, slots=True)
class OwnStateRule:
    code: str = STATE_OWN_OUTSIDE_SUB_ELEMENT.code
    name: str = "ownState"

    def check(self, token: Token, context: StateContext) -> list[Diagnostic]:
        if token.kind != TokenKind.OWN_STATE or context.inside_sub_element:
            return []
        return [make_diagnostic(STATE_OWN_OUTSIDE_SUB_ELEMENT, context.host_range(token))]


@dataclass(frozen=True, slots=True)
class StateAliasRule:
    code: str = STATE_UNKNOWN_ALIAS.code
    name: str = "stateAlias"

    def check(self, token: Token, context: StateContext) -> list[Diagnostic]:
        if token.kind != TokenKind.STATE_ALIAS:
            return []
        alias = token.text
        if alias in context.config.states or context.local_definitions.has_state(alias):
            return []
        candidates = (*context.config.states, *sorted(context.local_definitions.states))
        return [
            make_diagnostic(
                STATE_UNKNOWN_ALIAS,
                context.host_range(token),
                find_similar(alias, candidates),
                name=alias,
            )
        ]


def default_state_rules() -> tuple[StateRule, ...]:
    return (StateSyntaxRule(), OwnStateRule(), StateAliasRule())


def validate_state_rules(rules: Sequence[StateRule]) -> None:
    for rule in rules:
        if not rule.code.startswith("STATE_"):
            raise ValueError(f"State rule `{rule.name}` has invalid code `{rule.code}`; expected `STATE_` prefix.")


def validate_state_tokens(
    tokens: Sequence[Token],
    base_offset: int,
    config: MergedConfig,
    local_definitions: LocalDefinitions | None = None,
    *,
    inside_sub_element: bool = False,
    rules: Sequence[StateRule] | None = None,
) -> list[Diagnostic]:
    resolved_rules = tuple(rules) if rules is not None else default_state_rules()
    validate_state_rules(resolved_rules)
    context = StateContext(
        base_offset=base_offset,
        config=config,
        local_definitions=local_definitions if local_definitions is not None else LocalDefinitions(),
        inside_sub_element=inside_sub_element,
    )
    diagnostics: list[Diagnostic] = []
    for token in tokens:
        for rule in resolved_rules:
            diagnostics.extend(rule.check(token, context))
    return diagnostics


def validate_state_key(
    key: str,
    base_offset: int,
    config: MergedConfig,
    local_definitions: LocalDefinitions | None = None,
    *,
    inside_sub_element: bool = False,
) -> list[Diagnostic]:
    """Validate one state key. The default key `''` and color-token keys (`#name`) are not checked."""
    if key == "" or key.startswith("#"):
        return []
    definitions = local_definitions if local_definitions is not None else LocalDefinitions()

    diagnostics = check_bracket_balance(key, base_offset)
    tokens = tokenize_state_key(key, (*config.states, *definitions.states))
    diagnostics.extend(
        validate_state_tokens(
            tokens,
            base_offset,
            config,
            definitions,
            inside_sub_element=inside_sub_element,
        )
    )
    return diagnostics


def check_bracket_balance(key: str, base_offset: int = 0) -> list[Diagnostic]:
    """Report unmatched, mismatched and unclosed `(`/`[` in the raw key text."""
    diagnostics: list[Diagnostic] = []
    stack: list[tuple[str, int]] = []

    for index, char in enumerate(key):
        if char in _CLOSER_FOR:
            stack.append((char, index))
            continue
        if char not in _OPENER_FOR:
            continue
        char_range = TextRange.at(base_offset + index, 1)
        if not stack:
            diagnostics.append(
                make_diagnostic(STATE_UNMATCHED_BRACKET, char_range, closer=char, opener=_OPENER_FOR[char])
            )
            continue
        opener, position = stack.pop()
        if _CLOSER_FOR[opener] != char:
            diagnostics.append(
                make_diagnostic(
                    STATE_MISMATCHED_BRACKET,
                    char_range,
                    closer=char,
                    expected=_CLOSER_FOR[opener],
                    opener=opener,
                    position=position,
                )
            )

    for opener, position in stack:
        diagnostics.append(
            make_diagnostic(
                STATE_UNCLOSED_BRACKET,
                TextRange.at(base_offset + position, 1),
                opener=opener,
                closer=_CLOSER_FOR[opener],
            )
        )
    return diagnostics
