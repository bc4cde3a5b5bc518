"""Value-token checks.

Each rule inspects one token at a time; `validate_value_tokens` walks the
token tree (function arguments included) and runs every rule on every
token. Token offsets are relative to the value string and are rebased by
`base_offset` into host-file coordinates.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from tastypy.analysis.local_defs import LocalDefinitions
from tastypy.builtins import BUILT_IN_UNITS, CSS_FUNCTIONS, CSS_GLOBAL_VALUES, PRESET_MODIFIERS, RESERVED_COLOR_TOKENS
from tastypy.config.model import MergedConfig
from tastypy.diagnostics import (
    VALUE_INVALID_OPACITY,
    VALUE_UNKNOWN_COLOR_TOKEN,
    VALUE_UNKNOWN_CUSTOM_PROPERTY,
    VALUE_UNKNOWN_FUNCTION,
    VALUE_UNKNOWN_PRESET,
    VALUE_UNKNOWN_RECIPE,
    VALUE_UNKNOWN_UNIT,
    Diagnostic,
    make_diagnostic,
)
from tastypy.lexer.tokens import Token, TokenKind, iter_tokens
from tastypy.lexer.value import ValueLexer, ValueLexerOptions
from tastypy.text import TextRange
from tastypy.validation.suggest import find_similar

_OPACITY_SUFFIX = re.compile(r"\.(\d+)$")
_NUMERIC_PREFIX = re.compile(r"[+-]?[\d.]*")


@dataclass(frozen=True, slots=True)
class ValueContext:
    base_offset: int
    property_name: str
    config: MergedConfig
    local_definitions: LocalDefinitions

    def host_range(self, token: Token) -> TextRange:
        return token.range.shift(self.base_offset)


class ValueRule(Protocol):
    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    def check(self, token: Token, context: ValueContext) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class OpacityRule:
    """`#token.N`: N is a percentage; a single digit is shorthand for tens (`.5` is 50%)."""

    code: str = VALUE_INVALID_OPACITY.code
    name: str = "opacity"

    def check(self, token: Token, context: ValueContext) -> list[Diagnostic]:
        if token.kind != TokenKind.COLOR_TOKEN:
            return []
        match = _OPACITY_SUFFIX.search(token.text)
        if match is None:
            return []
        digits = match.group(1)
        opacity = int(digits) * 10 if len(digits) == 1 else int(digits)
        if opacity <= 100:
            return []
        return [make_diagnostic(VALUE_INVALID_OPACITY, context.host_range(token), value=digits)]


@dataclass(frozen=True, slots=True)
class ColorTokenRule:
    code: str = VALUE_UNKNOWN_COLOR_TOKEN.code
    name: str = "colorToken"

    def check(self, token: Token, context: ValueContext) -> list[Diagnostic]:
        config_tokens = context.config.tokens
        if token.kind != TokenKind.COLOR_TOKEN or config_tokens is False:
            return []
        name = token.name
        if name in RESERVED_COLOR_TOKENS or name in config_tokens or context.local_definitions.has_token(name):
            return []
        candidates = _prefixed("#", config_tokens, context.local_definitions)
        return [
            make_diagnostic(
                VALUE_UNKNOWN_COLOR_TOKEN,
                context.host_range(token),
                find_similar(name, candidates),
                name=name,
            )
        ]


@dataclass(frozen=True, slots=True)
class CustomPropertyRule:
    code: str = VALUE_UNKNOWN_CUSTOM_PROPERTY.code
    name: str = "customProperty"

    def check(self, token: Token, context: ValueContext) -> list[Diagnostic]:
        config_tokens = context.config.tokens
        if token.kind != TokenKind.CUSTOM_PROPERTY or config_tokens is False:
            return []
        name = token.text
        if name in config_tokens or context.local_definitions.has_token(name):
            return []
        candidates = _prefixed("$", config_tokens, context.local_definitions)
        return [
            make_diagnostic(
                VALUE_UNKNOWN_CUSTOM_PROPERTY,
                context.host_range(token),
                find_similar(name, candidates),
                name=name,
            )
        ]


@dataclass(frozen=True, slots=True)
class UnitRule:
    code: str = VALUE_UNKNOWN_UNIT.code
    name: str = "unit"

    def check(self, token: Token, context: ValueContext) -> list[Diagnostic]:
        config_units = context.config.units
        if token.kind != TokenKind.CUSTOM_UNIT or config_units is False:
            return []
        unit = token.text[_NUMERIC_PREFIX.match(token.text).end() :]
        if not unit or unit in config_units or unit in BUILT_IN_UNITS:
            return []
        candidates = (*config_units, *BUILT_IN_UNITS)
        return [
            make_diagnostic(
                VALUE_UNKNOWN_UNIT,
                context.host_range(token),
                find_similar(unit, candidates),
                name=unit,
            )
        ]


@dataclass(frozen=True, slots=True)
class PresetRule:
    """Identifiers under `preset`. Skipped when the project configures no presets."""

    code: str = VALUE_UNKNOWN_PRESET.code
    name: str = "preset"

    def check(self, token: Token, context: ValueContext) -> list[Diagnostic]:
        presets = context.config.presets
        if context.property_name != "preset" or token.kind != TokenKind.IDENTIFIER or not presets:
            return []
        name = token.text
        if name in presets or name in PRESET_MODIFIERS or name in CSS_GLOBAL_VALUES:
            return []
        return [
            make_diagnostic(
                VALUE_UNKNOWN_PRESET,
                context.host_range(token),
                find_similar(name, (*presets, *PRESET_MODIFIERS)),
                name=name,
            )
        ]


@dataclass(frozen=True, slots=True)
class RecipeRule:
    """Identifiers under `recipe`. Skipped when the project configures no recipes."""

    code: str = VALUE_UNKNOWN_RECIPE.code
    name: str = "recipe"

    def check(self, token: Token, context: ValueContext) -> list[Diagnostic]:
        recipes = context.config.recipes
        if context.property_name != "recipe" or token.kind != TokenKind.IDENTIFIER or not recipes:
            return []
        name = token.text
        if name in recipes or name in CSS_GLOBAL_VALUES:
            return []
        return [
            make_diagnostic(
                VALUE_UNKNOWN_RECIPE,
                context.host_range(token),
                find_similar(name, recipes),
                name=name,
            )
        ]


@dataclass(frozen=True, slots=True)
class FunctionRule:
    code: str = VALUE_UNKNOWN_FUNCTION.code
    name: str = "function"

    def check(self, token: Token, context: ValueContext) -> list[Diagnostic]:
        funcs = context.config.funcs
        if token.kind != TokenKind.FUNCTION or funcs is False:
            return []
        name = token.name
        if name in CSS_FUNCTIONS or name in funcs:
            return []
        return [
            make_diagnostic(
                VALUE_UNKNOWN_FUNCTION,
                context.host_range(token),
                find_similar(name, (*funcs, *CSS_FUNCTIONS)),
                name=name,
            )
        ]


def default_value_rules() -> tuple[ValueRule, ...]:
    return (
        OpacityRule(),
        ColorTokenRule(),
        CustomPropertyRule(),
        UnitRule(),
        PresetRule(),
        RecipeRule(),
        FunctionRule(),
    )


def validate_value_rules(rules: Sequence[ValueRule]) -> None:
    for rule in rules:
        if not rule.code.startswith("VALUE_"):
            raise ValueError(f"Value rule `{rule.name}` has invalid code `{rule.code}`; expected `VALUE_` prefix.")


def validate_value_tokens(
    tokens: Sequence[Token],
    base_offset: int,
    property_name: str,
    config: MergedConfig,
    local_definitions: LocalDefinitions | None = None,
    *,
    rules: Sequence[ValueRule] | None = None,
) -> list[Diagnostic]:
    """Run value rules over a token tree, parents before their children."""
    resolved_rules = tuple(rules) if rules is not None else default_value_rules()
    validate_value_rules(resolved_rules)
    context = ValueContext(
        base_offset=base_offset,
        property_name=property_name,
        config=config,
        local_definitions=local_definitions if local_definitions is not None else LocalDefinitions(),
    )
    diagnostics: list[Diagnostic] = []
    for token, _ in iter_tokens(tokens):
        for rule in resolved_rules:
            diagnostics.extend(rule.check(token, context))
    return diagnostics


def validate_value(
    text: str,
    base_offset: int,
    property_name: str,
    config: MergedConfig,
    local_definitions: LocalDefinitions | None = None,
) -> list[Diagnostic]:
    """Tokenize a style value against `config` and validate it."""
    tokens = ValueLexer(text, ValueLexerOptions.from_config(config)).lex()
    return validate_value_tokens(tokens, base_offset, property_name, config, local_definitions)


def _prefixed(prefix: str, config_tokens: Sequence[str], local_definitions: LocalDefinitions) -> list[str]:
    names = [name for name in config_tokens if name.startswith(prefix)]
    names.extend(sorted(name for name in local_definitions.tokens if name.startswith(prefix)))
    return names
