"""In-file token and state-alias definitions.

Definitions are collected over the whole forest before any validation, so
a definition anywhere in the file is visible everywhere in it.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from tastypy.analysis.styles import StyleObject, StyleString
from tastypy.lexer.state import is_state_key, is_sub_element
from tastypy.text import TextRange

_TOKEN_PREFIXES = ("#", "$")
# The bare `$` key holds a selector affix, not a definition.
_SELECTOR_AFFIX_KEY = "$"
_ALIAS_NAME = re.compile(r"^@[A-Za-z_][\w-]*$")
_AT_KEYWORDS = frozenset({"@media", "@supports", "@root", "@own", "@starting", "@keyframes", "@properties"})


@dataclass(slots=True)
class LocalDefinitions:
    """Token names (`#x`, `$x`) and state aliases (`@x`) defined in one file.

    Locations record the first definition site of each name.
    """

    tokens: set[str] = field(default_factory=set)
    states: set[str] = field(default_factory=set)
    token_locations: dict[str, TextRange] = field(default_factory=dict)
    state_locations: dict[str, TextRange] = field(default_factory=dict)

    def add_token(self, name: str, location: TextRange) -> None:
        self.tokens.add(name)
        self.token_locations.setdefault(name, location)

    def add_state(self, name: str, location: TextRange) -> None:
        self.states.add(name)
        self.state_locations.setdefault(name, location)

    def has_token(self, name: str) -> bool:
        return name in self.tokens

    def has_state(self, name: str) -> bool:
        return name in self.states


def collect_local_definitions(forest: Iterable[StyleObject]) -> LocalDefinitions:
    definitions = LocalDefinitions()
    for style_object in forest:
        _collect_from_style_object(style_object, definitions)
    return definitions


def _collect_from_style_object(style_object: StyleObject, definitions: LocalDefinitions) -> None:
    for prop in style_object:
        name = prop.name
        value = prop.value

        if name.startswith(_TOKEN_PREFIXES):
            if name != _SELECTOR_AFFIX_KEY:
                definitions.add_token(name, prop.name_range)
            if isinstance(value, StyleObject):
                _collect_from_state_mapping(value, definitions)
            continue

        if is_sub_element(name) or name.startswith("&"):
            if isinstance(value, StyleObject):
                _collect_from_style_object(value, definitions)
            continue

        if name == "@keyframes":
            continue

        if name == "@properties":
            if isinstance(value, StyleObject):
                for inner in value:
                    if inner.name.startswith(_TOKEN_PREFIXES) and inner.name != _SELECTOR_AFFIX_KEY:
                        definitions.add_token(inner.name, inner.name_range)
            continue

        if name.startswith("@"):
            if isinstance(value, StyleString):
                definitions.add_state(name, prop.name_range)
            elif isinstance(value, StyleObject):
                _collect_from_style_object(value, definitions)
            continue

        if isinstance(value, StyleObject):
            _collect_from_state_mapping(value, definitions)


def is_alias_definition(name: str, value: str) -> bool:
    """Whether `name: value` inside a state mapping defines an alias rather than using one.

    `'@compact': '@media(w < 400px)'` defines `@compact`; `'@mobile': '1x'` is a
    conditional value under an existing alias.
    """
    return (
        _ALIAS_NAME.match(name) is not None
        and name not in _AT_KEYWORDS
        and value != ""
        and is_state_key(value)
    )


def _collect_from_state_mapping(mapping: StyleObject, definitions: LocalDefinitions) -> None:
    """State keys here are usages, except alias definitions (see `is_alias_definition`)."""
    for entry in mapping:
        if isinstance(entry.value, StyleString) and is_alias_definition(entry.name, entry.value.text):
            definitions.add_state(entry.name, entry.name_range)
        elif isinstance(entry.value, StyleObject):
            _collect_from_state_mapping(entry.value, definitions)
