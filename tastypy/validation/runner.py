"""Validation over a whole style-object forest."""

from __future__ import annotations

from collections.abc import Sequence

from tastypy.analysis.local_defs import LocalDefinitions, collect_local_definitions, is_alias_definition
from tastypy.analysis.styles import StyleObject, StyleProperty, StyleString
from tastypy.config.model import MergedConfig
from tastypy.diagnostics import (
    STATE_STARTING_AS_PROPERTY,
    Diagnostic,
    dedupe_diagnostics,
    make_diagnostic,
    sort_diagnostics,
)
from tastypy.lexer.state import is_sub_element
from tastypy.validation.states import validate_state_key
from tastypy.validation.values import validate_value

_SKIPPED_AT_RULES = frozenset({"@keyframes", "@properties"})
_SELECTOR_AFFIX_KEY = "$"


def validate_document(
    forest: Sequence[StyleObject],
    config: MergedConfig,
    local_definitions: LocalDefinitions | None = None,
) -> list[Diagnostic]:
    """Validate every style object in `forest`.

    Local definitions are collected over the whole forest first unless given.
    Diagnostics come back sorted by range, without exact duplicates.
    """
    definitions = local_definitions if local_definitions is not None else collect_local_definitions(forest)
    walker = _DocumentWalker(config, definitions)
    for style_object in forest:
        walker.walk_style_object(style_object, inside_sub_element=False)
    return dedupe_diagnostics(sort_diagnostics(walker.diagnostics))


class _DocumentWalker:
    def __init__(self, config: MergedConfig, local_definitions: LocalDefinitions) -> None:
        self.config = config
        self.local_definitions = local_definitions
        self.diagnostics: list[Diagnostic] = []

    def walk_style_object(self, style_object: StyleObject, *, inside_sub_element: bool) -> None:
        for prop in style_object:
            self._walk_property(prop, inside_sub_element=inside_sub_element)

    def _walk_property(self, prop: StyleProperty, *, inside_sub_element: bool) -> None:
        name = prop.name
        value = prop.value

        if is_sub_element(name):
            if isinstance(value, StyleObject):
                self.walk_style_object(value, inside_sub_element=True)
            return

        if name.startswith("&"):
            if isinstance(value, StyleObject):
                self.walk_style_object(value, inside_sub_element=inside_sub_element)
            return

        if name.startswith("@"):
            self._walk_at_property(prop, inside_sub_element=inside_sub_element)
            return

        if name == _SELECTOR_AFFIX_KEY:
            return

        # `#name` / `$name` definitions have no property context.
        property_name = "" if name.startswith(("#", "$")) else name
        if isinstance(value, StyleString):
            self._validate_value(value, property_name)
        elif isinstance(value, StyleObject):
            self._walk_state_mapping(value, property_name, inside_sub_element=inside_sub_element)

    def _walk_at_property(self, prop: StyleProperty, *, inside_sub_element: bool) -> None:
        if prop.name in _SKIPPED_AT_RULES:
            return
        if prop.name == "@starting":
            self.diagnostics.append(make_diagnostic(STATE_STARTING_AS_PROPERTY, prop.name_range))
            return
        value = prop.value
        if isinstance(value, StyleString):
            self._validate_alias_body(value, inside_sub_element=inside_sub_element)
        elif isinstance(value, StyleObject):
            self.walk_style_object(value, inside_sub_element=inside_sub_element)

    def _walk_state_mapping(self, mapping: StyleObject, property_name: str, *, inside_sub_element: bool) -> None:
        for entry in mapping:
            if isinstance(entry.value, StyleString) and is_alias_definition(entry.name, entry.value.text):
                self._validate_alias_body(entry.value, inside_sub_element=inside_sub_element)
                continue
            self.diagnostics.extend(
                validate_state_key(
                    entry.name,
                    entry.name_start,
                    self.config,
                    self.local_definitions,
                    inside_sub_element=inside_sub_element,
                )
            )
            if isinstance(entry.value, StyleString):
                self._validate_value(entry.value, property_name)
            elif isinstance(entry.value, StyleObject):
                self._walk_state_mapping(entry.value, property_name, inside_sub_element=inside_sub_element)

    def _validate_alias_body(self, body: StyleString, *, inside_sub_element: bool) -> None:
        self.diagnostics.extend(
            validate_state_key(
                body.text,
                body.start,
                self.config,
                self.local_definitions,
                inside_sub_element=inside_sub_element,
            )
        )

    def _validate_value(self, value: StyleString, property_name: str) -> None:
        self.diagnostics.extend(
            validate_value(value.text, value.start, property_name, self.config, self.local_definitions)
        )
