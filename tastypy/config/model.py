"""Config shapes and the merge rule.

`TastyConfig` is one normalized config file; unset fields are `None`.
`MergedConfig` is the result of folding every applicable file together.
For `tokens`/`units`/`funcs`, `False` disables validation of that category.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Literal, TypeAlias

from tastypy.builtins import BUILT_IN_UNITS

NameList: TypeAlias = tuple[str, ...]
ToggleList: TypeAlias = NameList | Literal[False]

_TOGGLE_FIELDS = ("tokens", "units", "funcs")
_LIST_FIELDS = ("states", "presets", "recipes")
_DESCRIPTION_FIELDS = {
    "tokenDescriptions": "token_descriptions",
    "presetDescriptions": "preset_descriptions",
    "recipeDescriptions": "recipe_descriptions",
    "stateDescriptions": "state_descriptions",
}


@dataclass(frozen=True, slots=True)
class TastyConfig:
    extends: str | None = None
    tokens: ToggleList | None = None
    units: ToggleList | None = None
    funcs: ToggleList | None = None
    states: NameList | None = None
    presets: NameList | None = None
    recipes: NameList | None = None
    token_descriptions: Mapping[str, str] | None = None
    preset_descriptions: Mapping[str, str] | None = None
    recipe_descriptions: Mapping[str, str] | None = None
    state_descriptions: Mapping[str, str] | None = None


@dataclass(frozen=True, slots=True)
class MergedConfig:
    tokens: ToggleList = False
    units: ToggleList = BUILT_IN_UNITS
    funcs: ToggleList = False
    states: NameList = ()
    presets: NameList = ()
    recipes: NameList = ()
    token_descriptions: Mapping[str, str] = field(default_factory=dict)
    preset_descriptions: Mapping[str, str] = field(default_factory=dict)
    recipe_descriptions: Mapping[str, str] = field(default_factory=dict)
    state_descriptions: Mapping[str, str] = field(default_factory=dict)


def empty_config() -> MergedConfig:
    """Baseline before any file is merged: built-in units only, tokens and funcs unchecked."""
    return MergedConfig()


def merge_configs(base: MergedConfig, override: TastyConfig) -> MergedConfig:
    """Fold `override` into `base`.

    - `False` on tokens/units/funcs replaces whatever was accumulated.
    - A list unions with the accumulated list (first occurrence order),
      or starts a fresh list when the accumulated value is `False`.
    - Description maps shallow-merge, override keys winning.
    """
    changes: dict[str, object] = {}

    for name in _TOGGLE_FIELDS:
        value = getattr(override, name)
        if value is None:
            continue
        if value is False:
            changes[name] = False
            continue
        current = getattr(base, name)
        changes[name] = _union(() if current is False else current, value)

    for name in _LIST_FIELDS:
        value = getattr(override, name)
        if value is not None:
            changes[name] = _union(getattr(base, name), value)

    for name in _DESCRIPTION_FIELDS.values():
        value = getattr(override, name)
        if value:
            changes[name] = {**getattr(base, name), **value}

    if not changes:
        return base
    return replace(base, **changes)


def normalize_config(document: object) -> TastyConfig | None:
    """Coerce a parsed config document into a `TastyConfig`.

    Unknown keys and ill-typed values are ignored. Returns `None` when the
    document is not a mapping.
    """
    if not isinstance(document, Mapping):
        return None

    fields: dict[str, object] = {}

    extends = document.get("extends")
    if isinstance(extends, str):
        fields["extends"] = extends
    elif isinstance(extends, list) and len(extends) == 1 and isinstance(extends[0], str):
        fields["extends"] = extends[0]

    for name in _TOGGLE_FIELDS:
        value = document.get(name)
        if value is False:
            fields[name] = False
        elif isinstance(value, list):
            fields[name] = _strings(value)

    for name in _LIST_FIELDS:
        value = document.get(name)
        if isinstance(value, list):
            fields[name] = _strings(value)

    for key, name in _DESCRIPTION_FIELDS.items():
        value = document.get(key)
        if isinstance(value, Mapping):
            fields[name] = {k: v for k, v in value.items() if isinstance(k, str) and isinstance(v, str)}

    return TastyConfig(**fields)


def _strings(values: Sequence[object]) -> NameList:
    return tuple(value for value in values if isinstance(value, str))


def _union(current: Iterable[str], extra: Iterable[str]) -> NameList:
    return tuple(dict.fromkeys((*current, *extra)))
