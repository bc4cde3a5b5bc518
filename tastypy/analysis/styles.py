"""Style-object forest.

Host-language integrations locate style objects in a file and hand them
over in this shape. Offsets are host-file offsets: for a quoted key or
string value they point at the content, not the quotes.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from tastypy.text import TextRange


@dataclass(frozen=True, slots=True)
class StyleString:
    text: str
    start: int
    end: int

    @property
    def range(self) -> TextRange:
        return TextRange(self.start, self.end)


@dataclass(frozen=True, slots=True)
class StyleProperty:
    name: str
    name_start: int
    name_end: int
    value: StyleString | StyleObject | None = None

    @property
    def name_range(self) -> TextRange:
        return TextRange(self.name_start, self.name_end)


@dataclass(frozen=True, slots=True)
class StyleObject:
    properties: tuple[StyleProperty, ...]
    start: int
    end: int

    def __iter__(self) -> Iterator[StyleProperty]:
        return iter(self.properties)

    def get(self, name: str) -> StyleProperty | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


StyleForest: TypeAlias = Sequence[StyleObject]
StyleMapping: TypeAlias = Mapping[str, "str | StyleMapping | None"]


@dataclass(frozen=True, slots=True)
class StyleSource:
    """A rendered object literal and its forest, for feeding the engine without a host parser."""

    text: str
    root: StyleObject

    @property
    def forest(self) -> tuple[StyleObject, ...]:
        return (self.root,)


def build_style_source(mapping: StyleMapping) -> StyleSource:
    """Render `mapping` as `{'key': 'value', ...}` and record host offsets for every node.

    A `None` value renders as `null` (a value the engine does not inspect).
    """
    builder = _SourceBuilder()
    root = builder.object(mapping)
    return StyleSource("".join(builder.parts), root)


class _SourceBuilder:
    def __init__(self) -> None:
        self.parts: list[str] = []
        self.position = 0

    def write(self, text: str) -> None:
        self.parts.append(text)
        self.position += len(text)

    def string(self, text: str) -> StyleString:
        quote = "'" if "'" not in text else '"'
        self.write(quote)
        start = self.position
        self.write(text)
        end = self.position
        self.write(quote)
        return StyleString(text, start, end)

    def object(self, mapping: StyleMapping) -> StyleObject:
        start = self.position
        self.write("{")
        properties: list[StyleProperty] = []
        for index, (name, value) in enumerate(mapping.items()):
            if index:
                self.write(", ")
            key = self.string(name)
            self.write(": ")
            if value is None:
                self.write("null")
                node: StyleString | StyleObject | None = None
            elif isinstance(value, str):
                node = self.string(value)
            else:
                node = self.object(value)
            properties.append(StyleProperty(name, key.start, key.end, node))
        self.write("}")
        return StyleObject(tuple(properties), start, self.position)
