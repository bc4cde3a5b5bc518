"""Style-object model and in-file definition analysis."""

from tastypy.analysis.local_defs import LocalDefinitions, collect_local_definitions, is_alias_definition
from tastypy.analysis.styles import (
    StyleForest,
    StyleObject,
    StyleProperty,
    StyleSource,
    StyleString,
    build_style_source,
)

__all__ = [
    "LocalDefinitions",
    "StyleForest",
    "StyleObject",
    "StyleProperty",
    "StyleSource",
    "StyleString",
    "build_style_source",
    "collect_local_definitions",
    "is_alias_definition",
]
