"""Diagnostic codes and messages.

Messages are `str.format` templates; the placeholders are filled by
`make_diagnostic`.
"""

from dataclasses import dataclass
from typing import Final

from tastypy.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


VALUE_UNKNOWN_COLOR_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_UNKNOWN_COLOR_TOKEN",
    message="Unknown color token '{name}'",
    hint="Declare the token in `tokens` of tasty.config or define it in this file.",
    severity="warning",
    category="value",
)

VALUE_UNKNOWN_CUSTOM_PROPERTY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_UNKNOWN_CUSTOM_PROPERTY",
    message="Unknown custom property '{name}'",
    hint="Declare the property in `tokens` of tasty.config or define it in this file.",
    severity="warning",
    category="value",
)

VALUE_UNKNOWN_UNIT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_UNKNOWN_UNIT",
    message="Unknown unit '{name}'",
    hint="Add the unit to `units` of tasty.config.",
    severity="warning",
    category="value",
)

VALUE_UNKNOWN_PRESET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_UNKNOWN_PRESET",
    message="Unknown preset or modifier '{name}'",
    hint="Add the preset to `presets` of tasty.config.",
    severity="warning",
    category="value",
)

VALUE_UNKNOWN_RECIPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_UNKNOWN_RECIPE",
    message="Unknown recipe '{name}'",
    hint="Add the recipe to `recipes` of tasty.config.",
    severity="warning",
    category="value",
)

VALUE_UNKNOWN_FUNCTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_UNKNOWN_FUNCTION",
    message="Unknown function '{name}'",
    hint="Use a CSS function or add it to `funcs` of tasty.config.",
    severity="warning",
    category="value",
)

VALUE_INVALID_OPACITY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_INVALID_OPACITY",
    message="Invalid opacity value '{value}'. Opacity should be 0-100",
    hint="Use `.5` for 50% or `.05` for 5%.",
    severity="warning",
    category="value",
)

STATE_INVALID_SYNTAX: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STATE_INVALID_SYNTAX",
    message="Invalid state key syntax at '{text}'",
    severity="error",
    category="state",
)

STATE_UNMATCHED_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STATE_UNMATCHED_BRACKET",
    message="Unmatched '{closer}' - no opening '{opener}'",
    severity="error",
    category="state",
)

STATE_MISMATCHED_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STATE_MISMATCHED_BRACKET",
    message="Mismatched '{closer}' - expected '{expected}' to close '{opener}' at position {position}",
    severity="error",
    category="state",
)

STATE_UNCLOSED_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STATE_UNCLOSED_BRACKET",
    message="Unclosed '{opener}' - missing '{closer}'",
    severity="error",
    category="state",
)

STATE_OWN_OUTSIDE_SUB_ELEMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STATE_OWN_OUTSIDE_SUB_ELEMENT",
    message="'@own(...)' should only be used inside sub-element style blocks",
    hint="At root level, use the inner condition directly.",
    severity="warning",
    category="state",
)

STATE_UNKNOWN_ALIAS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STATE_UNKNOWN_ALIAS",
    message="Unknown state alias '{name}'",
    hint="Declare the alias in `states` of tasty.config or define it in this file.",
    severity="warning",
    category="state",
)

STATE_STARTING_AS_PROPERTY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STATE_STARTING_AS_PROPERTY",
    message="'@starting' is a state, not a property",
    hint="Use it as a state key inside a property mapping: `{ '': ..., '@starting': ... }`.",
    severity="warning",
    category="state",
)
