"""Diagnostics."""

from tastypy.diagnostics.codes import (
    STATE_INVALID_SYNTAX,
    STATE_MISMATCHED_BRACKET,
    STATE_OWN_OUTSIDE_SUB_ELEMENT,
    STATE_STARTING_AS_PROPERTY,
    STATE_UNCLOSED_BRACKET,
    STATE_UNKNOWN_ALIAS,
    STATE_UNMATCHED_BRACKET,
    VALUE_INVALID_OPACITY,
    VALUE_UNKNOWN_COLOR_TOKEN,
    VALUE_UNKNOWN_CUSTOM_PROPERTY,
    VALUE_UNKNOWN_FUNCTION,
    VALUE_UNKNOWN_PRESET,
    VALUE_UNKNOWN_RECIPE,
    VALUE_UNKNOWN_UNIT,
    DiagnosticSpec,
)
from tastypy.diagnostics.diagnostic import Diagnostic, Severity
from tastypy.diagnostics.report import (
    collect_diagnostics,
    dedupe_diagnostics,
    has_errors,
    make_diagnostic,
    sort_diagnostics,
)

__all__ = [
    "STATE_INVALID_SYNTAX",
    "STATE_MISMATCHED_BRACKET",
    "STATE_OWN_OUTSIDE_SUB_ELEMENT",
    "STATE_STARTING_AS_PROPERTY",
    "STATE_UNCLOSED_BRACKET",
    "STATE_UNKNOWN_ALIAS",
    "STATE_UNMATCHED_BRACKET",
    "VALUE_INVALID_OPACITY",
    "VALUE_UNKNOWN_COLOR_TOKEN",
    "VALUE_UNKNOWN_CUSTOM_PROPERTY",
    "VALUE_UNKNOWN_FUNCTION",
    "VALUE_UNKNOWN_PRESET",
    "VALUE_UNKNOWN_RECIPE",
    "VALUE_UNKNOWN_UNIT",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "dedupe_diagnostics",
    "has_errors",
    "make_diagnostic",
    "sort_diagnostics",
]
