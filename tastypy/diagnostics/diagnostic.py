"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from tastypy.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the value and state-key checks.

    `range` is in host-file coordinates. `suggestions` holds "did you mean"
    replacements, best first.
    """

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    suggestions: tuple[str, ...] = ()
