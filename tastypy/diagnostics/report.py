"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from tastypy.diagnostics.codes import DiagnosticSpec
from tastypy.diagnostics.diagnostic import Diagnostic
from tastypy.text import TextRange


def make_diagnostic(
    spec: DiagnosticSpec,
    range: TextRange,
    suggestion: str | None = None,
    **fields: object,
) -> Diagnostic:
    """Build a diagnostic from its spec, filling `{field}` placeholders in the message.

    A suggestion is appended to the message and recorded in `suggestions`.
    """
    message = spec.message.format(**fields)
    suggestions: tuple[str, ...] = ()
    if suggestion is not None:
        message = f"{message}. Did you mean '{suggestion}'?"
        suggestions = (suggestion,)
    return Diagnostic(
        code=spec.code,
        message=message,
        range=range,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
        suggestions=suggestions,
    )


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return sorted(
        diagnostics,
        key=lambda diagnostic: (
            diagnostic.range.start,
            diagnostic.range.end,
            diagnostic.code,
            diagnostic.message,
        ),
    )


def dedupe_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Drop exact duplicates, keeping the first occurrence."""
    seen: set[Diagnostic] = set()
    unique: list[Diagnostic] = []
    for diagnostic in diagnostics:
        if diagnostic in seen:
            continue
        seen.add(diagnostic)
        unique.append(diagnostic)
    return unique
