"""Pipeline run result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from tastypy.analysis.local_defs import LocalDefinitions
from tastypy.diagnostics import Diagnostic


@dataclass(frozen=True, slots=True)
class ValidationRunResult:
    """Result of validating one style-object forest."""

    diagnostics: list[Diagnostic]
    local_definitions: LocalDefinitions
    has_errors: bool


@dataclass(frozen=True, slots=True)
class DocumentValidationResult:
    """Validation of one stored document, stamped with the version it was computed from."""

    uri: str
    version: int
    diagnostics: list[Diagnostic]
    has_errors: bool
