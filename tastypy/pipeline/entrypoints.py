"""Entrypoints that run local-definition collection and validation in one pass."""

from __future__ import annotations

from collections.abc import Sequence

from tastypy.analysis.local_defs import LocalDefinitions, collect_local_definitions
from tastypy.analysis.styles import StyleObject
from tastypy.config.model import MergedConfig
from tastypy.diagnostics import has_errors
from tastypy.pipeline.results import ValidationRunResult
from tastypy.validation import validate_document


def run_validation(
    forest: Sequence[StyleObject],
    config: MergedConfig,
    *,
    local_definitions: LocalDefinitions | None = None,
) -> ValidationRunResult:
    """Collect definitions (unless given) and validate every style object in the forest."""
    if isinstance(forest, StyleObject):
        raise ValueError("run_validation expects a sequence of style objects, not a single StyleObject")
    definitions = local_definitions if local_definitions is not None else collect_local_definitions(forest)
    diagnostics = validate_document(forest, config, definitions)
    return ValidationRunResult(
        diagnostics=diagnostics,
        local_definitions=definitions,
        has_errors=has_errors(diagnostics),
    )
