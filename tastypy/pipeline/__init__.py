"""Validation entrypoints, run results and the versioned document store."""

from tastypy.pipeline.documents import DocumentStore, StoredDocument
from tastypy.pipeline.entrypoints import run_validation
from tastypy.pipeline.results import DocumentValidationResult, ValidationRunResult

__all__ = [
    "DocumentStore",
    "DocumentValidationResult",
    "StoredDocument",
    "ValidationRunResult",
    "run_validation",
]
