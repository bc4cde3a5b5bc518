"""Per-document cache with version stamps.

A document is re-analyzed from scratch whenever a new version is stored.
Validation results carry the version they were computed from so that a
result overtaken by a newer edit is never published.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from tastypy.analysis.local_defs import LocalDefinitions, collect_local_definitions
from tastypy.analysis.styles import StyleObject
from tastypy.cache import Cache
from tastypy.config.model import MergedConfig
from tastypy.pipeline.entrypoints import run_validation
from tastypy.pipeline.results import DocumentValidationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StoredDocument:
    uri: str
    version: int
    forest: tuple[StyleObject, ...]
    local_definitions: LocalDefinitions


class DocumentStore:
    def __init__(self) -> None:
        self._documents: Cache[str, StoredDocument] = Cache()

    def open(self, uri: str, version: int, forest: Iterable[StyleObject]) -> StoredDocument:
        return self.update(uri, version, forest)

    def update(self, uri: str, version: int, forest: Iterable[StyleObject]) -> StoredDocument:
        """Store a new version. Versions older than the stored one are ignored."""
        current = self._documents.get(uri)
        if current is not None and version < current.version:
            logger.debug("Ignoring version %d of %s; version %d is stored", version, uri, current.version)
            return current
        trees = tuple(forest)
        document = StoredDocument(uri, version, trees, collect_local_definitions(trees))
        self._documents.set(uri, document)
        return document

    def get(self, uri: str) -> StoredDocument | None:
        return self._documents.get(uri)

    def close(self, uri: str) -> None:
        self._documents.invalidate(uri)

    def is_current(self, uri: str, version: int) -> bool:
        document = self._documents.get(uri)
        return document is not None and document.version == version

    def validate(self, uri: str, config: MergedConfig) -> DocumentValidationResult:
        document = self._documents.get(uri)
        if document is None:
            raise ValueError(f"Document `{uri}` is not open")
        result = run_validation(document.forest, config, local_definitions=document.local_definitions)
        return DocumentValidationResult(
            uri=uri,
            version=document.version,
            diagnostics=result.diagnostics,
            has_errors=result.has_errors,
        )

    def publishable(self, result: DocumentValidationResult) -> bool:
        """Whether `result` still describes the stored version of its document."""
        if self.is_current(result.uri, result.version):
            return True
        logger.debug("Discarding stale diagnostics for %s (version %d)", result.uri, result.version)
        return False

    def __contains__(self, uri: object) -> bool:
        return uri in self._documents

    def __len__(self) -> int:
        return len(self._documents)
