"""
Document Store - InsightX Scoring Engine
insightx/repositories/document_store.py

Key-value document store interface used by the report repository, plus a
dict-backed implementation for development and tests.

Documents are JSON-safe dicts addressed by (collection, doc_id).
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class DocumentStore(ABC):
    """get / put / merge over (collection, doc_id)."""

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Return the document, or None when absent."""

    @abstractmethod
    def put(self, collection: str, doc_id: str, document: Dict[str, Any]) -> None:
        """Create or replace the document."""

    @abstractmethod
    def merge(self, collection: str, doc_id: str, partial: Dict[str, Any]) -> None:
        """
        Shallow-merge partial into the document, creating it if absent.

        Top-level keys in partial replace existing keys; other keys are kept.
        """


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed store. Copies on the way in and out."""

    def __init__(self):
        self._documents: Dict[Tuple[str, str], Dict[str, Any]] = {}

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        document = self._documents.get((collection, doc_id))
        return copy.deepcopy(document) if document is not None else None

    def put(self, collection: str, doc_id: str, document: Dict[str, Any]) -> None:
        self._documents[(collection, doc_id)] = copy.deepcopy(document)
        logger.debug(f"put {collection}/{doc_id}")

    def merge(self, collection: str, doc_id: str, partial: Dict[str, Any]) -> None:
        document = self._documents.setdefault((collection, doc_id), {})
        document.update(copy.deepcopy(partial))
        logger.debug(f"merge {collection}/{doc_id} keys={sorted(partial)}")

    def clear(self) -> None:
        self._documents.clear()
