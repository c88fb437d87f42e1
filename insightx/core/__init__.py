"""
Core Package - InsightX Scoring Engine
insightx/core/__init__.py

Core infrastructure: exceptions, dependencies.
"""

from insightx.core.exceptions import (
    CorruptDocumentException,
    DocumentStoreConnectionException,
    EntityNotFoundException,
    InsightXException,
    InvalidSubmissionException,
    QuestionBankConfigurationError,
    RepositoryException,
)

__all__ = [
    "CorruptDocumentException",
    "DocumentStoreConnectionException",
    "EntityNotFoundException",
    "InsightXException",
    "InvalidSubmissionException",
    "QuestionBankConfigurationError",
    "RepositoryException",
]
