"""
Repositories Package - InsightX Scoring Engine
insightx/repositories/__init__.py
"""

from insightx.repositories.document_store import DocumentStore, InMemoryDocumentStore
from insightx.repositories.redis_store import RedisDocumentStore
from insightx.repositories.report_repository import ReportRepository

__all__ = [
    "DocumentStore",
    "InMemoryDocumentStore",
    "RedisDocumentStore",
    "ReportRepository",
]
