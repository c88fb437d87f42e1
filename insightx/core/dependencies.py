"""
Dependencies - InsightX Scoring Engine
insightx/core/dependencies.py

Cached singletons for the document store, repository and service.
"""

from functools import lru_cache

from insightx.config import get_settings
from insightx.core.exceptions import DocumentStoreConnectionException
from insightx.logging_config import configure_logging
from insightx.repositories.document_store import DocumentStore, InMemoryDocumentStore
from insightx.repositories.redis_store import RedisDocumentStore
from insightx.repositories.report_repository import ReportRepository
from insightx.services.report_service import InsightXReportService


@lru_cache()
def get_document_store() -> DocumentStore:
    """Store selected by DOCUMENT_STORE. Redis must answer PING."""
    settings = get_settings()
    if settings.DOCUMENT_STORE == "redis":
        store = RedisDocumentStore()
        if not store.ping():
            raise DocumentStoreConnectionException(
                f"Redis not reachable at {settings.REDIS_URL}"
            )
        return store
    return InMemoryDocumentStore()


@lru_cache()
def get_report_repository() -> ReportRepository:
    """Get cached ReportRepository instance."""
    settings = get_settings()
    return ReportRepository(
        get_document_store(),
        users_collection=settings.USERS_COLLECTION,
        reports_collection=settings.REPORTS_COLLECTION,
    )


@lru_cache()
def get_report_service() -> InsightXReportService:
    """Get cached InsightXReportService instance; configures logging once."""
    configure_logging(get_settings())
    return InsightXReportService(get_report_repository())
