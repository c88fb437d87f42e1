"""
Report Repository - InsightX Scoring Engine
insightx/repositories/report_repository.py

Data access for InsightX reports.

Layout:
    users/{user_id}    {insightXReport, assessment: {..., updatedAt}, ...}
    reports/{user_id}  {userId, insightXReport, generatedAt}

Both writes are merges, so other fields on the user document (career
suggestions, goal plans, mentor chat) are left untouched. Re-saving replaces
the stored report wholesale.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from insightx.core.exceptions import EntityNotFoundException, RepositoryException
from insightx.models.profiles import InsightXReport
from insightx.models.submission import AssessmentSubmission
from insightx.repositories.document_store import DocumentStore

logger = logging.getLogger(__name__)

REPORT_FIELD = "insightXReport"
ASSESSMENT_FIELD = "assessment"


class ReportRepository:
    """Repository for InsightX report persistence."""

    def __init__(
        self,
        store: DocumentStore,
        users_collection: str = "users",
        reports_collection: str = "reports",
    ):
        self.store = store
        self.users_collection = users_collection
        self.reports_collection = reports_collection

    def save_report(
        self,
        user_id: str,
        report: InsightXReport,
        submission: Optional[AssessmentSubmission] = None,
    ) -> None:
        """
        Store a report (and optionally the raw submission) for a user.

        Args:
            user_id: Owner of the report
            report: Finished report
            submission: Raw answers the report was scored from
        """
        report_doc = report.to_document()

        user_update: Dict[str, Any] = {REPORT_FIELD: report_doc}
        if submission is not None:
            user_update[ASSESSMENT_FIELD] = {
                **submission.model_dump(mode="json", by_alias=True),
                "updatedAt": report_doc["generatedAt"],
            }

        self.store.merge(self.users_collection, user_id, user_update)
        self.store.merge(
            self.reports_collection,
            user_id,
            {
                "userId": user_id,
                REPORT_FIELD: report_doc,
                "generatedAt": report_doc["generatedAt"],
            },
        )
        logger.info(f"Saved InsightX report for user {user_id} (picIndex={report.pic_index})")

    def get_user_document(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get the raw user document, or None."""
        return self.store.get(self.users_collection, user_id)

    def get_report(self, user_id: str) -> InsightXReport:
        """
        Load the latest report for a user.

        Raises:
            EntityNotFoundException: no user document or no report on it
            RepositoryException: stored report is not JSON or does not validate
        """
        document = self.get_user_document(user_id)
        if not document or not document.get(REPORT_FIELD):
            raise EntityNotFoundException("InsightXReport", user_id)

        try:
            return InsightXReport.model_validate(document[REPORT_FIELD])
        except ValidationError as e:
            raise RepositoryException(
                f"Stored InsightXReport for user {user_id} is invalid: {e}"
            ) from e
