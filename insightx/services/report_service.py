"""
InsightX Report Service - InsightX Scoring Engine
insightx/services/report_service.py

Runs one assessment submission through the scoring engine and hands the
finished report to the repository. The scoring engine never sees storage.
"""

import logging
from typing import Optional

from insightx.core.exceptions import InvalidSubmissionException
from insightx.models.profiles import InsightXReport
from insightx.models.submission import AssessmentSubmission
from insightx.repositories.report_repository import ReportRepository
from insightx.scoring.report_generator import Clock, generate_report_from_submission

logger = logging.getLogger(__name__)


class InsightXReportService:
    """Score-then-persist for assessment submissions."""

    def __init__(self, repository: ReportRepository, clock: Optional[Clock] = None):
        self.repository = repository
        self.clock = clock

    def submit_assessment(
        self,
        user_id: str,
        submission: AssessmentSubmission,
    ) -> InsightXReport:
        """
        Score a submission and store the resulting report.

        A retake stores a new report in place of the old one.

        Raises:
            InvalidSubmissionException: user_id is empty
            RepositoryException: the store write failed
        """
        if not user_id or not user_id.strip():
            raise InvalidSubmissionException("User not authenticated.")

        report = generate_report_from_submission(submission, clock=self.clock)
        self.repository.save_report(user_id, report, submission)

        logger.info(f"Assessment scored for user {user_id}: picIndex={report.pic_index}")
        return report

    def get_report(self, user_id: str) -> InsightXReport:
        """Latest stored report; raises EntityNotFoundException if none."""
        return self.repository.get_report(user_id)
