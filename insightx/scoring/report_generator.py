"""
scoring/report_generator.py

Assembles an InsightX report from the three raw response sets:

    personality answers ──► compute_personality_profile ──┐
    interest answers ─────► compute_interest_profile ─────┤──► PIC Index ──► InsightXReport
    cognitive answers ────► compute_cognitive_profile ────┘

No I/O. The only non-deterministic input is the clock, which callers can pin.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional

import structlog

from insightx.models.profiles import InsightXReport
from insightx.models.submission import AssessmentSubmission
from insightx.scoring.pic_calculator import compute_composite_index
from insightx.scoring.profile_calculator import (
    compute_cognitive_profile,
    compute_interest_profile,
    compute_personality_profile,
)

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_report(
    personality_responses: Optional[Mapping[str, Any]],
    interest_responses: Optional[Mapping[str, Any]],
    cognitive_responses: Optional[Mapping[str, Any]],
    clock: Optional[Clock] = None,
) -> InsightXReport:
    """
    Score all three sections and stamp the report.

    Args:
        personality_responses: Likert answers keyed p1..p19.
        interest_responses: Likert answers keyed i1..i20.
        cognitive_responses: Selected options keyed c1..c20.
        clock: Returns the generation timestamp. Defaults to UTC now.

    Returns:
        A frozen InsightXReport.
    """
    personality = compute_personality_profile(personality_responses)
    interest = compute_interest_profile(interest_responses)
    cognitive = compute_cognitive_profile(cognitive_responses)
    pic_index = compute_composite_index(personality, interest, cognitive)

    report = InsightXReport(
        personality_profile=personality,
        interest_profile=interest,
        cognitive_profile=cognitive,
        pic_index=pic_index,
        generated_at=(clock or utc_now)(),
    )

    logger.info(
        "insightx_report_generated",
        personality=personality.scores(),
        interest=interest.scores(),
        cognitive=cognitive.scores(),
        pic_index=pic_index,
        generated_at=report.generated_at.isoformat(),
    )
    return report


def generate_report_from_submission(
    submission: AssessmentSubmission,
    clock: Optional[Clock] = None,
) -> InsightXReport:
    """generate_report() over the scored sections of a submission."""
    return generate_report(
        submission.personality,
        submission.interest,
        submission.cognitive_abilities,
        clock=clock,
    )
