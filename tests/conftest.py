# tests/conftest.py

"""
Pytest Fixtures - shared answer sets, clock and store fixtures.

QUESTION ID REFERENCE:
- Personality: p1..p19 (Likert 1-5)
- Interest:    i1..i20 (Likert 1-5)
- Cognitive:   c1..c20 (exact-match options, see COGNITIVE_ANSWER_KEY)
"""

import pytest
from datetime import datetime, timezone

from insightx.config import get_settings
from insightx.core import dependencies
from insightx.models.submission import AssessmentSubmission
from insightx.repositories.document_store import InMemoryDocumentStore
from insightx.repositories.report_repository import ReportRepository
from insightx.scoring.question_bank import COGNITIVE_ANSWER_KEY
from insightx.services.report_service import InsightXReportService


PERSONALITY_IDS = [f"p{i}" for i in range(1, 20)]
INTEREST_IDS = [f"i{i}" for i in range(1, 21)]
COGNITIVE_IDS = [f"c{i}" for i in range(1, 21)]

FIXED_TIME = datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)


def likert(ids, value):
    """Every id answered with the same Likert value (as a string)."""
    return {qid: str(value) for qid in ids}


# =============================================================================
# ANSWER SET FIXTURES
# =============================================================================

@pytest.fixture
def neutral_personality():
    return likert(PERSONALITY_IDS, 3)


@pytest.fixture
def neutral_interest():
    return likert(INTEREST_IDS, 3)


@pytest.fixture
def top_personality():
    return likert(PERSONALITY_IDS, 5)


@pytest.fixture
def top_interest():
    return likert(INTEREST_IDS, 5)


@pytest.fixture
def perfect_cognitive():
    """Every cognitive question answered exactly as the key."""
    return dict(COGNITIVE_ANSWER_KEY)


@pytest.fixture
def wrong_cognitive():
    """Every cognitive question answered, none correctly."""
    return {qid: "Not an option" for qid in COGNITIVE_IDS}


@pytest.fixture
def submission(top_personality, neutral_interest, perfect_cognitive):
    return AssessmentSubmission(
        personality=top_personality,
        interest=neutral_interest,
        cognitiveAbilities=perfect_cognitive,
        selfReportedSkills={"communication": "4"},
        cvq={"v1": "5"},
    )


# =============================================================================
# CLOCK / STORE FIXTURES
# =============================================================================

@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def repository(store):
    return ReportRepository(store)


@pytest.fixture
def service(repository, fixed_clock):
    return InsightXReportService(repository, clock=fixed_clock)


@pytest.fixture
def clear_dependency_caches():
    """Reset cached settings and singletons around a test."""
    def _clear():
        get_settings.cache_clear()
        dependencies.get_document_store.cache_clear()
        dependencies.get_report_repository.cache_clear()
        dependencies.get_report_service.cache_clear()

    _clear()
    yield
    _clear()
