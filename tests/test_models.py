"""
Model Tests - InsightX Scoring Engine
tests/test_models.py

Validation, immutability and serialization of profiles, reports and
submissions.
"""

import pytest
from datetime import datetime, timezone, timedelta
from pydantic import ValidationError

from insightx.models.profiles import (
    CognitiveProfile,
    InsightXReport,
    InterestProfile,
    PersonalityProfile,
)
from insightx.models.submission import AssessmentSubmission
from insightx.scoring.report_generator import generate_report


@pytest.fixture
def personality():
    return PersonalityProfile(
        openness=70, conscientiousness=60, extraversion=50, agreeableness=40, neuroticism=30
    )


@pytest.fixture
def report(top_personality, neutral_interest, perfect_cognitive, fixed_clock):
    return generate_report(top_personality, neutral_interest, perfect_cognitive, clock=fixed_clock)


class TestProfiles:

    def test_score_above_100_rejected(self):
        with pytest.raises(ValidationError):
            PersonalityProfile(
                openness=101, conscientiousness=50, extraversion=50, agreeableness=50, neuroticism=50
            )

    def test_negative_score_rejected(self):
        with pytest.raises(ValidationError):
            InterestProfile(
                realistic=-1, investigative=0, artistic=0, social=0, enterprising=0, conventional=0
            )

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            PersonalityProfile(openness=50, conscientiousness=50)

    def test_profiles_are_frozen(self, personality):
        with pytest.raises(ValidationError):
            personality.openness = 99

    def test_scores_in_declaration_order(self, personality):
        assert list(personality.scores()) == [
            "openness", "conscientiousness", "extraversion", "agreeableness", "neuroticism"
        ]

    def test_cognitive_accepts_alias_and_field_name(self):
        by_alias = CognitiveProfile(
            logicalReasoning=10, verbalAbility=20, problemSolving=30, numericalAptitude=40
        )
        by_name = CognitiveProfile(
            logical_reasoning=10, verbal_ability=20, problem_solving=30, numerical_aptitude=40
        )
        assert by_alias == by_name
        assert by_alias.model_dump(by_alias=True) == {
            "logicalReasoning": 10,
            "verbalAbility": 20,
            "problemSolving": 30,
            "numericalAptitude": 40,
        }


class TestInsightXReport:

    def test_document_uses_camel_case(self, report):
        doc = report.to_document()
        assert set(doc) == {
            "personalityProfile", "interestProfile", "cognitiveProfile", "picIndex", "generatedAt"
        }
        assert doc["cognitiveProfile"]["logicalReasoning"] == 100
        assert isinstance(doc["generatedAt"], str)

    def test_document_round_trip(self, report):
        assert InsightXReport.model_validate(report.to_document()) == report

    def test_report_is_frozen(self, report):
        with pytest.raises(ValidationError):
            report.pic_index = 0
        with pytest.raises(ValidationError):
            report.generated_at = datetime.now(timezone.utc)

    def test_naive_timestamp_taken_as_utc(self, report):
        naive = report.model_dump()
        naive["generated_at"] = datetime(2026, 1, 1, 12, 0)
        rebuilt = InsightXReport(**naive)
        assert rebuilt.generated_at == datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_timestamp_normalized_to_utc(self, report):
        data = report.model_dump()
        data["generated_at"] = datetime(2026, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        rebuilt = InsightXReport(**data)
        assert rebuilt.generated_at.utcoffset() == timedelta(0)
        assert rebuilt.generated_at.hour == 12


class TestAssessmentSubmission:

    def test_defaults_to_empty_sections(self):
        submission = AssessmentSubmission()
        assert submission.personality == {}
        assert submission.cognitive_abilities == {}

    def test_camel_case_input(self):
        submission = AssessmentSubmission.model_validate(
            {"cognitiveAbilities": {"c1": "Carrot"}, "selfReportedSkills": {"s1": "3"}}
        )
        assert submission.cognitive_abilities == {"c1": "Carrot"}
        assert submission.self_reported_skills == {"s1": "3"}

    def test_dump_by_alias(self, submission):
        dumped = submission.model_dump(by_alias=True)
        assert set(dumped) == {
            "personality", "interest", "cognitiveAbilities", "selfReportedSkills", "cvq"
        }
