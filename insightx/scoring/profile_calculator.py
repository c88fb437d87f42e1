"""
Profile Calculator
insightx/scoring/profile_calculator.py

Builds the three assessment profiles from raw answers:

    personality  - Big Five, Likert averaging over PERSONALITY_TRAIT_QUESTIONS
    interest     - RIASEC, Likert averaging over INTEREST_AREA_QUESTIONS
    cognitive    - accuracy against COGNITIVE_ANSWER_KEY per ability group

None of these raise for incomplete or malformed answers. Missing Likert
answers count as the scale midpoint; missing or mistyped cognitive answers
count as incorrect.
"""

from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from insightx.models.profiles import CognitiveProfile, InterestProfile, PersonalityProfile
from insightx.scoring.question_bank import (
    COGNITIVE_ABILITY_QUESTIONS,
    COGNITIVE_ANSWER_KEY,
    INTEREST_AREA_QUESTIONS,
    PERSONALITY_TRAIT_QUESTIONS,
)
from insightx.scoring.trait_scorer import compute_trait_score
from insightx.scoring.utils import to_score


def compute_personality_profile(
    responses: Optional[Mapping[str, Any]],
) -> PersonalityProfile:
    """Big Five scores from personality answers (p1..p19)."""
    responses = responses or {}
    return PersonalityProfile(**{
        trait.value: compute_trait_score(ids, responses)
        for trait, ids in PERSONALITY_TRAIT_QUESTIONS.items()
    })


def compute_interest_profile(
    responses: Optional[Mapping[str, Any]],
) -> InterestProfile:
    """Holland Code (RIASEC) scores from interest answers (i1..i20)."""
    responses = responses or {}
    return InterestProfile(**{
        area.value: compute_trait_score(ids, responses)
        for area, ids in INTEREST_AREA_QUESTIONS.items()
    })


def compute_accuracy_score(
    question_ids: Sequence[str],
    responses: Mapping[str, Any],
    answer_key: Mapping[str, str] = COGNITIVE_ANSWER_KEY,
) -> int:
    """
    Percentage of question_ids answered exactly as in answer_key.

    Formula:
        score = round(100 × correct / n)
    """
    if not question_ids:
        raise ValueError("question_ids must not be empty")

    correct = sum(
        1 for qid in question_ids
        if qid in answer_key and responses.get(qid) == answer_key[qid]
    )
    return to_score(Decimal(100) * Decimal(correct) / Decimal(len(question_ids)))


def compute_cognitive_profile(
    responses: Optional[Mapping[str, Any]],
) -> CognitiveProfile:
    """Ability scores from cognitive answers (c1..c20)."""
    responses = responses or {}
    return CognitiveProfile(**{
        ability.value: compute_accuracy_score(ids, responses)
        for ability, ids in COGNITIVE_ABILITY_QUESTIONS.items()
    })
