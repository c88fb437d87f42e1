"""
Question Bank
insightx/scoring/question_bank.py

Fixed question-id tables for the three scored assessment sections and the
cognitive answer key. These are configuration data, kept literal so the
scores stay reproducible across releases.

The tables are validated once, when this module is imported. A defect
(empty group, missing dimension, id without an answer) raises
QuestionBankConfigurationError at startup rather than surfacing as a
division by zero during scoring.
"""

from typing import Dict, List, Mapping, Tuple

from insightx.core.exceptions import QuestionBankConfigurationError
from insightx.models.enumerations import (
    CognitiveAbility,
    InterestArea,
    PersonalityTrait,
)


# ---------------------------------------------------------------------------
# Likert scale
# ---------------------------------------------------------------------------

LIKERT_MIN = 1
LIKERT_MAX = 5


# ---------------------------------------------------------------------------
# Personality (Big Five)
# ---------------------------------------------------------------------------

PERSONALITY_TRAIT_QUESTIONS: Dict[PersonalityTrait, Tuple[str, ...]] = {
    PersonalityTrait.OPENNESS:          ("p3", "p7", "p11", "p17"),
    PersonalityTrait.CONSCIENTIOUSNESS: ("p2", "p6", "p8", "p14", "p18"),
    PersonalityTrait.EXTRAVERSION:      ("p1", "p12", "p15"),
    PersonalityTrait.AGREEABLENESS:     ("p5", "p9", "p13"),
    PersonalityTrait.NEUROTICISM:       ("p4", "p10", "p16", "p19"),
}


# ---------------------------------------------------------------------------
# Interests (Holland Codes / RIASEC)
# ---------------------------------------------------------------------------

INTEREST_AREA_QUESTIONS: Dict[InterestArea, Tuple[str, ...]] = {
    InterestArea.REALISTIC:     ("i3", "i9", "i15", "i19"),
    InterestArea.INVESTIGATIVE: ("i5", "i11", "i17", "i20"),
    InterestArea.ARTISTIC:      ("i1", "i6", "i12", "i18"),
    InterestArea.SOCIAL:        ("i2", "i8", "i14"),
    InterestArea.ENTERPRISING:  ("i4", "i10", "i16"),
    InterestArea.CONVENTIONAL:  ("i7", "i13"),
}


# ---------------------------------------------------------------------------
# Cognitive abilities
#
# Answers are compared by exact string equality, case and whitespace
# included. Ability groups overlap: c2, c5, c11 and c13 count towards both
# problem solving and numerical aptitude. c15 is asked but not scored.
# ---------------------------------------------------------------------------

COGNITIVE_ANSWER_KEY: Dict[str, str] = {
    "c1": "Carrot",   "c2": "32",      "c3": "Swimming", "c4": "Heptagon",
    "c5": "30 km",    "c6": "15",      "c7": "Desk",     "c8": "True",
    "c9": "IJ",       "c10": "Color",  "c11": "4 cups",  "c12": "Fearful",
    "c13": "4 cakes", "c14": "R",      "c15": "10",      "c16": "Yes",
    "c17": "Sleepy",  "c18": "5",      "c19": "EV",      "c20": "20",
}

COGNITIVE_ABILITY_QUESTIONS: Dict[CognitiveAbility, Tuple[str, ...]] = {
    CognitiveAbility.LOGICAL_REASONING:  ("c1", "c4", "c8", "c9", "c16", "c19"),
    CognitiveAbility.VERBAL_ABILITY:     ("c3", "c7", "c10", "c12", "c17"),
    CognitiveAbility.PROBLEM_SOLVING:    ("c2", "c5", "c6", "c11", "c13", "c14"),
    CognitiveAbility.NUMERICAL_APTITUDE: ("c2", "c5", "c11", "c13", "c18", "c20"),
}


def _check_likert_table(
    name: str,
    table: Mapping,
    dimensions,
) -> List[str]:
    problems = []
    missing = [d.value for d in dimensions if d not in table]
    if missing:
        problems.append(f"{name}: no question group for {missing}")

    seen: Dict[str, str] = {}
    for dimension, ids in table.items():
        if not ids:
            problems.append(f"{name}: empty question group for {dimension.value}")
        for qid in ids:
            if qid in seen:
                problems.append(
                    f"{name}: {qid} used by both {seen[qid]} and {dimension.value}"
                )
            seen[qid] = dimension.value
    return problems


def validate_question_bank(
    personality: Mapping = PERSONALITY_TRAIT_QUESTIONS,
    interest: Mapping = INTEREST_AREA_QUESTIONS,
    cognitive: Mapping = COGNITIVE_ABILITY_QUESTIONS,
    answer_key: Mapping[str, str] = COGNITIVE_ANSWER_KEY,
) -> None:
    """
    Validate the question-bank tables.

    Raises:
        QuestionBankConfigurationError listing every problem found.
    """
    problems = []
    problems += _check_likert_table("personality", personality, PersonalityTrait)
    problems += _check_likert_table("interest", interest, InterestArea)

    missing = [a.value for a in CognitiveAbility if a not in cognitive]
    if missing:
        problems.append(f"cognitive: no question group for {missing}")
    for ability, ids in cognitive.items():
        if not ids:
            problems.append(f"cognitive: empty question group for {ability.value}")
        unkeyed = [qid for qid in ids if qid not in answer_key]
        if unkeyed:
            problems.append(f"cognitive: {ability.value} has no answer for {unkeyed}")

    if problems:
        raise QuestionBankConfigurationError(problems)


validate_question_bank()
