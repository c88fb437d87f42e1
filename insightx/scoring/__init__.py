"""
scoring/ - InsightX Scoring Engine

Modules:
    utils.py               - Decimal utilities (round half up, clamp, mean)
    question_bank.py       - Fixed question-id tables and cognitive answer key
    trait_scorer.py        - Likert group → 0-100 trait score
    profile_calculator.py  - Personality, interest and cognitive profiles
    pic_calculator.py      - PIC Index composite
    report_generator.py    - InsightX report assembly

Importing this package validates the question bank.
"""

from insightx.scoring.pic_calculator import compute_composite_index
from insightx.scoring.profile_calculator import (
    compute_cognitive_profile,
    compute_interest_profile,
    compute_personality_profile,
)
from insightx.scoring.report_generator import generate_report
from insightx.scoring.trait_scorer import compute_trait_score

__all__ = [
    "compute_trait_score",
    "compute_personality_profile",
    "compute_interest_profile",
    "compute_cognitive_profile",
    "compute_composite_index",
    "generate_report",
]
