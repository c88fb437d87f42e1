"""
scoring/pic_calculator.py

Computes the PIC Index (Personality, Interest, Cognitive), the single
composite score summarizing the three assessment profiles.

Formula:
    P = 0.30×O + 0.30×C + 0.20×E + 0.10×A + 0.10×(100 − N)
    I = 0.6 × max(RIASEC) + 0.4 × mean(RIASEC)
    K = mean(logical, verbal, problem solving, numerical)
    PIC = round(0.4×P + 0.3×I + 0.3×K)

All sums are Decimal; the final rounding is half up on the exact value, so
a tie such as 54.5 always gives 55.

Neuroticism is inverted so emotional stability contributes positively.
The interest term rewards one clear, strong interest over a flat profile.
Result is an integer in [0, 100].
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict

import structlog

from insightx.models.profiles import CognitiveProfile, InterestProfile, PersonalityProfile
from insightx.scoring.utils import mean, to_score

logger = structlog.get_logger(__name__)

# Personality trait weights (sum = 1.0); neuroticism applies to 100 − N
PERSONALITY_WEIGHTS: Dict[str, Decimal] = {
    "openness":          Decimal("0.30"),
    "conscientiousness": Decimal("0.30"),
    "extraversion":      Decimal("0.20"),
    "agreeableness":     Decimal("0.10"),
    "neuroticism":       Decimal("0.10"),
}

INTEREST_PEAK_WEIGHT = Decimal("0.6")
INTEREST_MEAN_WEIGHT = Decimal("0.4")

# Section weights in the final blend (sum = 1.0)
W_PERSONALITY = Decimal("0.4")
W_INTEREST = Decimal("0.3")
W_COGNITIVE = Decimal("0.3")


@dataclass(frozen=True)
class PICResult:
    """Output of composite_breakdown()."""
    pic_index: int                # [0, 100]
    personality_score: Decimal    # P, quantized to 0.01
    interest_score: Decimal       # I, quantized to 0.01
    cognitive_score: Decimal      # K, quantized to 0.01
    w_personality: Decimal
    w_interest: Decimal
    w_cognitive: Decimal


def personality_component(personality: PersonalityProfile) -> Decimal:
    """Weighted Big Five sub-score, neuroticism inverted."""
    total = Decimal("0")
    for trait, weight in PERSONALITY_WEIGHTS.items():
        value = Decimal(getattr(personality, trait))
        if trait == "neuroticism":
            value = Decimal("100") - value
        total += weight * value
    return total


def interest_component(interest: InterestProfile) -> Decimal:
    """Interest clarity: peak interest blended with the average."""
    values = [Decimal(v) for v in interest.scores().values()]
    return INTEREST_PEAK_WEIGHT * max(values) + INTEREST_MEAN_WEIGHT * mean(values)


def cognitive_component(cognitive: CognitiveProfile) -> Decimal:
    """Plain average of the four ability scores."""
    return mean(Decimal(v) for v in cognitive.scores().values())


def composite_breakdown(
    personality: PersonalityProfile,
    interest: InterestProfile,
    cognitive: CognitiveProfile,
) -> PICResult:
    """
    Calculate the PIC Index with its sub-scores.

    Examples:
        >>> p = PersonalityProfile(openness=50, conscientiousness=50,
        ...     extraversion=50, agreeableness=50, neuroticism=50)
        >>> i = InterestProfile(realistic=50, investigative=50, artistic=50,
        ...     social=50, enterprising=50, conventional=50)
        >>> k = CognitiveProfile(logical_reasoning=0, verbal_ability=0,
        ...     problem_solving=0, numerical_aptitude=0)
        >>> composite_breakdown(p, i, k).pic_index
        35
    """
    p_score = personality_component(personality)
    i_score = interest_component(interest)
    k_score = cognitive_component(cognitive)

    pic = to_score(W_PERSONALITY * p_score + W_INTEREST * i_score + W_COGNITIVE * k_score)

    logger.info(
        "pic_index_calculated",
        personality_score=float(p_score),
        interest_score=float(i_score),
        cognitive_score=float(k_score),
        pic_index=pic,
    )

    return PICResult(
        pic_index=pic,
        personality_score=p_score.quantize(Decimal("0.01")),
        interest_score=i_score.quantize(Decimal("0.01")),
        cognitive_score=k_score.quantize(Decimal("0.01")),
        w_personality=W_PERSONALITY,
        w_interest=W_INTEREST,
        w_cognitive=W_COGNITIVE,
    )


def compute_composite_index(
    personality: PersonalityProfile,
    interest: InterestProfile,
    cognitive: CognitiveProfile,
) -> int:
    """PIC Index only; see composite_breakdown() for the sub-scores."""
    return composite_breakdown(personality, interest, cognitive).pic_index
