"""
Likert Trait Scorer
insightx/scoring/trait_scorer.py

Converts the Likert answers of one question group into a 0-100 trait score.

Formula:
    value_i   = parsed answer, or the scale midpoint when missing/invalid
    mean      = Σ value_i / n
    score     = round((mean − scale_min) / (scale_max − scale_min) × 100)

On the default 1-5 scale: 1 → 0, 3 → 50, 5 → 100. The result is clamped to
[0, 100], so out-of-scale answers cannot escape the range.
"""

from decimal import Decimal, InvalidOperation, ROUND_DOWN
from typing import Any, Mapping, Optional, Sequence

import structlog

from insightx.scoring.question_bank import LIKERT_MAX, LIKERT_MIN
from insightx.scoring.utils import mean, to_score

logger = structlog.get_logger(__name__)

# Answers of a million or more are not answers
_MAX_DIGITS = 6


def parse_likert(raw: Any) -> Optional[Decimal]:
    """
    Parse one raw Likert answer to a whole number.

    Accepts ints and numeric strings; a fractional part is truncated toward
    zero ("4.7" → 4), as an integer parse would. Returns None for anything
    that is not a finite number (None, blanks, "abc", "NaN", booleans) or
    whose magnitude is a million or more.
    """
    if raw is None or isinstance(raw, bool):
        return None
    try:
        if isinstance(raw, int):
            value = Decimal(raw)
        else:
            value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite() or value.adjusted() >= _MAX_DIGITS:
        return None
    return value.to_integral_value(rounding=ROUND_DOWN)


def compute_trait_score(
    question_ids: Sequence[str],
    responses: Mapping[str, Any],
    scale_min: int = LIKERT_MIN,
    scale_max: int = LIKERT_MAX,
) -> int:
    """
    Score one trait from its question group.

    Args:
        question_ids: Question ids belonging to the trait (non-empty).
        responses: Raw answers keyed by question id. Absent ids are fine.
        scale_min: Lowest point of the Likert scale.
        scale_max: Highest point of the Likert scale.

    Returns:
        Integer score in [0, 100].

    Raises:
        ValueError: if question_ids is empty or the scale is degenerate.
            Both are programming errors, not data errors.

    Examples:
        >>> compute_trait_score(["p1", "p2"], {"p1": "5", "p2": "4"})
        88
        >>> compute_trait_score(["p1", "p2"], {})
        50
    """
    if not question_ids:
        raise ValueError("question_ids must not be empty")
    if scale_max <= scale_min:
        raise ValueError(
            f"scale_max must exceed scale_min, got [{scale_min}, {scale_max}]"
        )

    lo = Decimal(scale_min)
    hi = Decimal(scale_max)
    midpoint = (lo + hi) / Decimal("2")

    values = []
    defaulted = 0
    for qid in question_ids:
        value = parse_likert(responses.get(qid))
        if value is None:
            value = midpoint
            defaulted += 1
        values.append(value)

    average = mean(values)
    score = to_score((average - lo) / (hi - lo) * Decimal("100"))

    logger.debug(
        "trait_score_calculated",
        question_count=len(question_ids),
        defaulted_count=defaulted,
        mean=float(average),
        score=score,
    )
    return score
