"""Score aggregation and success-probability banding."""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

# (lower bound inclusive, probability), checked high to low
SUCCESS_BANDS: Tuple[Tuple[float, float], ...] = (
    (80.0, 0.85),
    (70.0, 0.72),
    (60.0, 0.55),
    (50.0, 0.40),
)
SUCCESS_FLOOR = 0.25


def mean(values: Optional[Sequence[float]]) -> float:
    """Arithmetic mean of ``values``; 0.0 when there is nothing to average.

    An empty sequence is indistinguishable from a run of zero scores.
    """

    if not values:
        return 0.0
    return sum(values) / len(values)


def estimate_success_probability(overall_score: float) -> float:
    """Map a session overall score onto the fixed success bands."""

    for lower_bound, probability in SUCCESS_BANDS:
        if overall_score >= lower_bound:
            return probability
    return SUCCESS_FLOOR


__all__ = ["SUCCESS_BANDS", "SUCCESS_FLOOR", "estimate_success_probability", "mean"]
