"""Strength statements derived from dimension and overall means."""
from __future__ import annotations

from typing import Dict, List

from .dimensions import DimensionMeans

STRENGTH_THRESHOLD = 8.0

STRENGTH_CATALOG: Dict[str, str] = {
    "clarity": "Excellent clarity and structure in answers",
    "completeness": "Comprehensive and thorough responses",
    "relevance": "Strong alignment with role requirements",
    "confidence": "Confident and articulate communication",
}

SOLID_OVERALL = "Solid overall performance"
GOOD_EFFORT = "Good effort and engagement"
COMPLETED_FALLBACK = "Completed the interview"


def identify_strengths(means: DimensionMeans, overall_mean: float) -> List[str]:
    """Return the strengths for a session; never empty."""

    strengths = [
        STRENGTH_CATALOG[dimension]
        for dimension, value in means.items()
        if value >= STRENGTH_THRESHOLD
    ]

    if not strengths:
        # Bands overlap on purpose: 60+ earns both lines
        if overall_mean >= 60:
            strengths.append(SOLID_OVERALL)
        if overall_mean >= 50:
            strengths.append(GOOD_EFFORT)

    return strengths or [COMPLETED_FALLBACK]


__all__ = [
    "COMPLETED_FALLBACK",
    "GOOD_EFFORT",
    "SOLID_OVERALL",
    "STRENGTH_CATALOG",
    "STRENGTH_THRESHOLD",
    "identify_strengths",
]
