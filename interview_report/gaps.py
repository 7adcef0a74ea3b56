"""Classify weak evaluation dimensions into a prioritized gap list."""
from __future__ import annotations

from typing import Dict, List, Tuple

from .dimensions import DimensionMeans
from .types import Priority, TopGap

GAP_THRESHOLD = 7.0
HIGH_PRIORITY_THRESHOLD = 5.0
MAX_TOP_GAPS = 3

# dimension -> (gap label, remediation action)
GAP_CATALOG: Dict[str, Tuple[str, str]] = {
    "clarity": (
        "Answer clarity and structure",
        "Practice STAR method and structured responses",
    ),
    "completeness": (
        "Completeness of answers",
        "Ensure all parts of the question are addressed",
    ),
    "relevance": (
        "Answer relevance to role requirements",
        "Study job description and align examples with requirements",
    ),
    "confidence": (
        "Communication confidence",
        "Practice speaking aloud and reduce filler words",
    ),
}


def _priority_for(value: float) -> Priority:
    # LOW is never assigned by the current rules
    return Priority.HIGH if value < HIGH_PRIORITY_THRESHOLD else Priority.MEDIUM


def identify_top_gaps(means: DimensionMeans) -> List[TopGap]:
    """Return at most three gaps, HIGH before MEDIUM.

    Dimensions are scanned in evaluation order and the sort is stable, so
    equal priorities keep clarity, completeness, relevance, confidence order.
    """

    gaps: List[TopGap] = []
    for dimension, value in means.items():
        if value >= GAP_THRESHOLD:
            continue
        label, action = GAP_CATALOG[dimension]
        gaps.append(TopGap(gap=label, priority=_priority_for(value), action=action))

    ranked = sorted(gaps, key=lambda item: item.priority.rank)
    return ranked[:MAX_TOP_GAPS]


__all__ = ["GAP_CATALOG", "GAP_THRESHOLD", "HIGH_PRIORITY_THRESHOLD", "MAX_TOP_GAPS", "identify_top_gaps"]
