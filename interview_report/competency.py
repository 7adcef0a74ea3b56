"""Competency score breakdown for outcome reports.

Only a single aggregate row is produced for now. Mapping asked questions onto
job-profile competencies (name, weight, depth) would replace it with one row
per competency, but the weighting rules for that are not settled.
"""
from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

from .scoring import mean
from .types import CompetencyBreakdownItem

OVERALL_COMPETENCY = "Overall Performance"
TARGET_SCORE = 70.0

COMMENT_BANDS: Tuple[Tuple[float, str], ...] = (
    (80.0, "Excellent performance demonstrated"),
    (70.0, "Strong performance with minor areas for improvement"),
    (60.0, "Satisfactory performance with room for growth"),
    (50.0, "Adequate performance but needs improvement"),
)
COMMENT_FLOOR = "Significant improvement needed"


def competency_comment(score: float) -> str:
    for lower_bound, comment in COMMENT_BANDS:
        if score >= lower_bound:
            return comment
    return COMMENT_FLOOR


def build_competency_breakdown(overall_scores: Optional[Sequence[float]]) -> Dict[str, CompetencyBreakdownItem]:
    score = mean(overall_scores)
    return {
        OVERALL_COMPETENCY: CompetencyBreakdownItem(
            score=score,
            gap=TARGET_SCORE - score,
            comment=competency_comment(score),
        )
    }


__all__ = [
    "COMMENT_BANDS",
    "COMMENT_FLOOR",
    "OVERALL_COMPETENCY",
    "TARGET_SCORE",
    "build_competency_breakdown",
    "competency_comment",
]
