import pytest

from interview_report.competency import (
    OVERALL_COMPETENCY,
    build_competency_breakdown,
    competency_comment,
)


def test_single_overall_bucket():
    breakdown = build_competency_breakdown([90, 85])

    assert list(breakdown) == [OVERALL_COMPETENCY]
    item = breakdown["Overall Performance"]
    assert item.score == 87.5
    assert item.gap == -17.5
    assert item.comment == "Excellent performance demonstrated"


def test_empty_scores_report_full_gap():
    item = build_competency_breakdown([])[OVERALL_COMPETENCY]
    assert item.score == 0
    assert item.gap == 70
    assert item.comment == "Significant improvement needed"


@pytest.mark.parametrize(
    "score, comment",
    [
        (80, "Excellent performance demonstrated"),
        (70, "Strong performance with minor areas for improvement"),
        (60, "Satisfactory performance with room for growth"),
        (50, "Adequate performance but needs improvement"),
        (49.9, "Significant improvement needed"),
    ],
)
def test_comment_bands(score, comment):
    assert competency_comment(score) == comment
