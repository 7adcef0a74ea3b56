"""Tests for outcome report synthesis over session snapshots."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from interview_report import InterviewReport, Priority, synthesize_report

CREATED = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


def test_end_to_end_scenario(snapshot):
    session = snapshot(
        overall_scores=[90, 85],
        clarity_scores=[9, 9],
        completeness_scores=[4, 4],
        relevance_scores=[9, 9],
        confidence_scores=[9, 9],
        session_overall_score=87,
    )

    report = synthesize_report(session, "r-1", CREATED)

    assert report.success_probability == 0.85
    assert len(report.top_gaps) == 1
    assert report.top_gaps[0].gap == "Completeness of answers"
    assert report.top_gaps[0].priority is Priority.HIGH
    assert report.strengths == (
        "Excellent clarity and structure in answers",
        "Strong alignment with role requirements",
        "Confident and articulate communication",
    )
    overall = report.competency_breakdown["Overall Performance"]
    assert overall.score == 87.5
    assert overall.gap == -17.5
    assert report.session_overall_score == 87
    assert report.report.id == "r-1"
    assert report.report.created_at == CREATED


def test_missing_overall_score_reads_as_zero(snapshot):
    report = synthesize_report(snapshot(session_overall_score=None), "r-2", CREATED)

    assert report.session_overall_score == 0
    assert report.success_probability == 0.25
    assert report.strengths == ("Completed the interview",)
    assert [g.priority for g in report.top_gaps] == [Priority.HIGH] * 3


def test_none_sequences_are_treated_as_empty(snapshot):
    session = snapshot(clarity_scores=None, overall_scores=None, session_overall_score=72)
    report = synthesize_report(session, "r-3", CREATED)

    assert report.success_probability == 0.72
    assert report.competency_breakdown["Overall Performance"].score == 0


def test_synthesis_is_idempotent(snapshot):
    session = snapshot(overall_scores=[55, 60], clarity_scores=[6, 7], session_overall_score=57.5)
    assert synthesize_report(session, "r-4", CREATED) == synthesize_report(session, "r-4", CREATED)


def test_payload_field_names(snapshot):
    report = synthesize_report(snapshot(session_overall_score=61), "r-5", CREATED)
    payload = report.to_payload()

    assert set(payload) == {
        "sessionId",
        "session_overall_score",
        "success_probability",
        "competency_breakdown",
        "top_gaps",
        "strengths",
        "report",
    }
    assert payload["sessionId"] == "s-1"
    assert payload["report"] == {"id": "r-5", "created_at": "2024-05-01T12:30:00Z"}
    assert payload["top_gaps"][0]["priority"] == "HIGH"


def test_payload_json_round_trip(snapshot):
    session = snapshot(
        overall_scores=[72.5, 64.25],
        clarity_scores=[6, 8],
        completeness_scores=[9, 9],
        relevance_scores=[5, 4],
        confidence_scores=[8, 8],
        session_overall_score=68.375,
    )
    report = synthesize_report(session, "r-6", CREATED)

    restored = InterviewReport.model_validate_json(report.model_dump_json(by_alias=True))
    assert restored == report


def test_report_containers_cannot_be_edited(snapshot):
    report = synthesize_report(snapshot(session_overall_score=40), "r-7", CREATED)

    with pytest.raises(AttributeError):
        report.strengths.clear()  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        report.top_gaps.clear()  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        report.competency_breakdown.clear()  # type: ignore[attr-defined]
    with pytest.raises(TypeError):
        report.competency_breakdown["Overall Performance"] = None  # type: ignore[index]
    with pytest.raises(ValidationError):
        report.strengths = ()  # type: ignore[misc]

    assert report.strengths == ("Completed the interview",)
    assert len(report.top_gaps) == 3
    assert list(report.competency_breakdown) == ["Overall Performance"]
