"""Persistence helpers for interview outcome reports."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from interview_report import InterviewReport
from observability import log_event

from .sqlite import get_conn


class ReportRowPayload(BaseModel):
    id: str
    interview_session_id: str
    created_at: str
    session_overall_score: float
    success_probability: float
    competency_breakdown: Dict[str, Dict[str, Any]]
    top_gaps: List[Dict[str, Any]]
    strengths: List[str]
    feedback_summary: Optional[str] = None

    @classmethod
    def from_report(cls, report: InterviewReport, feedback_summary: Optional[str] = None) -> "ReportRowPayload":
        data = report.model_dump(mode="json")
        return cls(
            id=data["report"]["id"],
            interview_session_id=data["session_id"],
            created_at=data["report"]["created_at"],
            session_overall_score=data["session_overall_score"],
            success_probability=data["success_probability"],
            competency_breakdown=data["competency_breakdown"],
            top_gaps=data["top_gaps"],
            strengths=data["strengths"],
            feedback_summary=feedback_summary,
        )

    def to_report(self) -> InterviewReport:
        return InterviewReport.model_validate(
            {
                "session_id": self.interview_session_id,
                "session_overall_score": self.session_overall_score,
                "success_probability": self.success_probability,
                "competency_breakdown": self.competency_breakdown,
                "top_gaps": self.top_gaps,
                "strengths": self.strengths,
                "report": {"id": self.id, "created_at": self.created_at},
            }
        )


def insert_report(report: InterviewReport, feedback_summary: Optional[str] = None) -> str:
    """Insert a report row and return the report id.

    A session owns at most one report; a second insert for the same session
    raises ``sqlite3.IntegrityError``.
    """

    payload = ReportRowPayload.from_report(report, feedback_summary)
    with get_conn() as conn:
        conn.execute(
            """INSERT INTO interview_reports
               (id, interview_session_id, created_at, session_overall_score, success_probability,
                competency_breakdown, top_gaps, strengths, feedback_summary)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                payload.id,
                payload.interview_session_id,
                payload.created_at,
                payload.session_overall_score,
                payload.success_probability,
                json.dumps(payload.competency_breakdown),
                json.dumps(payload.top_gaps),
                json.dumps(payload.strengths),
                payload.feedback_summary,
            ),
        )
    log_event("report_stored", payload.interview_session_id, report_id=payload.id)
    return payload.id


def _load_row(session_id: str):
    with get_conn() as conn:
        row = conn.execute(
            """SELECT id, interview_session_id, created_at, session_overall_score, success_probability,
                      competency_breakdown, top_gaps, strengths, feedback_summary
               FROM interview_reports
               WHERE interview_session_id = ?""",
            (session_id,),
        ).fetchone()
    if row is None:
        raise KeyError(f"Report for session '{session_id}' not found")
    return row


def _payload_from_row(row) -> ReportRowPayload:
    return ReportRowPayload(
        id=row["id"],
        interview_session_id=row["interview_session_id"],
        created_at=row["created_at"],
        session_overall_score=row["session_overall_score"],
        success_probability=row["success_probability"],
        competency_breakdown=json.loads(row["competency_breakdown"]),
        top_gaps=json.loads(row["top_gaps"]),
        strengths=json.loads(row["strengths"]),
        feedback_summary=row["feedback_summary"],
    )


def load_report(session_id: str) -> InterviewReport:
    """Load the stored report for ``session_id``.

    Raises:
        KeyError: no report has been stored for the session.
    """

    return _payload_from_row(_load_row(session_id)).to_report()


def load_feedback_summary(session_id: str) -> Optional[str]:
    """Return the free-text summary stored alongside the report, if any."""

    return _load_row(session_id)["feedback_summary"]


__all__ = ["ReportRowPayload", "insert_report", "load_feedback_summary", "load_report"]
