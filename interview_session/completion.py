"""Complete an in-progress interview and produce its outcome report."""
from __future__ import annotations

import datetime as dt
from typing import NamedTuple, Optional
from uuid import uuid4

from interview_report import InterviewReport, mean, synthesize_report
from observability import log_event
from storage.reports import insert_report

from .models import InterviewSession


class SessionOwnershipError(PermissionError):  # Raised when a user completes someone else's session
    def __init__(self, session_id: str, user_id: str) -> None:
        super().__init__(f"User '{user_id}' does not own interview session '{session_id}'")
        self.session_id = session_id
        self.user_id = user_id


class SessionStateError(ValueError):  # Raised when the session is not in progress
    def __init__(self, session_id: str, status: str) -> None:
        super().__init__(f"Cannot complete interview session '{session_id}' with status: {status}")
        self.session_id = session_id
        self.status = status


class CompletionResult(NamedTuple):
    session: InterviewSession
    report: InterviewReport


def complete_interview(
    session: InterviewSession,
    *,
    user_id: str,
    ended_early: bool = False,
    report_id: Optional[str] = None,
    created_at: Optional[dt.datetime] = None,
    persist: bool = False,
) -> CompletionResult:
    """Mark ``session`` completed and synthesize its report.

    The session overall score is the mean of the per-answer overall scores.
    ``report_id`` and ``created_at`` default to a fresh UUID4 and the current
    UTC time. With ``persist`` the report is written through the report store.
    """

    if not session.belongs_to(user_id):
        raise SessionOwnershipError(session.session_id, user_id)
    if session.status != "in_progress":
        raise SessionStateError(session.session_id, session.status)

    now = dt.datetime.now(dt.timezone.utc)
    completed = session.model_copy(
        update={
            "status": "completed",
            "session_overall_score": mean(session.overall_scores),
            "ended_early": ended_early,
            "completed_at": now,
        }
    )

    report = synthesize_report(
        completed,
        report_id or str(uuid4()),
        created_at or now,
    )
    if persist:
        insert_report(report)

    log_event(
        "report_synthesized",
        completed.session_id,
        report_id=report.report.id,
        status=completed.status,
        score=report.session_overall_score,
        success_probability=report.success_probability,
        gaps=len(report.top_gaps),
        strengths=len(report.strengths),
        ended_early=ended_early,
        persisted=persist,
    )
    return CompletionResult(session=completed, report=report)


__all__ = ["CompletionResult", "SessionOwnershipError", "SessionStateError", "complete_interview"]
