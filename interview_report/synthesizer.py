"""Assemble the outcome report for a completed interview session."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Protocol, Sequence

from .competency import build_competency_breakdown
from .dimensions import DimensionMeans
from .gaps import identify_top_gaps
from .scoring import estimate_success_probability, mean
from .strengths import identify_strengths
from .types import InterviewReport, ReportRef

logger = logging.getLogger(__name__)


class SessionSnapshot(Protocol):
    """Read-only view of a session that report synthesis depends on.

    Score sequences are parallel and indexed by answer order. ``None`` is
    accepted wherever a sequence is expected and reads as empty.
    """

    @property
    def session_id(self) -> str: ...

    @property
    def questions_asked(self) -> Sequence[object]: ...

    @property
    def clarity_scores(self) -> Optional[Sequence[float]]: ...

    @property
    def completeness_scores(self) -> Optional[Sequence[float]]: ...

    @property
    def relevance_scores(self) -> Optional[Sequence[float]]: ...

    @property
    def confidence_scores(self) -> Optional[Sequence[float]]: ...

    @property
    def overall_scores(self) -> Optional[Sequence[float]]: ...

    @property
    def session_overall_score(self) -> Optional[float]: ...


def synthesize_report(
    session: SessionSnapshot,
    report_id: str,
    report_created_at: datetime,
) -> InterviewReport:
    """Build the report for ``session`` under the given identity.

    Deterministic for a fixed snapshot, id and timestamp. A missing session
    overall score is reported as 0.
    """

    means = DimensionMeans.from_session(session)
    overall_mean = mean(session.overall_scores)
    session_overall_score = session.session_overall_score or 0.0

    report = InterviewReport(
        session_id=session.session_id,
        session_overall_score=session_overall_score,
        success_probability=estimate_success_probability(session_overall_score),
        competency_breakdown=build_competency_breakdown(session.overall_scores),
        top_gaps=identify_top_gaps(means),
        strengths=identify_strengths(means, overall_mean),
        report=ReportRef(id=report_id, created_at=report_created_at),
    )
    logger.debug(
        "synthesized report %s for session %s (gaps=%d strengths=%d)",
        report_id,
        report.session_id,
        len(report.top_gaps),
        len(report.strengths),
    )
    return report


__all__ = ["SessionSnapshot", "synthesize_report"]
