from __future__ import annotations  # Interview session snapshot models

from datetime import datetime
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict

SessionStatus = Literal["in_progress", "completed"]
InterviewType = Literal["behavioral", "technical", "mixed", "case_study"]


class Question(BaseModel):  # Question asked during the session
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    category: str
    difficulty: float


class CandidateResponse(BaseModel):  # Candidate answer to an asked question
    model_config = ConfigDict(frozen=True)

    question_id: str
    answer: str
    submitted_at: datetime


class InterviewSession(BaseModel):
    """Immutable snapshot of an interview session.

    The five score tuples are parallel and indexed by answer order, each value
    on a 0-10 scale. Neither the range nor the equal lengths are checked here;
    the conduct workflow that appends them owns those rules.
    """

    model_config = ConfigDict(frozen=True)

    session_id: str
    user_id: str
    job_profile_id: str
    interview_type: InterviewType = "mixed"
    status: SessionStatus = "in_progress"
    questions_asked: Tuple[Question, ...] = ()
    responses: Tuple[CandidateResponse, ...] = ()
    clarity_scores: Tuple[float, ...] = ()
    completeness_scores: Tuple[float, ...] = ()
    relevance_scores: Tuple[float, ...] = ()
    confidence_scores: Tuple[float, ...] = ()
    overall_scores: Tuple[float, ...] = ()
    session_overall_score: Optional[float] = None
    ended_early: bool = False
    created_at: datetime
    completed_at: Optional[datetime] = None

    @property
    def pending_question(self) -> Optional[Question]:  # First asked question still awaiting an answer
        answered = {response.question_id for response in self.responses}
        for question in self.questions_asked:
            if question.id not in answered:
                return question
        return None

    def belongs_to(self, user_id: str) -> bool:
        return self.user_id == user_id


__all__ = [
    "CandidateResponse",
    "InterviewSession",
    "InterviewType",
    "Question",
    "SessionStatus",
]
