"""Client-facing view of the question a session is waiting on."""
from __future__ import annotations

from pydantic import BaseModel

from .models import InterviewSession


class QuestionPayload(BaseModel):
    id: str
    text: str
    category: str
    difficulty: float


class QuestionView(BaseModel):
    session_id: str
    session_token: str
    question: QuestionPayload


class NoPendingQuestionError(RuntimeError):  # Raised when a view is requested for an exhausted session
    def __init__(self, session_id: str) -> None:
        super().__init__(f"Interview session '{session_id}' has no pending question")
        self.session_id = session_id


def to_question_view(session: InterviewSession) -> QuestionView:
    """Map ``session`` to the question the candidate should answer next.

    Raises:
        NoPendingQuestionError: every asked question already has a response.
            Callers must not ask for a view of an exhausted session, so this
            is not retried.
    """

    question = session.pending_question
    if question is None:
        raise NoPendingQuestionError(session.session_id)
    return QuestionView(
        session_id=session.session_id,
        session_token=f"session_{session.session_id}",
        question=QuestionPayload(
            id=question.id,
            text=question.text,
            category=question.category,
            difficulty=question.difficulty,
        ),
    )


__all__ = ["NoPendingQuestionError", "QuestionPayload", "QuestionView", "to_question_view"]
