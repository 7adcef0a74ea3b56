from .completion import CompletionResult, SessionOwnershipError, SessionStateError, complete_interview
from .models import CandidateResponse, InterviewSession, Question
from .views import NoPendingQuestionError, QuestionPayload, QuestionView, to_question_view

__all__ = [
    "CandidateResponse",
    "CompletionResult",
    "InterviewSession",
    "NoPendingQuestionError",
    "Question",
    "QuestionPayload",
    "QuestionView",
    "SessionOwnershipError",
    "SessionStateError",
    "complete_interview",
    "to_question_view",
]
