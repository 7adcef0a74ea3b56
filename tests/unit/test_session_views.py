from datetime import datetime, timezone

import pytest

from interview_session import CandidateResponse, NoPendingQuestionError, Question, to_question_view


def test_view_exposes_pending_question(interview_session):
    view = to_question_view(interview_session())

    assert view.session_id == "sess-42"
    assert view.session_token == "session_sess-42"
    assert view.question.model_dump() == {
        "id": "q1",
        "text": "Tell me about a hard bug.",
        "category": "behavioral",
        "difficulty": 3.0,
    }


def test_view_skips_answered_questions(interview_session):
    session = interview_session(
        questions_asked=[
            Question(id="q1", text="First", category="behavioral", difficulty=2),
            Question(id="q2", text="Second", category="technical", difficulty=4),
        ],
        responses=[
            CandidateResponse(question_id="q1", answer="...", submitted_at=datetime.now(timezone.utc)),
        ],
    )
    assert to_question_view(session).question.id == "q2"


def test_exhausted_session_raises(interview_session):
    with pytest.raises(NoPendingQuestionError) as excinfo:
        to_question_view(interview_session(questions_asked=[]))
    assert excinfo.value.session_id == "sess-42"
