import os
import sys
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("ENABLE_FILE_LOGS", "0")

from config.settings import settings
from interview_session import InterviewSession, Question
from storage.migrate import migrate


@pytest.fixture(autouse=True)
def tmp_db(monkeypatch):
    td = tempfile.TemporaryDirectory()
    db_path = os.path.join(td.name, "test.db")
    monkeypatch.setattr(settings, "DB_PATH", db_path, raising=False)
    migrate(db_path)
    try:
        yield db_path
    finally:
        td.cleanup()


@pytest.fixture
def snapshot():
    """Factory for lightweight session snapshots built from plain attributes."""

    def _make(**overrides):
        data = {
            "session_id": "s-1",
            "questions_asked": [],
            "clarity_scores": [],
            "completeness_scores": [],
            "relevance_scores": [],
            "confidence_scores": [],
            "overall_scores": [],
            "session_overall_score": None,
        }
        data.update(overrides)
        return SimpleNamespace(**data)

    return _make


@pytest.fixture
def interview_session():
    """Factory for in-progress ``InterviewSession`` models."""

    def _make(**overrides):
        data = {
            "session_id": "sess-42",
            "user_id": "u-1",
            "job_profile_id": "jp-1",
            "questions_asked": [
                Question(id="q1", text="Tell me about a hard bug.", category="behavioral", difficulty=3),
            ],
            "created_at": datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc),
        }
        data.update(overrides)
        return InterviewSession(**data)

    return _make
