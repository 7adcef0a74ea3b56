"""SQLite schema migrations."""
from __future__ import annotations

from typing import Iterable, Optional

from .sqlite import get_conn

SCHEMA: Iterable[str] = [
    """
CREATE TABLE IF NOT EXISTS interview_reports (
  id TEXT PRIMARY KEY,
  interview_session_id TEXT NOT NULL UNIQUE,
  created_at TEXT NOT NULL,
  session_overall_score REAL NOT NULL,
  success_probability REAL NOT NULL,
  competency_breakdown TEXT NOT NULL,
  top_gaps TEXT NOT NULL,
  strengths TEXT NOT NULL,
  feedback_summary TEXT
);
""",
]


def migrate(db_path: Optional[str] = None) -> None:
    """Apply schema migrations to the SQLite database."""

    with get_conn(db_path) as conn:
        cur = conn.cursor()
        for stmt in SCHEMA:
            cur.execute(stmt)


if __name__ == "__main__":
    migrate()
