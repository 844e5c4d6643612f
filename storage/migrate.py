"""SQLite schema migrations."""
from __future__ import annotations

from typing import Iterable

from config.settings import settings

from .sqlite import get_conn

SCHEMA: Iterable[str] = [
    """
CREATE TABLE IF NOT EXISTS interview_sessions (
  session_id TEXT PRIMARY KEY,
  candidate_id TEXT NOT NULL,
  status TEXT NOT NULL,
  payload_json TEXT NOT NULL,
  created_at TEXT NOT NULL,
  updated_at TEXT NOT NULL
);
""",
    """
CREATE TABLE IF NOT EXISTS candidates (
  seq INTEGER PRIMARY KEY AUTOINCREMENT,
  session_id TEXT NOT NULL UNIQUE,
  name TEXT,
  email TEXT,
  final_score REAL NOT NULL,
  terminated INTEGER NOT NULL,
  completed_at TEXT NOT NULL,
  payload_json TEXT NOT NULL
);
""",
    """
CREATE TABLE IF NOT EXISTS onboarding_intakes (
  intake_id TEXT PRIMARY KEY,
  candidate_id TEXT NOT NULL,
  session_id TEXT,
  payload_json TEXT NOT NULL,
  created_at TEXT NOT NULL,
  updated_at TEXT NOT NULL
);
""",
]


def migrate(db_path: str | None = None) -> None:
    """Apply schema migrations to the SQLite database."""

    with get_conn(db_path or settings.DB_PATH) as conn:
        cur = conn.cursor()
        for stmt in SCHEMA:
            cur.execute(stmt)


if __name__ == "__main__":
    migrate()
