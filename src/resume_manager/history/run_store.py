"""SQLite-backed generation run history."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime
from pathlib import Path

from resume_manager.history.models import GenerationRun

DEFAULT_DB_PATH = Path.home() / ".resume-manager" / "history.db"


class RunStore:
    """SQLite-backed store for generation runs with WAL mode."""

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS generation_runs (
                    id TEXT PRIMARY KEY,
                    timestamp TEXT NOT NULL,
                    company_name TEXT NOT NULL,
                    doc_types TEXT NOT NULL DEFAULT '[]',
                    theme TEXT,
                    files TEXT NOT NULL DEFAULT '[]',
                    elapsed_seconds REAL NOT NULL DEFAULT 0.0,
                    success INTEGER NOT NULL DEFAULT 1,
                    error_message TEXT
                )
            """)

    def save_run(self, run: GenerationRun) -> None:
        with self._connect() as conn:
            conn.execute(
                """INSERT OR REPLACE INTO generation_runs
                   (id, timestamp, company_name, doc_types, theme, files,
                    elapsed_seconds, success, error_message)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    run.id,
                    run.timestamp.isoformat(),
                    run.company_name,
                    json.dumps(run.doc_types),
                    run.theme,
                    json.dumps(run.files),
                    run.elapsed_seconds,
                    1 if run.success else 0,
                    run.error_message,
                ),
            )

    def get_runs(
        self,
        company_name: str | None = None,
        limit: int = 50,
    ) -> list[GenerationRun]:
        """Most recent runs first, optionally for one company."""
        with self._connect() as conn:
            if company_name is not None:
                rows = conn.execute(
                    "SELECT * FROM generation_runs WHERE company_name = ? ORDER BY timestamp DESC LIMIT ?",
                    (company_name, limit),
                ).fetchall()
            else:
                rows = conn.execute(
                    "SELECT * FROM generation_runs ORDER BY timestamp DESC LIMIT ?",
                    (limit,),
                ).fetchall()
        return [self._row_to_run(row) for row in rows]

    def get_stats(self) -> dict:
        with self._connect() as conn:
            row = conn.execute(
                """SELECT
                       COUNT(*) as total_runs,
                       SUM(CASE WHEN success = 1 THEN 1 ELSE 0 END) as success_count,
                       AVG(elapsed_seconds) as avg_elapsed,
                       COUNT(DISTINCT company_name) as companies
                   FROM generation_runs"""
            ).fetchone()
        return {
            "total_runs": row[0] or 0,
            "success_rate": (row[1] / row[0] * 100) if row[0] else 0.0,
            "avg_elapsed_seconds": round(row[2], 2) if row[2] is not None else None,
            "companies": row[3] or 0,
        }

    @staticmethod
    def _row_to_run(row: tuple) -> GenerationRun:
        return GenerationRun(
            id=row[0],
            timestamp=datetime.fromisoformat(row[1]),
            company_name=row[2],
            doc_types=json.loads(row[3]),
            theme=row[4],
            files=json.loads(row[5]),
            elapsed_seconds=row[6],
            success=bool(row[7]),
            error_message=row[8],
        )
