from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Dict, List

ATTEMPT_COLUMNS = ("sn1", "sn2", "sn3", "cj1", "cj2", "cj3")


class Database:
    """Lightweight read-only helper around a results SQLite file."""

    def __init__(self, db_path: str | Path):
        self.db_path = self._resolve_path(Path(db_path))
        if not self.db_path.exists():
            raise FileNotFoundError(f"Database not found at {self.db_path}")

    @staticmethod
    def _resolve_path(path: Path) -> Path:
        if path.is_absolute():
            return path

        project_root = Path(__file__).resolve().parents[2]
        return project_root / path

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(f"file:{self.db_path}?mode=ro", uri=True)

    def get_attempts(self) -> List[Dict[str, object]]:
        query = f"SELECT lifter, hometown, {', '.join(ATTEMPT_COLUMNS)} FROM results"
        with self._connect() as conn:
            cursor = conn.execute(query)
            columns = [col[0] for col in cursor.description]
            rows = cursor.fetchall()

        return [dict(zip(columns, row)) for row in rows]

    def get_identities(self) -> List[tuple]:
        query = "SELECT DISTINCT lifter, hometown FROM results ORDER BY lifter ASC"
        with self._connect() as conn:
            return conn.execute(query).fetchall()
