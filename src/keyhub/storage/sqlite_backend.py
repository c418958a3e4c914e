"""SQLite credential store."""

from __future__ import annotations

import sqlite3
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any

from keyhub.core.types import MUTABLE_FIELDS, Credential
from keyhub.exceptions import DuplicateToken, InfrastructureError


class SQLiteBackend:
    """SQLite storage for API keys, one connection per operation."""

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path)
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise InfrastructureError(f"Cannot create data directory {self.db_path.parent}") from exc
        self._init_db()

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    def _init_db(self) -> None:
        with self._conn() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS api_keys (
                    id TEXT PRIMARY KEY,
                    token TEXT NOT NULL UNIQUE,
                    owner_id TEXT NOT NULL,
                    display_name TEXT NOT NULL,
                    kind TEXT NOT NULL DEFAULT 'default',
                    usage_counter INTEGER NOT NULL DEFAULT 0 CHECK (usage_counter >= 0),
                    created_at TIMESTAMP NOT NULL
                )
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_api_keys_owner "
                "ON api_keys(owner_id, created_at DESC)"
            )

    @contextmanager
    def _conn(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection, committing on success and always closing it."""
        try:
            conn = sqlite3.connect(str(self.db_path))
        except sqlite3.Error as exc:
            raise InfrastructureError("Credential store unreachable") from exc
        conn.row_factory = sqlite3.Row
        try:
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("PRAGMA busy_timeout=5000")
            yield conn
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            if "token" in str(exc):
                raise DuplicateToken() from exc
            raise InfrastructureError("Credential store rejected the write") from exc
        except sqlite3.Error as exc:
            conn.rollback()
            raise InfrastructureError("Credential store failure") from exc
        finally:
            conn.close()

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def insert(self, credential: Credential) -> Credential:
        record = credential.model_copy(update={"id": str(uuid.uuid4())})
        with self._conn() as conn:
            conn.execute(
                """
                INSERT INTO api_keys
                    (id, token, owner_id, display_name, kind, usage_counter, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    record.id,
                    record.token,
                    record.owner_id,
                    record.display_name,
                    record.kind,
                    record.usage_counter,
                    record.created_at.isoformat(),
                ),
            )
        return record

    def get(self, credential_id: str, owner_id: str) -> Credential | None:
        with self._conn() as conn:
            row = conn.execute(
                "SELECT * FROM api_keys WHERE id = ? AND owner_id = ?",
                (credential_id, owner_id),
            ).fetchone()
            return _row_to_credential(row) if row else None

    def list_by_owner(self, owner_id: str) -> list[Credential]:
        with self._conn() as conn:
            rows = conn.execute(
                "SELECT * FROM api_keys WHERE owner_id = ? "
                "ORDER BY created_at DESC, rowid DESC",
                (owner_id,),
            ).fetchall()
            return [_row_to_credential(r) for r in rows]

    def update(self, credential_id: str, owner_id: str, /, **fields: Any) -> Credential | None:
        sets: list[str] = []
        params: list[Any] = []
        for key, val in fields.items():
            if key not in MUTABLE_FIELDS:
                raise ValueError(f"Field {key!r} is not updatable")
            sets.append(f"{key} = ?")
            params.append(val)

        with self._conn() as conn:
            if sets:
                cur = conn.execute(
                    f"UPDATE api_keys SET {', '.join(sets)} WHERE id = ? AND owner_id = ?",
                    [*params, credential_id, owner_id],
                )
                if cur.rowcount == 0:
                    return None
            row = conn.execute(
                "SELECT * FROM api_keys WHERE id = ? AND owner_id = ?",
                (credential_id, owner_id),
            ).fetchone()
            return _row_to_credential(row) if row else None

    def delete(self, credential_id: str, owner_id: str) -> bool:
        with self._conn() as conn:
            cur = conn.execute(
                "DELETE FROM api_keys WHERE id = ? AND owner_id = ?",
                (credential_id, owner_id),
            )
            return cur.rowcount > 0

    def find_by_token(self, token: str) -> Credential | None:
        with self._conn() as conn:
            row = conn.execute("SELECT * FROM api_keys WHERE token = ?", (token,)).fetchone()
            return _row_to_credential(row) if row else None


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _row_to_credential(row: sqlite3.Row) -> Credential:
    return Credential(
        id=row["id"],
        token=row["token"],
        owner_id=row["owner_id"],
        display_name=row["display_name"],
        kind=row["kind"],
        usage_counter=row["usage_counter"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )
