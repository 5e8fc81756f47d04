# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Roster data access.
Members are append-only; identifiers are assigned as roster size + 1.
NO business rules here: pure persistence.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from rosca.models.domain import Member

MEMBER_COLS = "id, name, email, periods_received"


def _row_to_member(row) -> Member:
    return Member(id=row[0], name=row[1], email=row[2], periods_received=row[3] or 0)


class RosterRepository:
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # ── Read ──

    def get_all(self) -> list[Member]:
        """Ordered snapshot of the roster (by id)."""
        with self._engine.connect() as conn:
            rows = conn.execute(
                text(f"SELECT {MEMBER_COLS} FROM members ORDER BY id")
            ).fetchall()
        return [_row_to_member(r) for r in rows]

    def get_by_id(self, member_id: int) -> Optional[Member]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text(f"SELECT {MEMBER_COLS} FROM members WHERE id = :id"),
                {"id": member_id},
            ).fetchone()
        return _row_to_member(row) if row else None

    def get_by_email(self, email: str) -> Optional[Member]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text(f"SELECT {MEMBER_COLS} FROM members WHERE email = :email"),
                {"email": email},
            ).fetchone()
        return _row_to_member(row) if row else None

    def exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def count(self) -> int:
        with self._engine.connect() as conn:
            return conn.execute(text("SELECT COUNT(*) FROM members")).scalar() or 0

    # ── Write ──

    def append(self, name: str, email: str) -> Member:
        """Insert a member with the next sequential identifier."""
        with self._engine.begin() as conn:
            next_id = conn.execute(
                text("SELECT COUNT(*) FROM members")
            ).scalar() + 1
            conn.execute(
                text("""
                    INSERT INTO members (id, name, email, periods_received, created_at)
                    VALUES (:id, :name, :email, 0, :ts)
                """),
                {
                    "id": next_id,
                    "name": name,
                    "email": email,
                    "ts": datetime.now(timezone.utc).isoformat(),
                },
            )
        return Member(id=next_id, name=name, email=email, periods_received=0)

    # ── Bulk / internal ──

    def clear(self) -> None:
        with self._engine.begin() as conn:
            conn.execute(text("DELETE FROM members"))
