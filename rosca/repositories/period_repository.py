# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Period counter.
A single durable integer, starts at 1, only ever moves forward by one.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

INITIAL_PERIOD = 1


class PeriodRepository:
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get(self) -> int:
        with self._engine.connect() as conn:
            value = conn.execute(
                text("SELECT current_period FROM period_state WHERE id = 1")
            ).scalar()
        return value if value is not None else INITIAL_PERIOD

    def advance(self, credit_member_id: Optional[int] = None) -> int:
        """
        Increment the counter by exactly 1 and return the new value.
        When ``credit_member_id`` is given, that member's ``periods_received``
        goes up in the same transaction, so a failed advance credits nobody.
        """
        now = datetime.now(timezone.utc).isoformat()
        with self._engine.begin() as conn:
            if credit_member_id is not None:
                conn.execute(
                    text("UPDATE members SET periods_received = periods_received + 1 WHERE id = :id"),
                    {"id": credit_member_id},
                )
            updated = conn.execute(
                text("""
                    UPDATE period_state
                    SET current_period = current_period + 1, updated_at = :ts
                    WHERE id = 1
                """),
                {"ts": now},
            ).rowcount
            if not updated:
                conn.execute(
                    text("""
                        INSERT INTO period_state (id, current_period, updated_at)
                        VALUES (1, :period, :ts)
                    """),
                    {"period": INITIAL_PERIOD + 1, "ts": now},
                )
            return conn.execute(
                text("SELECT current_period FROM period_state WHERE id = 1")
            ).scalar()

    # ── Bulk / internal ──

    def reset(self) -> None:
        """Put the counter back to period 1. Test/bootstrap use only."""
        with self._engine.begin() as conn:
            conn.execute(text("DELETE FROM period_state"))
            conn.execute(
                text("INSERT INTO period_state (id, current_period) VALUES (1, :period)"),
                {"period": INITIAL_PERIOD},
            )
