# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""SQLAlchemy engine singleton and schema bootstrap."""
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from rosca.core.config import settings
from rosca.core.logging import get_logger

logger = get_logger(__name__)

SCHEMA_STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS members (
        id INTEGER PRIMARY KEY,
        name VARCHAR(255) NOT NULL,
        email VARCHAR(255) NOT NULL UNIQUE,
        periods_received INTEGER NOT NULL DEFAULT 0,
        created_at VARCHAR(64) NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS period_state (
        id INTEGER PRIMARY KEY,
        current_period INTEGER NOT NULL,
        updated_at VARCHAR(64)
    )
    """,
)


def make_engine(url: str) -> Engine:
    """Create an engine; SQLite gets thread-safe connection settings."""
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every checkout sees an empty DB.
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


def init_db(db_engine: Engine) -> None:
    """Create tables if missing and seed the period counter at 1."""
    with db_engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.execute(text(statement))
        row = conn.execute(
            text("SELECT current_period FROM period_state WHERE id = 1")
        ).fetchone()
        if row is None:
            conn.execute(
                text("INSERT INTO period_state (id, current_period) VALUES (1, 1)")
            )
    logger.info("Database schema ready: %s", db_engine.url.render_as_string(hide_password=True))


engine = make_engine(settings.DATABASE_URL)
