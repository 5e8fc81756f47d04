# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection: wire repositories and services.
"""

from rosca.core.database import engine, init_db
from rosca.repositories.history_repository import HistoryRepository
from rosca.repositories.period_repository import PeriodRepository
from rosca.repositories.roster_repository import RosterRepository
from rosca.services.notification_client import NotificationClient
from rosca.services.roster_service import RosterService
from rosca.services.rotation_service import RotationService

init_db(engine)

# ── Singleton repository instances ──
_roster_repo = RosterRepository(engine)
_period_repo = PeriodRepository(engine)
_history_repo = HistoryRepository()
_notification_client = NotificationClient()

# ── Service instances (with injected dependencies) ──
_roster_service = RosterService(
    roster_repo=_roster_repo,
    history_repo=_history_repo,
)
_rotation_service = RotationService(
    roster_repo=_roster_repo,
    period_repo=_period_repo,
    history_repo=_history_repo,
    notification_client=_notification_client,
)


# ── FastAPI dependency functions ──
def get_roster_service() -> RosterService:
    return _roster_service


def get_rotation_service() -> RotationService:
    return _rotation_service


def get_roster_repo() -> RosterRepository:
    return _roster_repo


def get_period_repo() -> PeriodRepository:
    return _period_repo


def get_history_repo() -> HistoryRepository:
    return _history_repo


def get_notification_client() -> NotificationClient:
    return _notification_client
