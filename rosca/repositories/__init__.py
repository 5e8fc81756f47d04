# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package: re-exports the roster, period and history stores."""
from rosca.repositories.history_repository import HistoryRepository
from rosca.repositories.period_repository import PeriodRepository
from rosca.repositories.roster_repository import RosterRepository

__all__ = ["HistoryRepository", "PeriodRepository", "RosterRepository"]
