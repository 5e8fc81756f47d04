# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Period advancement, recipient lookups and schedule projection.
Reads a roster snapshot and the period counter, then delegates to the pure
rotation functions.
"""

from typing import Any, Optional

from rosca.core.config import settings
from rosca.core.logging import get_logger
from rosca.metrics.prometheus import (
    CURRENT_PERIOD,
    PERIOD_ADVANCES,
    RECIPIENT_LOOKUPS,
    SCHEDULE_PROJECTIONS,
)
from rosca.models.domain import Member
from rosca.repositories.history_repository import HistoryRepository
from rosca.repositories.period_repository import PeriodRepository
from rosca.repositories.roster_repository import RosterRepository
from rosca.services.notification_client import NotificationClient
from rosca.services.rotation import (
    InvalidPeriodError,
    NoRecipientError,
    project_schedule,
    recipient_for,
)

logger = get_logger(__name__)


class RotationService:
    """Business logic for who receives the payout, now and in future periods."""

    def __init__(
        self,
        roster_repo: RosterRepository,
        period_repo: PeriodRepository,
        history_repo: HistoryRepository,
        notification_client: NotificationClient,
    ) -> None:
        self._roster = roster_repo
        self._periods = period_repo
        self._history = history_repo
        self._notifications = notification_client

    # ── Queries ──

    def get_current_period(self) -> int:
        period = self._periods.get()
        CURRENT_PERIOD.set(period)
        return period

    def get_recipient(self, period: Optional[int] = None) -> Member:
        """Recipient for ``period`` (defaults to the current one). Raises NoRecipientError."""
        if period is None:
            period = self.get_current_period()
        RECIPIENT_LOOKUPS.inc()
        return recipient_for(period, self._roster.get_all())

    def get_schedule(self, horizon_cycles: Optional[int] = None) -> dict[str, Any]:
        """Schedule entries plus the period and horizon they were built from."""
        horizon = self._resolve_horizon(horizon_cycles)
        period = self.get_current_period()
        SCHEDULE_PROJECTIONS.inc()
        return {
            "current_period": period,
            "horizon_cycles": horizon,
            "entries": project_schedule(period, self._roster.get_all(), horizon),
        }

    def get_dashboard(self, horizon_cycles: Optional[int] = None) -> dict[str, Any]:
        """Everything the dashboard view renders, from one roster snapshot."""
        roster = self._roster.get_all()
        period = self.get_current_period()
        horizon = self._resolve_horizon(horizon_cycles)
        try:
            recipient = recipient_for(period, roster)
        except NoRecipientError:
            recipient = None
        SCHEDULE_PROJECTIONS.inc()
        return {
            "current_period": period,
            "current_recipient": recipient,
            "members_count": len(roster),
            "contribution_amount": settings.CONTRIBUTION_AMOUNT,
            "payout_amount": settings.PAYOUT_AMOUNT,
            "pool_total": settings.CONTRIBUTION_AMOUNT * len(roster),
            "horizon_cycles": horizon,
            "schedule": project_schedule(period, roster, horizon),
        }

    # ── Commands ──

    def advance_period(self) -> dict[str, Any]:
        """
        Close the current period and move to the next one.
        The closing recipient's received counter goes up by one; the new
        recipient is notified. Works on an empty roster too.
        """
        roster = self._roster.get_all()
        previous_period = self._periods.get()
        closing: Optional[Member] = None
        if roster:
            closing = recipient_for(previous_period, roster)

        current_period = self._periods.advance(
            credit_member_id=closing.id if closing else None
        )
        PERIOD_ADVANCES.inc()
        CURRENT_PERIOD.set(current_period)

        recipient: Optional[Member] = None
        if roster:
            recipient = recipient_for(current_period, roster)

        self._history.record_event(
            "period_advanced",
            {
                "previous_period": previous_period,
                "current_period": current_period,
                "previous_recipient_id": closing.id if closing else None,
                "recipient_id": recipient.id if recipient else None,
            },
        )
        if recipient is not None:
            message = (
                f"System advanced to Week {current_period}. "
                f"The new recipient is {recipient.name}"
            )
            self._notifications.send(channel="console", recipient=recipient.email, message=message)
            logger.info(message)
        else:
            logger.info("Period advanced to %d with an empty roster", current_period)

        return {
            "previous_period": previous_period,
            "current_period": current_period,
            "recipient": recipient,
        }

    # ── Internal ──

    @staticmethod
    def _resolve_horizon(horizon_cycles: Optional[int]) -> int:
        horizon = settings.DEFAULT_HORIZON_CYCLES if horizon_cycles is None else horizon_cycles
        if horizon > settings.MAX_HORIZON_CYCLES:
            raise InvalidPeriodError(
                f"horizon_cycles must be <= {settings.MAX_HORIZON_CYCLES}, got {horizon}"
            )
        return horizon
