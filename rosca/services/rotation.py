# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Rotation logic, pure computation, no side effects.

The recipient of period ``p`` for a roster of size ``N`` is the member whose
identifier is ``((p - 1) mod N) + 1``. Identifiers must be contiguous ``1..N``.
"""

from typing import Sequence

from rosca.models.domain import EntryStatus, Member, ScheduleEntry

DEFAULT_HORIZON_CYCLES = 3


class NoRecipientError(LookupError):
    """Raised when a recipient is requested from an empty roster."""


class InvalidPeriodError(ValueError):
    """Raised for a period or horizon outside the positive integers."""


class RosterIntegrityError(RuntimeError):
    """Raised when roster identifiers are not the contiguous sequence 1..N."""


def _require_positive(value: int, label: str) -> None:
    # bool is an int subclass; True must not pass as period 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPeriodError(f"{label} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidPeriodError(f"{label} must be >= 1, got {value}")


def recipient_for(period: int, roster: Sequence[Member]) -> Member:
    """
    Return the member who receives the payout for ``period``.
    Pure function: no I/O, no metrics, no logging.
    Raises NoRecipientError, InvalidPeriodError or RosterIntegrityError.
    """
    if not roster:
        raise NoRecipientError("No recipient: the roster is empty")
    _require_positive(period, "period")

    recipient_id = ((period - 1) % len(roster)) + 1
    for member in roster:
        if member.id == recipient_id:
            return member
    raise RosterIntegrityError(
        f"Roster has no member with id {recipient_id}; "
        f"identifiers must be contiguous 1..{len(roster)}"
    )


def project_schedule(
    current_period: int,
    roster: Sequence[Member],
    horizon_cycles: int = DEFAULT_HORIZON_CYCLES,
) -> list[ScheduleEntry]:
    """
    Project ``horizon_cycles`` full rotations starting at period 1.

    Periods before ``current_period`` are received, the current period is
    current (never received), later periods are scheduled. An empty roster
    yields an empty schedule rather than an error.
    """
    if not roster:
        return []
    _require_positive(current_period, "current_period")
    _require_positive(horizon_cycles, "horizon_cycles")

    entries: list[ScheduleEntry] = []
    for period in range(1, len(roster) * horizon_cycles + 1):
        recipient = recipient_for(period, roster)
        if period < current_period:
            status = EntryStatus.RECEIVED
        elif period == current_period:
            status = EntryStatus.CURRENT
        else:
            status = EntryStatus.SCHEDULED
        entries.append(
            ScheduleEntry(
                period=period,
                recipient_id=recipient.id,
                recipient_name=recipient.name,
                status=status,
            )
        )
    return entries
