# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Roster management, member registration and lookups.
Coordinates repository writes with metrics, history, and validation.
"""

from rosca.core.logging import get_logger
from rosca.metrics.prometheus import MEMBERS_REGISTERED, ROSTER_SIZE
from rosca.models.domain import Member
from rosca.repositories.history_repository import HistoryRepository
from rosca.repositories.roster_repository import RosterRepository

logger = get_logger(__name__)

DEFAULT_MEMBER_NAMES: tuple[str, ...] = (
    "Alice K.", "Ben C.", "Chantal M.", "David O.", "Eve W.",
    "Faisal N.", "Grace R.", "Henry L.", "Irene B.", "Juma T.",
)
DEFAULT_EMAIL_DOMAIN = "jobil.com"


class DuplicateMemberError(ValueError):
    """Raised when an email is already registered."""


def normalise_email(email: str) -> str:
    return email.strip().lower()


def default_email(name: str) -> str:
    """'Alice K.' -> 'alicek.@jobil.com'"""
    return "".join(name.lower().split()) + "@" + DEFAULT_EMAIL_DOMAIN


class RosterService:
    """Business logic for the member roster."""

    def __init__(self, roster_repo: RosterRepository, history_repo: HistoryRepository) -> None:
        self._roster = roster_repo
        self._history = history_repo

    # ── Commands ──

    def register_member(self, name: str, email: str, source: str = "api") -> Member:
        """Append a member to the roster. Raises ValueError on bad or duplicate input."""
        name = name.strip()
        email = normalise_email(email)
        if not name:
            raise ValueError("Member name must not be blank")
        if not email:
            raise ValueError("Member email must not be blank")
        if self._roster.exists(email):
            raise DuplicateMemberError(
                "Registration failed: An account with this email already exists."
            )

        member = self._roster.append(name, email)

        MEMBERS_REGISTERED.labels(source=source).inc()
        ROSTER_SIZE.set(self._roster.count())
        self._history.record_event(
            "member_registered",
            {"member_id": member.id, "name": member.name, "source": source},
        )
        logger.info("Member registered: id=%d, name=%s", member.id, member.name)
        return member

    # ── Queries ──

    def list_members(self) -> list[Member]:
        return self._roster.get_all()

    def get_member(self, member_id: int) -> Member:
        member = self._roster.get_by_id(member_id)
        if member is None:
            raise KeyError(f"No member with id {member_id}")
        return member

    def count(self) -> int:
        return self._roster.count()

    # ── Seed ──

    def seed_defaults(self) -> int:
        """Top up a small roster with the demonstration members. Returns how many were added."""
        if self._roster.count() >= len(DEFAULT_MEMBER_NAMES):
            return 0
        added = 0
        for name in DEFAULT_MEMBER_NAMES:
            email = default_email(name)
            if self._roster.exists(email):
                continue
            self.register_member(name, email, source="seed")
            added += 1
        logger.info("Seeded %d demonstration members", added)
        ROSTER_SIZE.set(self._roster.count())
        return added
