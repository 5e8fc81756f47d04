# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for the pure rotation functions: recipient_for / project_schedule.
No database, no HTTP.
"""

import pytest

from rosca.models.domain import EntryStatus, Member
from rosca.services.rotation import (
    DEFAULT_HORIZON_CYCLES,
    InvalidPeriodError,
    NoRecipientError,
    RosterIntegrityError,
    project_schedule,
    recipient_for,
)


def make_roster(*names):
    return [
        Member(id=i, name=name, email=f"{name.lower()}@test.com")
        for i, name in enumerate(names, start=1)
    ]


@pytest.fixture
def abc():
    return make_roster("A", "B", "C")


# ============================================
# recipient_for
# ============================================
class TestRecipientFor:
    def test_period_one_is_first_member(self, abc):
        assert recipient_for(1, abc).id == 1

    def test_sequential_periods(self, abc):
        assert [recipient_for(p, abc).name for p in range(1, 4)] == ["A", "B", "C"]

    def test_wraps_after_full_cycle(self, abc):
        assert recipient_for(4, abc).name == "A"
        assert recipient_for(7, abc).name == "A"

    @pytest.mark.parametrize("size", [1, 2, 3, 5, 10])
    def test_periodicity(self, size):
        roster = make_roster(*[f"M{i}" for i in range(size)])
        for period in range(1, 4 * size):
            assert recipient_for(period, roster).id == recipient_for(period + size, roster).id

    def test_single_member_always_receives(self):
        roster = make_roster("Solo")
        for period in (1, 2, 3, 100, 10_001):
            assert recipient_for(period, roster).name == "Solo"

    def test_large_period(self, abc):
        # (1_000_000 - 1) % 3 = 0 -> id 1
        assert recipient_for(1_000_000, abc).id == 1

    def test_resolves_by_identifier_not_position(self):
        roster = list(reversed(make_roster("A", "B", "C")))
        assert recipient_for(1, roster).name == "A"
        assert recipient_for(3, roster).name == "C"

    def test_deterministic(self, abc):
        assert recipient_for(5, abc) == recipient_for(5, abc)

    @pytest.mark.parametrize("period", [1, 2, 50])
    def test_empty_roster_raises(self, period):
        with pytest.raises(NoRecipientError):
            recipient_for(period, [])

    def test_empty_roster_error_is_lookup_error(self):
        with pytest.raises(LookupError):
            recipient_for(1, [])

    @pytest.mark.parametrize("period", [0, -1, -4])
    def test_non_positive_period_raises(self, abc, period):
        with pytest.raises(InvalidPeriodError):
            recipient_for(period, abc)

    def test_invalid_period_is_value_error(self, abc):
        with pytest.raises(ValueError):
            recipient_for(0, abc)

    @pytest.mark.parametrize("period", [True, 1.0, "1", None])
    def test_non_integer_period_raises(self, abc, period):
        with pytest.raises(InvalidPeriodError):
            recipient_for(period, abc)

    def test_gap_in_identifiers_raises(self):
        roster = [
            Member(id=1, name="A", email="a@test.com"),
            Member(id=3, name="C", email="c@test.com"),
        ]
        assert recipient_for(1, roster).name == "A"
        with pytest.raises(RosterIntegrityError):
            recipient_for(2, roster)


# ============================================
# project_schedule
# ============================================
class TestProjectSchedule:
    def test_three_member_scenario(self, abc):
        entries = project_schedule(4, abc, 3)
        assert [e.period for e in entries] == list(range(1, 10))
        assert entries[3].recipient_id == 1
        assert entries[3].recipient_name == "A"
        assert all(e.status == EntryStatus.RECEIVED for e in entries[:3])
        assert entries[3].status == EntryStatus.CURRENT
        assert all(e.status == EntryStatus.SCHEDULED for e in entries[4:])

    def test_five_members_first_period(self):
        roster = make_roster("A", "B", "C", "D", "E")
        entries = project_schedule(1, roster)
        assert len(entries) == 15
        assert entries[0].recipient_id == 1
        assert entries[0].status == EntryStatus.CURRENT
        assert all(e.status == EntryStatus.SCHEDULED for e in entries[1:])

    def test_default_horizon(self, abc):
        assert DEFAULT_HORIZON_CYCLES == 3
        assert len(project_schedule(1, abc)) == 9

    def test_custom_horizon(self, abc):
        assert len(project_schedule(1, abc, horizon_cycles=1)) == 3
        assert len(project_schedule(1, abc, horizon_cycles=5)) == 15

    def test_recipients_follow_rotation(self, abc):
        entries = project_schedule(1, abc, 2)
        assert [e.recipient_name for e in entries] == ["A", "B", "C", "A", "B", "C"]

    def test_exactly_one_current_within_horizon(self, abc):
        entries = project_schedule(6, abc)
        assert sum(1 for e in entries if e.status == EntryStatus.CURRENT) == 1

    def test_current_beyond_horizon_all_received(self, abc):
        entries = project_schedule(42, abc)
        assert all(e.status == EntryStatus.RECEIVED for e in entries)

    def test_current_is_not_received(self, abc):
        entries = project_schedule(2, abc)
        assert entries[1].status == EntryStatus.CURRENT
        assert entries[1].status != EntryStatus.RECEIVED

    def test_empty_roster_yields_empty_schedule(self):
        assert project_schedule(1, []) == []
        assert project_schedule(7, [], 10) == []

    def test_idempotent(self, abc):
        first = project_schedule(4, abc)
        second = project_schedule(4, abc)
        assert first == second
        assert first is not second

    @pytest.mark.parametrize("current", [0, -3])
    def test_rejects_non_positive_current_period(self, abc, current):
        with pytest.raises(InvalidPeriodError):
            project_schedule(current, abc)

    @pytest.mark.parametrize("horizon", [0, -1])
    def test_rejects_non_positive_horizon(self, abc, horizon):
        with pytest.raises(InvalidPeriodError):
            project_schedule(1, abc, horizon)

    def test_status_values_serialise_as_strings(self, abc):
        entry = project_schedule(1, abc)[0]
        assert entry.model_dump(mode="json")["status"] == "current"
