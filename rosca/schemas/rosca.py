# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas: API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from rosca.models.domain import Member, ScheduleEntry


# ── Member Schemas ──

class MemberCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: str = Field(
        ...,
        min_length=3,
        max_length=255,
        pattern=r"^[^@\s]+@[^@\s]+$",
        description="Unique contact email",
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("email")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        return v.strip().lower()


class MemberResponse(BaseModel):
    id: int
    name: str
    email: str
    periods_received: int


# ── Period Schemas ──

class PeriodResponse(BaseModel):
    current_period: int


class PeriodAdvanceResponse(BaseModel):
    previous_period: int
    current_period: int
    recipient: Optional[Member] = None


# ── Schedule Schemas ──

class ScheduleResponse(BaseModel):
    current_period: int
    horizon_cycles: int
    entries: list[ScheduleEntry]


class DashboardResponse(BaseModel):
    current_period: int
    current_recipient: Optional[Member] = None
    members_count: int
    contribution_amount: int
    payout_amount: int
    pool_total: int
    horizon_cycles: int
    schedule: list[ScheduleEntry]


# ── History Schemas ──

class HistoryEvent(BaseModel):
    event_id: str
    event_type: str
    timestamp: str
    details: dict[str, Any]


class HistoryStats(BaseModel):
    total_events: int
    event_types: dict[str, int]


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    request_id: Optional[str] = None
