# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: pure data structures, NO FastAPI dependency.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Member(BaseModel):
    """A single participant in the rotation, identified by registration order."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1, description="1-based identifier, assigned by registration order")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: str = Field(..., min_length=1, max_length=255, description="Unique contact identifier")
    periods_received: int = Field(default=0, ge=0, description="Informational payout counter")


class EntryStatus(str, Enum):
    RECEIVED = "received"
    CURRENT = "current"
    SCHEDULED = "scheduled"


class ScheduleEntry(BaseModel):
    """One projected period: derived from roster + period counter, never stored."""
    model_config = ConfigDict(frozen=True)

    period: int = Field(..., ge=1)
    recipient_id: int = Field(..., ge=1)
    recipient_name: str
    status: EntryStatus
