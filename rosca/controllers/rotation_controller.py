# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Period counter, current recipient, schedule, dashboard, history.
Thin HTTP layer: delegates ALL logic to RotationService.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from rosca.core.config import settings
from rosca.core.dependencies import get_history_repo, get_rotation_service
from rosca.repositories.history_repository import HistoryRepository
from rosca.schemas.rosca import (
    DashboardResponse,
    HistoryEvent,
    HistoryStats,
    MemberResponse,
    PeriodAdvanceResponse,
    PeriodResponse,
    ScheduleResponse,
)
from rosca.services.rotation import NoRecipientError
from rosca.services.rotation_service import RotationService

router = APIRouter(prefix="/api/v1", tags=["Rotation"])


# ── Period ──

@router.get("/period", response_model=PeriodResponse)
def get_current_period(
    service: RotationService = Depends(get_rotation_service),
):
    """Current rotation period."""
    return {"current_period": service.get_current_period()}


@router.post("/period/advance", response_model=PeriodAdvanceResponse)
def advance_period(
    service: RotationService = Depends(get_rotation_service),
):
    """Advance the period counter by one and announce the new recipient."""
    try:
        return service.advance_period()
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))


# ── Recipient ──

@router.get("/recipient", response_model=MemberResponse)
def get_recipient(
    period: Optional[int] = Query(default=None, description="Period to resolve; defaults to current"),
    service: RotationService = Depends(get_rotation_service),
):
    """Who receives the payout for a period."""
    try:
        return service.get_recipient(period)
    except NoRecipientError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))


# ── Schedule ──

@router.get("/schedule", response_model=ScheduleResponse)
def get_schedule(
    horizon_cycles: Optional[int] = Query(
        default=None,
        ge=1,
        le=settings.MAX_HORIZON_CYCLES,
        description="Full rotations to project",
    ),
    service: RotationService = Depends(get_rotation_service),
):
    """Projected payout schedule from period 1 over the horizon."""
    try:
        return service.get_schedule(horizon_cycles)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(
    horizon_cycles: Optional[int] = Query(default=None, ge=1, le=settings.MAX_HORIZON_CYCLES),
    service: RotationService = Depends(get_rotation_service),
):
    """Current period, current recipient, amounts and the projected schedule."""
    try:
        return service.get_dashboard(horizon_cycles)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))


# ── History ──

@router.get("/history", response_model=list[HistoryEvent])
def get_history(
    event_type: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1, description="Max results"),
    history_repo: HistoryRepository = Depends(get_history_repo),
):
    """Audit log of registrations and period changes."""
    return history_repo.get_all(event_type=event_type, limit=limit)


@router.get("/history/stats", response_model=HistoryStats)
def get_history_stats(
    history_repo: HistoryRepository = Depends(get_history_repo),
):
    """Event counts, overall and per event type."""
    return {
        "total_events": history_repo.count(),
        "event_types": history_repo.count_by_type(),
    }
