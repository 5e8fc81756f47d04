# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Member registration and roster endpoints.
Thin HTTP layer: delegates ALL logic to RosterService.
"""

from fastapi import APIRouter, Depends, HTTPException

from rosca.core.dependencies import get_roster_service
from rosca.schemas.rosca import MemberCreateRequest, MemberResponse
from rosca.services.roster_service import DuplicateMemberError, RosterService

router = APIRouter(prefix="/api/v1", tags=["Members"])


@router.post("/members", status_code=201, response_model=MemberResponse)
def register_member(
    payload: MemberCreateRequest,
    service: RosterService = Depends(get_roster_service),
):
    """Register a member at the end of the rotation order."""
    try:
        return service.register_member(name=payload.name, email=payload.email)
    except DuplicateMemberError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/members", response_model=list[MemberResponse])
def list_members(
    service: RosterService = Depends(get_roster_service),
):
    """List the roster in rotation order."""
    return service.list_members()


@router.get("/members/{member_id}", response_model=MemberResponse)
def get_member(
    member_id: int,
    service: RosterService = Depends(get_roster_service),
):
    """Get a single member by identifier."""
    try:
        return service.get_member(member_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
