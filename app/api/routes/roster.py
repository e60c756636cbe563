"""
Roster Endpoints.

The kiosk owns barber availability and pushes the whole roster here
whenever it changes.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from app.api.middleware.auth import require_kiosk_key
from app.core.roster import StaffMember, StaffStatus, get_roster_store

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/roster",
    tags=["Roster"],
    dependencies=[Depends(require_kiosk_key)],
)


class StaffMemberIn(BaseModel):
    """Roster entry."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1, examples=["+12145550101"])
    status: StaffStatus = StaffStatus.AVAILABLE


class RosterPayload(BaseModel):
    """Full roster snapshot."""

    staff: list[StaffMemberIn]


def _to_payload(staff) -> RosterPayload:
    return RosterPayload(staff=[StaffMemberIn(**member.to_dict()) for member in staff])


@router.get("", response_model=RosterPayload, summary="Current roster")
async def get_roster() -> RosterPayload:
    return _to_payload(get_roster_store().snapshot())


@router.put("", response_model=RosterPayload, summary="Replace the roster")
async def put_roster(payload: RosterPayload) -> RosterPayload:
    """Install a new roster snapshot. Staff ids must be unique."""
    staff = [
        StaffMember(id=s.id, name=s.name, phone=s.phone, status=s.status)
        for s in payload.staff
    ]
    try:
        directory = get_roster_store().replace(staff)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _to_payload(directory)
