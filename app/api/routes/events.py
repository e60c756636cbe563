"""
Kiosk Event Endpoints.

The kiosk reports lifecycle events (waitlisted, assigned, removed, ...)
and this service plans and sends the resulting SMS. Also exposes the
direct-send endpoints the kiosk used before event planning existed.
"""

import logging
import math
from typing import Any, Optional, Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from app.api.middleware.auth import require_kiosk_key
from app.core.notifications import (
    Assignment,
    EventPayload,
    dispatch_plan,
    plan,
    templates,
)
from app.core.roster import get_roster_store, normalize_phone
from app.infra.sms import InfobipClient, SmsSendError, get_sms_client

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Kiosk"],
    dependencies=[Depends(require_kiosk_key)],
)


class AssignmentIn(BaseModel):
    """One party member's barber."""

    model_config = ConfigDict(populate_by_name=True)

    barber_id: str = Field(..., alias="barberId", min_length=1)
    member_index: int = Field(default=1, alias="memberIndex", ge=1)


class KioskEventRequest(BaseModel):
    """Kiosk lifecycle event."""

    model_config = ConfigDict(populate_by_name=True)

    event: str = Field(
        ...,
        description="Event kind",
        examples=["CLIENT_ASSIGNED"],
    )
    client_name: Optional[str] = Field(default=None, alias="clientName")
    client_phone: Optional[str] = Field(default=None, alias="clientPhone")
    assignments: list[AssignmentIn] = Field(default_factory=list)
    declined_photos: bool = Field(default=False, alias="declinedPhotos")
    index_label: Optional[Union[int, str]] = Field(
        default=None,
        alias="indexLabel",
        description="Line position shown to the client",
    )

    def to_payload(self) -> EventPayload:
        return EventPayload(
            client_name=(self.client_name or "").strip(),
            client_phone=self.client_phone or "",
            assignments=tuple(
                Assignment(barber_id=a.barber_id, member_index=a.member_index)
                for a in self.assignments
            ),
            declined_photos=self.declined_photos,
            index_label=self.index_label,
        )


class DeliveryResult(BaseModel):
    to: str
    kind: str
    ok: bool
    error: Optional[str] = None


class KioskEventResponse(BaseModel):
    """Batch result for one event."""

    ok: bool
    event: str
    planned: int
    sent: int
    failed: int
    results: list[DeliveryResult]


class SendReadyRequest(BaseModel):
    to: Optional[str] = None
    barber: Optional[str] = None


class SendAssignmentRequest(BaseModel):
    to: Optional[str] = None
    client: Optional[str] = None
    barber: Optional[str] = None
    position: Optional[Union[int, float, str]] = None


class SendTestRequest(BaseModel):
    to: Optional[str] = None
    text: Optional[str] = None


def _bad_request(error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"ok": False, "error": error},
    )


async def _send_one(sms: InfobipClient, to: str, text: str) -> Any:
    try:
        result = await sms.send(normalize_phone(to), text)
    except SmsSendError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"ok": False, "error": str(e)},
        )
    return {"ok": True, "result": result}


def parse_position(position: Optional[Union[int, float, str]]) -> Optional[int]:
    """Line position when the kiosk sent a finite number, else None."""
    if position is None or (isinstance(position, str) and not position.strip()):
        return None
    try:
        value = float(position)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return int(value)


@router.post(
    "/events",
    response_model=KioskEventResponse,
    summary="Notify clients and barbers about a kiosk event",
    responses={
        400: {"description": "Event could not be planned; nothing was sent"},
    },
)
async def post_event(
    request: KioskEventRequest,
    sms: InfobipClient = Depends(get_sms_client),
) -> Any:
    """
    Plan and send the SMS for one kiosk event.

    Planning is all-or-nothing: if the payload is incomplete or names an
    unknown barber, nothing is sent and a 400 explains why. Once planned,
    every message is sent concurrently and per-recipient results are
    returned in plan order.
    """
    roster = get_roster_store().snapshot()
    result = plan(request.event, request.to_payload(), roster)

    if not result.ok:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"ok": False, "event": request.event, **result.error.to_dict()},
        )

    batch = await dispatch_plan(result.messages, sms)
    logger.info(f"{request.event}: {batch.sent}/{len(result.messages)} SMS sent")

    return KioskEventResponse(
        ok=batch.all_ok,
        event=request.event,
        planned=len(result.messages),
        sent=batch.sent,
        failed=batch.failed,
        results=[DeliveryResult(**o.to_dict()) for o in batch.outcomes],
    )


@router.post("/send-ready", summary="Tell a client their chair is ready")
async def send_ready(
    request: SendReadyRequest,
    sms: InfobipClient = Depends(get_sms_client),
) -> Any:
    if not request.to or not request.barber:
        return _bad_request("Missing to/barber")
    return await _send_one(sms, request.to, templates.chair_ready(request.barber))


@router.post("/send-assignment", summary="Tell a client who they are assigned to")
async def send_assignment(
    request: SendAssignmentRequest,
    sms: InfobipClient = Depends(get_sms_client),
) -> Any:
    if not request.to or not request.client or not request.barber:
        return _bad_request("Missing to/client/barber")
    text = templates.assignment_notice(
        request.client,
        request.barber,
        parse_position(request.position),
    )
    return await _send_one(sms, request.to, text)


@router.post("/test-send", summary="Send a test SMS")
async def send_test(
    request: SendTestRequest,
    sms: InfobipClient = Depends(get_sms_client),
) -> Any:
    if not request.to:
        return _bad_request("Missing to")
    return await _send_one(sms, request.to, request.text or templates.sample_message())
