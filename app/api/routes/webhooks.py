"""
Infobip Inbound SMS Webhook.

Infobip posts inbound messages in a few different envelopes. Each known
envelope is parsed into one InboundSms before anything else looks at it.
The endpoint always answers 200 so Infobip does not retry.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.core.inbound import InboundHandler, InboundSms
from app.core.roster import get_roster_store
from app.infra.sms import get_sms_client
from app.infra.staff_status import get_staff_status_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhooks/infobip", tags=["Webhooks"])


class InfobipSender(BaseModel):
    """Sender object used by some Infobip channels."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")


class InfobipMessage(BaseModel):
    """One inbound message, in any of the field spellings Infobip uses."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)

    from_: Optional[str] = Field(default=None, alias="from")
    sender: Optional[Union[InfobipSender, str]] = None
    msisdn: Optional[str] = None
    clean_text: Optional[str] = Field(default=None, alias="cleanText")
    text: Optional[str] = None

    def sender_address(self) -> str:
        if self.from_:
            return self.from_
        if isinstance(self.sender, InfobipSender) and self.sender.phone_number:
            return self.sender.phone_number
        if isinstance(self.sender, str) and self.sender:
            return self.sender
        return self.msisdn or ""

    def body(self) -> str:
        if self.clean_text is not None:
            return self.clean_text
        return self.text or ""


class InboundShape(str, Enum):
    """Known inbound envelopes, in the order they are tried."""

    RESULTS = "results"                 # {"results": [msg, ...]}
    MESSAGES = "messages"               # {"messages": [msg, ...]}
    INBOUND_MESSAGE = "inboundMessage"  # {"inboundMessage": msg}


@dataclass(frozen=True)
class ProviderInbound:
    """A recognized envelope and the message it carried."""

    shape: InboundShape
    message: InfobipMessage

    def to_inbound_sms(self) -> InboundSms:
        return InboundSms(
            from_raw=self.message.sender_address(),
            text_raw=self.message.body(),
        )


def parse_inbound_payload(body: object) -> Optional[ProviderInbound]:
    """
    Recognize an Infobip inbound envelope.

    Returns:
        ProviderInbound for the first matching shape, or None when the
        body is not an inbound message we understand
    """
    if not isinstance(body, dict):
        return None

    for shape in InboundShape:
        candidate = body.get(shape.value)
        if shape in (InboundShape.RESULTS, InboundShape.MESSAGES):
            candidate = candidate[0] if isinstance(candidate, list) and candidate else None
        if not isinstance(candidate, dict):
            continue
        try:
            return ProviderInbound(shape=shape, message=InfobipMessage.model_validate(candidate))
        except ValidationError as e:
            logger.warning(f"Malformed {shape.value} inbound payload: {e}")
            return None

    return None


def get_inbound_handler() -> InboundHandler:
    """Build the handler from the singleton clients."""
    return InboundHandler(get_sms_client(), get_staff_status_client())


@router.post("/inbound-sms", response_class=PlainTextResponse)
async def inbound_sms(
    request: Request,
    handler: InboundHandler = Depends(get_inbound_handler),
) -> PlainTextResponse:
    """
    Handle an inbound SMS from Infobip.

    STOP-type replies get no answer; every other recognized message gets
    exactly one reply. Always acknowledges with 200.
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Inbound webhook body is not JSON")
        return PlainTextResponse("OK")

    logger.debug(f"Inbound webhook: {json.dumps(body)[:1000]}")

    parsed = parse_inbound_payload(body)
    if parsed is None:
        logger.info("Inbound webhook without a recognizable message")
        return PlainTextResponse("OK")

    sms = parsed.to_inbound_sms()
    logger.info(f"Inbound {parsed.shape.value} message from {sms.from_raw}")

    try:
        outcome = await handler.handle(sms.from_raw, sms.text_raw, get_roster_store().snapshot())
    except Exception as e:
        logger.exception(f"Inbound handler error: {e}")
        return PlainTextResponse("OK")

    logger.debug(f"Inbound action: {outcome.action.to_dict()}")
    if outcome.error:
        logger.warning(f"Inbound {outcome.action.kind.value} handled with error: {outcome.error}")

    return PlainTextResponse("OK")
