"""
Inbound SMS handler.

Classifies a reply and carries out its side effects: forwarding a
barber's availability to the kiosk and sending the confirmation SMS.
Side-effect failures are logged and reported, never raised, so the
provider webhook can always be acknowledged.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from app.core.roster import RosterDirectory
from app.infra.sms import SmsSendError, SmsSender
from app.infra.staff_status import StaffStatusClient, StaffStatusError
from .classifier import InboundClassifier
from .types import InboundAction, InboundKind

logger = logging.getLogger(__name__)


@dataclass
class InboundOutcome:
    """What happened while handling one inbound message."""

    action: InboundAction
    replied: bool = False
    status_updated: bool = False
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "action": self.action.kind.value,
            "replied": self.replied,
            "status_updated": self.status_updated,
            "error": self.error,
        }


class InboundHandler:
    """Runs the classify -> side effect -> reply pipeline."""

    def __init__(self, sms_sender: SmsSender, status_client: StaffStatusClient):
        self._sms = sms_sender
        self._status = status_client

    async def handle(
        self,
        from_raw: Optional[str],
        text_raw: Optional[str],
        roster: RosterDirectory,
    ) -> InboundOutcome:
        """Handle one inbound message.

        Args:
            from_raw: Sender as the provider reported it
            text_raw: Message body
            roster: Roster snapshot for barber lookup
        """
        action = InboundClassifier(roster).classify(from_raw, text_raw)
        outcome = InboundOutcome(action=action)
        logger.info(f"Inbound {action.command!r} from {action.sender} -> {action.kind.value}")

        if action.kind == InboundKind.SET_AVAILABILITY:
            try:
                outcome.status_updated = await self._status.set_availability(
                    action.staff_id, bool(action.available)
                )
            except StaffStatusError as e:
                outcome.error = str(e)

        if action.sends_reply and action.sender:
            try:
                await self._sms.send(action.sender, action.reply)
                outcome.replied = True
            except SmsSendError as e:
                logger.error(f"Reply to {action.sender} failed: {e}")
                outcome.error = outcome.error or str(e)

        return outcome
