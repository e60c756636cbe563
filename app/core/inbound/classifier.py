"""
Keyword classifier for inbound SMS.

Single-shot: each message is classified on its own, there is no
conversation state. Priority order is opt-out, opt-in, HELP, then
barber availability; everything else is unrecognized.
"""

import logging
import re
from typing import Optional

from app.core.notifications import templates
from app.core.roster import RosterDirectory, normalize_phone
from .types import InboundAction, InboundKind

logger = logging.getLogger(__name__)


OPT_OUT_KEYWORDS = frozenset({"STOP", "STOPALL", "UNSUBSCRIBE", "CANCEL", "END", "QUIT"})
OPT_IN_KEYWORDS = frozenset({"START", "UNSTOP", "SUBSCRIBE"})
HELP_KEYWORD = "HELP"
AVAILABILITY_KEYWORDS = {"AVAILABLE": True, "UNAVAILABLE": False}

_WHITESPACE = re.compile(r"\s+")


def normalize_command(text: Optional[str]) -> str:
    """Trim, uppercase and collapse inner whitespace."""
    return _WHITESPACE.sub(" ", str(text or "").strip().upper())


class InboundClassifier:
    """Maps inbound texts to InboundActions."""

    def __init__(
        self,
        roster: RosterDirectory,
        opt_out_keywords: frozenset[str] = OPT_OUT_KEYWORDS,
        opt_in_keywords: frozenset[str] = OPT_IN_KEYWORDS,
    ):
        """Initialize classifier.

        Args:
            roster: Roster snapshot used to recognize barber phones
            opt_out_keywords: Uppercase opt-out keywords
            opt_in_keywords: Uppercase opt-in keywords
        """
        self._roster = roster
        self._opt_out = opt_out_keywords
        self._opt_in = opt_in_keywords

    def classify(self, from_raw: Optional[str], text_raw: Optional[str]) -> InboundAction:
        """
        Classify one inbound message. Never raises.

        Args:
            from_raw: Sender address as the provider sent it
            text_raw: Message body

        Returns:
            InboundAction with the reply to send (None for opt-out)
        """
        sender = normalize_phone(from_raw)
        command = normalize_command(text_raw)

        if command in self._opt_out:
            return InboundAction(kind=InboundKind.OPT_OUT, sender=sender, command=command)

        if command in self._opt_in:
            return InboundAction(
                kind=InboundKind.OPT_IN,
                sender=sender,
                command=command,
                reply=templates.opt_in_reply(),
            )

        if command == HELP_KEYWORD:
            return InboundAction(
                kind=InboundKind.HELP,
                sender=sender,
                command=command,
                reply=templates.help_reply(),
            )

        if command in AVAILABILITY_KEYWORDS:
            return self._availability(sender, command)

        return InboundAction(
            kind=InboundKind.UNRECOGNIZED,
            sender=sender,
            command=command,
            reply=templates.default_reply(),
        )

    def _availability(self, sender: str, command: str) -> InboundAction:
        available = AVAILABILITY_KEYWORDS[command]
        member = self._roster.by_phone(sender)

        if member is None:
            logger.info(f"{command} from unknown number {sender}")
            return InboundAction(
                kind=InboundKind.UNRECOGNIZED,
                sender=sender,
                command=command,
                reply=templates.unknown_barber_reply(),
                reason="sender is not a barber",
            )

        return InboundAction(
            kind=InboundKind.SET_AVAILABILITY,
            sender=sender,
            command=command,
            reply=templates.availability_reply(member.name, available),
            staff_id=member.id,
            staff_name=member.name,
            available=available,
        )


def classify_inbound(
    from_raw: Optional[str],
    text_raw: Optional[str],
    roster: RosterDirectory,
) -> InboundAction:
    """Convenience function to classify one inbound message."""
    return InboundClassifier(roster).classify(from_raw, text_raw)
