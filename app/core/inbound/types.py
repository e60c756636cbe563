"""Inbound SMS command types."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InboundKind(str, Enum):
    """What an inbound reply asks for."""

    OPT_OUT = "opt_out"                    # STOP and friends
    OPT_IN = "opt_in"                      # START and friends
    HELP = "help"
    SET_AVAILABILITY = "set_availability"  # Barber AVAILABLE / UNAVAILABLE
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class InboundSms:
    """Provider-independent inbound message."""

    from_raw: str
    text_raw: str


@dataclass(frozen=True)
class InboundAction:
    """Result of classifying one inbound message."""

    kind: InboundKind
    sender: str  # Normalized phone
    command: str  # Normalized text

    # Reply to send back; None means stay silent
    reply: Optional[str] = None

    # For SET_AVAILABILITY
    staff_id: Optional[str] = None
    staff_name: Optional[str] = None
    available: Optional[bool] = None

    # Why an availability command was not applied
    reason: Optional[str] = None

    @property
    def sends_reply(self) -> bool:
        return self.reply is not None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "kind": self.kind.value,
            "sender": self.sender,
            "command": self.command,
            "reply": self.reply,
            "staff_id": self.staff_id,
            "available": self.available,
            "reason": self.reason,
        }
