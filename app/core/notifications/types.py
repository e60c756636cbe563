"""Types for kiosk event notifications."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class EventKind(str, Enum):
    """Kiosk lifecycle events that produce SMS."""

    SPECIFIC_BARBER_REQUEST = "SPECIFIC_BARBER_REQUEST"
    CLIENT_REMOVED_FROM_KIOSK = "CLIENT_REMOVED_FROM_KIOSK"
    CLIENT_ASSIGNED = "CLIENT_ASSIGNED"
    CLIENT_PLACED_ON_WAITLIST = "CLIENT_PLACED_ON_WAITLIST"
    CLIENT_RE_WAITLISTED = "CLIENT_RE-WAITLISTED"


class PlanErrorCode(str, Enum):
    """Why an event could not be planned."""

    MISSING_FIELD = "MissingField"
    MISSING_ASSIGNMENTS = "MissingAssignments"
    UNKNOWN_BARBER = "UnknownBarber"
    UNKNOWN_EVENT_KIND = "UnknownEventKind"


class PlanningError(Exception):
    """Raised inside planners; plan() turns it into a failed PlanResult."""

    def __init__(self, code: PlanErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


@dataclass(frozen=True)
class Assignment:
    """One party member assigned to (or requesting) a barber."""

    barber_id: str
    member_index: int = 1


@dataclass(frozen=True)
class EventPayload:
    """Kiosk event body. Kind-specific fields are optional."""

    client_name: str = ""
    client_phone: str = ""
    assignments: tuple[Assignment, ...] = ()
    declined_photos: bool = False
    index_label: Optional[Union[str, int]] = None

    @property
    def has_assignments(self) -> bool:
        return len(self.assignments) > 0


@dataclass
class GroupedAssignment:
    """All party members one barber serves for an event."""

    barber_id: str
    barber_name: str
    phone: str
    indexes: list[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.indexes)

    @property
    def indexes_csv(self) -> str:
        return ", ".join(str(i) for i in self.indexes)


@dataclass(frozen=True)
class PlannedMessage:
    """One outbound SMS."""

    to: str
    kind: str
    text: str

    def to_dict(self) -> dict:
        return {"to": self.to, "kind": self.kind, "text": self.text}


@dataclass(frozen=True)
class PlanError:
    """Planning failure surfaced to the caller."""

    code: PlanErrorCode
    message: str

    def to_dict(self) -> dict:
        return {"code": self.code.value, "error": self.message}


@dataclass(frozen=True)
class PlanResult:
    """
    Outcome of planning one event.

    Either a complete message list or an error, never both. A failed
    plan has no messages, so callers cannot send half an event.
    """

    messages: tuple[PlannedMessage, ...] = ()
    error: Optional[PlanError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, messages: list[PlannedMessage]) -> "PlanResult":
        return cls(messages=tuple(messages))

    @classmethod
    def failure(cls, code: PlanErrorCode, message: str) -> "PlanResult":
        return cls(error=PlanError(code=code, message=message))
