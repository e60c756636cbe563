"""Staff roster types."""

from dataclasses import dataclass
from enum import Enum


class StaffStatus(str, Enum):
    """Barber availability as reported by the kiosk."""

    AVAILABLE = "available"
    BUSY = "busy"              # With a client
    UNAVAILABLE = "unavailable"  # Off the floor / on break


@dataclass(frozen=True)
class StaffMember:
    """A barber on the roster."""

    id: str
    name: str
    phone: str  # E.164
    status: StaffStatus = StaffStatus.AVAILABLE

    @property
    def is_available(self) -> bool:
        return self.status == StaffStatus.AVAILABLE

    @classmethod
    def from_dict(cls, data: dict) -> "StaffMember":
        """Create from a roster file / API dict."""
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or data["id"]),
            phone=str(data.get("phone", "")),
            status=StaffStatus(str(data.get("status", "available")).lower()),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "status": self.status.value,
        }
