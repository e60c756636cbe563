"""
Roster snapshot holder.

The kiosk owns barber status. It pushes a whole new roster when statuses
change, and requests always read the snapshot that was current when they
started.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from app.config import settings
from .directory import RosterDirectory
from .models import StaffMember, StaffStatus

logger = logging.getLogger(__name__)


DEFAULT_STAFF: tuple[StaffMember, ...] = (
    StaffMember(id="mike", name="Mike", phone="+12145550101", status=StaffStatus.AVAILABLE),
    StaffMember(id="lyric", name="Lyric", phone="+12145550102", status=StaffStatus.AVAILABLE),
    StaffMember(id="taja", name="Taja", phone="+12145550103", status=StaffStatus.BUSY),
    StaffMember(id="dre", name="Dre", phone="+12145550104", status=StaffStatus.UNAVAILABLE),
)


def load_roster_file(path: str) -> list[StaffMember]:
    """
    Load staff from a JSON file.

    Accepts either a list of staff objects or {"staff": [...]}.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("staff", [])
    return [StaffMember.from_dict(item) for item in data]


class RosterStore:
    """Holds the current RosterDirectory and swaps it atomically."""

    def __init__(
        self,
        staff: Optional[list[StaffMember]] = None,
        extra_phones: Optional[dict[str, str]] = None,
    ):
        self._extra_phones = dict(extra_phones or {})
        self._directory = RosterDirectory(
            staff if staff is not None else DEFAULT_STAFF,
            self._extra_phones,
        )

    def snapshot(self) -> RosterDirectory:
        """Current roster. Safe to hold for the length of a request."""
        return self._directory

    def replace(self, staff: list[StaffMember]) -> RosterDirectory:
        """Install a new roster snapshot.

        Raises:
            ValueError: If staff ids are not unique
        """
        directory = RosterDirectory(staff, self._extra_phones)
        self._directory = directory
        logger.info(f"Roster replaced: {len(directory)} staff, {len(directory.busy())} busy")
        return directory


# Singleton
_store: Optional[RosterStore] = None


def get_roster_store() -> RosterStore:
    """Get singleton RosterStore, loading ROSTER_FILE on first use."""
    global _store
    if _store is None:
        staff = None
        if settings.roster_file:
            staff = load_roster_file(settings.roster_file)
            logger.info(f"Loaded {len(staff)} staff from {settings.roster_file}")
        _store = RosterStore(staff=staff, extra_phones=settings.barber_phones)
    return _store


def reset_roster_store() -> None:
    """Drop the singleton (tests and hot reload)."""
    global _store
    _store = None
