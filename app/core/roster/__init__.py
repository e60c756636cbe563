"""Staff roster module."""

from .models import StaffMember, StaffStatus
from .phone import normalize_phone
from .directory import RosterDirectory
from .store import (
    DEFAULT_STAFF,
    RosterStore,
    get_roster_store,
    load_roster_file,
    reset_roster_store,
)

__all__ = [
    # Types
    "StaffMember",
    "StaffStatus",
    # Lookups
    "normalize_phone",
    "RosterDirectory",
    # Snapshot store
    "DEFAULT_STAFF",
    "RosterStore",
    "get_roster_store",
    "load_roster_file",
    "reset_roster_store",
]
