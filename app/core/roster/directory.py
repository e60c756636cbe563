"""
Roster Directory.

Read-only snapshot of the staff table with the lookups the planners and
the inbound classifier need. A new snapshot replaces the old one as a
whole; nothing here mutates a StaffMember.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Optional

from .models import StaffMember, StaffStatus
from .phone import normalize_phone


class RosterDirectory:
    """
    Immutable view over the roster.

    Keeps roster order, which drives the order of fan-out messages.
    """

    def __init__(
        self,
        staff: Iterable[StaffMember],
        extra_phones: Optional[Mapping[str, str]] = None,
    ):
        """Build directory.

        Args:
            staff: Staff members in roster order
            extra_phones: Additional phone -> staff id entries
        """
        self._staff: tuple[StaffMember, ...] = tuple(staff)
        self._by_id: dict[str, StaffMember] = {}
        for member in self._staff:
            if member.id in self._by_id:
                raise ValueError(f"Duplicate staff id: {member.id}")
            self._by_id[member.id] = member

        self._by_phone: dict[str, StaffMember] = {}
        for member in self._staff:
            key = normalize_phone(member.phone)
            if key:
                self._by_phone.setdefault(key, member)
        for phone, staff_id in (extra_phones or {}).items():
            key = normalize_phone(phone)
            member = self._by_id.get(staff_id)
            if key and member is not None:
                self._by_phone[key] = member

    def __iter__(self) -> Iterator[StaffMember]:
        return iter(self._staff)

    def __len__(self) -> int:
        return len(self._staff)

    @property
    def staff(self) -> tuple[StaffMember, ...]:
        return self._staff

    def by_id(self, staff_id: str) -> Optional[StaffMember]:
        return self._by_id.get(staff_id)

    def by_phone(self, raw_phone: Optional[str]) -> Optional[StaffMember]:
        """Find a staff member by phone in any formatting."""
        key = normalize_phone(raw_phone)
        if not key:
            return None
        return self._by_phone.get(key)

    def busy(self) -> list[StaffMember]:
        """Staff who are not available (busy or unavailable)."""
        return [s for s in self._staff if s.status != StaffStatus.AVAILABLE]

    def unavailable(self) -> list[StaffMember]:
        """Staff explicitly marked unavailable. Always a subset of busy()."""
        return [s for s in self._staff if s.status == StaffStatus.UNAVAILABLE]

    def phone_book(self) -> dict[str, str]:
        """Normalized phone -> display name for every known barber phone."""
        return {phone: member.name for phone, member in self._by_phone.items()}
