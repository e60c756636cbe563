"""Grouping and phrasing helpers shared by the event planners."""

from collections.abc import Callable, Iterable

from app.core.roster import RosterDirectory, StaffMember, normalize_phone
from .types import Assignment, GroupedAssignment, PlanErrorCode, PlanningError


def group_by_barber(
    assignments: Iterable[Assignment],
    roster: RosterDirectory,
) -> dict[str, GroupedAssignment]:
    """
    Group party members by the barber serving them.

    Groups keep the order in which each barber first appears; member
    indexes inside a group are sorted ascending.

    Raises:
        PlanningError: UnknownBarber if an assignment names a barber
            that is not on the roster
    """
    groups: dict[str, GroupedAssignment] = {}

    for assignment in assignments:
        group = groups.get(assignment.barber_id)
        if group is None:
            member = roster.by_id(assignment.barber_id)
            if member is None:
                raise PlanningError(
                    PlanErrorCode.UNKNOWN_BARBER,
                    f"Unknown barber: {assignment.barber_id}",
                )
            group = GroupedAssignment(
                barber_id=member.id,
                barber_name=member.name,
                phone=normalize_phone(member.phone),
            )
            groups[member.id] = group
        group.indexes.append(assignment.member_index)

    for group in groups.values():
        group.indexes.sort()

    return groups


def members_note(count: int, indexes_csv: str) -> str:
    """Suffix listing party positions, only when a barber serves several."""
    if count <= 1:
        return ""
    return f" (members: {indexes_csv})"


def single_or_multi(
    names: Iterable[str],
    client_name: str,
    single: Callable[[str, str], str],
    multi: Callable[[str, str], str],
) -> tuple[str, bool]:
    """
    Render client text naming one or several barbers.

    Callers that always use the multi wording pass the multi template
    for both slots.

    Returns:
        (text, is_multi)
    """
    distinct = list(dict.fromkeys(names))
    if len(distinct) == 1:
        return single(client_name, distinct[0]), False
    return multi(client_name, ", ".join(distinct)), True


def staff_to_notify(roster: RosterDirectory) -> list[StaffMember]:
    """
    Busy ∪ unavailable staff in roster order, one entry per phone.

    unavailable() is contained in busy() today; both are read anyway.
    """
    notify_ids = {s.id for s in roster.busy()} | {s.id for s in roster.unavailable()}

    seen_phones: set[str] = set()
    result = []
    for member in roster:
        if member.id not in notify_ids:
            continue
        phone = normalize_phone(member.phone)
        if not phone or phone in seen_phones:
            continue
        seen_phones.add(phone)
        result.append(member)
    return result
