"""
Event planners.

One planner per kiosk event kind. A planner turns an event payload and a
roster snapshot into the ordered list of SMS to send: the client message
first, then barber messages in group or roster order.

Planners do no I/O. Validation problems raise PlanningError, which plan()
converts into a failed PlanResult before anything is sent.
"""

import logging
from collections.abc import Callable

from app.core.roster import RosterDirectory, normalize_phone
from . import templates
from .grouping import group_by_barber, members_note, single_or_multi, staff_to_notify
from .types import (
    EventKind,
    EventPayload,
    PlanErrorCode,
    PlannedMessage,
    PlanningError,
    PlanResult,
)

logger = logging.getLogger(__name__)

Planner = Callable[[EventPayload, RosterDirectory], list[PlannedMessage]]


def _client_phone(payload: EventPayload) -> str:
    """Validate client identity and return the normalized client phone."""
    if not payload.client_name or not payload.client_name.strip():
        raise PlanningError(PlanErrorCode.MISSING_FIELD, "Missing clientName")
    phone = normalize_phone(payload.client_phone)
    if not phone:
        raise PlanningError(PlanErrorCode.MISSING_FIELD, "Missing clientPhone")
    return phone


def _require_assignments(payload: EventPayload) -> None:
    if not payload.has_assignments:
        raise PlanningError(PlanErrorCode.MISSING_ASSIGNMENTS, "Missing assignments")


def plan_specific_barber_request(
    payload: EventPayload,
    roster: RosterDirectory,
) -> list[PlannedMessage]:
    client_phone = _client_phone(payload)
    _require_assignments(payload)
    groups = group_by_barber(payload.assignments, roster)

    text, is_multi = single_or_multi(
        [g.barber_name for g in groups.values()],
        payload.client_name,
        templates.request_client_single,
        templates.request_client_multi,
    )
    kind = "request_client_multi" if is_multi else "request_client_single"
    messages = [PlannedMessage(to=client_phone, kind=kind, text=text)]

    for group in groups.values():
        messages.append(PlannedMessage(
            to=group.phone,
            kind="request_barber",
            text=templates.request_barber(
                payload.client_name,
                members_note(group.count, group.indexes_csv),
                payload.declined_photos,
            ),
        ))
    return messages


def plan_client_removed(
    payload: EventPayload,
    roster: RosterDirectory,
) -> list[PlannedMessage]:
    client_phone = _client_phone(payload)
    return [PlannedMessage(
        to=client_phone,
        kind="removed_client",
        text=templates.removed_client(payload.client_name),
    )]


def plan_client_assigned(
    payload: EventPayload,
    roster: RosterDirectory,
) -> list[PlannedMessage]:
    client_phone = _client_phone(payload)
    _require_assignments(payload)
    groups = group_by_barber(payload.assignments, roster)

    text, is_multi = single_or_multi(
        [g.barber_name for g in groups.values()],
        payload.client_name,
        templates.assigned_client_single,
        templates.assigned_client_multi,
    )
    kind = "assigned_client_multi" if is_multi else "assigned_client_single"
    messages = [PlannedMessage(to=client_phone, kind=kind, text=text)]

    for group in groups.values():
        messages.append(PlannedMessage(
            to=group.phone,
            kind="assigned_barber",
            text=templates.assigned_barber(
                payload.client_name,
                members_note(group.count, group.indexes_csv),
                payload.declined_photos,
            ),
        ))
    return messages


def plan_placed_on_waitlist(
    payload: EventPayload,
    roster: RosterDirectory,
) -> list[PlannedMessage]:
    client_phone = _client_phone(payload)

    if payload.has_assignments:
        groups = group_by_barber(payload.assignments, roster)
        # One barber still gets the multi wording.
        text, _ = single_or_multi(
            [g.barber_name for g in groups.values()],
            payload.client_name,
            templates.waitlist_client_multi,
            templates.waitlist_client_multi,
        )
        messages = [PlannedMessage(to=client_phone, kind="waitlist_client_multi", text=text)]
        for group in groups.values():
            messages.append(PlannedMessage(
                to=group.phone,
                kind="waitlist_barber",
                text=templates.waitlist_barber(
                    payload.client_name,
                    members_note(group.count, group.indexes_csv),
                    payload.declined_photos,
                ),
            ))
        return messages

    # First-available: every barber who is not free hears about it.
    messages = [PlannedMessage(
        to=client_phone,
        kind="waitlist_client_position",
        text=templates.waitlist_client_position(payload.client_name, payload.index_label),
    )]
    barber_text = templates.waitlist_barber_first_available(
        payload.client_name,
        payload.index_label,
        payload.declined_photos,
    )
    for member in staff_to_notify(roster):
        messages.append(PlannedMessage(
            to=normalize_phone(member.phone),
            kind="waitlist_barber_first_available",
            text=barber_text,
        ))
    return messages


def plan_re_waitlisted(
    payload: EventPayload,
    roster: RosterDirectory,
) -> list[PlannedMessage]:
    client_phone = _client_phone(payload)
    groups = group_by_barber(payload.assignments, roster) if payload.has_assignments else {}

    if groups:
        text, _ = single_or_multi(
            [g.barber_name for g in groups.values()],
            payload.client_name,
            templates.rewaitlist_client_multi,
            templates.rewaitlist_client_multi,
        )
        messages = [PlannedMessage(to=client_phone, kind="rewaitlist_client_multi", text=text)]
    else:
        messages = [PlannedMessage(
            to=client_phone,
            kind="rewaitlist_client",
            text=templates.rewaitlist_client(payload.client_name),
        )]

    for member in staff_to_notify(roster):
        group = groups.get(member.id)
        note = members_note(group.count, group.indexes_csv) if group else ""
        messages.append(PlannedMessage(
            to=normalize_phone(member.phone),
            kind="rewaitlist_barber",
            text=templates.rewaitlist_barber(payload.client_name, note, payload.index_label),
        ))
    return messages


PLANNERS: dict[EventKind, Planner] = {
    EventKind.SPECIFIC_BARBER_REQUEST: plan_specific_barber_request,
    EventKind.CLIENT_REMOVED_FROM_KIOSK: plan_client_removed,
    EventKind.CLIENT_ASSIGNED: plan_client_assigned,
    EventKind.CLIENT_PLACED_ON_WAITLIST: plan_placed_on_waitlist,
    EventKind.CLIENT_RE_WAITLISTED: plan_re_waitlisted,
}


def plan(event_kind: str, payload: EventPayload, roster: RosterDirectory) -> PlanResult:
    """
    Plan the SMS for one kiosk event.

    Args:
        event_kind: Event name as sent by the kiosk
        payload: Event body
        roster: Roster snapshot to resolve barbers against

    Returns:
        PlanResult with every message, or with an error and no messages
    """
    try:
        kind = EventKind(event_kind)
    except ValueError:
        logger.warning(f"Unknown event kind: {event_kind!r}")
        return PlanResult.failure(
            PlanErrorCode.UNKNOWN_EVENT_KIND,
            f"Unknown event kind: {event_kind}",
        )

    try:
        messages = PLANNERS[kind](payload, roster)
    except PlanningError as e:
        logger.warning(f"Cannot plan {kind.value}: {e.code.value} - {e.message}")
        return PlanResult.failure(e.code, e.message)

    logger.debug(f"Planned {len(messages)} messages for {kind.value}")
    return PlanResult.success(messages)
