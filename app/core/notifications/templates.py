"""
SMS copy for kiosk events and inbound replies.

Every function is pure: fields in, final text out. The wording here is
what clients and barbers see on their phones, so changes are user-facing.
"""

from typing import Optional, Union

from app.config import settings

DECLINED_SUFFIX = " — PHOTOS/VIDEOS DECLINED"

CLIENT_FOOTER = "Reply STOP to opt out, HELP for help."


def _brand() -> str:
    return f"{settings.brand_name}:"


def declined_note(declined_photos: bool) -> str:
    return DECLINED_SUFFIX if declined_photos else ""


def position_label(index_label: Optional[Union[str, int]]) -> str:
    """Line position as shown to clients; "?" when the kiosk sent none."""
    if index_label is None or str(index_label).strip() == "":
        return "?"
    return str(index_label).strip()


# === Specific barber request ===

def request_client_single(client_name: str, barber: str) -> str:
    return (
        f"{_brand()} Hi {client_name}, your request for {barber} is in. "
        f"We'll text you when {barber} is ready for you. {CLIENT_FOOTER}"
    )


def request_client_multi(client_name: str, barbers: str) -> str:
    return (
        f"{_brand()} Hi {client_name}, your requests for {barbers} are in. "
        f"We'll text you when each barber is ready. {CLIENT_FOOTER}"
    )


def request_barber(client_name: str, members_note: str, declined_photos: bool) -> str:
    return f"{_brand()} {client_name} requested you{members_note}.{declined_note(declined_photos)}"


# === Removed from kiosk ===

def removed_client(client_name: str) -> str:
    return (
        f"{_brand()} Hi {client_name}, you've been removed from the waitlist. "
        f"If this is a mistake, please see the front desk. {CLIENT_FOOTER}"
    )


# === Assigned ===

def assigned_client_single(client_name: str, barber: str) -> str:
    return (
        f"{_brand()} {client_name}, you're assigned to {barber}. "
        f"Please head to their chair. {CLIENT_FOOTER}"
    )


def assigned_client_multi(client_name: str, barbers: str) -> str:
    return (
        f"{_brand()} {client_name}, your party is assigned to {barbers}. "
        f"Please head to their chairs. {CLIENT_FOOTER}"
    )


def assigned_barber(client_name: str, members_note: str, declined_photos: bool) -> str:
    return f"{_brand()} {client_name} is assigned to you{members_note}.{declined_note(declined_photos)}"


# === Placed on waitlist ===

def waitlist_client_multi(client_name: str, barbers: str) -> str:
    return (
        f"{_brand()} Hi {client_name}, you're on the waitlist for {barbers}. "
        f"We'll text you when it's your turn. {CLIENT_FOOTER}"
    )


def waitlist_client_position(client_name: str, index_label: Optional[Union[str, int]]) -> str:
    return (
        f"{_brand()} Hi {client_name}, you're on the waitlist for the next available barber. "
        f"You're #{position_label(index_label)} in line. {CLIENT_FOOTER}"
    )


def waitlist_barber(client_name: str, members_note: str, declined_photos: bool) -> str:
    return f"{_brand()} {client_name} joined your waitlist{members_note}.{declined_note(declined_photos)}"


def waitlist_barber_first_available(
    client_name: str,
    index_label: Optional[Union[str, int]],
    declined_photos: bool,
) -> str:
    return (
        f"{_brand()} {client_name} joined the waitlist for next available "
        f"(#{position_label(index_label)}).{declined_note(declined_photos)}"
    )


# === Re-waitlisted ===

def rewaitlist_client(client_name: str) -> str:
    return (
        f"{_brand()} Hi {client_name}, you're back on the waitlist. "
        f"We'll text you when it's your turn. {CLIENT_FOOTER}"
    )


def rewaitlist_client_multi(client_name: str, barbers: str) -> str:
    return (
        f"{_brand()} Hi {client_name}, you're back on the waitlist for {barbers}. "
        f"We'll text you when it's your turn. {CLIENT_FOOTER}"
    )


def rewaitlist_barber(
    client_name: str,
    members_note: str,
    index_label: Optional[Union[str, int]] = None,
) -> str:
    position = ""
    if index_label is not None and str(index_label).strip():
        position = f" (#{str(index_label).strip()})"
    return f"{_brand()} {client_name} is back on the waitlist{position}{members_note}."


# === Direct kiosk sends ===

def chair_ready(barber: str) -> str:
    return (
        f"{_brand()} Your chair is ready with {barber}. "
        f"Reply STOP to cancel, HELP for help, START to re-opt in."
    )


def assignment_notice(client: str, barber: str, position: Optional[int] = None) -> str:
    line = f"You're #{position} in line. " if position is not None else ""
    return (
        f"{_brand()} {client}, you're assigned to {barber}. {line}"
        f"Reply STOP to cancel, HELP for help, START to re-opt in."
    )


def sample_message() -> str:
    return f"{settings.brand_name} test message."


# === Inbound replies ===

def help_reply() -> str:
    return (
        f"{_brand()} For help with SMS visit updates, call {settings.support_phone} "
        f"or email {settings.support_email}. Reply STOP to opt out, START to rejoin."
    )


def opt_in_reply() -> str:
    return (
        f"{_brand()} You're subscribed to SMS visit updates again. "
        f"Reply STOP to opt out, HELP for help."
    )


def availability_reply(barber: str, available: bool) -> str:
    state = "AVAILABLE" if available else "UNAVAILABLE"
    return f"{_brand()} Thanks {barber}, you're now marked {state}."


def unknown_barber_reply() -> str:
    return (
        f"{_brand()} This number isn't recognized as a barber, so your status "
        f"wasn't changed. Please check with the front desk."
    )


def default_reply() -> str:
    return f"{_brand()} Thanks! Reply HELP for help or STOP to opt out."
