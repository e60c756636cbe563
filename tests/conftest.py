"""Shared fixtures."""

import pytest

from app.core.roster import RosterDirectory, StaffMember, StaffStatus


def make_staff() -> list[StaffMember]:
    """Roster used across tests.

    Kay shares Taja's phone (written differently) to exercise
    phone de-duplication.
    """
    return [
        StaffMember(id="mike", name="Mike", phone="+12145550101", status=StaffStatus.AVAILABLE),
        StaffMember(id="lyric", name="Lyric", phone="+12145550102", status=StaffStatus.AVAILABLE),
        StaffMember(id="taja", name="Taja", phone="+12145550103", status=StaffStatus.BUSY),
        StaffMember(id="dre", name="Dre", phone="(214) 555-0104", status=StaffStatus.UNAVAILABLE),
        StaffMember(id="kay", name="Kay", phone="214.555.0103", status=StaffStatus.UNAVAILABLE),
    ]


@pytest.fixture
def staff() -> list[StaffMember]:
    return make_staff()


@pytest.fixture
def roster(staff) -> RosterDirectory:
    return RosterDirectory(staff)


@pytest.fixture
def roster_store(monkeypatch, staff):
    """Install a RosterStore singleton built from the shared roster."""
    from app.core.roster import RosterStore, store

    roster_store = RosterStore(staff=staff)
    monkeypatch.setattr(store, "_store", roster_store)
    return roster_store
