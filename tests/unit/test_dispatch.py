"""Tests for concurrent plan delivery."""

import asyncio

import pytest
from unittest.mock import AsyncMock

from app.core.notifications import PlannedMessage, dispatch_plan
from app.infra.sms import SmsSendError


def _messages() -> list[PlannedMessage]:
    return [
        PlannedMessage(to="+12145559999", kind="assigned_client_multi", text="client"),
        PlannedMessage(to="+12145550102", kind="assigned_barber", text="lyric"),
        PlannedMessage(to="+12145550103", kind="assigned_barber", text="taja"),
    ]


class TestDispatchPlan:
    """Test dispatch_plan."""

    @pytest.mark.asyncio
    async def test_all_sent(self):
        sender = AsyncMock()
        sender.send.return_value = {"messages": [{"status": {"groupName": "PENDING"}}]}

        batch = await dispatch_plan(_messages(), sender)

        assert batch.sent == 3
        assert batch.failed == 0
        assert batch.all_ok
        assert sender.send.await_count == 3

    @pytest.mark.asyncio
    async def test_partial_failure_does_not_cancel_siblings(self):
        """One failed recipient; the rest still go out, results stay in order."""

        async def send(to, text):
            if to == "+12145550102":
                raise SmsSendError("Infobip 400", status_code=400)
            return {"ok": True}

        sender = AsyncMock()
        sender.send.side_effect = send

        batch = await dispatch_plan(_messages(), sender)

        assert [o.to for o in batch.outcomes] == ["+12145559999", "+12145550102", "+12145550103"]
        assert [o.ok for o in batch.outcomes] == [True, False, True]
        assert batch.outcomes[1].error == "Infobip 400"
        assert batch.sent == 2
        assert batch.failed == 1
        assert not batch.all_ok

    @pytest.mark.asyncio
    async def test_sends_run_concurrently(self):
        """All sends are in flight before any completes."""
        started = []
        release = asyncio.Event()

        async def send(to, text):
            started.append(to)
            if len(started) == 3:
                release.set()
            await release.wait()
            return "ok"

        sender = AsyncMock()
        sender.send.side_effect = send

        batch = await asyncio.wait_for(dispatch_plan(_messages(), sender), timeout=1.0)

        assert len(started) == 3
        assert batch.sent == 3

    @pytest.mark.asyncio
    async def test_empty_plan(self):
        sender = AsyncMock()

        batch = await dispatch_plan([], sender)

        assert batch.outcomes == []
        sender.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_outcome_to_dict(self):
        sender = AsyncMock()
        sender.send.side_effect = RuntimeError()

        batch = await dispatch_plan(_messages()[:1], sender)

        assert batch.outcomes[0].to_dict() == {
            "to": "+12145559999",
            "kind": "assigned_client_multi",
            "ok": False,
            "error": "RuntimeError",
        }
