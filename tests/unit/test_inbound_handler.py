"""Tests for inbound SMS side effects."""

import pytest
from unittest.mock import AsyncMock

from app.core.inbound import InboundHandler, InboundKind
from app.infra.sms import SmsSendError
from app.infra.staff_status import StaffStatusClient, StaffStatusError


class TestInboundHandler:
    """Test InboundHandler."""

    @pytest.fixture
    def mock_sms(self):
        sms = AsyncMock()
        sms.send.return_value = {"messages": []}
        return sms

    @pytest.fixture
    def mock_status(self):
        status = AsyncMock()
        status.set_availability.return_value = True
        return status

    @pytest.fixture
    def handler(self, mock_sms, mock_status):
        return InboundHandler(mock_sms, mock_status)

    @pytest.mark.asyncio
    async def test_stop_sends_nothing(self, handler, mock_sms, mock_status, roster):
        outcome = await handler.handle("+19725550000", "stop", roster)

        assert outcome.action.kind == InboundKind.OPT_OUT
        assert not outcome.replied
        mock_sms.send.assert_not_called()
        mock_status.set_availability.assert_not_called()

    @pytest.mark.asyncio
    async def test_help_sends_one_reply(self, handler, mock_sms, roster):
        outcome = await handler.handle("972-555-0000", "  Help  ", roster)

        assert outcome.replied
        mock_sms.send.assert_awaited_once()
        to, text = mock_sms.send.call_args.args
        assert to == "+19725550000"
        assert "For help" in text

    @pytest.mark.asyncio
    async def test_available_updates_status_and_confirms(self, handler, mock_sms, mock_status, roster):
        outcome = await handler.handle("(214) 555-0102", "AVAILABLE", roster)

        mock_status.set_availability.assert_awaited_once_with("lyric", True)
        assert outcome.status_updated
        assert outcome.replied
        mock_sms.send.assert_awaited_once_with(
            "+12145550102",
            "Elite Kutz: Thanks Lyric, you're now marked AVAILABLE.",
        )

    @pytest.mark.asyncio
    async def test_unknown_barber_gets_reply_without_status_change(
        self, handler, mock_sms, mock_status, roster
    ):
        outcome = await handler.handle("+19725550000", "unavailable", roster)

        mock_status.set_availability.assert_not_called()
        assert outcome.replied
        assert "isn't recognized" in mock_sms.send.call_args.args[1]

    @pytest.mark.asyncio
    async def test_status_failure_still_replies(self, handler, mock_sms, mock_status, roster):
        mock_status.set_availability.side_effect = StaffStatusError("kiosk down")

        outcome = await handler.handle("+12145550101", "unavailable", roster)

        assert not outcome.status_updated
        assert outcome.replied
        assert outcome.error == "kiosk down"

    @pytest.mark.asyncio
    async def test_send_failure_is_reported(self, handler, mock_sms, roster):
        mock_sms.send.side_effect = SmsSendError("Infobip 500", status_code=500)

        outcome = await handler.handle("+19725550000", "hello", roster)

        assert outcome.action.kind == InboundKind.UNRECOGNIZED
        assert not outcome.replied
        assert outcome.error == "Infobip 500"

    @pytest.mark.asyncio
    async def test_missing_sender_skips_reply(self, handler, mock_sms, roster):
        outcome = await handler.handle(None, "help", roster)

        assert not outcome.replied
        mock_sms.send.assert_not_called()

    def test_outcome_to_dict(self):
        from app.core.inbound import InboundOutcome
        from app.core.inbound.types import InboundAction

        outcome = InboundOutcome(
            action=InboundAction(kind=InboundKind.HELP, sender="+1", command="HELP", reply="x"),
            replied=True,
        )

        assert outcome.to_dict() == {
            "action": "help",
            "replied": True,
            "status_updated": False,
            "error": None,
        }

    @pytest.mark.asyncio
    async def test_unusable_status_client_still_replies(self, mock_sms, roster):
        handler = InboundHandler(mock_sms, StaffStatusClient(base_url="http://[::1"))

        outcome = await handler.handle("+12145550103", "AVAILABLE", roster)

        assert not outcome.status_updated
        assert outcome.replied
        assert outcome.error
        mock_sms.send.assert_awaited_once()
