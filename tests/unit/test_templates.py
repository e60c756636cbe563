"""Tests for SMS templates."""

from app.core.notifications import templates


class TestClientTemplates:
    """Client-facing copy."""

    def test_assigned_single(self):
        assert templates.assigned_client_single("Ana", "Lyric") == (
            "Elite Kutz: Ana, you're assigned to Lyric. Please head to their chair. "
            "Reply STOP to opt out, HELP for help."
        )

    def test_assigned_multi(self):
        text = templates.assigned_client_multi("Ana", "Lyric, Taja")
        assert "your party is assigned to Lyric, Taja." in text

    def test_waitlist_position(self):
        text = templates.waitlist_client_position("Jo", 3)
        assert "You're #3 in line." in text

    def test_waitlist_position_defaults_to_question_mark(self):
        assert "You're #? in line." in templates.waitlist_client_position("Jo", None)
        assert "You're #? in line." in templates.waitlist_client_position("Jo", "  ")

    def test_removed(self):
        assert templates.removed_client("Jo").startswith(
            "Elite Kutz: Hi Jo, you've been removed from the waitlist."
        )


class TestBarberTemplates:
    """Compact staff-facing copy."""

    def test_assigned_barber_plain(self):
        assert templates.assigned_barber("Ana", "", False) == "Elite Kutz: Ana is assigned to you."

    def test_members_note_and_declined(self):
        text = templates.request_barber("Ana", " (members: 1, 2)", True)
        assert text == (
            "Elite Kutz: Ana requested you (members: 1, 2). — PHOTOS/VIDEOS DECLINED"
        )

    def test_first_available(self):
        text = templates.waitlist_barber_first_available("Jo", 3, False)
        assert text == "Elite Kutz: Jo joined the waitlist for next available (#3)."

    def test_rewaitlist_barber_with_label(self):
        text = templates.rewaitlist_barber("Jo", " (members: 1, 2)", 4)
        assert text == "Elite Kutz: Jo is back on the waitlist (#4) (members: 1, 2)."

    def test_rewaitlist_barber_without_label(self):
        assert templates.rewaitlist_barber("Jo", "") == "Elite Kutz: Jo is back on the waitlist."


class TestDirectSendTemplates:
    """Copy for the direct kiosk send endpoints."""

    def test_chair_ready(self):
        assert templates.chair_ready("Mike") == (
            "Elite Kutz: Your chair is ready with Mike. "
            "Reply STOP to cancel, HELP for help, START to re-opt in."
        )

    def test_assignment_with_position(self):
        text = templates.assignment_notice("Ana", "Mike", 2)
        assert text == (
            "Elite Kutz: Ana, you're assigned to Mike. You're #2 in line. "
            "Reply STOP to cancel, HELP for help, START to re-opt in."
        )

    def test_assignment_without_position(self):
        text = templates.assignment_notice("Ana", "Mike")
        assert "in line" not in text

    def test_sample_message(self):
        assert templates.sample_message() == "Elite Kutz test message."


class TestReplyTemplates:
    """Inbound reply copy."""

    def test_help_mentions_support(self):
        text = templates.help_reply()
        assert "(972) 673-0114" in text
        assert "support@elitekutzkiosk.com" in text

    def test_availability(self):
        assert templates.availability_reply("Lyric", True) == (
            "Elite Kutz: Thanks Lyric, you're now marked AVAILABLE."
        )
        assert templates.availability_reply("Lyric", False).endswith("marked UNAVAILABLE.")

    def test_default(self):
        assert templates.default_reply() == "Elite Kutz: Thanks! Reply HELP for help or STOP to opt out."
