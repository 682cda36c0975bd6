from datetime import datetime, timedelta, timezone

from aegisbot.formatting import humanize_duration
from aegisbot.muting import (
    describe_mute,
    describe_unmute,
    mute_audit_reason,
    mute_expiry,
    timeout_until,
)
from aegisbot.tasks import MAX_TIMEOUT

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_mute_expiry_zero_is_permanent():
    assert mute_expiry(NOW, timedelta(0)) is None


def test_mute_expiry_adds_delta():
    delta = timedelta(hours=5)
    assert mute_expiry(NOW, delta) - NOW == delta


def test_timeout_until_uses_expiry():
    expiry = NOW + timedelta(hours=2)
    assert timeout_until(NOW, expiry) == expiry


def test_timeout_until_permanent_uses_maximum():
    assert timeout_until(NOW, None) - NOW == MAX_TIMEOUT


def test_mute_audit_reason_text():
    assert mute_audit_reason("abc") == (
        "Aegis Managed Mute: log id `abc`. "
        "Please use Aegis to unmute to avoid accidental re-application!"
    )


def test_describe_mute_includes_duration_and_reason():
    delta = timedelta(days=3)
    text = describe_mute("id1", 1, 2, delta, "spam")
    assert text.startswith("**MEMBER MUTED**\n-# Log ID: `id1` | Actor: <@1> | Target: <@2>")
    assert f"| Duration: {humanize_duration(delta)}\n" in text
    assert text.endswith("\n```\nspam\n```")


def test_describe_mute_permanent():
    text = describe_mute("id1", 1, 2, timedelta(0), "spam")
    assert "| Duration: permanent\n" in text


def test_describe_mute_truncates_long_reason():
    text = describe_mute("id1", 1, 2, timedelta(0), "r" * 600)
    assert ("r" * 500 + "...") in text
    assert ("r" * 501) not in text


def test_describe_unmute():
    text = describe_unmute("id2", 3, 4, "appeal")
    assert text == "**MEMBER UNMUTED**\n-# Log ID: `id2` | Actor: <@3> | Target: <@4>\n```\nappeal\n```"