from datetime import datetime, timedelta, timezone

from aegisbot.leaves import (
    AuditRecord,
    LeaveKind,
    LeaveType,
    classify_leave,
    describe_leave,
)

NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
USER = 1001
MOD = 2002


def test_no_entries_is_user_leave():
    assert classify_leave(USER, [], NOW) == LeaveType(LeaveKind.USER)


def test_recent_kick_is_kick():
    entry = AuditRecord("kick", MOD, NOW - timedelta(seconds=2), USER, "rude")
    assert classify_leave(USER, [entry], NOW) == LeaveType(LeaveKind.KICK, MOD, "rude")


def test_ban_without_reason_gets_default():
    entry = AuditRecord("ban", MOD, NOW, USER)
    result = classify_leave(USER, [entry], NOW)
    assert result == LeaveType(LeaveKind.BAN, MOD, "No reason provided")


def test_old_entry_is_ignored():
    entry = AuditRecord("kick", MOD, NOW - timedelta(seconds=6), USER)
    assert classify_leave(USER, [entry], NOW).kind is LeaveKind.USER


def test_five_seconds_is_still_matched():
    entry = AuditRecord("kick", MOD, NOW - timedelta(seconds=5, milliseconds=900), USER)
    assert classify_leave(USER, [entry], NOW).kind is LeaveKind.KICK


def test_other_target_is_skipped():
    other = AuditRecord("kick", MOD, NOW, USER + 1)
    mine = AuditRecord("ban", MOD, NOW, USER, "spam")
    assert classify_leave(USER, [other, mine], NOW).kind is LeaveKind.BAN


def test_other_actions_are_skipped():
    update = AuditRecord("update", MOD, NOW, USER)
    kick = AuditRecord("kick", MOD, NOW, USER)
    assert classify_leave(USER, [update, kick], NOW).kind is LeaveKind.KICK


def test_kick_without_target_stops_search():
    untargeted = AuditRecord("kick", MOD, NOW, None)
    ban = AuditRecord("ban", MOD, NOW, USER)
    assert classify_leave(USER, [untargeted, ban], NOW) == LeaveType(LeaveKind.USER)


def test_describe_user_leave_is_none():
    assert describe_leave(LeaveType(LeaveKind.USER), USER) is None


def test_describe_kick():
    text = describe_leave(LeaveType(LeaveKind.KICK, MOD, "rude"), USER)
    assert text.startswith("**MEMBER KICKED**\n-# Actor: ")
    assert f"<@{MOD}>" in text and f"<@{USER}>" in text
    assert text.endswith("\n```\nrude\n```")


def test_describe_ban():
    text = describe_leave(LeaveType(LeaveKind.BAN, MOD, "spam"), USER)
    assert text == f"**MEMBER BANNED**\n-# Actor: <@{MOD}> | Target: <@{USER}>\n```\nspam\n```"