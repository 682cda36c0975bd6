from datetime import timedelta

import pytest

from aegisbot.formatting import duration_phrase, humanize_duration, truncate_reason


def test_zero_duration_is_permanent():
    assert humanize_duration(timedelta(0)) == "permanent"
    assert duration_phrase(timedelta(0)) == "permanent"


def test_single_year():
    assert duration_phrase(timedelta(days=365)) == "for 1 year"


@pytest.mark.parametrize(
    "delta, unit",
    [
        (timedelta(days=730), "years"),
        (timedelta(days=60), "months"),
        (timedelta(days=30), "month"),
        (timedelta(days=3), "days"),
        (timedelta(days=1), "day"),
        (timedelta(hours=5), "hours"),
        (timedelta(minutes=1), "minute"),
        (timedelta(seconds=45), "seconds"),
    ],
)
def test_unit_selection(delta, unit):
    assert humanize_duration(delta).split(" ")[1] == unit


def test_days_not_multiple_of_month_stay_days():
    assert humanize_duration(timedelta(days=45)).endswith(" days")
    assert humanize_duration(timedelta(days=400)).endswith(" days")


def test_partial_hours_use_largest_whole_unit():
    assert humanize_duration(timedelta(hours=2, minutes=30)).endswith(" hours")


def test_phrase_wraps_humanized_duration():
    for delta in (timedelta(days=3), timedelta(minutes=7), timedelta(days=365 * 3)):
        assert duration_phrase(delta) == "for " + humanize_duration(delta)


def test_sub_second_duration_has_no_unit():
    assert humanize_duration(timedelta(milliseconds=200)) == "0 "


def test_short_reason_untouched():
    reason = "spamming in general"
    assert truncate_reason(reason) == reason
    assert truncate_reason("x" * 500) == "x" * 500


def test_long_reason_is_cut_and_marked():
    reason = "y" * 750
    result = truncate_reason(reason)
    assert result.endswith("...")
    assert result[:-3] == reason[:500]
    assert len(result) == 503