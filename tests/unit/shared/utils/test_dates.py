"""
Tests for date utilities.
Covers: weekday navigation, period boundaries, kind preservation, month enumeration.
"""

from datetime import datetime, timedelta, timezone

import pytest

from useful_extensions.application.models import DateTimeKind, Weekday
from useful_extensions.shared.utils.dates import (
    TICK,
    add_months,
    add_weeks,
    beginning_of_day,
    beginning_of_hour,
    beginning_of_month,
    beginning_of_year,
    day_of_week_occurrence,
    end_of_day,
    end_of_hour,
    end_of_month,
    end_of_year,
    is_weekend,
    kind_of,
    month_dates,
    month_dates_for,
    next_weekday,
    nth_weekday_of_month,
    previous_weekday,
)

# 2024-03-11 is a Monday; the week runs through Sunday 2024-03-17
MONDAY = datetime(2024, 3, 11)
WEDNESDAY = datetime(2024, 3, 13)
FRIDAY = datetime(2024, 3, 15)
SATURDAY = datetime(2024, 3, 16)

SAMPLE = datetime(2024, 3, 15, 13, 45, 30, 123456)

CEST = timezone(timedelta(hours=2), "CEST")


# ============================================================================
# TESTS - kind_of()
# ============================================================================


@pytest.mark.parametrize(
    "tzinfo,expected",
    [
        (None, DateTimeKind.UNSPECIFIED),
        (timezone.utc, DateTimeKind.UTC),
        (timezone(timedelta(0)), DateTimeKind.UTC),
        (CEST, DateTimeKind.LOCAL),
        (timezone(timedelta(hours=-5)), DateTimeKind.LOCAL),
    ],
)
def test_kind_of(tzinfo, expected):
    """Test kind classification from tzinfo."""
    assert kind_of(SAMPLE.replace(tzinfo=tzinfo)) == expected


# ============================================================================
# TESTS - next_weekday() / previous_weekday()
# ============================================================================


def test_next_weekday_advances_to_target():
    """Test advancing from Wednesday to Friday."""
    assert next_weekday(WEDNESDAY, Weekday.FRIDAY) == FRIDAY


def test_next_weekday_same_day_unchanged():
    """Test that a date already on the target weekday is returned as-is."""
    assert next_weekday(FRIDAY, Weekday.FRIDAY) == FRIDAY


def test_next_weekday_wraps_into_next_week():
    """Test advancing from Saturday to the following Monday."""
    assert next_weekday(SATURDAY, Weekday.MONDAY) == datetime(2024, 3, 18)


def test_next_weekday_accepts_int():
    """Test that plain ints (Monday=0) are accepted."""
    assert next_weekday(WEDNESDAY, 4) == FRIDAY


@pytest.mark.parametrize("weekday", list(Weekday))
def test_next_weekday_lands_within_a_week(weekday):
    """Test the advance is 0-6 days and lands on the target."""
    result = next_weekday(WEDNESDAY, weekday)

    assert result.weekday() == weekday
    assert timedelta(0) <= result - WEDNESDAY < timedelta(days=7)


def test_next_weekday_keeps_time_and_tzinfo():
    """Test that time of day and tzinfo survive."""
    value = datetime(2024, 3, 13, 9, 30, tzinfo=CEST)
    result = next_weekday(value, Weekday.FRIDAY)

    assert result == datetime(2024, 3, 15, 9, 30, tzinfo=CEST)
    assert result.tzinfo is CEST


def test_previous_weekday_goes_back():
    """Test going back from Wednesday to Monday of the same week."""
    assert previous_weekday(WEDNESDAY, Weekday.MONDAY) == MONDAY


def test_previous_weekday_crosses_week():
    """Test going back from Wednesday to the prior Friday."""
    assert previous_weekday(WEDNESDAY, Weekday.FRIDAY) == datetime(2024, 3, 8)


def test_previous_weekday_same_day_goes_back_a_week():
    """Test that a date on the target weekday yields the one a week before."""
    assert previous_weekday(FRIDAY, Weekday.FRIDAY) == FRIDAY - timedelta(days=7)


def test_previous_weekday_is_next_from_a_week_earlier():
    """Test the defining identity for every weekday."""
    for weekday in Weekday:
        expected = next_weekday(WEDNESDAY - timedelta(days=7), weekday)
        assert previous_weekday(WEDNESDAY, weekday) == expected


# ============================================================================
# TESTS - add_weeks() / add_months()
# ============================================================================


def test_add_weeks_forward_and_back():
    """Test adding positive and negative week counts."""
    assert add_weeks(MONDAY, 2) == datetime(2024, 3, 25)
    assert add_weeks(MONDAY, -1) == datetime(2024, 3, 4)
    assert add_weeks(MONDAY, 0) == MONDAY


@pytest.mark.parametrize(
    "value,months,expected",
    [
        (datetime(2024, 1, 31), 1, datetime(2024, 2, 29)),
        (datetime(2023, 1, 31), 1, datetime(2023, 2, 28)),
        (datetime(2024, 1, 15), -2, datetime(2023, 11, 15)),
        (datetime(2024, 12, 1), 1, datetime(2025, 1, 1)),
        (datetime(2024, 5, 20), 12, datetime(2025, 5, 20)),
    ],
)
def test_add_months(value, months, expected):
    """Test calendar month arithmetic with day clamping."""
    assert add_months(value, months) == expected


# ============================================================================
# TESTS - period boundaries
# ============================================================================


def test_beginning_of_periods():
    """Test truncation to each period start."""
    assert beginning_of_hour(SAMPLE) == datetime(2024, 3, 15, 13)
    assert beginning_of_day(SAMPLE) == datetime(2024, 3, 15)
    assert beginning_of_month(SAMPLE) == datetime(2024, 3, 1)
    assert beginning_of_year(SAMPLE) == datetime(2024, 1, 1)


def test_end_of_periods():
    """Test that end boundaries are one tick before the next period."""
    assert end_of_hour(SAMPLE) == datetime(2024, 3, 15, 13, 59, 59, 999999)
    assert end_of_day(SAMPLE) == datetime(2024, 3, 15, 23, 59, 59, 999999)
    assert end_of_month(SAMPLE) == datetime(2024, 3, 31, 23, 59, 59, 999999)
    assert end_of_year(SAMPLE) == datetime(2024, 12, 31, 23, 59, 59, 999999)


def test_end_of_month_leap_february():
    """Test end of February in a leap year."""
    assert end_of_month(datetime(2024, 2, 10)) == datetime(2024, 2, 29, 23, 59, 59, 999999)


def test_end_of_month_december_rolls_year():
    """Test end of December computed across the year boundary."""
    assert end_of_month(datetime(2023, 12, 5)) == datetime(2023, 12, 31, 23, 59, 59, 999999)


def test_end_boundary_plus_tick_is_next_period_start():
    """Test that adding one tick reaches the next period."""
    assert end_of_hour(SAMPLE) + TICK == datetime(2024, 3, 15, 14)
    assert end_of_day(SAMPLE) + TICK == datetime(2024, 3, 16)
    assert end_of_month(SAMPLE) + TICK == datetime(2024, 4, 1)
    assert end_of_year(SAMPLE) + TICK == datetime(2025, 1, 1)


@pytest.mark.parametrize(
    "value",
    [
        datetime(2024, 3, 15),
        datetime(2024, 3, 15, 0, 0, 0, 1),
        datetime(2024, 3, 15, 12, 30),
        datetime(2024, 3, 15, 23, 59, 59, 999999),
    ],
)
def test_end_of_day_idempotent_within_day(value):
    """Test end_of_day is the same for any instant of the same day."""
    assert end_of_day(beginning_of_day(value)) == end_of_day(value)


@pytest.mark.parametrize(
    "value",
    [
        datetime(2024, 1, 31, 8),
        datetime(2024, 2, 29),
        datetime(2023, 2, 1),
        datetime(2024, 12, 31, 23, 59),
        datetime(2024, 6, 15, tzinfo=timezone.utc),
    ],
)
def test_end_of_month_identity(value):
    """Test end_of_month == beginning_of_month + 1 month - 1 tick."""
    assert end_of_month(value) == add_months(beginning_of_month(value), 1) - TICK


BOUNDARY_FUNCTIONS = [
    beginning_of_hour,
    end_of_hour,
    beginning_of_day,
    end_of_day,
    beginning_of_month,
    end_of_month,
    beginning_of_year,
    end_of_year,
    lambda value: next_weekday(value, Weekday.SUNDAY),
    lambda value: previous_weekday(value, Weekday.SUNDAY),
    lambda value: add_weeks(value, 3),
    lambda value: nth_weekday_of_month(value, 2, Weekday.TUESDAY),
]


@pytest.mark.parametrize("func", BOUNDARY_FUNCTIONS)
@pytest.mark.parametrize("tzinfo", [None, timezone.utc, CEST])
def test_derived_values_preserve_kind(func, tzinfo):
    """Test that every derived value keeps the input's tzinfo."""
    value = SAMPLE.replace(tzinfo=tzinfo)
    result = func(value)

    assert result.tzinfo is tzinfo
    assert kind_of(result) == kind_of(value)


# ============================================================================
# TESTS - nth_weekday_of_month() / day_of_week_occurrence()
# ============================================================================


def test_nth_weekday_of_month_fourth_thursday():
    """Test 4th Thursday of November 2024."""
    assert nth_weekday_of_month(datetime(2024, 11, 20), 4, Weekday.THURSDAY) == datetime(2024, 11, 28)


def test_nth_weekday_of_month_first_day_matches():
    """Test when the 1st of the month is already the target weekday."""
    assert nth_weekday_of_month(datetime(2024, 1, 20), 1, Weekday.MONDAY) == datetime(2024, 1, 1)


def test_nth_weekday_of_month_overflow_not_checked():
    """Test that a too-large nth spills into the next month."""
    # Fridays of February 2024: 2, 9, 16, 23 - the "5th" is March 1st
    assert nth_weekday_of_month(datetime(2024, 2, 10), 5, Weekday.FRIDAY) == datetime(2024, 3, 1)


@pytest.mark.parametrize(
    "value,weekday,expected",
    [
        (datetime(2024, 11, 28), Weekday.THURSDAY, 4),
        (datetime(2024, 11, 15), Weekday.FRIDAY, 3),
        (datetime(2024, 11, 1), Weekday.FRIDAY, 1),
        (datetime(2024, 11, 15, 18, 30), Weekday.FRIDAY, 3),
    ],
)
def test_day_of_week_occurrence(value, weekday, expected):
    """Test ordinal of a date among same-weekday dates of its month."""
    assert day_of_week_occurrence(value, weekday) == expected


def test_day_of_week_occurrence_minimum_is_one():
    """Test that the result is at least 1 even with no matching day yet."""
    # 2024-11-01 is a Friday; no Monday precedes it in November
    assert day_of_week_occurrence(datetime(2024, 11, 1), Weekday.MONDAY) == 1


def test_day_of_week_occurrence_mismatched_weekday_counts_preceding():
    """Test that a non-matching weekday counts earlier occurrences."""
    # Mondays up to Friday 2024-11-15: 4th and 11th
    assert day_of_week_occurrence(datetime(2024, 11, 15), Weekday.MONDAY) == 2


def test_day_of_week_occurrence_aware_value():
    """Test that aware values are counted by calendar day."""
    value = datetime(2024, 11, 28, 10, tzinfo=timezone.utc)
    assert day_of_week_occurrence(value, Weekday.THURSDAY) == 4


# ============================================================================
# TESTS - is_weekend()
# ============================================================================


@pytest.mark.parametrize(
    "offset,expected",
    [(0, False), (1, False), (2, False), (3, False), (4, False), (5, True), (6, True)],
)
def test_is_weekend_for_every_weekday(offset, expected):
    """Test Saturday/Sunday are weekend and Monday-Friday are not."""
    assert is_weekend(MONDAY + timedelta(days=offset)) is expected


# ============================================================================
# TESTS - month_dates() / month_dates_for()
# ============================================================================


def test_month_dates_leap_february():
    """Test February 2024 has 29 ascending dates."""
    dates = month_dates(2, 2024)

    assert len(dates) == 29
    assert dates[0] == datetime(2024, 2, 1)
    assert dates[-1] == datetime(2024, 2, 29)
    assert dates == sorted(dates)
    assert all(b - a == timedelta(days=1) for a, b in zip(dates, dates[1:]))


def test_month_dates_common_february():
    """Test February 2023 has 28 dates."""
    assert len(month_dates(2, 2023)) == 28


@pytest.mark.parametrize("month,days", [(1, 31), (4, 30), (12, 31)])
def test_month_dates_lengths(month, days):
    """Test month lengths."""
    assert len(month_dates(month, 2024)) == days


def test_month_dates_are_naive_midnights():
    """Test that enumerated dates are naive midnights."""
    assert all(d.tzinfo is None and d.time() == datetime.min.time() for d in month_dates(3, 2024))


@pytest.mark.parametrize("month", [0, 13])
def test_month_dates_invalid_month_raises(month):
    """Test that an out-of-range month raises ValueError."""
    with pytest.raises(ValueError):
        month_dates(month, 2024)


def test_month_dates_for_uses_value_month():
    """Test enumeration from a datetime."""
    dates = month_dates_for(datetime(2024, 4, 20, 15, tzinfo=timezone.utc))

    assert len(dates) == 30
    assert dates[0] == datetime(2024, 4, 1)
