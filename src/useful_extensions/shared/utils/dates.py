"""
Date Utilities

Responsibility:
    Free functions operating on datetime: period boundaries
    (hour/day/month/year), weekday navigation, weekend detection and
    month enumeration.

Kind Preservation:
    Every helper that derives a value from an input datetime keeps its
    tzinfo, so naive stays naive and aware stays aware in the same zone
    (see DateTimeKind). Arithmetic is wall-clock arithmetic.

Resolution:
    The smallest representable unit is one microsecond (TICK). End-of-period
    helpers return the next period's start minus TICK.
"""

import calendar
from datetime import datetime, timedelta, timezone
from typing import Union

from useful_extensions.application.models import DateTimeKind, Weekday

TICK = timedelta(microseconds=1)

DAYS_PER_WEEK = 7

WEEKEND_DAYS = frozenset({Weekday.SATURDAY, Weekday.SUNDAY})

WeekdayLike = Union[Weekday, int]


def kind_of(value: datetime) -> DateTimeKind:
    """
    Classify a datetime as UNSPECIFIED, UTC or LOCAL.

    Examples:
        >>> kind_of(datetime(2024, 1, 1))
        <DateTimeKind.UNSPECIFIED: 'unspecified'>
        >>> kind_of(datetime(2024, 1, 1, tzinfo=timezone.utc))
        <DateTimeKind.UTC: 'utc'>
    """
    offset = value.utcoffset()
    if offset is None:
        return DateTimeKind.UNSPECIFIED
    if offset == timedelta(0) and (value.tzinfo is timezone.utc or value.tzname() == "UTC"):
        return DateTimeKind.UTC
    return DateTimeKind.LOCAL


# ============================================================================
# WEEKDAY NAVIGATION
# ============================================================================


def next_weekday(value: datetime, weekday: WeekdayLike) -> datetime:
    """
    Get the first date on or after value that falls on weekday.

    Args:
        value: Starting datetime
        weekday: Target day (Weekday or int, Monday=0)

    Returns:
        value itself if it is already on weekday, otherwise value advanced
        by 1-6 days (time of day is kept)

    Examples:
        >>> next_weekday(datetime(2024, 3, 13), Weekday.FRIDAY)  # Wednesday
        datetime.datetime(2024, 3, 15, 0, 0)
        >>> next_weekday(datetime(2024, 3, 15), Weekday.FRIDAY)
        datetime.datetime(2024, 3, 15, 0, 0)
    """
    days = (int(weekday) - value.weekday()) % DAYS_PER_WEEK
    return value + timedelta(days=days)


def previous_weekday(value: datetime, weekday: WeekdayLike) -> datetime:
    """
    Get the occurrence of weekday found by searching forward from one week
    before value.

    Defined as next_weekday(value - 7 days, weekday). When value is itself
    on weekday the result is exactly one week earlier.

    Examples:
        >>> previous_weekday(datetime(2024, 3, 13), Weekday.MONDAY)  # Wednesday
        datetime.datetime(2024, 3, 11, 0, 0)
        >>> previous_weekday(datetime(2024, 3, 15), Weekday.FRIDAY)
        datetime.datetime(2024, 3, 8, 0, 0)
    """
    return next_weekday(value - timedelta(days=DAYS_PER_WEEK), weekday)


def add_weeks(value: datetime, weeks: int) -> datetime:
    """Add weeks (negative to go back) to value."""
    return value + timedelta(days=weeks * DAYS_PER_WEEK)


def add_months(value: datetime, months: int) -> datetime:
    """
    Add calendar months to value, clamping the day to the target month.

    Examples:
        >>> add_months(datetime(2024, 1, 31), 1)
        datetime.datetime(2024, 2, 29, 0, 0)
        >>> add_months(datetime(2024, 1, 15), -2)
        datetime.datetime(2023, 11, 15, 0, 0)
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def nth_weekday_of_month(value: datetime, nth: int, weekday: WeekdayLike) -> datetime:
    """
    Get the nth occurrence of weekday in value's month.

    Computed as next_weekday(beginning_of_month(value), weekday) + (nth - 1)
    weeks. There is no overflow check: a large nth lands in a later month.

    Args:
        value: Any datetime in the desired month
        nth: 1-based occurrence
        weekday: Target day

    Returns:
        Midnight of the nth weekday (tzinfo of value kept)

    Examples:
        >>> nth_weekday_of_month(datetime(2024, 11, 20), 4, Weekday.THURSDAY)
        datetime.datetime(2024, 11, 28, 0, 0)
    """
    first = next_weekday(beginning_of_month(value), weekday)
    return add_weeks(first, nth - 1)


def day_of_week_occurrence(value: datetime, weekday: WeekdayLike) -> int:
    """
    Get the 1-based ordinal of value among same-weekday dates of its month.

    Counts the days of value's month that fall on weekday and are not
    after value. The result is never below 1, even when value itself is
    not on weekday and no such day precedes it.

    Examples:
        >>> day_of_week_occurrence(datetime(2024, 11, 28), Weekday.THURSDAY)
        4
        >>> day_of_week_occurrence(datetime(2024, 11, 1), Weekday.MONDAY)
        1
    """
    count = sum(
        1
        for day in month_dates_for(value)
        if day.weekday() == int(weekday) and day.day <= value.day
    )
    return max(count, 1)


def is_weekend(value: datetime) -> bool:
    """Return True for Saturday and Sunday."""
    return value.weekday() in WEEKEND_DAYS


# ============================================================================
# PERIOD BOUNDARIES
# ============================================================================


def beginning_of_hour(value: datetime) -> datetime:
    """Truncate value to the start of its hour."""
    return value.replace(minute=0, second=0, microsecond=0)


def end_of_hour(value: datetime) -> datetime:
    """Last microsecond of value's hour (HH:59:59.999999)."""
    return beginning_of_hour(value) + timedelta(hours=1) - TICK


def beginning_of_day(value: datetime) -> datetime:
    """Truncate value to midnight."""
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: datetime) -> datetime:
    """Last microsecond of value's day (23:59:59.999999)."""
    return beginning_of_day(value) + timedelta(days=1) - TICK


def beginning_of_month(value: datetime) -> datetime:
    """Midnight of the first day of value's month."""
    return beginning_of_day(value).replace(day=1)


def end_of_month(value: datetime) -> datetime:
    """Last microsecond of value's month."""
    return add_months(beginning_of_month(value), 1) - TICK


def beginning_of_year(value: datetime) -> datetime:
    """Midnight of January 1st of value's year."""
    return beginning_of_month(value).replace(month=1)


def end_of_year(value: datetime) -> datetime:
    """Last microsecond of value's year."""
    return add_months(beginning_of_year(value), 12) - TICK


# ============================================================================
# MONTH ENUMERATION
# ============================================================================


def month_dates(month: int, year: int) -> list[datetime]:
    """
    Get every date of a month as naive midnight datetimes, ascending.

    Args:
        month: Month (1-12)
        year: Year

    Returns:
        List from day 1 to the last day of the month

    Raises:
        ValueError: If month or year is out of range

    Examples:
        >>> len(month_dates(2, 2024))
        29
    """
    days_in_month = calendar.monthrange(year, month)[1]
    return [datetime(year, month, day) for day in range(1, days_in_month + 1)]


def month_dates_for(value: datetime) -> list[datetime]:
    """Get every date of value's month (see month_dates)."""
    return month_dates(value.month, value.year)
