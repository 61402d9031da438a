"""Jalali calendar helpers and Persian date formatting."""

import logging
import re
from datetime import date, datetime
from typing import Optional, Tuple, Union

import jdatetime

from ..const import (
    JALALI_CENTURY_PREFIX,
    LABEL_TODAY,
    LABEL_TOMORROW,
    LABEL_YESTERDAY,
    PERIOD_AM,
    PERIOD_PM,
    PERSIAN_MONTHS,
    PERSIAN_WEEKDAYS,
)

_LOGGER = logging.getLogger(__name__)

DateLike = Union[date, datetime, str]

_DAY_PATTERN = re.compile(r"^\d{1,2}$")
_YEAR_PATTERN = re.compile(r"^%s\d{%d}$" % (JALALI_CENTURY_PREFIX, 4 - len(JALALI_CENTURY_PREFIX)))

# Persian and Arabic-Indic digits to ASCII
_DIGITS = str.maketrans("۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩", "01234567890123456789")


def jalali_to_gregorian(year: int, month: int, day: int) -> Tuple[int, int, int]:
    """Convert a Jalali date to a Gregorian (year, month, day) tuple."""
    g = jdatetime.date(year, month, day).togregorian()
    return g.year, g.month, g.day


def gregorian_to_jalali(year: int, month: int, day: int) -> Tuple[int, int, int]:
    """Convert a Gregorian date to a Jalali (year, month, day) tuple."""
    j = jdatetime.date.fromgregorian(date=date(year, month, day))
    return j.year, j.month, j.day


def format_gregorian_date(year: int, month: int, day: int) -> str:
    """Format as YYYY-MM-DD."""
    return f"{year:04d}-{month:02d}-{day:02d}"


def _to_date(value: DateLike) -> date:
    """Reduce a date, datetime or ISO string to its local calendar day."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def format_jalali_date(value: DateLike) -> str:
    """Format a Gregorian date as an unpadded Jalali jy/jm/jd string."""
    day = _to_date(value)
    jy, jm, jd = gregorian_to_jalali(day.year, day.month, day.day)
    return f"{jy}/{jm}/{jd}"


def format_relative_day(target: DateLike, reference: Optional[DateLike] = None) -> str:
    """Describe target relative to reference in Persian.

    Args:
        target: The date being labelled
        reference: The date treated as "today" (defaults to now)

    Returns:
        Today/tomorrow/yesterday, a weekday name within a week either way,
        otherwise the weekday followed by the full Jalali date
    """
    target_day = _to_date(target)
    reference_day = _to_date(reference) if reference is not None else date.today()
    diff = (target_day - reference_day).days

    if diff == 0:
        return LABEL_TODAY
    if diff == 1:
        return LABEL_TOMORROW
    if diff == -1:
        return LABEL_YESTERDAY

    weekday = PERSIAN_WEEKDAYS[target_day.weekday()]
    if 1 < abs(diff) <= 7:
        return weekday

    return f"{weekday}، {format_jalali_date(target_day)}"


def format_am_pm(time_text: str) -> str:
    """Convert an HH:mm:ss clock time to a 12-hour Persian label."""
    hour_text, minute_text = time_text.split(":")[:2]
    hour = int(hour_text)
    minute = int(minute_text)
    period = PERIOD_PM if hour >= 12 else PERIOD_AM
    hour = hour % 12 or 12
    return f"{hour}:{minute:02d} {period}"


def parse_jalali_phrase(text: Optional[str]) -> Optional[date]:
    """Extract a Gregorian date from a phrase like "پنجشنبه 26 تیر ماه 1404".

    Returns None when the day, month or year is missing, or when the three
    parts do not form a valid Jalali date.
    """
    if not text:
        return None

    day = month = year = None
    for token in text.translate(_DIGITS).split():
        if _DAY_PATTERN.match(token):
            day = int(token)

        for index, name in enumerate(PERSIAN_MONTHS):
            if name in token:
                month = index + 1
                break

        if _YEAR_PATTERN.match(token):
            year = int(token)

    if day is None or month is None or year is None:
        return None

    try:
        return date(*jalali_to_gregorian(year, month, day))
    except ValueError as err:
        _LOGGER.debug("Invalid Jalali date in %r: %s", text, err)
        return None


def parse_jalali_date(text: Optional[str], today: Optional[date] = None) -> str:
    """Normalize a Persian date phrase to YYYY-MM-DD, falling back to today."""
    parsed = parse_jalali_phrase(text)
    if parsed is None:
        parsed = today or date.today()
    return format_gregorian_date(parsed.year, parsed.month, parsed.day)
