import time
from datetime import date, datetime, timedelta, timezone

import jdatetime
import pytest

from iranpost.app import dates


def test_jalali_gregorian_round_trip_1300_to_1500():
    day = jdatetime.date(1300, 1, 1)
    end = jdatetime.date(1501, 1, 1)
    while day < end:
        gregorian = dates.jalali_to_gregorian(day.year, day.month, day.day)
        assert dates.gregorian_to_jalali(*gregorian) == (day.year, day.month, day.day)
        day += timedelta(days=1)


def test_known_conversions():
    assert dates.jalali_to_gregorian(1404, 4, 26) == (2025, 7, 17)
    assert dates.jalali_to_gregorian(1403, 1, 1) == (2024, 3, 20)
    assert dates.gregorian_to_jalali(2024, 5, 1) == (1403, 2, 12)


def test_format_gregorian_date_pads():
    assert dates.format_gregorian_date(2025, 7, 1) == "2025-07-01"


def test_format_jalali_date_accepts_strings_and_dates():
    assert dates.format_jalali_date("2024-05-01") == "1403/2/12"
    assert dates.format_jalali_date(datetime(2025, 7, 17, 23, 30)) == "1404/4/26"


@pytest.mark.parametrize(
    "target, expected",
    [
        (date(2024, 6, 10), "امروز"),
        (date(2024, 6, 11), "فردا"),
        (date(2024, 6, 9), "دیروز"),
        (date(2024, 6, 15), "شنبه"),
        (date(2024, 6, 3), "دوشنبه"),
        (date(2024, 6, 17), "دوشنبه، 1403/3/28"),
        (date(2024, 5, 1), "چهارشنبه، 1403/2/12"),
    ],
)
def test_format_relative_day(target, expected):
    assert dates.format_relative_day(target, date(2024, 6, 10)) == expected


def test_format_relative_day_ignores_time_of_day():
    reference = datetime(2024, 6, 10, 23, 59)
    assert dates.format_relative_day(datetime(2024, 6, 11, 0, 1), reference) == "فردا"
    assert dates.format_relative_day("2024-06-10T00:00:00", reference) == "امروز"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("00:05:00", "12:05 ق.ظ"),
        ("12:00:00", "12:00 ب.ظ"),
        ("23:59:00", "11:59 ب.ظ"),
        ("09:07:45", "9:07 ق.ظ"),
    ],
)
def test_format_am_pm(value, expected):
    assert dates.format_am_pm(value) == expected


def test_parse_jalali_date_full_phrase():
    assert dates.parse_jalali_date("پنجشنبه 26 تیر ماه 1404") == "2025-07-17"


def test_parse_jalali_date_persian_digits_and_suffixed_month():
    assert dates.parse_jalali_date("چهارشنبه ۱۲ اردیبهشت‌ماه ۱۴۰۳") == "2024-05-01"


def test_parse_jalali_date_missing_year_falls_back_to_today():
    assert dates.parse_jalali_date("پنجشنبه 26 تیر ماه", today=date(2024, 6, 10)) == "2024-06-10"
    assert dates.parse_jalali_date("پنجشنبه 26 تیر ماه") == date.today().isoformat()


def test_parse_jalali_phrase_marks_unparsed():
    assert dates.parse_jalali_phrase("") is None
    assert dates.parse_jalali_phrase("26 تیر 1304") is None
    # No Jalali month has 31 days after Shahrivar
    assert dates.parse_jalali_phrase("31 اسفند 1403") is None
    assert dates.parse_jalali_phrase("26 تیر 1404") == date(2025, 7, 17)


@pytest.fixture
def tehran_local_time(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "Asia/Tehran")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_format_relative_day_uses_local_day_of_aware_values(tehran_local_time):
    # 22:00 UTC is already the next morning in Tehran
    assert dates.format_relative_day("2024-06-10T22:00:00Z", date(2024, 6, 11)) == "امروز"
    assert dates.format_relative_day(
        datetime(2024, 6, 10, 22, 0, tzinfo=timezone.utc), date(2024, 6, 10)
    ) == "فردا"
    assert dates.format_jalali_date("2024-06-10T22:00:00Z") == "1403/3/22"
