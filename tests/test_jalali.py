# tests/test_jalali.py

import pytest

import caljal
from caljal.engines.gregorian import days_before_year, from_day_count, is_gregorian_leap
from caljal.engines.jalali import jalali_day_of_year, jalali_year_length, nowruz_march_day


@pytest.mark.parametrize("year", [1370, 1375, 1379, 1383, 1387, 1391, 1395, 1399, 1403, 1408])
def test_known_leap_years(year):
    assert caljal.is_jalali_leap(year)


@pytest.mark.parametrize("year", [1396, 1397, 1398, 1400, 1401, 1402, 1404])
def test_known_common_years(year):
    assert not caljal.is_jalali_leap(year)


def test_year_lengths_are_365_or_366():
    for y in range(1, 4000):
        assert jalali_year_length(y) in (365, 366)


def test_leap_years_per_33_year_cycle():
    # eight leap years in 33, away from the cycle break years
    assert sum(caljal.is_jalali_leap(y) for y in range(1300, 1333)) == 8


def test_month_lengths():
    assert [caljal.jalali_month_length(1402, m) for m in range(1, 13)] == [31] * 6 + [30] * 5 + [29]
    assert caljal.jalali_month_length(1403, 12) == 30


def test_day_of_year():
    assert jalali_day_of_year(1, 1) == 0
    assert jalali_day_of_year(6, 31) == 185
    assert jalali_day_of_year(7, 1) == 186
    assert jalali_day_of_year(12, 29) == 364


def test_nowruz_march_day():
    assert nowruz_march_day(1) == 22
    assert nowruz_march_day(1403) == 20
    assert nowruz_march_day(1404) == 21


@pytest.mark.parametrize(
    "year,leap",
    [(1600, True), (1700, False), (1900, False), (2000, True), (2023, False), (2024, True)],
)
def test_gregorian_leap_rule(year, leap):
    assert is_gregorian_leap(year) is leap


def test_days_before_year():
    assert days_before_year(0) == 0
    assert days_before_year(1) == 366
    assert days_before_year(100) == 36525
    assert days_before_year(400) == 146097
    assert days_before_year(-1) == -365


@pytest.mark.parametrize(
    "days,expected",
    [
        (0, (1600, 1, 1)),
        (59, (1600, 2, 29)),
        (365, (1600, 12, 31)),
        (36524, (1699, 12, 31)),
        (36525, (1700, 1, 1)),
        (36525 + 59, (1700, 3, 1)),
        (36525 + 365, (1701, 1, 1)),
        (146096, (1999, 12, 31)),
        (146097, (2000, 1, 1)),
        (-1, (1599, 12, 31)),
    ],
)
def test_from_day_count_boundaries(days, expected):
    assert from_day_count(days) == expected


def test_nowruz():
    assert caljal.format_gregorian(caljal.nowruz(1403)) == "2024-03-20"
    assert caljal.format_gregorian(caljal.nowruz(1404)) == "2025-03-21"


@pytest.mark.parametrize("month", [0, 13, -1])
def test_month_length_rejects_bad_month(month):
    with pytest.raises(caljal.MonthOutOfRangeError):
        caljal.jalali_month_length(1403, month)
