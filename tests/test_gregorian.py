import datetime

import pytest

from nusantara.errors import CalendarError, OutOfRangeError
from nusantara.gregorian import gregorian_to_jdn, jdn_to_gregorian


def test_gregorian_to_jdn_reform_anchor():
    assert gregorian_to_jdn(1582, 10, 15) == 2_299_161


def test_gregorian_to_jdn_sultan_agung_epoch():
    assert gregorian_to_jdn(1633, 7, 8) == 2_317_690


def test_jdn_to_gregorian_reform_anchor():
    assert jdn_to_gregorian(2_299_161) == (1582, 10, 15)


def test_jdn_to_gregorian_sultan_agung_epoch():
    assert jdn_to_gregorian(2_317_690) == (1633, 7, 8)


def test_j2000_day_number():
    assert gregorian_to_jdn(2000, 1, 1) == 2_451_545


def test_jdn_epoch_is_day_zero():
    assert gregorian_to_jdn(-4713, 11, 24) == 0
    assert jdn_to_gregorian(0) == (-4713, 11, 24)


@pytest.mark.parametrize(
    "date",
    [
        (2000, 1, 1),
        (2024, 2, 29),
        (1900, 3, 1),
        (1600, 1, 1),
        (1582, 10, 4),
        (1582, 10, 15),
        (1, 1, 1),
        (-4713, 11, 24),
    ],
)
def test_round_trip_conversions(date):
    assert jdn_to_gregorian(gregorian_to_jdn(*date)) == date


def test_consecutive_days_match_datetime():
    start = datetime.date(1999, 12, 1)
    base = gregorian_to_jdn(1999, 12, 1)
    for offset in range(0, 800, 3):
        d = start + datetime.timedelta(days=offset)
        assert gregorian_to_jdn(d.year, d.month, d.day) == base + offset
        assert jdn_to_gregorian(base + offset) == (d.year, d.month, d.day)


def test_day_after_leap_day():
    assert gregorian_to_jdn(2024, 3, 1) - gregorian_to_jdn(2024, 2, 29) == 1
    assert gregorian_to_jdn(1900, 3, 1) - gregorian_to_jdn(1900, 2, 28) == 1


@pytest.mark.parametrize("jdn", [2**31, -(2**31) - 1, 10**12])
def test_jdn_outside_range_raises(jdn):
    with pytest.raises(OutOfRangeError) as info:
        jdn_to_gregorian(jdn)
    assert isinstance(info.value, CalendarError)
    assert str(jdn) in str(info.value)


def test_upper_boundary_is_accepted():
    jdn = 2**31 - 1
    assert gregorian_to_jdn(*jdn_to_gregorian(jdn)) == jdn