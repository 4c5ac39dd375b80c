"""Conversions between proleptic Gregorian dates and Julian Day Numbers."""

from __future__ import annotations

from .errors import OutOfRangeError

__all__ = ["gregorian_to_jdn", "jdn_to_gregorian"]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Return the Julian Day Number of a proleptic Gregorian date.

    ``year`` may be zero or negative for dates before the common era.
    """
    if month <= 2:
        y, m = year - 1, month + 12
    else:
        y, m = year, month

    a = _tdiv(m - 14, 12)
    return (
        _tdiv(1461 * (y + 4800 + a), 4)
        + _tdiv(367 * (m - 2 - 12 * a), 12)
        - _tdiv(3 * _tdiv(y + 4900 + a, 100), 4)
        + day
        - 32075
    )


def jdn_to_gregorian(jdn: int) -> tuple[int, int, int]:
    """Return ``(year, month, day)`` for a Julian Day Number.

    Uses the Fliegel and van Flandern algorithm. Raises
    :class:`OutOfRangeError` when ``jdn`` lies outside the signed 32-bit range.
    """
    if not _INT32_MIN <= jdn <= _INT32_MAX:
        raise OutOfRangeError(
            f"JDN {jdn} is outside supported range for Gregorian conversion "
            f"({_INT32_MIN} to {_INT32_MAX})"
        )

    l = jdn + 68_569
    n = _tdiv(4 * l, 146_097)
    l = l - _tdiv(146_097 * n + 3, 4)
    i = _tdiv(4_000 * (l + 1), 1_461_001)
    l = l - _tdiv(1_461 * i, 4) + 31
    j = _tdiv(80 * l, 2_447)
    day = l - _tdiv(2_447 * j, 80)
    l = _tdiv(j, 11)
    month = j + 2 - 12 * l
    year = 100 * (n - 49) + i + l
    return year, month, day