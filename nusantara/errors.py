"""Exceptions raised by calendar operations."""

from __future__ import annotations

from typing import NoReturn

__all__ = [
    "CalendarError",
    "OutOfRangeError",
    "InvalidParametersError",
    "NotImplementedCalendarError",
    "CalendarArithmeticError",
    "stub",
]


class CalendarError(Exception):
    """Base class of all calendar errors; carries a detail message."""

    prefix = "Calendar error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class OutOfRangeError(CalendarError, ValueError):
    """The date lies outside the supported range."""

    prefix = "Date out of supported range"


class InvalidParametersError(CalendarError, ValueError):
    """The calendar parameters are invalid."""

    prefix = "Invalid calendar parameters"


class NotImplementedCalendarError(CalendarError, NotImplementedError):
    """The feature has a defined interface but no implementation yet."""

    prefix = "Feature not yet implemented"


class CalendarArithmeticError(CalendarError, ArithmeticError):
    """A calendar computation failed."""

    prefix = "Arithmetic error"


def stub(message: object) -> NoReturn:
    """Raise :class:`NotImplementedCalendarError` with the given message."""
    raise NotImplementedCalendarError(str(message))