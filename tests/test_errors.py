import pytest

from nusantara.errors import (
    CalendarArithmeticError,
    CalendarError,
    InvalidParametersError,
    NotImplementedCalendarError,
    OutOfRangeError,
    stub,
)


def test_stub_raises_not_implemented_with_message():
    with pytest.raises(NotImplementedCalendarError) as info:
        stub("test message")
    assert info.value.message == "test message"


def test_stub_converts_message_to_text():
    with pytest.raises(NotImplementedCalendarError) as info:
        stub(42)
    assert info.value.message == "42"


@pytest.mark.parametrize(
    "error, text",
    [
        (OutOfRangeError("test range"), "Date out of supported range: test range"),
        (InvalidParametersError("test params"), "Invalid calendar parameters: test params"),
        (NotImplementedCalendarError("test feature"), "Feature not yet implemented: test feature"),
        (CalendarArithmeticError("test math"), "Arithmetic error: test math"),
    ],
)
def test_error_display(error, text):
    assert str(error) == text


def test_errors_share_base_class():
    with pytest.raises(CalendarError):
        raise OutOfRangeError("x")
    with pytest.raises(NotImplementedError):
        stub("y")
    with pytest.raises(ValueError):
        raise InvalidParametersError("z")
    with pytest.raises(ArithmeticError):
        raise CalendarArithmeticError("w")


def test_error_equality():
    assert OutOfRangeError("a") == OutOfRangeError("a")
    assert OutOfRangeError("a") != OutOfRangeError("b")
    assert OutOfRangeError("a") != InvalidParametersError("a")