"""Unit tests for src/console/models.py"""

import pytest

from src.console.models import MoveRequest
from src.core.exceptions import NotANumberError, OutOfRangeError


@pytest.mark.parametrize("line, cell", [("1", 1), ("5", 5), ("9", 9)])
def test_valid_cell_numbers(line: str, cell: int) -> None:
    request = MoveRequest.from_text(line)
    assert request.cell == cell
    assert request.position == cell - 1


@pytest.mark.parametrize("line", ["5\n", " 5", "5  ", "\t5\r\n", "05", "+5", " +05 "])
def test_whitespace_plus_sign_and_leading_zeros(line: str) -> None:
    assert MoveRequest.from_text(line).cell == 5


@pytest.mark.parametrize(
    "line",
    [
        "abc",
        "",  # just pressing enter
        "   ",
        "-1",  # only a plus sign is allowed
        "++5",
        "+",
        "+-5",
        "+ 5",
        "5.0",
        "1_0",
        "5 5",
        "٥",  # non-ASCII digit
        "five",
    ],
)
def test_not_a_number(line: str) -> None:
    with pytest.raises(NotANumberError) as exc_info:
        _ = MoveRequest.from_text(line)
    assert exc_info.value.text == line


@pytest.mark.parametrize(
    "line, number",
    [
        ("0", "0"),
        ("000", "0"),
        ("10", "10"),
        ("+10", "10"),
        ("0010", "10"),
        ("100", "100"),
    ],
)
def test_out_of_range(line: str, number: str) -> None:
    with pytest.raises(OutOfRangeError) as exc_info:
        _ = MoveRequest.from_text(line)
    assert exc_info.value.number == number
    assert str(exc_info.value) == (
        f"Cell {number} is out of range. Please enter a number from 1 to 9."
    )


def test_number_too_long_to_convert_is_out_of_range() -> None:
    """More digits than int() converts by default: still a normal rejection, never a crash"""
    digits = "9" * 5000
    with pytest.raises(OutOfRangeError) as exc_info:
        _ = MoveRequest.from_text(digits)
    assert exc_info.value.number == digits


def test_long_run_of_leading_zeros_is_still_a_cell() -> None:
    assert MoveRequest.from_text("0" * 5000 + "7").cell == 7


def test_same_invalid_input_gives_same_error_twice() -> None:
    errors = []
    for _ in range(2):
        with pytest.raises(NotANumberError) as exc_info:
            _ = MoveRequest.from_text("abc")
        errors.append(str(exc_info.value))
    assert errors[0] == errors[1]


def test_integer_cell_skips_text_parsing() -> None:
    """Constructed directly (not from a typed line), only the range is checked"""
    assert MoveRequest(cell=3).position == 2
    with pytest.raises(OutOfRangeError):
        _ = MoveRequest(cell=12)
