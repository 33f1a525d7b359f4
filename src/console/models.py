"""Request model: one line typed by a player, turned into a cell number."""

from typing import Any, Self

from pydantic import BaseModel, field_validator

from src.core.constants import FIRST_CELL, LAST_CELL
from src.core.exceptions import NotANumberError, OutOfRangeError


class MoveRequest(BaseModel):
    cell: int

    @classmethod
    def from_text(cls, line: str) -> Self:
        return cls(cell=line)

    @field_validator("cell", mode="before")
    @classmethod
    def parse_number(cls, value: Any) -> Any:
        """
        A base-10 unsigned number: ASCII digits, optionally after a single "+".
        No minus sign, decimals or underscores.
        """
        if not isinstance(value, str):
            return value

        text = value.strip()
        digits = text.removeprefix("+")
        if not (digits.isascii() and digits.isdigit()):
            raise NotANumberError(value)

        # anything longer than the last cell number is out of range, no need to convert it
        significant = digits.lstrip("0") or "0"
        if len(significant) > len(str(LAST_CELL)):
            raise OutOfRangeError(significant)
        return int(significant)

    @field_validator("cell")
    @classmethod
    def validate_range(cls, value: int) -> int:
        if not FIRST_CELL <= value <= LAST_CELL:
            raise OutOfRangeError(str(value))
        return value

    @property
    def position(self) -> int:
        """0-indexed board position"""
        return self.cell - FIRST_CELL
