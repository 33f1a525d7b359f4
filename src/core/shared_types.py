"""
Type definitions used across layers
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from typing import Optional

from src.core.exceptions import GameStateError


class Mark(StrEnum):
    """Content of a cell. The value is how the cell is drawn on screen."""

    EMPTY = " "
    X = "X"
    O = "O"  # noqa: E741

    @property
    def opponent(self) -> Mark:
        if self == Mark.EMPTY:
            raise GameStateError("An empty cell does not belong to a player.")
        return Mark.O if self == Mark.X else Mark.X


class Status(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()


@dataclass(frozen=True)
class Outcome:
    """Result of the game after a move. Computed on demand, never kept around."""

    status: Status
    winner: Optional[Mark] = None

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS
