"""
Exceptions raised across layers.

GameError does not derive from ValueError: errors raised inside pydantic validators reach the caller as themselves.
"""

from src.core.constants import FIRST_CELL, LAST_CELL

CELL_HINT = f"Please enter a number from {FIRST_CELL} to {LAST_CELL}."


class GameError(Exception):
    """Base class for anything that goes wrong while playing."""


# --- user-correctable: report and ask again ---
class InvalidMoveError(GameError):
    """The player typed something that cannot be played. The turn is repeated.

    The message is what the player gets to read.
    """


class NotANumberError(InvalidMoveError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid input. {CELL_HINT}")


class OutOfRangeError(InvalidMoveError):
    def __init__(self, number: str) -> None:
        # kept as text: it may be too long to convert to an int
        self.number = number
        super().__init__(f"Cell {number} is out of range. {CELL_HINT}")


class CellOccupiedError(InvalidMoveError):
    def __init__(self, cell: int) -> None:
        self.cell = cell
        super().__init__(f"Cell {cell} is already occupied. Try again.")


# --- programming errors ---
class GameStateError(GameError):
    """A caller broke the contract of the Board or Game (should never reach a player)."""


# --- fatal ---
class InputExhaustedError(GameError):
    """No more input can be read. There is no way to continue a turn without it."""
