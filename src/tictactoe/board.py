"""The Board holds the nine cells and answers every question about lines and occupancy."""

from dataclasses import dataclass
from typing import Self

from src.core.constants import BOARD_SIZE, CELL_COUNT
from src.core.exceptions import GameStateError
from src.core.shared_types import Mark

# Cells are stored row-major: index = row * 3 + column
WIN_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),  # top row
    (3, 4, 5),  # middle row
    (6, 7, 8),  # bottom row
    (0, 3, 6),  # left column
    (1, 4, 7),  # middle column
    (2, 5, 8),  # right column
    (0, 4, 8),  # main diagonal
    (2, 4, 6),  # anti-diagonal
)

ROW_SEPARATOR = "---+---+---"

# Characters accepted by Board.from_string. Both " " and "." mean empty, dots are easier to read in tests.
CHARACTER_TO_MARK: dict[str, Mark] = {
    " ": Mark.EMPTY,
    ".": Mark.EMPTY,
    "X": Mark.X,
    "O": Mark.O,
}


@dataclass
class Board:
    cells: list[Mark]

    @classmethod
    def empty(cls) -> Self:
        return cls([Mark.EMPTY] * CELL_COUNT)

    @classmethod
    def from_string(cls, text: str) -> Self:
        """Construct a board from 9 characters, read row by row.

        ex. "XO..X...O" means:
        * top row: X, O, empty
        * middle row: empty, X, empty
        * bottom row: empty, empty, O
        """
        if len(text) != CELL_COUNT:
            raise GameStateError(
                f"Board string must contain {CELL_COUNT} characters, got {len(text)}: {text!r}"
            )
        unknown = set(text) - CHARACTER_TO_MARK.keys()
        if unknown:
            raise GameStateError(
                f"Unknown characters in board string: {''.join(sorted(unknown))!r}"
            )
        return cls([CHARACTER_TO_MARK[character] for character in text])

    def occupied(self, index: int) -> bool:
        return self._cell(index) != Mark.EMPTY

    def place(self, index: int, mark: Mark) -> None:
        """Put a mark on an empty cell. The caller has checked `occupied` first."""
        if mark == Mark.EMPTY:
            raise GameStateError("Cannot clear a cell by placing an empty mark.")
        if self.occupied(index):
            raise GameStateError(
                f"Cell at index {index} already holds {self.cells[index]}."
            )
        self.cells[index] = mark

    def has_line(self, mark: Mark) -> bool:
        """Does `mark` fill at least one row, column or diagonal?"""
        return any(
            all(self.cells[index] == mark for index in line) for line in WIN_LINES
        )

    def is_full(self) -> bool:
        return all(cell != Mark.EMPTY for cell in self.cells)

    def count(self, mark: Mark) -> int:
        return sum(1 for cell in self.cells if cell == mark)

    def render(self) -> str:
        """Text picture of the grid, with a blank line above and below.

        The last line carries no newline: displaying it adds one, which produces the blank line at the bottom.
        """
        lines = [""]
        for row in range(BOARD_SIZE):
            if row > 0:
                lines.append(ROW_SEPARATOR)
            lines.append(self._render_row(row))
        lines.append("")
        return "\n".join(lines)

    def _render_row(self, row: int) -> str:
        start = row * BOARD_SIZE
        cells = self.cells[start : start + BOARD_SIZE]
        return " " + " | ".join(cell.value for cell in cells) + " "

    def _cell(self, index: int) -> Mark:
        if not 0 <= index < CELL_COUNT:
            raise GameStateError(f"Index {index} is outside the board (0-{CELL_COUNT - 1}).")
        return self.cells[index]
