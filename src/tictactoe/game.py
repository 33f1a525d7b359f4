"""
The Game is the entrypoint into the domain layer for the service layer.
It owns the Board, knows whose turn it is, and decides what a move leads to: a win, a draw, or the next turn.
"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import CellOccupiedError, GameStateError
from src.core.shared_types import Mark, Outcome, Status
from src.tictactoe.board import Board


@dataclass
class Game:
    board: Board
    current: Mark

    @classmethod
    def new_game(cls) -> Self:
        """X always opens."""
        return cls(board=Board.empty(), current=Mark.X)

    @property
    def outcome(self) -> Outcome:
        """Look at the board as it is now. Under alternating play at most one mark can own a line."""
        for mark in (Mark.X, Mark.O):
            if self.board.has_line(mark):
                return Outcome(Status.WON, mark)
        if self.board.is_full():
            return Outcome(Status.DRAW)
        return Outcome(Status.IN_PROGRESS)

    def ensure_free(self, position: int) -> None:
        """Raise if the cell is taken. Position is 0-indexed, the error reports the cell number the player typed."""
        if self.board.occupied(position):
            raise CellOccupiedError(position + 1)

    def make_move(self, position: int) -> Outcome:
        """
        Play the current mark on `position`.
        ----

        1. refuse if the game already ended, or the cell is taken
        2. place the mark
        3. did the mover complete a line? --> won (no turn switch)
        4. is the board full? --> draw (no turn switch)
        5. otherwise hand the turn to the opponent
        """
        if self.outcome.is_over:
            raise GameStateError(f"Game is not in progress. status: {self.outcome.status}")
        self.ensure_free(position)

        mover = self.current
        self.board.place(position, mover)

        if self.board.has_line(mover):
            return Outcome(Status.WON, mover)
        if self.board.is_full():
            return Outcome(Status.DRAW)

        self.current = mover.opponent
        return Outcome(Status.IN_PROGRESS)
