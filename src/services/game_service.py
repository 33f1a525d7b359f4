"""Orchestration of one game: the turn loop between the console and the domain layer."""

import logging
from typing import Optional

from src.console.io import ConsoleIO
from src.console.models import MoveRequest
from src.core.constants import CELL_COUNT, FIRST_CELL, LAST_CELL
from src.core.exceptions import InvalidMoveError
from src.core.shared_types import Mark, Outcome, Status
from src.tictactoe.game import Game

logger = logging.getLogger(__name__)

CELL_RANGE = f"{FIRST_CELL}-{LAST_CELL}"


class GameService:
    """Turn controller for a console game."""

    def __init__(self, console: ConsoleIO, game: Optional[Game] = None) -> None:
        self.console = console
        self.game = game if game is not None else Game.new_game()

    def play(self) -> Outcome:
        """
        Run turns until the game is won or drawn.
        ----

        Every turn:
        1. render the board and prompt the current player
        2. parse and validate the line --> on failure: explain, and ask the same player again
        3. apply the move and check for a winner / full board
        4. (not finished) the Game has switched to the other player

        InputExhaustedError from the console is NOT handled here: without input, there is no next turn.
        """
        while True:
            self.console.display(self.game.board.render())
            line = self.console.read_line(self._prompt(self.game.current))

            try:
                request = self._validate(line)
            except InvalidMoveError as exc:
                logger.debug("rejected input %r from %s: %s", line, self.game.current, exc)
                self.console.display(str(exc))
                continue

            mover = self.game.current
            outcome = self.game.make_move(request.position)
            logger.debug(
                "%s played cell %d (%d of %d cells taken)",
                mover,
                request.cell,
                CELL_COUNT - self.game.board.count(Mark.EMPTY),
                CELL_COUNT,
            )

            if outcome.is_over:
                self._announce(outcome)
                return outcome

    # -- Internal helpers --
    def _validate(self, line: str) -> MoveRequest:
        """Syntax and range are checked by the request model, occupancy by the Game."""
        request = MoveRequest.from_text(line)
        self.game.ensure_free(request.position)
        return request

    def _announce(self, outcome: Outcome) -> None:
        self.console.display(self.game.board.render())
        if outcome.status == Status.WON:
            logger.info("game won by %s", outcome.winner)
            self.console.display(f"Player {outcome.winner} wins!")
        else:
            logger.info("game ended in a draw")
            self.console.display("It's a draw!")

    @staticmethod
    def _prompt(mark: Mark) -> str:
        return f"Player {mark}, enter a move ({CELL_RANGE}): "
