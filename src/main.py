"""Entry point: play one game of tic-tac-toe on the terminal."""

import logging
import sys

from src.console.io import StdConsole
from src.core.exceptions import InputExhaustedError
from src.services.game_service import GameService

logger = logging.getLogger(__name__)


def main() -> int:
    # stdout belongs to the game, diagnostics go to stderr
    logging.basicConfig(
        level=logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    service = GameService(StdConsole())
    try:
        service.play()
    except InputExhaustedError as exc:
        logger.critical("Cannot continue the game: %s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
