"""Protocol for the text console (can swap stdin/stdout for a scripted console in tests)"""

import logging
from typing import Protocol

from src.core.exceptions import InputExhaustedError

logger = logging.getLogger(__name__)


class ConsoleIO(Protocol):
    """Where lines come from and where text goes to"""

    def read_line(self, prompt: str) -> str:
        """Show the prompt (no newline) and return one line of input."""
        ...

    def display(self, text: str) -> None:
        """Show text, followed by a newline."""
        ...


class StdConsole:
    """ConsoleIO on top of the process' stdin / stdout."""

    def read_line(self, prompt: str) -> str:
        try:
            return input(prompt)
        except EOFError as exc:
            raise InputExhaustedError("Input stream closed while waiting for a move.") from exc
        except OSError as exc:
            logger.debug("reading stdin failed: %s", exc)
            raise InputExhaustedError(f"Failed to read line: {exc}") from exc

    def display(self, text: str) -> None:
        print(text)
