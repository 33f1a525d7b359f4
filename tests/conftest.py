"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/helpers required for testing multiple layers.
"""

from typing import Callable, Iterable

import pytest

from src.core.exceptions import InputExhaustedError


class ScriptedConsole:
    """Mock the ConsoleIO: lines are fed from a script, everything displayed is recorded."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.displayed: list[str] = []

    def read_line(self, prompt: str) -> str:
        """Pop the next scripted line. An empty script behaves like a closed stdin."""
        self.prompts.append(prompt)
        if not self._lines:
            raise InputExhaustedError("script ran out of lines")
        return self._lines.pop(0)

    def display(self, text: str) -> None:
        self.displayed.append(text)

    @property
    def remaining(self) -> list[str]:
        return list(self._lines)


@pytest.fixture
def scripted_console() -> Callable[..., ScriptedConsole]:
    """Call the inner function with the lines the players will type."""

    def _create_console(*lines: str) -> ScriptedConsole:
        return ScriptedConsole(lines)

    return _create_console
