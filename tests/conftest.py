"""
Shared fixtures for the test suite.
"""

import io

import pytest
from rich.console import Console


class ScriptedReader:
    """Replays a fixed list of answers and records the prompts it was shown."""

    def __init__(self, answers: list[str]) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def console():
    """A colourless console writing to an in-memory buffer."""
    return Console(
        file=io.StringIO(),
        color_system=None,
        force_terminal=False,
        highlight=False,
        width=200,
    )


@pytest.fixture
def output_lines(console):
    """Returns a function giving the lines printed so far on the console."""

    def lines() -> list[str]:
        return [line.rstrip() for line in console.file.getvalue().splitlines()]

    return lines


@pytest.fixture
def scripted_reader():
    """Builds a ScriptedReader from a list of answers."""
    return ScriptedReader
