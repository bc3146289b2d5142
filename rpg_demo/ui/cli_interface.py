"""
User interface module for the demo.

Provides the console menus and the line reader used by the session. Input is
read with prompt_toolkit on a terminal and through the rich console otherwise;
any callable taking a prompt and returning a line can stand in for it.
"""

import sys
from typing import Callable

from prompt_toolkit import ANSI, PromptSession
from rich.console import Console

from ..core.utils import ccapture, cprint, get_console

# Reads one line of input after showing the given prompt.
LineReader = Callable[[str], str]


class PromptToolkitReader:
    """
    Line reader backed by a prompt_toolkit session.

    The prompt session is created on the first prompt and kept for the rest of
    the run, so that it keeps its history. When standard input or output is not
    a terminal, lines are read through the rich console instead, so that piped
    runs see each prompt exactly once and no echoed input.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or get_console()
        self._session: PromptSession | None = None

    @staticmethod
    def is_interactive() -> bool:
        return sys.stdin.isatty() and sys.stdout.isatty()

    def __call__(self, prompt: str) -> str:
        if not self.is_interactive():
            line = self._console.input(prompt, markup=False)
            # Piped input is not echoed, so end the prompt line here.
            cprint(console=self._console)
            return line
        if self._session is None:
            self._session = PromptSession()
        return self._session.prompt(ANSI(ccapture(prompt, self._console)))


def show_menu(
    title: str,
    options: list[str],
    console: Console | None = None,
    leading_blank: bool = True,
) -> None:
    """
    Prints a menu: an optional blank line, the title, then one line per option.

    Args:
        title (str): The menu title.
        options (list[str]): The option lines, e.g. "1. Knight".
        console (Console | None): The console to print to.
        leading_blank (bool): Whether to separate the menu from previous
            output with a blank line. Defaults to True.

    """
    if leading_blank:
        cprint(console=console)
    cprint(title, console=console)
    for option in options:
        cprint(option, console=console)


def show_banner(banner: str, console: Console | None = None) -> None:
    """Prints a section banner preceded by a blank line."""
    cprint(console=console)
    cprint(banner, console=console)


def show_error(message: str, console: Console | None = None) -> None:
    """Prints an error line, exactly as given."""
    cprint(f"Error: {message}", console=console, markup=False)
