"""
Utilities module for the demo.

Provides the shared rich console and the helpers used to print to it.
"""

from typing import Any

from rich.console import Console

# Initialize the rich console.
_console = Console(markup=True, highlight=False)


def get_console() -> Console:
    """
    Returns the console used when no other console is given.

    Returns:
        Console: The default rich console.

    """
    return _console


def cprint(*args: Any, console: Console | None = None, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        console (Console | None): The console to print to. Defaults to the
            shared console.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    # Protocol lines must never be split by the console width.
    kwargs.setdefault("soft_wrap", True)
    (console or _console).print(*args, **kwargs)


def ccapture(content: Any, console: Console | None = None) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.
        console (Console | None): The console to render with.

    Returns:
        str: The captured output as a string.

    """
    target = console or _console
    with target.capture() as capture:
        target.print(content, markup=True, end="")
    return capture.get()

