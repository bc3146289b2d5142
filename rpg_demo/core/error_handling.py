"""
Exceptions raised by the demo.
"""


class GameException(Exception):
    """Base class for all the exceptions raised by the demo."""


class InvalidSelection(GameException):
    """
    Raised when the player enters a menu choice that is not offered.

    The exception message is the text shown to the player, while the raw input
    is kept in `selection` for logging.
    """

    def __init__(self, message: str, selection: str) -> None:
        super().__init__(message)
        self.selection = selection
