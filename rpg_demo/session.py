"""
Interactive session for the demo.

A session walks the player through a fixed sequence of stages: choose a
character, choose an attack strategy, stack enhancers, then fight. Each stage
receives the Session and returns either the next stage or a SessionOutcome
that ends the run.
"""

from dataclasses import dataclass, field
from typing import Callable, Union

from catchery import log_debug, log_warning
from rich.console import Console

from .attacks.attack_behavior import AttackBehavior
from .character.character_factory import create_character
from .character.main import Character
from .core.constants import (
    ATTACK_BANNER,
    BINARY_CHOICE_PROMPT,
    CHARACTER_MENU_OPTIONS,
    CHARACTER_MENU_TITLE,
    ENHANCER_CHOICE_PROMPT,
    ENHANCER_DONE_CHOICE,
    ENHANCER_MENU_OPTIONS,
    ENHANCER_MENU_TITLE,
    INTERRUPTED_MESSAGE,
    PREPARATION_BANNER,
    STRATEGY_MENU_OPTIONS,
    STRATEGY_MENU_TITLE,
    SessionOutcome,
)
from .core.error_handling import GameException, InvalidSelection
from .core.utils import cprint, get_console
from .ui.cli_interface import (
    LineReader,
    PromptToolkitReader,
    show_banner,
    show_error,
    show_menu,
)

# Menu choice for each attack strategy.
STRATEGY_CHOICES: dict[str, AttackBehavior] = {
    "1": AttackBehavior.MELEE,
    "2": AttackBehavior.MAGIC,
}

# Menu choice for each enhancer, as understood by Character.add_attack_enhancer.
ENHANCER_CHOICES: dict[str, str] = {
    "1": "fire",
    "2": "poison",
}


@dataclass
class Session:
    """State of one interactive run, passed from stage to stage."""

    read_line: LineReader | None = None
    console: Console = field(default_factory=get_console)
    character: Character | None = None

    def __post_init__(self) -> None:
        if self.read_line is None:
            self.read_line = PromptToolkitReader(self.console)

    def require_character(self) -> Character:
        if self.character is None:
            raise GameException("No character has been chosen yet.")
        return self.character


Stage = Callable[[Session], Union["Stage", SessionOutcome]]


def _report(session: Session, error: InvalidSelection, stage: str) -> None:
    show_error(str(error), session.console)
    log_debug(str(error), {"selection": error.selection, "context": stage})


# =============================================================================
# STAGES
# =============================================================================


def choose_character(session: Session) -> Stage | SessionOutcome:
    """Asks for the character; an invalid choice ends the session."""
    show_menu(
        CHARACTER_MENU_TITLE,
        CHARACTER_MENU_OPTIONS,
        session.console,
        leading_blank=False,
    )
    choice = session.read_line(BINARY_CHOICE_PROMPT)
    try:
        session.character = create_character(choice)
    except InvalidSelection as error:
        _report(session, error, "character_selection")
        return SessionOutcome.ABORTED
    return choose_attack_strategy


def choose_attack_strategy(session: Session) -> Stage | SessionOutcome:
    """Asks for the attack strategy; an invalid choice ends the session."""
    character = session.require_character()
    show_menu(STRATEGY_MENU_TITLE, STRATEGY_MENU_OPTIONS, session.console)
    choice = session.read_line(BINARY_CHOICE_PROMPT)
    behavior = STRATEGY_CHOICES.get(choice)
    if behavior is None:
        _report(
            session,
            InvalidSelection(f"Invalid attack strategy choice: {choice}", choice),
            "strategy_selection",
        )
        return SessionOutcome.ABORTED
    character.set_attack_strategy(behavior)
    return add_enhancers


def add_enhancers(session: Session) -> Stage | SessionOutcome:
    """
    Asks for one enhancer and comes back to itself until the player is done.

    An invalid choice is reported and asked again.
    """
    character = session.require_character()
    show_menu(ENHANCER_MENU_TITLE, ENHANCER_MENU_OPTIONS, session.console)
    choice = session.read_line(ENHANCER_CHOICE_PROMPT)
    if choice == ENHANCER_DONE_CHOICE:
        return fight
    enhancer = ENHANCER_CHOICES.get(choice)
    if enhancer is None:
        _report(
            session,
            InvalidSelection(f"Invalid enhancer choice: {choice}", choice),
            "enhancer_selection",
        )
        return add_enhancers
    character.add_attack_enhancer(enhancer)
    return add_enhancers


def fight(session: Session) -> Stage | SessionOutcome:
    """Prepares the character, then performs its attack."""
    character = session.require_character()
    show_banner(PREPARATION_BANNER, session.console)
    character.prepare_for_combat(session.console)
    show_banner(ATTACK_BANNER, session.console)
    character.perform_attack(session.console)
    return SessionOutcome.COMPLETED


# =============================================================================
# DRIVER
# =============================================================================


def run_session(session: Session, start: Stage = choose_character) -> SessionOutcome:
    """
    Runs stages until one of them returns an outcome.

    Args:
        session (Session): The session state.
        start (Stage): The first stage. Defaults to choose_character.

    Returns:
        SessionOutcome: How the session ended. Running out of input or pressing
        Ctrl-C ends it as INTERRUPTED.

    """
    stage: Stage | SessionOutcome = start
    try:
        while not isinstance(stage, SessionOutcome):
            stage = stage(session)
    except (EOFError, KeyboardInterrupt) as error:
        cprint(console=session.console)
        cprint(INTERRUPTED_MESSAGE, console=session.console)
        log_warning(
            "Session interrupted before completion",
            {"error": type(error).__name__, "context": "session"},
        )
        return SessionOutcome.INTERRUPTED
    return stage
