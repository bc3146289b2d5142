"""
Tests for the interactive session.
"""

import pytest

from rpg_demo.attacks import AttackBehavior
from rpg_demo.character import create_character
from rpg_demo.core.constants import CharacterKind, SessionOutcome
from rpg_demo.core.error_handling import GameException
from rpg_demo.session import (
    Session,
    add_enhancers,
    choose_attack_strategy,
    choose_character,
    fight,
    run_session,
)
from rpg_demo.ui.cli_interface import PromptToolkitReader


@pytest.fixture
def make_session(console, scripted_reader):
    def make(*answers: str) -> Session:
        return Session(read_line=scripted_reader(answers), console=console)

    return make


def test_full_knight_session(make_session, output_lines):
    """Test a knight with melee, fire and poison from first prompt to attack."""
    session = make_session("1", "1", "1", "2", "0")

    outcome = run_session(session)

    assert outcome is SessionOutcome.COMPLETED
    assert session.character.kind is CharacterKind.KNIGHT
    lines = output_lines()
    preparation = lines.index("=== Preparing for Combat ===")
    assert lines[preparation + 1 :] == [
        "Preparation complete for Knight:",
        "Knight equips plate armor.",
        "Knight trains in swordsmanship.",
        "Knight selects a broadsword.",
        "",
        "=== Performing Attack ===",
        "Attack: Basic Attack, Fire Damage, Poison Damage",
        "Performing melee attack with weapon!",
        "Adding fire damage to the attack!",
        "Adding poison damage to the attack!",
    ]


def test_menus_and_prompts(make_session, output_lines):
    """Test the exact menus and prompts shown during a short session."""
    session = make_session("2", "2", "0")

    run_session(session)

    assert session.read_line.prompts == [
        "Enter choice (1 or 2): ",
        "Enter choice (1 or 2): ",
        "Enter choice (0, 1, or 2): ",
    ]
    assert output_lines()[:14] == [
        "Choose your character:",
        "1. Knight",
        "2. Sorcerer",
        "",
        "Choose your attack strategy:",
        "1. Melee Attack",
        "2. Magic Attack",
        "",
        "Add an attack enhancer:",
        "1. Fire Damage",
        "2. Poison Damage",
        "0. None (proceed to combat)",
        "",
        "=== Preparing for Combat ===",
    ]
    assert output_lines()[-2:] == [
        "Attack: Basic Attack",
        "Casting a powerful magic spell!",
    ]


def test_invalid_character_ends_session(make_session, output_lines):
    session = make_session("3", "1", "0")

    outcome = run_session(session)

    assert outcome is SessionOutcome.ABORTED
    assert session.character is None
    assert output_lines()[-1] == "Error: Invalid input: 3"
    assert len(session.read_line.prompts) == 1


def test_invalid_strategy_ends_session(make_session, output_lines):
    """Test that a bad strategy choice ends the session before any combat."""
    session = make_session("2", "5")

    outcome = run_session(session)

    assert outcome is SessionOutcome.ABORTED
    assert session.character.kind is CharacterKind.SORCERER
    assert output_lines()[-1] == "Error: Invalid attack strategy choice: 5"
    assert "=== Preparing for Combat ===" not in output_lines()


def test_invalid_enhancer_reprompts(make_session, output_lines):
    """Test that a bad enhancer choice is reported and asked again."""
    session = make_session("1", "1", "7", "1", "0")

    outcome = run_session(session)

    assert outcome is SessionOutcome.COMPLETED
    assert "Error: Invalid enhancer choice: 7" in output_lines()
    assert output_lines().count("Add an attack enhancer:") == 3
    assert session.character.attack.describe() == "Basic Attack, Fire Damage"


def test_error_prints_input_literally(make_session, output_lines):
    session = make_session("[bold]x[/]")

    run_session(session)

    assert output_lines()[-1] == "Error: Invalid input: [bold]x[/]"


def test_strategy_overrides_default(make_session):
    session = make_session("2", "1", "0")

    run_session(session)

    assert session.character.attack.base is AttackBehavior.MELEE


def test_end_of_input_interrupts(make_session, output_lines):
    session = make_session("1", "1", "1")

    outcome = run_session(session)

    assert outcome is SessionOutcome.INTERRUPTED
    assert outcome.exit_code == 130
    assert output_lines()[-1] == "Session interrupted."


def test_keyboard_interrupt_interrupts(console):
    def interrupt(prompt: str) -> str:
        raise KeyboardInterrupt

    outcome = run_session(Session(read_line=interrupt, console=console))

    assert outcome is SessionOutcome.INTERRUPTED


def test_stages_chain(make_session):
    """Test that each stage hands over to the next one."""
    session = make_session("1", "2", "0")

    assert choose_character(session) is choose_attack_strategy
    assert choose_attack_strategy(session) is add_enhancers
    assert add_enhancers(session) is fight
    assert fight(session) is SessionOutcome.COMPLETED


def test_run_session_from_later_stage(make_session, output_lines):
    session = make_session("0")
    session.character = create_character("2")

    outcome = run_session(session, start=add_enhancers)

    assert outcome is SessionOutcome.COMPLETED
    assert output_lines()[-1] == "Casting a powerful magic spell!"


def test_completed_and_aborted_exit_codes():
    assert SessionOutcome.COMPLETED.exit_code == 0
    assert SessionOutcome.ABORTED.exit_code == 0


def test_stage_without_character_raises(make_session):
    """Test that later stages refuse to run before a character is chosen."""
    session = make_session("1")

    with pytest.raises(GameException, match="No character has been chosen yet."):
        choose_attack_strategy(session)


def test_session_builds_default_reader(console):
    session = Session(console=console)
    assert isinstance(session.read_line, PromptToolkitReader)
