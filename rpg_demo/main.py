"""
Main entry point for the RPG character demo.

The demo lets the player pick a character, an attack strategy and any number of
attack enhancers, then runs the character's preparation and a single attack.
"""

import sys

from .core.logging import get_logger, setup_logging
from .session import Session, run_session

logger = get_logger(__name__)


def main() -> int:
    """
    Runs one interactive session on the terminal.

    Returns:
        int: The process exit status.

    """
    setup_logging()
    outcome = run_session(Session())
    logger.debug("Session ended with outcome %s", outcome)
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
