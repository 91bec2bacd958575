"""
Wordle Terminal Game - Main Entry Point

Configures logging, builds the game and plays exactly one round.
"""

import sys

from colorama import init

from . import create_game
from .config import get_config
from .exceptions import FatalError
from .utils.game_logger import game_logger

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_INTERRUPTED = 130


def log_level_for(config_class) -> str:
    """DEBUG forces the most verbose level, otherwise LOG_LEVEL applies."""
    return 'DEBUG' if config_class.DEBUG else config_class.LOG_LEVEL


def main(config_class=None) -> int:
    """Run one game; returns the process exit code."""
    config_class = config_class or get_config()

    try:
        game_logger.configure(config_class.LOG_DIR, log_level_for(config_class))
    except OSError as e:
        print(f"Error: cannot open log directory {config_class.LOG_DIR}: {e}", file=sys.stderr)
        return EXIT_FATAL

    if config_class.USE_COLOR:
        init()

    controller = None
    try:
        controller = create_game(config_class)
        game_logger.logger.info("Wordle starting - locale %s", controller.bundle.locale)
        status = controller.run()
        game_logger.logger.info("Wordle finished - %s", status.value)
        return EXIT_OK

    except KeyboardInterrupt:
        game_logger.logger.info("Wordle shutting down (KeyboardInterrupt)")
        message = controller.bundle.format('interrupted') if controller else 'Game interrupted.'
        print(f"\n{message}")
        return EXIT_INTERRUPTED

    except FatalError as e:
        game_logger.log_error(e, 'run_game')
        message = controller.bundle.format('fatal-error', error=e) if controller else f"Error: {e}"
        print(message, file=sys.stderr)
        return EXIT_FATAL


if __name__ == '__main__':
    sys.exit(main())
