"""
Game Logger Module

Structured logging for guesses, rejected input and game events. The console
only sees critical messages; the full JSON trail goes to a dated log file
when a log directory is configured.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


class GameLogger:
    """
    Centralized logging system for the terminal game.

    Features:
    - Accepted and rejected guess tracking
    - Game event logging (start, win, loss)
    - JSON structured entries for easy parsing
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = 'INFO'):
        self.log_dir: Optional[Path] = None
        self.logger = self._setup_logger(log_dir, level)

    def configure(self, log_dir: Optional[str] = None, level: str = 'INFO') -> logging.Logger:
        """Rebuild the handlers, e.g. once the runtime configuration is known."""
        self.logger = self._setup_logger(log_dir, level)
        return self.logger

    def _setup_logger(self, log_dir: Optional[str], level: str) -> logging.Logger:
        """Setup the game logger with a console handler and an optional file handler."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
        logger.propagate = False

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        # Console gets CRITICAL only; JSON entries stay in the log file
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.CRITICAL)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        self.log_dir = None
        if log_dir:
            self.log_dir = Path(log_dir)
            self.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        return logger

    def _create_log_entry(self, event_type: str, action: str, details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_game_event(self, event: str, **kwargs):
        """
        Log game-specific events.

        Args:
            event: Type of game event (e.g. 'game_started', 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        self.logger.info(self._create_log_entry('GAME_EVENT', event, kwargs))

    def log_guess(self, guess: str, round_number: int, **kwargs):
        """Log an accepted guess."""
        details = {'guess': guess, 'round': round_number, **kwargs}
        self.logger.info(self._create_log_entry('GUESS', 'guess_accepted', details))

    def log_rejected_guess(self, raw_input: str, reason: str, **kwargs):
        """Log input that did not become a guess."""
        details = {'input': raw_input, 'reason': reason, **kwargs}
        self.logger.debug(self._create_log_entry('GUESS', 'guess_rejected', details))

    def log_error(self, error: Exception, action: str, **kwargs):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            **kwargs
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))


# Global logger instance
game_logger = GameLogger()
