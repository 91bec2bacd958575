"""
Utilities Package

Contains helper functions and the game logger.
"""

from .helpers import sanitize_word, normalize_locale_tag
from .game_logger import GameLogger, game_logger

__all__ = ['sanitize_word', 'normalize_locale_tag', 'GameLogger', 'game_logger']
