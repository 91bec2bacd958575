"""
Services Package

Contains the game engine, the dictionary provider and the locale service.
"""

from .dictionary_service import DictionaryService, choose_random
from .game_service import WordleGame
from .locale_service import (
    LocaleBundle, LocaleService, alphabet_for, format_message, get_locale_service,
    initialize_locale_service
)

__all__ = [
    'DictionaryService', 'choose_random',
    'WordleGame',
    'LocaleBundle', 'LocaleService', 'alphabet_for', 'format_message',
    'get_locale_service', 'initialize_locale_service'
]
