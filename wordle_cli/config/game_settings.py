"""
Game Configuration Constants Module

Game rules and the locations of the packaged resources. Everything that
defines how a game is played lives here so the engine, the dictionary
provider and the tests agree on the same numbers.
"""

import os
from typing import Final

WORD_LENGTH: Final[int] = 5
"""
Number of letters in the Target Word and in every accepted guess.
"""

MAX_TRIES: Final[int] = 6
"""
Maximum number of accepted guesses before the game is lost.
"""

RESOURCE_DIR: Final[str] = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'resources'
)
LOCALE_DIR: Final[str] = os.path.join(RESOURCE_DIR, 'locales')

WORD_LIST_TEMPLATE: Final[str] = 'words_{language}.txt'
COMMENT_PREFIX: Final[str] = '#'


def word_list_path(language: str, resource_dir: str = RESOURCE_DIR) -> str:
    """Return the path of the word list shipped for ``language``."""
    return os.path.join(resource_dir, WORD_LIST_TEMPLATE.format(language=language))
