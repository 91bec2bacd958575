"""
Dictionary Service

Loads the word list of a language from the packaged resources and picks the
Target Word.
"""

import glob
import logging
import os
import random
from typing import List, Sequence

from ..config.game_settings import (
    COMMENT_PREFIX, RESOURCE_DIR, WORD_LENGTH, WORD_LIST_TEMPLATE, word_list_path
)
from ..exceptions import DictionaryLoadError, EmptyDictionaryError
from ..utils.helpers import normalize_locale_tag, sanitize_word

logger = logging.getLogger(__name__)


def parse_word_list(lines, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Normalize raw word list lines into dictionary entries.

    Blank lines and comment lines are skipped, every other line is sanitized
    and kept if it has ``word_length`` letters. Duplicates are dropped; the
    first occurrence keeps its position.
    """
    words: List[str] = []
    seen = set()
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        word = sanitize_word(stripped)
        if len(word) != word_length or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


def choose_random(words: Sequence[str], rng=None) -> str:
    """
    Return one element of ``words`` uniformly at random.

    Raises:
        EmptyDictionaryError: If ``words`` is empty
    """
    if not words:
        raise EmptyDictionaryError()
    return (rng or random).choice(list(words))


class DictionaryService:
    """Provides the valid guesses of a language and the secret word."""

    def __init__(self, resource_dir: str = RESOURCE_DIR, word_length: int = WORD_LENGTH):
        self.resource_dir = resource_dir
        self.word_length = word_length

    def available_locales(self) -> List[str]:
        """Languages that ship a word list, sorted."""
        prefix, suffix = WORD_LIST_TEMPLATE.split('{language}')
        pattern = os.path.join(self.resource_dir, WORD_LIST_TEMPLATE.format(language='*'))
        languages = []
        for path in glob.glob(pattern):
            name = os.path.basename(path)
            languages.append(name[len(prefix):len(name) - len(suffix)])
        return sorted(languages)

    def load_words(self, locale: str) -> List[str]:
        """
        Load the word list for ``locale``.

        Only the primary language of the tag is used, so ``bg-BG`` reads
        ``words_bg.txt``.

        Returns:
            List[str]: Uppercase words of the configured length

        Raises:
            DictionaryLoadError: If the resource is missing or unreadable
            EmptyDictionaryError: If no usable word is left after filtering
        """
        language = normalize_locale_tag(locale).split('-', 1)[0]
        path = word_list_path(language, self.resource_dir)

        try:
            with open(path, 'r', encoding='utf-8') as f:
                words = parse_word_list(f, self.word_length)
        except FileNotFoundError:
            raise DictionaryLoadError(path, 'file not found')
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(path, str(e))

        if not words:
            raise EmptyDictionaryError(path)

        logger.debug("Loaded %d words from %s", len(words), path)
        return words

    def choose_random(self, words: Sequence[str], rng=None) -> str:
        return choose_random(words, rng)
