"""
Helper Functions

Contains utility functions used throughout the application.
"""


def sanitize_word(word: str) -> str:
    """Trim, uppercase and drop every character that is not a letter."""
    return ''.join(char for char in word.strip().upper() if char.isalpha())


def normalize_locale_tag(tag: str) -> str:
    """
    Normalize a locale tag for comparison.

    ``en_US.UTF-8`` and ``EN-us`` both become ``en-us``; ``C`` and ``POSIX``
    carry no language and become an empty string.
    """
    tag = (tag or '').split('.', 1)[0].split('@', 1)[0]
    tag = tag.replace('_', '-').strip().lower()
    if tag in ('c', 'posix'):
        return ''
    return tag
