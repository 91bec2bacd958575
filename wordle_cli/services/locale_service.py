"""
Locale Service

Loads every message catalog once, negotiates the requested locale and formats
user-facing text.

A catalog is a JSON object::

    {
        "alphabet": "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
        "messages": {"enter-guess": "Enter your word guess ({word_length} letters)"}
    }
"""

import glob
import json
import logging
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from ..config.game_settings import LOCALE_DIR
from ..exceptions import LocaleError
from ..utils.helpers import normalize_locale_tag

logger = logging.getLogger(__name__)


class _KeepMissing(dict):
    """Leaves unknown ``{placeholders}`` visible instead of failing."""

    def __missing__(self, key):
        return '{' + str(key) + '}'


@dataclass(frozen=True, eq=False)
class LocaleBundle:
    """Parsed catalog of one locale. Immutable once loaded."""
    locale: str
    alphabet: Tuple[str, ...]
    messages: Mapping[str, str]
    _reported: set = field(default_factory=set, compare=False, repr=False)

    def format(self, key: str, **args) -> str:
        """
        Localized text for ``key`` with named ``{arg}`` interpolation.

        An unknown key is returned as is.
        """
        template = self.messages.get(key)
        if template is None:
            if key not in self._reported:
                self._reported.add(key)
                logger.warning("Missing message '%s' in locale '%s'", key, self.locale)
            return key
        try:
            return template.format_map(_KeepMissing(args))
        except (ValueError, IndexError, TypeError, AttributeError) as e:
            logger.warning("Cannot format message '%s' in locale '%s': %s", key, self.locale, e)
            return template


def format_message(bundle: LocaleBundle, message_key: str, **args) -> str:
    return bundle.format(message_key, **args)


def alphabet_for(bundle: LocaleBundle) -> Tuple[str, ...]:
    return bundle.alphabet


def parse_catalog(locale: str, data) -> LocaleBundle:
    """
    Build a bundle from decoded catalog JSON.

    Raises:
        LocaleError: If the alphabet or the messages are missing or malformed
    """
    if not isinstance(data, dict):
        raise LocaleError(f"Catalog '{locale}' must be a JSON object")

    alphabet = data.get('alphabet')
    messages = data.get('messages')
    if not isinstance(alphabet, str) or not alphabet:
        raise LocaleError(f"Catalog '{locale}' has no alphabet")
    if not isinstance(messages, dict) or not all(isinstance(v, str) for v in messages.values()):
        raise LocaleError(f"Catalog '{locale}' must map message keys to strings")

    return LocaleBundle(
        locale=locale,
        alphabet=tuple(alphabet.upper()),
        messages=MappingProxyType(dict(messages))
    )


def load_catalogs(directory: str = LOCALE_DIR) -> Mapping[str, LocaleBundle]:
    """
    Parse every ``<tag>.json`` catalog in ``directory``.

    Returns:
        Read-only mapping from normalized locale tag to bundle

    Raises:
        LocaleError: If a catalog cannot be read or parsed
    """
    catalogs = {}
    for path in sorted(glob.glob(os.path.join(directory, '*.json'))):
        locale = normalize_locale_tag(os.path.splitext(os.path.basename(path))[0])
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise LocaleError(f"Invalid catalog {path}: {e}")
        catalogs[locale] = parse_catalog(locale, data)

    logger.debug("Loaded locale catalogs: %s", ', '.join(catalogs) or 'none')
    return MappingProxyType(catalogs)


def negotiate_locale(requested: Optional[str],
                     available: Iterable[str],
                     default: Optional[str] = None) -> Optional[str]:
    """
    Pick the best available locale for ``requested``.

    Tries an exact match, then a match on the primary language in either
    direction (``en-us`` → ``en``, ``bg`` → ``bg-bg``), then ``default``.
    Returns None when nothing resolves.
    """
    available = sorted(normalize_locale_tag(tag) for tag in available)
    wanted = normalize_locale_tag(requested or '')

    if wanted:
        if wanted in available:
            return wanted
        language = wanted.split('-', 1)[0]
        if language in available:
            return language
        for tag in available:
            if tag.split('-', 1)[0] == language:
                return tag

    fallback = normalize_locale_tag(default or '')
    if fallback and fallback in available:
        return fallback
    return None


class LocaleService:
    """Process-wide, read-only table of message catalogs."""

    def __init__(self, catalogs: Mapping[str, LocaleBundle], default_locale: str = 'en'):
        self.catalogs = MappingProxyType(dict(catalogs))
        self.default_locale = default_locale

    @classmethod
    def from_directory(cls, directory: str = LOCALE_DIR, default_locale: str = 'en') -> 'LocaleService':
        return cls(load_catalogs(directory), default_locale)

    @property
    def available_locales(self) -> Tuple[str, ...]:
        return tuple(sorted(self.catalogs))

    def resolve_bundle(self, requested_locale: Optional[str]) -> LocaleBundle:
        """
        Negotiated bundle for ``requested_locale``.

        Raises:
            LocaleError: If neither the request nor the default resolves
        """
        locale = negotiate_locale(requested_locale, self.catalogs, self.default_locale)
        if locale is None:
            raise LocaleError(
                f"No catalog for '{requested_locale}' or default '{self.default_locale}' "
                f"(available: {', '.join(self.available_locales) or 'none'})"
            )
        if locale != normalize_locale_tag(requested_locale or ''):
            logger.info("Locale '%s' resolved to '%s'", requested_locale, locale)
        return self.catalogs[locale]


# Global service instance
_locale_service = None


def get_locale_service() -> Optional[LocaleService]:
    """Get the global locale service instance."""
    return _locale_service


def initialize_locale_service(directory: str = LOCALE_DIR, default_locale: str = 'en') -> LocaleService:
    """Load the catalogs once and install the global locale service instance."""
    global _locale_service
    _locale_service = LocaleService.from_directory(directory, default_locale)
    return _locale_service
