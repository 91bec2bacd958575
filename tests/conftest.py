import io

import pytest

from wordle_cli.services.game_service import WordleGame
from wordle_cli.services.locale_service import LocaleService
from wordle_cli.views.renderer import Renderer

WORDS = [
    "CRANE", "TRACE", "APPLE", "GRAPE", "SLATE", "PLANT",
    "BRICK", "CHOMP", "LLAMA", "EERIE", "GEESE", "SPEED",
]


class FixedChoice:
    """Randomness stub that always picks ``word``."""

    def __init__(self, word):
        self.word = word
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        assert self.word in seq
        return self.word


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def make_game(words):
    def _make(target, dictionary=None, **kwargs):
        return WordleGame(dictionary or words, rng=FixedChoice(target), **kwargs)
    return _make


@pytest.fixture(scope="session")
def locale_service():
    return LocaleService.from_directory()


@pytest.fixture
def en_bundle(locale_service):
    return locale_service.resolve_bundle("en")


@pytest.fixture
def plain_renderer():
    return Renderer(use_color=False)


@pytest.fixture
def output():
    return io.StringIO()
