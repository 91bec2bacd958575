"""
Wordle Terminal Game Package

A terminal word-guessing game with localized messages. The package is split
into configuration, models, services (engine, dictionary, locales), views and
the controller that runs the game loop.
"""

import random

from .config import Config
from .controllers.game_controller import GameController
from .services.dictionary_service import DictionaryService
from .services.game_service import WordleGame
from .services.locale_service import get_locale_service, initialize_locale_service
from .views.renderer import Renderer

__version__ = '1.0.0'


def create_game(config_class=Config, rng=None, input_stream=None, output_stream=None):
    """
    Factory for a ready-to-run game.

    Args:
        config_class: Configuration class to use
        rng: Randomness source for the Target Word; seeded from
            ``config_class.RANDOM_SEED`` when omitted
        input_stream: Where guesses are read from (stdin by default)
        output_stream: Where the board is written (stdout by default)

    Returns:
        GameController wired to a fresh WordleGame

    Raises:
        LocaleError, DictionaryLoadError, EmptyDictionaryError: fatal setup errors
    """
    locale_service = get_locale_service()
    if locale_service is None or locale_service.default_locale != config_class.DEFAULT_LOCALE:
        locale_service = initialize_locale_service(default_locale=config_class.DEFAULT_LOCALE)
    bundle = locale_service.resolve_bundle(config_class.LOCALE)

    dictionary_service = DictionaryService()
    words = dictionary_service.load_words(bundle.locale)

    if rng is None:
        rng = random.Random(config_class.RANDOM_SEED)
    game = WordleGame(words, rng=rng)

    return GameController(
        game,
        bundle,
        renderer=Renderer(use_color=config_class.USE_COLOR),
        input_stream=input_stream,
        output_stream=output_stream,
        max_read_failures=config_class.MAX_READ_FAILURES
    )
