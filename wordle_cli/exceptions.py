"""
Exception Hierarchy

FatalError subclasses stop the program before or during a game.
GuessError subclasses reject a single input line; the caller re-prompts.
"""


class WordleError(Exception):
    """Base class for every error raised by the game."""


class FatalError(WordleError):
    """The game cannot be constructed or continued."""


class EmptyDictionaryError(FatalError):
    def __init__(self, source: str = 'dictionary'):
        self.source = source
        super().__init__(f"No words available in {source}")


class DictionaryLoadError(FatalError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load word list {path}: {reason}")


class LocaleError(FatalError):
    """No locale resolved, or a message catalog could not be parsed."""


class InputReadError(FatalError):
    def __init__(self, failures: int, reason: str = 'end of input'):
        self.failures = failures
        self.reason = reason
        super().__init__(f"Giving up after {failures} failed reads ({reason})")


class GuessError(WordleError):
    """A candidate word was rejected; game state is unchanged."""

    message_key = 'invalid-guess'

    def __init__(self, guess: str, message: str):
        self.guess = guess
        super().__init__(message)


class WrongLengthError(GuessError):
    message_key = 'wrong-length'

    def __init__(self, guess: str, expected: int):
        self.expected = expected
        super().__init__(guess, f"Guess '{guess}' must be {expected} letters, got {len(guess)}")


class NotInDictionaryError(GuessError):
    message_key = 'not-in-dictionary'

    def __init__(self, guess: str):
        super().__init__(guess, f"'{guess}' is not in the dictionary")


class GameOverError(WordleError):
    """A guess was submitted after the game reached a terminal state."""
