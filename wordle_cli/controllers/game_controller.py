"""
Game Controller

Drives one terminal game: renders the board, collects guesses from the input
stream and reports the result.
"""

import sys
from typing import Optional, TextIO

from ..exceptions import GuessError, InputReadError
from ..models.game import GameStatus, LetterStatus
from ..services.game_service import WordleGame
from ..services.locale_service import LocaleBundle
from ..utils.game_logger import game_logger
from ..views.renderer import Renderer


class GameController:
    """
    Display → ask → check loop around a ``WordleGame``.

    Rejected input is reported and re-prompted without touching the game.
    """

    def __init__(self,
                 game: WordleGame,
                 bundle: LocaleBundle,
                 renderer: Optional[Renderer] = None,
                 input_stream: Optional[TextIO] = None,
                 output_stream: Optional[TextIO] = None,
                 max_read_failures: int = 3):
        self.game = game
        self.bundle = bundle
        self.renderer = renderer or Renderer()
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout
        self.max_read_failures = max_read_failures

    def _print(self, text: str = '') -> None:
        print(text, file=self.output_stream)
        self.output_stream.flush()

    def _message(self, key: str, **args) -> str:
        return self.bundle.format(key, **args)

    def display_guesses(self) -> None:
        for guess_number, evaluations in enumerate(self.game.guess_results, start=1):
            self._print(f"{guess_number}: {self.renderer.render_guess(evaluations)}")

    def display_alphabet(self) -> None:
        statuses = self.game.alphabet_status(self.bundle.alphabet)
        self._print(f"{self._message('alphabet-status')} {self.renderer.render_alphabet(statuses)}")

        letters = self.game.absent_letters()
        if letters:
            styled = ' '.join(self.renderer.highlight(letter) for letter in letters)
            self._print(f"{self._message('letters-not-in-word')} {styled}")

    def _read_line(self) -> str:
        """
        Reads one raw line, retrying failed reads.

        Raises:
            InputReadError: After ``max_read_failures`` consecutive failures
        """
        failures = 0
        while True:
            try:
                line = self.input_stream.readline()
                if line:
                    return line
                reason = 'end of input'
            except (OSError, UnicodeDecodeError) as e:
                reason = str(e)

            failures += 1
            game_logger.log_rejected_guess('', 'read_error', error=reason, failures=failures)
            self._print(self.renderer.error(self._message('read-error', error=reason)))
            if failures >= self.max_read_failures:
                raise InputReadError(failures, reason)

    def ask_for_guess(self) -> str:
        """
        Prompts until the player enters an acceptable guess and records it.

        Returns:
            str: The recorded guess
        """
        self._print(self.renderer.info(self._message('enter-guess', word_length=self.game.word_length)))
        self.display_alphabet()

        while True:
            raw = self._read_line()
            candidate = self.game.normalize(raw)
            try:
                guess = self.game.validate_and_record(candidate)
            except GuessError as e:
                game_logger.log_rejected_guess(raw.rstrip('\n'), e.message_key, candidate=candidate)
                self._print(self.renderer.error(self._message(
                    e.message_key, guess=candidate, word_length=self.game.word_length
                )))
                continue

            game_logger.log_guess(guess, self.game.tries, remaining=self.game.remaining_tries)
            return guess

    def is_game_over(self, guess: str) -> bool:
        """Reports a win or a loss; returns whether the game ended."""
        n_tries = self.game.tries
        if not self.game.is_terminal(guess):
            return False

        word = self.game.word
        if self.game.status is GameStatus.WON:
            game_logger.log_game_event('game_won', word=word, tries=n_tries)
            self._print(self.renderer.success(self._message(
                'win', word=self.renderer.style(word, LetterStatus.EXACT), n_tries=n_tries
            )))
        else:
            game_logger.log_game_event('game_lost', word=word, tries=n_tries)
            self.display_guesses()
            self._print(self.renderer.failure(self._message('loss', word=self.renderer.highlight(word))))
        return True

    def run(self) -> GameStatus:
        """Plays the game to completion."""
        game_logger.log_game_event('game_started', locale=self.bundle.locale,
                                   dictionary_size=len(self.game.dictionary))
        self._print(self._message('welcome', word_length=self.game.word_length,
                                  max_tries=self.game.max_tries))
        while True:
            self.display_guesses()
            guess = self.ask_for_guess()
            if self.is_game_over(guess):
                return self.game.status
            self._print(self._message('tries-left', n_tries=self.game.remaining_tries))
