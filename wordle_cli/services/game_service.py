"""
Game Service

Contains the core game logic: target selection, guess validation, scoring,
letter classification and the win/loss state machine.
"""

import random
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from ..config.game_settings import MAX_TRIES, WORD_LENGTH
from ..exceptions import EmptyDictionaryError, GameOverError, NotInDictionaryError, WrongLengthError
from ..models.game import GameState, GameStatus, LetterStatus
from ..utils.helpers import sanitize_word
from .dictionary_service import choose_random, parse_word_list


class WordleGame:
    """
    One game of Wordle against a randomly chosen Target Word.

    This class handles:
    - Target selection with an injectable randomness source
    - Guess normalization and validation against the dictionary
    - Letter evaluation and present/absent bookkeeping
    - Win and loss detection

    The dictionary is normalized on construction the same way word list
    files are: entries are sanitized to uppercase letters, entries of the
    wrong length are dropped and duplicates removed. The caller's sequence
    is left untouched.

    Callers must stop submitting guesses once ``is_terminal()`` is true;
    ``validate_and_record`` raises ``GameOverError`` otherwise.
    """

    def __init__(self,
                 dictionary: Sequence[str],
                 rng: Optional[random.Random] = None,
                 max_tries: int = MAX_TRIES,
                 word_length: int = WORD_LENGTH):
        words = parse_word_list(dictionary, word_length)
        if not words:
            raise EmptyDictionaryError()

        self.dictionary = words
        self._lookup = frozenset(words)
        self.max_tries = max_tries
        self.word_length = word_length

        # Select random word (kept secret until the game is over)
        self.word = choose_random(words, rng)

        self.guesses: List[str] = []
        self._guess_results: List[List[Tuple[str, LetterStatus]]] = []
        self._present: Set[str] = set()
        self._absent: Set[str] = set()

    @staticmethod
    def normalize(raw_input: str) -> str:
        """Strip, uppercase and keep letters only. Idempotent."""
        return sanitize_word(raw_input)

    def validate(self, candidate: str) -> str:
        """
        Checks a normalized candidate without recording it.

        Raises:
            GameOverError: If the game already ended
            WrongLengthError: If the candidate has the wrong number of letters
            NotInDictionaryError: If the candidate is not a dictionary word
        """
        if self.is_terminal():
            raise GameOverError(f"Game is already over ({self.status.value})")

        if len(candidate) != self.word_length:
            raise WrongLengthError(candidate, self.word_length)

        if candidate not in self._lookup:
            raise NotInDictionaryError(candidate)

        return candidate

    def validate_and_record(self, candidate: str) -> str:
        """
        Validates a candidate and, if accepted, appends it to the history.

        History and letter classification are only touched on success.

        Returns:
            str: The recorded guess
        """
        guess = self.validate(candidate)

        evaluations = self.score_guess(guess)
        self.guesses.append(guess)
        self._guess_results.append(evaluations)
        self._update_letter_status(evaluations)

        return guess

    def score_guess(self, guess: str) -> List[Tuple[str, LetterStatus]]:
        """
        Evaluates each position of ``guess`` against the target.

        A letter that is not at its exact position is MISPLACED whenever it
        occurs anywhere in the target. Occurrences are not consumed, so a
        repeated letter can be MISPLACED more times than the target holds it.
        """
        result: List[Tuple[str, LetterStatus]] = []
        for target_letter, letter in zip(self.word, guess):
            if letter == target_letter:
                result.append((letter, LetterStatus.EXACT))
            elif letter in self.word:
                result.append((letter, LetterStatus.MISPLACED))
            else:
                result.append((letter, LetterStatus.ABSENT))
        return result

    def _update_letter_status(self, evaluations: Iterable[Tuple[str, LetterStatus]]) -> None:
        """
        Folds one evaluated guess into the present/absent sets.

        Present is a union over every guess and always wins over absent.
        """
        for letter, status in evaluations:
            if status in (LetterStatus.EXACT, LetterStatus.MISPLACED):
                self._present.add(letter)
            else:
                self._absent.add(letter)
        self._absent -= self._present

    @property
    def present_letters(self) -> Set[str]:
        return set(self._present)

    def absent_letters(self) -> List[str]:
        """Letters confirmed not to be in the target, sorted."""
        return sorted(self._absent - self._present)

    def alphabet_status(self, alphabet: Iterable[str]) -> List[Tuple[str, LetterStatus]]:
        """
        Status of each letter of ``alphabet`` in the given order.

        Returns PRESENT, ABSENT or UNSEEN; present takes priority.
        """
        statuses = []
        for letter in alphabet:
            key = letter.upper()
            if key in self._present:
                statuses.append((letter, LetterStatus.PRESENT))
            elif key in self._absent:
                statuses.append((letter, LetterStatus.ABSENT))
            else:
                statuses.append((letter, LetterStatus.UNSEEN))
        return statuses

    @property
    def guess_results(self) -> List[List[Tuple[str, LetterStatus]]]:
        return [list(row) for row in self._guess_results]

    @property
    def tries(self) -> int:
        return len(self.guesses)

    @property
    def remaining_tries(self) -> int:
        return max(self.max_tries - self.tries, 0)

    def is_terminal(self, last_guess: Optional[str] = None) -> bool:
        """
        Whether the game has ended. Won is checked before Lost.

        Args:
            last_guess: Guess to test for a win; defaults to the latest
                recorded guess
        """
        if last_guess is None and self.guesses:
            last_guess = self.guesses[-1]

        if last_guess is not None and last_guess == self.word and last_guess in self.guesses:
            return True
        return self.tries >= self.max_tries

    @property
    def status(self) -> GameStatus:
        if self.word in self.guesses:
            return GameStatus.WON
        if self.tries >= self.max_tries:
            return GameStatus.LOST
        return GameStatus.IN_PROGRESS

    def get_game_state(self) -> GameState:
        """
        Returns a snapshot of the game (the answer only once it is over).
        """
        status = self.status
        return GameState(
            current_round=self.tries,
            max_tries=self.max_tries,
            status=status,
            guesses=self.guesses.copy(),
            guess_results=self.guess_results,
            answer=self.word if status.is_terminal else None
        )
