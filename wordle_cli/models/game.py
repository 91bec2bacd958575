"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status for guess tiles and the alphabet view."""
    EXACT = "EXACT"
    MISPLACED = "MISPLACED"
    ABSENT = "ABSENT"
    UNSEEN = "UNSEEN"
    # Alphabet view only: the letter occurs somewhere in the target
    PRESENT = "PRESENT"


class GameStatus(Enum):
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass
class GameState:
    """Read-only snapshot of a game."""
    current_round: int
    max_tries: int
    status: GameStatus
    guesses: List[str]
    guess_results: List[List[Tuple[str, LetterStatus]]]
    answer: Optional[str] = None  # Only included when game is over

    @property
    def game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON
