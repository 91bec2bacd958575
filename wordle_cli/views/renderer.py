"""
Terminal Renderer

Maps letter statuses to colorama styles. Holds no game state.
"""

from typing import Iterable, Tuple

from colorama import Fore, Style

from ..models.game import LetterStatus

LETTER_STYLES = {
    LetterStatus.EXACT: Fore.LIGHTGREEN_EX + Style.BRIGHT,
    LetterStatus.MISPLACED: Fore.LIGHTYELLOW_EX + Style.BRIGHT,
    LetterStatus.PRESENT: Fore.LIGHTYELLOW_EX + Style.BRIGHT,
    LetterStatus.ABSENT: Fore.RED + Style.BRIGHT,
    LetterStatus.UNSEEN: '',
}


class Renderer:
    def __init__(self, use_color: bool = True):
        self.use_color = use_color

    def _paint(self, text: str, style: str) -> str:
        if not self.use_color or not style:
            return text
        return f"{style}{text}{Style.RESET_ALL}"

    def style(self, text: str, status: LetterStatus) -> str:
        return self._paint(text, LETTER_STYLES.get(status, ''))

    def render_guess(self, evaluations: Iterable[Tuple[str, LetterStatus]]) -> str:
        """One scored guess as a run of colored letters."""
        return ''.join(self.style(letter, status) for letter, status in evaluations)

    def render_alphabet(self, statuses: Iterable[Tuple[str, LetterStatus]]) -> str:
        """Alphabet status view, letters separated by spaces."""
        return ' '.join(self.style(letter, status) for letter, status in statuses)

    def highlight(self, text: str) -> str:
        return self._paint(text, Style.BRIGHT)

    def info(self, text: str) -> str:
        return self._paint(text, Fore.CYAN)

    def error(self, text: str) -> str:
        return self._paint(text, Fore.RED)

    def success(self, text: str) -> str:
        return self._paint(text, Fore.LIGHTGREEN_EX)

    def failure(self, text: str) -> str:
        return self._paint(text, Fore.LIGHTRED_EX)
