from colorama import Fore, Style

from wordle_cli.models.game import LetterStatus
from wordle_cli.views.renderer import LETTER_STYLES, Renderer


def test_every_status_has_a_style():
    assert set(LETTER_STYLES) == set(LetterStatus)


def test_colored_letter_is_wrapped_and_reset():
    text = Renderer().style("A", LetterStatus.EXACT)
    assert text.startswith(LETTER_STYLES[LetterStatus.EXACT])
    assert text.endswith(Style.RESET_ALL)
    assert "A" in text


def test_unseen_letters_are_plain():
    assert Renderer().style("Q", LetterStatus.UNSEEN) == "Q"


def test_statuses_use_distinct_colors():
    renderer = Renderer()
    exact = renderer.style("A", LetterStatus.EXACT)
    misplaced = renderer.style("A", LetterStatus.MISPLACED)
    absent = renderer.style("A", LetterStatus.ABSENT)
    assert len({exact, misplaced, absent}) == 3
    assert Fore.RED in absent


def test_without_color_text_is_unchanged():
    renderer = Renderer(use_color=False)
    evaluations = [("T", LetterStatus.ABSENT), ("R", LetterStatus.EXACT), ("A", LetterStatus.MISPLACED)]
    assert renderer.render_guess(evaluations) == "TRA"
    assert renderer.render_alphabet([("A", LetterStatus.PRESENT), ("B", LetterStatus.UNSEEN)]) == "A B"
    assert renderer.error("oops") == "oops"
    assert renderer.info("hint") == "hint"
    assert renderer.highlight("X") == "X"


def test_render_guess_keeps_letter_order():
    renderer = Renderer()
    evaluations = [("C", LetterStatus.EXACT), ("A", LetterStatus.ABSENT)]
    rendered = renderer.render_guess(evaluations)
    assert rendered.index("C") < rendered.index("A")
