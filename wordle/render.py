"""
Console presentation of scored guesses. The core only produces statuses;
this module turns them into colored letters.
"""

from typing import Iterable

from colorama import Fore, Style

from .store import GuessEntry
from .types import LetterStatus, ScoreResult

STATUS_COLORS = {
    "correct": Fore.GREEN,
    "present": Fore.YELLOW,
    "absent": Fore.RED,
}


def color_letter(letter: str, status: LetterStatus) -> str:
    return f"{STATUS_COLORS[status]}{letter}{Style.RESET_ALL}"


def render_guess(guess: str, result: ScoreResult) -> str:
    if len(guess) != len(result):
        raise ValueError("Guess and result must have the same length.")
    return "".join(color_letter(letter, status) for letter, status in zip(guess, result))


def render_history(history: Iterable[GuessEntry]) -> str:
    return "\n".join(render_guess(entry.guess, entry.result) for entry in history)
