"""
Pure game logic (no HTTP, no terminal, no storage).
Every guessed letter gets one of three statuses:
- correct: same letter at the same position in the secret word
- present: the letter is in the word at another position that no other
  guessed letter has already claimed
- absent: no unclaimed copy of the letter is left in the word

A letter that appears k times in the word can be claimed at most k times,
no matter how often it appears in the guess.
"""

from typing import List

from .types import LetterStatus, ScoreResult, Word


class LengthMismatch(ValueError):
    """Guess length differs from the secret word length."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Invalid guess length. The word should be {expected} characters long."
        )
        self.expected = expected
        self.actual = actual


def score_guess(word: Word, guess: str) -> ScoreResult:
    """
    Example:
      word  = "APPLE"
      guess = "PLEAS"
      P -> present (claims the P at index 1)
      L -> present, E -> present, A -> present
      S -> absent
      Returns ["present", "present", "present", "present", "absent"]
    """

    # 0. Validate lengths match
    n = len(word)
    if len(guess) != n:
        raise LengthMismatch(expected=n, actual=len(guess))

    result: List[LetterStatus] = ["absent"] * n
    word_consumed = [False] * n
    guess_resolved = [False] * n

    # 1. Exact matches first, so a later green is never stolen by a yellow
    i = 0
    while i < n:
        if guess[i] == word[i]:
            word_consumed[i] = True
            guess_resolved[i] = True
            result[i] = "correct"
        i += 1

    # 2. Misplaced letters: claim the first unconsumed copy in the word
    i = 0
    while i < n:
        if not guess_resolved[i]:
            j = 0
            while j < n:
                if not word_consumed[j] and word[j] == guess[i]:
                    word_consumed[j] = True
                    result[i] = "present"
                    break
                j += 1
        i += 1

    return result


def is_win(result: ScoreResult) -> bool:
    """
    Win = every position scored correct.
    An empty result never wins.
    """
    if len(result) == 0:
        return False

    for status in result:
        if status != "correct":
            return False
    return True
