"""
Labels for clarity.
"""

from typing import List, Literal

Word = str  # secret word, fixed length for a game
LetterStatus = Literal["correct", "present", "absent"]
ScoreResult = List[LetterStatus]  # one status per guessed letter
GameStatus = Literal["in_progress", "won", "lost"]

DEFAULT_MAX_ATTEMPTS = 6
