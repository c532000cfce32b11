"""
In-memory store
Holds game sessions in memory.

A Game is one play-through: the secret word, the attempt budget captured when
it was created, and the history of scored guesses. It does no I/O and picks
no words itself; callers hand it a secret and feed it guesses.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from uuid import uuid4
from time import time
from threading import RLock

from .types import DEFAULT_MAX_ATTEMPTS, GameStatus, ScoreResult, Word
from .engine import score_guess, is_win

logger = logging.getLogger(__name__)


@dataclass
class GuessEntry:
    guess: str
    result: ScoreResult
    timestamp: float


@dataclass
class Game:
    secret: Word
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    id: str = field(default_factory=lambda: str(uuid4()))
    attempts_used: int = 0
    status: GameStatus = "in_progress"
    history: List[GuessEntry] = field(default_factory=list)
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)

    def __post_init__(self) -> None:
        if len(self.secret) == 0:
            raise ValueError("Secret word must not be empty.")
        if self.max_attempts <= 0:
            raise ValueError("max_attempts must be a positive integer.")

    @property
    def word_length(self) -> int:
        return len(self.secret)

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.attempts_used

    @property
    def finished(self) -> bool:
        return self.status != "in_progress"

    def guess(self, attempt: str) -> Optional[GuessEntry]:
        """
        Score one guess and advance the session.

        Returns the new history entry, or None when the game already ended
        (finished games ignore extra guesses). A guess of the wrong length
        raises LengthMismatch before anything changes, so it does not cost
        an attempt.
        """
        if self.finished:
            return None

        result = score_guess(self.secret, attempt)

        entry = GuessEntry(guess=attempt, result=result, timestamp=time())
        self.history.append(entry)

        if is_win(result):
            self.status = "won"
        else:
            self.attempts_used += 1
            if self.attempts_used >= self.max_attempts:
                self.status = "lost"

        self.updated_at = time()

        if self.finished:
            logger.info(
                "Game %s %s after %d guess(es)", self.id, self.status, len(self.history)
            )
        return entry


class GameStore:
    def __init__(self) -> None:
        self._games: Dict[str, Game] = {}
        self._lock = RLock()

    def create(self, secret: Word, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> Game:
        game = Game(secret=secret, max_attempts=max_attempts)
        with self._lock:
            self._games[game.id] = game
        logger.info(
            "Created game %s (length=%d, max_attempts=%d)",
            game.id, game.word_length, max_attempts,
        )
        return game

    def get(self, game_id: str) -> Optional[Game]:
        with self._lock:
            return self._games.get(game_id)

    def guess(self, game_id: str, attempt: str) -> Tuple[Optional[Game], Optional[GuessEntry]]:
        """
        Returns (game, entry made by this call).
        (None, None) for an unknown id; (game, None) when the game had already ended.
        """
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return (None, None)

            # LengthMismatch propagates
            entry = game.guess(attempt)
            return (game, entry)

    def discard(self, game_id: str) -> bool:
        with self._lock:
            return self._games.pop(game_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)
