"""
Word list file -> one secret word.

File format: plain text, one word per line, no spaces.
  apple
  crane
  ...
Blank lines are skipped. Words are kept exactly as written (no case change).
There is no built-in fallback list: no words, no game.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Union

from .random_client import fetch_index

logger = logging.getLogger(__name__)


class WordSourceError(RuntimeError):
    """The word list cannot supply a word. Fatal for the run."""


class UnreadableWordSource(WordSourceError):
    pass


class EmptyWordSource(WordSourceError):
    pass


def load_words(path: Union[str, Path]) -> List[str]:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            words = [line.strip() for line in f if line.strip()]
    except (OSError, UnicodeDecodeError) as exc:
        raise UnreadableWordSource(
            f"Failed to open word list file {str(path)!r}. Provide a text file "
            "with one word per line and no spaces."
        ) from exc

    if not words:
        raise EmptyWordSource(f"Word list {str(path)!r} is empty.")

    logger.info("Loaded %d words from %s", len(words), path)
    return words


def choose_word(words: Sequence[str], use_remote: bool = False) -> str:
    """Uniform pick from a non-empty list."""
    if not words:
        raise EmptyWordSource("Word list is empty.")
    return words[fetch_index(len(words), use_remote=use_remote)]


def draw_word(path: Union[str, Path], use_remote: bool = False) -> str:
    return choose_word(load_words(path), use_remote=use_remote)
