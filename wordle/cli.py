"""
Terminal Wordle

Menu:
1. Start New Game          -> draw a word, play until won or out of attempts
2. Set Maximum Attempts    -> applies to the next game
3. Exit

Run with `wordle` (or `python -m wordle.cli`). The word list comes from
--wordlist or WORDLE_WORDLIST; a missing or empty list ends the program.
"""

import argparse
import logging
import os
import sys
from typing import Callable, List, Optional

import colorama

from .engine import LengthMismatch
from .render import render_guess
from .settings import InvalidConfiguration, Settings, get_settings, parse_max_attempts
from .store import Game
from .word_source import WordSourceError, draw_word

logger = logging.getLogger(__name__)

MENU = (
    "!! Wordle Game !!\n"
    "1. Start New Game\n"
    "2. Set Maximum Attempts\n"
    "3. Exit"
)


def clear_console() -> None:
    os.system("cls" if os.name == "nt" else "clear")


class TerminalShell:
    """
    Menu loop around Game. Input, output and screen clearing are passed in
    so the loop can be driven from tests.
    """

    def __init__(
        self,
        config: Settings,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        clear_fn: Optional[Callable[[], None]] = None,
        draw_fn: Optional[Callable[[], str]] = None,
    ) -> None:
        self.config = config
        self._input = input_fn or input
        self._print = output_fn or print
        self._clear = clear_fn or clear_console
        self._draw = draw_fn or (
            lambda: draw_word(config.wordlist_path, use_remote=config.use_random_org)
        )

    def run(self) -> int:
        """Returns the exit status. WordSourceError propagates to the caller."""
        while True:
            self._clear()
            self._print(MENU)
            try:
                choice = self._input("Enter your choice: ").strip()
            except EOFError:
                return 0

            if choice == "1":
                self._clear()
                try:
                    self.play_game()
                except EOFError:
                    return 0
            elif choice == "2":
                try:
                    self.change_max_attempts()
                except EOFError:
                    return 0
            elif choice == "3":
                self._print("Exiting the game. Goodbye!")
                return 0
            # anything else just redraws the menu

    def play_game(self) -> Game:
        secret = self._draw()
        game = Game(secret=secret, max_attempts=self.config.max_attempts)

        while not game.finished:
            attempt = self._input("Guess the word: ")
            self._print("")

            try:
                entry = game.guess(attempt)
            except LengthMismatch as exc:
                self._print(str(exc))
                continue

            self._print(render_guess(entry.guess, entry.result))

            if game.status == "won":
                self._print("Congratulations! You guessed the word correctly!")
            elif game.status == "lost":
                self._print(
                    f"Sorry, you've used all your attempts. The word was: {game.secret}"
                )
            else:
                self._print(f"You have {game.attempts_left} attempts left.")

        self._input("Press Enter to continue")
        return game

    def change_max_attempts(self) -> None:
        raw = self._input("Enter new maximum attempts: ")
        try:
            value = self.config.set_max_attempts(raw)
        except InvalidConfiguration:
            return
        self._print(f"Maximum attempts updated to {value}.")
        self._input("Press Enter to continue")


def _max_attempts_arg(raw: str) -> int:
    try:
        return parse_max_attempts(raw)
    except InvalidConfiguration as exc:
        raise argparse.ArgumentTypeError(str(exc))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordle", description="Guess the secret word.")
    parser.add_argument(
        "--wordlist",
        default=None,
        help="Word list file, one word per line (default: WORDLE_WORDLIST or wordlist.txt).",
    )
    parser.add_argument(
        "--max-attempts",
        type=_max_attempts_arg,
        default=None,
        help="Maximum attempts per game (default: WORDLE_MAX_ATTEMPTS or 6).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except InvalidConfiguration as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    colorama.just_fix_windows_console()

    if args.wordlist is not None:
        settings.wordlist_path = args.wordlist
    if args.max_attempts is not None:
        settings.max_attempts = args.max_attempts

    shell = TerminalShell(settings)
    try:
        return shell.run()
    except WordSourceError as exc:
        logger.debug("Word source failed", exc_info=True)
        print(exc, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nExiting the game. Goodbye!")
        return 130


if __name__ == "__main__":
    sys.exit(main())
