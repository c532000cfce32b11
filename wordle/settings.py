"""
Single place to:
- Read the game configuration from env (a local .env is loaded first)
- Hold the process-wide "maximum attempts" setting
- Validate changes to that setting

Games copy max_attempts when they are created, so changing it never
affects a game that is already running.
"""

import logging
import os
from typing import Optional, Union

from dotenv import load_dotenv

from .types import DEFAULT_MAX_ATTEMPTS

logger = logging.getLogger(__name__)

# dev convenience; a real shell or container can inject the same vars
load_dotenv()

DEFAULT_WORDLIST = "wordlist.txt"
DEFAULT_LOG_LEVEL = "WARNING"


class InvalidConfiguration(ValueError):
    """Rejected setting value; the previous value stays in effect."""


def parse_log_level(raw: str) -> str:
    """Upper-cased standard level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""
    name = str(raw).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise InvalidConfiguration(
            f"Unknown log level {raw!r}. Use DEBUG, INFO, WARNING, ERROR or CRITICAL."
        )
    return name


def parse_max_attempts(raw: Union[int, str]) -> int:
    """
    Accepts an int or a numeric string and returns it as a positive int.
    Booleans, floats, blanks and non-positive numbers are rejected.
    """
    if isinstance(raw, bool):
        raise InvalidConfiguration("Maximum attempts must be a whole number.")

    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            raise InvalidConfiguration(
                f"Maximum attempts must be a whole number, got {raw!r}."
            ) from None

    if value <= 0:
        raise InvalidConfiguration("Maximum attempts must be greater than zero.")
    return value


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(
        self,
        wordlist_path: str = DEFAULT_WORDLIST,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        use_random_org: bool = False,
        log_level: str = DEFAULT_LOG_LEVEL,
    ) -> None:
        self.wordlist_path = wordlist_path
        self.max_attempts = parse_max_attempts(max_attempts)
        self.use_random_org = use_random_org
        self.log_level = parse_log_level(log_level)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            wordlist_path=os.getenv("WORDLE_WORDLIST", DEFAULT_WORDLIST),
            max_attempts=parse_max_attempts(
                os.getenv("WORDLE_MAX_ATTEMPTS", str(DEFAULT_MAX_ATTEMPTS))
            ),
            use_random_org=_env_flag("WORDLE_RANDOM_ORG"),
            log_level=parse_log_level(os.getenv("WORDLE_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        )

    def set_max_attempts(self, raw: Union[int, str]) -> int:
        try:
            value = parse_max_attempts(raw)
        except InvalidConfiguration:
            logger.warning(
                "Rejected max attempts %r; keeping %d", raw, self.max_attempts
            )
            raise
        self.max_attempts = value
        logger.info("Maximum attempts set to %d", value)
        return value


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Process-wide settings, read from env on first use.
    Raises InvalidConfiguration for a bad WORDLE_* value; callers decide
    whether that ends the process.
    """
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
