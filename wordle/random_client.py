"""
- HTTP call with clear fallback
Pick a random index in [0, upper). When enabled, ask random.org for it. If
anything goes wrong (no internet, timeout, bad response), we fall back to a
local secure random generator so a game can still start.
"""

import logging
import requests
from secrets import randbelow

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"

# random.org rejects ranges above this
RANDOM_ORG_MAX = 1_000_000_000


def fetch_index(upper: int, use_remote: bool = False) -> int:
    if upper <= 0:
        raise ValueError("upper must be a positive integer.")

    if not use_remote or upper == 1 or upper > RANDOM_ORG_MAX:
        return randbelow(upper)

    # Parameters to send to random.org
    params = {
        "num": 1,            # one index
        "min": 0,            # smallest allowed index
        "max": upper - 1,    # largest allowed index
        "col": 1,            # one number per line
        "base": 10,          # normal decimal numbers
        "format": "plain",   # plain text response
        "rnd": "new",        # always generate new numbers
    }

    # keep network quick; if it takes too long, we will just fallback
    timeout_seconds = 3.0

    try:
        response = requests.get(RANDOM_URL, params=params, timeout=timeout_seconds)

        # If the response was not 200 OK, this will raise an error
        response.raise_for_status()

        # The body looks like:
        #   17\n
        lines = [line.strip() for line in response.text.splitlines() if line.strip()]
        if len(lines) != 1:
            raise ValueError(f"random.org returned {len(lines)} values, expected 1.")

        value = int(lines[0])
        if value < 0 or value >= upper:
            raise ValueError(f"random.org number out of range 0..{upper - 1}.")

        return value

    except (requests.RequestException, ValueError) as exc:
        logger.warning("random.org unavailable (%s); using local randomness", exc)
        return randbelow(upper)
