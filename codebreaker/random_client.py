"""
Secret generator.
Draws 4 independent digits (0..9, duplicates allowed).

By default the digits come from Python's secure random. When
CODEBREAKER_RANDOM_SOURCE=random_org we ask random.org instead, and if anything
goes wrong (no internet, timeout, bad response) we fall back to the local
generator so a new game always starts.
"""

import logging
from secrets import randbelow
from typing import Optional

import requests

from . import config
from .types import Code, CODE_LENGTH, DIGIT_MIN, DIGIT_MAX

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"


def local_code(length: int = CODE_LENGTH) -> Code:
    # randbelow(10) gives us a number between 0 and 9
    return [randbelow(DIGIT_MAX + 1) for _ in range(length)]


def fetch_remote_code(length: int = CODE_LENGTH, timeout: Optional[float] = None) -> Code:
    """Ask random.org for `length` digits. Raises on any network or format problem."""
    params = {
        "num": length,       # how many numbers we want
        "min": DIGIT_MIN,    # smallest allowed number
        "max": DIGIT_MAX,    # largest allowed number
        "col": 1,            # one number per line
        "base": 10,          # normal decimal numbers
        "format": "plain",   # plain text response
        "rnd": "new",        # always generate new numbers
    }

    response = requests.get(
        RANDOM_URL,
        params=params,
        timeout=config.RANDOM_TIMEOUT if timeout is None else timeout,
    )
    response.raise_for_status()

    # The body looks like:
    #   0\n3\n9\n2\n
    digits = [int(line) for line in response.text.splitlines() if line.strip()]

    if len(digits) != length:
        raise ValueError(f"random.org returned {len(digits)} values, expected {length}.")
    for digit in digits:
        if digit < DIGIT_MIN or digit > DIGIT_MAX:
            raise ValueError(f"random.org number out of range {DIGIT_MIN}..{DIGIT_MAX}.")
    return digits


def generate_secret(length: int = CODE_LENGTH, source: Optional[str] = None) -> Code:
    source = source or config.RANDOM_SOURCE
    if source != "random_org":
        return local_code(length)

    try:
        return fetch_remote_code(length)
    except (requests.RequestException, ValueError) as exc:
        logger.warning("random.org unavailable (%s); using local generator", exc)
        return local_code(length)
