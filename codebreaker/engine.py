"""
Pure game logic (no HTTP, no storage).
We compute two feedback numbers for each guess:
- exact_matches: how many indices are exactly correct (right digit, right place)
- partial_matches: right digit, wrong place, counted only among the positions
  that were not already exact matches

Duplicates are allowed in both the secret and the guess. Every secret digit
can satisfy at most one guess digit, so nothing is double-counted.
"""

import re
from typing import Any, NamedTuple, Sequence

from .errors import InvalidGuessError, InvalidInputError
from .types import Code, CODE_LENGTH, DIGIT_MIN, DIGIT_MAX

_GUESS_PATTERN = re.compile(r"[0-9]{%d}" % CODE_LENGTH)


class ScoreResult(NamedTuple):
    exact_matches: int
    partial_matches: int


def _is_digit(value: Any) -> bool:
    # bool is a subclass of int; True/False are not digits
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and DIGIT_MIN <= value <= DIGIT_MAX
    )


def is_valid_code(code: Any) -> bool:
    if isinstance(code, (str, bytes)) or not isinstance(code, Sequence):
        return False
    return len(code) == CODE_LENGTH and all(_is_digit(d) for d in code)


def score_guess(secret: Code, guess: Code) -> ScoreResult:
    """
    Example:
      secret = [1, 1, 2, 3]
      guess  = [1, 1, 1, 4]
      exact_matches   = 2  (the two leading 1s line up)
      partial_matches = 0  (no 1 left in the secret for the third guessed 1)
    """
    if not is_valid_code(secret) or not is_valid_code(guess):
        raise InvalidInputError()

    # 1. Exact pass: matched positions are consumed and skip the next pass
    exact_matches = 0
    remaining_secret = [0] * (DIGIT_MAX + 1)  # histogram of unmatched secret digits
    remaining_guess = []
    for s, g in zip(secret, guess):
        if s == g:
            exact_matches += 1
        else:
            remaining_secret[s] += 1
            remaining_guess.append(g)

    # 2. Partial pass: each hit uses up one secret digit
    partial_matches = 0
    for g in remaining_guess:
        if remaining_secret[g] > 0:
            remaining_secret[g] -= 1
            partial_matches += 1

    return ScoreResult(exact_matches, partial_matches)


def is_win(secret: Code, guess: Code) -> bool:
    """Win = same length and every position matches."""
    if len(secret) != len(guess):
        return False
    return all(s == g for s, g in zip(secret, guess))


def parse_guess(raw: Any) -> Code:
    """
    Turn player input into a Code.
    Accepts "0123" or [0, 1, 2, 3]; leading zeros are kept.
    Anything else raises InvalidGuessError.
    """
    if isinstance(raw, str):
        if not _GUESS_PATTERN.fullmatch(raw):
            raise InvalidGuessError()
        return [int(ch) for ch in raw]

    if not is_valid_code(raw):
        raise InvalidGuessError()
    return list(raw)


def format_code(code: Code) -> str:
    return "".join(str(d) for d in code)
