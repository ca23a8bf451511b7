"""
Testing pure game logic.
"""

import itertools
import random

import pytest

from codebreaker.engine import format_code, is_win, parse_guess, score_guess
from codebreaker.errors import InvalidGuessError, InvalidInputError


def test_score_guess_no_matches():
    assert score_guess([0, 1, 2, 3], [4, 5, 6, 7]) == (0, 0)


def test_score_guess_reversed_code_is_all_partial():
    result = score_guess([1, 2, 3, 4], [4, 3, 2, 1])
    assert result.exact_matches == 0
    assert result.partial_matches == 4


def test_score_guess_extra_guessed_digit_is_not_double_counted():
    # The third guessed 1 has no 1 left in the secret to match
    result = score_guess([1, 1, 2, 3], [1, 1, 1, 4])
    assert result.exact_matches == 2
    assert result.partial_matches == 0


def test_score_guess_exact_digits_are_not_reused_for_partials():
    result = score_guess([5, 5, 5, 5], [5, 5, 0, 0])
    assert result == (2, 0)


def test_score_guess_with_duplicates_both_sides():
    # exact at positions 0 and 3; the swapped 2/5 in the middle are partials
    assert score_guess([2, 2, 5, 5], [2, 5, 2, 5]) == (2, 2)


def test_score_guess_single_secret_digit_matches_once():
    # one 7 in the secret, three 7s guessed in the wrong places
    assert score_guess([7, 0, 0, 0], [1, 7, 7, 7]) == (0, 1)


def test_score_guess_order_of_remaining_digits_does_not_matter():
    secret = [1, 2, 2, 3]
    assert score_guess(secret, [9, 3, 1, 2]) == score_guess(secret, [2, 1, 3, 9]) == (0, 3)


def test_score_guess_bounds_and_win_condition_hold_on_random_codes():
    rng = random.Random(1234)
    for _ in range(2000):
        secret = [rng.randrange(10) for _ in range(4)]
        guess = [rng.randrange(10) for _ in range(4)]
        exact, partial = score_guess(secret, guess)
        assert 0 <= exact + partial <= 4
        assert (exact == 4) == (secret == guess)


def test_score_guess_is_symmetric_in_total_overlap():
    # exact + partial is the multiset overlap, whichever side is the secret
    for secret, guess in itertools.product([[1, 1, 2, 3], [0, 9, 9, 0]], [[3, 1, 1, 1], [9, 0, 0, 9]]):
        assert sum(score_guess(secret, guess)) == sum(score_guess(guess, secret))


@pytest.mark.parametrize(
    "secret, guess",
    [
        ([1, 2, 3], [1, 2, 3, 4]),
        ([1, 2, 3, 4], [1, 2, 3, 4, 5]),
        ([1, 2, 3, 10], [1, 2, 3, 4]),
        ([1, 2, 3, 4], [-1, 2, 3, 4]),
        ("1234", [1, 2, 3, 4]),
    ],
)
def test_score_guess_rejects_malformed_input(secret, guess):
    with pytest.raises(InvalidInputError):
        score_guess(secret, guess)


def test_is_win_true_and_false():
    assert is_win([1, 2, 3, 4], [1, 2, 3, 4]) is True
    assert is_win([1, 2, 3, 4], [1, 2, 3, 5]) is False
    assert is_win([1, 2, 3, 4], [1, 2, 3]) is False


def test_parse_guess_accepts_string_and_list():
    assert parse_guess("0123") == [0, 1, 2, 3]
    assert parse_guess([9, 0, 0, 9]) == [9, 0, 0, 9]
    assert parse_guess((4, 4, 4, 4)) == [4, 4, 4, 4]


@pytest.mark.parametrize(
    "raw",
    ["12a3", "123", "12345", "", " 1234", "１２３４", [1, 2, 3], [1, 2, 3, 10], [1, 2, 3, True], None, 1234],
)
def test_parse_guess_rejects_bad_input(raw):
    with pytest.raises(InvalidGuessError):
        parse_guess(raw)


def test_format_code_keeps_leading_zeros():
    assert format_code([0, 0, 7, 1]) == "0071"
