import random

import pytest

from wordle_solver.history import Guess, consistent_with, matches
from wordle_solver.patterns import Correctness, all_patterns, compute, parse_pattern

C = Correctness.CORRECT
M = Correctness.MISPLACED
W = Correctness.WRONG

WORDS = [
    "baaaa", "aaccc", "ababa", "aabbb", "level", "belle", "lemon", "scoop",
    "cools", "crane", "raise", "stare", "trace", "eerie", "geese", "speed",
]


def test_matches_duplicate_letter_scenario():
    past = Guess("baaaa", (W, C, M, W, W))
    assert matches(past, "aaccc")
    assert not matches(past, "ababa")


def test_matches_is_recomputation():
    rng = random.Random(1234)
    patterns = all_patterns()
    for _ in range(2000):
        guess = rng.choice(WORDS)
        candidate = rng.choice(WORDS)
        # bias half the samples towards the real pattern so both outcomes occur
        if rng.random() < 0.5:
            pattern = compute(candidate, guess)
        else:
            pattern = rng.choice(patterns)
        expected = compute(candidate, guess) == pattern
        assert matches(Guess(guess, pattern), candidate) == expected


def test_consistent_with_checks_every_guess():
    history = [
        Guess("raise", parse_pattern("YY--G")),
        Guess("stare", parse_pattern("--GYG")),
    ]
    assert consistent_with(history, "crane")
    assert not consistent_with(history, "trace")
    assert consistent_with([], "trace")


def test_guess_normalizes_pattern_values():
    past = Guess("crane", [2, 2, 2, 2, 2])
    assert past.pattern == (C, C, C, C, C)
    assert all(isinstance(value, Correctness) for value in past.pattern)
    assert past.code == 242


@pytest.mark.parametrize("word,pattern", [
    ("cran", (C, C, C, C, C)),
    ("CRANE", (C, C, C, C, C)),
    ("crane", (C, C, C, C)),
    ("crane", (C, C, C, C, 3)),
])
def test_guess_rejects_malformed_input(word, pattern):
    with pytest.raises(ValueError):
        Guess(word, pattern)


def test_guess_is_immutable():
    past = Guess("crane", (C, C, C, C, C))
    with pytest.raises(AttributeError):
        past.word = "raise"


def test_guess_parse_and_str():
    past = Guess.parse("TARES:-gy--")
    assert past.word == "tares"
    assert past.pattern == (W, C, M, W, W)
    assert str(past) == "tares:-GY--"
    assert Guess.parse(str(past)) == past


def test_guess_parse_requires_separator():
    with pytest.raises(ValueError):
        Guess.parse("tares-GY--")
