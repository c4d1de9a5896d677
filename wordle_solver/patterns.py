"""
patterns.py

Wordle feedback patterns.

A pattern is a 5-tuple of Correctness values, one per letter of the guess.
Patterns are also encoded as integers 0..242 in base-3, first position most
significant:

    0 = wrong     (gray)
    1 = misplaced (yellow)
    2 = correct   (green)

The integer form lets a whole pool of answers be bucketed with np.bincount,
and all_patterns() is ordered so that all_patterns()[code] decodes code.
"""

from enum import IntEnum
from functools import lru_cache
from itertools import product

import numpy as np


WORD_LENGTH = 5
PATTERN_COUNT = 3**WORD_LENGTH


class Correctness(IntEnum):
    WRONG = 0
    MISPLACED = 1
    CORRECT = 2


_SYMBOLS = {
    Correctness.CORRECT: "G",
    Correctness.MISPLACED: "Y",
    Correctness.WRONG: "-",
}
_FROM_SYMBOL = {symbol: value for value, symbol in _SYMBOLS.items()}


def validate_word(word) -> str:
    """Return word unchanged if it is 5 lowercase ASCII letters, else raise."""
    if (
        not isinstance(word, str)
        or len(word) != WORD_LENGTH
        or not word.isascii()
        or not word.isalpha()
        or not word.islower()
    ):
        raise ValueError(f"not a {WORD_LENGTH}-letter lowercase word: {word!r}")
    return word


def compute(answer: str, guess: str) -> tuple:
    """
    Feedback for playing guess when the hidden word is answer.

    Duplicate letters follow the standard Wordle rules:

    1. First mark every exact positional match as correct. Each one uses up
       that slot of the answer.

    2. Then, left to right, a remaining guess letter is misplaced only if an
       unused slot of the answer still holds that letter; that slot is used
       up. Otherwise it is wrong.

    compute("ababa", "aabbb") -> (C, M, M, C, W): the last "b" finds no
    unused "b" left in the answer.
    """
    validate_word(answer)
    validate_word(guess)

    result = [Correctness.WRONG] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    for i in range(WORD_LENGTH):
        if guess[i] == answer[i]:
            result[i] = Correctness.CORRECT
            used[i] = True

    for i in range(WORD_LENGTH):
        if result[i] == Correctness.CORRECT:
            continue
        for j in range(WORD_LENGTH):
            if not used[j] and answer[j] == guess[i]:
                used[j] = True
                result[i] = Correctness.MISPLACED
                break

    return tuple(result)


def encode_pattern(pattern) -> int:
    """Encode a pattern as its base-3 integer code."""
    if len(pattern) != WORD_LENGTH:
        raise ValueError(f"pattern must have {WORD_LENGTH} entries: {pattern!r}")
    code = 0
    for value in pattern:
        code = code * 3 + Correctness(value)
    return code


def decode_pattern(code: int) -> tuple:
    if not 0 <= code < PATTERN_COUNT:
        raise ValueError(f"pattern code out of range: {code}")
    return all_patterns()[code]


def parse_pattern(text: str) -> tuple:
    """Parse a display string such as "-GY--" (G correct, Y misplaced, - wrong)."""
    if len(text) != WORD_LENGTH:
        raise ValueError(f"pattern must have {WORD_LENGTH} symbols: {text!r}")
    try:
        return tuple(_FROM_SYMBOL[symbol] for symbol in text.upper())
    except KeyError as exc:
        raise ValueError(f"unknown pattern symbol in {text!r}: {exc.args[0]}") from exc


def format_pattern(pattern) -> str:
    return "".join(_SYMBOLS[Correctness(value)] for value in pattern)


@lru_cache(maxsize=None)
def all_patterns() -> tuple:
    """
    Every possible feedback pattern, 243 in total.

    Computed once and shared; the tuple is immutable so solvers can hold a
    reference to it freely.
    """
    order = (Correctness.WRONG, Correctness.MISPLACED, Correctness.CORRECT)
    return tuple(product(order, repeat=WORD_LENGTH))


def words_to_array(words) -> np.ndarray:
    """Pack words into a read-only (N, 5) uint8 array of ASCII codes."""
    words = [validate_word(word) for word in words]
    if not words:
        return np.zeros((0, WORD_LENGTH), dtype=np.uint8)
    packed = "".join(words).encode("ascii")
    return np.frombuffer(packed, dtype=np.uint8).reshape(len(words), WORD_LENGTH)


def feedback_codes(guess_row: np.ndarray, answer_rows: np.ndarray) -> np.ndarray:
    """
    Pattern codes for one guess against many answers at once.

    guess_row:   shape (5,) uint8
    answer_rows: shape (N, 5) uint8
    returns:     shape (N,) int64, each value 0..242

    Equivalent to encode_pattern(compute(answer, guess)) for every row. A
    non-green guess letter is misplaced when the answer has more unmatched
    copies of it than earlier non-green positions of the guess already claimed.
    """
    green = answer_rows == guess_row
    unmatched = ~green
    codes = np.zeros(answer_rows.shape[0], dtype=np.int64)

    for i in range(WORD_LENGTH):
        letter = guess_row[i]
        available = np.sum((answer_rows == letter) & unmatched, axis=1)
        claimed = np.sum(unmatched[:, :i] & (guess_row[:i] == letter), axis=1)
        misplaced = unmatched[:, i] & (available > claimed)
        codes = codes * 3 + np.where(green[:, i], 2, misplaced.astype(np.int64))

    return codes
