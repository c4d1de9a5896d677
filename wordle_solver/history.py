"""
history.py

Played guesses and the consistency check against them.

A candidate is still possible after a guess exactly when playing that guess
against the candidate would have produced the same feedback.
"""

from dataclasses import dataclass

from wordle_solver.patterns import (
    Correctness,
    compute,
    encode_pattern,
    format_pattern,
    parse_pattern,
    validate_word,
)


@dataclass(frozen=True)
class Guess:
    """A word that was played and the feedback it received."""

    word: str
    pattern: tuple

    def __post_init__(self):
        validate_word(self.word)
        # Normalises plain ints and validates the length in one go.
        object.__setattr__(
            self, "pattern", tuple(Correctness(value) for value in self.pattern)
        )
        encode_pattern(self.pattern)

    @classmethod
    def parse(cls, text: str) -> "Guess":
        """Build a Guess from "word:pattern", e.g. "tares:-GY--"."""
        word, sep, pattern = text.partition(":")
        if not sep:
            raise ValueError(f"expected WORD:PATTERN, got {text!r}")
        return cls(word.strip().lower(), parse_pattern(pattern.strip()))

    @property
    def code(self) -> int:
        return encode_pattern(self.pattern)

    def __str__(self):
        return f"{self.word}:{format_pattern(self.pattern)}"


def matches(past_guess: Guess, candidate: str) -> bool:
    """True if candidate could have been the answer that produced past_guess."""
    return compute(candidate, past_guess.word) == past_guess.pattern


def consistent_with(history, candidate: str) -> bool:
    return all(matches(past_guess, candidate) for past_guess in history)
