"""
solver.py

Entropy-driven guess selector.

Each Solver plays one game. It keeps a private pool of the dictionary entries
still consistent with the feedback seen so far and, on every turn after the
opening, plays the candidate with the highest goodness (see entropy.py).
"""

import numpy as np

from wordle_solver.entropy import (
    entropy_from_counts,
    goodness,
    pattern_weights,
    score_pool,
)
from wordle_solver.patterns import (
    all_patterns,
    encode_pattern,
    feedback_codes,
    words_to_array,
)


OPENING_WORD = "tares"


def best_opening(dictionary, patterns=None, progress=False) -> str:
    """
    The word the solver would pick with no feedback at all.

    Scores the full dictionary against itself, so it is expensive for large
    word lists; compute it once and pass it to each Solver as the opening.
    """
    patterns = all_patterns() if patterns is None else patterns
    if len(dictionary) == 0:
        raise ValueError("cannot pick an opening word from an empty dictionary")
    scores, _ = score_pool(
        dictionary.letters,
        _prior_weights(dictionary.frequencies),
        len(patterns),
        progress=progress,
    )
    return dictionary.words[int(np.argmax(scores))]


def _prior_weights(frequencies):
    # All-zero frequencies carry no preference, so weigh the words uniformly.
    if frequencies.sum() == 0:
        return np.ones(len(frequencies), dtype=np.float64)
    return frequencies.astype(np.float64)


class Solver:
    """
    Guesser for a single game.

    dictionary and patterns are shared, read-only values. The candidate pool
    is an index array owned by this instance; it only ever shrinks, so start a
    new Solver for every game.
    """

    def __init__(self, dictionary, opening=OPENING_WORD, patterns=None, progress=False):
        self.dictionary = dictionary
        self.patterns = all_patterns() if patterns is None else patterns
        self.progress = progress
        if opening is None:
            opening = best_opening(dictionary, self.patterns, progress=progress)
        if opening not in dictionary:
            raise ValueError(f"opening word not found in dictionary: {opening}")
        self.opening = opening
        self._pool = np.arange(len(dictionary))
        self._applied = 0

    def __len__(self):
        return len(self._pool)

    @property
    def remaining(self):
        """Current candidate pool as (word, frequency) pairs, dictionary order."""
        words = self.dictionary.words
        freqs = self.dictionary.frequencies
        return [(words[i], int(freqs[i])) for i in self._pool]

    def guess(self, history) -> str:
        """Opening word on the first turn, otherwise the best-scoring candidate."""
        if not history and not self._applied:
            return self.opening

        self._narrow(history)
        scores, _ = self._score()
        # argmax returns the first maximum, so ties keep dictionary order
        return self.dictionary.words[self._pool[int(np.argmax(scores))]]

    def rank(self, limit=None):
        """(word, goodness, entropy) for the current pool, best first."""
        scores, entropies = self._score()
        order = np.argsort(-scores, kind="stable")
        if limit is not None:
            order = order[:limit]
        words = self.dictionary.words
        return [
            (words[self._pool[i]], float(scores[i]), float(entropies[i]))
            for i in order
        ]

    def pattern_distribution(self, word):
        """Non-empty feedback buckets {pattern: weight} for playing word now."""
        buckets = self._buckets(word)
        return {
            self.patterns[int(code)]: float(buckets[code])
            for code in np.flatnonzero(buckets)
        }

    def score(self, word):
        """
        (goodness, entropy) of playing word against the current pool.

        A word outside the pool can still split it, but it cannot be the
        answer, so its goodness is 0.
        """
        _, weights = self._pool_arrays()
        entropy = entropy_from_counts(self._buckets(word))
        if word not in self.dictionary:
            return 0.0, entropy
        position = np.flatnonzero(self._pool == self.dictionary.index(word))
        if len(position) == 0:
            return 0.0, entropy
        return float(goodness(weights[position[0]], weights.sum(), entropy)), entropy

    def observe(self, history):
        """Apply feedback without picking a word; returns the pool size."""
        self._narrow(history)
        return len(self._pool)

    def _narrow(self, history):
        if len(history) < self._applied:
            raise ValueError(
                f"history has {len(history)} guesses but {self._applied} were already "
                "applied; use a new Solver for each game"
            )
        # Guesses before self._applied were filtered on earlier turns. In a
        # normal game only the latest one is new.
        for past_guess in history[self._applied:]:
            guess_row = words_to_array([past_guess.word])[0]
            codes = feedback_codes(guess_row, self.dictionary.letters[self._pool])
            self._pool = self._pool[codes == encode_pattern(past_guess.pattern)]
            if len(self._pool) == 0:
                raise RuntimeError(
                    f"no candidates remain after {past_guess}; "
                    "the feedback history is inconsistent"
                )
        self._applied = len(history)

    def _pool_arrays(self):
        letters = self.dictionary.letters[self._pool]
        weights = _prior_weights(self.dictionary.frequencies[self._pool])
        return letters, weights

    def _buckets(self, word):
        letters, weights = self._pool_arrays()
        row = words_to_array([word])[0]
        return pattern_weights(row, letters, weights, len(self.patterns))

    def _score(self):
        letters, weights = self._pool_arrays()
        return score_pool(letters, weights, len(self.patterns), progress=self.progress)
