"""
entropy.py

Frequency-weighted entropy and goodness scores for candidate guesses.

For a candidate c and a pool of possible answers with weights w, the pool is
split into buckets by the feedback c would receive against each answer.
The entropy of that split is the expected information, in bits, that playing
c reveals. Goodness multiplies it by c's own probability of being the answer,
so plausible words that also discriminate well score highest.
"""

import numpy as np
from tqdm import tqdm

from wordle_solver.patterns import PATTERN_COUNT, feedback_codes


def entropy_from_counts(counts):
    """Compute Shannon entropy from bucket counts or weights."""
    total = counts.sum()
    probs = counts[counts > 0] / total
    # 0.0 rather than -0.0 when everything falls into one bucket
    return max(0.0, float(-np.sum(probs * np.log2(probs))))


def pattern_weights(guess_row, answer_rows, weights, n_patterns=PATTERN_COUNT):
    """Total weight of the answers that fall into each feedback bucket."""
    codes = feedback_codes(guess_row, answer_rows)
    return np.bincount(codes, weights=weights, minlength=n_patterns)


def goodness(frequency, total, entropy):
    """Prior probability of the word times the entropy its feedback yields."""
    return (frequency / total) * entropy


def score_pool(letters, weights, n_patterns=PATTERN_COUNT, progress=False):
    """
    Score every word of a pool against the pool itself.

    letters: shape (R, 5) uint8 rows of the pool
    weights: shape (R,) prior weights, summing to a positive total

    Returns (goodness, entropy) arrays of shape (R,). This is O(R^2): each
    row is compared against the whole pool.
    """
    weights = np.asarray(weights, dtype=np.float64)
    total = weights.sum()
    entropies = np.empty(len(letters), dtype=np.float64)

    rows = tqdm(range(len(letters)), desc="Scoring", disable=not progress)
    for i in rows:
        buckets = pattern_weights(letters[i], letters, weights, n_patterns)
        entropies[i] = entropy_from_counts(buckets)

    return goodness(weights, total, entropies), entropies
