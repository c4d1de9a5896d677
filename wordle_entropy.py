"""
wordle_entropy.py

Goodness and entropy reports for the entropy solver.

Modes:
(default): top words by goodness for the current candidate pool.
-word WORD: score one specific word and, with -verbose, list its feedback
  buckets.

Optional:
-history WORD:PATTERN ...: feedback already received, e.g. tares:-Y--G.
  Pattern symbols: G correct, Y misplaced, - wrong. The report and the
  suggested next guess then cover the words still possible.
-top N: number of words to list (default: 20).
-verbose: with -word, list every feedback bucket and its weight.
"""

import argparse

from wordle_solver.history import Guess
from wordle_solver.patterns import format_pattern
from wordle_solver.solver import Solver
from wordle_solver.words import DICTIONARY_PATH, load_dictionary


TOP_WORDS = 20


def build_solver(dictionary, history):
    # The opening word is never played here; every report scores the pool.
    solver = Solver(dictionary, opening=dictionary.words[0], progress=True)
    solver.observe(history)
    return solver


def run_top_words(solver, history, top):
    print(f"Candidates remaining: {len(solver):,}")
    ranked = solver.rank(top)
    if history:
        print(f"Suggested next guess: {ranked[0][0]}")

    print("\nTop words by goodness:")
    print("Legend: word: goodness (entropy bits)")
    for word, score, entropy in ranked:
        print(f"{word}: {score:.6f} ({entropy:.4f} bits)")


def run_specific_word(solver, word, verbose):
    frequency = solver.dictionary.frequency(word)
    score, entropy = solver.score(word)
    buckets = solver.pattern_distribution(word)

    print(f"\n{word}: frequency {frequency:,}")
    print(f"Candidates remaining: {len(solver):,}  Feedback buckets: {len(buckets)}")
    print(f"Goodness: {score:.6f}  Entropy: {entropy:.4f} bits")

    if verbose:
        print("\nBuckets (largest first):")
        print("Legend: pattern: weight")
        for pattern, weight in sorted(buckets.items(), key=lambda item: -item[1]):
            print(f"{format_pattern(pattern)}: {weight:,.0f}")


def parse_args():
    parser = argparse.ArgumentParser(
        description="Wordle goodness/entropy report for the frequency-weighted solver."
    )
    parser.add_argument(
        "-dictionary",
        type=str,
        default=str(DICTIONARY_PATH),
        help="Dictionary file of '<word> <frequency>' lines.",
    )
    parser.add_argument(
        "-history",
        nargs="+",
        default=[],
        metavar="WORD:PATTERN",
        help="Feedback received so far, e.g. tares:-Y--G.",
    )
    parser.add_argument(
        "-top",
        type=int,
        default=TOP_WORDS,
        help=f"Number of words to list (default: {TOP_WORDS}).",
    )
    parser.add_argument(
        "-word",
        type=str,
        default=None,
        help="Evaluate one specific word instead of listing the top words.",
    )
    parser.add_argument(
        "-verbose",
        action="store_true",
        help="With -word, list every feedback bucket and its weight.",
    )
    return parser.parse_args()


def main():
    args = parse_args()
    try:
        dictionary = load_dictionary(args.dictionary)
        history = [Guess.parse(text) for text in args.history]
    except (OSError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc
    if len(dictionary) == 0:
        raise SystemExit(f"dictionary is empty: {args.dictionary}")

    try:
        solver = build_solver(dictionary, history)
    except (ValueError, RuntimeError) as exc:
        raise SystemExit(str(exc)) from exc

    if args.word is not None:
        try:
            run_specific_word(solver, args.word.lower(), args.verbose)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
        return

    run_top_words(solver, history, max(1, args.top))


if __name__ == "__main__":
    main()
