"""
main.py

Plays the solver against every answer in the answer list and reports how
often it wins and how many turns it needs on average.

Optional:
-dictionary PATH / -answers PATH: word lists (default: data/).
-games N: only play the first N answers.
-opening WORD: fixed first guess (default: tares); "auto" computes the best
  opening over the dictionary once before the games start.
-workers N: play games in N worker processes (default: 1).
-verbose: print every game's result.
"""

import argparse
import multiprocessing as mp
import os
import time

from tqdm import tqdm

from wordle_solver.game import MAX_TURNS, Wordle
from wordle_solver.solver import OPENING_WORD, Solver, best_opening
from wordle_solver.words import ANSWERS_PATH, DICTIONARY_PATH, load_answers, load_dictionary


_WORKER_STATE = {}


def _init_worker(dictionary, opening):
    _WORKER_STATE["dictionary"] = dictionary
    _WORKER_STATE["opening"] = opening


def _play_one(answer):
    dictionary = _WORKER_STATE["dictionary"]
    solver = Solver(dictionary, opening=_WORKER_STATE["opening"])
    return answer, Wordle(dictionary).play(answer, solver)


def play_games(dictionary, answers, opening, workers=1):
    """Yield (answer, turns) for every answer; turns is None for a loss."""
    if workers <= 1:
        _init_worker(dictionary, opening)
        for answer in answers:
            yield _play_one(answer)
        return

    start_methods = mp.get_all_start_methods()
    start_method = "fork" if "fork" in start_methods else "spawn"
    ctx = mp.get_context(start_method)

    with ctx.Pool(
        processes=workers,
        initializer=_init_worker,
        initargs=(dictionary, opening),
    ) as pool:
        yield from pool.imap(_play_one, answers, chunksize=1)


def summarize(results):
    """Hit rate, average turns over wins and the turn histogram."""
    games = len(results)
    wins = [turns for _, turns in results if turns is not None]
    histogram = {}
    for turns in wins:
        histogram[turns] = histogram.get(turns, 0) + 1
    return {
        "games": games,
        "wins": len(wins),
        "hit_rate": len(wins) / games if games else 0.0,
        "average_turns": sum(wins) / len(wins) if wins else None,
        "histogram": dict(sorted(histogram.items())),
    }


def parse_args():
    parser = argparse.ArgumentParser(
        description="Play the entropy solver against a list of Wordle answers."
    )
    parser.add_argument(
        "-dictionary",
        type=str,
        default=str(DICTIONARY_PATH),
        help="Dictionary file of '<word> <frequency>' lines.",
    )
    parser.add_argument(
        "-answers",
        type=str,
        default=str(ANSWERS_PATH),
        help="Answer list, one word per line.",
    )
    parser.add_argument(
        "-games",
        type=int,
        default=None,
        help="Only play the first N answers (default: all).",
    )
    parser.add_argument(
        "-opening",
        type=str,
        default=OPENING_WORD,
        help=f"First guess for every game, or 'auto' (default: {OPENING_WORD}).",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=1,
        help=f"Worker processes (default: 1, max useful: {os.cpu_count() or 1}).",
    )
    parser.add_argument(
        "-verbose",
        action="store_true",
        help="Print the result of every game.",
    )
    return parser.parse_args()


def main():
    args = parse_args()
    try:
        dictionary = load_dictionary(args.dictionary)
        answers = load_answers(args.answers)
    except (OSError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    if args.games is not None:
        answers = answers[: max(0, args.games)]

    opening = args.opening.lower()
    if opening == "auto":
        print("Computing best opening word...")
        try:
            opening = best_opening(dictionary, progress=True)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
    if opening not in dictionary:
        raise SystemExit(f"word not found in dictionary: {opening}")

    print(
        f"Playing {len(answers):,} games against {len(dictionary):,} words, "
        f"opening with {opening}, using {max(1, args.workers)} worker(s)...\n"
    )

    results = []
    start_time = time.time()
    try:
        games = play_games(dictionary, answers, opening, workers=max(1, args.workers))
        for answer, turns in tqdm(games, total=len(answers), desc="Games"):
            results.append((answer, turns))
            if args.verbose:
                outcome = f"{turns} turns" if turns is not None else "not found"
                tqdm.write(f"{answer}: {outcome}")
    except (ValueError, RuntimeError) as exc:
        raise SystemExit(f"game aborted: {exc}") from exc
    elapsed = time.time() - start_time

    stats = summarize(results)
    print(f"\nGames: {stats['games']:,}  Wins: {stats['wins']:,}  ", end="")
    print(f"Hit rate: {100.0 * stats['hit_rate']:.2f}%")
    if stats["average_turns"] is not None:
        print(f"Average turns (wins only): {stats['average_turns']:.4f}")
    print(f"Turn cap: {MAX_TURNS}  Elapsed: {elapsed/60:.1f} min")
    if stats["histogram"]:
        print("\nTurns  Games")
        for turns, count in stats["histogram"].items():
            print(f"{turns:>5}  {count:>5,}")


if __name__ == "__main__":
    main()
