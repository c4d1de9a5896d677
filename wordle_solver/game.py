"""
game.py

Plays one game of Wordle between a hidden answer and a guesser.

A guesser is any object with a guess(history) method returning the next
word; history is the list of Guess entries played so far.
"""

from wordle_solver.history import Guess
from wordle_solver.patterns import compute


MAX_TURNS = 32


class Wordle:
    def __init__(self, dictionary, max_turns=MAX_TURNS):
        self.dictionary = dictionary
        self.max_turns = max_turns

    def play(self, answer: str, guesser):
        """
        Number of turns the guesser needed, or None if it ran out of turns.

        Every played word other than the answer must be in the dictionary; a
        guesser playing anything else is broken and raises ValueError.
        """
        history = []
        for turn in range(1, self.max_turns + 1):
            word = guesser.guess(history)
            if word == answer:
                return turn
            if word not in self.dictionary:
                raise ValueError(f"guess not in dictionary on turn {turn}: {word!r}")
            history.append(Guess(word, compute(answer, word)))
        return None
