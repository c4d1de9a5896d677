import pytest

from wordle_solver.game import MAX_TURNS, Wordle
from wordle_solver.history import Guess
from wordle_solver.patterns import compute
from wordle_solver.solver import Solver
from wordle_solver.words import Dictionary


class ScriptedGuesser:
    """Plays "wrong" until `right_at` guesses are in the history, then "right"."""

    def __init__(self, right_at=None):
        self.right_at = right_at
        self.calls = 0
        self.histories = []

    def guess(self, history):
        self.calls += 1
        self.histories.append(list(history))
        if len(history) == self.right_at:
            return "right"
        return "wrong"


@pytest.fixture
def wordle():
    return Wordle(Dictionary.from_mapping({"right": 1, "wrong": 1}))


@pytest.mark.parametrize("right_at,turns", [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6)])
def test_play_counts_turns(wordle, right_at, turns):
    assert wordle.play("right", ScriptedGuesser(right_at)) == turns


def test_play_gives_up_at_turn_cap(wordle):
    guesser = ScriptedGuesser()
    assert wordle.play("right", guesser) is None
    assert guesser.calls == MAX_TURNS == 32
    assert len(guesser.histories[-1]) == MAX_TURNS - 1


def test_play_records_feedback(wordle):
    guesser = ScriptedGuesser(right_at=2)
    wordle.play("right", guesser)
    expected = Guess("wrong", compute("right", "wrong"))
    assert guesser.histories[2] == [expected, expected]


def test_play_custom_turn_cap():
    game = Wordle(Dictionary.from_mapping({"right": 1, "wrong": 1}), max_turns=6)
    guesser = ScriptedGuesser()
    assert game.play("right", guesser) is None
    assert guesser.calls == 6


def test_guess_outside_dictionary_is_fatal(wordle):
    class Stubborn:
        def guess(self, history):
            return "xxxxx"

    with pytest.raises(ValueError, match="not in dictionary"):
        wordle.play("right", Stubborn())


def test_solver_wins_scenario():
    dictionary = Dictionary.from_mapping({"right": 1, "wrong": 1})
    game = Wordle(dictionary)
    assert game.play("right", Solver(dictionary, opening="right")) == 1
    assert game.play("right", Solver(dictionary, opening="wrong")) == 2
