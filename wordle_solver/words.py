"""
words.py

Loads the word lists and holds the dictionary the solvers share.

Dictionary file format, one entry per line:

    <word> <frequency>

where frequency is a non-negative integer measuring how common the word is.
The answers file is a plain newline-separated word list.
"""

from pathlib import Path

import numpy as np

from wordle_solver.patterns import validate_word, words_to_array


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DICTIONARY_PATH = DATA_DIR / "dictionary.txt"
ANSWERS_PATH = DATA_DIR / "answers.txt"


class Dictionary:
    """
    Immutable, ordered (word, frequency) entries.

    Built once and passed by reference to every solver. The letter and
    frequency arrays are flagged read-only so solvers cannot modify them.
    """

    def __init__(self, entries):
        words = []
        frequencies = []
        index = {}
        for word, frequency in entries:
            validate_word(word)
            if word in index:
                raise ValueError(f"duplicate dictionary word: {word}")
            if isinstance(frequency, bool) or not isinstance(frequency, (int, np.integer)):
                raise ValueError(f"frequency of {word} must be an integer: {frequency!r}")
            if frequency < 0:
                raise ValueError(f"frequency of {word} must be non-negative: {frequency}")
            index[word] = len(words)
            words.append(word)
            frequencies.append(int(frequency))

        self._words = tuple(words)
        self._index = index
        self.letters = words_to_array(words)
        self.frequencies = np.array(frequencies, dtype=np.int64)
        self.letters.setflags(write=False)
        self.frequencies.setflags(write=False)

    @classmethod
    def from_mapping(cls, mapping):
        return cls(mapping.items())

    @property
    def words(self):
        return self._words

    def index(self, word: str) -> int:
        try:
            return self._index[word]
        except KeyError as exc:
            raise ValueError(f"word not found in dictionary: {word}") from exc

    def frequency(self, word: str) -> int:
        return int(self.frequencies[self.index(word)])

    def __contains__(self, word):
        return word in self._index

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return zip(self._words, (int(f) for f in self.frequencies))

    def __repr__(self):
        return f"Dictionary({len(self)} words)"


def load_dictionary(path=DICTIONARY_PATH) -> Dictionary:
    """Load a "<word> <frequency>" file into a Dictionary."""
    entries = []
    with open(path, "r") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            parts = line.split()
            if len(parts) != 2:
                raise ValueError(f"{path}:{lineno}: expected '<word> <frequency>': {line!r}")
            word, count = parts
            try:
                entries.append((validate_word(word), int(count)))
            except ValueError as exc:
                raise ValueError(f"{path}:{lineno}: {exc}") from exc

    try:
        return Dictionary(entries)
    except ValueError as exc:
        raise ValueError(f"{path}: {exc}") from exc


def load_word_list(path):
    """Load a newline-separated word list into a Python list."""
    with open(path, "r") as f:
        words = [line.strip() for line in f if line.strip()]
    for word in words:
        validate_word(word)
    return words


def load_answers(path=ANSWERS_PATH):
    return load_word_list(path)
