import pytest

from wordle_solver.words import Dictionary, load_answers, load_dictionary


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_load_dictionary(tmp_path):
    path = write(tmp_path, "dictionary.txt", "right 120\n\nwrong 80\ntares 3\n")
    dictionary = load_dictionary(path)
    assert len(dictionary) == 3
    assert dictionary.words == ("right", "wrong", "tares")
    assert list(dictionary) == [("right", 120), ("wrong", 80), ("tares", 3)]
    assert dictionary.frequency("wrong") == 80
    assert dictionary.index("tares") == 2
    assert "right" in dictionary
    assert "crane" not in dictionary
    assert dictionary.letters.shape == (3, 5)


@pytest.mark.parametrize("text,where", [
    ("right 1\nwrong\n", ":2:"),
    ("right 1\nwrong 1 2\n", ":2:"),
    ("right one\n", ":1:"),
    ("right 1.5\n", ":1:"),
    ("Right 1\n", ":1:"),
    ("righter 1\n", ":1:"),
    ("right -4\n", "non-negative"),
    ("right 1\nright 2\n", "duplicate"),
])
def test_load_dictionary_rejects_bad_lines(tmp_path, text, where):
    path = write(tmp_path, "dictionary.txt", text)
    with pytest.raises(ValueError, match=where):
        load_dictionary(path)


def test_load_dictionary_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "missing.txt")


def test_dictionary_is_read_only():
    dictionary = Dictionary.from_mapping({"right": 1, "wrong": 2})
    with pytest.raises(ValueError):
        dictionary.frequencies[0] = 5
    with pytest.raises(ValueError):
        dictionary.letters[0, 0] = ord("x")


def test_dictionary_rejects_bad_frequencies():
    with pytest.raises(ValueError):
        Dictionary([("right", 1.5)])
    with pytest.raises(ValueError):
        Dictionary([("right", True)])
    with pytest.raises(ValueError):
        Dictionary([("right", -1)])


def test_dictionary_unknown_word():
    dictionary = Dictionary.from_mapping({"right": 1})
    with pytest.raises(ValueError, match="not found"):
        dictionary.index("wrong")


def test_load_answers(tmp_path):
    path = write(tmp_path, "answers.txt", "right\n wrong \n\n")
    assert load_answers(path) == ["right", "wrong"]


def test_load_answers_rejects_bad_words(tmp_path):
    path = write(tmp_path, "answers.txt", "right\nwrongs\n")
    with pytest.raises(ValueError):
        load_answers(path)
