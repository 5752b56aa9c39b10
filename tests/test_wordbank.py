import numpy as np
import pytest

from wordlebot.errors import LoadError, ParseError
from wordlebot.wordbank import WordBank, parse_words

from .conftest import ANSWERS, EXTRA


def test_parse_words():
    assert parse_words(b"apple\ngrape\n", "easy.txt") == ["apple", "grape"]
    assert parse_words(b"", "easy.txt") == []


def test_parse_bad_delimiter():
    with pytest.raises(ParseError) as excinfo:
        parse_words(b"apple\ngrape\r", "easy.txt")
    assert excinfo.value.line == 2
    assert "easy.txt" in str(excinfo.value)
    assert "delimiter" in str(excinfo.value)


def test_parse_bad_char():
    with pytest.raises(ParseError) as excinfo:
        parse_words(b"apple\ngrApe\n", "easy.txt")
    assert excinfo.value.line == 2
    assert excinfo.value.column == 3
    assert "line 2 pos 3" in str(excinfo.value)


def test_parse_truncated():
    with pytest.raises(ParseError) as excinfo:
        parse_words(b"apple\ngrap", "easy.txt")
    assert excinfo.value.line == 2
    assert "truncated" in str(excinfo.value)


def test_parse_error_is_load_error():
    assert issubclass(ParseError, LoadError)


def test_load_answers_prefix(dictionary_files):
    easy, hard = dictionary_files
    bank = WordBank.load(easy, hard)
    assert bank.n_answers == len(ANSWERS)
    assert bank.n_candidates == len(ANSWERS) + len(EXTRA)
    assert list(bank.answers) == ANSWERS
    assert list(bank.candidates) == ANSWERS + EXTRA


def test_load_answers_only(dictionary_files):
    easy, _ = dictionary_files
    bank = WordBank.load(easy)
    assert bank.n_answers == bank.n_candidates == len(ANSWERS)
    assert bank.find("crane") is None


def test_load_missing_file(tmp_path):
    with pytest.raises(LoadError, match="Cannot open"):
        WordBank.load(str(tmp_path / "nope.txt"))


def test_load_empty_answers(write_words):
    with pytest.raises(LoadError):
        WordBank.load(write_words("easy.txt", []))


def test_load_bad_extra_file(write_words, dictionary_files):
    easy, _ = dictionary_files
    bad = write_words("hard.txt", ["crane", "sl8te"])
    with pytest.raises(ParseError) as excinfo:
        WordBank.load(easy, bad)
    assert excinfo.value.source == bad


def test_contains_and_find(bank):
    assert bank.contains("apple")
    assert not bank.contains("crane")  # guessable, not an answer
    assert bank.find("crane") == len(ANSWERS)
    assert bank.find("apple") == 0
    assert bank.find("zzzzz") is None


def test_find_first_duplicate():
    bank = WordBank(["apple", "grape"], ["apple"])
    assert bank.find("apple") == 0


def test_get(bank):
    assert bank.get(1) == "grape"
    assert bank.get(bank.n_candidates - 1) == EXTRA[-1]
    with pytest.raises(IndexError):
        bank.get(bank.n_candidates)
    with pytest.raises(IndexError):
        bank.get(-1)


def test_rejects_bad_words():
    with pytest.raises(ParseError):
        WordBank(["apples"])
    with pytest.raises(ParseError):
        WordBank(["apple"], ["Crane"])
    with pytest.raises(LoadError):
        WordBank([], ["crane"])


def test_chars(bank):
    assert bank.chars.shape == (bank.n_candidates, 5)
    np.testing.assert_array_equal(bank.chars[0], [0, 15, 15, 11, 4])
    assert bank.answer_chars.shape == (bank.n_answers, 5)
    assert not bank.chars.flags.writeable
