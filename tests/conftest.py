import pytest

from wordlebot.wordbank import WordBank

ANSWERS = ["apple", "grape", "lemon", "melon", "berry", "peach", "mango", "olive"]
EXTRA = ["crane", "slate"]


@pytest.fixture
def bank():
    return WordBank(ANSWERS, EXTRA)


@pytest.fixture
def write_words(tmp_path):
    """Write a dictionary file and return its path."""
    def _write(name, words):
        path = tmp_path / name
        path.write_bytes("".join(w + "\n" for w in words).encode("ascii"))
        return str(path)
    return _write


@pytest.fixture
def dictionary_files(write_words):
    return write_words("easy.txt", ANSWERS), write_words("hard.txt", EXTRA)
