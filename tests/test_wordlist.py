import logging
from pathlib import Path

import pytest

from wordguesser.core.wordlist import available_lengths, load_dictionary, read_words


def _write(p: Path, text: str) -> Path:
    p.write_text(text, encoding="utf-8")
    return p


def test_read_words_splits_tokens_and_lowercases(tmp_path: Path):
    p = _write(tmp_path / "dict.txt", "Cat dog\n\nBIRD   fish\ncat\n")
    assert read_words(p) == ["cat", "dog", "bird", "fish", "cat"]


def test_read_words_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "nope.txt")


def test_load_dictionary_uses_setting(tmp_path: Path, monkeypatch):
    p = _write(tmp_path / "words.txt", "alpha beta\n")
    monkeypatch.setenv("DICTIONARY_FILE", str(p))
    assert load_dictionary() == ["alpha", "beta"]


def test_load_dictionary_falls_back_when_missing(tmp_path: Path, caplog):
    with caplog.at_level(logging.WARNING, logger="wordguesser.core.wordlist"):
        words = load_dictionary(tmp_path / "missing.txt")
    assert words
    assert "not found" in caplog.text


def test_load_dictionary_falls_back_when_empty(tmp_path: Path):
    p = _write(tmp_path / "empty.txt", "\n\n")
    assert load_dictionary(p)


def test_available_lengths():
    assert available_lengths(["cat", "ox", "bird", "dog", ""]) == [2, 3, 4]
    assert available_lengths([]) == []
