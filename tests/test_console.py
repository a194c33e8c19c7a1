import io
from pathlib import Path

import pytest

from wordguesser import console


@pytest.fixture
def dictionary(tmp_path: Path) -> Path:
    p = tmp_path / "dictionary.txt"
    p.write_text("cat cot\ncar CAN\nbird\n", encoding="utf-8")
    return p


def _run(argv, text):
    out = io.StringIO()
    code = console.main(argv, stdin=io.StringIO(text), stdout=out)
    return code, out.getvalue()


def test_full_game_won(dictionary: Path):
    code, out = _run(
        ["--dictionary", str(dictionary), "--length", "3", "--max-wrong", "3"],
        "c\nc\nA\nt\nr\nn\n",
    )
    assert code == 0
    assert "Welcome to the word guessing game." in out
    assert "current : _ _ _" in out
    assert "Yes, there is one c" in out
    assert "You already guessed that" in out
    assert "Yes, there is one a" in out
    assert "Sorry, there are no t's" in out
    assert "Sorry, there are no r's" in out
    assert "guessed : [a, c, r, t]" in out
    assert "answer = can" in out
    assert out.rstrip().endswith("You beat me")


def test_game_lost_with_prompts(dictionary: Path):
    code, out = _run(["--dictionary", str(dictionary), "--show-count"], "3 1\nzebra\n")
    assert code == 0
    assert "What length word do you want to use? " in out
    assert "How many wrong answers allowed? " in out
    assert "words   : 4" in out
    assert "Sorry, there are no z's" in out
    assert "answer = can" in out
    assert out.rstrip().endswith("Sorry, you lose")


def test_no_words_of_length(dictionary: Path):
    code, out = _run(["--dictionary", str(dictionary), "--length", "7", "--max-wrong", "3"], "")
    assert code == 0
    assert "No words of that length in the dictionary." in out
    assert "answer" not in out


def test_invalid_settings(dictionary: Path):
    code, out = _run(["--dictionary", str(dictionary), "--length", "0", "--max-wrong", "3"], "")
    assert code == 2
    assert "Invalid game settings" in out


def test_reprompts_for_numbers(dictionary: Path):
    code, out = _run(["--dictionary", str(dictionary), "--max-wrong", "1"], "three\n3\nq\n")
    assert code == 0
    assert "Please enter a whole number, not 'three'." in out


def test_missing_dictionary(tmp_path: Path):
    code, out = _run(["--dictionary", str(tmp_path / "missing.txt")], "")
    assert code == 2
    assert "Cannot read dictionary file" in out


def test_input_ends_mid_game(dictionary: Path):
    code, out = _run(["--dictionary", str(dictionary), "--length", "3", "--max-wrong", "3"], "c\n")
    assert code == 1
    assert "Input ended" in out


@pytest.mark.parametrize("guess", ["_", "7", "?"])
def test_non_letter_guess_is_reprompted(dictionary: Path, guess):
    code, out = _run(
        ["--dictionary", str(dictionary), "--length", "3", "--max-wrong", "1"],
        f"{guess}\nz\n",
    )
    assert code == 0
    assert "Please guess a letter" in out
    assert "guessed : [_]" not in out
    assert f"{guess}'s" not in out
    assert out.count("current : _ _ _") == 2
    assert "Sorry, there are no z's" in out
