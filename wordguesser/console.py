"""
Text-console front end: reads a dictionary, asks for a word length and a
wrong-guess budget, then plays one game against the adaptive engine.

Usage:
  python -m wordguesser.console --dictionary data/dictionary.txt --length 5 --max-wrong 8
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from wordguesser.core.engine import AdaptiveWordGame
from wordguesser.core.errors import InvalidArgument
from wordguesser.core.wordlist import read_words
from wordguesser.settings import configure_logging, get_settings

logger = logging.getLogger(__name__)


class _Console:
    """Token-based prompt reader over injectable streams."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._tokens: List[str] = []

    def print(self, text: str = "") -> None:
        self._stdout.write(text + "\n")

    def ask(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        while not self._tokens:
            line = self._stdin.readline()
            if not line:
                raise EOFError("input ended")
            self._tokens = line.split()
        return self._tokens.pop(0)

    def ask_int(self, prompt: str) -> int:
        while True:
            raw = self.ask(prompt)
            try:
                return int(raw)
            except ValueError:
                self.print(f"Please enter a whole number, not {raw!r}.")


def _describe(ch: str, count: int) -> str:
    if count == 0:
        return f"Sorry, there are no {ch}'s"
    if count == 1:
        return f"Yes, there is one {ch}"
    return f"Yes, there are {count} {ch}'s"


def play_game(console: _Console, game: AdaptiveWordGame, show_count: bool = False) -> None:
    """Run turns until the word is revealed or no wrong guesses remain."""
    while not game.is_over():
        console.print(f"guesses : {game.guess_budget()}")
        if show_count:
            console.print(f"words   : {game.word_count()}")
        console.print(f"guessed : [{', '.join(sorted(game.guessed_letters()))}]")
        console.print(f"current : {game.display_pattern()}")
        ch = console.ask("Your guess? ").lower()[0]
        if not ch.isalpha():
            console.print("Please guess a letter")
            console.print()
            continue
        try:
            count = game.record_guess(ch)
        except InvalidArgument:
            console.print("You already guessed that")
        else:
            console.print(_describe(ch, count))
        console.print()


def show_results(console: _Console, game: AdaptiveWordGame) -> None:
    """Report the outcome and name a word still in play as the answer."""
    console.print(f"answer = {game.answer()}")
    if game.status == "won":
        console.print("You beat me")
    else:
        console.print("Sorry, you lose")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play hangman against a computer that never commits to a word.")
    ap.add_argument("--dictionary", default=None, help="Word list file (default: DICTIONARY_FILE setting)")
    ap.add_argument("--length", type=int, default=None, help="Word length (prompted if omitted)")
    ap.add_argument("--max-wrong", type=int, default=None, help="Wrong guesses allowed (prompted if omitted)")
    ap.add_argument("--show-count", action="store_true", help="Show how many words are still possible")
    return ap


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    settings = get_settings()
    configure_logging(settings)
    args = build_parser().parse_args(argv)
    console = _Console(stdin, stdout)

    console.print("Welcome to the word guessing game.")
    console.print()

    path = args.dictionary or settings.dictionary_file
    try:
        dictionary = read_words(path)
    except FileNotFoundError:
        logger.error("Dictionary file %s not found", path)
        console.print(f"Cannot read dictionary file: {path}")
        return 2

    try:
        length = args.length if args.length is not None else console.ask_int("What length word do you want to use? ")
        max_wrong = args.max_wrong if args.max_wrong is not None else console.ask_int("How many wrong answers allowed? ")
        console.print()
        try:
            game = AdaptiveWordGame(dictionary, length, max_wrong)
        except ValueError as e:
            console.print(f"Invalid game settings: {e}")
            return 2

        if not game.candidates():
            console.print("No words of that length in the dictionary.")
            return 0
        play_game(console, game, show_count=args.show_count or settings.show_count)
    except EOFError:
        console.print()
        console.print("Input ended; goodbye.")
        return 1

    show_results(console, game)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
