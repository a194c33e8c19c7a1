from __future__ import annotations


class WordGuesserError(Exception):
    """Base class for every error raised by the game engine."""


class InvalidConfiguration(WordGuesserError, ValueError):
    """Word length below 1 or a negative wrong-guess budget at construction."""


class InvalidState(WordGuesserError, RuntimeError):
    """The game has no candidate words, or is already won or lost."""


class InvalidArgument(WordGuesserError, ValueError):
    """The letter was already guessed; the caller should ask for another one."""
