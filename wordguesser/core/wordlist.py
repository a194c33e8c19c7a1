from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from wordguesser.settings import get_settings

logger = logging.getLogger(__name__)

# Last-resort list used when the dictionary file is missing.
_FALLBACK_WORDS = [
    "ally", "beta", "cool", "deal", "else", "flew", "good", "hope", "ibex",
    "cat", "cot", "car", "can", "dog", "dig", "den", "pit", "pat", "pot",
    "apple", "bread", "crane", "drive", "eagle", "flame", "grape", "house",
    "python", "stream", "planet", "bridge", "castle", "guitar", "rocket",
]


def read_words(path: Path | str) -> List[str]:
    """
    Read a UTF-8 text file and return every whitespace-separated token, lowercased.

    Notes
    -----
    - Several words per line are fine; blank lines are skipped.
    - Duplicates are kept; the engine collapses them.
    - Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(p)
    return [tok.lower() for tok in p.read_text(encoding="utf-8", errors="ignore").split()]


def load_dictionary(path: Path | str | None = None) -> List[str]:
    """
    Load the dictionary used by the front ends.

    Fallback strategy
    -----------------
    1) Use `path` if given, else the `DICTIONARY_FILE` setting.
    2) If that file is missing or empty, return a small built-in list.
    """
    target = Path(path) if path is not None else Path(get_settings().dictionary_file)
    try:
        words = read_words(target)
    except FileNotFoundError:
        logger.warning("Dictionary %s not found; using the built-in word list", target)
        return list(_FALLBACK_WORDS)
    if not words:
        logger.warning("Dictionary %s is empty; using the built-in word list", target)
        return list(_FALLBACK_WORDS)
    logger.info("Loaded %s words from %s", len(words), target)
    return words


def available_lengths(words: Iterable[str]) -> List[int]:
    """Sorted distinct word lengths, i.e. the lengths a game can be played at."""
    return sorted({len(w) for w in words if w})
