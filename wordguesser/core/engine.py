from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple

from .errors import InvalidArgument, InvalidConfiguration, InvalidState
from .state import PLACEHOLDER, GameState, GameStatus, GuessRecord

logger = logging.getLogger(__name__)


def new_game(words: Iterable[str], length: int, max_wrong: int) -> GameState:
    """
    Start a new game over every distinct word of exactly `length` letters.

    Parameters
    ----------
    words : Iterable[str]
        Any collection of words. Words of other lengths are ignored and
        duplicates collapse; case is kept exactly as supplied.
    length : int
        Word length for this game (>= 1).
    max_wrong : int
        Number of wrong guesses allowed (>= 0).

    Returns
    -------
    GameState
        A fresh state with an all-placeholder pattern. Its candidate set may be
        empty, in which case the state is "unplayable".

    Raises
    ------
    InvalidConfiguration
        If `length` < 1 or `max_wrong` < 0.
    """
    if length < 1:
        raise InvalidConfiguration(f"word length must be >= 1, got {length}")
    if max_wrong < 0:
        raise InvalidConfiguration(f"wrong-guess budget must be >= 0, got {max_wrong}")

    candidates = frozenset(w for w in words if len(w) == length)
    logger.debug("new game: length=%s max_wrong=%s candidates=%s", length, max_wrong, len(candidates))
    return GameState(word_length=length, candidates=candidates, guesses_left=max_wrong)


def render_pattern(pattern: str) -> str:
    """
    Return the pattern with one space between positions, e.g. 'c a _'.
    """
    return " ".join(pattern)


def overlay(pattern: str, word: str, letter: str) -> str:
    """Reveal `letter` on top of `pattern` at every position where `word` has it."""
    return "".join(letter if w == letter else p for p, w in zip(pattern, word))


def partition_candidates(candidates: Iterable[str], pattern: str, letter: str) -> Dict[str, Set[str]]:
    """
    Group candidates by the pattern that guessing `letter` would produce.

    Every candidate lands in exactly one group, so the groups partition the
    candidate set. Keys are raw patterns (no separators).
    """
    groups: Dict[str, Set[str]] = {}
    for word in candidates:
        groups.setdefault(overlay(pattern, word, letter), set()).add(word)
    return groups


def _reveal_key(pattern: str) -> Tuple[Tuple[bool, str], ...]:
    return tuple((ch != PLACEHOLDER, ch) for ch in pattern)


def choose_pattern(groups: Dict[str, Set[str]]) -> str:
    """
    Pick the pattern whose group keeps the most candidate words.

    Ties between equally large groups go to the smallest pattern, comparing
    position by position with `PLACEHOLDER` ranked below every letter. Among
    equals the pattern revealing fewer (or later) positions wins, whatever the
    case of the words.
    """
    if not groups:
        raise InvalidState("cannot choose a pattern from an empty candidate set")
    return min(groups, key=lambda p: (-len(groups[p]), _reveal_key(p)))


def _check_playable(state: GameState) -> None:
    status = state.status
    if status == "unplayable":
        raise InvalidState("no candidate words of this length")
    if status == "won":
        raise InvalidState("the word is already fully revealed")
    if status == "lost":
        raise InvalidState("no wrong guesses left")


def apply_guess(state: GameState, letter: str) -> Tuple[GameState, int]:
    """
    Apply a single-letter guess and return `(new_state, count)`.

    Behavior
    --------
    - Rejects the guess (state untouched) if the game is not "playing", or if
      `letter` is not a single character, is `PLACEHOLDER`, or was already
      guessed.
    - Partitions the candidates by the pattern each would produce, keeps the
      largest group, and adopts its pattern.
    - `count` is the number of positions showing `letter` in the new pattern;
      0 is a miss and costs exactly one wrong guess.
    """
    _check_playable(state)
    if not isinstance(letter, str) or len(letter) != 1:
        raise InvalidArgument(f"expected a single character, got {letter!r}")
    if letter == PLACEHOLDER:
        raise InvalidArgument(f"{letter!r} marks unrevealed positions and cannot be guessed")
    if letter in state.guessed:
        raise InvalidArgument(f"{letter!r} was already guessed")

    groups = partition_candidates(state.candidates, state.pattern, letter)
    chosen = choose_pattern(groups)
    logger.debug(
        "guess %r: %s groups, keeping %r with %s of %s words",
        letter, len(groups), chosen, len(groups[chosen]), len(state.candidates),
    )

    # A newly guessed letter cannot already be in the pattern, so the count of
    # `letter` in the new pattern equals the number of newly revealed positions.
    count = chosen.count(letter)
    new_state = GameState(
        word_length=state.word_length,
        candidates=frozenset(groups[chosen]),
        guessed=state.guessed | {letter},
        pattern=chosen,
        guesses_left=state.guesses_left - (0 if count else 1),
    )
    return new_state, count


class AdaptiveWordGame:
    """
    Hangman that never commits to a secret word.

    Each guess splits the remaining candidates by the pattern they would
    reveal and keeps the biggest group, leaving the guesser as much ambiguity
    as possible. The game holds one immutable `GameState` and replaces it
    wholesale on every accepted guess; a rejected guess leaves it unchanged.
    """

    def __init__(self, words: Iterable[str], length: int, max_wrong: int) -> None:
        self._state = new_game(words, length, max_wrong)
        self._history: List[GuessRecord] = []

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def word_length(self) -> int:
        return self._state.word_length

    def candidates(self) -> FrozenSet[str]:
        """Words still consistent with everything revealed (read-only)."""
        return self._state.candidates

    def word_count(self) -> int:
        return len(self._state.candidates)

    def guess_budget(self) -> int:
        """Wrong guesses still allowed."""
        return self._state.guesses_left

    def guessed_letters(self) -> FrozenSet[str]:
        return self._state.guessed

    def display_pattern(self) -> str:
        """
        Current pattern with one space between positions, e.g. '_ a _'.

        Raises InvalidState when there are no candidate words.
        """
        if not self._state.candidates:
            raise InvalidState("no candidate words of this length")
        return render_pattern(self._state.pattern)

    def record_guess(self, letter: str) -> int:
        """
        Record a guess and return how many positions now show `letter`.

        Raises
        ------
        InvalidState
            If there are no candidates, or the game is already won or lost.
        InvalidArgument
            If `letter` was already guessed, is not a single character, or is
            the placeholder symbol.
        """
        new_state, count = apply_guess(self._state, letter)
        self._state = new_state
        self._history.append(
            GuessRecord(
                letter=letter,
                count=count,
                pattern=new_state.pattern,
                guesses_left=new_state.guesses_left,
                candidates_left=len(new_state.candidates),
            )
        )
        return count

    def is_over(self) -> bool:
        return self._state.status != "playing"

    def answer(self) -> str:
        """
        Name a word once the game is over.

        Any remaining candidate is equally valid since none was ever chosen;
        the first in sorted order is returned so the answer is reproducible.
        """
        if not self._state.candidates:
            raise InvalidState("no candidate words of this length")
        if not self.is_over():
            raise InvalidState("the game is still in progress")
        return min(self._state.candidates)

    def history(self) -> List[GuessRecord]:
        return list(self._history)

    def __repr__(self) -> str:
        return (
            f"AdaptiveWordGame(pattern={self._state.pattern!r}, "
            f"candidates={len(self._state.candidates)}, "
            f"guesses_left={self._state.guesses_left}, status={self.status!r})"
        )
