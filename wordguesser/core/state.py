from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Literal

from .errors import InvalidConfiguration


GameStatus = Literal["playing", "won", "lost", "unplayable"]

# Symbol shown for a position that has not been revealed yet.
PLACEHOLDER = "_"


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of one adaptive word-guessing game.

    Notes
    -----
    - The engine never picks a secret word. `candidates` holds every word that
      is still consistent with what has been revealed, and shrinks as guesses
      are recorded.
    - `pattern` has one symbol per position: a revealed letter or
      `PLACEHOLDER`.
    - All transitions live in `core.engine`; this file only defines the data
      structure and validates the configuration fields.
    """

    word_length: int
    candidates: FrozenSet[str] = field(default_factory=frozenset)
    guessed: FrozenSet[str] = field(default_factory=frozenset)
    pattern: str = ""
    guesses_left: int = 0

    def __post_init__(self) -> None:
        """
        Normalize and validate fields.

        Normalization
        -------------
        - `candidates` and `guessed` are stored as frozensets so a snapshot can
          be handed to callers without copying.
        - An empty `pattern` means "nothing revealed yet" and is expanded to
          `word_length` placeholders.

        Validation
        ----------
        - `word_length` must be >= 1.
        - `guesses_left` must be >= 0.
        - `pattern` must have exactly `word_length` symbols.
        """
        if self.word_length < 1:
            raise InvalidConfiguration(f"word length must be >= 1, got {self.word_length}")
        if self.guesses_left < 0:
            raise InvalidConfiguration(f"wrong-guess budget must be >= 0, got {self.guesses_left}")

        # Because dataclass is frozen, use object.__setattr__ for normalization.
        object.__setattr__(self, "candidates", frozenset(self.candidates))
        object.__setattr__(self, "guessed", frozenset(self.guessed))
        if not self.pattern:
            object.__setattr__(self, "pattern", PLACEHOLDER * self.word_length)
        if len(self.pattern) != self.word_length:
            raise InvalidConfiguration(
                f"pattern {self.pattern!r} does not have {self.word_length} positions"
            )

    @property
    def status(self) -> GameStatus:
        """
        Derived game status.

        Rules
        -----
        - Unplayable : no candidate word of this length exists.
        - Won        : no placeholder left in `pattern`.
        - Lost       : `guesses_left` reached 0 with placeholders remaining.
        - Else       : playing.
        """
        if not self.candidates:
            return "unplayable"
        if PLACEHOLDER not in self.pattern:
            return "won"
        if self.guesses_left <= 0:
            return "lost"
        return "playing"


@dataclass(frozen=True)
class GuessRecord:
    """One recorded guess, kept in order for post-game review."""
    letter: str
    count: int              # occurrences of `letter` in the new pattern (0 = miss)
    pattern: str            # pattern after the guess, raw (no separators)
    guesses_left: int
    candidates_left: int

    @property
    def hit(self) -> bool:
        return self.count > 0
