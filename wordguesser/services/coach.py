from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Optional

from openai import OpenAI

from wordguesser.core.engine import AdaptiveWordGame, choose_pattern, partition_candidates, render_pattern
from wordguesser.settings import get_settings, llm_enabled

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoachSuggestion:
    """Container for a coach suggestion."""
    letter: str                 # recommended next letter
    text: str                   # one-sentence rationale
    used_llm: bool              # whether rationale came from the LLM
    candidates_considered: int  # candidate words still in play
    worst_case: int             # words the engine can keep if `letter` is guessed


def _worst_cases(candidates: FrozenSet[str], pattern: str, guessed: FrozenSet[str]) -> Dict[str, int]:
    """
    For each unguessed letter found in the candidates, the size of the group
    the engine would keep after that guess.

    Note
    ----
    The engine always keeps its largest group, so this is exactly how many
    words will remain whatever the outcome.
    """
    letters = {ch for w in candidates for ch in w} - guessed
    scores: Dict[str, int] = {}
    for ch in letters:
        groups = partition_candidates(candidates, pattern, ch)
        scores[ch] = len(groups[choose_pattern(groups)])
    return scores


def _best_letter(scores: Dict[str, int]) -> Optional[str]:
    """Pick the letter with the smallest worst case; break ties alphabetically."""
    if not scores:
        return None
    return min(scores, key=lambda ch: (scores[ch], ch))


def _fallback_letter(guessed: Iterable[str]) -> str:
    seen = set(guessed)
    if "e" not in seen:
        return "e"  # classic fallback
    for ch in string.ascii_lowercase:
        if ch not in seen:
            return ch
    return ""


def _local_reason(mask: str, remaining: int, letter: str, worst: int) -> str:
    """A deterministic, non-LLM explanation sentence."""
    if not letter:
        return "Every letter has already been guessed."
    if not worst:
        return f"No remaining word contains new letters; **{letter.upper()}** is as good as any."
    return (
        f"Try **{letter.upper()}**: of the {remaining} words matching `{mask}`, "
        f"at most {worst} can survive that guess."
    )


def _llm_reason(mask: str, top_letter: str, remaining_count: int, worst: int) -> str | None:
    """
    Ask the LLM to phrase a short human-friendly rationale for the chosen letter.

    Only the public mask and counts are sent; candidate words are not.
    """
    settings = get_settings()
    if not llm_enabled(settings):
        return None

    client = OpenAI(api_key=settings.openai_api_key)
    user = (
        "You are coaching a Hangman player against a computer that keeps changing its word "
        "to dodge guesses. "
        f"The current mask is `{mask}` and there are {remaining_count} possible words left. "
        f"Guessing '{top_letter.upper()}' leaves at most {worst} of them whatever happens. "
        f"Recommend '{top_letter.upper()}' and give ONE short sentence explaining why."
    )
    try:
        r = client.chat.completions.create(
            model=settings.model_name,
            messages=[{"role": "user", "content": user}],
            temperature=0.7,
            max_tokens=60,
        )
        text = (r.choices[0].message.content or "").strip()
        return text or None
    except Exception:
        logger.warning("Coach rationale request failed; using local text", exc_info=True)
        return None


def suggest_next_letter(game: AdaptiveWordGame) -> CoachSuggestion:
    """
    Recommend the next letter for the current game without changing it.

    Steps
    -----
    1) For every unguessed letter, work out how many words the engine would keep.
    2) Pick the letter with the smallest such count (alphabetical on ties).
    3) Produce a one-sentence rationale using the LLM; fallback to a local sentence.
    """
    state = game.state
    remaining = len(state.candidates)
    scores = _worst_cases(state.candidates, state.pattern, state.guessed)
    letter = _best_letter(scores) or _fallback_letter(state.guessed)
    worst = scores.get(letter, 0)

    mask = render_pattern(state.pattern)
    llm_text = _llm_reason(mask, letter, remaining, worst) if letter else None
    if llm_text:
        return CoachSuggestion(letter=letter, text=llm_text, used_llm=True,
                               candidates_considered=remaining, worst_case=worst)

    local_text = _local_reason(mask, remaining, letter, worst)
    return CoachSuggestion(letter=letter, text=local_text, used_llm=False,
                           candidates_considered=remaining, worst_case=worst)
