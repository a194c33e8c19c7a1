from __future__ import annotations

import logging
from typing import List, Sequence

from openai import OpenAI

from wordguesser.core.engine import render_pattern
from wordguesser.core.state import PLACEHOLDER, GuessRecord
from wordguesser.settings import get_settings, llm_enabled

logger = logging.getLogger(__name__)


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}es" if word.endswith("s") else f"{n} {word}s"


def _local_fallback_review(
    history: Sequence[GuessRecord],
    answer: str,
    won: bool,
    mistakes: int,
    word_length: int,
) -> str:
    """
    Deterministic local review when LLM is unavailable or fails.
    Produces 3 short bullet points.
    """
    hits = sum(1 for h in history if h.hit)
    misses = len(history) - hits
    last_mask = render_pattern(history[-1].pattern if history else PLACEHOLDER * word_length)
    start = history[0].candidates_left if history else 0
    end = history[-1].candidates_left if history else 0

    verdict = "You won and pinned the word down!" if won else f"You lost; '{answer}' was one word still in play."
    return (
        f"**Outcome:** {verdict}\n\n"
        f"- **What went well:** You made {_plural(hits, 'correct guess')} and pushed the mask to `{last_mask}`.\n"
        f"- **What to improve:** You had {_plural(misses, 'miss')}; after your first guess {start} words "
        f"were possible and {end} remained at the end.\n"
        f"- **Next time:** The computer never commits to a word, so favour letters that split the "
        f"remaining words evenly and aim for fewer than {max(1, mistakes)} mistakes."
    )


def _format_history_compact(history: Sequence[GuessRecord]) -> str:
    """
    Compress history into a concise, LLM-friendly string.
    Example item: "1) a✓ -> _ a _ | left=3 words=12"
    """
    lines: List[str] = []
    for i, h in enumerate(history, start=1):
        mark = "✓" if h.hit else "×"
        lines.append(
            f"{i}) {h.letter}{mark} -> {render_pattern(h.pattern)} | left={h.guesses_left} words={h.candidates_left}"
        )
    return "\n".join(lines)


def generate_review(
    history: Sequence[GuessRecord],
    answer: str,
    won: bool,
    mistakes: int,
    word_length: int,
    temperature: float = 0.4,
) -> str:
    """
    Generate a short post-game review.

    Behavior
    --------
    - If OFFLINE_MODE=true or key missing -> returns a local, deterministic review.
    - Otherwise, asks an LLM for ~3 short paragraphs: turning points, missed
      opportunities, and concrete tips against an opponent that keeps
      switching words.
    """
    settings = get_settings()
    if not llm_enabled(settings):
        return _local_fallback_review(history, answer, won, mistakes, word_length)

    client = OpenAI(api_key=settings.openai_api_key)
    outcome = "won" if won else "lost"
    mask_final = render_pattern(history[-1].pattern if history else PLACEHOLDER * word_length)

    sys = (
        "You are a concise strategy coach for Hangman against an adversarial computer that "
        "never commits to a word and always keeps the largest family of candidate words."
    )
    user = (
        f"Game outcome: {outcome}\n"
        f"Word length: {word_length}\n"
        f"Word shown at the end: {answer}\n"
        f"Mistakes: {mistakes}\n"
        f"Final mask: {mask_final}\n"
        f"History (each line = step, words = candidates still possible):\n"
        f"{_format_history_compact(history)}\n\n"
        "Write a post-game review in ~3 short paragraphs:\n"
        "1) Key turning points that helped or hurt progress (why)\n"
        "2) Missed opportunities or alternative letters\n"
        "3) Concrete next-game tips\n"
        "Keep it under 140 words total. Avoid bullet lists; use compact prose."
    )

    try:
        resp = client.chat.completions.create(
            model=settings.model_name,
            messages=[{"role": "system", "content": sys}, {"role": "user", "content": user}],
            temperature=temperature,
            max_tokens=300,
        )
        text = (resp.choices[0].message.content or "").strip()
        # Soft cap for verbosity
        if len(text.split()) > 160:
            text = " ".join(text.split()[:160])
        return text or _local_fallback_review(history, answer, won, mistakes, word_length)
    except Exception:
        logger.warning("Review request failed; using local review", exc_info=True)
        return _local_fallback_review(history, answer, won, mistakes, word_length)
