from __future__ import annotations

import streamlit as st

from wordguesser.settings import configure_logging, get_settings

configure_logging()

from wordguesser.core.engine import AdaptiveWordGame
from wordguesser.core.errors import InvalidArgument
from wordguesser.core.wordlist import available_lengths, load_dictionary
from wordguesser.services.coach import suggest_next_letter
from wordguesser.services.review import generate_review

# Keys cleared whenever a new game starts.
_ROUND_KEYS = {"round_counted": False, "coach_suggestion": None, "review_text": None}


def _new_round(words: list[str], length: int, max_wrong: int) -> None:
    """Replace the current game and forget everything tied to the last one."""
    st.session_state["game"] = AdaptiveWordGame(words, length, max_wrong)
    st.session_state["max_wrong"] = max_wrong
    st.session_state.update(_ROUND_KEYS)


def _tally(game: AdaptiveWordGame, mistakes: int) -> None:
    """Add a finished game to the session record, once."""
    if st.session_state["round_counted"]:
        return
    record = st.session_state.setdefault("record", {"won": 0, "lost": 0, "mistakes": 0})
    record[game.status] += 1
    record["mistakes"] += mistakes
    st.session_state["round_counted"] = True


def _record_sidebar() -> None:
    record = st.session_state.get("record")
    if not record:
        st.caption("No finished games yet.")
        return
    played = record["won"] + record["lost"]
    st.write(f"Played **{played}**: {record['won']} won, {record['lost']} lost")
    st.write(f"Mistakes per game: {record['mistakes'] / played:.2f}")
    if st.button("Forget record"):
        del st.session_state["record"]
        st.rerun()


def main() -> None:
    settings = get_settings()
    st.set_page_config(page_title="Word Guesser", page_icon="🎭", layout="centered")
    st.title("🎭 Word Guesser")
    st.caption("Hangman against a computer that never settles on a word.")

    words = load_dictionary()
    lengths = available_lengths(words)

    with st.sidebar:
        st.header("Game")
        length = st.selectbox("Word length", lengths, index=lengths.index(5) if 5 in lengths else 0)
        max_wrong = int(st.number_input("Wrong guesses allowed", min_value=0, max_value=26, value=8, step=1))
        show_count = st.checkbox("Show remaining word count", value=settings.show_count)
        if st.button("🔁 New Game", use_container_width=True):
            _new_round(words, length, max_wrong)
            st.rerun()
        st.header("Record")
        _record_sidebar()

    if not isinstance(st.session_state.get("game"), AdaptiveWordGame):
        _new_round(words, length, max_wrong)
    game: AdaptiveWordGame = st.session_state["game"]

    if game.status == "unplayable":
        st.warning("No words of that length in the dictionary. Pick another length and start a new game.")
        return

    budget = st.session_state["max_wrong"]
    mistakes = budget - game.guess_budget()
    st.markdown(f"### `{game.display_pattern()}`")
    st.caption(
        f"Wrong guesses left: {game.guess_budget()} / {budget} · "
        f"Guessed: {', '.join(sorted(game.guessed_letters())) or '(none)'}"
        + (f" · Words still possible: {game.word_count()}" if show_count else "")
    )
    if budget:
        st.progress(mistakes / budget)

    if not game.is_over():
        with st.form("guess_form", clear_on_submit=True):
            g = st.text_input("Guess a letter", max_chars=1).strip().lower()
            if st.form_submit_button("Guess") and g:
                if not g.isalpha():
                    st.warning("Please guess a letter.")
                else:
                    try:
                        game.record_guess(g)
                    except InvalidArgument:
                        st.warning(f"You already guessed '{g}'.")
                    else:
                        st.session_state["coach_suggestion"] = None
                        st.rerun()

        if st.button("🤖 Ask the coach"):
            with st.spinner("Weighing every letter against the remaining words..."):
                st.session_state["coach_suggestion"] = suggest_next_letter(game)
        tip = st.session_state.get("coach_suggestion")
        if tip:
            st.info(
                f"**{tip.letter.upper()}**: {tip.text}  \n"
                f"*{'LLM' if tip.used_llm else 'local'} · {tip.candidates_considered} words in play*"
            )
        return

    _tally(game, mistakes)
    if game.status == "won":
        st.success(f"🎉 You beat me! The word was **{game.answer()}**.")
    else:
        st.error(f"💀 Sorry, you lose. The word was: **{game.answer()}**")

    if st.session_state["review_text"] is None and st.button("📝 Review this game"):
        with st.spinner("Looking back over your guesses..."):
            st.session_state["review_text"] = generate_review(
                history=game.history(),
                answer=game.answer(),
                won=(game.status == "won"),
                mistakes=mistakes,
                word_length=game.word_length,
            )
    if st.session_state["review_text"]:
        st.write(st.session_state["review_text"])

    st.button("Play again", on_click=_new_round, args=(words, length, max_wrong))


if __name__ == "__main__":
    main()
