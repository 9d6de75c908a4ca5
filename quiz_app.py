"""
Quiz App - Streamlit Web App
============================
Run locally:  streamlit run quiz_app.py
Requires:     streamlit, pydantic, pyyaml, structlog
Config:       QUIZ_APP_CONFIG=path/to/config.yaml (optional)
"""

import random

import streamlit as st

from quizapp.config import load_settings
from quizapp.engine import (
    OptionVisualState,
    QuizStateMachine,
    Screen,
    result_line,
    score_line,
)
from quizapp.logs import configure_logging
from quizapp.questions import QUESTIONS

# ─────────────────────────────────────────────────────────────────────────────
# SESSION STATE
# ─────────────────────────────────────────────────────────────────────────────
def load_config():
    settings = load_settings()
    configure_logging(settings.logging.level, settings.logging.json_output)
    return settings

def init_session():
    if "settings" not in st.session_state:
        st.session_state.settings = load_config()
    if "machine" not in st.session_state:
        rng = random.Random(st.session_state.settings.seed)
        st.session_state.machine = QuizStateMachine(QUESTIONS, rng=rng)

def _letter(i):
    return chr(ord("A") + i)

# ─────────────────────────────────────────────────────────────────────────────
# CSS
# ─────────────────────────────────────────────────────────────────────────────
CSS = """
<style>
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;900&display=swap');
html, body, [class*="css"] { font-family: 'Inter', sans-serif; }
[data-testid="stMetricValue"] { font-size: 2rem !important; font-weight: 900 !important; }
</style>
"""

# ─────────────────────────────────────────────────────────────────────────────
# SCREEN — START
# ─────────────────────────────────────────────────────────────────────────────
def screen_start():
    st.markdown(CSS, unsafe_allow_html=True)
    settings = st.session_state.settings
    machine  = st.session_state.machine

    st.markdown(f"# 📝 {settings.title}")
    st.write(settings.welcome_text)
    st.divider()

    c1, c2 = st.columns(2)
    c1.metric("Questions", f"{len(machine.questions)} in the bank")
    c2.metric("Order", "Random")

    if st.button("🚀 Start Quiz", key="start", type="primary"):
        machine.start()
        st.rerun()

# ─────────────────────────────────────────────────────────────────────────────
# SCREEN — PLAYING
# ─────────────────────────────────────────────────────────────────────────────
def screen_playing():
    st.markdown(CSS, unsafe_allow_html=True)
    machine  = st.session_state.machine
    state    = machine.state
    q        = machine.current_question
    answered = state.selected_option_index is not None

    st.markdown(f"**{score_line(state)}**")
    st.divider()

    st.markdown(f"### {q.prompt}")
    st.write("")

    # ── Options ───────────────────────────────────────────────────────────
    if not answered:
        for i, opt in enumerate(q.options):
            if st.button(f"**{_letter(i)}.** {opt}", key=f"opt_{i}"):
                machine.select_answer(i)
                st.rerun()
    else:
        for i, (opt, look) in enumerate(zip(q.options, machine.option_states())):
            if look is OptionVisualState.CORRECT:
                st.success(f"**{_letter(i)}.** {opt}  ✓")
            elif look is OptionVisualState.INCORRECT:
                st.error(f"**{_letter(i)}.** {opt}  ✗  ← your answer")
            else:
                st.markdown(f"**{_letter(i)}.** {opt}")

        if state.selected_option_index == q.correct_option_index:
            st.success("Correct!", icon="✅")
        else:
            st.error(f"Incorrect: the correct answer was **{_letter(q.correct_option_index)}**", icon="❌")

    # ── Navigation ────────────────────────────────────────────────────────
    st.divider()
    nl, nr = st.columns(2)

    with nl:
        if st.button("Next Question →", key="next", type="primary",
                     disabled=not machine.can_go_next):
            machine.next_question()
            st.rerun()

    with nr:
        if st.button("🏁 Finish Quiz", key="finish"):
            machine.finish()
            st.rerun()

# ─────────────────────────────────────────────────────────────────────────────
# SCREEN — END
# ─────────────────────────────────────────────────────────────────────────────
def screen_end():
    st.markdown(CSS, unsafe_allow_html=True)
    state = st.session_state.machine.state
    pct   = round(state.score / state.questions_answered * 100) if state.questions_answered else 0

    st.markdown("# 🎓 Quiz Finished!")

    c1, c2 = st.columns(2)
    c1.metric("Correct", f"{state.score}/{state.questions_answered}")
    c2.metric("Score",   f"{pct}%")

    st.write(result_line(state))
    st.divider()

    if st.button("🔄 Restart Quiz", key="restart", type="primary"):
        st.session_state.machine.restart()
        st.rerun()

# ─────────────────────────────────────────────────────────────────────────────
# MAIN
# ─────────────────────────────────────────────────────────────────────────────
SCREENS = {
    Screen.START:   screen_start,
    Screen.PLAYING: screen_playing,
    Screen.END:     screen_end,
}

def main():
    init_session()
    st.set_page_config(
        page_title=st.session_state.settings.title,
        page_icon="📝",
        layout="centered",
    )
    SCREENS[st.session_state.machine.state.screen]()

if __name__ == "__main__":
    main()
