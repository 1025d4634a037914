"""
app.py
======
Streamlit UI for Java Detective: The Museum Heist.

Responsibilities:
  - Configure and render the Streamlit page (single window, verdict tint).
  - Ask for the detective's name and open a DetectiveSession.
  - Render the transcript panel and the six-button action bar.
  - Show the suspect chooser, accusation chooser, and save-notes panel.
  - Surface storage / export problems as non-blocking notifications.

This file contains only UI logic. All game logic lives in game_engine.py,
persistence in storage.py, narrative data in case_data.py, and shared
formatting in ui_helpers.py.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import html
import logging

import streamlit as st
from dotenv import load_dotenv

# Load .env before reading configuration so DETECTIVE_* overrides apply.
load_dotenv()

from case_data import CaseContentProvider
from config import LOG_DATE_FORMAT, LOG_FORMAT, GameConfig
from game_engine import DetectiveSession, ExportError
from storage import PlayerStore
from ui_helpers import build_css, format_interview

CONFIG = GameConfig.from_env()

# basicConfig runs once per process; Streamlit reruns reuse the handler.
logging.basicConfig(
    level=CONFIG.log_level,
    format=LOG_FORMAT,
    datefmt=LOG_DATE_FORMAT,
)
logger = logging.getLogger("detective_game.app")


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title=CONFIG.window_title,
    page_icon="🕵️",
    layout="centered",
)


# ============================================================
# SESSION STATE
# ============================================================

def init_session_state() -> None:
    """
    Initialise Streamlit session state on first run.

    Keys:
        session: The DetectiveSession, None until the player logs in.
        display: Text currently shown in the transcript panel.
        panel:   Which chooser is open: None | "question" | "accuse" | "save".
        exited:  True after the Exit button; the page then only says goodbye.
        farewell: Goodbye line shown after exit.
        toasts:  Notifications raised by an action, shown after the rerun.
        celebrate: Set by a correct accusation to release balloons once.
    """
    defaults: dict = {
        "session":   None,
        "display":   "",
        "panel":     None,
        "exited":    False,
        "farewell":  "",
        "toasts":    [],
        "celebrate": False,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def queue_toast(message: str) -> None:
    st.session_state.toasts.append(message)


def show_notices(session: DetectiveSession) -> None:
    """Flush storage notices and queued toasts as non-blocking notifications."""
    for notice in session.drain_notices():
        st.toast(f"⚠️ {notice}")
    for message in st.session_state.toasts:
        st.toast(message)
    st.session_state.toasts = []
    if st.session_state.celebrate:
        st.balloons()
        st.session_state.celebrate = False


# ============================================================
# LOGIN
# ============================================================

def render_login() -> None:
    """Ask for the detective's name and open a session on submit."""
    st.markdown("### Detective Login")
    with st.form("login"):
        name = st.text_input("Enter your name, Detective:", key="login_name")
        submitted = st.form_submit_button("Begin")

    if not submitted:
        return
    if not name.strip():
        st.error("You must enter a name to play!")
        return

    session = DetectiveSession(
        name,
        PlayerStore(CONFIG.db_path),
        CaseContentProvider(CONFIG.clue_file),
        initial_progress=CONFIG.initial_progress,
    )
    st.session_state.session = session
    st.session_state.display = session.welcome()
    logger.info("Detective %r logged in", session.detective_name)
    st.rerun()


# ============================================================
# SIDEBAR
# ============================================================

def render_sidebar(session: DetectiveSession) -> None:
    """Show the detective's name, progress, and questioning history."""
    st.sidebar.markdown(f"### 🕵️ Detective {session.detective_name}")
    st.sidebar.markdown(f"**Progress:** {session.progress}")

    questioned = session.state.questioned
    st.sidebar.markdown(
        f"**Suspects questioned:** {len(questioned)} / {len(session.content.suspects())}"
    )
    for name in questioned:
        st.sidebar.markdown(f"- {name}")

    st.sidebar.markdown("---")
    if not session.tracking_enabled:
        st.sidebar.warning("Progress is not being saved this session.")
        return
    saved = session.saved_progress()
    if saved is not None:
        st.sidebar.caption(f"Saved progress: {saved}")


# ============================================================
# MAIN PANEL
# ============================================================

def render_display() -> None:
    st.markdown(
        f"<div class='display-area'>{html.escape(st.session_state.display)}</div>",
        unsafe_allow_html=True,
    )


def render_button_bar(session: DetectiveSession) -> None:
    """
    Render the six action buttons.

    Start, View Clues and Exit act immediately; the other three open a
    chooser panel below the bar.
    """
    st.markdown("<div class='button-bar'></div>", unsafe_allow_html=True)
    cols = st.columns(6)

    if cols[0].button("Start Case", key="start_case", use_container_width=True):
        st.session_state.display = session.start()
        st.session_state.panel   = None
        st.rerun()

    if cols[1].button("View Clues", key="view_clues", use_container_width=True):
        st.session_state.display = session.view_clues()
        st.session_state.panel   = None
        st.rerun()

    if cols[2].button("Question Suspects", key="question_suspects", use_container_width=True):
        st.session_state.panel = "question"
        st.rerun()

    if cols[3].button("Make Accusation", key="make_accusation", use_container_width=True):
        st.session_state.panel = "accuse"
        st.rerun()

    if cols[4].button("Save Notes", key="save_notes", use_container_width=True):
        st.session_state.panel = "save"
        st.rerun()

    if cols[5].button("Exit", key="exit", use_container_width=True):
        st.session_state.farewell = session.farewell()
        st.session_state.exited   = True
        st.session_state.session  = None
        st.rerun()


def render_question_panel(session: DetectiveSession) -> None:
    """Suspect chooser for questioning."""
    suspects = session.content.suspects()
    suspect = st.selectbox(
        "Who do you want to question?", options=suspects, index=0, key="question_choice"
    )
    col1, col2 = st.columns(2)
    if col1.button("Question", key="confirm_question", type="primary", use_container_width=True):
        clue = session.question_suspect(suspect)
        if clue is not None:
            st.session_state.display = format_interview(suspect, clue)
        st.session_state.panel = None
        st.rerun()
    if col2.button("Cancel", key="cancel_question", use_container_width=True):
        st.session_state.panel = None
        st.rerun()


def render_accusation_panel(session: DetectiveSession) -> None:
    """Suspect chooser for the accusation."""
    suspects = session.content.suspects()
    suspect = st.selectbox(
        "Who do you accuse?", options=suspects, index=0, key="accuse_choice"
    )
    col1, col2 = st.columns(2)
    if col1.button("🔨 I accuse…", key="confirm_accuse", type="primary", use_container_width=True):
        result = session.accuse(suspect)
        if result is not None:
            st.session_state.display = result.narrative
            queue_toast(result.verdict)
            st.session_state.celebrate = result.correct
        st.session_state.panel = None
        st.rerun()
    if col2.button("Cancel", key="cancel_accuse", use_container_width=True):
        st.session_state.panel = None
        st.rerun()


def render_save_panel(session: DetectiveSession) -> None:
    """Ask for a file path and save the current transcript there."""
    path = st.text_input(
        "Save Investigation Log to:", value="investigation_notes.txt", key="save_path"
    )
    col1, col2 = st.columns(2)
    if col1.button("Save", key="confirm_save", type="primary", use_container_width=True):
        if not path.strip():
            st.error("Enter a file path first.")
            return
        try:
            saved = session.save_notes(path.strip(), st.session_state.display)
        except ExportError as exc:
            queue_toast(f"⚠️ Error saving file:\n{exc}")
        else:
            queue_toast(f"✅ Notes saved to:\n{saved}")
        st.session_state.panel = None
        st.rerun()
    if col2.button("Cancel", key="cancel_save", use_container_width=True):
        st.session_state.panel = None
        st.rerun()


# ============================================================
# ENTRY POINT
# ============================================================

def main() -> None:
    """
    Streamlit entry point.

    Flow:
      1. Initialise session state.
      2. After exit, show the goodbye line and stop.
      3. Without a session, show the login form.
      4. Otherwise render sidebar, transcript, action bar and any open panel.
    """
    init_session_state()

    session = st.session_state.session
    solved = session.state.solved if session is not None else None
    st.markdown(
        f"<style>{build_css(solved)}</style>",
        unsafe_allow_html=True,
    )
    st.title(CONFIG.window_title)

    if st.session_state.exited:
        st.info(st.session_state.farewell)
        st.stop()

    if session is None:
        render_login()
        return

    render_sidebar(session)
    show_notices(session)
    render_display()
    render_button_bar(session)

    panel = st.session_state.panel
    if panel == "question":
        render_question_panel(session)
    elif panel == "accuse":
        render_accusation_panel(session)
    elif panel == "save":
        render_save_panel(session)


if __name__ == "__main__":
    main()
