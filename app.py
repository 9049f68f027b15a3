"""
app.py
======
Streamlit web UI for Haunted Mansion: Clue Hunt.

Responsibilities:
  - Configure and render the Streamlit page (layout, theme).
  - Manage session state initialisation and reset.
  - Render the sidebar (collected clues, progress).
  - Render the main panel (current room, navigation buttons, event log,
    accusation form, verdict).

This file contains only UI logic. All game logic lives in game_engine.py,
the mansion itself in mansion_data.py, and shared formatting in
ui_helpers.py.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st

# ---------------------------------------------------------------------------
# Logging configuration
#
# basicConfig is called here, at the Streamlit entry point, so it runs once
# per process regardless of how many times Streamlit reruns the script.
# All modules under "haunted_mansion.*" emit to this handler.
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("haunted_mansion.app")

from game_engine import MansionGame
from models import EventKind
from ui_helpers import build_css, exit_options, format_clue_lines, format_verdict


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title="Haunted Mansion",
    page_icon="🕯️",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)


# ============================================================
# SESSION STATE
# ============================================================

def _new_game() -> MansionGame:
    game = MansionGame()
    st.session_state.events = [e.message for e in game.start()]
    return game


def init_session_state() -> None:
    """Create the game session on first run."""
    if "game" not in st.session_state:
        st.session_state.events = []
        st.session_state.game   = _new_game()


def reset_game() -> None:
    """Close the current session and start a fresh exploration."""
    logger.info("New game requested from the web UI.")
    st.session_state.game.close()
    st.session_state.game = _new_game()


def _submit(raw: str) -> None:
    events = st.session_state.game.step(raw)
    st.session_state.events.extend(e.message for e in events)


# ============================================================
# SIDEBAR
# ============================================================

def render_sidebar(game: MansionGame) -> None:
    """Collected clues in alphabetical order plus overall progress."""
    clues = game.collected_clues()
    total = game.total_clues()

    st.sidebar.markdown("### 🔎 Collected clues")
    if clues:
        st.sidebar.markdown("\n".join(format_clue_lines(clues, marker="- ")))
    else:
        st.sidebar.markdown("*No clues yet.*")

    st.sidebar.progress(len(clues) / max(1, total))
    st.sidebar.markdown(f"**{len(clues)} of {total}** clues collected")

    st.sidebar.markdown("---")
    if st.sidebar.button("🔄 NEW GAME", key="new_game", use_container_width=True):
        reset_game()
        st.rerun()


# ============================================================
# MAIN PANEL
# ============================================================

def render_room(game: MansionGame) -> None:
    """Current room card and the three navigation buttons."""
    room = game.current_room
    st.markdown(f"""
    <div class="room-card">
        <h3>🚪 {room.name}</h3>
    </div>
    """, unsafe_allow_html=True)

    last = game.engine.history[-1] if game.engine.history else None
    if last is not None and last.kind == EventKind.CLUE_FOUND:
        st.markdown(
            f'<div class="clue-note">📜 {last.clue}</div>', unsafe_allow_html=True
        )

    st.markdown("")
    cols = st.columns(3)
    for col, (key, label) in zip(cols, exit_options(room)):
        if col.button(label, key=f"go_{key}", use_container_width=True):
            _submit(key)
            st.rerun()


def render_event_log() -> None:
    with st.expander("📖 Exploration log", expanded=False):
        for message in st.session_state.events:
            st.markdown(f"- {message}")


def render_accusation_form(game: MansionGame) -> None:
    """Free-text accusation once the player has left the mansion."""
    st.markdown("### ⚖️ Make your accusation")
    suspects = game.suspects()
    if suspects:
        st.caption("Suspects: " + ", ".join(suspects))

    accused = st.text_input("Who do you accuse?", key="accused_name")
    if st.button("🔨 I ACCUSE…", key="accuse", type="primary", use_container_width=True):
        game.make_accusation(accused)
        st.rerun()


def render_result(game: MansionGame) -> None:
    result = game.accusation
    lines  = format_verdict(result, game.threshold)
    if result.correct:
        st.success(lines[-1])
    else:
        st.error(lines[-1])
    st.markdown(lines[0])
    if result.implicating_clues:
        st.markdown("\n".join(format_clue_lines(result.implicating_clues, marker="- ")))


# ============================================================
# MAIN
# ============================================================

def main() -> None:
    init_session_state()
    game: MansionGame = st.session_state.game

    st.markdown("""
    <h1 class='main-header'>🕯️ HAUNTED MANSION</h1>
    <h3 class='sub-header'>Clue Hunt</h3>
    """, unsafe_allow_html=True)

    render_sidebar(game)

    if not game.exited:
        render_room(game)
    elif game.accusation is None:
        st.info("You left the mansion. Review your clues and name the culprit.")
        render_accusation_form(game)
    else:
        render_result(game)

    render_event_log()


if __name__ == "__main__":
    main()
