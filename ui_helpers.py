"""
ui_helpers.py
=============
Stateless presentation helpers shared by the CLI and the Streamlit UI.

These functions format game data into text but carry no game state of
their own; they receive everything they need as arguments, so they can be
tested without a terminal or a live Streamlit session.

Contains:
  - exit_options()     : (key, label) pairs for the room prompt
  - format_clue_lines(): collected clues as marked lines
  - format_verdict()   : accusation result as text lines
  - build_css()        : the page CSS for app.py
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from config import GAME_CONFIG
from models import AccusationResult, Room


def exit_options(room: Room) -> List[Tuple[str, str]]:
    """
    Describe the ways out of `room`.

    Returns:
        (key, label) pairs, e.g. ("e", "Go left -> Library"). Missing
        children are shown as "(not available)" rather than hidden so the
        player always sees the same three keys.
    """
    left  = room.left.name if room.left is not None else "(not available)"
    right = room.right.name if room.right is not None else "(not available)"
    return [
        ("e", f"Go left -> {left}"),
        ("d", f"Go right -> {right}"),
        ("s", "Leave and show every collected clue"),
    ]


def format_clue_lines(
    clues:  Sequence[str],
    marker: str = GAME_CONFIG.clue_marker,
) -> List[str]:
    """
    Prefix each clue with `marker`, keeping the given order.

    Example:
        >>> format_clue_lines(["Golden key", "Tyre tracks"])
        [' - Golden key', ' - Tyre tracks']
    """
    return [f"{marker}{clue}" for clue in clues]


def format_verdict(result: AccusationResult, threshold: int) -> List[str]:
    """Text lines summarising an accusation for the player."""
    who = result.accused or "(nobody)"
    lines = [f"Clues pointing at {who}: {result.matches} (needed: {threshold})"]
    lines.extend(format_clue_lines(result.implicating_clues))
    if result.correct:
        lines.append(f"Correct accusation! The evidence backs it up: {who} is guilty.")
    else:
        lines.append(f"Incorrect accusation. There is not enough evidence against {who}.")
    return lines


def build_css() -> str:
    """
    Return the CSS string injected into the Streamlit page.

    Returns:
        A raw CSS string (without <style> tags; the caller wraps it).
    """
    return """
    @import url('https://fonts.googleapis.com/css2?family=Special+Elite&family=Courier+Prime:wght@400;700&display=swap');

    html, body, .stApp, .main, .block-container {
        background: linear-gradient(180deg, #0b0a10 0%, #16131d 60%, #0d0b12 100%) !important;
        color: #c9c3d6 !important;
    }
    [data-testid="stSidebar"], section[data-testid="stSidebar"] > div {
        background: #0d0b12 !important;
        border-right: 1px solid #2a2433 !important;
    }

    .main-header {
        text-align: center; color: #6b4c9a;
        font-family: 'Special Elite', cursive;
        text-shadow: 2px 2px 4px #000; letter-spacing: 3px;
    }
    .sub-header {
        text-align: center; color: #6a6475;
        font-family: 'Courier Prime', monospace; font-style: italic;
    }

    .room-card {
        background: linear-gradient(145deg, #1a1722, #2a2533);
        padding: 25px; border-radius: 5px;
        border-left: 4px solid #6b4c9a;
        box-shadow: 0 4px 15px rgba(0,0,0,0.5);
        font-family: 'Courier Prime', monospace;
    }
    .room-card h3 { color: #9d7fd0; font-family: 'Special Elite', cursive; letter-spacing: 2px; }
    .clue-note {
        background: linear-gradient(145deg, #2a2a1a, #1a1a0a);
        padding: 12px 16px; border-radius: 5px; border: 1px solid #4a4a2a;
        font-family: 'Courier Prime', monospace;
    }

    .stButton > button {
        background: linear-gradient(145deg, #2a2533, #1a1722);
        color: #c9c3d6; border: 1px solid #443c50;
        font-family: 'Courier Prime', monospace;
        min-height: 50px !important;
    }
    .stButton > button:hover { border-color: #6b4c9a; color: #9d7fd0; }
    .stButton > button[kind="primary"] {
        background: linear-gradient(145deg, #6b4c9a, #43305f); color: #fff; border: none;
    }

    .stTextInput input {
        background-color: #14121a !important; color: #c9c3d6 !important;
        border: 1px solid #2a2433 !important; border-radius: 8px !important;
        font-family: 'Courier Prime', monospace;
    }
"""
