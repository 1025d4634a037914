"""
ui_helpers.py
=============
Stateless UI utility functions shared by the Streamlit app and the CLI.

These functions produce display text or styling but carry no game state of
their own; they receive everything as arguments. Keeping them separate from
app.py means they can be tested without a live Streamlit session.

Contains:
  - format_interview() : display text for a questioned suspect
  - window_tint()      : background colour for the current verdict
  - build_css()        : the page CSS, tinted by verdict
"""

from __future__ import annotations

from typing import Optional

from case_data import QUESTIONED_TEMPLATE


# ---------------------------------------------------------------------------
# Display text
# ---------------------------------------------------------------------------

def format_interview(suspect_name: str, clue: str) -> str:
    """
    Build the display text shown after questioning a suspect.

    Example:
        >>> format_interview("Tevin Monayi", "He was at a lecture.")
        'You questioned Tevin Monayi and found a clue related to them!\\nClue: He was at a lecture.\\n'
    """
    return QUESTIONED_TEMPLATE.format(suspect=suspect_name, clue=clue)


# ---------------------------------------------------------------------------
# Window tint
# ---------------------------------------------------------------------------

NEUTRAL_TINT = "#f5f5f5"   # rgb(245, 245, 245)
SOLVED_TINT  = "#90ee90"   # rgb(144, 238, 144)
WRONG_TINT   = "#ffb6c1"   # rgb(255, 182, 193)


def window_tint(solved: Optional[bool]) -> str:
    """
    Return the page background colour for a verdict.

    Args:
        solved: True after a correct accusation, False after a wrong one,
                None while no accusation is on screen.
    """
    if solved is None:
        return NEUTRAL_TINT
    return SOLVED_TINT if solved else WRONG_TINT


def build_css(solved: Optional[bool] = None) -> str:
    """
    Return the CSS string injected into the Streamlit app.

    The page background follows window_tint(); the transcript panel keeps a
    parchment background and a monospaced font in every state.

    Returns:
        A raw CSS string (without <style> tags; the caller wraps it).
    """
    tint = window_tint(solved)
    return f"""
    .stApp, .main, .block-container {{
        background-color: {tint} !important;
    }}

    /* ── Transcript panel ── */
    .display-area {{
        background: #fffaf0;
        color: #212121;
        border: 1px solid #404040;
        font-family: Monospaced, 'Courier New', monospace;
        font-size: 14px;
        padding: 12px;
        min-height: 220px;
        white-space: pre-wrap;
    }}

    /* ── Button bar ── */
    .stButton > button {{
        background: #ffffff;
        color: #191970;
        font-family: 'Segoe UI', sans-serif;
        font-weight: bold;
        font-size: 12px;
        border: 1px solid #1e90ff;
    }}
    .button-bar {{
        background: #4682b4;
        padding: 6px;
        border-radius: 4px;
    }}
    """
