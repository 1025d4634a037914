"""
case_data.py
============
All narrative content for the museum heist case.

Centralising story data here means the suspects, the culprit, and every line
of narration can change without touching the session, storage, or UI code.

Contains:
  - SUSPECTS            : Ordered suspect catalog (name, clue, culprit flag).
  - Narrative templates : Intro, verdicts, welcome / farewell lines.
  - CaseContentProvider : Read-only accessor used by DetectiveSession,
                          including the clue file loader.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from models import SuspectProfile

logger = logging.getLogger("detective_game.case_data")


# ---------------------------------------------------------------------------
# Suspect catalog
# ---------------------------------------------------------------------------

SUSPECTS: List[SuspectProfile] = [
    SuspectProfile(
        name="Zwelibanzi Ntanzi",
        clue="Zwelibanzi had access to the museum's security systems.",
        is_culprit=True,
    ),
    SuspectProfile(
        name="Thembelani Tshaka",
        clue="Thembelani was spotted out of town during the theft.",
    ),
    SuspectProfile(
        name="Tevin Monayi",
        clue="Tevin claims he was attending a lecture at the university that evening.",
    ),
]
"""
The suspect catalog, in the order the UI offers the names.

Exactly one entry carries is_culprit=True; that flag is the only place the
answer to the case is recorded.
"""

_CULPRITS = [s.name for s in SUSPECTS if s.is_culprit]
if len(_CULPRITS) != 1:
    raise RuntimeError(f"Suspect catalog must mark exactly one culprit, found {_CULPRITS}")

_BY_NAME: Dict[str, SuspectProfile] = {s.name: s for s in SUSPECTS}


# ---------------------------------------------------------------------------
# Narration
# ---------------------------------------------------------------------------

WELCOME_TEMPLATE = "Welcome, Detective {name}! Press 'Start Case' to begin.\n"

CRIME_INTRO_TEMPLATE = (
    "📍 Crime Scene: A priceless painting was stolen from the museum.\n"
    "Detective {name}, you must find out who did it!\n"
)

QUESTIONED_TEMPLATE = (
    "You questioned {suspect} and found a clue related to them!\n"
    "Clue: {clue}\n"
)

SUCCESS_NARRATIVE = (
    "✅ Correct! {culprit} disabled the cameras and stole the painting."
)
FAILURE_NARRATIVE = "❌ Wrong choice! The real thief got away. Try again."

SUCCESS_VERDICT = "🎉 Congratulations, Detective {name}! You solved the case!"
FAILURE_VERDICT = "😞 Wrong suspect! Give it another shot, Detective {name}."

FAREWELL_TEMPLATE = "Thanks for playing! Goodbye, Detective {name}."

CLUE_FILE_MISSING_TEMPLATE = "❌ {filename} NOT found!\nLooking in:\n{path}"
CLUE_FILE_UNREADABLE_TEMPLATE = "❌ Error reading file: {path}"


# ---------------------------------------------------------------------------
# Content provider
# ---------------------------------------------------------------------------

class CaseContentProvider:
    """
    Read-only source of case text for DetectiveSession.

    Everything except the clue sheet is an inline constant. The clue sheet is
    read from disk on every request so edits show up without a restart.

    Attributes:
        clue_file: Location of the plain-text clue sheet.
    """

    def __init__(self, clue_file: Path) -> None:
        self.clue_file = Path(clue_file)

    def crime_intro(self, detective_name: str) -> str:
        """Return the opening narrative addressed to `detective_name`."""
        return CRIME_INTRO_TEMPLATE.format(name=detective_name)

    def clue_text(self) -> Optional[str]:
        """
        Return the full clue sheet, or None when the file does not exist.

        The file is returned verbatim. A missing file is an expected
        condition (the caller shows clue_fallback() instead), so it is
        signalled by None rather than an exception. A file that exists but
        cannot be read as UTF-8 text yields an "Error reading file" line
        for display.
        """
        try:
            return self.clue_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("Clue file not found at %s", self.clue_file.resolve())
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read clue file %s: %s", self.clue_file.resolve(), exc)
            return CLUE_FILE_UNREADABLE_TEMPLATE.format(path=self.clue_file.resolve())

    def clue_fallback(self) -> str:
        """Message shown in place of the clue sheet when it is missing."""
        return CLUE_FILE_MISSING_TEMPLATE.format(
            filename=self.clue_file.name, path=self.clue_file.resolve()
        )

    def suspects(self) -> List[str]:
        """Suspect names in catalog order."""
        return [s.name for s in SUSPECTS]

    def is_suspect(self, name: str) -> bool:
        return name in _BY_NAME

    def clue_for(self, name: str) -> Optional[str]:
        """Clue sentence for `name`, or None if `name` is not in the catalog."""
        profile = _BY_NAME.get(name)
        return profile.clue if profile else None

    def culprit(self) -> str:
        return _CULPRITS[0]
