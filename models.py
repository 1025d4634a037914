"""
models.py
=========
Shared data models for Java Detective: The Museum Heist.

Contains:
  - Progress         : The progress tags written to the players table.
  - PlayerRecord     : Pydantic schema for one row of the players table.
  - AccusationResult : Pydantic schema returned by DetectiveSession.accuse().
  - SuspectProfile   : Dataclass describing one entry of the suspect catalog.
  - SessionState     : Mutable dataclass tracking the current detective's run.

Keeping these in one module guarantees a single source of truth for data
shapes used across storage.py, game_engine.py, and both UI shells.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Progress tags
# ---------------------------------------------------------------------------

class Progress:
    """
    Known progress tags.

    The set is open-ended: "Questioned: <suspect>" embeds a name, and older
    databases may hold tags this version never writes. Callers therefore
    treat progress as a plain string.
    """

    NOT_STARTED      = "Not Started"
    STARTED          = "Started"
    SOLVED           = "Solved"
    WRONG_ACCUSATION = "Wrong Accusation"

    QUESTIONED_PREFIX = "Questioned: "

    @classmethod
    def questioned(cls, suspect_name: str) -> str:
        """Return the tag recorded after questioning `suspect_name`."""
        return f"{cls.QUESTIONED_PREFIX}{suspect_name}"


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------

class PlayerRecord(BaseModel):
    """
    One persisted detective.

    Fields:
        name:     Primary key; unique across all players.
        progress: Latest progress tag written for that name.
    """

    name: str = Field(min_length=1)
    progress: str


class AccusationResult(BaseModel):
    """
    Outcome of a single accusation.

    Fields:
        accused:   The suspect the detective named.
        correct:   True when `accused` is the catalog's culprit.
        narrative: Text for the main display area.
        verdict:   Short popup line addressed to the detective by name.
    """

    accused: str
    correct: bool
    narrative: str
    verdict: str


# ---------------------------------------------------------------------------
# Suspect profile
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SuspectProfile:
    """
    One row of the suspect catalog.

    Attributes:
        name:       Display name, also the key used by the UI and progress tags.
        clue:       The fixed clue sentence revealed when the suspect is questioned.
        is_culprit: True for exactly one suspect in the catalog.
    """

    name:       str
    clue:       str
    is_culprit: bool = False


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------

@dataclass
class SessionState:
    """
    Mutable snapshot of the current detective's run.

    Owned by DetectiveSession and mutated in place as intents arrive. The
    UI shells read it for the sidebar, status line and window tint.

    Attributes:
        detective_name:  Name entered at login; never changes afterwards.
        progress:        Latest progress tag. Every intent overwrites it.
        questioned:      Suspects questioned this session, in first-asked order.
        solved:          Result of the latest accusation; None before any and
                         again after the case is restarted. Drives the window tint.
    """

    detective_name:  str
    progress:        str = Progress.NOT_STARTED
    questioned:      List[str] = field(default_factory=list)
    solved:          Optional[bool] = None

    def record_questioned(self, suspect_name: str) -> None:
        """Remember that `suspect_name` was questioned (first time only)."""
        if suspect_name not in self.questioned:
            self.questioned.append(suspect_name)
