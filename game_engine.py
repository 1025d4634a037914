"""
game_engine.py
==============
Core game engine for Java Detective: The Museum Heist.

Contains:
  DetectiveSession: the single orchestrating class that owns the current
                     detective's progress, reads case content, and records
                     every progress change through the player store. It is
                     consumed by both the Streamlit UI (app.py) and the CLI
                     runner (cli.py).

Public API summary:
    session = DetectiveSession(name, store, content)
    session.welcome()                 → str
    session.start()                   → str
    session.view_clues()              → str
    session.question_suspect(name)    → clue str | None
    session.accuse(name)              → AccusationResult | None
    session.save_notes(path, text)    → Path
    session.farewell()                → str
    session.drain_notices()           → List[str]
    session.saved_progress()          → str | None

Logging
-------
Every user intent is logged through the standard ``logging`` module so the
host application (Streamlit, CLI, or any test harness) can route and filter
the output without changing this file. Configure it once at the entry point.

The logger name for this module is ``detective_game.game_engine``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from case_data import (
    FAILURE_NARRATIVE,
    FAILURE_VERDICT,
    FAREWELL_TEMPLATE,
    SUCCESS_NARRATIVE,
    SUCCESS_VERDICT,
    WELCOME_TEMPLATE,
    CaseContentProvider,
)
from models import AccusationResult, Progress, SessionState
from storage import PlayerStore, StorageError

logger = logging.getLogger("detective_game.game_engine")


class ExportError(Exception):
    """The investigation notes could not be written to the chosen file."""


class DetectiveSession:
    """
    One detective's playthrough.

    Every intent that changes progress writes the new tag to the player
    store before returning. A storage failure never interrupts play: it is
    logged, queued as a notice for the UI, and progress tracking is switched
    off for the rest of the session.

    Attributes:
        state:            Current SessionState (name, progress, questioned list).
        store:            The PlayerStore receiving progress writes.
        content:          The CaseContentProvider supplying case text.
        tracking_enabled: False once any storage call has failed.
    """

    def __init__(
        self,
        detective_name: str,
        store: PlayerStore,
        content: CaseContentProvider,
        initial_progress: str = Progress.NOT_STARTED,
    ) -> None:
        name = (detective_name or "").strip()
        if not name:
            raise ValueError("Detective name must not be empty")

        self.state   = SessionState(detective_name=name, progress=initial_progress)
        self.store   = store
        self.content = content
        self.tracking_enabled = True
        self._notices: List[str] = []

        try:
            self.store.ensure_schema()
            self.store.create_if_absent(name, initial_progress)
        except StorageError as exc:
            self._disable_tracking(f"Database error: {exc}")

        logger.info(
            "DetectiveSession opened: detective=%r, tracking=%s",
            name,
            self.tracking_enabled,
        )

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def detective_name(self) -> str:
        return self.state.detective_name

    @property
    def progress(self) -> str:
        return self.state.progress

    def drain_notices(self) -> List[str]:
        """Return queued storage notices and clear the queue."""
        notices, self._notices = self._notices, []
        return notices

    def saved_progress(self) -> Optional[str]:
        """
        Return the progress stored for this detective, or None.

        None also covers a disabled tracker. A read failure disables
        tracking like a failed write, so it is reported once.
        """
        if not self.tracking_enabled:
            return None
        try:
            record = self.store.get(self.detective_name)
        except StorageError as exc:
            self._disable_tracking(f"Database error: {exc}")
            return None
        return record.progress if record else None

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def welcome(self) -> str:
        return WELCOME_TEMPLATE.format(name=self.detective_name)

    def start(self) -> str:
        """Open the case: progress becomes "Started" and the intro is returned."""
        self.state.solved = None
        self._set_progress(Progress.STARTED)
        return self.content.crime_intro(self.detective_name)

    def view_clues(self) -> str:
        """Return the clue sheet, or the fallback text when it is missing."""
        text = self.content.clue_text()
        if text is None:
            return self.content.clue_fallback()
        return text

    def question_suspect(self, suspect_name: str) -> Optional[str]:
        """
        Question a suspect and return their clue sentence.

        Args:
            suspect_name: A name from the suspect catalog.

        Returns:
            The suspect's clue, or None when the name is not in the catalog.
            An unknown name leaves progress and the store untouched.
        """
        clue = self.content.clue_for(suspect_name)
        if clue is None:
            logger.warning(
                "question_suspect called with unknown suspect %r. Valid: %s",
                suspect_name,
                self.content.suspects(),
            )
            return None

        self.state.record_questioned(suspect_name)
        self._set_progress(Progress.questioned(suspect_name))
        return clue

    def accuse(self, suspect_name: str) -> Optional[AccusationResult]:
        """
        Accuse a suspect of the theft.

        Re-accusing is allowed; each call overwrites the progress tag.

        Args:
            suspect_name: A name from the suspect catalog.

        Returns:
            AccusationResult, or None when the name is not in the catalog.
        """
        if not self.content.is_suspect(suspect_name):
            logger.warning("accuse called with unknown suspect %r", suspect_name)
            return None

        culprit = self.content.culprit()
        correct = suspect_name == culprit

        self.state.solved = correct
        self._set_progress(Progress.SOLVED if correct else Progress.WRONG_ACCUSATION)

        if correct:
            narrative = SUCCESS_NARRATIVE.format(culprit=culprit)
            verdict   = SUCCESS_VERDICT.format(name=self.detective_name)
        else:
            narrative = FAILURE_NARRATIVE
            verdict   = FAILURE_VERDICT.format(name=self.detective_name)

        logger.info(
            "Accusation by %r: accused=%r correct=%s",
            self.detective_name,
            suspect_name,
            correct,
        )
        return AccusationResult(
            accused=suspect_name, correct=correct, narrative=narrative, verdict=verdict
        )

    def save_notes(self, path: Path, text: str) -> Path:
        """
        Write `text` verbatim to `path`.

        Returns:
            The absolute path written.

        Raises:
            ExportError: if the file cannot be written.
        """
        target = Path(path).expanduser()
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save notes to %s: %s", target, exc)
            raise ExportError(str(exc)) from exc

        resolved = target.resolve()
        logger.info("Notes saved to %s (%d chars)", resolved, len(text))
        return resolved

    def farewell(self) -> str:
        logger.info("Detective %r is leaving; last progress=%r", self.detective_name, self.progress)
        return FAREWELL_TEMPLATE.format(name=self.detective_name)

    # ------------------------------------------------------------------
    # Progress persistence
    # ------------------------------------------------------------------

    def _set_progress(self, progress: str) -> None:
        """Record `progress` in memory, then in the store while tracking is on."""
        previous = self.state.progress
        self.state.progress = progress
        logger.info("Progress for %r: %r -> %r", self.detective_name, previous, progress)

        if not self.tracking_enabled:
            return
        try:
            self.store.update_progress(self.detective_name, progress)
        except StorageError as exc:
            self._disable_tracking(f"Error updating progress: {exc}")

    def _disable_tracking(self, notice: str) -> None:
        logger.warning("%s. Progress tracking disabled for this session.", notice)
        self.tracking_enabled = False
        self._notices.append(notice)
