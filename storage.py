"""
storage.py
==========
SQLite persistence for detective profiles.

The players table maps a detective's name to the latest progress tag. It is
the only durable state in the game, and it is a convenience: every public
method here raises StorageError on failure so callers can report the problem
and carry on playing.

The logger name for this module is ``detective_game.storage``.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Optional

from models import PlayerRecord

logger = logging.getLogger("detective_game.storage")


class StorageError(Exception):
    """The players database could not be opened, read, or written."""


_SCHEMA = "CREATE TABLE IF NOT EXISTS players (name TEXT PRIMARY KEY, progress TEXT)"


class PlayerStore:
    """
    Name → progress mapping backed by a single SQLite file.

    A fresh connection is opened for each call and committed before it is
    closed, so no handle is held between user actions.

    Attributes:
        db_path: Location of the SQLite database file.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)

    # ------------------------------------------------------------------
    # Connection handling
    # ------------------------------------------------------------------

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def _execute(self, sql: str, params: tuple = ()) -> int:
        """Run one statement in its own transaction and return its row count."""
        try:
            with closing(self._connect()) as conn:
                with conn:
                    return conn.execute(sql, params).rowcount
        except (sqlite3.Error, OSError) as exc:
            logger.warning("Database error on %s: %s", self.db_path, exc)
            raise StorageError(str(exc)) from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def ensure_schema(self) -> None:
        """Create the players table if it is missing. Safe to call on every start."""
        self._execute(_SCHEMA)
        logger.debug("Schema ready in %s", self.db_path)

    def create_if_absent(self, name: str, initial_progress: str) -> bool:
        """
        Insert a record for `name` unless one already exists.

        An existing record is left untouched, so a returning detective keeps
        whatever progress was last recorded.

        Returns:
            True if a new record was inserted.
        """
        count = self._execute(
            "INSERT OR IGNORE INTO players (name, progress) VALUES (?, ?)",
            (name, initial_progress),
        )
        created = count > 0
        logger.debug("create_if_absent name=%r created=%s", name, created)
        return created

    def update_progress(self, name: str, progress: str) -> bool:
        """
        Overwrite the progress of the record keyed by `name`.

        A missing record is not an error: nothing is written and no record
        is created.

        Returns:
            True if a record was updated.
        """
        count = self._execute(
            "UPDATE players SET progress = ? WHERE name = ?", (progress, name)
        )
        updated = count > 0
        if not updated:
            logger.debug("update_progress: no record for name=%r", name)
        return updated

    def get(self, name: str) -> Optional[PlayerRecord]:
        """Return the stored record for `name`, or None."""
        try:
            with closing(self._connect()) as conn:
                row = conn.execute(
                    "SELECT name, progress FROM players WHERE name = ?", (name,)
                ).fetchone()
        except (sqlite3.Error, OSError) as exc:
            logger.warning("Database error on %s: %s", self.db_path, exc)
            raise StorageError(str(exc)) from exc
        if row is None:
            return None
        return PlayerRecord(name=row["name"], progress=row["progress"])
