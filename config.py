"""
config.py
=========
Central configuration module for Java Detective: The Museum Heist.

File locations, the starting progress tag, and window/logging settings live
here so they can be adjusted without touching game logic. Every field can be
overridden through an environment variable (or a `.env` file loaded by the
entry point before this module is used).

Usage:
    from config import GameConfig
    cfg = GameConfig.from_env()
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


# ---------------------------------------------------------------------------
# Environment variable names
# ---------------------------------------------------------------------------

ENV_DB_PATH   = "DETECTIVE_DB_PATH"
ENV_CLUE_FILE = "DETECTIVE_CLUE_FILE"
ENV_LOG_LEVEL = "DETECTIVE_LOG_LEVEL"

LOG_FORMAT      = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Game settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Top-level settings shared by the Streamlit app and the CLI.

    Attributes:
        db_path:          SQLite file holding the players table. Relative paths
                          resolve against the working directory, as the game
                          has always done.
        clue_file:        Plain-text clue sheet shown by "View Clues".
        initial_progress: Progress tag written the first time a name is seen.
        window_title:     Title shown in the browser tab / CLI banner.
        log_level:        Level name passed to logging.basicConfig.
    """
    db_path:          Path = Path("detective_game.db")
    clue_file:        Path = Path("resource") / "clues.txt"
    initial_progress: str  = "Not Started"
    window_title:     str  = "🕵️ Java Detective"
    log_level:        str  = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """
        Build a config from environment variables, falling back to defaults.

        Args:
            environ: Mapping to read from. Defaults to os.environ; tests pass
                     a plain dict.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            db_path=Path(env.get(ENV_DB_PATH) or defaults.db_path),
            clue_file=Path(env.get(ENV_CLUE_FILE) or defaults.clue_file),
            log_level=(env.get(ENV_LOG_LEVEL) or defaults.log_level).upper(),
        )
