"""
cli.py
======
Command-line interface for Java Detective: The Museum Heist.

Provides a text-based game loop for development, testing, and playing
without Streamlit. All game logic is delegated to DetectiveSession; this
module only handles I/O.

Usage:
    python cli.py

Commands during play:
    /start              open the case
    /clues              show the clue sheet
    /suspects           list the suspects
    /question <n|name>  question a suspect (number from /suspects or full name)
    /accuse <n|name>    accuse a suspect
    /save <path>        save the text currently on screen to a file
    /status             show progress and who has been questioned
    /exit               leave the game
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from case_data import CaseContentProvider
from config import LOG_DATE_FORMAT, LOG_FORMAT, GameConfig
from game_engine import DetectiveSession, ExportError
from storage import PlayerStore
from ui_helpers import format_interview

logger = logging.getLogger("detective_game.cli")

HELP_TEXT = (
    "Commands: /start, /clues, /suspects, /question <n|name>, "
    "/accuse <n|name>, /save <path>, /status, /exit"
)


def resolve_suspect(arg: str, names: List[str]) -> Optional[str]:
    """
    Map a 1-based index or a case-insensitive full name onto a suspect name.

    Returns:
        The catalog name, or None if `arg` matches nothing.
    """
    arg = arg.strip()
    if arg.isdigit():
        index = int(arg) - 1
        return names[index] if 0 <= index < len(names) else None
    for name in names:
        if name.lower() == arg.lower():
            return name
    return None


def _print_notices(session: DetectiveSession) -> None:
    for notice in session.drain_notices():
        print(f"⚠️ {notice}")


def run_cli(config: Optional[GameConfig] = None) -> int:
    """
    Main CLI game loop.

    Asks for the detective's name, opens a session, then processes commands
    until the player exits (or input ends).

    Returns:
        Process exit code.
    """
    cfg = config or GameConfig.from_env()

    try:
        name = input("Enter your name, Detective: ").strip()
    except EOFError:
        name = ""
    if not name:
        print("You must enter a name to play!")
        return 0

    session = DetectiveSession(
        name,
        PlayerStore(cfg.db_path),
        CaseContentProvider(cfg.clue_file),
        initial_progress=cfg.initial_progress,
    )
    suspects = session.content.suspects()

    # --- Banner ---
    print("\n" + "=" * 60)
    print(f"   {cfg.window_title}")
    print("=" * 60)
    _print_notices(session)
    display = session.welcome()
    print(display)
    print(HELP_TEXT)
    print("-" * 60)

    while True:
        try:
            user_input = input(f"\n[{session.progress}] > ").strip()
        except EOFError:
            user_input = "/exit"

        if not user_input:
            continue

        command, _, arg = user_input.partition(" ")
        command = command.lower()

        # ---- Command: exit ----
        if command in {"/exit", "/quit", "exit", "quit"}:
            logger.info("CLI session for %r ended at progress=%r", session.detective_name, session.progress)
            print(session.farewell())
            return 0

        # ---- Command: start ----
        if command == "/start":
            display = session.start()
            print(display)

        # ---- Command: clues ----
        elif command == "/clues":
            display = session.view_clues()
            print(display)

        # ---- Command: list suspects ----
        elif command == "/suspects":
            for i, suspect in enumerate(suspects, start=1):
                print(f"  {i} – {suspect}")
            continue

        # ---- Command: question ----
        elif command == "/question":
            suspect = resolve_suspect(arg, suspects)
            if suspect is None:
                print(f"Unknown suspect: {arg!r}. Use /suspects to list them.")
                continue
            display = format_interview(suspect, session.question_suspect(suspect))
            print(display)

        # ---- Command: accuse ----
        elif command == "/accuse":
            suspect = resolve_suspect(arg, suspects)
            if suspect is None:
                print(f"Unknown suspect: {arg!r}. Use /suspects to list them.")
                continue
            result = session.accuse(suspect)
            display = result.narrative
            print(display)
            print(result.verdict)

        # ---- Command: save ----
        elif command == "/save":
            if not arg.strip():
                print("Usage: /save <path>")
                continue
            try:
                saved = session.save_notes(arg.strip(), display)
            except ExportError as exc:
                print(f"⚠️ Error saving file:\n{exc}")
            else:
                print(f"✅ Notes saved to:\n{saved}")
            continue

        # ---- Command: status ----
        elif command == "/status":
            st = session.state
            print(f"  Progress    : {st.progress}")
            print(f"  Questioned  : {', '.join(st.questioned) or 'nobody yet'}")
            print(f"  Tracking    : {'on' if session.tracking_enabled else 'off'}")
            continue

        else:
            print(HELP_TEXT)
            continue

        _print_notices(session)


def main() -> int:
    """Console entry point: load .env, configure logging, run the game."""
    # Configure logging here so all detective_game.* loggers share one handler.
    load_dotenv()
    cfg = GameConfig.from_env()
    logging.basicConfig(
        level=cfg.log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    return run_cli(cfg)


if __name__ == "__main__":
    sys.exit(main())
