import pytest

from case_data import SUSPECTS, CaseContentProvider
from conftest import CLUE_SHEET
from game_engine import DetectiveSession, ExportError
from storage import PlayerStore, StorageError


class RecordingStore(PlayerStore):
    """PlayerStore that remembers every update it was asked to make."""

    def __init__(self, db_path):
        super().__init__(db_path)
        self.updates = []

    def update_progress(self, name, progress):
        self.updates.append((name, progress))
        return super().update_progress(name, progress)


class FailingUpdateStore(PlayerStore):
    def update_progress(self, name, progress):
        raise StorageError("database is locked")


def test_new_session_registers_player(session, store):
    assert session.detective_name == "Alice"
    assert session.progress == "Not Started"
    assert session.tracking_enabled
    assert store.get("Alice").progress == "Not Started"
    assert session.drain_notices() == []


def test_name_is_stripped_and_must_not_be_blank(store, content):
    assert DetectiveSession("  Bob  ", store, content).detective_name == "Bob"
    with pytest.raises(ValueError):
        DetectiveSession("   ", store, content)


def test_returning_player_keeps_saved_progress(store, content):
    first = DetectiveSession("Alice", store, content)
    first.start()
    first.accuse("Zwelibanzi Ntanzi")

    DetectiveSession("Alice", store, content)
    assert store.get("Alice").progress == "Solved"


def test_welcome_and_farewell_address_the_detective(session):
    assert session.welcome() == "Welcome, Detective Alice! Press 'Start Case' to begin.\n"
    assert session.farewell() == "Thanks for playing! Goodbye, Detective Alice."


def test_start_sets_progress_and_returns_intro(session, store):
    intro = session.start()
    assert "Detective Alice, you must find out who did it!" in intro
    assert session.progress == "Started"
    assert store.get("Alice").progress == "Started"


def test_view_clues_returns_sheet_without_touching_progress(tmp_path, content):
    store = RecordingStore(tmp_path / "game.db")
    session = DetectiveSession("Alice", store, content)
    assert session.view_clues() == CLUE_SHEET
    assert session.progress == "Not Started"
    assert store.updates == []


def test_view_clues_falls_back_when_sheet_missing(store, tmp_path):
    session = DetectiveSession("Alice", store, CaseContentProvider(tmp_path / "nope.txt"))
    text = session.view_clues()
    assert text.startswith("❌ nope.txt NOT found!")


@pytest.mark.parametrize("suspect", SUSPECTS, ids=lambda s: s.name)
def test_question_suspect_returns_their_clue(session, store, suspect):
    assert session.question_suspect(suspect.name) == suspect.clue
    assert session.progress == f"Questioned: {suspect.name}"
    assert store.get("Alice").progress == f"Questioned: {suspect.name}"


def test_question_history_is_ordered_without_duplicates(session):
    session.question_suspect("Tevin Monayi")
    session.question_suspect("Zwelibanzi Ntanzi")
    session.question_suspect("Tevin Monayi")
    assert session.state.questioned == ["Tevin Monayi", "Zwelibanzi Ntanzi"]
    assert session.progress == "Questioned: Tevin Monayi"


def test_unknown_suspect_is_a_noop(tmp_path, content):
    store = RecordingStore(tmp_path / "game.db")
    session = DetectiveSession("Alice", store, content)
    session.start()

    assert session.question_suspect("Sherlock Holmes") is None
    assert session.accuse("Sherlock Holmes") is None
    assert session.progress == "Started"
    assert session.state.solved is None
    assert store.updates == [("Alice", "Started")]


def test_accusing_the_culprit_solves_the_case(session, store):
    result = session.accuse("Zwelibanzi Ntanzi")
    assert result.correct is True
    assert result.accused == "Zwelibanzi Ntanzi"
    assert "Zwelibanzi Ntanzi disabled the cameras" in result.narrative
    assert "Congratulations, Detective Alice" in result.verdict
    assert session.progress == "Solved"
    assert session.state.solved is True
    assert store.get("Alice").progress == "Solved"


@pytest.mark.parametrize("suspect", ["Thembelani Tshaka", "Tevin Monayi"])
def test_accusing_anyone_else_is_wrong(session, store, suspect):
    session.accuse("Zwelibanzi Ntanzi")
    result = session.accuse(suspect)
    assert result.correct is False
    assert result.narrative.startswith("❌ Wrong choice!")
    assert "Detective Alice" in result.verdict
    assert session.progress == "Wrong Accusation"
    assert session.state.solved is False
    assert store.get("Alice").progress == "Wrong Accusation"


def test_every_progress_change_is_written_once(tmp_path, content):
    store = RecordingStore(tmp_path / "game.db")
    session = DetectiveSession("Alice", store, content)
    session.start()
    session.view_clues()
    session.question_suspect("Tevin Monayi")
    session.accuse("Tevin Monayi")
    assert store.updates == [
        ("Alice", "Started"),
        ("Alice", "Questioned: Tevin Monayi"),
        ("Alice", "Wrong Accusation"),
    ]


def test_end_to_end_correct_accusation(session, store):
    session.start()
    assert session.question_suspect("Zwelibanzi Ntanzi")
    result = session.accuse("Zwelibanzi Ntanzi")
    assert result.correct is True
    assert store.get("Alice").progress == "Solved"


def test_end_to_end_wrong_accusation(session, store):
    session.start()
    result = session.accuse("Tevin Monayi")
    assert result.correct is False
    assert store.get("Alice").progress == "Wrong Accusation"


def test_unavailable_storage_keeps_game_playable(tmp_path, content):
    store = PlayerStore(tmp_path / "missing_dir" / "game.db")
    session = DetectiveSession("Alice", store, content)

    assert session.tracking_enabled is False
    notices = session.drain_notices()
    assert len(notices) == 1 and notices[0].startswith("Database error:")
    assert session.drain_notices() == []

    session.start()
    result = session.accuse("Zwelibanzi Ntanzi")
    assert result.correct is True
    assert session.progress == "Solved"
    assert session.drain_notices() == []


def test_failed_update_disables_tracking_once(tmp_path, content):
    store = FailingUpdateStore(tmp_path / "game.db")
    session = DetectiveSession("Alice", store, content)

    session.start()
    session.question_suspect("Tevin Monayi")

    assert session.tracking_enabled is False
    assert session.progress == "Questioned: Tevin Monayi"
    assert session.drain_notices() == ["Error updating progress: database is locked"]


def test_save_notes_writes_text_verbatim(session, tmp_path):
    text = session.start()
    saved = session.save_notes(tmp_path / "notes.txt", text)
    assert saved == (tmp_path / "notes.txt").resolve()
    assert saved.read_text(encoding="utf-8") == text
    assert session.progress == "Started"


def test_save_notes_failure_raises_export_error(session, tmp_path):
    with pytest.raises(ExportError):
        session.save_notes(tmp_path / "no_such_dir" / "notes.txt", "notes")


def test_view_clues_survives_unreadable_sheet(store, tmp_path):
    bad = tmp_path / "clues.txt"
    bad.write_bytes(b"Clue: caf\xe9 receipt\n")
    session = DetectiveSession("Alice", store, CaseContentProvider(bad))
    assert session.view_clues().startswith("❌ Error reading file:")

    session = DetectiveSession("Alice", store, CaseContentProvider(tmp_path))
    assert session.view_clues().startswith("❌ Error reading file:")
    assert session.progress == "Not Started"


def test_restarting_the_case_clears_the_verdict(session):
    session.accuse("Tevin Monayi")
    assert session.state.solved is False
    session.start()
    assert session.state.solved is None
    assert session.progress == "Started"


class FailingReadStore(PlayerStore):
    def __init__(self, db_path):
        super().__init__(db_path)
        self.reads = 0

    def get(self, name):
        self.reads += 1
        raise StorageError("disk I/O error")


def test_saved_progress_reads_the_store(session):
    session.start()
    assert session.saved_progress() == "Started"


def test_failed_read_disables_tracking_and_is_reported_once(tmp_path, content):
    store = FailingReadStore(tmp_path / "game.db")
    session = DetectiveSession("Alice", store, content)

    assert session.saved_progress() is None
    assert session.saved_progress() is None
    assert store.reads == 1
    assert session.tracking_enabled is False
    assert session.drain_notices() == ["Database error: disk I/O error"]
