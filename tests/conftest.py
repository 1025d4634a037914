import pytest

from case_data import CaseContentProvider
from game_engine import DetectiveSession
from storage import PlayerStore

CLUE_SHEET = "1. The cameras went dark at 21:40.\n2. The alarm was disabled with a staff code.\n"


@pytest.fixture()
def store(tmp_path):
    s = PlayerStore(tmp_path / "detective_game.db")
    s.ensure_schema()
    return s


@pytest.fixture()
def clue_file(tmp_path):
    path = tmp_path / "resource" / "clues.txt"
    path.parent.mkdir()
    path.write_text(CLUE_SHEET, encoding="utf-8")
    return path


@pytest.fixture()
def content(clue_file):
    return CaseContentProvider(clue_file)


@pytest.fixture()
def session(store, content):
    return DetectiveSession("Alice", store, content)
