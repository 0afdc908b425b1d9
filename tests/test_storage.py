"""
State Storage Tests
===================

Round-trips through the JSON state file and the fallbacks for missing,
malformed or foreign data.
"""
import json

from botct_client.models import ViewMode
from botct_client.player import Player
from botct_client.roster import AppState
from botct_client.storage import StateStore


def sample_state() -> AppState:
    return AppState(
        players=[Player("a1", "Alice"), Player("b2", "Bob", dead=True), Player("c3", "")],
        view_mode=ViewMode.TABLE,
    )


class TestStateStore:

    def test_round_trip(self, tmp_path):
        store = StateStore(tmp_path)
        store.save(sample_state())

        loaded = StateStore(tmp_path).load()

        assert loaded.players == sample_state().players
        assert loaded.view_mode == ViewMode.TABLE

    def test_document_shape(self, tmp_path):
        store = StateStore(tmp_path)
        store.save(sample_state())

        document = json.loads(store.path.read_text(encoding="utf-8"))
        assert document == {
            "players": [
                {"id": "a1", "name": "Alice", "dead": False},
                {"id": "b2", "name": "Bob", "dead": True},
                {"id": "c3", "name": "", "dead": False},
            ],
            "viewMode": "table",
        }

    def test_file_named_by_versioned_key(self, tmp_path):
        store = StateStore(tmp_path)
        assert store.path.name == "botct_state_1.json"

    def test_missing_file_gives_defaults(self, tmp_path):
        state = StateStore(tmp_path / "nothing-here").load()
        assert state.players == []
        assert state.view_mode == ViewMode.ROSTER

    def test_unparsable_file_gives_defaults(self, tmp_path):
        store = StateStore(tmp_path)
        store.path.write_text("{not json", encoding="utf-8")
        state = store.load()
        assert state.players == []
        assert state.view_mode == ViewMode.ROSTER

    def test_invalid_utf8_gives_defaults(self, tmp_path):
        store = StateStore(tmp_path)
        store.path.write_bytes(b'{"players": [], "viewMode": "table\xff"}')
        state = store.load()
        assert state.players == []
        assert state.view_mode == ViewMode.ROSTER

    def test_wrong_shape_gives_defaults(self, tmp_path):
        store = StateStore(tmp_path)
        store.path.write_text(json.dumps({"players": "nope", "viewMode": "grid"}), encoding="utf-8")
        assert store.load().players == []

    def test_duplicate_ids_give_defaults(self, tmp_path):
        store = StateStore(tmp_path)
        store.path.write_text(json.dumps({
            "players": [{"id": "x", "name": "a", "dead": False}, {"id": "x", "name": "b", "dead": False}],
            "viewMode": "roster",
        }), encoding="utf-8")
        assert store.load().players == []

    def test_other_version_is_ignored(self, tmp_path):
        StateStore(tmp_path, key="botct_state_0").save(sample_state())
        assert StateStore(tmp_path).load().players == []

    def test_save_creates_directory(self, tmp_path):
        store = StateStore(tmp_path / "nested" / "dir")
        store.save(AppState())
        assert store.path.exists()
