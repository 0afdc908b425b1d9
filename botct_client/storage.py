"""
StateStore - Durable storage for the roster and view mode.
One JSON file per schema version; anything missing, unreadable or from
another version loads as the default empty state.
"""
import os
from pathlib import Path

from pydantic import ValidationError

from botct_client.constants import STATE_KEY
from botct_client.models import PlayerRecord, StoredState
from botct_client.player import Player
from botct_client.roster import AppState


def state_to_document(state: AppState) -> StoredState:
    """Convert the in-memory state into its stored form."""
    return StoredState(
        players=[PlayerRecord(**player.to_dict()) for player in state.players],
        view_mode=state.view_mode,
    )


def document_to_state(document: StoredState) -> AppState:
    """Convert a validated stored document back into application state."""
    return AppState(
        players=[Player.from_dict(record.model_dump()) for record in document.players],
        view_mode=document.view_mode,
    )


class StateStore:
    """Reads and writes the tracker state under a versioned key."""

    def __init__(self, directory: str | os.PathLike[str], key: str = STATE_KEY):
        """Initialize the store.

        Args:
            directory: Folder holding the state file (created on first save)
            key: Versioned storage key, used as the file name
        """
        self._directory: Path = Path(directory)
        self._key: str = key

    @property
    def path(self) -> Path:
        return self._directory / f"{self._key}.json"

    def load(self) -> AppState:
        """Load the saved state, or the default state if there is none usable."""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return AppState()
        except OSError as e:
            print(f"[StateStore] Could not read {self.path}: {e}")
            return AppState()

        # Bad UTF-8 surfaces here as a ValidationError too
        try:
            document = StoredState.model_validate_json(raw)
        except ValidationError as e:
            print(f"[StateStore] Discarding malformed state in {self.path}: {e.error_count()} error(s)")
            return AppState()

        state = document_to_state(document)
        print(f"[StateStore] Loaded {len(state.players)} player(s) from {self.path}")
        return state

    def save(self, state: AppState) -> None:
        """Write the full state document.

        Raises:
            OSError: If the file cannot be written
        """
        document = state_to_document(state)
        self._directory.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(".tmp")
        tmp_path.write_text(document.model_dump_json(by_alias=True), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"StateStore(path={self.path})"
