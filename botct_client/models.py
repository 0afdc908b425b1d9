"""
models.py
Data Transfer Objects for the stored tracker state.
Uses Pydantic V2; field names match the JSON document on disk.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# --- Enums for strict type safety ---

class ViewMode(str, Enum):
    ROSTER = "roster"
    TABLE = "table"

# --- Stored document ---

class PlayerRecord(BaseModel):
    """One player as written to storage."""
    id: str
    name: str = ""
    dead: bool = False

class StoredState(BaseModel):
    """The whole persisted document: {players, viewMode}."""
    players: list[PlayerRecord] = Field(default_factory=list)
    view_mode: ViewMode = Field(default=ViewMode.ROSTER, alias="viewMode")

    # Pydantic V2 Config
    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _unique_ids(self) -> "StoredState":
        ids = [player.id for player in self.players]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate player ids")
        return self
