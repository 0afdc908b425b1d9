"""
Player Class - One seat at the table.
Holds the stable id, the display name and the dead flag.
"""
import uuid
from typing import Any


class Player:
    """Represents a player on the roster."""

    def __init__(self, player_id: str, name: str = "", dead: bool = False):
        """Initialize a player.

        Args:
            player_id: Unique identifier, stable across renames and reorders
            name: Display name (may be empty)
            dead: Whether the player is marked dead
        """
        self._id: str = player_id
        self._name: str = name
        self._dead: bool = dead

    @classmethod
    def new(cls) -> "Player":
        """Create an unnamed, alive player with a fresh id."""
        return cls(str(uuid.uuid4()))

    @property
    def id(self) -> str:
        """Get player ID."""
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def dead(self) -> bool:
        return self._dead

    @dead.setter
    def dead(self, value: bool) -> None:
        self._dead = value

    # Serialization
    def to_dict(self) -> dict[str, Any]:
        """Serialize player state for storage.

        Returns:
            Dictionary with id, name and dead keys
        """
        return {
            "id": self._id,
            "name": self._name,
            "dead": self._dead
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Player":
        """Build a player from a stored dictionary.

        Args:
            data: Dictionary with at least an "id" key
        """
        return cls(data["id"], data.get("name", ""), data.get("dead", False))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"Player(id={self._id}, name={self._name!r}, dead={self._dead})"
