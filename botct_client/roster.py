"""
Roster Store
Application state (ordered players plus view mode) and the operations the
UI applies to it. Every mutator takes the state, changes it in place and
returns it together with a flag telling whether anything changed.
"""
import random
from dataclasses import dataclass, field

from botct_client.models import ViewMode
from botct_client.player import Player


@dataclass
class AppState:
    """Everything the tracker persists."""
    players: list[Player] = field(default_factory=list)
    view_mode: ViewMode = ViewMode.ROSTER

    def player_ids(self) -> list[str]:
        return [player.id for player in self.players]


MutationResult = tuple[AppState, bool]


def find_player(state: AppState, player_id: str) -> Player | None:
    """Get the player with a given id, or None."""
    for player in state.players:
        if player.id == player_id:
            return player
    return None


def add_player(state: AppState) -> MutationResult:
    """Append an unnamed, alive player with a fresh id."""
    state.players.append(Player.new())
    return state, True


def remove_player(state: AppState, player_id: str) -> MutationResult:
    """Delete a player. Unknown ids are ignored."""
    player = find_player(state, player_id)
    if player is None:
        return state, False
    state.players.remove(player)
    return state, True


def rename_player(state: AppState, player_id: str, name: str) -> MutationResult:
    """Replace a player's name. Any string is accepted, including ""."""
    player = find_player(state, player_id)
    if player is None or player.name == name:
        return state, False
    player.name = name
    return state, True


def toggle_dead(state: AppState, player_id: str) -> MutationResult:
    """Flip a player's dead flag."""
    player = find_player(state, player_id)
    if player is None:
        return state, False
    player.dead = not player.dead
    return state, True


def shuffle_players(state: AppState, rng: random.Random | None = None) -> MutationResult:
    """Replace the seating order with a uniformly random permutation.

    Args:
        state: Application state
        rng: Random source (module-level random when omitted)
    """
    players = list(state.players)
    (rng or random).shuffle(players)
    state.players = players
    return state, True


def toggle_view_mode(state: AppState) -> MutationResult:
    """Switch between the roster list and the table chart."""
    if state.view_mode == ViewMode.ROSTER:
        state.view_mode = ViewMode.TABLE
    else:
        state.view_mode = ViewMode.ROSTER
    return state, True
