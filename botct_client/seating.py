"""
Seating layout for the table chart.
Places players evenly around a centred circle and maps pointer positions
back to the nearest seat. Pure functions only, no pygame dependency.
"""
import math
from dataclasses import dataclass
from typing import Sequence

from botct_client.constants import TABLE_INSET, SEAT_OFFSET, HIT_RADIUS
from botct_client.player import Player


@dataclass(frozen=True)
class TableCircle:
    """The circle the seats are arranged around."""
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class SeatPosition:
    """Where a player sits on the drawing surface."""
    x: float
    y: float
    player: Player


def get_table_circle(width: float, height: float) -> TableCircle:
    """Centre the table on the surface, leaving TABLE_INSET for the labels.

    Args:
        width: Surface width
        height: Surface height
    """
    return TableCircle(
        x=width / 2,
        y=height / 2,
        radius=min(width, height) / 2 - TABLE_INSET,
    )


def get_seat_positions(width: float, height: float, players: Sequence[Player]) -> list[SeatPosition]:
    """Spread players evenly around the table, first player due east.

    Args:
        width: Surface width
        height: Surface height
        players: Roster in seating order

    Returns:
        One SeatPosition per player, in roster order (empty for no players)
    """
    player_count = len(players)
    if player_count == 0:
        return []

    table = get_table_circle(width, height)
    seat_radius = table.radius + SEAT_OFFSET
    angle_step = (math.pi * 2) / player_count

    return [
        SeatPosition(
            x=table.x + seat_radius * math.cos(angle_step * i),
            y=table.y + seat_radius * math.sin(angle_step * i),
            player=player,
        )
        for i, player in enumerate(players)
    ]


def get_distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Euclidean distance between two points."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return math.sqrt(dx * dx + dy * dy)


def find_seat_at(
    width: float,
    height: float,
    players: Sequence[Player],
    point: tuple[float, float],
) -> SeatPosition | None:
    """Find the seat nearest to a surface-local point.

    Exact ties go to the lower roster index.

    Args:
        width: Surface width
        height: Surface height
        players: Roster in seating order
        point: Pointer position in surface coordinates

    Returns:
        The nearest seat if it is closer than HIT_RADIUS, otherwise None
    """
    seats = get_seat_positions(width, height, players)
    if not seats:
        return None

    # sorted() is stable, so the first of several equal distances wins
    nearest, distance = sorted(
        ((seat, get_distance((seat.x, seat.y), point)) for seat in seats),
        key=lambda pair: pair[1],
    )[0]

    if distance < HIT_RADIUS:
        return nearest
    return None


def to_surface_coords(
    pos: tuple[float, float],
    display_rect: tuple[float, float, float, float],
    surface_size: tuple[float, float],
) -> tuple[float, float]:
    """Convert a window pointer position into drawing-surface coordinates.

    The chart surface is shown scaled inside display_rect, so the offset is
    removed first and the result rescaled by logical size / displayed size.

    Args:
        pos: Pointer position in window pixels
        display_rect: (left, top, width, height) of the displayed surface
        surface_size: (width, height) of the surface's own resolution
    """
    left, top, display_width, display_height = display_rect
    scale_x = surface_size[0] / display_width
    scale_y = surface_size[1] / display_height
    return (
        (pos[0] - left) * scale_x,
        (pos[1] - top) * scale_y,
    )
