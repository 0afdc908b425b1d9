"""
Seating chart rendering and PNG export.
Paints the table circle, the player names and the death marks onto a
pygame surface, and saves that surface as an image.
"""
import os
from datetime import datetime
from pathlib import Path
from typing import Sequence

import pygame

from botct_client.constants import (
    PAPER_WHITE, INK_BLACK, DEAD_MARK_HALF_WIDTH, NAME_BASELINE_OFFSET,
    NAME_MAX_WIDTH, NAME_FONT_SIZE
)
from botct_client.player import Player
from botct_client.seating import get_table_circle, get_seat_positions


def render_table(surface: pygame.Surface, players: Sequence[Player]) -> None:
    """Fully repaint the seating chart.

    Args:
        surface: Surface to draw on; its size drives the layout
        players: Roster in seating order
    """
    width, height = surface.get_size()
    surface.fill(PAPER_WHITE)

    # Table outline
    table = get_table_circle(width, height)
    if table.radius > 0:
        pygame.draw.circle(surface, INK_BLACK, (table.x, table.y), table.radius, 1)

    font = pygame.font.Font(None, NAME_FONT_SIZE)

    for seat in get_seat_positions(width, height, players):
        _render_name(surface, font, seat.player.name, seat.x, seat.y)

        if seat.player.dead:
            _render_dead_mark(surface, seat.x, seat.y)


def _render_name(surface: pygame.Surface, font: pygame.font.Font, name: str, x: float, y: float) -> None:
    """Draw a name centred on x with its baseline NAME_BASELINE_OFFSET below y."""
    if not name:
        return

    text = font.render(name, True, INK_BLACK)
    # Squeeze long names rather than letting them run into neighbours
    if text.get_width() > NAME_MAX_WIDTH:
        text = pygame.transform.scale(text, (NAME_MAX_WIDTH, text.get_height()))

    text_rect = text.get_rect(centerx=round(x))
    text_rect.top = round(y + NAME_BASELINE_OFFSET - font.get_ascent())
    surface.blit(text, text_rect)


def _render_dead_mark(surface: pygame.Surface, x: float, y: float) -> None:
    """Draw an X centred on the seat."""
    w = DEAD_MARK_HALF_WIDTH
    pygame.draw.line(surface, INK_BLACK, (x - w, y - w), (x + w, y + w))
    pygame.draw.line(surface, INK_BLACK, (x - w, y + w), (x + w, y - w))


def export_filename(now: datetime) -> str:
    """Name for an exported chart, e.g. botct-table-21_5_9.png."""
    return f"botct-table-{now.hour}_{now.minute}_{now.second}.png"


def export_table(
    surface: pygame.Surface,
    directory: str | os.PathLike[str],
    now: datetime | None = None,
) -> Path:
    """Save the rendered chart as a PNG file.

    Args:
        surface: Rendered seating chart
        directory: Folder to write into (created if missing)
        now: Wall-clock time used in the file name (defaults to now)

    Returns:
        Path of the written file

    Raises:
        OSError: If the directory cannot be created
        pygame.error: If the image cannot be written
    """
    path = Path(directory) / export_filename(now or datetime.now())
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(surface, str(path))
    return path
