"""
Table View
Shows the seating chart, toggles deaths on click and exports the chart.
"""
import pygame
from botct_client.views.base_view import BaseView
from botct_client.ui_widgets import Button
from botct_client.chart import render_table, export_table
from botct_client.roster import toggle_dead, toggle_view_mode
from botct_client.seating import find_seat_at, to_surface_coords
from botct_client.constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BONE_WHITE, CANDLE_YELLOW, GRIMOIRE_DARK,
    BUTTON_PURPLE, BUTTON_GREEN, TABLE_SURFACE_WIDTH, TABLE_SURFACE_HEIGHT
)

CHART_MARGIN = 40


class TableView(BaseView):
    def __init__(self, screen, controller):
        super().__init__(screen, controller)

        # Chart is shown scaled down to fit the window height
        display_size = min(SCREEN_HEIGHT - 2 * CHART_MARGIN, SCREEN_WIDTH - 300)
        self.display_rect = pygame.Rect(CHART_MARGIN, CHART_MARGIN, display_size, display_size)

        side_x = self.display_rect.right + 30
        self.btn_export = Button(
            side_x, CHART_MARGIN, 220, 50,
            "Export", BUTTON_GREEN, self._on_export
        )
        self.btn_back = Button(
            side_x, CHART_MARGIN + 70, 220, 50,
            "Back to Player List", BUTTON_PURPLE, self._on_back, font_size=28
        )

        # Drawing surface only exists while the view is shown
        self.chart: pygame.Surface | None = None
        self.status_message = ""

    def on_enter(self):
        self.chart = pygame.Surface((TABLE_SURFACE_WIDTH, TABLE_SURFACE_HEIGHT))
        self.status_message = ""

    def on_leave(self):
        self.chart = None

    def _on_back(self):
        self.controller.apply(toggle_view_mode)

    def _on_export(self):
        self.export()

    def export(self):
        """Save the current chart as PNG. Returns the path, or None."""
        if self.chart is None:
            return None

        render_table(self.chart, self.controller.state.players)
        try:
            path = export_table(self.chart, self.controller.export_dir)
        except (OSError, pygame.error) as e:
            print(f"[TableView] Export failed: {e}")
            self.status_message = "Export failed"
            return None

        print(f"[TableView] Exported chart to {path}")
        self.status_message = f"Saved {path.name}"
        return path

    def handle_click(self, pos):
        """Toggle the dead flag of the seat under a window position."""
        if self.chart is None or not self.display_rect.collidepoint(pos):
            return None

        width, height = self.chart.get_size()
        point = to_surface_coords(pos, tuple(self.display_rect), (width, height))
        seat = find_seat_at(width, height, self.controller.state.players, point)
        if seat is None:
            return None

        self.controller.apply(toggle_dead, seat.player.id)
        return seat.player

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.handle_click(event.pos)

        self.btn_export.handle_event(event)
        self.btn_back.handle_event(event)

    def update(self, dt):
        pass

    def render(self):
        self.screen.fill(GRIMOIRE_DARK)

        if self.chart is not None:
            render_table(self.chart, self.controller.state.players)
            scaled = pygame.transform.scale(self.chart, self.display_rect.size)
            self.screen.blit(scaled, self.display_rect)

        self.btn_export.draw(self.screen)
        self.btn_back.draw(self.screen)

        font = pygame.font.Font(None, 24)
        hint = font.render("Click a name to mark them dead", True, BONE_WHITE)
        self.screen.blit(hint, (self.btn_back.rect.x, self.btn_back.rect.bottom + 30))

        if self.status_message:
            status = font.render(self.status_message, True, CANDLE_YELLOW)
            self.screen.blit(status, (self.btn_back.rect.x, self.btn_back.rect.bottom + 60))
