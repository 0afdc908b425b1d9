"""
Roster View
Editable player list: one name field and delete button per player, plus
add, shuffle and view-table actions.
"""
import pygame
from botct_client.views.base_view import BaseView
from botct_client.ui_widgets import Button, TextInput
from botct_client.roster import (
    add_player, remove_player, rename_player, shuffle_players, toggle_view_mode
)
from botct_client.constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BONE_WHITE, CANDLE_YELLOW, GRIMOIRE_DARK,
    BUTTON_PURPLE, BUTTON_GREEN, DELETE_RED, ROW_HEIGHT
)

LIST_X = 50
LIST_Y = 110
LIST_WIDTH = 560
LIST_HEIGHT = SCREEN_HEIGHT - LIST_Y - 120


class PlayerRow:
    """Name field and delete button for one player."""

    def __init__(self, player_id: str, name: str, on_rename, on_remove):
        self.player_id = player_id
        self.name_input = TextInput(
            LIST_X, LIST_Y, LIST_WIDTH - 60, ROW_HEIGHT - 8,
            name, on_change=on_rename, placeholder="Player name"
        )
        self.btn_delete = Button(
            LIST_X + LIST_WIDTH - 50, LIST_Y, 50, ROW_HEIGHT - 8,
            "X", DELETE_RED, on_remove, border_radius=5
        )

    def move_to(self, y: int) -> None:
        self.name_input.rect.y = y
        self.btn_delete.rect.y = y


class RosterView(BaseView):
    def __init__(self, screen, controller):
        super().__init__(screen, controller)

        button_y = SCREEN_HEIGHT - 90
        self.btn_add = Button(
            LIST_X, button_y, 200, 50,
            "Add Player", BUTTON_GREEN, self._on_add
        )
        self.btn_shuffle = Button(
            LIST_X + 220, button_y, 220, 50,
            "Shuffle players", BUTTON_PURPLE, self._on_shuffle
        )
        self.btn_table = Button(
            LIST_X + 460, button_y, 200, 50,
            "View Table", CANDLE_YELLOW, self._on_view_table, text_color=(0, 0, 0)
        )

        self.rows: dict[str, PlayerRow] = {}
        self.scroll_offset = 0

    def on_enter(self):
        self.sync_rows()

    def _on_add(self):
        self.controller.apply(add_player)
        self.sync_rows()
        # Keep the new, empty row in view
        self.scroll_offset = self._max_scroll()
        self.sync_rows()

    def _on_shuffle(self):
        self.controller.apply(shuffle_players)
        self.sync_rows()

    def _on_view_table(self):
        self.controller.apply(toggle_view_mode)

    def _on_remove(self, player_id):
        self.controller.apply(remove_player, player_id)
        self.sync_rows()

    def _on_rename(self, player_id, name):
        self.controller.apply(rename_player, player_id, name)

    def _max_scroll(self):
        content_height = len(self.controller.state.players) * ROW_HEIGHT
        return max(0, content_height - LIST_HEIGHT)

    def sync_rows(self):
        """Match the row widgets to the roster order and scroll position."""
        players = self.controller.state.players
        live_ids = {player.id for player in players}

        for player_id in list(self.rows):
            if player_id not in live_ids:
                del self.rows[player_id]

        self.scroll_offset = min(max(self.scroll_offset, 0), self._max_scroll())

        for index, player in enumerate(players):
            row = self.rows.get(player.id)
            if row is None:
                row = PlayerRow(
                    player.id, player.name,
                    on_rename=lambda name, pid=player.id: self._on_rename(pid, name),
                    on_remove=lambda pid=player.id: self._on_remove(pid),
                )
                self.rows[player.id] = row
            elif not row.name_input.active:
                row.name_input.text = player.name
            row.move_to(LIST_Y + index * ROW_HEIGHT - self.scroll_offset)
            # Hidden rows get no events, so they must not hold focus
            if not self._is_visible(row):
                row.name_input.active = False

    def _is_visible(self, row):
        """Whether the row's whole height fits inside the list area."""
        top = row.name_input.rect.top
        return top >= LIST_Y and top + ROW_HEIGHT <= LIST_Y + LIST_HEIGHT + 1

    def visible_rows(self):
        """Visible rows in roster order."""
        rows = []
        for player in self.controller.state.players:
            row = self.rows.get(player.id)
            if row is not None and self._is_visible(row):
                rows.append(row)
        return rows

    def handle_event(self, event):
        if event.type == pygame.MOUSEWHEEL:
            self.scroll_offset -= event.y * ROW_HEIGHT
            self.sync_rows()
            return

        rows = self.visible_rows()
        for row in rows:
            row.name_input.handle_event(event)

        # Removing a row shifts the next one under the pointer; one delete per click
        for row in rows:
            if row.btn_delete.handle_event(event):
                break

        self.btn_add.handle_event(event)
        self.btn_shuffle.handle_event(event)
        self.btn_table.handle_event(event)

    def update(self, dt):
        for row in self.rows.values():
            row.name_input.update(dt)

    def render(self):
        self.screen.fill(GRIMOIRE_DARK)

        # Header
        font_header = pygame.font.Font(None, 56)
        header = font_header.render("Players", True, CANDLE_YELLOW)
        self.screen.blit(header, (LIST_X, 40))

        font_count = pygame.font.Font(None, 28)
        count = len(self.controller.state.players)
        dead = sum(1 for player in self.controller.state.players if player.dead)
        summary = font_count.render(f"{count} seated, {count - dead} alive", True, BONE_WHITE)
        self.screen.blit(summary, (LIST_X + 200, 58))

        # Rows
        rows = self.visible_rows()
        if not rows:
            empty = font_count.render("No players yet. Add one below.", True, (150, 150, 150))
            self.screen.blit(empty, (LIST_X, LIST_Y + 10))
        for row in rows:
            row.name_input.draw(self.screen)
            row.btn_delete.draw(self.screen)

        # Scroll hint
        if self._max_scroll() > 0:
            hint = font_count.render("Scroll for more", True, (150, 150, 150))
            self.screen.blit(hint, (LIST_X + LIST_WIDTH + 20, LIST_Y + LIST_HEIGHT - 20))

        # Buttons
        self.btn_add.draw(self.screen)
        self.btn_shuffle.draw(self.screen)
        self.btn_table.draw(self.screen)
