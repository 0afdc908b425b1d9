"""
TableController Class - Owns the application state and the main loop.
Routes events to the active view, applies roster mutations, and schedules
debounced saves of the state.
"""
import asyncio
import time
from typing import Callable

import pygame

from botct_client.constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, STATE_DIR, EXPORT_DIR, SAVE_DEBOUNCE_SECONDS
)
from botct_client.debounce import Debouncer
from botct_client.models import ViewMode
from botct_client.roster import AppState, MutationResult
from botct_client.storage import StateStore
from botct_client.views import BaseView, RosterView, TableView


class TableController:
    """Master class that manages the whole tracker."""

    def __init__(
        self,
        screen: pygame.Surface | None = None,
        store: StateStore | None = None,
        clock: Callable[[], float] = time.monotonic,
        export_dir: str = EXPORT_DIR,
    ):
        """Initialize the controller.

        Args:
            screen: Surface to draw on (opens a window when omitted)
            store: Where state is loaded from and saved to
            clock: Time source for the save debounce
            export_dir: Folder for exported chart images
        """
        # Pygame setup
        pygame.init()
        if screen is None:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption("Blood on the Clocktower - Table Tracker")
        self._screen: pygame.Surface = screen
        self._clock: pygame.time.Clock = pygame.time.Clock()
        self._running: bool = True

        # State and persistence
        self._store: StateStore = store or StateStore(STATE_DIR)
        self._state: AppState = self._store.load()
        self._debouncer: Debouncer = Debouncer(SAVE_DEBOUNCE_SECONDS, clock)
        self._export_dir: str = export_dir

        # Views
        self._views: dict[ViewMode, BaseView] = {
            ViewMode.ROSTER: RosterView(self._screen, self),
            ViewMode.TABLE: TableView(self._screen, self),
        }
        self._current_view: BaseView = self._views[self._state.view_mode]
        self._current_view.on_enter()

    @property
    def state(self) -> AppState:
        """Get the application state."""
        return self._state

    @property
    def current_view(self) -> BaseView:
        return self._current_view

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    @property
    def export_dir(self) -> str:
        return self._export_dir

    @property
    def running(self) -> bool:
        return self._running

    def view(self, mode: ViewMode) -> BaseView:
        return self._views[mode]

    # State changes
    def apply(self, mutator: Callable[..., MutationResult], *args, **kwargs) -> bool:
        """Run a roster mutator against the state.

        Args:
            mutator: Function taking the state (plus args) and returning (state, changed)

        Returns:
            True if the state changed
        """
        previous_mode = self._state.view_mode
        self._state, changed = mutator(self._state, *args, **kwargs)
        if not changed:
            return False

        self.schedule_save()
        if self._state.view_mode != previous_mode:
            self.switch_view(self._state.view_mode)
        return True

    def switch_view(self, mode: ViewMode) -> None:
        """Activate the view for a view mode.

        Args:
            mode: The mode to show
        """
        new_view = self._views[mode]
        if new_view is self._current_view:
            return
        print(f"[TableController] View transition: {type(self._current_view).__name__} -> {type(new_view).__name__}")
        self._current_view.on_leave()
        self._current_view = new_view
        self._current_view.on_enter()

    def schedule_save(self) -> None:
        """Save the state once edits have been quiet for the debounce delay."""
        self._debouncer.schedule(self._save)

    def _save(self) -> None:
        try:
            self._store.save(self._state)
        except OSError as e:
            print(f"[TableController] Save failed: {e}")
            return
        print(f"[TableController] Saved {len(self._state.players)} player(s)")

    # Event handling
    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            else:
                self._current_view.handle_event(event)

    def update(self, dt: float) -> None:
        """Update the active view and fire a due save.

        Args:
            dt: Delta time in seconds
        """
        self._current_view.update(dt)
        self._debouncer.poll()

    def render(self) -> None:
        """Render the active view."""
        self._current_view.render()
        pygame.display.flip()

    def shutdown(self) -> None:
        """Write any pending save and close pygame."""
        self._debouncer.flush()
        pygame.quit()

    # Main loop
    async def run(self) -> None:
        """Main async loop (60 FPS)."""
        try:
            while self._running:
                dt = self._clock.tick(FPS) / 1000.0

                self.handle_events()
                self.update(dt)
                self.render()

                # Yield to other tasks
                await asyncio.sleep(0)
        finally:
            self.shutdown()
