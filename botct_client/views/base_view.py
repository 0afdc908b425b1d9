"""
Base View Class
Abstract base class for the tracker screens.
"""
import pygame
from typing import Any
from abc import ABC, abstractmethod


class BaseView(ABC):
    """Abstract base class for all views."""

    def __init__(self, screen: pygame.Surface, controller: Any):
        """
        Initialize the view.

        Args:
            screen: The window surface.
            controller: Reference to the owning TableController.
        """
        self.screen = screen
        self.controller = controller

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> None:
        """Handle pygame events (clicks, keys, etc)."""
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update view state (animations, logic)."""
        pass

    @abstractmethod
    def render(self) -> None:
        """Render the view to the screen."""
        pass

    def on_enter(self) -> None:
        """Called when this view becomes active."""
        pass

    def on_leave(self) -> None:
        """Called when this view is no longer active."""
        pass
