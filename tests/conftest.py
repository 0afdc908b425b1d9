"""
Shared fixtures. pygame runs headless for the whole test session.
"""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from botct_client.player import Player
from botct_client.storage import StateStore
from botct_client.table_controller import TableController


class FakeClock:
    """Virtual clock for debounce tests."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingStore(StateStore):
    """StateStore that records how often it was written."""

    def __init__(self, directory):
        super().__init__(directory)
        self.saves = []

    def save(self, state):
        self.saves.append([player.to_dict() for player in state.players])
        super().save(state)


@pytest.fixture
def pygame_env():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def store(tmp_path):
    return CountingStore(tmp_path / "state")


@pytest.fixture
def controller(store, fake_clock, tmp_path):
    tracker = TableController(store=store, clock=fake_clock, export_dir=str(tmp_path / "exports"))
    yield tracker
    pygame.quit()


def make_players(*names: str) -> list[Player]:
    return [Player(f"id-{i}", name) for i, name in enumerate(names)]
