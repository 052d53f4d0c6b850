"""Pytest fixtures for pygame UI tests (headless)."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from core.game import BlackjackGame
from pygame_ui.config import DIMENSIONS
from pygame_ui.core.scene_manager import SceneManager
from pygame_ui.scenes.table_scene import TableScene


@pytest.fixture(scope="session", autouse=True)
def pygame_fonts():
    """Fonts are the only pygame subsystem the table needs."""
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def surface():
    """An off-screen surface the size of the window."""
    return pygame.Surface((DIMENSIONS.SCREEN_WIDTH, DIMENSIONS.SCREEN_HEIGHT), pygame.SRCALPHA)


@pytest.fixture
def table_game(rng):
    return BlackjackGame(num_decks=1, rng=rng)


@pytest.fixture
def table(table_game, surface):
    """A table scene that has been entered through a scene manager."""
    manager = SceneManager(surface)
    scene = TableScene(table_game)
    manager.register("table", scene)
    manager.change_to("table")
    return scene


def click(button):
    """Mouse events for a full left click in the middle of a button."""
    pos = button.rect.center
    return [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1),
        pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1),
    ]


@pytest.fixture
def click_events():
    return click


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


@pytest.fixture
def key_event():
    return key
