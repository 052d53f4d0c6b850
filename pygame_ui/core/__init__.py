"""Core systems for the pygame UI."""

from pygame_ui.core.scene_manager import SceneManager

__all__ = ["SceneManager"]
