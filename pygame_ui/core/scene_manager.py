"""Scene manager for switching between scenes."""

from typing import Dict, Optional, TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from pygame_ui.scenes.table_scene import TableScene


class SceneManager:
    """Manages game scenes by name and forwards the main loop to the active one."""

    def __init__(self, screen: pygame.Surface):
        """Initialize the scene manager.

        Args:
            screen: The main pygame display surface
        """
        self.screen = screen
        self._scenes: Dict[str, "TableScene"] = {}
        self._current: Optional["TableScene"] = None

    @property
    def current_scene(self) -> Optional["TableScene"]:
        """Get the currently active scene."""
        return self._current

    def register(self, name: str, scene: "TableScene") -> None:
        """Register a scene with a name."""
        self._scenes[name] = scene

    def get_scene(self, name: str) -> Optional["TableScene"]:
        return self._scenes.get(name)

    def change_to(self, scene_name: str) -> None:
        """Change to a different scene (replaces current).

        Raises:
            ValueError: If no scene is registered under ``scene_name``
        """
        if scene_name not in self._scenes:
            raise ValueError(f"Scene '{scene_name}' not registered")

        if self._current:
            self._current.on_exit()
        self._current = self._scenes[scene_name]
        self._current.on_enter()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Pass event to current scene."""
        if self._current:
            return self._current.handle_event(event)
        return False

    def update(self, dt: float) -> None:
        if self._current:
            self._current.update(dt)

    def draw(self) -> None:
        """Draw current scene and flip the display."""
        if self._current:
            self._current.draw(self.screen)
        else:
            self.screen.fill((0, 0, 0))
        pygame.display.flip()
