"""Main entry point for the MockJack pygame UI."""

import logging
import sys
from random import Random

import pygame

from config import config
from core.game import new_game
from logging_utils import setup_logging
from pygame_ui.config import DIMENSIONS
from pygame_ui.core.scene_manager import SceneManager
from pygame_ui.scenes.table_scene import TableScene

logger = logging.getLogger(__name__)


class Application:
    """Main application class managing the game loop."""

    def __init__(self):
        pygame.init()
        pygame.display.set_caption(config.window_title)

        self.screen = pygame.display.set_mode(
            (DIMENSIONS.SCREEN_WIDTH, DIMENSIONS.SCREEN_HEIGHT)
        )
        self.clock = pygame.time.Clock()
        self.running = True

        rng = Random(config.game.seed) if config.game.seed is not None else None
        self.game = new_game(config.game.num_decks, rng=rng)
        logger.info("Starting with a %d-deck shoe", self.game.deck.num_decks)

        self.scene_manager = SceneManager(self.screen)
        self.scene_manager.register("table", TableScene(self.game))
        self.scene_manager.change_to("table")

    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                continue

            self.scene_manager.handle_event(event)

    def run(self) -> None:
        """Main application loop."""
        while self.running:
            dt = self.clock.tick(DIMENSIONS.TARGET_FPS) / 1000.0

            self.handle_events()
            self.scene_manager.update(dt)
            self.scene_manager.draw()

        pygame.quit()
        sys.exit()


def main() -> None:
    """Entry point for the pygame UI."""
    setup_logging(config.effective_log_level)
    app = Application()
    app.run()


if __name__ == "__main__":
    main()
