"""Scene classes for the blackjack table."""

from pygame_ui.scenes.table_scene import TableScene

__all__ = ["TableScene"]
