"""
Common methods implemented by Pong games
"""

from abc import ABC, abstractmethod
import pygame


class BasePongGame(ABC):
    """
    Interface implemented by Pong games
    """

    @abstractmethod
    def update_state(self):
        """Advance the simulation by one tick."""

    @abstractmethod
    def draw_state(self):
        """Render the current game state."""

    @abstractmethod
    def tick(self):
        """Callback invoked once per fixed interval: update, then draw."""

    @abstractmethod
    def handle_event(self, event: pygame.event.Event):
        """Apply a keyboard event to the game state."""

    @abstractmethod
    def close(self):
        """Close the Pygame window."""

    @abstractmethod
    def run(self):
        """Main game loop for human play"""
