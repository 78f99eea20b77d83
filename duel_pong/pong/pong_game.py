# pylint: disable=no-member
"""
Functionality for combining the various parts of the two player Pong game
"""
import random
from typing import Optional
import pygame
from duel_pong.models.pong import Action, GameConfig
from duel_pong.pong.base_game import BasePongGame
from duel_pong.pong.game_object import Ball, Player
from duel_pong.logger.logger import logger


class PongGame(BasePongGame):
    """
    Two player Pong game class. The left player is p1, the right one is p2.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        headless: bool = False,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.headless = headless
        if not headless:
            pygame.init()
            self.screen = pygame.display.set_mode(
                (self.config.screen_width, self.config.screen_height)
            )
            pygame.display.set_caption(self.config.screen_caption)
            self.font = pygame.font.SysFont(
                self.config.font_name, self.config.font_size
            )
        else:
            # Off-screen surface, nothing is ever shown
            self.screen = pygame.Surface(
                (self.config.screen_width, self.config.screen_height)
            )
            self.font = None
        self.clock = pygame.time.Clock()

        self.paused = False
        self.ball = Ball.new(self.config, rng or random.Random())
        self.p1 = Player(self.config, self.config.paddle_p1_x, self.config.board_p1_x)
        self.p2 = Player(self.config, self.config.paddle_p2_x, self.config.board_p2_x)

    def update_state(self):
        """Advance the simulation by one tick."""
        self.ball.move(self.p1, self.p2)
        self.p1.make_action()
        self.p2.make_action()

    def draw_state(self):
        """Render the current game state."""
        if self.headless:
            return
        self.screen.fill(self.config.background_color)
        self.ball.draw(self.screen)
        self.p1.draw(self.screen, self.font)
        self.p2.draw(self.screen, self.font)
        pygame.display.flip()

    def tick(self):
        """
        Nothing happens while paused, not even drawing, so the screen keeps
        showing the frame from before the pause.
        """
        if self.paused:
            return
        self.update_state()
        self.draw_state()

    def handle_event(self, event: pygame.event.Event):
        """
        Key down sets a player's action, key up clears it again but only if
        the released key is the one that set it. The pause key toggles on key
        down only.
        """
        if event.type == pygame.KEYDOWN:
            if event.key == self.config.p1_up_key:
                self.p1.action = Action.UP
            elif event.key == self.config.p1_down_key:
                self.p1.action = Action.DOWN
            elif event.key == self.config.p2_up_key:
                self.p2.action = Action.UP
            elif event.key == self.config.p2_down_key:
                self.p2.action = Action.DOWN
            elif event.key == self.config.pause_key:
                self.paused = not self.paused
                logger.info("Game paused" if self.paused else "Game resumed")

        if event.type == pygame.KEYUP:
            if (event.key == self.config.p1_up_key and self.p1.action == Action.UP) or (
                event.key == self.config.p1_down_key and self.p1.action == Action.DOWN
            ):
                self.p1.action = Action.STOP
            elif (
                event.key == self.config.p2_up_key and self.p2.action == Action.UP
            ) or (
                event.key == self.config.p2_down_key and self.p2.action == Action.DOWN
            ):
                self.p2.action = Action.STOP

    def close(self):
        """Close the Pygame window."""
        pygame.quit()

    def run(self):
        """Main game loop for human play."""
        logger.info(
            f"Starting {self.config.screen_caption} "
            f"at {self.config.fps} ticks per second"
        )
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                self.handle_event(event)

            self.tick()
            self.clock.tick(self.config.fps)

    def run_headless(self, num_ticks: int):
        """
        Runs a fixed number of ticks as fast as possible without drawing
        """
        for _ in range(num_ticks):
            self.tick()
        logger.info(
            f"After {num_ticks} ticks the score is {self.p1.score} - {self.p2.score}"
        )
