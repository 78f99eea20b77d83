# pylint: disable=no-member
"""
Functionality related to the various game objects: the ball, the paddles
and the players owning them.
"""

import random
from abc import ABC, abstractmethod
import pygame
from duel_pong.models.pong import Action, GameConfig, Velocity
from duel_pong.utils.utils import clamp, is_in_range, random_num_between
from duel_pong.logger.logger import logger


class GameObject(ABC):
    """
    Abstract class with methods to be implemented by various game objects.
    """

    def __init__(self, config: GameConfig, x: float, y: float):
        self.config = config
        self.x = x
        self.y = y

    @abstractmethod
    def draw(self, surface: pygame.Surface):
        """
        Draw the game object on the given surface
        """


class Paddle(GameObject):
    """
    Represents a paddle that can move vertically between the top and the
    bottom of the playfield. Its x never changes.
    """

    @staticmethod
    def new(config: GameConfig, x: float) -> "Paddle":
        """
        Create a new paddle vertically centered in the playfield
        """
        return Paddle(config, x, config.paddle_start_y)

    def __init__(self, config: GameConfig, x: float, y: float):
        super().__init__(config, x, y)
        self.width = config.paddle_width
        self.height = config.paddle_height

    def set_y(self, new_y: float):
        """
        Moves the paddle to new_y, keeping it fully inside the playfield
        """
        self.y = clamp(new_y, 0, self.config.max_paddle_y)

    def step_up(self):
        self.set_y(self.y - self.config.paddle_step)

    def step_down(self):
        self.set_y(self.y + self.config.paddle_step)

    def draw(self, surface: pygame.Surface):
        pygame.draw.rect(
            surface,
            self.config.foreground_color,
            pygame.Rect(self.x, self.y, self.width, self.height),
        )


class Player:
    """
    A player owns a paddle, a score and the action requested by the keyboard
    """

    def __init__(self, config: GameConfig, paddle_x: float, board_x: float):
        self.config = config
        self.score = 0
        self.board_x = board_x
        self.action = Action.STOP
        self.paddle = Paddle.new(config, paddle_x)

    def make_action(self):
        """
        Moves the paddle one step according to the pending action
        """
        if self.action == Action.UP:
            self.paddle.step_up()
        elif self.action == Action.DOWN:
            self.paddle.step_down()

    def draw(self, surface: pygame.Surface, font: pygame.font.Font):
        """
        Draws the score with its baseline at the board position, then the paddle
        """
        score_surface = font.render(str(self.score), True, self.config.foreground_color)
        surface.blit(
            score_surface,
            score_surface.get_rect(bottomleft=(self.board_x, self.config.board_y)),
        )
        self.paddle.draw(surface)


class Ball(GameObject):
    """
    Represents the ball. Collisions are checked against its center and its
    horizontal extent only: a paddle is hit when the leading edge overlaps the
    paddle horizontally and the center lies within the paddle vertically.
    """

    @staticmethod
    def new(config: GameConfig, rng=random) -> "Ball":
        """
        Create a new ball at the center of the playfield
        """
        return Ball(config, config.ball_start_x, config.ball_start_y, rng)

    def __init__(self, config: GameConfig, x: float, y: float, rng=random):
        super().__init__(config, x, y)
        self.radius = config.ball_radius
        self.velocity = Velocity(x=config.ball_start_dx, y=config.ball_start_dy)
        self.rng = rng

    def move(self, left_player: Player, right_player: Player):
        """
        Applies bounces and scoring for the current position, then advances
        the ball by its velocity
        """
        if self.should_bounce_from_top_wall() or self.should_bounce_from_bottom_wall():
            self.velocity.y = -self.velocity.y
            logger.debug(f"Wall bounce at ({self.x:.2f}, {self.y:.2f})")

        if self.should_bounce_from_left_paddle(
            left_player.paddle
        ) or self.should_bounce_from_right_paddle(right_player.paddle):
            self.velocity.x = -self.velocity.x
            logger.debug(f"Paddle bounce at ({self.x:.2f}, {self.y:.2f})")

        if self.is_outside_on_left():
            self.move_to_start()
            right_player.score += 1
            logger.info(
                f"Right player scores: {left_player.score} - {right_player.score}"
            )
        elif self.is_outside_on_right():
            self.move_to_start()
            left_player.score += 1
            logger.info(
                f"Left player scores: {left_player.score} - {right_player.score}"
            )

        self.x += self.velocity.x
        self.y += self.velocity.y

    def move_to_start(self):
        """
        Puts the ball back in the center with a new vertical direction.
        The ball gets faster after every point.
        """
        self.x = self.config.ball_start_x
        self.y = self.config.ball_start_y
        self.velocity.y = self.draw_direction()
        self.velocity.x = self.faster_dx()

    def draw_direction(self) -> int:
        """
        Draws the vertical speed used after a point from
        [ball_direction_draw_min, ball_direction_draw_max). Draws above
        ball_direction_flip_above send the ball upwards, so with the defaults
        the result is one of -3, 1 or 2.
        """
        direction = random_num_between(
            self.config.ball_direction_draw_min,
            self.config.ball_direction_draw_max,
            self.rng,
        )
        if direction > self.config.ball_direction_flip_above:
            return -direction
        return direction

    def faster_dx(self) -> float:
        if self.velocity.x > 0:
            return self.velocity.x + self.config.ball_speedup
        return self.velocity.x - self.config.ball_speedup

    def should_bounce_from_top_wall(self) -> bool:
        return self.y < self.radius and self.velocity.y < 0

    def should_bounce_from_bottom_wall(self) -> bool:
        return self.y + self.radius > self.config.screen_height and self.velocity.y > 0

    def is_on_the_same_height_as_paddle(self, paddle: Paddle) -> bool:
        return is_in_range(self.y, paddle.y, paddle.y + paddle.height)

    def should_bounce_from_left_paddle(self, paddle: Paddle) -> bool:
        """
        Check if the ball moving left overlaps the left paddle
        """
        return (
            self.velocity.x < 0
            and is_in_range(self.x - self.radius, paddle.x, paddle.x + paddle.width)
            and self.is_on_the_same_height_as_paddle(paddle)
        )

    def should_bounce_from_right_paddle(self, paddle: Paddle) -> bool:
        """
        Check if the ball moving right overlaps the right paddle
        """
        return (
            self.velocity.x > 0
            and is_in_range(self.x + self.radius, paddle.x, paddle.x + paddle.width)
            and self.is_on_the_same_height_as_paddle(paddle)
        )

    def is_outside_on_left(self) -> bool:
        return self.x + self.radius < 0

    def is_outside_on_right(self) -> bool:
        return self.x - self.radius > self.config.screen_width

    def draw(self, surface: pygame.Surface):
        pygame.draw.circle(
            surface, self.config.foreground_color, (self.x, self.y), self.radius
        )
