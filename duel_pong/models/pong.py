# pylint: disable=missing-class-docstring
"""
Models related to the Pong game
"""
from enum import Enum
from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator
from duel_pong.pong import constants


Color = Tuple[int, int, int]


class Velocity(BaseModel):

    x: float
    y: float


class Action(Enum):
    UP = "up"
    DOWN = "down"
    STOP = "stop"


class GameConfig(BaseModel):
    """
    Every tunable value of a game. Instances are immutable and are handed
    to the game objects when they are constructed.
    """

    model_config = ConfigDict(frozen=True)

    screen_width: int = Field(default=constants.SCREEN_WIDTH, gt=0)
    screen_height: int = Field(default=constants.SCREEN_HEIGHT, gt=0)
    screen_caption: str = constants.SCREEN_CAPTION

    board_y: float = constants.BOARD_Y
    board_p1_x: float = constants.BOARD_P1_X
    board_p2_x: float = constants.BOARD_P2_X

    paddle_width: float = Field(default=constants.PADDLE_WIDTH, gt=0)
    paddle_height: float = Field(default=constants.PADDLE_HEIGHT, gt=0)
    paddle_p1_x: float = constants.PADDLE_P1_X
    paddle_p2_x: float = constants.PADDLE_P2_X
    paddle_step: float = Field(default=constants.PADDLE_STEP, gt=0)

    ball_radius: float = Field(default=constants.BALL_RADIUS, gt=0)
    ball_start_dx: float = constants.BALL_START_DX
    ball_start_dy: float = constants.BALL_START_DY
    ball_speedup: float = Field(default=constants.BALL_SPEEDUP, gt=0)
    ball_direction_draw_min: int = Field(
        default=constants.BALL_DIRECTION_DRAW_MIN, gt=0
    )
    ball_direction_draw_max: int = constants.BALL_DIRECTION_DRAW_MAX
    ball_direction_flip_above: int = constants.BALL_DIRECTION_FLIP_ABOVE

    state_change_interval_ms: int = Field(
        default=constants.STATE_CHANGE_INTERVAL_MS, gt=0
    )

    font_name: str = constants.GAME_FONT_NAME
    font_size: int = Field(default=constants.GAME_FONT_SIZE, gt=0)
    background_color: Color = constants.BLACK
    foreground_color: Color = constants.WHITE

    p1_up_key: int = constants.P1_UP_KEY
    p1_down_key: int = constants.P1_DOWN_KEY
    p2_up_key: int = constants.P2_UP_KEY
    p2_down_key: int = constants.P2_DOWN_KEY
    pause_key: int = constants.PAUSE_KEY

    @model_validator(mode="after")
    def check_paddles_fit(self) -> "GameConfig":
        """
        Both paddles have to lie inside the playfield, left one first
        """
        if self.paddle_height > self.screen_height:
            raise ValueError(
                f"paddle height {self.paddle_height} exceeds "
                f"screen height {self.screen_height}"
            )
        max_paddle_x = self.screen_width - self.paddle_width
        for name, paddle_x in (
            ("paddle_p1_x", self.paddle_p1_x),
            ("paddle_p2_x", self.paddle_p2_x),
        ):
            if not 0 <= paddle_x <= max_paddle_x:
                raise ValueError(
                    f"{name}={paddle_x} is outside the playfield [0, {max_paddle_x}]"
                )
        if self.paddle_p1_x >= self.paddle_p2_x:
            raise ValueError("the left paddle must be left of the right paddle")
        if self.ball_direction_draw_min >= self.ball_direction_draw_max:
            raise ValueError("the direction draw needs at least one possible value")
        return self

    @classmethod
    def for_field(cls, width: int, height: int, **overrides) -> "GameConfig":
        """
        Config for a playfield of the given size, with the right paddle and
        both score boards placed relative to the width
        """
        values = {
            "screen_width": width,
            "screen_height": height,
            "paddle_p2_x": width - constants.PADDLE_P2_MARGIN,
            "board_p1_x": width * 3 / 8,
            "board_p2_x": width * 5 / 8,
        }
        values.update(overrides)
        return cls(**values)

    @property
    def ball_start_x(self) -> float:
        return self.screen_width / 2

    @property
    def ball_start_y(self) -> float:
        return self.screen_height / 2

    @property
    def paddle_start_y(self) -> float:
        return (self.screen_height - self.paddle_height) / 2

    @property
    def max_paddle_y(self) -> float:
        return self.screen_height - self.paddle_height

    @property
    def fps(self) -> int:
        """Frame rate that makes one tick last the state change interval"""
        return max(1, round(1000 / self.state_change_interval_ms))
