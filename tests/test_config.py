import pygame
import pytest
from pydantic import ValidationError

from duel_pong.models.pong import Action, GameConfig


def test_defaults(config):
    assert (config.screen_width, config.screen_height) == (800, 500)
    assert (config.paddle_p1_x, config.paddle_p2_x) == (10, 770)
    assert (config.board_p1_x, config.board_p2_x) == (300, 500)
    assert config.p1_up_key == pygame.K_q
    assert config.pause_key == pygame.K_b


def test_derived_values(config):
    assert (config.ball_start_x, config.ball_start_y) == (400, 250)
    assert config.paddle_start_y == 200
    assert config.max_paddle_y == 400
    assert config.fps == 100


def test_for_field_places_right_side_relative_to_width():
    config = GameConfig.for_field(1600, 1000)
    assert config.paddle_p2_x == 1570
    assert (config.board_p1_x, config.board_p2_x) == (600, 1000)
    assert (config.ball_start_x, config.ball_start_y) == (800, 500)
    assert config.paddle_start_y == 450


def test_for_field_with_default_size_matches_defaults(config):
    assert GameConfig.for_field(800, 500) == config


def test_config_is_immutable(config):
    with pytest.raises(ValidationError):
        config.screen_width = 1000


@pytest.mark.parametrize(
    "overrides",
    [
        {"screen_width": 0},
        {"paddle_height": 600},
        {"paddle_p2_x": 790},
        {"paddle_p1_x": -1},
        {"paddle_p1_x": 770, "paddle_p2_x": 10},
        {"state_change_interval_ms": 0},
        {"ball_speedup": 0},
        {"ball_direction_draw_min": 4, "ball_direction_draw_max": 4},
    ],
)
def test_invalid_config_is_rejected(overrides):
    with pytest.raises(ValidationError):
        GameConfig(**overrides)


def test_action_values():
    assert [action.value for action in Action] == ["up", "down", "stop"]


def test_direction_draw_defaults(config):
    assert (config.ball_direction_draw_min, config.ball_direction_draw_max) == (1, 4)
    assert config.ball_direction_flip_above == 2
