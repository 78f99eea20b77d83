"""
Default values for the Pong game. These are the defaults of
GameConfig; code should read them from a config instance.
"""

import pygame

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 500
SCREEN_CAPTION = "Duel Pong"

BOARD_Y = 50
BOARD_P1_X = 300
BOARD_P2_X = 500

PADDLE_WIDTH = 20
PADDLE_HEIGHT = 100
PADDLE_P1_X = 10
PADDLE_P2_MARGIN = 30  # distance from the right edge to the right paddle's x
PADDLE_P2_X = SCREEN_WIDTH - PADDLE_P2_MARGIN
PADDLE_STEP = 6

BALL_RADIUS = 15
BALL_START_DX = 4.5
BALL_START_DY = 1.5
BALL_SPEEDUP = 0.05

# bounds of the direction draw made after every point, upper bound exclusive
BALL_DIRECTION_DRAW_MIN = 1
BALL_DIRECTION_DRAW_MAX = 4
# draws above this send the ball upwards
BALL_DIRECTION_FLIP_ABOVE = 2

STATE_CHANGE_INTERVAL_MS = 10

GAME_FONT_NAME = "arial"
GAME_FONT_SIZE = 30

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

P1_UP_KEY = pygame.K_q
P1_DOWN_KEY = pygame.K_a
P2_UP_KEY = pygame.K_p
P2_DOWN_KEY = pygame.K_l
PAUSE_KEY = pygame.K_b

ARG_SEED = "seed"
ARG_WIDTH = "width"
ARG_HEIGHT = "height"
ARG_HEADLESS_TICKS = "headless_ticks"
