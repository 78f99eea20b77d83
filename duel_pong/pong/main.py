"""
Starting point of the Pong game
"""

import argparse
import random
from typing import List, Optional
from pydantic import ValidationError
from duel_pong.pong import constants
from duel_pong.models.pong import GameConfig
from duel_pong.pong.pong_game import PongGame


def get_parser() -> argparse.ArgumentParser:
    """
    Command line arguments of the game
    """
    parser = argparse.ArgumentParser(description="Play two player Pong")

    parser.add_argument(
        f"--{constants.ARG_SEED}",
        type=int,
        default=None,
        help="Seed for the ball direction chosen after every point",
    )
    parser.add_argument(
        f"--{constants.ARG_WIDTH}",
        type=int,
        default=constants.SCREEN_WIDTH,
        help="Width of the playfield",
    )
    parser.add_argument(
        f"--{constants.ARG_HEIGHT}",
        type=int,
        default=constants.SCREEN_HEIGHT,
        help="Height of the playfield",
    )
    parser.add_argument(
        f"--{constants.ARG_HEADLESS_TICKS}",
        type=int,
        default=None,
        help="Run this many ticks without a window and report the score",
    )
    return parser


def play(
    config: GameConfig, seed: Optional[int] = None, headless_ticks: Optional[int] = None
) -> PongGame:
    """
    Plays one game in a window, or a fixed number of ticks without one
    """
    rng = random.Random(seed)
    if headless_ticks is not None:
        game = PongGame(config, headless=True, rng=rng)
        game.run_headless(headless_ticks)
        return game

    game = PongGame(config, rng=rng)
    try:
        game.run()
    finally:
        game.close()
    return game


def main(argv: Optional[List[str]] = None):
    """
    Starting point of Pong game
    """
    parser = get_parser()
    args = parser.parse_args(argv)
    try:
        config = GameConfig.for_field(args.width, args.height)
    except ValidationError as e:
        parser.error(f"invalid playfield: {e}")

    play(config, seed=args.seed, headless_ticks=args.headless_ticks)


if __name__ == "__main__":
    main()
