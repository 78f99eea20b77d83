import pytest

from duel_pong.models.pong import GameConfig
from duel_pong.pong.main import get_parser, main, play


def test_parser_defaults():
    args = get_parser().parse_args([])
    assert (args.width, args.height) == (800, 500)
    assert args.seed is None
    assert args.headless_ticks is None


def test_headless_play():
    game = play(GameConfig(), seed=1, headless_ticks=94)
    assert game.headless
    assert (game.p1.score, game.p2.score) == (1, 0)


def test_custom_playfield_size():
    game = play(GameConfig.for_field(1000, 600), headless_ticks=0)
    assert game.config.paddle_p2_x == 970
    assert (game.ball.x, game.ball.y) == (500, 300)


def test_same_seed_gives_same_game():
    first = play(GameConfig(), seed=5, headless_ticks=3000)
    second = play(GameConfig(), seed=5, headless_ticks=3000)
    assert (first.ball.x, first.ball.y) == (second.ball.x, second.ball.y)
    assert (first.p1.score, first.p2.score) == (second.p1.score, second.p2.score)


def test_main_runs_headless(caplog):
    with caplog.at_level("INFO"):
        assert main(["--headless_ticks", "94", "--seed", "1"]) is None
    assert "After 94 ticks the score is 1 - 0" in caplog.text


def test_invalid_playfield_exits_with_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["--height", "50", "--headless_ticks", "1"])
    assert excinfo.value.code == 2


def test_invalid_playfield_is_reported_once(capsys, caplog):
    with pytest.raises(SystemExit):
        main(["--height", "50", "--headless_ticks", "1"])
    assert capsys.readouterr().err.count("invalid playfield") == 1
    assert not [r for r in caplog.records if r.levelname == "ERROR"]


def test_logger_uses_project_name():
    from duel_pong.logger.logger import logger

    assert logger.name == "duel_pong"
