import random

import pytest

from duel_pong.utils.utils import clamp, is_in_range, random_num_between


@pytest.mark.parametrize(
    "value, expected",
    [(-10, 0), (0, 0), (0.5, 0.5), (250, 250), (400, 400), (406, 400)],
)
def test_clamp(value, expected):
    assert clamp(value, 0, 400) == expected


def test_clamp_stays_in_range_for_many_targets():
    rng = random.Random(3)
    for _ in range(1000):
        target = rng.uniform(-1000, 1000)
        result = clamp(target, 0, 400)
        assert 0 <= result <= 400
        if 0 <= target <= 400:
            assert result == target


def test_is_in_range_is_inclusive():
    assert is_in_range(10, 10, 30)
    assert is_in_range(30, 10, 30)
    assert is_in_range(20.5, 10, 30)
    assert not is_in_range(9.99, 10, 30)
    assert not is_in_range(30.01, 10, 30)


@pytest.mark.parametrize(
    "value, expected", [(0.0, 1), (0.34, 2), (0.5, 2), (0.67, 3), (0.999, 3)]
)
def test_random_num_between_maps_draw_to_integer(fixed_random, value, expected):
    assert random_num_between(1, 4, fixed_random(value)) == expected


def test_random_num_between_never_returns_upper_bound():
    rng = random.Random(11)
    draws = {random_num_between(1, 4, rng) for _ in range(2000)}
    assert draws == {1, 2, 3}
