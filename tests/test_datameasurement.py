import random

import pytest

from surfaceplanner.datameasurement import (
    DEFAULT_POINT_COUNT,
    POINT_HIGH,
    POINT_LOW,
    generate_random_points,
)


def test_default_count_is_one_hundred():
    points = generate_random_points(rng=random.Random(1))
    assert len(points) == DEFAULT_POINT_COUNT == 100


def test_points_are_triples_within_bounds():
    points = generate_random_points(250, random.Random(7))
    assert len(points) == 250
    for point in points:
        assert len(point) == 3
        assert all(POINT_LOW <= value < POINT_HIGH for value in point)


def test_same_seed_gives_same_points():
    first = generate_random_points(20, random.Random(42))
    second = generate_random_points(20, random.Random(42))
    assert first == second


def test_different_seeds_give_different_points():
    first = generate_random_points(20, random.Random(1))
    second = generate_random_points(20, random.Random(2))
    assert first != second
    assert len(first) == len(second) == 20


def test_zero_count_gives_empty_list():
    assert generate_random_points(0, random.Random(3)) == []


def test_negative_count_raises():
    with pytest.raises(ValueError):
        generate_random_points(-1)


def test_coordinates_spread_over_both_signs():
    points = generate_random_points(500, random.Random(11))
    xs = [x for x, _, _ in points]
    assert min(xs) < 0 < max(xs)