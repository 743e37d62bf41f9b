import math
import random

import pygame
import pytest

from asteroid_arena.kinematics import circles_touch, heading_vector, integrate, is_out_of_bounds, wrap

BOUNDS = (800, 600)


def test_integrate_adds_velocity_once():
    pos = integrate(pygame.Vector2(10, 20), pygame.Vector2(1.5, -2))
    assert pos == pygame.Vector2(11.5, 18)


def test_integrate_does_not_mutate_input():
    start = pygame.Vector2(10, 20)
    integrate(start, pygame.Vector2(5, 5))
    assert start == pygame.Vector2(10, 20)


def test_heading_zero_points_up():
    vec = heading_vector(0)
    assert vec.x == pytest.approx(0, abs=1e-12)
    assert vec.y == pytest.approx(-1)


def test_heading_quarter_turn_points_right():
    vec = heading_vector(math.pi / 2)
    assert vec.x == pytest.approx(1)
    assert vec.y == pytest.approx(0, abs=1e-12)


def test_wrap_exact_far_edge_resets_to_origin():
    assert wrap((800, 300), BOUNDS) == pygame.Vector2(0, 300)
    assert wrap((400, 600), BOUNDS) == pygame.Vector2(400, 0)


def test_wrap_overshoot_resets_to_origin_not_modulo():
    assert wrap((812.5, 300), BOUNDS).x == 0


def test_wrap_below_zero_goes_to_far_edge():
    pos = wrap((-0.5, -3), BOUNDS)
    assert pos.x == pytest.approx(800)
    assert pos.y == pytest.approx(600)
    assert pos.x < 800 and pos.y < 600


def test_wrap_leaves_inside_points_alone():
    assert wrap((0, 599.9), BOUNDS) == pygame.Vector2(0, 599.9)


def test_wrap_always_lands_inside_arena():
    rng = random.Random(7)
    for _ in range(500):
        pos = wrap((rng.uniform(-50, 850), rng.uniform(-50, 650)), BOUNDS)
        # a single step never overshoots by more than one arena
        assert 0 <= pos.x < 800
        assert 0 <= pos.y < 600


@pytest.mark.parametrize(
    "pos, expected",
    [
        ((-5, 300), False),
        ((-5.01, 300), True),
        ((805, 300), False),
        ((805.01, 300), True),
        ((400, -5), False),
        ((400, 605.5), True),
    ],
)
def test_out_of_bounds_margin_is_inclusive(pos, expected):
    assert is_out_of_bounds(pos, BOUNDS, 5) is expected


def test_circles_touch_is_inclusive():
    assert circles_touch((0, 0), (3, 4), 5)
    assert not circles_touch((0, 0), (3, 4), 4.99)
