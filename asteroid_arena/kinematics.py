import math

import pygame

from .constants import HEADING_OFFSET


def heading_vector(angle):
    """Unit vector for a heading where 0 rad points up the screen."""
    return pygame.Vector2(math.cos(angle - HEADING_OFFSET), math.sin(angle - HEADING_OFFSET))


def integrate(position, velocity, dt=1):
    return pygame.Vector2(position) + pygame.Vector2(velocity) * dt


def _wrap_axis(value, bound):
    if value >= bound:
        return 0.0
    if value < 0:
        # far edge of the half-open range [0, bound)
        return math.nextafter(bound, 0)
    return value


def wrap(position, bounds):
    """Toroidal reset: past the far edge -> 0, below 0 -> the far edge.

    Unlike the ``%`` wrap, overshoot is discarded, the agent reappears exactly
    on the opposite edge.
    """
    width, height = bounds
    return pygame.Vector2(_wrap_axis(position[0], width), _wrap_axis(position[1], height))


def is_out_of_bounds(position, bounds, margin):
    width, height = bounds
    x, y = position[0], position[1]
    return x < -margin or x > width + margin or y < -margin or y > height + margin


def circles_touch(a, b, reach):
    """True when the centres of ``a`` and ``b`` are at most ``reach`` apart."""
    return math.hypot(a[0] - b[0], a[1] - b[1]) <= reach
