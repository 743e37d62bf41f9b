import enum
import logging
import math
import random

import pygame

from .constants import (
    ASTEROID_MAX_RADIUS,
    ASTEROID_RADIUS_RANGE,
    ASTEROID_ROTATION_SPEED_RANGE,
    ASTEROID_SPEED_RANGE,
    ASTEROID_VERTEX_JITTER,
    ASTEROID_VERTEX_RANGE,
    HEIGHT,
    WIDTH,
)
from .kinematics import integrate, is_out_of_bounds

log = logging.getLogger(__name__)


class SpawnEdge(enum.Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


# Start of the 90 degree flight arc for each edge, in radians.
FLIGHT_ARC_START = {
    SpawnEdge.TOP: math.pi / 4,
    SpawnEdge.RIGHT: 3 * math.pi / 4,
    SpawnEdge.BOTTOM: 5 * math.pi / 4,
    SpawnEdge.LEFT: 7 * math.pi / 4,
}
FLIGHT_ARC_WIDTH = math.pi / 2


def spawn_position(rng, edge, bounds, margin=ASTEROID_MAX_RADIUS):
    width, height = bounds
    if edge is SpawnEdge.TOP:
        return pygame.Vector2(rng.uniform(0, width), -margin)
    if edge is SpawnEdge.BOTTOM:
        return pygame.Vector2(rng.uniform(0, width), height + margin)
    if edge is SpawnEdge.LEFT:
        return pygame.Vector2(-margin, rng.uniform(0, height))
    return pygame.Vector2(width + margin, rng.uniform(0, height))


def flight_angle(rng, edge):
    return FLIGHT_ARC_START[edge] + rng.uniform(0, FLIGHT_ARC_WIDTH)


def make_vertex_jitter(rng, count):
    return [rng.uniform(0, ASTEROID_VERTEX_JITTER) for _ in range(count)]


class Asteroid:
    """A rock drifting in from one arena edge.

    Everything random is drawn once here: the silhouette never changes shape,
    only its orientation as ``rotation_angle`` advances each tick.
    """

    def __init__(self, rng=None, bounds=(WIDTH, HEIGHT), margin=ASTEROID_MAX_RADIUS, edge=None):
        rng = rng or random.Random()
        self.bounds = bounds
        self.margin = margin

        self.edge = edge if edge is not None else rng.choice(list(SpawnEdge))
        self.position = spawn_position(rng, self.edge, bounds, margin)
        self.flight_angle = flight_angle(rng, self.edge)
        self.off_screen = False

        self.speed = rng.uniform(*ASTEROID_SPEED_RANGE)
        self.velocity = pygame.Vector2(math.cos(self.flight_angle), math.sin(self.flight_angle)) * self.speed
        self.rotation_angle = 0.0
        self.rotation_speed = rng.uniform(*ASTEROID_ROTATION_SPEED_RANGE)
        self.rotation_direction = rng.choice((-1, 1))

        self.radius = rng.uniform(*ASTEROID_RADIUS_RANGE)
        self.num_vertices = rng.randrange(*ASTEROID_VERTEX_RANGE)
        self.vertex_jitter = make_vertex_jitter(rng, self.num_vertices)

    def vertex_angles(self):
        step = math.tau / self.num_vertices
        return [i * step + self.vertex_jitter[i] for i in range(self.num_vertices)]

    def shape(self):
        """Outline in local coordinates, before rotation."""
        return [(math.cos(a) * self.radius, math.sin(a) * self.radius) for a in self.vertex_angles()]

    def rotate(self):
        self.rotation_angle += self.rotation_direction * self.rotation_speed

    def move(self):
        self.position = integrate(self.position, self.velocity)

    def check_off_screen(self):
        if is_out_of_bounds(self.position, self.bounds, self.margin):
            self.off_screen = True

    def explode(self):
        # Hook for a break-up effect; asteroids currently just vanish.
        pass

    def update(self):
        self.rotate()
        self.move()
        self.check_off_screen()
