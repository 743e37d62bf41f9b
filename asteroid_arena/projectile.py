import logging

import pygame

from .constants import BULLET_OFFSCREEN_MARGIN, BULLET_SPEED, HEIGHT, WIDTH
from .kinematics import circles_touch, heading_vector, integrate, is_out_of_bounds

log = logging.getLogger(__name__)

# A hit needs the bullet slightly inside the rock's outline.
HIT_TOLERANCE = 1


class Projectile:
    def __init__(
        self,
        position,
        angle,
        speed=BULLET_SPEED,
        bounds=(WIDTH, HEIGHT),
        margin=BULLET_OFFSCREEN_MARGIN,
    ):
        self.position = pygame.Vector2(position)
        self.angle = angle
        self.speed = speed
        # Frozen at fire time, the bullet never follows the ship.
        self.velocity = heading_vector(angle) * speed
        self.bounds = bounds
        self.margin = margin
        self.off_screen = False

    def move(self):
        self.position = integrate(self.position, self.velocity)

    def check_off_screen(self):
        if is_out_of_bounds(self.position, self.bounds, self.margin):
            self.off_screen = True

    def check_hit(self, asteroid):
        if circles_touch(self.position, asteroid.position, asteroid.radius - HIT_TOLERANCE):
            log.debug("projectile hit asteroid at (%.1f, %.1f)", asteroid.position.x, asteroid.position.y)
            self.off_screen = True
            asteroid.off_screen = True
            return True
        return False

    def update(self):
        self.move()
        self.check_off_screen()
