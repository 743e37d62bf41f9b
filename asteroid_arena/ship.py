import logging

import pygame

from .config import ShipConfig
from .constants import BULLET_OFFSCREEN_MARGIN, HEIGHT, WIDTH
from .kinematics import circles_touch, heading_vector, integrate, wrap
from .projectile import HIT_TOLERANCE, Projectile

log = logging.getLogger(__name__)


class Ship:
    def __init__(
        self,
        position=(WIDTH / 2, HEIGHT / 2),
        config=None,
        bounds=(WIDTH, HEIGHT),
        bullet_margin=BULLET_OFFSCREEN_MARGIN,
    ):
        self.config = config or ShipConfig()
        self.bounds = bounds
        self.bullet_margin = bullet_margin

        self.position = pygame.Vector2(position)
        self.velocity = pygame.Vector2(0, 0)
        self.angle = 0.0

        # Control states
        self.rotating_left = False
        self.rotating_right = False
        self.thrusting = False
        self.has_fired = False
        self.destroyed = False

        # Fire order
        self.projectiles = []

    @property
    def radius(self):
        return self.config.collision_radius

    def rotate(self):
        # Both flags held cancel out.
        if self.rotating_left:
            self.angle -= self.config.rotation_speed
        if self.rotating_right:
            self.angle += self.config.rotation_speed

    def move(self):
        if self.thrusting:
            self.velocity += heading_vector(self.angle) * self.config.thrust
        self.velocity *= self.config.friction
        self.position = wrap(integrate(self.position, self.velocity), self.bounds)

    def fire(self):
        """Fire once per trigger press; ``release_fire`` re-arms the trigger."""
        if self.destroyed or self.has_fired:
            return None
        projectile = Projectile(
            self.position,
            self.angle,
            speed=self.config.bullet_speed,
            bounds=self.bounds,
            margin=self.bullet_margin,
        )
        self.projectiles.append(projectile)
        self.has_fired = True
        return projectile

    def release_fire(self):
        self.has_fired = False

    def check_collision(self, asteroid):
        reach = self.radius + asteroid.radius - HIT_TOLERANCE
        if circles_touch(self.position, asteroid.position, reach):
            log.debug("ship struck at (%.1f, %.1f)", self.position.x, self.position.y)
            self.destroyed = True
            asteroid.off_screen = True
            return True
        return False

    def prune_projectiles(self):
        before = len(self.projectiles)
        self.projectiles = [p for p in self.projectiles if not p.off_screen]
        return before - len(self.projectiles)

    def update(self):
        if self.destroyed:
            return
        self.rotate()
        self.move()
        for projectile in self.projectiles:
            projectile.update()
