import math

import pygame

from .constants import COLORS

SHIP_SHAPE = [(0, -10), (10, 10), (0, 4), (-10, 10)]
BULLET_SHAPE = [(1, -5), (1, 5), (-1, 5), (-1, -5)]


def transform_shape(pos, angle, points):
    """Rotate local ``points`` by ``angle`` radians and move them to ``pos``."""
    rotation = math.degrees(angle)
    transformed = []
    for x, y in points:
        vec = pygame.Vector2(x, y).rotate(rotation)
        transformed.append((pos.x + vec.x, pos.y + vec.y))
    return transformed


def draw_ship(surface, ship, color=COLORS["ship"]):
    points = transform_shape(ship.position, ship.angle, SHIP_SHAPE)
    pygame.draw.polygon(surface, COLORS["ship_fill"], points)
    pygame.draw.lines(surface, color, True, points, 1)
    center = (int(ship.position.x), int(ship.position.y))
    pygame.draw.circle(surface, color, center, int(ship.radius), 1)


def draw_asteroid(surface, asteroid, color=COLORS["asteroid"]):
    points = transform_shape(asteroid.position, asteroid.rotation_angle, asteroid.shape())
    pygame.draw.lines(surface, color, True, points, 1)


def draw_projectile(surface, projectile, color=COLORS["bullet"]):
    pygame.draw.polygon(surface, color, transform_shape(projectile.position, projectile.angle, BULLET_SHAPE))


def draw_hud(surface, game, font):
    if game.is_playing:
        lines = [f"Score: {game.score}"]
        if game.is_invincible:
            lines.append("Invincible")
        if game.paused:
            lines.append("Paused - P to resume")
    elif game.is_game_over:
        lines = [f"Game Over - score {game.score}", "R to reset"]
    else:
        lines = ["Enter to play"]
    for i, line in enumerate(lines):
        color = COLORS["warning"] if game.is_game_over else COLORS["ui"]
        text = font.render(line, True, color)
        surface.blit(text, (10, 10 + i * 20))


def draw_frame(surface, game, font=None):
    """Draw the current state of ``game``. Reads only, never mutates."""
    surface.fill(COLORS["bg"])
    for asteroid in game.asteroids:
        draw_asteroid(surface, asteroid)
    for projectile in game.projectiles:
        draw_projectile(surface, projectile)
    if game.ship is not None:
        draw_ship(surface, game.ship)
    if font is not None:
        draw_hud(surface, game, font)
