import math


WIDTH = 800
HEIGHT = 600
FPS = 60

SHIP_ROTATION_SPEED = 0.04  # radians/tick
SHIP_THRUST = 0.05
SHIP_FRICTION = 0.994
SHIP_RADIUS = 5

BULLET_SPEED = 10
BULLET_OFFSCREEN_MARGIN = 5

ASTEROID_MAX_RADIUS = 35
ASTEROID_RADIUS_RANGE = (20, 55)
ASTEROID_VERTEX_RANGE = (5, 10)
ASTEROID_SPEED_RANGE = (1, 3)
ASTEROID_ROTATION_SPEED_RANGE = (0.005, 0.025)  # radians/tick
ASTEROID_VERTEX_JITTER = math.pi / 4

ASTEROID_SPAWN_INTERVAL_MS = 1000
ASTEROID_CLEANUP_INTERVAL_MS = 1000
BULLET_CLEANUP_INTERVAL_MS = 3000
INVINCIBILITY_MS = 3000

# 0 rad points up the screen
HEADING_OFFSET = math.pi / 2


COLORS = {
    "bg": (0, 0, 0),
    "ship": (255, 255, 255),
    "ship_fill": (0, 0, 0),
    "bullet": (255, 255, 255),
    "asteroid": (255, 255, 255),
    "ui": (200, 200, 200),
    "warning": (255, 140, 140),
}
