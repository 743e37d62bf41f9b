from dataclasses import dataclass, field

from .constants import (
    ASTEROID_CLEANUP_INTERVAL_MS,
    ASTEROID_MAX_RADIUS,
    ASTEROID_SPAWN_INTERVAL_MS,
    BULLET_CLEANUP_INTERVAL_MS,
    BULLET_OFFSCREEN_MARGIN,
    BULLET_SPEED,
    HEIGHT,
    INVINCIBILITY_MS,
    SHIP_FRICTION,
    SHIP_RADIUS,
    SHIP_ROTATION_SPEED,
    SHIP_THRUST,
    WIDTH,
)


@dataclass
class ShipConfig:
    # Per-tick motion
    rotation_speed: float = SHIP_ROTATION_SPEED
    thrust: float = SHIP_THRUST
    friction: float = SHIP_FRICTION

    collision_radius: float = SHIP_RADIUS
    bullet_speed: float = BULLET_SPEED

    def __post_init__(self):
        if not 0 < self.friction <= 1:
            raise ValueError(f"friction must be in (0, 1], got {self.friction}")
        if self.collision_radius < 0:
            raise ValueError(f"collision_radius must be >= 0, got {self.collision_radius}")
        if self.bullet_speed <= 0:
            raise ValueError(f"bullet_speed must be positive, got {self.bullet_speed}")


@dataclass
class GameConfig:
    width: float = WIDTH
    height: float = HEIGHT

    # Timers (milliseconds of virtual clock)
    spawn_interval_ms: float = ASTEROID_SPAWN_INTERVAL_MS
    asteroid_cleanup_interval_ms: float = ASTEROID_CLEANUP_INTERVAL_MS
    bullet_cleanup_interval_ms: float = BULLET_CLEANUP_INTERVAL_MS
    invincibility_ms: float = INVINCIBILITY_MS

    bullet_margin: float = BULLET_OFFSCREEN_MARGIN
    asteroid_margin: float = ASTEROID_MAX_RADIUS

    ship: ShipConfig = field(default_factory=ShipConfig)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"arena must have positive size, got {self.width}x{self.height}")
        for name in (
            "spawn_interval_ms",
            "asteroid_cleanup_interval_ms",
            "bullet_cleanup_interval_ms",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.invincibility_ms < 0:
            raise ValueError(f"invincibility_ms must be >= 0, got {self.invincibility_ms}")

    @property
    def bounds(self):
        return (self.width, self.height)

    @property
    def center(self):
        return (self.width / 2, self.height / 2)
