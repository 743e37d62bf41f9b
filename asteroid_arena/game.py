import enum
import logging
import random
import time

from .asteroid import Asteroid
from .config import GameConfig
from .scheduler import Scheduler
from .ship import Ship

log = logging.getLogger(__name__)


class GameState(enum.Enum):
    IDLE = "idle"
    PLAYING = "playing"
    ENDED = "ended"


class Control(enum.Enum):
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    THRUST = "thrust"
    FIRE = "fire"


def seed_from_time():
    return int(time.time()) & 0xFFFFFFFF


class Game:
    """Owns every entity in one arena and drives them through the game states.

    Asteroids spawn and drift in every state; the ship, its bullets and the
    collision passes only exist while playing. Time enters through two doors:
    ``tick`` once per frame, and ``advance`` for the millisecond timers
    (asteroid spawning, sweeps, the invincibility window).
    """

    def __init__(self, config=None, seed=None, scheduler=None):
        self.config = config or GameConfig()
        self.seed = seed if seed is not None else seed_from_time()
        self.rng = random.Random(self.seed)
        self.scheduler = scheduler or Scheduler()

        self.state = GameState.IDLE
        self.paused = False
        self.invincible = True
        self.score = 0
        self.ship = None
        self.asteroids = []

        self._invincibility_task = None
        self._bullet_cleanup_task = None

        # Backdrop timers live as long as the game does.
        self.scheduler.every(self.config.spawn_interval_ms, self.spawn_tick, name="asteroid-spawn")
        self.scheduler.every(
            self.config.asteroid_cleanup_interval_ms, self.cleanup_tick, name="asteroid-cleanup"
        )

    # Observables

    @property
    def is_playing(self):
        return self.state is GameState.PLAYING

    @property
    def is_game_over(self):
        return self.state is GameState.ENDED

    @property
    def is_invincible(self):
        return self.invincible

    @property
    def projectiles(self):
        if self.ship is None:
            return []
        return self.ship.projectiles

    # Transitions

    def play(self):
        if self.state is not GameState.IDLE:
            log.debug("play() ignored in state %s", self.state.value)
            return
        self.ship = Ship(
            position=self.config.center,
            config=self.config.ship,
            bounds=self.config.bounds,
            bullet_margin=self.config.bullet_margin,
        )
        self.state = GameState.PLAYING
        self.paused = False
        self.invincible = True
        self._invincibility_task = self.scheduler.after(
            self.config.invincibility_ms, self._end_invincibility, name="invincibility"
        )
        self._bullet_cleanup_task = self.scheduler.every(
            self.config.bullet_cleanup_interval_ms, self.bullet_cleanup_tick, name="bullet-cleanup"
        )
        log.info("game started (seed=%d)", self.seed)

    def _end_invincibility(self):
        self.invincible = False
        self._invincibility_task = None
        log.info("invincibility over")

    def stop_game(self):
        if self.state is not GameState.PLAYING:
            return
        self.state = GameState.ENDED
        self.ship = None
        self.paused = False
        for task in (self._invincibility_task, self._bullet_cleanup_task):
            if task is not None:
                task.cancel()
        self._invincibility_task = None
        self._bullet_cleanup_task = None
        log.info("game over, score %d", self.score)

    def reset_game(self):
        if self.state is GameState.PLAYING:
            log.debug("reset_game() ignored while playing")
            return
        self.score = 0
        self.invincible = True
        self.state = GameState.IDLE
        log.info("game reset")

    def toggle_pause(self):
        if self.state is not GameState.PLAYING:
            return
        self.paused = not self.paused
        log.info("paused" if self.paused else "resumed")

    # Input

    @staticmethod
    def _as_control(control):
        try:
            return Control(control)
        except ValueError:
            return None

    def on_control_down(self, control):
        control = self._as_control(control)
        ship = self.ship
        if control is None or ship is None or self.paused:
            return
        if control is Control.ROTATE_LEFT:
            ship.rotating_left = True
        elif control is Control.ROTATE_RIGHT:
            ship.rotating_right = True
        elif control is Control.THRUST:
            ship.thrusting = True
        elif control is Control.FIRE:
            ship.fire()

    def on_control_up(self, control):
        control = self._as_control(control)
        ship = self.ship
        if control is None or ship is None:
            return
        if control is Control.ROTATE_LEFT:
            ship.rotating_left = False
        elif control is Control.ROTATE_RIGHT:
            ship.rotating_right = False
        elif control is Control.THRUST:
            ship.thrusting = False
        elif control is Control.FIRE:
            ship.release_fire()

    # Timers

    def advance(self, elapsed_ms):
        if self.paused:
            return 0
        return self.scheduler.advance(elapsed_ms)

    def spawn_tick(self):
        asteroid = Asteroid(self.rng, bounds=self.config.bounds, margin=self.config.asteroid_margin)
        self.asteroids.append(asteroid)
        log.debug("spawned asteroid on %s edge (r=%.1f)", asteroid.edge.value, asteroid.radius)
        return asteroid

    def cleanup_tick(self):
        return self.remove_off_screen_asteroids()

    def bullet_cleanup_tick(self):
        return self.remove_off_screen_projectiles()

    # Frame pipeline

    def check_projectile_hits(self):
        for projectile in self.ship.projectiles:
            for asteroid in self.asteroids:
                already_hit = asteroid.off_screen
                if projectile.check_hit(asteroid):
                    self.score += 1
                    if not already_hit:
                        asteroid.explode()

    def check_ship_collisions(self):
        for asteroid in self.asteroids:
            self.ship.check_collision(asteroid)

    def remove_off_screen_asteroids(self):
        before = len(self.asteroids)
        self.asteroids = [a for a in self.asteroids if not a.off_screen]
        removed = before - len(self.asteroids)
        if removed:
            log.debug("swept %d asteroids", removed)
        return removed

    def remove_off_screen_projectiles(self):
        if self.ship is None:
            return 0
        return self.ship.prune_projectiles()

    def check_ship_health(self):
        if self.ship.destroyed:
            self.stop_game()

    def tick(self):
        if self.paused:
            return
        if self.is_playing and self.ship is not None:
            self.ship.update()
            self.check_projectile_hits()
            if not self.invincible:
                self.check_ship_collisions()
            self.remove_off_screen_asteroids()
            self.remove_off_screen_projectiles()
            self.check_ship_health()
        for asteroid in self.asteroids:
            asteroid.update()

    def step(self, elapsed_ms):
        """One rendered frame: run due timers, then the frame pipeline."""
        self.advance(elapsed_ms)
        self.tick()
