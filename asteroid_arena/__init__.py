from .asteroid import Asteroid, SpawnEdge
from .config import GameConfig, ShipConfig
from .game import Control, Game, GameState
from .projectile import Projectile
from .scheduler import Scheduler
from .ship import Ship

__all__ = [
    "Asteroid",
    "Control",
    "Game",
    "GameConfig",
    "GameState",
    "Projectile",
    "Scheduler",
    "Ship",
    "ShipConfig",
    "SpawnEdge",
]
