"""All mutable state belonging to one play-through."""

from typing import Optional

from neonraid.background import Starfield
from neonraid.enemy import Enemy
from neonraid.entity_pool import EntityPool
from neonraid.game_state import GameState
from neonraid.levels import LevelController
from neonraid.particle import Particle
from neonraid.player import Player
from neonraid.projectile import Projectile
from neonraid.scheduler import EventScheduler


class Session:
    """Owns the entities, score, level, tick counter, state and clock.

    A single instance is shared by the update and render routines; tests
    build a fresh one instead of touching module-level state.
    """

    def __init__(self) -> None:
        self.state = GameState.START
        self.player: Optional[Player] = None
        self.projectiles: EntityPool[Projectile] = EntityPool()
        self.enemies: EntityPool[Enemy] = EntityPool()
        self.particles: EntityPool[Particle] = EntityPool()
        self.starfield = Starfield()
        self.levels = LevelController()
        self.scheduler = EventScheduler()
        self.score = 0
        self.tick = 0

    @property
    def level(self) -> int:
        return self.levels.current_level

    @property
    def now_ms(self) -> float:
        """Current virtual time in milliseconds."""
        return self.scheduler.now_ms

    def reset(self) -> None:
        """Return every per-session value to its starting point.

        The player is left to the caller, which knows the collaborators a new
        ship needs. The virtual clock keeps running; only pending events go.
        """
        self.starfield.reseed()
        self.player = None
        self.projectiles.clear()
        self.enemies.clear()
        self.particles.clear()
        self.levels.reset()
        self.scheduler.clear()
        self.score = 0
        self.tick = 0

    def clear_combat(self) -> None:
        """Remove all live projectiles and enemies."""
        self.projectiles.clear()
        self.enemies.clear()

    def compact(self) -> None:
        """Drop every entity flagged for deletion this tick."""
        self.projectiles.compact()
        self.enemies.compact()
        self.particles.compact()
