"""Defines the player-controlled ship."""

from typing import Optional, Tuple

import pygame

from neonraid.config.config import (
    PLAYER_BOTTOM_MARGIN,
    PLAYER_COLOR,
    PLAYER_FIRE_RATE_MS,
    PLAYER_HEIGHT,
    PLAYER_SPEED,
    PLAYER_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from neonraid.entity_pool import EntityPool
from neonraid.input_state import InputState
from neonraid.logger import get_logger
from neonraid.projectile import Projectile

# Get a logger for this module
logger = get_logger(__name__)


class Player:
    """Represents the player-controlled ship."""

    def __init__(self, projectiles: EntityPool, sound_manager=None) -> None:
        """Initializes the player at the bottom centre of the screen.

        Args:
            projectiles: Pool that receives fired projectiles
            sound_manager: Audio collaborator; its play_shoot() is called per shot
        """
        self.projectiles = projectiles
        self.sound_manager = sound_manager

        self.width = PLAYER_WIDTH
        self.height = PLAYER_HEIGHT
        self.x = SCREEN_WIDTH / 2 - self.width / 2
        self.y = float(SCREEN_HEIGHT - self.height - PLAYER_BOTTOM_MARGIN)
        self.speed = PLAYER_SPEED
        self.color = PLAYER_COLOR

        # Shooting cooldown; None until the first shot
        self.fire_rate_ms = PLAYER_FIRE_RATE_MS
        self.last_shot_time: Optional[float] = None

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def muzzle(self) -> Tuple[float, float]:
        """Point where projectiles appear: the ship's nose."""
        return (self.x + self.width / 2, self.y)

    def can_fire(self, now_ms: float) -> bool:
        """Return True if the fire cooldown has elapsed at the given time."""
        if self.last_shot_time is None:
            return True
        return now_ms - self.last_shot_time >= self.fire_rate_ms

    def update(self, input_state: InputState, now_ms: float) -> None:
        """Move from the held keys and fire if the cooldown allows.

        Args:
            input_state: Currently held keys
            now_ms: Current game clock in milliseconds
        """
        if input_state.up:
            self.y -= self.speed
        if input_state.down:
            self.y += self.speed
        if input_state.left:
            self.x -= self.speed
        if input_state.right:
            self.x += self.speed

        # Keep the ship fully on screen
        self.x = max(0.0, min(self.x, float(SCREEN_WIDTH - self.width)))
        self.y = max(0.0, min(self.y, float(SCREEN_HEIGHT - self.height)))

        if input_state.fire and self.can_fire(now_ms):
            self.shoot(now_ms)

    def shoot(self, now_ms: float) -> Projectile:
        """Spawn a projectile at the muzzle and restart the cooldown."""
        projectile = Projectile(*self.muzzle)
        self.projectiles.add(projectile)
        self.last_shot_time = now_ms
        if self.sound_manager is not None:
            self.sound_manager.play_shoot()
        return projectile

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ship as an arrowhead with a soft glow."""
        points = [
            (self.x + self.width / 2, self.y),
            (self.x + self.width, self.y + self.height),
            (self.x + self.width / 2, self.y + self.height - 10),
            (self.x, self.y + self.height),
        ]

        glow = pygame.Surface((self.width + 24, self.height + 24), pygame.SRCALPHA)
        glow_color = tuple(min(255, c + 70) for c in self.color)
        pygame.draw.polygon(
            glow,
            (*glow_color, 80),
            [(px - self.x + 12, py - self.y + 12) for px, py in points],
            8,
        )
        surface.blit(glow, (self.x - 12, self.y - 12))

        pygame.draw.polygon(surface, self.color, points)
