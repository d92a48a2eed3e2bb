"""Defines the descending enemy ship."""

import math
import random
from typing import Optional, Tuple

import pygame

from neonraid.config.config import (
    ENEMY_HEIGHT,
    ENEMY_WIDTH,
    ENEMY_ZIGZAG_AMPLITUDE,
    ENEMY_ZIGZAG_ANGLE_STEP,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from neonraid.config.level_constants import LevelConfig
from neonraid.entity_pool import Entity
from neonraid.logger import get_logger

# Get a logger for this module
logger = get_logger(__name__)


class Enemy(Entity):
    """Triangle ship that falls from above the top edge.

    With zigzag enabled the ship also swings sideways following the sine of
    an angle that grows every tick, and is kept inside the screen width.
    """

    def __init__(
        self,
        speed: float,
        color: Tuple[int, int, int],
        zigzag: bool = False,
        x: Optional[float] = None,
        y: Optional[float] = None,
    ) -> None:
        """Initialize an enemy.

        Args:
            speed: Downward speed in pixels per tick
            color: RGB tint of the ship
            zigzag: Whether the ship oscillates horizontally
            x: Left edge; random across the screen width when omitted
            y: Top edge; just above the screen when omitted
        """
        super().__init__()
        self.width = ENEMY_WIDTH
        self.height = ENEMY_HEIGHT
        self.x = float(x) if x is not None else random.random() * (SCREEN_WIDTH - self.width)
        self.y = float(y) if y is not None else float(-self.height)
        self.speed = speed
        self.color = color
        self.zigzag = zigzag
        self.angle = 0.0

        self.glow = pygame.Surface((self.width + 20, self.height + 20), pygame.SRCALPHA)
        glow_color = tuple(min(255, c + 70) for c in color)
        pygame.draw.polygon(
            self.glow,
            (*glow_color, 70),
            [(0, 0), (self.width + 20, 0), ((self.width + 20) / 2, self.height + 20)],
        )

    @classmethod
    def from_level(cls, config: LevelConfig) -> "Enemy":
        """Create an enemy with the speed, tint and movement of a level."""
        return cls(config.enemy_speed, config.enemy_color, config.zigzag)

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def update(self) -> None:
        """Move the enemy down, apply zigzag and flag it once past the bottom edge."""
        self.y += self.speed

        if self.zigzag:
            self.x += math.sin(self.angle) * ENEMY_ZIGZAG_AMPLITUDE
            self.angle += ENEMY_ZIGZAG_ANGLE_STEP
            # Keep the ship inside the screen
            self.x = max(0.0, min(self.x, float(SCREEN_WIDTH - self.width)))

        if self.y > SCREEN_HEIGHT:
            self.marked_for_deletion = True
            logger.debug("Enemy left the screen at x=%.1f", self.x)

    def draw(self, surface: pygame.Surface) -> None:
        surface.blit(self.glow, (self.x - 10, self.y - 10))
        # Point-down triangle
        points = [
            (self.x, self.y),
            (self.x + self.width, self.y),
            (self.x + self.width / 2, self.y + self.height),
        ]
        pygame.draw.polygon(surface, self.color, points)
