"""Projectile fired by the player."""

from typing import Tuple

import pygame

from neonraid.config.config import PROJECTILE_COLOR, PROJECTILE_RADIUS, PROJECTILE_SPEED
from neonraid.entity_pool import Entity
from neonraid.logger import get_logger

# Get a logger for this module
logger = get_logger(__name__)


class Projectile(Entity):
    """Round shot travelling straight up at constant speed."""

    def __init__(
        self,
        x: float,
        y: float,
        radius: int = PROJECTILE_RADIUS,
        speed: float = PROJECTILE_SPEED,
        color: Tuple[int, int, int] = PROJECTILE_COLOR,
    ) -> None:
        """Initialize a projectile centred on (x, y).

        Args:
            x: Horizontal centre position
            y: Vertical centre position
            radius: Radius in pixels
            speed: Upward speed in pixels per tick
            color: RGB color of the shot
        """
        super().__init__()
        self.x = float(x)
        self.y = float(y)
        self.radius = radius
        self.speed = speed
        self.color = color

        # Glow halo drawn behind the shot
        glow_size = radius * 4
        self.glow = pygame.Surface((glow_size, glow_size), pygame.SRCALPHA)
        glow_color = tuple(min(255, c + 70) for c in color)
        pygame.draw.circle(
            self.glow, (*glow_color, 90), (glow_size // 2, glow_size // 2), glow_size // 2
        )

    def update(self) -> None:
        """Move the projectile up and flag it once it has fully left the top edge."""
        self.y -= self.speed
        if self.y + self.radius < 0:
            self.marked_for_deletion = True

    def draw(self, surface: pygame.Surface) -> None:
        center = (int(self.x), int(self.y))
        surface.blit(self.glow, self.glow.get_rect(center=center))
        pygame.draw.circle(surface, self.color, center, self.radius)
