"""Scrolling starfield drawn behind the game."""

import random
from typing import List

import pygame

from neonraid.config.config import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STAR_COUNT,
    STAR_MAX_SIZE,
    STAR_MIN_SPEED,
    STAR_SPEED_RANGE,
    WHITE,
)


class Star:
    """A single background star that falls and wraps back to the top."""

    def __init__(self, x: float, y: float, size: float, speed: float, alpha: float) -> None:
        self.x = x
        self.y = y
        self.size = size
        self.speed = speed
        self.alpha = alpha

        # Stars keep their brightness forever, so the image is built once
        radius = max(1, round(size))
        self.image = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(self.image, (*WHITE, int(255 * alpha)), (radius, radius), radius)

    @classmethod
    def random(cls) -> "Star":
        """Create a star at a random position with random size, speed and brightness."""
        return cls(
            x=random.random() * SCREEN_WIDTH,
            y=random.random() * SCREEN_HEIGHT,
            size=random.random() * STAR_MAX_SIZE,
            speed=random.random() * STAR_SPEED_RANGE + STAR_MIN_SPEED,
            alpha=random.random(),
        )

    def update(self) -> None:
        """Move the star down, wrapping to the top with a new horizontal offset."""
        self.y += self.speed
        if self.y > SCREEN_HEIGHT:
            self.y = 0.0
            self.x = random.random() * SCREEN_WIDTH

    def draw(self, surface: pygame.Surface) -> None:
        if self.size < 0.5:
            # Too small to show as a circle
            return
        surface.blit(self.image, self.image.get_rect(center=(int(self.x), int(self.y))))


class Starfield:
    """Fixed-size pool of stars, recycled forever."""

    def __init__(self, count: int = STAR_COUNT) -> None:
        """Initializes the starfield.

        Args:
            count: Number of stars in the pool.
        """
        self.count = count
        self.stars: List[Star] = []
        self.reseed()

    def __len__(self) -> int:
        return len(self.stars)

    def reseed(self) -> None:
        """Replace every star with a freshly randomised one."""
        self.stars = [Star.random() for _ in range(self.count)]

    def update(self) -> None:
        for star in self.stars:
            star.update()

    def draw(self, surface: pygame.Surface) -> None:
        for star in self.stars:
            star.draw(surface)
