"""Particle system for explosion effects."""

import random
from typing import List, Tuple

import pygame

from neonraid.config.config import (
    PARTICLE_ALPHA_DECAY,
    PARTICLE_MAX_SPEED,
    PARTICLE_MIN_RADIUS,
    PARTICLE_RADIUS_RANGE,
    PARTICLES_PER_EXPLOSION,
)
from neonraid.entity_pool import Entity
from neonraid.logger import get_logger

# Get a logger for this module
logger = get_logger(__name__)


class Particle(Entity):
    """Individual fading spark."""

    def __init__(
        self,
        position: Tuple[float, float],
        velocity: Tuple[float, float],
        color: Tuple[int, int, int],
        radius: float,
        decay: float = PARTICLE_ALPHA_DECAY,
    ) -> None:
        """Initialize a single particle.

        Args:
            position: The (x, y) starting position of the particle
            velocity: The (vx, vy) velocity, constant for the particle's life
            color: The (r, g, b) color of the particle
            radius: The radius of the particle in pixels
            decay: Alpha lost per tick (alpha starts at 1.0)
        """
        super().__init__()
        self.x, self.y = float(position[0]), float(position[1])
        self.velocity = (float(velocity[0]), float(velocity[1]))
        self.color = color
        self.radius = radius
        self.decay = decay
        self.alpha = 1.0

        # Pre-render the spark with a simple glow
        glow_radius = max(1, int(radius * 2))
        self.image = pygame.Surface((glow_radius * 2, glow_radius * 2), pygame.SRCALPHA)
        glow_color = tuple(min(255, c + 70) for c in color)
        pygame.draw.circle(self.image, (*glow_color, 120), (glow_radius, glow_radius), glow_radius)
        pygame.draw.circle(self.image, color, (glow_radius, glow_radius), max(1, int(radius)))

    def update(self) -> None:
        """Move the particle and fade it out."""
        self.x += self.velocity[0]
        self.y += self.velocity[1]
        self.alpha -= self.decay
        if self.alpha <= 0:
            self.marked_for_deletion = True

    def draw(self, surface: pygame.Surface) -> None:
        if self.alpha <= 0:
            return
        self.image.set_alpha(int(255 * self.alpha))
        surface.blit(self.image, self.image.get_rect(center=(int(self.x), int(self.y))))


class ParticleSystem:
    """Creates groups of particles for effects like explosions."""

    @staticmethod
    def create_explosion(
        position: Tuple[float, float],
        color: Tuple[int, int, int],
        count: int = PARTICLES_PER_EXPLOSION,
    ) -> List[Particle]:
        """Create a burst of particles scattering from one point.

        Args:
            position: Center position of the explosion
            color: Color shared by every particle
            count: Number of particles to create

        Returns:
            List of created particles
        """
        particles = []

        for _ in range(count):
            # Each velocity component is uniform in [-max, max)
            vel_x = (random.random() - 0.5) * 2 * PARTICLE_MAX_SPEED
            vel_y = (random.random() - 0.5) * 2 * PARTICLE_MAX_SPEED
            radius = random.random() * PARTICLE_RADIUS_RANGE + PARTICLE_MIN_RADIUS
            particles.append(Particle(position, (vel_x, vel_y), color, radius))

        logger.debug("Explosion of %d particles at (%.0f, %.0f)", count, *position)
        return particles
