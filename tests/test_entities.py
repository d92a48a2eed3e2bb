import math
import random

import pygame
import pytest

from neonraid.background import Star, Starfield
from neonraid.config.config import (
    ENEMY_WIDTH,
    PARTICLES_PER_EXPLOSION,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STAR_COUNT,
)
from neonraid.entity_pool import EntityPool
from neonraid.particle import Particle, ParticleSystem
from neonraid.projectile import Projectile
from tests.helpers import enemy_at


class TestProjectile:
    def test_moves_up_at_constant_speed(self):
        projectile = Projectile(100, 300)
        projectile.update()
        projectile.update()
        assert projectile.y == 300 - 2 * 12
        assert projectile.x == 100

    def test_flagged_only_once_fully_above_top_edge(self):
        projectile = Projectile(100, 8)
        projectile.update()  # y = -4, still touching the edge
        assert not projectile.marked_for_deletion
        projectile.update()  # y = -16
        assert projectile.marked_for_deletion


class TestEnemy:
    def test_spawns_above_screen_within_width(self):
        random.seed(3)
        for _ in range(50):
            enemy = enemy_at(None, None)
            assert enemy.y == -enemy.height
            assert 0 <= enemy.x < SCREEN_WIDTH - ENEMY_WIDTH

    def test_falls_straight_without_zigzag(self):
        enemy = enemy_at(100, 0, speed=2.5)
        enemy.update()
        assert (enemy.x, enemy.y) == (100, 2.5)

    def test_zigzag_follows_sine_of_growing_angle(self):
        enemy = enemy_at(400, 0, speed=3.5, zigzag=True)
        enemy.update()  # sin(0) = 0
        assert enemy.x == 400
        assert enemy.angle == pytest.approx(0.1)
        enemy.update()
        assert enemy.x == pytest.approx(400 + math.sin(0.1) * 4)
        assert enemy.angle == pytest.approx(0.2)

    def test_zigzag_is_clamped_to_screen_width(self):
        left = enemy_at(0, 0, zigzag=True)
        right = enemy_at(SCREEN_WIDTH - ENEMY_WIDTH, 0, zigzag=True)
        for _ in range(200):
            left.update()
            right.update()
            assert 0 <= left.x <= SCREEN_WIDTH - ENEMY_WIDTH
            assert 0 <= right.x <= SCREEN_WIDTH - ENEMY_WIDTH

    def test_removed_by_compaction_once_below_screen(self):
        pool = EntityPool([enemy_at(100, SCREEN_HEIGHT - 1, speed=1.5)])
        pool.update()
        assert pool[0].y > SCREEN_HEIGHT
        pool.compact()
        assert len(pool) == 0

    def test_still_alive_exactly_at_bottom_edge(self):
        enemy = enemy_at(100, SCREEN_HEIGHT - 1.5, speed=1.5)
        enemy.update()
        assert enemy.y == SCREEN_HEIGHT
        assert not enemy.marked_for_deletion


class TestParticle:
    def test_explosion_always_has_fifteen_particles(self):
        for _ in range(10):
            particles = ParticleSystem.create_explosion((50, 50), (255, 0, 85))
            assert len(particles) == PARTICLES_PER_EXPLOSION == 15
            assert all(p.color == (255, 0, 85) for p in particles)
            assert all((p.x, p.y) == (50, 50) for p in particles)

    def test_random_ranges(self):
        random.seed(11)
        for particle in ParticleSystem.create_explosion((0, 0), (1, 2, 3), count=200):
            assert 1 <= particle.radius < 4
            assert -4 <= particle.velocity[0] < 4
            assert -4 <= particle.velocity[1] < 4
            assert particle.alpha == 1.0

    def test_alpha_strictly_decreases_until_removed(self):
        pool = EntityPool([Particle((10, 10), (1, -1), (255, 255, 255), 2)])
        particle = pool[0]
        previous = particle.alpha
        ticks = 0
        while len(pool):
            pool.update()
            assert particle.alpha < previous
            previous = particle.alpha
            pool.compact()
            ticks += 1
        assert particle.alpha <= 0
        # 1.0 / 0.02 = 50 ticks, give or take float rounding
        assert 49 <= ticks <= 51

    def test_moves_by_fixed_velocity(self):
        particle = Particle((10, 10), (2, -3), (255, 255, 255), 2)
        particle.update()
        particle.update()
        assert (particle.x, particle.y) == (14, 4)


class TestStarfield:
    def test_pool_is_fixed_size(self):
        starfield = Starfield()
        for _ in range(2000):
            starfield.update()
        assert len(starfield) == STAR_COUNT == 100

    def test_star_wraps_to_top(self):
        star = Star(x=10, y=SCREEN_HEIGHT, size=1, speed=0.5, alpha=0.5)
        star.update()
        assert star.y == 0
        assert 0 <= star.x < SCREEN_WIDTH

    def test_reseed_replaces_stars(self):
        starfield = Starfield()
        before = list(starfield.stars)
        starfield.reseed()
        assert len(starfield) == STAR_COUNT
        assert not set(map(id, before)) & set(map(id, starfield.stars))

    def test_star_ranges(self):
        random.seed(5)
        for star in Starfield(count=300).stars:
            assert 0 <= star.size < 2
            assert 0.1 <= star.speed < 0.6
            assert 0 <= star.alpha < 1


def test_everything_draws_onto_a_surface():
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    Starfield().draw(surface)
    enemy_at(10, 10).draw(surface)
    Projectile(100, 100).draw(surface)
    for particle in ParticleSystem.create_explosion((200, 200), (0, 255, 204)):
        particle.draw(surface)
