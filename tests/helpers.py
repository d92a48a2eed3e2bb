"""Test doubles and small builders shared by the test modules."""

import pygame

from neonraid.enemy import Enemy
from neonraid.projectile import Projectile


class RecordingAudio:
    """Audio double that records every cue instead of playing it."""

    def __init__(self):
        self.events = []
        self.volume = 1.0
        self.muted = False

    def play_shoot(self):
        self.events.append("shoot")

    def play_game_over(self):
        self.events.append("game_over")

    def start_background(self):
        self.events.append("start_background")

    def stop_background(self):
        self.events.append("stop_background")

    def set_volume(self, volume):
        self.volume = max(0.0, min(1.0, volume))

    def toggle_mute(self):
        self.muted = not self.muted
        return self.muted

    def count(self, name):
        return self.events.count(name)


def key_event(key, pressed=True):
    return pygame.event.Event(pygame.KEYDOWN if pressed else pygame.KEYUP, key=key)


def enemy_at(x, y, speed=1.5, color=(255, 0, 85), zigzag=False):
    return Enemy(speed, color, zigzag, x=x, y=y)


def projectile_inside(enemy):
    """A projectile sitting at the centre of the enemy's box."""
    return Projectile(*enemy.center)
