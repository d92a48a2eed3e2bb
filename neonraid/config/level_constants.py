"""Per-level difficulty configuration."""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class LevelConfig:
    """Static settings for one level.

    Attributes:
        enemy_speed: Vertical enemy speed in pixels per tick
        spawn_interval: Ticks between enemy spawns
        target_score: Score that completes the level
        enemy_color: RGB tint of enemies spawned in this level
        zigzag: Whether enemies oscillate horizontally
    """

    enemy_speed: float
    spawn_interval: int
    target_score: int
    enemy_color: Tuple[int, int, int]
    zigzag: bool


# Level number -> configuration. Levels are numbered from 1 without gaps.
LEVEL_CONFIGS: Dict[int, LevelConfig] = {
    1: LevelConfig(
        enemy_speed=1.5, spawn_interval=90, target_score=100, enemy_color=(255, 0, 85), zigzag=False
    ),
    2: LevelConfig(
        enemy_speed=2.5, spawn_interval=60, target_score=300, enemy_color=(0, 255, 204), zigzag=False
    ),
    3: LevelConfig(
        enemy_speed=3.5, spawn_interval=40, target_score=600, enemy_color=(255, 255, 0), zigzag=True
    ),
}

FIRST_LEVEL: int = 1
MAX_LEVEL: int = max(LEVEL_CONFIGS)
