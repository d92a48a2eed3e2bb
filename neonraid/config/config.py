"""Centralized game configuration settings."""

import logging
import os
from typing import Dict, Optional, Tuple

import pygame

# ==============================================================================
# GENERAL SETTINGS
# ==============================================================================

# Frame rate
FPS: int = 60
FRAME_DURATION_MS: float = 1000 / FPS

WINDOW_TITLE: str = "Neon Raid"


# ==============================================================================
# LOGGING SETTINGS
# ==============================================================================

# Can be set to logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL
LOG_LEVEL: int = logging.WARNING


# ==============================================================================
# DIRECTORY PATHS
# ==============================================================================

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
LOG_DIR = os.path.join(BASE_DIR, ".logs")


# ==============================================================================
# SCREEN AND DISPLAY SETTINGS
# ==============================================================================

# Screen dimensions
SCREEN_WIDTH: int = 800
SCREEN_HEIGHT: int = 600

# Colors
WHITE: Tuple[int, int, int] = (255, 255, 255)
BLACK: Tuple[int, int, int] = (0, 0, 0)
BACKGROUND_COLOR: Tuple[int, int, int] = (5, 5, 16)
NEON_CYAN: Tuple[int, int, int] = (0, 255, 204)
NEON_PINK: Tuple[int, int, int] = (255, 0, 85)

# Font settings
DEFAULT_FONT_SIZE: int = 28
TITLE_FONT_SIZE: int = 72
DEFAULT_FONT_NAME: Optional[str] = None  # Use default pygame font


# ==============================================================================
# PLAYER SETTINGS
# ==============================================================================

PLAYER_WIDTH: int = 40
PLAYER_HEIGHT: int = 40
PLAYER_SPEED: float = 6.0  # pixels per tick
PLAYER_FIRE_RATE_MS: int = 200  # minimum milliseconds between shots
PLAYER_BOTTOM_MARGIN: int = 20
PLAYER_COLOR: Tuple[int, int, int] = (38, 0, 255)
PLAYER_HITBOX_INSET: int = 10  # shrinks the player box on every side for enemy hits


# ==============================================================================
# PROJECTILE SETTINGS
# ==============================================================================

PROJECTILE_RADIUS: int = 4
PROJECTILE_SPEED: float = 12.0  # pixels per tick, upward
PROJECTILE_COLOR: Tuple[int, int, int] = (255, 0, 255)


# ==============================================================================
# ENEMY SETTINGS
# ==============================================================================

ENEMY_WIDTH: int = 30
ENEMY_HEIGHT: int = 30
ENEMY_ZIGZAG_AMPLITUDE: float = 4.0  # horizontal pixels per tick at the sine peak
ENEMY_ZIGZAG_ANGLE_STEP: float = 0.1  # radians per tick


# ==============================================================================
# PARTICLE SETTINGS
# ==============================================================================

PARTICLES_PER_EXPLOSION: int = 15
PARTICLE_MIN_RADIUS: float = 1.0
PARTICLE_RADIUS_RANGE: float = 3.0
PARTICLE_MAX_SPEED: float = 4.0  # each velocity component is in [-max, max)
PARTICLE_ALPHA_DECAY: float = 0.02  # alpha lost per tick


# ==============================================================================
# STARFIELD SETTINGS
# ==============================================================================

STAR_COUNT: int = 100
STAR_MAX_SIZE: float = 2.0
STAR_MIN_SPEED: float = 0.1
STAR_SPEED_RANGE: float = 0.5


# ==============================================================================
# SCORING AND TIMING
# ==============================================================================

SCORE_PER_HIT: int = 10
LEVEL_TRANSITION_MS: int = 2500  # pause between levels
END_SCREEN_DELAY_MS: int = 1000  # delay before the final score is shown


# ==============================================================================
# SOUND SETTINGS
# ==============================================================================

SAMPLE_RATE: int = 44100
DEFAULT_SOUND_VOLUME: float = 1.0

# Shoot cue: short descending square wave
SHOOT_DURATION_S: float = 0.1
SHOOT_FREQ_START: float = 880.0  # A5
SHOOT_FREQ_END: float = 110.0
SHOOT_GAIN: float = 0.1

# Game over cue: longer descending sawtooth
GAME_OVER_DURATION_S: float = 1.0
GAME_OVER_FREQ_START: float = 150.0
GAME_OVER_FREQ_END: float = 40.0
GAME_OVER_GAIN: float = 0.3

# Background tone: deep looping sine
BACKGROUND_FREQ: float = 65.0  # C2
BACKGROUND_GAIN: float = 0.15
BACKGROUND_LOOP_S: float = 1.0

# Exponential ramps end at this gain instead of zero
RAMP_FLOOR_GAIN: float = 0.001


# ==============================================================================
# KEY BINDINGS
# ==============================================================================

# Every movement direction has two bindings; fire has one
KEY_BINDINGS: Dict[int, str] = {
    pygame.K_w: "up",
    pygame.K_UP: "up",
    pygame.K_s: "down",
    pygame.K_DOWN: "down",
    pygame.K_a: "left",
    pygame.K_LEFT: "left",
    pygame.K_d: "right",
    pygame.K_RIGHT: "right",
    pygame.K_SPACE: "fire",
}
