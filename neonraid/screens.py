"""Named UI screens drawn on top of the playfield."""

from enum import Enum
from typing import Dict, Optional, Tuple

import pygame

from neonraid.config.config import (
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    NEON_CYAN,
    NEON_PINK,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TITLE_FONT_SIZE,
    WHITE,
)
from neonraid.logger import get_logger

# Get a logger for this module
logger = get_logger(__name__)

BUTTON_SIZE: Tuple[int, int] = (220, 56)


class ScreenName(Enum):
    START = "start"
    HUD = "hud"
    TRANSITION = "transition"
    GAME_OVER = "game_over"
    VICTORY = "victory"


# Screens that carry a button starting a new session, with its label
BUTTON_LABELS: Dict[ScreenName, str] = {
    ScreenName.START: "START",
    ScreenName.GAME_OVER: "RESTART",
    ScreenName.VICTORY: "PLAY AGAIN",
}


class ScreenManager:
    """Keeps exactly one screen active and holds the texts the game updates."""

    def __init__(self) -> None:
        self.active: ScreenName = ScreenName.START

        # Texts written by the game
        self.score_text = ""
        self.level_text = ""
        self.level_title = ""
        self.final_score_text = ""
        self.victory_score_text = ""

        self.button_rect = pygame.Rect((0, 0), BUTTON_SIZE)
        self.button_rect.center = (SCREEN_WIDTH // 2, SCREEN_HEIGHT * 2 // 3)

        # Fonts are created on first draw, after pygame.font is initialised
        self._fonts: Dict[int, pygame.font.Font] = {}

    def switch(self, name: ScreenName) -> None:
        """Make the given screen the only active one."""
        if name != self.active:
            logger.debug("Screen %s -> %s", self.active.value, name.value)
        self.active = name

    def update_scoreboard(self, score: int, level: int) -> None:
        self.score_text = f"Score: {score}"
        self.level_text = f"Level: {level}"

    def set_level_title(self, level: int) -> None:
        self.level_title = f"LEVEL {level}"

    def set_final_score(self, score: int) -> None:
        self.final_score_text = f"Your score: {score}"

    def set_victory_score(self, score: int) -> None:
        self.victory_score_text = f"Final score: {score}"

    @property
    def button_label(self) -> Optional[str]:
        """Label of the active screen's button, or None if it has none."""
        return BUTTON_LABELS.get(self.active)

    def button_hit(self, position: Tuple[int, int]) -> bool:
        """Return True if the position falls on the active screen's button."""
        return self.button_label is not None and self.button_rect.collidepoint(position)

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(DEFAULT_FONT_NAME, size)
        return self._fonts[size]

    def _blit_centered(
        self, surface: pygame.Surface, text: str, size: int, color, center_y: int
    ) -> None:
        rendered = self._font(size).render(text, True, color)
        surface.blit(rendered, rendered.get_rect(center=(SCREEN_WIDTH // 2, center_y)))

    def _draw_button(self, surface: pygame.Surface, label: str) -> None:
        pygame.draw.rect(surface, NEON_PINK, self.button_rect, width=3, border_radius=8)
        rendered = self._font(DEFAULT_FONT_SIZE).render(label, True, WHITE)
        surface.blit(rendered, rendered.get_rect(center=self.button_rect.center))

    def _draw_dim(self, surface: pygame.Surface) -> None:
        shade = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 150))
        surface.blit(shade, (0, 0))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the active screen's overlay."""
        third = SCREEN_HEIGHT // 3

        if self.active == ScreenName.HUD:
            score = self._font(DEFAULT_FONT_SIZE).render(self.score_text, True, WHITE)
            level = self._font(DEFAULT_FONT_SIZE).render(self.level_text, True, NEON_CYAN)
            surface.blit(score, (12, 10))
            surface.blit(level, level.get_rect(topright=(SCREEN_WIDTH - 12, 10)))

        elif self.active == ScreenName.START:
            self._blit_centered(surface, "NEON RAID", TITLE_FONT_SIZE, NEON_CYAN, third)
            help_text = "WASD / ARROWS - Move    SPACE - Fire"
            self._blit_centered(surface, help_text, DEFAULT_FONT_SIZE, WHITE, third + 70)

        elif self.active == ScreenName.TRANSITION:
            self._blit_centered(surface, self.level_title, TITLE_FONT_SIZE, NEON_CYAN, third + 40)
            self._blit_centered(surface, "Get ready!", DEFAULT_FONT_SIZE, WHITE, third + 100)

        elif self.active == ScreenName.GAME_OVER:
            self._draw_dim(surface)
            self._blit_centered(surface, "GAME OVER", TITLE_FONT_SIZE, NEON_PINK, third)
            self._blit_centered(surface, self.final_score_text, DEFAULT_FONT_SIZE, WHITE, third + 70)

        elif self.active == ScreenName.VICTORY:
            self._draw_dim(surface)
            self._blit_centered(surface, "VICTORY!", TITLE_FONT_SIZE, NEON_CYAN, third)
            self._blit_centered(
                surface, self.victory_score_text, DEFAULT_FONT_SIZE, WHITE, third + 70
            )

        label = self.button_label
        if label is not None:
            self._draw_button(surface, label)
