"""Module for managing game levels and progression."""

from enum import Enum
from typing import Dict, Optional

from neonraid.config.level_constants import LEVEL_CONFIGS, LevelConfig
from neonraid.logger import get_logger

# Get logger for this module
logger = get_logger(__name__)


class LevelOutcome(Enum):
    """Result of checking the score against the current level's target."""

    CONTINUE = "continue"
    ADVANCE = "advance"
    VICTORY = "victory"


def load_level(level_number: int, configs: Optional[Dict[int, LevelConfig]] = None) -> LevelConfig:
    """Return the configuration of a level.

    Raises:
        ValueError: If the level is not configured
    """
    configs = LEVEL_CONFIGS if configs is None else configs
    try:
        return configs[level_number]
    except KeyError:
        raise ValueError(f"Unknown level: {level_number}") from None


class LevelController:
    """Tracks the current level and decides when it is complete."""

    def __init__(self, configs: Optional[Dict[int, LevelConfig]] = None) -> None:
        self.configs = LEVEL_CONFIGS if configs is None else configs
        self.first_level = min(self.configs)
        self.max_level = max(self.configs)
        self.current_level = self.first_level

    @property
    def config(self) -> LevelConfig:
        return load_level(self.current_level, self.configs)

    @property
    def is_final_level(self) -> bool:
        return self.current_level >= self.max_level

    def reset(self) -> None:
        """Return to the first level."""
        self.current_level = self.first_level

    def evaluate(self, score: int) -> LevelOutcome:
        """Compare a score with the current level's target.

        Args:
            score: The player's current score

        Returns:
            CONTINUE below the target, otherwise ADVANCE, or VICTORY on the last level
        """
        if score < self.config.target_score:
            return LevelOutcome.CONTINUE
        if self.is_final_level:
            return LevelOutcome.VICTORY
        return LevelOutcome.ADVANCE

    def advance(self) -> int:
        """Move to the next level.

        Returns:
            The new level number

        Raises:
            ValueError: If already on the last level
        """
        if self.is_final_level:
            raise ValueError(f"Cannot advance past level {self.max_level}")
        self.current_level += 1
        logger.info("Advanced to level %d", self.current_level)
        return self.current_level
