"""Top-level game states."""

from enum import Enum


class GameState(Enum):
    START = "start"  # idle title screen, no simulation
    PLAYING = "playing"
    TRANSITION = "transition"  # frozen pause between levels
    GAMEOVER = "gameover"
    VICTORY = "victory"

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.GAMEOVER, GameState.VICTORY)
