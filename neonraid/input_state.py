"""Keyboard state shared between the event handler and the player."""

from typing import Dict, Mapping, Optional

import pygame

from neonraid.config.config import KEY_BINDINGS

ACTIONS = ("up", "down", "left", "right", "fire")


class InputState:
    """Tracks which bound keys are currently held.

    Several keys can drive the same action (W and the Up arrow both move up);
    an action stays active while any of its keys is held.
    """

    def __init__(self, bindings: Optional[Mapping[int, str]] = None) -> None:
        self.bindings: Dict[int, str] = dict(bindings if bindings is not None else KEY_BINDINGS)
        self.held: Dict[int, bool] = {key: False for key in self.bindings}

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Update held flags from a key event.

        Args:
            event: Any pygame event

        Returns:
            True if the event was a press or release of a bound key
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False
        if event.key not in self.bindings:
            return False
        self.held[event.key] = event.type == pygame.KEYDOWN
        return True

    def is_active(self, action: str) -> bool:
        """Return True if any key bound to the action is held."""
        return any(held and self.bindings[key] == action for key, held in self.held.items())

    @property
    def up(self) -> bool:
        return self.is_active("up")

    @property
    def down(self) -> bool:
        return self.is_active("down")

    @property
    def left(self) -> bool:
        return self.is_active("left")

    @property
    def right(self) -> bool:
        return self.is_active("right")

    @property
    def fire(self) -> bool:
        return self.is_active("fire")

    def release_all(self) -> None:
        """Mark every key as released, e.g. when the window loses focus."""
        for key in self.held:
            self.held[key] = False
