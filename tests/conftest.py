"""Shared fixtures: headless pygame and a fresh game per test."""

import os

# Must be set before pygame opens any device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from neonraid.config.config import SCREEN_HEIGHT, SCREEN_WIDTH
from neonraid.game_loop import Game
from neonraid.input_state import InputState
from neonraid.screens import ScreenManager
from tests.helpers import RecordingAudio


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def input_state():
    return InputState()


@pytest.fixture
def surface():
    return pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))


@pytest.fixture
def game(audio, input_state, surface):
    game = Game(
        screen=surface,
        sound_manager=audio,
        screen_manager=ScreenManager(),
        input_state=input_state,
    )
    yield game
    pygame.quit()


@pytest.fixture
def playing_game(game):
    game.start_session()
    return game
