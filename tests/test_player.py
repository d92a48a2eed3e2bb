import pygame
import pytest

from neonraid.config.config import (
    PLAYER_FIRE_RATE_MS,
    PLAYER_HEIGHT,
    PLAYER_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from neonraid.entity_pool import EntityPool
from neonraid.input_state import InputState
from neonraid.player import Player
from tests.helpers import RecordingAudio, key_event


@pytest.fixture
def projectiles():
    return EntityPool()


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def player(projectiles, audio):
    return Player(projectiles, audio)


def hold(input_state, *keys):
    for key in keys:
        input_state.handle_event(key_event(key))


def test_starts_centred_above_bottom_edge(player):
    assert player.x == SCREEN_WIDTH / 2 - PLAYER_WIDTH / 2
    assert player.y == SCREEN_HEIGHT - PLAYER_HEIGHT - 20


@pytest.mark.parametrize(
    "key, dx, dy",
    [
        (pygame.K_w, 0, -6),
        (pygame.K_UP, 0, -6),
        (pygame.K_s, 0, 6),
        (pygame.K_DOWN, 0, 6),
        (pygame.K_a, -6, 0),
        (pygame.K_LEFT, -6, 0),
        (pygame.K_d, 6, 0),
        (pygame.K_RIGHT, 6, 0),
    ],
)
def test_each_binding_moves_the_ship(player, key, dx, dy):
    player.y = 300.0
    start = (player.x, player.y)
    state = InputState()
    hold(state, key)

    player.update(state, 0)

    assert (player.x, player.y) == (start[0] + dx, start[1] + dy)


def test_position_stays_clamped_inside_screen(player):
    state = InputState()

    hold(state, pygame.K_LEFT, pygame.K_UP)
    for _ in range(500):
        player.update(state, 0)
        assert 0 <= player.x <= SCREEN_WIDTH - player.width
        assert 0 <= player.y <= SCREEN_HEIGHT - player.height
    assert (player.x, player.y) == (0, 0)

    state.release_all()
    hold(state, pygame.K_RIGHT, pygame.K_DOWN)
    for _ in range(500):
        player.update(state, 0)
        assert 0 <= player.x <= SCREEN_WIDTH - player.width
        assert 0 <= player.y <= SCREEN_HEIGHT - player.height
    assert (player.x, player.y) == (SCREEN_WIDTH - player.width, SCREEN_HEIGHT - player.height)


def test_first_shot_fires_immediately_from_the_nose(player, projectiles, audio):
    state = InputState()
    hold(state, pygame.K_SPACE)

    player.update(state, 0)

    assert len(projectiles) == 1
    assert (projectiles[0].x, projectiles[0].y) == player.muzzle
    assert audio.events == ["shoot"]


def test_second_shot_within_cooldown_is_suppressed(player, projectiles, audio):
    state = InputState()
    hold(state, pygame.K_SPACE)

    player.update(state, 1000)
    player.update(state, 1000 + PLAYER_FIRE_RATE_MS - 1)

    assert len(projectiles) == 1
    assert audio.count("shoot") == 1


def test_shot_allowed_once_cooldown_elapsed(player, projectiles):
    state = InputState()
    hold(state, pygame.K_SPACE)

    player.update(state, 1000)
    player.update(state, 1000 + PLAYER_FIRE_RATE_MS)

    assert len(projectiles) == 2
    assert player.last_shot_time == 1000 + PLAYER_FIRE_RATE_MS


def test_holding_fire_for_a_second_at_sixty_fps(player, projectiles):
    state = InputState()
    hold(state, pygame.K_SPACE)

    for frame in range(60):
        player.update(state, frame * 1000 / 60)

    # Shots at 0, 200, 400, 600 and 800 ms
    assert len(projectiles) == 5


def test_no_shot_without_fire_key(player, projectiles):
    player.update(InputState(), 0)
    assert len(projectiles) == 0
