import pygame
import pytest

from neonraid.config.config import SCREEN_HEIGHT, SCREEN_WIDTH
from neonraid.screens import ScreenManager, ScreenName


@pytest.fixture
def screens():
    return ScreenManager()


def test_starts_on_start_screen(screens):
    assert screens.active == ScreenName.START


def test_switch_keeps_one_active_screen(screens):
    for name in ScreenName:
        screens.switch(name)
        assert screens.active == name


def test_texts(screens):
    screens.update_scoreboard(120, 2)
    screens.set_level_title(3)
    screens.set_final_score(40)
    screens.set_victory_score(610)
    assert screens.score_text == "Score: 120"
    assert screens.level_text == "Level: 2"
    assert screens.level_title == "LEVEL 3"
    assert screens.final_score_text == "Your score: 40"
    assert screens.victory_score_text == "Final score: 610"


@pytest.mark.parametrize(
    "name, label",
    [
        (ScreenName.START, "START"),
        (ScreenName.GAME_OVER, "RESTART"),
        (ScreenName.VICTORY, "PLAY AGAIN"),
        (ScreenName.HUD, None),
        (ScreenName.TRANSITION, None),
    ],
)
def test_buttons_only_on_session_screens(screens, name, label):
    screens.switch(name)
    assert screens.button_label == label
    assert screens.button_hit(screens.button_rect.center) == (label is not None)


def test_draw_every_screen():
    pygame.font.init()
    try:
        screens = ScreenManager()
        surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        for name in ScreenName:
            screens.switch(name)
            screens.draw(surface)
    finally:
        pygame.font.quit()
