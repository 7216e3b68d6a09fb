from unittest.mock import patch

import pygame
import pytest

from spacesim.menu import CLEAR_COLOR, OPTIONS, MainMenu, MenuState
from spacesim.text_renderer import TextRenderer


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _motion(x, y):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=(x, y))


def _click(button=pygame.BUTTON_LEFT):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button)


def test_option_order_matches_states():
    assert [MenuState(i) for i in range(len(OPTIONS))] == [
        MenuState.QUIT,
        MenuState.SETTINGS,
        MenuState.LOAD_GAME,
        MenuState.NEW_GAME,
    ]


def test_selection_wraps():
    menu = MainMenu()
    menu.select_previous()
    assert menu.selected == len(OPTIONS) - 1
    menu.select_next()
    assert menu.selected == 0
    for _ in OPTIONS:
        menu.select_next()
    assert menu.selected == 0


def test_option_at_bounds():
    menu = MainMenu()
    assert menu.option_at(100, 500) == 0
    assert menu.option_at(400, 530) == 0
    assert menu.option_at(99, 500) is None
    assert menu.option_at(100, 531) is None
    assert menu.option_at(150, 380) == 3


def test_enter_returns_selected():
    menu = MainMenu()
    assert menu.handle_event(_key(pygame.K_RETURN)) == MenuState.QUIT
    assert menu.handle_event(_key(pygame.K_DOWN)) is None
    assert menu.handle_event(_key(pygame.K_KP_ENTER)) == MenuState.SETTINGS


def test_up_from_top_selects_last():
    menu = MainMenu()
    menu.handle_event(_key(pygame.K_UP))
    assert menu.handle_event(_key(pygame.K_RETURN)) == MenuState.NEW_GAME


@pytest.mark.parametrize(
    "event",
    [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE), pygame.event.Event(pygame.QUIT)],
)
def test_escape_and_quit(event):
    menu = MainMenu()
    menu.selected = 3
    assert menu.handle_event(event) == MenuState.QUIT


def test_hover_selects_and_click_chooses():
    menu = MainMenu()
    assert menu.handle_event(_motion(150, 380)) is None
    assert menu.selected == 3
    assert menu.handle_event(_click()) == MenuState.NEW_GAME


def test_right_click_and_click_outside_ignored():
    menu = MainMenu()
    menu.handle_event(_motion(150, 420))
    assert menu.handle_event(_click(pygame.BUTTON_RIGHT)) is None
    menu.handle_event(_motion(10, 10))
    assert menu.handle_event(_click()) is None
    assert menu.selected == 2


def test_draw_without_renderer_clears():
    surface = pygame.Surface((20, 20))
    MainMenu().draw(surface)
    assert tuple(surface.get_at((5, 5)))[:3] == CLEAR_COLOR


def test_draw_highlights_selected(tmp_path):
    atlas = pygame.Surface((128, 128))
    atlas.fill((255, 255, 255))
    path = tmp_path / "font.bmp"
    pygame.image.save(atlas, str(path))
    menu = MainMenu(TextRenderer(1280, 720, path))
    surface = pygame.Surface((1280, 720))
    menu.draw(surface)
    selected = tuple(surface.get_at((101, 501)))[:3]
    other = tuple(surface.get_at((101, 461)))[:3]
    assert other == (255, 255, 255)
    assert selected[:2] == (255, 255) and selected[2] < 255
    assert tuple(surface.get_at((5, 5)))[:3] == CLEAR_COLOR


def test_show_without_events_stays_in_menu():
    with patch("pygame.event.get", return_value=[]):
        assert MainMenu().show(pygame.Surface((10, 10))) == MenuState.MAIN_MENU


def test_show_returns_on_escape():
    with patch("pygame.event.get", return_value=[_key(pygame.K_ESCAPE)]):
        assert MainMenu().show(pygame.Surface((10, 10))) == MenuState.QUIT


def test_show_forgets_mouse_between_frames():
    menu = MainMenu()
    menu.handle_event(_motion(150, 380))
    with patch("pygame.event.get", return_value=[_click()]):
        assert menu.show(pygame.Surface((10, 10))) == MenuState.MAIN_MENU
    assert menu.mouse == (0.0, 0.0)