"""The main menu: option layout, input handling and drawing."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

import pygame

from spacesim.text_renderer import TextRenderer


class MenuState(IntEnum):
    """What the main menu asks the game to do next."""

    QUIT = 0
    SETTINGS = 1
    LOAD_GAME = 2
    NEW_GAME = 3
    MAIN_MENU = 4


OPTIONS = ("Quit", "Settings", "Load Game", "New Game")
OPTION_X = 100.0
OPTION_TOP = 500.0
OPTION_SPACING = 40.0
OPTION_WIDTH = 300.0
OPTION_HEIGHT = 30.0
CLEAR_COLOR = (round(0.1 * 255), round(0.1 * 255), round(0.15 * 255))


def _option_y(index: int) -> float:
    return OPTION_TOP - index * OPTION_SPACING


class MainMenu:
    """Main menu with keyboard and mouse selection."""

    def __init__(self, renderer: Optional[TextRenderer] = None) -> None:
        self.renderer = renderer
        self.selected = 0
        self.mouse = (0.0, 0.0)

    def option_at(self, x: float, y: float) -> Optional[int]:
        """Return the index of the option under (x, y), or None."""
        hit = None
        for index in range(len(OPTIONS)):
            top = _option_y(index)
            if OPTION_X <= x <= OPTION_X + OPTION_WIDTH and top <= y <= top + OPTION_HEIGHT:
                hit = index
        return hit

    def select_next(self) -> None:
        self.selected = (self.selected + 1) % len(OPTIONS)

    def select_previous(self) -> None:
        self.selected = (self.selected - 1) % len(OPTIONS)

    def handle_event(self, event: pygame.event.Event) -> Optional[MenuState]:
        """Apply one input event; return a state if the menu is done."""
        clicked = False
        if event.type == pygame.MOUSEMOTION:
            self.mouse = (float(event.pos[0]), float(event.pos[1]))
        elif event.type == pygame.MOUSEBUTTONDOWN:
            clicked = event.button == pygame.BUTTON_LEFT
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_DOWN:
                self.select_next()
            elif event.key == pygame.K_UP:
                self.select_previous()
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                return MenuState(self.selected)
            elif event.key == pygame.K_ESCAPE:
                return MenuState.QUIT
        elif event.type == pygame.QUIT:
            return MenuState.QUIT

        hovered = self.option_at(*self.mouse)
        if hovered is not None:
            self.selected = hovered
        if clicked and hovered is not None:
            return MenuState(hovered)
        return None

    def draw(self, surface: pygame.Surface) -> None:
        """Clear the surface and draw every option, highlighting the selection."""
        surface.fill(CLEAR_COLOR)
        if self.renderer is None:
            return
        for index, label in enumerate(OPTIONS):
            self.renderer.render_text(
                surface, label, OPTION_X, _option_y(index), 1.0, self.selected == index
            )

    def show(self, surface: pygame.Surface) -> MenuState:
        """Draw one frame and process pending events."""
        self.mouse = (0.0, 0.0)
        self.draw(surface)
        for event in pygame.event.get():
            result = self.handle_event(event)
            if result is not None:
                return result
            self.draw(surface)
        return MenuState.MAIN_MENU