"""Game entry point: window setup and the main-menu loop."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Sequence

import pygame

from spacesim.audio import init_audio, shutdown_audio
from spacesim.menu import MainMenu, MenuState
from spacesim.text_renderer import DEFAULT_FONT_PATH, TextRenderer

TITLE = "Space Sim"
WIDTH = 1280
HEIGHT = 720
NEW_GAME_DELAY = 2.0


def start_new_game(delay: float = NEW_GAME_DELAY) -> None:
    """Begin a new game."""
    print("Starting new game...")
    time.sleep(delay)


def dispatch(state: MenuState) -> bool:
    """Act on a menu result; return whether the game keeps running."""
    if state == MenuState.NEW_GAME:
        start_new_game()
    elif state == MenuState.QUIT:
        return False
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="space_sim", description=TITLE)
    parser.add_argument("--font", default=str(DEFAULT_FONT_PATH), help="glyph atlas image")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error as exc:
            print(f"Failed to init display: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption(TITLE)
        init_audio()
        with TextRenderer(WIDTH, HEIGHT, args.font) as renderer:
            menu = MainMenu(renderer)
            clock = pygame.time.Clock()
            running = True
            while running:
                running = dispatch(menu.show(screen))
                pygame.display.flip()
                clock.tick(60)
        shutdown_audio()
        return 0
    finally:
        pygame.quit()