"""Bitmap-font text drawing from a 16x16 ASCII glyph atlas."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pygame

DEFAULT_FONT_PATH = Path("assets/fonts/ascii_font.png")

GRID = 16
CELL_SIZE = 1.0 / GRID
GLYPH_WIDTH = 8.0
GLYPH_HEIGHT = 12.0
GLYPH_ADVANCE = 9.0
DISCARD_BELOW = 0.1

NORMAL_COLOR = (255, 255, 255)
HIGHLIGHT_COLOR = (255, 255, round(0.3 * 255))


@dataclass(frozen=True)
class Glyph:
    """One character placed on screen, with its cell in the atlas."""

    code: int
    x: float
    y: float
    width: float
    height: float
    u: float
    v: float

    @property
    def row(self) -> int:
        return self.code // GRID

    @property
    def col(self) -> int:
        return self.code % GRID


def glyph_cell(char: Union[str, int]) -> tuple[int, int]:
    """Return the (row, column) of a byte or one-character string in the atlas."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        code = ord(char)
    else:
        code = int(char)
    if not 0 <= code < GRID * GRID:
        raise ValueError(f"character code {code} is outside the atlas")
    return divmod(code, GRID)


def layout_text(text: str, x: float, y: float, scale: float = 1.0) -> list[Glyph]:
    """Place each byte of the UTF-8 encoded text left to right from (x, y)."""
    glyphs = []
    for index, code in enumerate(text.encode("utf-8")):
        row, col = glyph_cell(code)
        glyphs.append(
            Glyph(
                code=code,
                x=x + index * GLYPH_ADVANCE * scale,
                y=y,
                width=GLYPH_WIDTH * scale,
                height=GLYPH_HEIGHT * scale,
                u=col * CELL_SIZE,
                v=row * CELL_SIZE,
            )
        )
    return glyphs


def to_ndc(x: float, y: float, screen_width: float, screen_height: float) -> tuple[float, float]:
    """Map pixel coordinates (origin top-left) to normalised device coordinates."""
    return (x / (screen_width / 2.0) - 1.0, 1.0 - y / (screen_height / 2.0))


class TextRenderer:
    """Draws strings onto pygame surfaces using a glyph atlas image."""

    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        font_path: Union[str, Path, None] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.font_path = Path(font_path) if font_path is not None else DEFAULT_FONT_PATH
        self._cache: dict[tuple[int, bool], pygame.Surface] = {}
        self._atlas: Optional[pygame.Surface]
        try:
            self._atlas = pygame.image.load(str(self.font_path))
        except (pygame.error, FileNotFoundError, OSError):
            print(f"Could not load {self.font_path.name}", file=sys.stderr)
            self._atlas = None

    @property
    def loaded(self) -> bool:
        return self._atlas is not None

    def __enter__(self) -> "TextRenderer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _cell_surface(self, code: int, highlight: bool) -> pygame.Surface:
        key = (code, highlight)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        assert self._atlas is not None
        cell_w = self._atlas.get_width() // GRID
        cell_h = self._atlas.get_height() // GRID
        row, col = glyph_cell(code)
        color = HIGHLIGHT_COLOR if highlight else NORMAL_COLOR
        cell = pygame.Surface((max(cell_w, 1), max(cell_h, 1)), pygame.SRCALPHA)
        cell.fill((0, 0, 0, 0))
        for py in range(cell_h):
            for px in range(cell_w):
                red = self._atlas.get_at((col * cell_w + px, row * cell_h + py)).r
                if red / 255.0 >= DISCARD_BELOW:
                    cell.set_at((px, py), (*color, red))
        self._cache[key] = cell
        return cell

    def render_text(
        self,
        surface: pygame.Surface,
        text: str,
        x: float,
        y: float,
        scale: float = 1.0,
        highlight: bool = False,
    ) -> list[Glyph]:
        """Draw text at (x, y) and return the glyphs laid out for it."""
        glyphs = layout_text(text, x, y, scale)
        if self._atlas is None:
            return glyphs
        for glyph in glyphs:
            size = (max(1, round(glyph.width)), max(1, round(glyph.height)))
            image = pygame.transform.scale(self._cell_surface(glyph.code, highlight), size)
            surface.blit(image, (round(glyph.x), round(glyph.y)))
        return glyphs

    def close(self) -> None:
        """Release the atlas and cached glyph images."""
        self._cache.clear()
        self._atlas = None