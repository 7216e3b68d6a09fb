"""A space simulation: universe model, bitmap text rendering and a pygame main menu."""

__version__ = "0.1.0"