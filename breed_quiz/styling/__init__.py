"""Styling module for the BreedQuiz application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
