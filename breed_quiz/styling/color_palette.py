"""Color palette for BreedQuiz supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#000000", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#666666", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BORDER_PRIMARY = ThemeColors(light="#D1D1D1", dark="#555555")

    # Answer buttons, a light tint of the accent blue
    OPTION_BG = ThemeColors(light="#CCE4F7", dark="#22415C")
    OPTION_HOVER_BG = ThemeColors(light="#B3D7F2", dark="#2C5478")

    # Reveal states
    CORRECT_BG = ThemeColors(light="#C8E6C9", dark="#2E5E30")
    WRONG_BG = ThemeColors(light="#F8C9CA", dark="#6B2A2C")

    # Countdown label
    WARNING = ThemeColors(light="#FFB900", dark="#FFC83D")
    ERROR = ThemeColors(light="#D13438", dark="#FF6B6B")
