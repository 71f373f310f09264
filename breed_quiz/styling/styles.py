"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
        """

    @staticmethod
    def get_option_button_style(outcome: bool | None, theme: Theme = Theme.LIGHT) -> str:
        """Style for an answer button; ``outcome`` colors it during the reveal."""
        if outcome is True:
            background = ColorPalette.CORRECT_BG.get(theme)
        elif outcome is False:
            background = ColorPalette.WRONG_BG.get(theme)
        else:
            background = ColorPalette.OPTION_BG.get(theme)
        return f"""
            QPushButton {{
                background-color: {background};
                border: none;
                border-radius: 10px;
                padding: 12px;
            }}
            QPushButton:hover:enabled {{
                background-color: {ColorPalette.OPTION_HOVER_BG.get(theme)};
            }}
        """

    @staticmethod
    def get_timer_label_style(seconds_remaining: int, theme: Theme = Theme.LIGHT) -> str:
        if seconds_remaining <= 3:
            color = ColorPalette.ERROR.get(theme)
        elif seconds_remaining <= 5:
            color = ColorPalette.WARNING.get(theme)
        else:
            color = ColorPalette.TEXT_SECONDARY.get(theme)
        return f"color: {color}; font-weight: bold;"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
