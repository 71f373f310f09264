"""Qt UI components for the quiz application."""

from .dialog_helpers import (
    confirm_end_quiz,
    show_error,
    show_info,
    show_warning,
)
from .quiz_main_window import QuizMainWindow
from .settings_dialog import SettingsDialog

__all__ = [
    "QuizMainWindow",
    "SettingsDialog",
    "confirm_end_quiz",
    "show_error",
    "show_info",
    "show_warning",
]
