"""Settings dialog for configuring a quiz before it starts."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from breed_quiz.constants.quiz_constants import DEFAULT_TIME_LIMIT_SECONDS, DEFAULT_TOTAL_ROUNDS
from breed_quiz.core.models import SessionConfig

MAX_ROUNDS = 50
MAX_SECONDS_PER_QUESTION = 120


class SettingsDialog(QDialog):
    """Dialog for choosing quiz length, time limit and font size."""

    def __init__(
        self,
        parent=None,
        config: SessionConfig | None = None,
        game_font_size: int = 14,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(360)

        self._config = config
        self._game_font_size = game_font_size

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        quiz_group = QGroupBox("Quiz")
        quiz_layout = QVBoxLayout()
        quiz_group.setLayout(quiz_layout)

        self.rounds_spinbox = self._add_spin_row(
            quiz_layout,
            "Number of rounds:",
            1,
            MAX_ROUNDS,
            self._config.total_rounds if self._config else DEFAULT_TOTAL_ROUNDS,
        )
        self.seconds_spinbox = self._add_spin_row(
            quiz_layout,
            "Seconds per question:",
            1,
            MAX_SECONDS_PER_QUESTION,
            self._config.per_question_seconds if self._config else DEFAULT_TIME_LIMIT_SECONDS,
            suffix=" s",
        )
        layout.addWidget(quiz_group)

        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)
        self.game_font_spinbox = self._add_spin_row(
            display_layout,
            "Game font size (question, answers):",
            10,
            32,
            self._game_font_size,
            suffix=" pt",
        )
        layout.addWidget(display_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def _add_spin_row(
        self,
        layout: QVBoxLayout,
        text: str,
        minimum: int,
        maximum: int,
        value: int,
        suffix: str = "",
    ) -> QSpinBox:
        row = QHBoxLayout()
        spinbox = QSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setValue(max(minimum, min(maximum, value)))
        if suffix:
            spinbox.setSuffix(suffix)
        row.addWidget(QLabel(text))
        row.addStretch()
        row.addWidget(spinbox)
        layout.addLayout(row)
        return spinbox

    def get_session_config(self) -> SessionConfig:
        """Build the session config from the selected values."""
        return SessionConfig(
            total_rounds=self.rounds_spinbox.value(),
            per_question_seconds=self.seconds_spinbox.value(),
        )

    def get_game_font_size(self) -> int:
        return self.game_font_spinbox.value()
