"""Qt main window presenting the breed quiz."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from breed_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from breed_quiz.constants.quiz_constants import (
    DEFAULT_TIME_LIMIT_SECONDS,
    DEFAULT_TOTAL_ROUNDS,
    OPTION_COUNT,
)
from breed_quiz.constants.ui_constants import (
    BUTTON_ABOUT,
    BUTTON_HELP,
    BUTTON_RESET,
    BUTTON_RESTART,
    BUTTON_RETRY,
    BUTTON_SETTINGS,
    BUTTON_START,
    CORRECT_FEEDBACK,
    FINAL_SCORE_TEMPLATE,
    IDLE_MESSAGE,
    IMAGE_HEIGHT_PX,
    IMAGE_LOAD_FAILED_MESSAGE,
    LOADING_MESSAGE,
    QUESTION_PROMPT,
    ROUND_TEMPLATE,
    SCORE_TEMPLATE,
    TIMEOUT_FEEDBACK_TEMPLATE,
    TIMER_TEMPLATE,
    WINDOW_TITLE,
    WRONG_FEEDBACK_TEMPLATE,
)
from breed_quiz.core.image_provider import FetchError
from breed_quiz.core.models import SessionConfig, SessionPhase, SessionState
from breed_quiz.core.services.quiz_session import QuizSession
from breed_quiz.network.dog_api import DogApiClient
from breed_quiz.styling.styles import Styles
from breed_quiz.ui.dialog_helpers import confirm_end_quiz, show_error, show_info, show_warning
from breed_quiz.ui.settings_dialog import SettingsDialog


class QuizMainWindow(QMainWindow):
    """Renders the session state and forwards the player's choices."""

    def __init__(self, session: QuizSession, api_client: DogApiClient) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.session = session
        self.api_client = api_client

        self._config = SessionConfig(
            total_rounds=DEFAULT_TOTAL_ROUNDS,
            per_question_seconds=DEFAULT_TIME_LIMIT_SECONDS,
        )
        self._game_font_size: int = 14
        self._displayed_image_ref: str | None = None

        self._build_ui()
        self._apply_styles()

        self.session.state_changed.connect(self._render_state)
        self.session.session_finished.connect(self._handle_session_finished)
        self.session.session_aborted.connect(self._handle_session_aborted)
        self._render_state(self.session.state)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_control_buttons(root_layout)

        # Progress row: round, score and countdown
        status_row = QHBoxLayout()
        self.round_label = QLabel("", self)
        status_row.addWidget(self.round_label)
        status_row.addStretch()
        self.score_label = QLabel("", self)
        status_row.addWidget(self.score_label)
        root_layout.addLayout(status_row)

        timer_row = QHBoxLayout()
        self.timer_label = QLabel("", self)
        timer_row.addWidget(self.timer_label)
        self.timer_progress = QProgressBar(self)
        self.timer_progress.setTextVisible(False)
        timer_row.addWidget(self.timer_progress, stretch=1)
        root_layout.addLayout(timer_row)

        self.image_label = QLabel(IDLE_MESSAGE, self)
        self.image_label.setAlignment(Qt.AlignCenter)
        self.image_label.setMinimumHeight(IMAGE_HEIGHT_PX)
        root_layout.addWidget(self.image_label, stretch=1)

        self.prompt_label = QLabel(QUESTION_PROMPT, self)
        self.prompt_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.prompt_label)

        options_grid = QGridLayout()
        self.option_buttons: list[QPushButton] = []
        for idx in range(OPTION_COUNT):
            button = QPushButton("", self)
            button.clicked.connect(lambda _checked=False, i=idx: self._handle_option_clicked(i))
            options_grid.addWidget(button, idx // 2, idx % 2)
            self.option_buttons.append(button)
        root_layout.addLayout(options_grid)

        self.feedback_label = QLabel("", self)
        self.feedback_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.feedback_label)

        error_row = QHBoxLayout()
        self.error_label = QLabel("", self)
        self.error_label.setWordWrap(True)
        error_row.addWidget(self.error_label, stretch=1)
        self.retry_button = QPushButton(BUTTON_RETRY, self)
        self.retry_button.clicked.connect(self.session.retry_round)
        error_row.addWidget(self.retry_button)
        root_layout.addLayout(error_row)

    def _build_control_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.start_button = QPushButton(BUTTON_START, self)
        self.start_button.clicked.connect(self._handle_start)
        button_row.addWidget(self.start_button)

        self.reset_button = QPushButton(BUTTON_RESET, self)
        self.reset_button.clicked.connect(self._handle_reset)
        button_row.addWidget(self.reset_button)

        button_row.addStretch()

        self.settings_button = QPushButton(BUTTON_SETTINGS, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        self.about_button = QPushButton(BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        layout.addLayout(button_row)

    # --- Rendering ---

    def _render_state(self, state: SessionState) -> None:
        idle = state.phase == SessionPhase.IDLE
        finished = state.phase == SessionPhase.FINISHED
        in_progress = not idle and not finished

        self.start_button.setEnabled(not in_progress)
        self.start_button.setText(BUTTON_RESTART if finished else BUTTON_START)
        self.reset_button.setEnabled(in_progress)
        self.settings_button.setEnabled(not in_progress)

        if idle:
            self.round_label.setText("")
            self.score_label.setText("")
        else:
            self.round_label.setText(
                ROUND_TEMPLATE.format(current=state.round_number, total=state.total_rounds)
            )
            self.score_label.setText(SCORE_TEMPLATE.format(score=state.score))

        self._render_timer(state)
        self._render_image(state)
        self._render_options(state)
        self._render_feedback(state)

        self.error_label.setText(
            f"{IMAGE_LOAD_FAILED_MESSAGE} {state.error_message}" if state.error_message else ""
        )
        self.retry_button.setVisible(state.error_message is not None)

    def _render_timer(self, state: SessionState) -> None:
        visible = state.current_question is not None
        self.timer_label.setVisible(visible)
        self.timer_progress.setVisible(visible)
        if not visible:
            return
        total = self.session.config.per_question_seconds if self.session.config else 1
        self.timer_progress.setRange(0, total)
        self.timer_progress.setValue(state.seconds_remaining)
        self.timer_label.setText(TIMER_TEMPLATE.format(seconds=state.seconds_remaining))
        self.timer_label.setStyleSheet(Styles.get_timer_label_style(state.seconds_remaining))

    def _render_image(self, state: SessionState) -> None:
        question = state.current_question
        if question is None:
            self._displayed_image_ref = None
            self.image_label.setPixmap(QPixmap())
            if state.is_loading:
                self.image_label.setText(LOADING_MESSAGE)
            elif state.phase == SessionPhase.IDLE:
                self.image_label.setText(IDLE_MESSAGE)
            else:
                self.image_label.setText("")
            return

        if question.image_ref == self._displayed_image_ref:
            return
        self._displayed_image_ref = question.image_ref
        self.image_label.setText(LOADING_MESSAGE)
        image_ref = question.image_ref
        self.api_client.fetch_image_bytes(
            image_ref,
            lambda data: self._show_image(image_ref, data),
            lambda error: self._show_image_error(image_ref, error),
        )

    def _show_image(self, image_ref: str, data: bytes) -> None:
        if image_ref != self._displayed_image_ref:
            return
        pixmap = QPixmap()
        if not pixmap.loadFromData(data):
            self.image_label.setText(IMAGE_LOAD_FAILED_MESSAGE)
            return
        self.image_label.setPixmap(
            pixmap.scaledToHeight(IMAGE_HEIGHT_PX, Qt.SmoothTransformation)
        )

    def _show_image_error(self, image_ref: str, error: FetchError) -> None:
        if image_ref == self._displayed_image_ref:
            self.image_label.setText(f"{IMAGE_LOAD_FAILED_MESSAGE} {error}")

    def _render_options(self, state: SessionState) -> None:
        question = state.current_question
        options = question.options if question else ()
        revealing = state.phase in (SessionPhase.ANSWERED, SessionPhase.TIME_EXPIRED)
        accepting = state.phase == SessionPhase.AWAITING_ANSWER and question is not None
        self.prompt_label.setVisible(question is not None)

        for idx, button in enumerate(self.option_buttons):
            if idx >= len(options):
                button.setVisible(False)
                continue
            option = options[idx]
            button.setVisible(True)
            button.setText(option)
            button.setEnabled(accepting)

            outcome: bool | None = None
            if revealing:
                if option == question.correct_label:
                    outcome = True
                elif option == state.selected_option:
                    outcome = False
            button.setStyleSheet(
                Styles.get_option_button_style(outcome)
                + f"QPushButton {{ font-size: {self._game_font_size}pt; }}"
            )

    def _render_feedback(self, state: SessionState) -> None:
        question = state.current_question
        if state.phase == SessionPhase.ANSWERED and question is not None:
            if state.last_answer_correct:
                self.feedback_label.setText(CORRECT_FEEDBACK)
            else:
                self.feedback_label.setText(WRONG_FEEDBACK_TEMPLATE.format(answer=question.correct_label))
        elif state.phase == SessionPhase.TIME_EXPIRED and question is not None:
            self.feedback_label.setText(TIMEOUT_FEEDBACK_TEMPLATE.format(answer=question.correct_label))
        else:
            self.feedback_label.setText("")

    # --- Intents ---

    def _handle_option_clicked(self, index: int) -> None:
        question = self.session.state.current_question
        if question is None or index >= len(question.options):
            return
        self.session.submit_answer(question.options[index])

    def _handle_start(self) -> None:
        try:
            self.session.start_session(self._config)
        except RuntimeError as exc:
            show_warning(self, "Cannot start quiz", str(exc))

    def _handle_reset(self) -> None:
        if confirm_end_quiz(self):
            self.session.reset()

    def _handle_session_finished(self, score: int) -> None:
        show_info(
            self,
            "Quiz complete",
            FINAL_SCORE_TEMPLATE.format(score=score, total=self._config.total_rounds),
            font_point_size=self._game_font_size,
        )

    def _handle_session_aborted(self, message: str) -> None:
        show_error(self, "Quiz aborted", message)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self._config, self._game_font_size)
        if dialog.exec():
            self._config = dialog.get_session_config()
            self._game_font_size = dialog.get_game_font_size()
            self._apply_styles()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        self.prompt_label.setStyleSheet(Styles.get_large_label_style())
        self.feedback_label.setStyleSheet(f"font-size: {self._game_font_size}pt;")
        self._render_options(self.session.state)
