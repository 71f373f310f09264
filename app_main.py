"""Application entry point for BreedQuiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from breed_quiz.core.services.quiz_session import QuizSession
from breed_quiz.network.dog_api import DogApiClient
from breed_quiz.ui.quiz_main_window import QuizMainWindow
from breed_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, wire the quiz session to the Dog CEO client, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting BreedQuiz…")

    app = QApplication(sys.argv)
    api_client = DogApiClient()
    session = QuizSession(provider=api_client)
    window = QuizMainWindow(session=session, api_client=api_client)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
