"""Static metadata describing BreedQuiz."""

APP_NAME = "BreedQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "BreedQuiz is a small dog breed trivia game built with Qt. "
    "Photos and the breed catalog come from the free Dog CEO API (https://dog.ceo)."
)

HELP_TEXT = (
    "Press Start Quiz to begin. Every round shows a random dog photo and four breeds; "
    "pick the right one before the countdown runs out.\n\n"
    "Each correct answer scores one point. The correct breed is revealed for a moment "
    "after every round, then the next dog appears automatically.\n\n"
    "Use Settings to change the number of rounds and the seconds allowed per question."
)
