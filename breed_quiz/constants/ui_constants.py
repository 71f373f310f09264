"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "BreedQuiz"
QUESTION_PROMPT: str = "What breed is this?"
IMAGE_HEIGHT_PX: int = 300

BUTTON_START: str = "Start Quiz"
BUTTON_RESTART: str = "Play Again"
BUTTON_RESET: str = "End Quiz"
BUTTON_RETRY: str = "Try Again"
BUTTON_SETTINGS: str = "Settings"
BUTTON_ABOUT: str = "About"
BUTTON_HELP: str = "Help"

LOADING_MESSAGE: str = "Fetching a dog…"
IDLE_MESSAGE: str = "Press Start Quiz to begin."
IMAGE_LOAD_FAILED_MESSAGE: str = "Failed to load dog image."
CORRECT_FEEDBACK: str = "✅ Correct!"
WRONG_FEEDBACK_TEMPLATE: str = "❌ Wrong! It's {answer}."
TIMEOUT_FEEDBACK_TEMPLATE: str = "⏰ Time's up! It was {answer}."
ROUND_TEMPLATE: str = "Round {current} of {total}"
SCORE_TEMPLATE: str = "Score: {score}"
TIMER_TEMPLATE: str = "{seconds}s remaining"
FINAL_SCORE_TEMPLATE: str = "You scored {score} out of {total}."
