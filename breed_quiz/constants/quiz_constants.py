"""Quiz-related constants shared across UI and core layers."""

DEFAULT_TOTAL_ROUNDS: int = 10
DEFAULT_TIME_LIMIT_SECONDS: int = 10
REVEAL_DELAY_MS: int = 2000
COUNTDOWN_INTERVAL_MS: int = 1000

OPTION_COUNT: int = 4
WRONG_OPTION_COUNT: int = OPTION_COUNT - 1

BREED_PATH_MARKER: str = "breeds"
FALLBACK_BREEDS: tuple[str, ...] = (
    "Beagle",
    "Poodle",
    "Labrador",
    "Boxer",
    "Pug",
    "Dalmatian",
)
