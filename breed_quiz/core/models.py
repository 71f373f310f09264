"""Domain models for the breed quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from breed_quiz.constants.quiz_constants import OPTION_COUNT, REVEAL_DELAY_MS


class SessionPhase(Enum):
    """Lifecycle phase of a quiz session."""

    IDLE = auto()
    AWAITING_ANSWER = auto()
    ANSWERED = auto()
    TIME_EXPIRED = auto()
    FINISHED = auto()


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Settings fixed for the lifetime of one session."""

    total_rounds: int
    per_question_seconds: int
    reveal_delay_ms: int = REVEAL_DELAY_MS

    def __post_init__(self) -> None:
        if self.total_rounds < 1:
            raise ValueError("A session needs at least one round.")
        if self.per_question_seconds < 1:
            raise ValueError("Each question needs at least one second.")
        if self.reveal_delay_ms < 0:
            raise ValueError("Reveal delay cannot be negative.")


@dataclass(frozen=True, slots=True)
class Question:
    """One dog photo with its multiple-choice breed options."""

    image_ref: str
    correct_label: str
    options: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.options) != OPTION_COUNT:
            raise ValueError(f"A question needs exactly {OPTION_COUNT} options.")
        if len(set(self.options)) != OPTION_COUNT:
            raise ValueError("Question options must be unique.")
        if self.correct_label not in self.options:
            raise ValueError("The correct answer must be one of the options.")


@dataclass(slots=True)
class SessionState:
    """Snapshot of everything the presentation layer renders."""

    phase: SessionPhase = SessionPhase.IDLE
    current_question: Question | None = None
    selected_option: str | None = None
    score: int = 0
    rounds_completed: int = 0
    rounds_remaining: int = 0
    seconds_remaining: int = 0
    error_message: str | None = None

    @property
    def total_rounds(self) -> int:
        return self.rounds_completed + self.rounds_remaining

    @property
    def round_number(self) -> int:
        """1-based number of the round currently shown."""
        if self.phase in (SessionPhase.ANSWERED, SessionPhase.TIME_EXPIRED, SessionPhase.FINISHED):
            return self.rounds_completed
        return self.rounds_completed + 1

    @property
    def is_loading(self) -> bool:
        return (
            self.phase == SessionPhase.AWAITING_ANSWER
            and self.current_question is None
            and self.error_message is None
        )

    @property
    def last_answer_correct(self) -> bool | None:
        """Outcome of the round being revealed, None while no outcome is known."""
        if self.phase == SessionPhase.TIME_EXPIRED:
            return False
        if self.phase != SessionPhase.ANSWERED or self.current_question is None:
            return None
        return self.selected_option == self.current_question.correct_label
