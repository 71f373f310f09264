"""Service driving a quiz session: rounds, countdown, answers and scoring."""

from __future__ import annotations

from dataclasses import replace
from functools import partial
import logging
import random

from PySide6.QtCore import QObject, QTimer, Signal

from breed_quiz.constants.quiz_constants import COUNTDOWN_INTERVAL_MS, REVEAL_DELAY_MS
from breed_quiz.core.breed_extractor import extract_breed
from breed_quiz.core.image_provider import FetchError, ImageProvider
from breed_quiz.core.models import Question, SessionConfig, SessionPhase, SessionState
from breed_quiz.core.option_generator import ConfigurationError, generate_options
from breed_quiz.core.services.category_pool import CategoryPool

logger = logging.getLogger(__name__)

_REVEAL_PHASES = (SessionPhase.ANSWERED, SessionPhase.TIME_EXPIRED)


class QuizSession(QObject):
    """State machine for a single-player breed quiz.

    All methods must be called from the thread that owns the object. Every
    image request is tagged with the id of the round that issued it, and
    results for any other round are dropped.
    """

    state_changed = Signal(object)
    fetch_failed = Signal(str)
    session_finished = Signal(int)
    session_aborted = Signal(str)

    def __init__(
        self,
        provider: ImageProvider,
        category_pool: CategoryPool | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._provider = provider
        self._pool = category_pool or CategoryPool()
        self._config: SessionConfig | None = None
        self._state = SessionState()
        self._round_id: int = 0
        self._pending_image: tuple[int, str] | None = None
        self._shuffle_rng = random.Random()

        self._countdown_timer = QTimer(self)
        self._countdown_timer.setInterval(COUNTDOWN_INTERVAL_MS)
        self._countdown_timer.timeout.connect(self.tick)

        self._reveal_timer = QTimer(self)
        self._reveal_timer.setSingleShot(True)
        self._reveal_timer.setInterval(REVEAL_DELAY_MS)
        self._reveal_timer.timeout.connect(self.advance)

    # --- Read-only view ---

    @property
    def state(self) -> SessionState:
        """Return a copy of the current state."""
        return replace(self._state)

    @property
    def config(self) -> SessionConfig | None:
        return self._config

    def is_countdown_running(self) -> bool:
        return self._countdown_timer.isActive()

    def is_reveal_pending(self) -> bool:
        return self._reveal_timer.isActive()

    def get_reveal_delay_ms(self) -> int:
        return self._reveal_timer.interval()

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._shuffle_rng.seed(seed)

    # --- Intents ---

    def start_session(self, config: SessionConfig) -> None:
        if self._state.phase not in (SessionPhase.IDLE, SessionPhase.FINISHED):
            raise RuntimeError("A quiz session is already in progress.")

        self._config = config
        self._state = SessionState(rounds_remaining=config.total_rounds)
        self._reveal_timer.setInterval(config.reveal_delay_ms)
        if not self._pool.is_loaded():
            self._pool.allow_refetch()
        logger.info(
            "Starting quiz: %d rounds, %d seconds per question",
            config.total_rounds,
            config.per_question_seconds,
        )
        self._begin_round()

    def submit_answer(self, option: str) -> bool:
        """Record the player's choice. Returns False if the answer was rejected."""
        question = self._state.current_question
        if self._state.phase != SessionPhase.AWAITING_ANSWER or question is None:
            logger.debug("Ignoring answer %r in phase %s", option, self._state.phase.name)
            return False
        if option not in question.options:
            logger.warning("Ignoring answer %r: not one of %s", option, question.options)
            return False

        self._resolve_round(SessionPhase.ANSWERED, option)
        return True

    def tick(self) -> None:
        """Count down one second of the current question."""
        if self._state.phase != SessionPhase.AWAITING_ANSWER or self._state.current_question is None:
            return

        self._state.seconds_remaining = max(0, self._state.seconds_remaining - 1)
        if self._state.seconds_remaining == 0:
            self._resolve_round(SessionPhase.TIME_EXPIRED, None)
        else:
            self._publish()

    def advance(self) -> bool:
        """Leave the reveal: start the next round or finish the session."""
        if self._state.phase not in _REVEAL_PHASES:
            return False

        self._reveal_timer.stop()
        if self._state.rounds_remaining > 0:
            self._begin_round()
        else:
            self._finish()
        return True

    def retry_round(self) -> bool:
        """Request a new photo for a round whose image failed to load."""
        if (
            self._state.phase != SessionPhase.AWAITING_ANSWER
            or self._state.current_question is not None
            or self._state.error_message is None
        ):
            return False

        self._begin_round()
        return True

    def reset(self) -> None:
        self._stop_timers()
        self._round_id += 1
        self._pending_image = None
        self._config = None
        self._state = SessionState()
        self._publish()

    # --- Round lifecycle ---

    def _begin_round(self) -> None:
        if self._config is None or self._state.rounds_remaining <= 0:
            raise RuntimeError("No round left to start.")

        self._stop_timers()
        self._round_id += 1
        self._pending_image = None
        self._state.phase = SessionPhase.AWAITING_ANSWER
        self._state.current_question = None
        self._state.selected_option = None
        self._state.error_message = None
        self._state.seconds_remaining = self._config.per_question_seconds
        round_id = self._round_id
        logger.debug("Round %d of %d requested", self._state.round_number, self._state.total_rounds)
        self._publish()

        if self._pool.needs_fetch():
            self._pool.begin_fetch()
            self._provider.fetch_category_catalog(self._handle_catalog_loaded, self._handle_catalog_failed)
        self._provider.fetch_random_image(
            partial(self._handle_image_loaded, round_id),
            partial(self._handle_image_failed, round_id),
        )

    def _handle_image_loaded(self, round_id: int, image_ref: str) -> None:
        if round_id != self._round_id:
            logger.debug("Discarding stale image %s", image_ref)
            return
        if self._pool.is_pending():
            self._pending_image = (round_id, image_ref)
            return
        self._populate_question(image_ref)

    def _handle_image_failed(self, round_id: int, error: FetchError) -> None:
        if round_id != self._round_id:
            logger.debug("Discarding stale image failure: %s", error)
            return
        self._report_fetch_failure(str(error))

    def _handle_catalog_loaded(self, labels: set[str]) -> None:
        self._pool.populate(labels)
        if self._pool.is_loaded():
            logger.info("Breed catalog loaded with %d breeds", len(labels))
        else:
            logger.info("Breed catalog was empty, using built-in breeds")
        self._resume_pending_image()

    def _handle_catalog_failed(self, error: FetchError) -> None:
        self._pool.mark_failed()
        logger.info("Breed catalog unavailable, using built-in breeds: %s", error)
        self._resume_pending_image()

    def _resume_pending_image(self) -> None:
        if self._pending_image is None:
            return
        round_id, image_ref = self._pending_image
        self._pending_image = None
        if round_id == self._round_id:
            self._populate_question(image_ref)

    def _populate_question(self, image_ref: str) -> None:
        breed = extract_breed(image_ref)
        if breed is None:
            self._report_fetch_failure(f"No breed found in image reference {image_ref!r}.")
            return

        try:
            options = generate_options(
                breed,
                self._pool.get_candidates(),
                fallback=self._pool.get_fallback(),
                rng=self._shuffle_rng,
            )
        except ConfigurationError as exc:
            logger.exception("Aborting quiz session")
            self.reset()
            self.session_aborted.emit(str(exc))
            return

        self._state.current_question = Question(image_ref=image_ref, correct_label=breed, options=options)
        self._state.seconds_remaining = self._config.per_question_seconds
        self._countdown_timer.start()
        logger.debug("Round %d ready: %s", self._state.round_number, breed)
        self._publish()

    def _report_fetch_failure(self, message: str) -> None:
        logger.warning("Could not load dog image: %s", message)
        self._state.error_message = message
        self._publish()
        self.fetch_failed.emit(message)

    def _resolve_round(self, outcome: SessionPhase, selected_option: str | None) -> None:
        self._countdown_timer.stop()
        question = self._state.current_question
        self._state.selected_option = selected_option
        self._state.rounds_completed += 1
        self._state.rounds_remaining -= 1
        if selected_option is not None and selected_option == question.correct_label:
            self._state.score += 1
        self._state.phase = outcome
        self._reveal_timer.start()
        logger.debug("Round %d resolved as %s", self._state.rounds_completed, outcome.name)
        self._publish()

    def _finish(self) -> None:
        self._stop_timers()
        self._state.phase = SessionPhase.FINISHED
        self._state.current_question = None
        self._state.selected_option = None
        self._state.seconds_remaining = 0
        logger.info("Quiz finished with %d of %d", self._state.score, self._state.total_rounds)
        self._publish()
        self.session_finished.emit(self._state.score)

    def _stop_timers(self) -> None:
        self._countdown_timer.stop()
        self._reveal_timer.stop()

    def _publish(self) -> None:
        self.state_changed.emit(self.state)
