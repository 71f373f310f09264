"""Shared fixtures for the quiz tests."""

from __future__ import annotations

from collections import deque

import pytest
from PySide6.QtCore import QCoreApplication

from breed_quiz.core.image_provider import FetchError
from breed_quiz.core.models import SessionConfig
from breed_quiz.core.services.quiz_session import QuizSession

HUSKY_URL = "https://images.dog.ceo/breeds/husky/n02110185_1469.jpg"
AFGHAN_URL = "https://images.dog.ceo/breeds/hound-afghan/n02088094_1003.jpg"
CATALOG = {"Husky", "Hound Afghan", "Beagle", "Pug", "Akita", "Whippet"}


class FakeImageProvider:
    """Image provider whose requests are answered from queued results.

    With ``auto=True`` each request is answered immediately from the queues;
    otherwise callbacks are parked until a ``resolve_*``/``fail_*`` call.
    """

    def __init__(self, images=(), catalog: set[str] | FetchError | None = None, auto: bool = True) -> None:
        self.images: deque[str | FetchError] = deque(images)
        self.catalog = catalog if catalog is not None else set(CATALOG)
        self.auto = auto
        self.image_requests = 0
        self.catalog_requests = 0
        self.pending_images: deque[tuple] = deque()
        self.pending_catalogs: deque[tuple] = deque()

    def fetch_random_image(self, on_success, on_failure) -> None:
        self.image_requests += 1
        if self.auto:
            self._answer(self.images.popleft(), on_success, on_failure)
        else:
            self.pending_images.append((on_success, on_failure))

    def fetch_category_catalog(self, on_success, on_failure) -> None:
        self.catalog_requests += 1
        if self.auto:
            self._answer(self.catalog, on_success, on_failure)
        else:
            self.pending_catalogs.append((on_success, on_failure))

    def resolve_image(self, result: str | FetchError) -> None:
        on_success, on_failure = self.pending_images.popleft()
        self._answer(result, on_success, on_failure)

    def resolve_catalog(self, result: set[str] | FetchError) -> None:
        on_success, on_failure = self.pending_catalogs.popleft()
        self._answer(result, on_success, on_failure)

    @staticmethod
    def _answer(result, on_success, on_failure) -> None:
        if isinstance(result, FetchError):
            on_failure(result)
        else:
            on_success(result)


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def make_session(qapp):
    created: list[QuizSession] = []

    def _make(provider: FakeImageProvider, **kwargs) -> QuizSession:
        session = QuizSession(provider, **kwargs)
        session.set_shuffle_seed(1234)
        created.append(session)
        return session

    yield _make
    for session in created:
        session.reset()


@pytest.fixture
def config() -> SessionConfig:
    return SessionConfig(total_rounds=3, per_question_seconds=10)
