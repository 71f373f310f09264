"""Service caching the breed catalog used for wrong answers."""

from __future__ import annotations

from collections.abc import Iterable

from breed_quiz.constants.quiz_constants import FALLBACK_BREEDS


class CategoryPool:
    """Holds the known breed labels, fetched lazily and kept for the app run."""

    def __init__(self, fallback: Iterable[str] = FALLBACK_BREEDS) -> None:
        self._labels: frozenset[str] = frozenset()
        self._fallback: tuple[str, ...] = tuple(fallback)
        self._in_flight: bool = False
        self._failed: bool = False

    def is_loaded(self) -> bool:
        return bool(self._labels)

    def is_pending(self) -> bool:
        return self._in_flight

    def needs_fetch(self) -> bool:
        """True when no catalog is cached and none was requested this session."""
        return not self._labels and not self._in_flight and not self._failed

    def begin_fetch(self) -> None:
        self._in_flight = True

    def populate(self, labels: Iterable[str]) -> None:
        """Cache a fetched catalog. An empty catalog counts as a failure."""
        self._in_flight = False
        cleaned = frozenset(label for label in labels if label and label.strip())
        if cleaned:
            self._labels = cleaned
        else:
            self._failed = True

    def mark_failed(self) -> None:
        self._in_flight = False
        self._failed = True

    def allow_refetch(self) -> None:
        """Let a new session try the catalog again after an earlier failure."""
        self._failed = False

    def get_fallback(self) -> tuple[str, ...]:
        return self._fallback

    def get_candidates(self) -> frozenset[str]:
        """Return the cached catalog, or the built-in pool when there is none."""
        return self._labels or frozenset(self._fallback)
