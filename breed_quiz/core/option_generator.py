"""Build the shuffled multiple-choice options for a question."""

from __future__ import annotations

import random
from collections.abc import Iterable

from breed_quiz.constants.quiz_constants import FALLBACK_BREEDS, WRONG_OPTION_COUNT


class ConfigurationError(RuntimeError):
    """Raised when four unique options cannot be produced."""


def normalize_label(label: str) -> str:
    return " ".join(label.split())


def generate_options(
    correct_label: str,
    pool: Iterable[str],
    *,
    fallback: Iterable[str] = FALLBACK_BREEDS,
    rng: random.Random | None = None,
) -> tuple[str, ...]:
    """Return the correct label plus three sampled wrong labels, shuffled.

    Args:
        correct_label: The breed shown in the photo
        pool: Known breed labels to draw wrong answers from
        fallback: Built-in labels used to pad a pool that is too small
        rng: Random source, a freshly seeded generator when omitted

    Returns:
        A tuple of four distinct labels containing ``correct_label`` once

    Raises:
        ConfigurationError: If fewer than three distinct wrong labels are available
    """
    rng = rng or random.Random()
    correct = normalize_label(correct_label)
    if not correct:
        raise ValueError("Correct label must not be empty.")

    # Sorted so a seeded generator yields the same options every run.
    candidates = sorted({normalize_label(label) for label in pool} - {correct, ""})

    if len(candidates) < WRONG_OPTION_COUNT:
        for label in fallback:
            label = normalize_label(label)
            if label and label != correct and label not in candidates:
                candidates.append(label)
            if len(candidates) >= WRONG_OPTION_COUNT:
                break

    if len(candidates) < WRONG_OPTION_COUNT:
        raise ConfigurationError(
            f"Cannot build {WRONG_OPTION_COUNT + 1} unique options for {correct!r}: "
            f"only {len(candidates)} wrong answers available."
        )

    options = [correct, *rng.sample(candidates, WRONG_OPTION_COUNT)]
    rng.shuffle(options)
    return tuple(options)
