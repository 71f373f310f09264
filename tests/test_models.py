"""Tests for the quiz domain models."""

from __future__ import annotations

import pytest

from breed_quiz.core.models import Question, SessionConfig, SessionPhase, SessionState


def test_session_config_rejects_zero_rounds():
    with pytest.raises(ValueError):
        SessionConfig(total_rounds=0, per_question_seconds=10)


def test_session_config_rejects_zero_seconds():
    with pytest.raises(ValueError):
        SessionConfig(total_rounds=3, per_question_seconds=0)


def test_session_config_defaults_to_two_second_reveal():
    assert SessionConfig(total_rounds=1, per_question_seconds=1).reveal_delay_ms == 2000


def test_question_requires_four_unique_options():
    with pytest.raises(ValueError):
        Question("ref", "Pug", ("Pug", "Akita", "Boxer"))
    with pytest.raises(ValueError):
        Question("ref", "Pug", ("Pug", "Akita", "Akita", "Boxer"))


def test_question_requires_correct_label_among_options():
    with pytest.raises(ValueError):
        Question("ref", "Husky", ("Pug", "Akita", "Boxer", "Beagle"))


def test_state_derived_values_during_round():
    question = Question("ref", "Pug", ("Pug", "Akita", "Boxer", "Beagle"))
    state = SessionState(
        phase=SessionPhase.AWAITING_ANSWER,
        current_question=question,
        rounds_completed=1,
        rounds_remaining=2,
    )
    assert state.total_rounds == 3
    assert state.round_number == 2
    assert state.is_loading is False
    assert state.last_answer_correct is None


def test_state_reports_answer_outcome():
    question = Question("ref", "Pug", ("Pug", "Akita", "Boxer", "Beagle"))
    answered = SessionState(
        phase=SessionPhase.ANSWERED,
        current_question=question,
        selected_option="Akita",
        rounds_completed=1,
        rounds_remaining=0,
    )
    assert answered.last_answer_correct is False
    assert answered.round_number == 1

    expired = SessionState(phase=SessionPhase.TIME_EXPIRED, current_question=question)
    assert expired.last_answer_correct is False
