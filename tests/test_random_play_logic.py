"""
Tests for the random play state machine

Tests cover:
- Lazy start from the full quiz set
- Draws without replacement
- Score changes on correct and wrong answers
- Checks without a pending quiz
"""

import random

import pytest

from quiz_app.modules.quizzes.logics import random_play
from quiz_app.modules.quizzes.logics.random_play import (
    Active,
    CheckOutcome,
    Ended,
    NoSession,
)


class FixedRng:
    """Returns the queued indexes in order."""

    def __init__(self, *indexes):
        self.indexes = list(indexes)

    def randrange(self, stop):
        index = self.indexes.pop(0)
        assert 0 <= index < stop
        return index


def _no_load():
    raise AssertionError('quiz ids must not be reloaded for an active play')


class TestDraw:

    def test_first_draw_starts_from_all_quizzes(self):
        result = random_play.draw(NoSession(), lambda: [1, 2, 3], FixedRng(1))

        assert result.quiz_id == 2
        assert result.score == 0
        assert result.state == Active(pool=(1, 3), score=0, current_quiz_id=2)

    def test_active_pool_is_reused(self):
        state = Active(pool=(5, 6), score=3)
        result = random_play.draw(state, _no_load, FixedRng(0))

        assert result.quiz_id == 5
        assert result.score == 3
        assert result.state.pool == (6,)

    def test_empty_pool_ends_the_play(self):
        result = random_play.draw(Active(pool=(), score=4), _no_load, FixedRng())

        assert result.exhausted
        assert result.quiz_id is None
        assert result.state == Ended(4)
        assert result.score == 4

    def test_empty_store_ends_immediately(self):
        result = random_play.draw(NoSession(), lambda: [], FixedRng())

        assert result.exhausted
        assert result.state == Ended(0)

    def test_ended_state_starts_a_new_play(self):
        result = random_play.draw(Ended(7), lambda: [9], FixedRng(0))

        assert result.quiz_id == 9
        assert result.score == 0

    def test_draws_are_without_replacement(self):
        rng = random.Random(1234)
        state = NoSession()
        drawn = []
        for _ in range(10):
            result = random_play.draw(state, lambda: range(10), rng)
            drawn.append(result.quiz_id)
            state = result.state

        assert sorted(drawn) == list(range(10))
        assert state.pool == ()
        assert random_play.draw(state, _no_load, rng).exhausted

    def test_index_is_drawn_over_the_whole_pool(self):
        class RecordingRng:
            def __init__(self):
                self.stops = []

            def randrange(self, stop):
                self.stops.append(stop)
                return stop - 1

        rng = RecordingRng()
        state = NoSession()
        for _ in range(3):
            state = random_play.draw(state, lambda: [1, 2, 3], rng).state

        assert rng.stops == [3, 2, 1]


class TestCheck:

    def test_correct_answer_adds_a_point_and_keeps_pool(self):
        state = Active(pool=(2,), score=0, current_quiz_id=1)
        result = random_play.check(state, '  rome ', 'Rome')

        assert result.outcome is CheckOutcome.CONTINUE
        assert result.correct
        assert result.score == 1
        assert result.state == Active(pool=(2,), score=1, current_quiz_id=None)

    def test_correct_answer_on_empty_pool_exhausts(self):
        state = Active(pool=(), score=1, current_quiz_id=2)
        result = random_play.check(state, 'Paris', 'paris')

        assert result.outcome is CheckOutcome.EXHAUSTED
        assert result.score == 2
        assert result.state == Ended(2)

    def test_wrong_answer_ends_with_previous_score(self):
        state = Active(pool=(3, 4), score=5, current_quiz_id=2)
        result = random_play.check(state, 'Madrid', 'Paris')

        assert result.outcome is CheckOutcome.FAILED
        assert not result.correct
        assert result.score == 5
        assert result.state == Ended(5)

    @pytest.mark.parametrize('state, expected_score', [
        (NoSession(), 0),
        (Active(pool=(1,), score=2, current_quiz_id=None), 2),
    ])
    def test_check_without_pending_quiz_changes_nothing(self, state, expected_score):
        result = random_play.check(state, 'anything', 'anything')

        assert result.outcome is CheckOutcome.NO_ACTIVE_QUIZ
        assert result.state == state
        assert result.score == expected_score

    def test_full_play_of_two_quizzes(self):
        answers = {1: 'Rome', 2: 'Paris'}
        rng = FixedRng(0, 0)

        draw = random_play.draw(NoSession(), lambda: [1, 2], rng)
        assert draw.quiz_id == 1
        assert draw.state.pool == (2,)

        check = random_play.check(draw.state, 'rome', answers[draw.quiz_id])
        assert check.outcome is CheckOutcome.CONTINUE
        assert check.score == 1

        draw = random_play.draw(check.state, _no_load, rng)
        assert draw.quiz_id == 2
        assert draw.state.pool == ()

        check = random_play.check(draw.state, 'PARIS', answers[draw.quiz_id])
        assert check.outcome is CheckOutcome.EXHAUSTED
        assert check.score == 2
        assert check.state == Ended(2)
