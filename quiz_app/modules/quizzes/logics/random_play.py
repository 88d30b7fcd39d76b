# quiz_app/modules/quizzes/logics/random_play.py
"""
Random play as an explicit state machine.

A client is in one of three states:

    NoSession -> Active(pool, score, current_quiz_id) -> Ended(final_score)

``draw`` and ``check`` are pure: they take a state and return the next one
together with what should be shown. Loading and saving the state is the
job of ``RandomPlaySessionStore``; nothing here touches Flask.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional, Union

from .answer_checker import is_correct_answer


@dataclass(frozen=True)
class NoSession:
    """The client has no random play in progress."""


@dataclass(frozen=True)
class Active:
    """A random play in progress.

    ``pool`` holds the ids not asked yet. ``current_quiz_id`` is the quiz
    handed out by the last draw and not checked yet.
    """

    pool: tuple[int, ...]
    score: int = 0
    current_quiz_id: Optional[int] = None


@dataclass(frozen=True)
class Ended:
    """The play is over; the stored session must be removed."""

    final_score: int


RandomPlayState = Union[NoSession, Active, Ended]


class CheckOutcome(enum.Enum):
    CONTINUE = 'continue'
    EXHAUSTED = 'exhausted'
    FAILED = 'failed'
    NO_ACTIVE_QUIZ = 'no_active_quiz'


@dataclass(frozen=True)
class DrawResult:
    state: RandomPlayState
    quiz_id: Optional[int]
    score: int

    @property
    def exhausted(self) -> bool:
        return self.quiz_id is None


@dataclass(frozen=True)
class CheckResult:
    state: RandomPlayState
    outcome: CheckOutcome
    score: int

    @property
    def correct(self) -> bool:
        return self.outcome in (CheckOutcome.CONTINUE, CheckOutcome.EXHAUSTED)


def start(quiz_ids: Iterable[int]) -> Active:
    return Active(pool=tuple(quiz_ids), score=0)


def draw(state: RandomPlayState, load_quiz_ids: Callable[[], Iterable[int]], rng) -> DrawResult:
    """
    Take one quiz out of the pool at a uniformly random index.

    ``load_quiz_ids`` is only called when a new play has to be started.
    ``rng`` needs a ``randrange(n)`` method, such as ``random.Random``.
    """
    if isinstance(state, (NoSession, Ended)):
        state = start(load_quiz_ids())

    if not isinstance(state, Active):
        raise TypeError(f'Unknown random play state: {state!r}')

    if not state.pool:
        return DrawResult(state=Ended(state.score), quiz_id=None, score=state.score)

    index = rng.randrange(len(state.pool))
    quiz_id = state.pool[index]
    remaining = state.pool[:index] + state.pool[index + 1:]
    return DrawResult(
        state=replace(state, pool=remaining, current_quiz_id=quiz_id),
        quiz_id=quiz_id,
        score=state.score,
    )


def current_quiz_id(state: RandomPlayState) -> Optional[int]:
    """The quiz waiting for an answer, or None when there is nothing to check."""
    if isinstance(state, Active):
        return state.current_quiz_id
    return None


def check(state: RandomPlayState, submitted_answer, expected_answer) -> CheckResult:
    """
    Score an answer for the quiz handed out by the last draw.

    A wrong answer ends the play with the score it had before the check.
    A right answer adds one point and ends the play if the pool is empty.
    Without a pending quiz the state is returned untouched.
    """
    if current_quiz_id(state) is None:
        score = state.score if isinstance(state, Active) else 0
        return CheckResult(state=state, outcome=CheckOutcome.NO_ACTIVE_QUIZ, score=score)

    if not is_correct_answer(submitted_answer, expected_answer):
        return CheckResult(state=Ended(state.score), outcome=CheckOutcome.FAILED, score=state.score)

    score = state.score + 1
    if not state.pool:
        return CheckResult(state=Ended(score), outcome=CheckOutcome.EXHAUSTED, score=score)

    return CheckResult(
        state=replace(state, score=score, current_quiz_id=None),
        outcome=CheckOutcome.CONTINUE,
        score=score,
    )
