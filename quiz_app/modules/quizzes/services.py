# File: quiz_app/modules/quizzes/services.py
# Store access for the quizzes module: listing, CRUD and random play.

from dataclasses import dataclass, replace
from typing import Optional

from flask import current_app
from flask_sqlalchemy.pagination import Pagination
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload, selectinload

from ...core.error_handlers import NotFoundError, StoreError, ValidationError
from ...core.signals import quiz_created, quiz_deleted, quiz_updated, random_play_finished
from ...models import CREATE_FIELDS, UPDATE_FIELDS, Quiz, Tip, User, db
from .logics import random_play
from .logics.query_params import build_search_pattern
from .logics.random_play import Active, CheckOutcome, CheckResult, DrawResult
from .session_manager import RandomPlaySessionStore


@dataclass
class QuizListing:
    pagination: Pagination
    title: str
    search: str

    @property
    def quizzes(self):
        return self.pagination.items


class QuizQueryService:
    """Builds the filtered, paginated quiz listing."""

    DEFAULT_TITLE = 'Questions'

    @staticmethod
    def list_quizzes(search: str = '', author: Optional[User] = None, page: int = 1,
                     per_page: Optional[int] = None) -> QuizListing:
        if per_page is None:
            per_page = current_app.config.get('QUIZZES_PER_PAGE', 10)

        query = Quiz.query
        title = QuizQueryService.DEFAULT_TITLE

        pattern = build_search_pattern(search)
        if pattern:
            query = query.filter(Quiz.question.ilike(pattern))

        if author is not None:
            query = query.filter(Quiz.author_id == author.id)
            title = f'Questions of {author.username}'

        pagination = query.order_by(Quiz.id).paginate(page=page, per_page=per_page, error_out=False)
        current_app.logger.debug(
            f"QuizQuery: search={search!r} author={author.id if author else None} "
            f"page={page} total={pagination.total}"
        )
        return QuizListing(pagination=pagination, title=title, search=search)

    @staticmethod
    def get_author_or_404(user_id: int) -> User:
        user = db.session.get(User, user_id)
        if user is None:
            raise NotFoundError(f'There is no user with id={user_id}', resource='user')
        return user


class QuizService:
    """Create, read, update and delete single quizzes."""

    @staticmethod
    def get_quiz_or_404(quiz_id: int) -> Quiz:
        quiz = (
            Quiz.query.options(
                joinedload(Quiz.author),
                selectinload(Quiz.tips).joinedload(Tip.author),
            )
            .filter(Quiz.id == quiz_id)
            .first()
        )
        if quiz is None:
            raise NotFoundError(f'There is no quiz with id={quiz_id}', resource='quiz')
        return quiz

    @staticmethod
    def _check_fields(question, answer) -> None:
        errors = Quiz.validation_errors(question, answer)
        if errors:
            raise ValidationError('There are errors in the form:', errors=errors)

    @staticmethod
    def create_quiz(question: str, answer: str, author_id: Optional[int]) -> Quiz:
        QuizService._check_fields(question, answer)
        values = {'question': question, 'answer': answer, 'author_id': author_id}
        quiz = Quiz(**{field: values[field] for field in CREATE_FIELDS})
        try:
            db.session.add(quiz)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StoreError(str(exc), operation='create') from exc

        current_app.logger.info(f"Quiz {quiz.id} created by author {author_id}.")
        quiz_created.send(current_app._get_current_object(), quiz_id=quiz.id, author_id=author_id)
        return quiz

    @staticmethod
    def update_quiz(quiz: Quiz, question: str, answer: str) -> Quiz:
        # Validate before touching the instance so a rejected draft never reaches a flush.
        QuizService._check_fields(question, answer)
        values = {'question': question, 'answer': answer}
        for field in UPDATE_FIELDS:
            setattr(quiz, field, values[field])
        try:
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StoreError(str(exc), operation='update') from exc

        current_app.logger.info(f"Quiz {quiz.id} updated.")
        quiz_updated.send(current_app._get_current_object(), quiz_id=quiz.id)
        return quiz

    @staticmethod
    def delete_quiz(quiz: Quiz) -> None:
        quiz_id = quiz.id
        try:
            db.session.delete(quiz)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StoreError(str(exc), operation='delete') from exc

        current_app.logger.info(f"Quiz {quiz_id} deleted.")
        quiz_deleted.send(current_app._get_current_object(), quiz_id=quiz_id)


class RandomPlayService:
    """Runs random play against the store and the client's session."""

    @staticmethod
    def _rng():
        return current_app.extensions['random_play_rng']

    @staticmethod
    def _all_quiz_ids() -> list[int]:
        return [quiz_id for (quiz_id,) in db.session.query(Quiz.id).order_by(Quiz.id).all()]

    @staticmethod
    def _finished(score: int, exhausted: bool) -> None:
        current_app.logger.info(f"RandomPlay finished: score={score}, exhausted={exhausted}")
        random_play_finished.send(current_app._get_current_object(), score=score, exhausted=exhausted)

    @classmethod
    def draw_next(cls) -> tuple[DrawResult, Optional[Quiz]]:
        """
        Draw the next unseen quiz for this client.

        Returns the draw result and the quiz, or ``None`` as quiz when the
        pool is exhausted. Ids whose quiz was deleted since the play started
        are dropped and another one is drawn.
        """
        state = RandomPlaySessionStore.load()
        while True:
            result = random_play.draw(state, cls._all_quiz_ids, cls._rng())
            if result.exhausted:
                RandomPlaySessionStore.save(result.state)
                cls._finished(result.score, exhausted=True)
                return result, None

            quiz = db.session.get(Quiz, result.quiz_id)
            if quiz is not None:
                RandomPlaySessionStore.save(result.state)
                return result, quiz

            current_app.logger.info(f"RandomPlay: quiz {result.quiz_id} no longer exists, drawing again.")
            state = replace(result.state, current_quiz_id=None)

    @classmethod
    def check_answer(cls, answer: str) -> tuple[CheckResult, Optional[Quiz]]:
        """Check ``answer`` against the quiz handed out by the last draw."""
        state = RandomPlaySessionStore.load()
        quiz_id = random_play.current_quiz_id(state)
        quiz = db.session.get(Quiz, quiz_id) if quiz_id is not None else None

        if quiz is None:
            score = state.score if isinstance(state, Active) else 0
            current_app.logger.info("RandomPlay: answer received without a pending quiz.")
            return CheckResult(state=state, outcome=CheckOutcome.NO_ACTIVE_QUIZ, score=score), None

        result = random_play.check(state, answer, quiz.answer)
        RandomPlaySessionStore.save(result.state)
        if result.outcome in (CheckOutcome.FAILED, CheckOutcome.EXHAUSTED):
            cls._finished(result.score, exhausted=result.outcome is CheckOutcome.EXHAUSTED)
        return result, quiz
