# File: quiz_app/modules/quizzes/session_manager.py
# Loads and saves the random play state: the Flask session keeps the id of a RandomPlaySession row.

from typing import Optional

from flask import session, current_app
from sqlalchemy.exc import SQLAlchemyError

from ...core.error_handlers import StoreError
from ...models import RandomPlaySession, db
from .logics.random_play import Active, NoSession, RandomPlayState


class RandomPlaySessionStore:
    """
    Keeps the random play state of one client.

    The pool lives in a ``RandomPlaySession`` row and the signed session
    cookie only holds that row's id under ``SESSION_KEY``. Only ``Active``
    states are stored. Saving any other state deletes the row and the key,
    so an ended play looks exactly like a client that never played.
    """
    SESSION_KEY = 'random_play'

    @classmethod
    def from_record(cls, record: RandomPlaySession) -> Active:
        return Active(
            pool=tuple(int(quiz_id) for quiz_id in record.pool or []),
            score=record.score or 0,
            current_quiz_id=record.current_quiz_id,
        )

    @classmethod
    def _record(cls) -> Optional[RandomPlaySession]:
        record_id = session.get(cls.SESSION_KEY)
        if record_id is None:
            return None
        record = db.session.get(RandomPlaySession, record_id) if isinstance(record_id, int) else None
        if record is None:
            session.pop(cls.SESSION_KEY, None)
            current_app.logger.debug(f"RandomPlay: dropped unknown session record {record_id!r}.")
        return record

    @classmethod
    def _commit(cls) -> None:
        try:
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StoreError(str(exc), operation='random_play') from exc

    @classmethod
    def load(cls) -> RandomPlayState:
        record = cls._record()
        if record is None:
            return NoSession()
        return cls.from_record(record)

    @classmethod
    def save(cls, state: RandomPlayState) -> None:
        if not isinstance(state, Active):
            cls.clear()
            return

        record = cls._record()
        if record is None:
            record = RandomPlaySession()
            db.session.add(record)
        # Assign a new list so the JSON column is flagged as changed.
        record.pool = list(state.pool)
        record.score = state.score
        record.current_quiz_id = state.current_quiz_id
        cls._commit()

        session[cls.SESSION_KEY] = record.id
        current_app.logger.debug(
            f"RandomPlay: {len(state.pool)} quizzes left, score={state.score}, current={state.current_quiz_id}"
        )

    @classmethod
    def clear(cls) -> None:
        record = cls._record()
        if record is None:
            return
        db.session.delete(record)
        cls._commit()
        session.pop(cls.SESSION_KEY, None)
        current_app.logger.debug("RandomPlay: session removed.")
