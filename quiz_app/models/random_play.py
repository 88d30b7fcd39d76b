"""Server-side record of a client's random play."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.types import JSON

from ..core.extensions import db


class RandomPlaySession(db.Model):
    """
    Pool, score and pending quiz of one random play.

    The client's cookie only carries this row's id, so the pool can hold
    every quiz id in the store without growing the cookie.
    """

    __tablename__ = 'random_play_sessions'

    id = db.Column(db.Integer, primary_key=True)
    # Quiz ids not asked yet. No foreign key: a quiz deleted mid-play is skipped at draw time.
    pool = db.Column(JSON, nullable=False, default=list)
    score = db.Column(db.Integer, nullable=False, default=0)
    current_quiz_id = db.Column(db.Integer, nullable=True)
    start_time = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    last_activity = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f'<RandomPlaySession {self.id}: {len(self.pool or [])} left, score={self.score}>'
