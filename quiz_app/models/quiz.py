"""Quiz and tip models."""

from __future__ import annotations

from sqlalchemy import event
from sqlalchemy.sql import func

from ..core.error_handlers import ValidationError
from ..core.extensions import db

# Fields a quiz may be created with; author_id is fixed afterwards.
CREATE_FIELDS = ('question', 'answer', 'author_id')
UPDATE_FIELDS = ('question', 'answer')


class Quiz(db.Model):
    """A question/answer pair owned by an author."""

    __tablename__ = 'quizzes'

    id = db.Column(db.Integer, primary_key=True)
    question = db.Column(db.Text, nullable=False)
    answer = db.Column(db.Text, nullable=False)
    author_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    author = db.relationship('User', back_populates='quizzes', lazy='joined')
    tips = db.relationship(
        'Tip',
        back_populates='quiz',
        cascade='all, delete-orphan',
        order_by='Tip.id',
        lazy='select',
    )

    @staticmethod
    def validation_errors(question, answer) -> dict[str, list[str]]:
        """Return field errors for a question/answer pair, empty when valid."""
        errors: dict[str, list[str]] = {}
        if not (question or '').strip():
            errors['question'] = ['Question must not be empty.']
        if not (answer or '').strip():
            errors['answer'] = ['Answer must not be empty.']
        return errors

    def validate(self) -> None:
        errors = self.validation_errors(self.question, self.answer)
        if errors:
            raise ValidationError('There are errors in the form:', errors=errors)

    def __repr__(self) -> str:
        return f'<Quiz {self.id}: {self.question!r}>'


class Tip(db.Model):
    """A hint attached to a quiz."""

    __tablename__ = 'tips'

    id = db.Column(db.Integer, primary_key=True)
    text = db.Column(db.Text, nullable=False)
    quiz_id = db.Column(db.Integer, db.ForeignKey('quizzes.id'), nullable=False)
    author_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    quiz = db.relationship('Quiz', back_populates='tips')
    author = db.relationship('User')


@event.listens_for(Quiz, 'before_insert')
@event.listens_for(Quiz, 'before_update')
def _validate_quiz(_mapper, _connection, target):
    target.validate()
