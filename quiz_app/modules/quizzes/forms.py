# File: quiz_app/modules/quizzes/forms.py
# Form used by the new and edit quiz pages.

from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired


class QuizForm(FlaskForm):
    """
    Question and answer of a quiz.
    """
    question = StringField('Question', validators=[DataRequired(message="Question must not be empty.")])
    answer = StringField('Answer', validators=[DataRequired(message="Answer must not be empty.")])
    submit = SubmitField('Save')

    def error_messages(self) -> list[str]:
        """Flatten field errors in declaration order."""
        return [message for field in self for message in field.errors]
