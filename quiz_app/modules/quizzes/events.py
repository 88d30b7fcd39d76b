# File: quiz_app/modules/quizzes/events.py
# Log receivers for quiz signals.

from flask import current_app

from ...core.signals import quiz_created, quiz_deleted, quiz_updated, random_play_finished


@quiz_created.connect
def on_quiz_created(sender, quiz_id=None, author_id=None, **kwargs):
    current_app.logger.debug(f"[signal] quiz_created id={quiz_id} author={author_id}")


@quiz_updated.connect
def on_quiz_updated(sender, quiz_id=None, **kwargs):
    current_app.logger.debug(f"[signal] quiz_updated id={quiz_id}")


@quiz_deleted.connect
def on_quiz_deleted(sender, quiz_id=None, **kwargs):
    current_app.logger.debug(f"[signal] quiz_deleted id={quiz_id}")


@random_play_finished.connect
def on_random_play_finished(sender, score=0, exhausted=False, **kwargs):
    outcome = 'all quizzes answered' if exhausted else 'wrong answer'
    current_app.logger.debug(f"[signal] random_play_finished score={score} ({outcome})")
