# File: quiz_app/modules/main/routes.py

from flask import redirect, url_for

from . import main_bp
from .navigation import redirect_back


@main_bp.route('/')
def index():
    return redirect(url_for('quizzes.index'))


@main_bp.route('/goback')
def goback():
    """Return to the last listing page that was visited."""
    return redirect_back()
