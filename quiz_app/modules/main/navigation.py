# File: quiz_app/modules/main/navigation.py
# Remembers the listing a user came from so destructive actions can send them back.

from functools import wraps

from flask import redirect, request, session, url_for

BACK_URL_KEY = 'back_url'


def save_back(view):
    """Remember the current URL as the target of ``/goback``."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        session[BACK_URL_KEY] = request.full_path.rstrip('?')
        return view(*args, **kwargs)

    return wrapper


def redirect_back():
    """Redirect to the remembered URL, falling back to the quiz listing."""
    url = session.pop(BACK_URL_KEY, None) or url_for('quizzes.index')
    return redirect(url)
