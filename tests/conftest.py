import os
import sys

import pytest
from flask import template_rendered

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from quiz_app import create_app, db
from quiz_app.core.config import Config
from quiz_app.models import Quiz, RandomPlaySession, User
from quiz_app.modules.quizzes.session_manager import RandomPlaySessionStore


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    WTF_CSRF_ENABLED = False
    SEED_DEFAULT_DATA = False
    LOG_DIR = None
    LOG_LEVEL = 'WARNING'


class FirstIndexRng:
    """Stand-in for random.Random that always picks the first pool entry."""

    def __init__(self):
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return 0


@pytest.fixture
def app():
    app = create_app(TestConfig)
    app.extensions['random_play_rng'] = FirstIndexRng()
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def rendered(app):
    """Collect (template name, context) for every template rendered."""
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template.name, context))

    template_rendered.connect(record, app)
    yield recorded
    template_rendered.disconnect(record, app)


@pytest.fixture
def author(app):
    user = User(username='author1')
    user.set_password('password')
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def two_quizzes(app, author):
    q1 = Quiz(question='Capital of Italy', answer='Rome', author_id=author.id)
    q2 = Quiz(question='Capital of France', answer='Paris', author_id=author.id)
    db.session.add_all([q1, q2])
    db.session.commit()
    return q1, q2


def login_client(client, user_id):
    with client.session_transaction() as session:
        session['_user_id'] = str(user_id)
        session['_fresh'] = True


def start_random_play(client, pool, score=0, current_quiz_id=None):
    """Give the client a random play already in progress."""
    record = RandomPlaySession(pool=list(pool), score=score, current_quiz_id=current_quiz_id)
    db.session.add(record)
    db.session.commit()
    with client.session_transaction() as session:
        session[RandomPlaySessionStore.SESSION_KEY] = record.id
    return record


def random_play_record(client):
    """The stored random play of the client, or None when it has none."""
    with client.session_transaction() as session:
        record_id = session.get(RandomPlaySessionStore.SESSION_KEY)
    if record_id is None:
        return None
    db.session.expire_all()
    return db.session.get(RandomPlaySession, record_id)
