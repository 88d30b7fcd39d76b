# File: quiz_app/core/config.py
# Core configuration for the quiz application.

import os
from dotenv import load_dotenv

load_dotenv()

# quiz_app/core/ -> project root is two levels up
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "quizzes.db")


class Config:
    """Configuration for the quiz application."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'connect_args': {'timeout': 30},
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    QUIZZES_PER_PAGE = int(os.environ.get('QUIZZES_PER_PAGE', '10'))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')

    # Create the admin user and sample quizzes on an empty database
    SEED_DEFAULT_DATA = os.environ.get('SEED_DEFAULT_DATA', 'true').lower() == 'true'

    # None seeds the random-play generator from the OS
    RANDOM_PLAY_SEED = os.environ.get('RANDOM_PLAY_SEED')

    @classmethod
    def init_app(cls, app):
        """Create the folders the default configuration writes into."""
        if app.config['SQLALCHEMY_DATABASE_URI'] == f'sqlite:///{DATABASE_PATH}':
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
        if app.config.get('LOG_DIR'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
