"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import random

from flask import Flask
from flask_login import current_user

from .error_handlers import register_error_handlers
from .extensions import csrf_protect, db, login_manager
from .logging_config import setup_logging
from .method_override import MethodOverrideMiddleware
from .module_registry import register_default_modules

DEFAULT_QUIZZES = (
    ("Capital of Italy", "Rome"),
    ("Capital of Portugal", "Lisbon"),
    ("Capital of Spain", "Madrid"),
    ("Capital of France", "Paris"),
)


def configure_logging(app: Flask) -> None:
    """Configure application logging from the LOG_LEVEL / LOG_DIR settings."""

    setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
    )


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    login_manager.init_app(app)
    csrf_protect.init_app(app)

    seed = app.config.get("RANDOM_PLAY_SEED")
    app.extensions["random_play_rng"] = random.Random(seed)

    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)


def register_context_processors(app: Flask) -> None:
    """Register global template context processors and the user loader."""

    @login_manager.user_loader
    def load_user(user_id: str):
        from ..models import User

        return db.session.get(User, int(user_id))

    @app.context_processor
    def inject_user() -> dict[str, object]:
        return {"current_user": current_user}


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints and the error boundary with the app."""

    register_default_modules(app)
    register_error_handlers(app)


def initialize_database(app: Flask) -> None:
    """Create database tables and, if enabled, the default data."""

    from ..models import Quiz, User

    db.create_all()

    if not app.config.get("SEED_DEFAULT_DATA"):
        return

    admin_user = User.query.filter_by(username="admin").first()
    if admin_user is None:
        admin_user = User(username="admin", is_admin=True)
        admin_user.set_password("admin")
        db.session.add(admin_user)
        db.session.flush()
        app.logger.info("Created default admin user.")

    if Quiz.query.count() == 0:
        for question, answer in DEFAULT_QUIZZES:
            db.session.add(Quiz(question=question, answer=answer, author_id=admin_user.id))
        app.logger.info("Seeded %d default quizzes.", len(DEFAULT_QUIZZES))

    db.session.commit()
