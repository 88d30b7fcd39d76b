"""
Error Handlers for the quiz application

Provides:
- Custom exception classes
- The error page rendered for them
- Flask error handlers (the process-wide error boundary)
"""

from flask import current_app, render_template
from typing import Optional, Dict, Any, List


class QuizAppError(Exception):
    """Base exception class for the quiz application."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(QuizAppError):
    """Resource not found."""

    def __init__(self, message: str = 'Resource not found', resource: str = None):
        super().__init__(
            message=message,
            code='NOT_FOUND',
            status_code=404,
            details={'resource': resource} if resource else None
        )


class ValidationError(QuizAppError):
    """Input validation failed.

    ``errors`` maps a field name to the list of messages for that field.
    """

    def __init__(self, message: str = 'Validation failed', errors: Dict[str, List[str]] = None):
        self.errors = errors or {}
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            status_code=400,
            details={'errors': self.errors} if self.errors else None
        )

    @property
    def messages(self) -> List[str]:
        """Every field message, in field order."""
        return [message for field_messages in self.errors.values() for message in field_messages]


class StoreError(QuizAppError):
    """The data store rejected an operation."""

    def __init__(self, message: str = 'Database error', operation: str = None):
        super().__init__(
            message=message,
            code='STORE_ERROR',
            status_code=500,
            details={'operation': operation} if operation else None
        )


def _render_error(message: str, status_code: int):
    return render_template('error.html', message=message, status_code=status_code), status_code


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(QuizAppError)
    def handle_quiz_app_error(error):
        if error.status_code >= 500:
            current_app.logger.exception(f"{error.code}: {error.message} {error.details}")
        else:
            current_app.logger.warning(f"{error.code}: {error.message}")
        return _render_error(error.message, error.status_code)

    @app.errorhandler(404)
    def handle_not_found(error):
        return _render_error(error.description, 404)

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        return _render_error('Internal server error', 500)
