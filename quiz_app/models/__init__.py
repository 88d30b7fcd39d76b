"""Database models package for the quiz app."""

from ..core.extensions import db

from .user import User
from .quiz import CREATE_FIELDS, UPDATE_FIELDS, Quiz, Tip
from .random_play import RandomPlaySession

__all__ = [
    'db',
    'User',
    'Quiz',
    'Tip',
    'RandomPlaySession',
    'CREATE_FIELDS',
    'UPDATE_FIELDS',
]
