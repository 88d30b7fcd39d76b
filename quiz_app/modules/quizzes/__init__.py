# File: quiz_app/modules/quizzes/__init__.py
from flask import Blueprint

quizzes_bp = Blueprint('quizzes', __name__)
