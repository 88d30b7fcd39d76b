"""Stateless logic for the quizzes module."""

from .answer_checker import is_correct_answer, normalize_answer
from .query_params import build_search_pattern, parse_page_number

__all__ = [
    'is_correct_answer',
    'normalize_answer',
    'build_search_pattern',
    'parse_page_number',
]
