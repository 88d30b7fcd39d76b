# quiz_app/modules/quizzes/logics/query_params.py
"""Turn raw listing query parameters into search and paging values."""

import re
from typing import Optional

_WHITESPACE_RUN = re.compile(r'\s+')


def build_search_pattern(search_text: Optional[str]) -> Optional[str]:
    """
    Build a LIKE pattern from free search text.

    Runs of whitespace become ``%`` so ``"capital of"`` matches any question
    containing ``capital`` followed somewhere later by ``of``. Returns None
    when there is nothing to search for.
    """
    if not search_text or not search_text.strip():
        return None
    return '%' + _WHITESPACE_RUN.sub('%', search_text) + '%'


def parse_page_number(raw) -> int:
    """Parse a 1-based page number, falling back to 1 on bad input."""
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1