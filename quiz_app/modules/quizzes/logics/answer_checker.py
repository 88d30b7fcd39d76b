# quiz_app/modules/quizzes/logics/answer_checker.py


def normalize_answer(answer) -> str:
    """Lowercase and trim an answer for comparison."""
    return (answer or '').strip().lower()


def is_correct_answer(submitted, expected) -> bool:
    """True when both answers match ignoring case and surrounding whitespace."""
    return normalize_answer(submitted) == normalize_answer(expected)
