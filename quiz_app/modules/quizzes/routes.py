# File: quiz_app/modules/quizzes/routes.py
# Routes for listing, editing and playing quizzes, including random play.

from flask import flash, g, redirect, render_template, request, url_for
from flask_login import current_user

from . import quizzes_bp
from . import events  # noqa: F401  (connects signal receivers)
from .forms import QuizForm
from .logics.answer_checker import is_correct_answer
from .logics.query_params import parse_page_number
from .logics.random_play import CheckOutcome
from .services import QuizQueryService, QuizService, RandomPlayService
from ..main.navigation import save_back
from ...core.error_handlers import StoreError, ValidationError


@quizzes_bp.url_value_preprocessor
def load_route_objects(endpoint, values):
    """Resolve ``quiz_id`` / ``user_id`` URL parts into ``g.quiz`` / ``g.author``."""
    values = values if values is not None else {}
    g.quiz = QuizService.get_quiz_or_404(values.pop('quiz_id')) if 'quiz_id' in values else None
    g.author = QuizQueryService.get_author_or_404(values.pop('user_id')) if 'user_id' in values else None


def _current_author_id():
    if current_user.is_authenticated:
        return current_user.id
    return None


def _flash_form_errors(messages):
    flash('There are errors in the form:', 'danger')
    for message in messages:
        flash(message, 'danger')


# --- LISTING ---

@quizzes_bp.route('/quizzes')
@quizzes_bp.route('/users/<int:user_id>/quizzes')
@save_back
def index():
    search = request.args.get('search', '', type=str)
    page = parse_page_number(request.args.get('pageno'))

    author = g.get('author')
    listing = QuizQueryService.list_quizzes(search=search, author=author, page=page)
    return render_template(
        'quizzes/index.html',
        quizzes=listing.quizzes,
        pagination=listing.pagination,
        search=listing.search,
        title=listing.title,
        list_args={'user_id': author.id} if author else {},
    )


# --- CRUD ---

@quizzes_bp.route('/quizzes/<int:quiz_id>')
def show():
    return render_template('quizzes/show.html', quiz=g.quiz)


@quizzes_bp.route('/quizzes/new')
def new():
    form = QuizForm(data={'question': '', 'answer': ''})
    return render_template('quizzes/new.html', form=form)


@quizzes_bp.route('/quizzes', methods=['POST'])
def create():
    form = QuizForm()
    if not form.validate():
        _flash_form_errors(form.error_messages())
        return render_template('quizzes/new.html', form=form)

    try:
        quiz = QuizService.create_quiz(form.question.data, form.answer.data, _current_author_id())
    except ValidationError as error:
        _flash_form_errors(error.messages)
        return render_template('quizzes/new.html', form=form)
    except StoreError as error:
        flash(f'Error creating a new Quiz: {error.message}', 'danger')
        raise

    flash('Quiz created successfully.', 'success')
    return redirect(url_for('quizzes.show', quiz_id=quiz.id))


@quizzes_bp.route('/quizzes/<int:quiz_id>/edit')
def edit():
    form = QuizForm(obj=g.quiz)
    return render_template('quizzes/edit.html', quiz=g.quiz, form=form)


@quizzes_bp.route('/quizzes/<int:quiz_id>', methods=['PUT'])
def update():
    quiz = g.quiz
    form = QuizForm()
    if not form.validate():
        _flash_form_errors(form.error_messages())
        return render_template('quizzes/edit.html', quiz=quiz, form=form)

    try:
        QuizService.update_quiz(quiz, form.question.data, form.answer.data)
    except ValidationError as error:
        _flash_form_errors(error.messages)
        return render_template('quizzes/edit.html', quiz=quiz, form=form)
    except StoreError as error:
        flash(f'Error editing the Quiz: {error.message}', 'danger')
        raise

    flash('Quiz edited successfully.', 'success')
    return redirect(url_for('quizzes.show', quiz_id=quiz.id))


@quizzes_bp.route('/quizzes/<int:quiz_id>', methods=['DELETE'])
def destroy():
    try:
        QuizService.delete_quiz(g.quiz)
    except StoreError as error:
        flash(f'Error deleting the Quiz: {error.message}', 'danger')
        raise

    flash('Quiz deleted successfully.', 'success')
    return redirect(url_for('main.goback'))


# --- SINGLE PLAY ---

@quizzes_bp.route('/quizzes/<int:quiz_id>/play')
def play():
    answer = request.args.get('answer', '', type=str)
    return render_template('quizzes/play.html', quiz=g.quiz, answer=answer)


@quizzes_bp.route('/quizzes/<int:quiz_id>/check')
def check():
    answer = request.args.get('answer', '', type=str)
    result = is_correct_answer(answer, g.quiz.answer)
    return render_template('quizzes/result.html', quiz=g.quiz, result=result, answer=answer)


# --- RANDOM PLAY ---

@quizzes_bp.route('/quizzes/randomplay')
def random_play():
    draw, quiz = RandomPlayService.draw_next()
    if quiz is None:
        return render_template('quizzes/random_nomore.html', score=draw.score)
    return render_template('quizzes/random_play.html', quiz=quiz, score=draw.score)


@quizzes_bp.route('/quizzes/randomcheck')
def random_check():
    answer = request.args.get('answer', '', type=str)
    result, quiz = RandomPlayService.check_answer(answer)

    if result.outcome is CheckOutcome.NO_ACTIVE_QUIZ:
        flash('There is no question waiting for an answer. Here is a new one.', 'info')
        return redirect(url_for('quizzes.random_play'))

    if result.outcome is CheckOutcome.EXHAUSTED:
        return render_template('quizzes/random_nomore.html', score=result.score)

    return render_template(
        'quizzes/random_result.html',
        quiz=quiz,
        answer=answer,
        result=result.correct,
        score=result.score,
    )
