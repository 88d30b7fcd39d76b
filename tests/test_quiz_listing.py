"""Tests for the quiz listing: search, per-author filter and pagination."""

import pytest

from quiz_app.models import Quiz, User, db
from quiz_app.modules.quizzes.logics.query_params import (
    build_search_pattern,
    parse_page_number,
)
from quiz_app.modules.quizzes.services import QuizQueryService


class TestQueryParams:

    def test_search_pattern_collapses_whitespace(self):
        assert build_search_pattern('capital of') == '%capital%of%'
        assert build_search_pattern('capital   of\tthe') == '%capital%of%the%'

    @pytest.mark.parametrize('text', [None, '', '   '])
    def test_blank_search_means_no_filter(self, text):
        assert build_search_pattern(text) is None

    @pytest.mark.parametrize('raw, expected', [
        (None, 1), ('', 1), ('abc', 1), ('0', 1), ('-3', 1), ('2', 2), ('17', 17),
    ])
    def test_page_number_defaults_to_one(self, raw, expected):
        assert parse_page_number(raw) == expected


@pytest.fixture
def many_quizzes(app, author):
    quizzes = [Quiz(question=f'Question {i}', answer=f'Answer {i}', author_id=author.id) for i in range(25)]
    db.session.add_all(quizzes)
    db.session.commit()
    return quizzes


class TestListingService:

    def test_third_page_holds_the_last_five(self, many_quizzes):
        listing = QuizQueryService.list_quizzes(page=3)

        assert listing.pagination.total == 25
        assert listing.pagination.per_page == 10
        assert [quiz.question for quiz in listing.quizzes] == [f'Question {i}' for i in range(20, 25)]

    def test_search_is_case_insensitive_and_ordered(self, app, author):
        db.session.add_all([
            Quiz(question='What is the Capital of Italy', answer='Rome', author_id=author.id),
            Quiz(question='Capital city OF France', answer='Paris', author_id=author.id),
            Quiz(question='Of capital importance', answer='x', author_id=author.id),
        ])
        db.session.commit()

        listing = QuizQueryService.list_quizzes(search='capital of')

        assert [quiz.answer for quiz in listing.quizzes] == ['Rome', 'Paris']
        assert listing.title == 'Questions'

    def test_author_filter_changes_title(self, app, author):
        other = User(username='other')
        other.set_password('x')
        db.session.add(other)
        db.session.flush()
        db.session.add_all([
            Quiz(question='Mine', answer='a', author_id=author.id),
            Quiz(question='Theirs', answer='b', author_id=other.id),
        ])
        db.session.commit()

        listing = QuizQueryService.list_quizzes(author=other)

        assert [quiz.question for quiz in listing.quizzes] == ['Theirs']
        assert listing.pagination.total == 1
        assert listing.title == 'Questions of other'


class TestListingRoutes:

    def test_index_renders_first_page(self, client, many_quizzes, rendered):
        response = client.get('/quizzes')

        assert response.status_code == 200
        name, context = rendered[-1]
        assert name == 'quizzes/index.html'
        assert len(context['quizzes']) == 10
        assert context['pagination'].page == 1
        assert context['search'] == ''
        assert context['title'] == 'Questions'

    def test_invalid_page_falls_back_to_first(self, client, many_quizzes, rendered):
        client.get('/quizzes', query_string={'pageno': 'nope'})

        _name, context = rendered[-1]
        assert context['pagination'].page == 1

    def test_page_past_the_end_is_empty(self, client, many_quizzes, rendered):
        response = client.get('/quizzes', query_string={'pageno': '9'})

        assert response.status_code == 200
        _name, context = rendered[-1]
        assert context['quizzes'] == []

    def test_user_listing(self, client, many_quizzes, author, rendered):
        response = client.get(f'/users/{author.id}/quizzes', query_string={'search': 'Question 2'})

        assert response.status_code == 200
        _name, context = rendered[-1]
        assert context['title'] == 'Questions of author1'
        assert {quiz.question for quiz in context['quizzes']} == {
            'Question 2', 'Question 12', 'Question 20', 'Question 21', 'Question 22', 'Question 23', 'Question 24',
        }

    def test_pagination_links_keep_the_author(self, client, many_quizzes, author):
        response = client.get(f'/users/{author.id}/quizzes')

        assert f'/users/{author.id}/quizzes?pageno=2'.encode() in response.data

    def test_unknown_user_is_not_found(self, client):
        response = client.get('/users/999/quizzes')

        assert response.status_code == 404
        assert b'There is no user with id=999' in response.data

    def test_root_redirects_to_listing(self, client):
        response = client.get('/')

        assert response.status_code == 302
        assert response.headers['Location'].endswith('/quizzes')
