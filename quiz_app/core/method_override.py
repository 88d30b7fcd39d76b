"""WSGI middleware letting HTML forms reach PUT and DELETE routes.

Browsers only submit GET and POST, so edit and delete forms post to
``/quizzes/<id>?_method=PUT`` (or ``DELETE``) and the method is rewritten
before Flask matches the URL.
"""

from urllib.parse import parse_qs

ALLOWED_METHODS = frozenset(['PUT', 'PATCH', 'DELETE'])


class MethodOverrideMiddleware:
    """Rewrite ``REQUEST_METHOD`` from the ``_method`` query parameter of a POST."""

    def __init__(self, app, param: str = '_method'):
        self.app = app
        self.param = param

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            query = parse_qs(environ.get('QUERY_STRING', ''))
            override = query.get(self.param, [''])[0].upper()
            if override in ALLOWED_METHODS:
                environ['REQUEST_METHOD'] = override
        return self.app(environ, start_response)
