from urllib.parse import parse_qs


class MethodOverrideMiddleware:
    """Let HTML forms reach PUT, PATCH and DELETE routes.

    A ``POST`` whose query string carries ``_method=<verb>`` is dispatched as
    that verb. Other requests pass through untouched.
    """

    allowed_methods = frozenset(["PUT", "PATCH", "DELETE"])

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        if environ.get("REQUEST_METHOD", "").upper() == "POST":
            query = parse_qs(environ.get("QUERY_STRING", ""))
            method = (query.get("_method") or [""])[0].upper()
            if method in self.allowed_methods:
                environ["REQUEST_METHOD"] = method
        return self.app(environ, start_response)
