"""HTTP cache control for pages showing the comment log."""
from functools import wraps

from flask import make_response


def nocache(view):
    """Ask browsers to revalidate: a board must show comments posted since
    the last visit, not a cached copy."""

    @wraps(view)
    def _nocache(*args, **kwargs):
        response = make_response(view(*args, **kwargs))
        response.headers["Cache-Control"] = "no-cache"
        return response

    return _nocache
