"""Security response headers.

Installs Talisman once per application. The Content-Security-Policy goes on
every response except those of the endpoints listed in
``CSP_EXEMPT_ENDPOINTS``, e.g. to see the vulnerable board with no
mitigation at all.
"""
import logging
from functools import wraps
from typing import Callable

from flask import Flask
from flask_talisman import Talisman

__all__ = ["init_security_headers", "DEFAULT_CSP_POLICY"]

logger = logging.getLogger(__name__)

#: same origin only, no inline script, no plugins
DEFAULT_CSP_POLICY = {
    "default-src": "'self'",
    "script-src": "'self'",
    "object-src": "'none'",
}


def init_security_headers(app: Flask) -> Talisman:
    config = app.config
    talisman = Talisman(
        app,
        content_security_policy=config.get(
            "CONTENT_SECURITY_POLICY", DEFAULT_CSP_POLICY
        ),
        force_https=config.get("FORCE_HTTPS", False),
        session_cookie_secure=config.get("SESSION_COOKIE_SECURE", False),
    )
    app.extensions["talisman"] = talisman

    for endpoint in config.get("CSP_EXEMPT_ENDPOINTS", ()):
        if endpoint not in app.view_functions:
            raise ValueError(f"{endpoint!r} is not a registered endpoint")

        logger.info("No Content-Security-Policy for endpoint %s", endpoint)
        view = _per_app_view(app.view_functions[endpoint])
        app.view_functions[endpoint] = talisman(content_security_policy=False)(view)

    return talisman


def _per_app_view(view: Callable) -> Callable:
    # Talisman stores view options on the function object, which is shared by
    # all applications registering the same blueprint.
    @wraps(view, updated=())
    def _view(*args, **kwargs):
        return view(*args, **kwargs)

    return _view
