from typing import Any, Dict

from flask import Flask
from werkzeug.datastructures import ImmutableDict

from commentboard.web.security import DEFAULT_CSP_POLICY


class DefaultConfig:
    # Replaced by a random key, valid for the process lifetime, when left
    # unchanged outside of debug and testing.
    SECRET_KEY = "CHANGEME"

    SITE_NAME = "XSS Demo"

    #: overridden by the PORT environment variable
    PORT = 3003

    WTF_CSRF_ENABLED = True

    # Security headers (Talisman). The demo runs on plain http://localhost.
    CONTENT_SECURITY_POLICY = DEFAULT_CSP_POLICY
    #: endpoints served without Content-Security-Policy, e.g.
    #: ("board.vulnerable",)
    CSP_EXEMPT_ENDPOINTS = ()
    FORCE_HTTPS = False
    SESSION_COOKIE_SECURE = False

    # Logging
    LOG_LEVEL = None
    LOGGING_CONFIG_FILE = None

    PLUGINS = ()


default_config = dict(Flask.default_config)  # type: Dict[str, Any]
default_config.update(vars(DefaultConfig))
default_config = ImmutableDict(default_config)
