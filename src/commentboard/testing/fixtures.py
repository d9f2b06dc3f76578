"""Configuration and injectable fixtures for Pytest.

Can be reused (and overriden) by adding::

   pytest_plugins = ['commentboard.testing.fixtures']

to your `conftest.py`.
"""
from typing import Any, Iterator

from flask.ctx import AppContext, RequestContext
from flask.testing import FlaskClient
from pytest import fixture

from commentboard.app import Application, create_app
from commentboard.services import get_service
from commentboard.services.comments import CommentStoreService


class TestConfig:
    TESTING = True
    SECRET_KEY = "SECRET"
    SITE_NAME = "XSS Demo Test"
    WTF_CSRF_ENABLED = False


@fixture
def config() -> type:
    return TestConfig


@fixture
def app(config: Any) -> Iterator[Application]:
    # A fresh app, hence a fresh comment log, for each test.
    app = create_app(config=config)
    yield app
    with app.app_context():
        app.stop_services()


@fixture
def app_context(app: Application) -> Iterator[AppContext]:
    with app.app_context() as ctx:
        yield ctx


@fixture
def req_ctx(app: Application) -> Iterator[RequestContext]:
    with app.test_request_context() as _req_ctx:
        yield _req_ctx


@fixture
def client(app: Application) -> FlaskClient:
    """Return a Web client, used for testing."""
    return app.test_client()


@fixture
def store(app_context: AppContext) -> CommentStoreService:
    return get_service("comments")
