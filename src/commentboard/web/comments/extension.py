""""""
from flask import Flask

from commentboard.services import get_service

from .views import bp as blueprint


class BoardExtension:
    """API for the comment board, installed as an application extension.

    It is also available in templates as `board`.
    """

    def __init__(self, app: Flask) -> None:
        app.extensions["board"] = self
        app.add_template_global(self, "board")
        app.register_blueprint(blueprint)

    def count(self) -> int:
        return get_service("comments").count()
