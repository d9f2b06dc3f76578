"""The comment board: a vulnerable and a safe rendering of one comment
log."""
from flask import Flask

from .extension import BoardExtension


def register_plugin(app: Flask) -> None:
    BoardExtension(app)
