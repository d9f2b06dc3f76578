"""Comment board pages.

Both boards show the same comment log. The vulnerable one echoes it as is,
the safe one renders it through :data:`~commentboard.web.comments.render.SAFE`.
"""
import logging
from typing import Optional

from flask import Blueprint, redirect, render_template, request, url_for
from flask.views import MethodView
from werkzeug.datastructures import ImmutableMultiDict

from commentboard.services import get_service
from commentboard.web.http import nocache

from .forms import CommentForm
from .render import SAFE, CommentPolicy, render

logger = logging.getLogger(__name__)

bp = Blueprint("board", __name__)


@bp.route("/")
def index():
    return render_template("index.html")


class BoardView(MethodView):
    """Show the comment log with a submission form; store posted comments.

    :param title: page heading.
    :param policy: sanitization applied when rendering, `None` for none.
    """

    decorators = [nocache]

    def __init__(self, title: str, policy: Optional[CommentPolicy] = None) -> None:
        self.title = title
        self.policy = policy

    def get(self):
        store = get_service("comments")
        listing = render(store.all(), self.policy)
        return render_template(
            "board.html", title=self.title, form=CommentForm(), listing=listing
        )

    def post(self):
        if request.is_json and not isinstance(request.get_json(), dict):
            # only a JSON object carries fields: all of them take their default
            form = CommentForm(formdata=ImmutableMultiDict())
        else:
            form = CommentForm()

        # stored as received: sanitization is done when rendering
        get_service("comments").append(form.name.data, form.comment.data)
        logger.debug("Comment posted on %s", request.endpoint)
        return redirect(url_for(request.endpoint))


vulnerable_view = BoardView.as_view(
    "vulnerable", title="Vulnerable Comments (Stored XSS)"
)
bp.add_url_rule("/vulnerable", view_func=vulnerable_view)

safe_view = BoardView.as_view(
    "safe", title="Safe Comments (Sanitized + Escaped)", policy=SAFE
)
bp.add_url_rule("/safe", view_func=safe_view)
