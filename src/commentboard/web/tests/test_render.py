from markupsafe import Markup

from commentboard.core.models import Comment
from commentboard.web.comments.render import SAFE, CommentPolicy, render
from commentboard.web.sanitize import STRICT

COMMENTS = [
    Comment(author="<b>alice</b>", body="<i>hi</i>"),
    Comment(author="<img src=x onerror=alert(1)>", body="<script>alert(1)</script>ok"),
]


def test_render_nothing():
    assert render([]) == ""
    assert render([], SAFE) == ""


def test_render_insecure_is_verbatim():
    result = render(COMMENTS)
    assert isinstance(result, Markup)
    assert result == (
        "<div><strong><b>alice</b></strong>: <i>hi</i></div>"
        "<div><strong><img src=x onerror=alert(1)></strong>: "
        "<script>alert(1)</script>ok</div>"
    )


def test_render_safe():
    result = render(COMMENTS, SAFE)
    assert isinstance(result, Markup)
    assert result == (
        "<div><strong>alice</strong>: <i>hi</i></div>"
        "<div><strong></strong>: ok</div>"
    )


def test_render_applies_policy_per_field():
    policy = CommentPolicy(author=STRICT, body=STRICT)
    result = render([Comment(author="a", body="<i>b</i>")], policy)
    assert result == "<div><strong>a</strong>: b</div>"


def test_render_keeps_order():
    comments = [Comment(author=f"c{i}", body="") for i in range(5)]
    for policy in (None, SAFE):
        result = render(comments, policy)
        positions = [result.index(f"c{i}") for i in range(5)]
        assert positions == sorted(positions)
