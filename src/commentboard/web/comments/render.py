"""Turn the comment log into an HTML fragment."""
from typing import Iterable, NamedTuple, Optional

from markupsafe import Markup

from commentboard.core.models import Comment
from commentboard.web.sanitize import PERMISSIVE, STRICT, SanitizationPolicy

__all__ = ["CommentPolicy", "SAFE", "render"]

COMMENT_HTML = "<div><strong>{author}</strong>: {body}</div>"


class CommentPolicy(NamedTuple):
    """Which sanitization policy applies to each part of a comment."""

    author: SanitizationPolicy
    body: SanitizationPolicy


SAFE = CommentPolicy(author=STRICT, body=PERMISSIVE)


def render(
    comments: Iterable[Comment], policy: Optional[CommentPolicy] = None
) -> Markup:
    """Render `comments` in order, one ``<div>`` each.

    Without a `policy`, authors and bodies are inserted verbatim: whatever
    markup they hold is live in the page. Don't do this at home.
    """
    if policy is None:
        parts = [
            COMMENT_HTML.format(author=comment.author, body=comment.body)
            for comment in comments
        ]
        return Markup("".join(parts))

    template = Markup(COMMENT_HTML)
    return Markup("").join(
        template.format(
            author=policy.author(comment.author), body=policy.body(comment.body)
        )
        for comment in comments
    )
