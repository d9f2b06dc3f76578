"""The comment log: an ordered, append-only sequence of comments.

It only lives as long as the service runs for an application. Nothing is
written to disk.
"""
import threading
from typing import List, Tuple

from commentboard.core.models import Comment
from commentboard.services.base import Service, ServiceState


class CommentStoreState(ServiceState):
    comments: List[Comment]

    def __init__(self, service: "CommentStoreService") -> None:
        super().__init__(service)
        self.comments = []
        # werkzeug serves requests from several threads
        self.lock = threading.Lock()

    def start(self) -> None:
        with self.lock:
            self.comments = []
        super().start()

    def stop(self) -> None:
        super().stop()
        with self.lock:
            discarded = len(self.comments)
            self.comments = []
        self.service.logger.debug("Discarded %d comments", discarded)


class CommentStoreService(Service):
    name = "comments"
    AppStateClass = CommentStoreState

    def append(self, author: str, body: str) -> Comment:
        """Add a comment at the end of the log and return it."""
        comment = Comment(author=author, body=body)
        state = self.app_state
        with state.lock:
            state.comments.append(comment)
            position = len(state.comments)
        self.logger.info("Comment #%d appended by %r", position, author)
        return comment

    def all(self) -> Tuple[Comment, ...]:
        """All comments, oldest first.

        A snapshot: later appends don't show up in it.
        """
        state = self.app_state
        with state.lock:
            return tuple(state.comments)

    def count(self) -> int:
        state = self.app_state
        with state.lock:
            return len(state.comments)
