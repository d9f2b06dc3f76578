""""""
from typing import NamedTuple


class Comment(NamedTuple):
    """A comment posted on the board.

    Immutable: there is no edit or delete, a comment lives as long as the
    comment log that holds it.
    """

    #: untrusted, as posted
    author: str

    #: untrusted, as posted
    body: str
