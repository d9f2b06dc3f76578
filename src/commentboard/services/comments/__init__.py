from .service import CommentStoreService, CommentStoreState

__all__ = ["CommentStoreService", "CommentStoreState"]
