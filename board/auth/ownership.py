from board.core.errors import Forbidden
from board.models.post import Post


def ensure_owner(post: Post, username: str | None) -> None:
    """Only the author of a post may change or remove it."""
    if username is None or post.author != username:
        raise Forbidden()
