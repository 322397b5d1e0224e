import logging

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from board.auth.ownership import ensure_owner
from board.core.errors import NotFound
from board.models.post import Post

logger = logging.getLogger(__name__)

LIKE_ESCAPE = '\\'

# Largest value an SQLite or Postgres BIGINT primary key can hold.
MAX_POST_ID = 2**63 - 1


def _escape_like(value: str) -> str:
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace('%', LIKE_ESCAPE + '%')
        .replace('_', LIKE_ESCAPE + '_')
    )


class PostRepository:
    """Reads and writes board posts.

    Every listing is ordered newest first; posts created within the same
    clock tick fall back to id order so the result stays deterministic.
    """

    def __init__(self, db: Session):
        self.db = db

    def _newest_first(self, query):
        return query.order_by(Post.created_at.desc(), Post.id.desc())

    def list_posts(self, category: str | None = None) -> list[Post]:
        query = self.db.query(Post)
        if category:
            query = query.filter(Post.category == category)
        return self._newest_first(query).all()

    def search(self, query: str | None) -> list[Post]:
        if not query:
            return []

        pattern = f'%{_escape_like(query)}%'
        if self.db.get_bind().dialect.name == 'sqlite':
            # SQLite's own LIKE only folds ASCII, so compare casefolded text.
            pattern = pattern.casefold()
            condition = or_(
                func.casefold(Post.title).like(pattern, escape=LIKE_ESCAPE),
                func.casefold(Post.content).like(pattern, escape=LIKE_ESCAPE),
            )
        else:
            condition = or_(
                Post.title.ilike(pattern, escape=LIKE_ESCAPE),
                Post.content.ilike(pattern, escape=LIKE_ESCAPE),
            )
        matches = self.db.query(Post).filter(condition)
        return self._newest_first(matches).all()

    def increment_views(self, post_id: int) -> None:
        # Single UPDATE statement so concurrent readers never lose a view.
        try:
            self.db.query(Post).filter(Post.id == post_id).update(
                {Post.views: Post.views + 1},
                synchronize_session=False,
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.exception('Could not record a view for post %s.', post_id)

    def get_by_id(self, post_id: int) -> Post:
        """Fetch one post, counting the fetch as a view.

        The increment is committed before the row is read, so the returned
        ``views`` normally already includes this fetch. A failed increment
        is logged and does not prevent the post from being returned.
        """
        if not 0 < post_id <= MAX_POST_ID:
            raise NotFound()

        self.increment_views(post_id)
        return self._get(post_id)

    def _get(self, post_id: int) -> Post:
        if not 0 < post_id <= MAX_POST_ID:
            raise NotFound()

        post = self.db.query(Post).filter(Post.id == post_id).first()
        if post is None:
            raise NotFound()
        return post

    def create(self, title: str, content: str, category: str, author: str) -> Post:
        post = Post(title=title, content=content, category=category, author=author, views=0)
        self.db.add(post)
        self.db.commit()
        self.db.refresh(post)
        logger.info('Post %s created by %r in %r.', post.id, author, category)
        return post

    def update_content(self, post_id: int, new_content: str, requesting_user: str | None) -> Post:
        post = self._get(post_id)
        ensure_owner(post, requesting_user)

        post.content = new_content
        self.db.commit()
        self.db.refresh(post)
        return post

    def delete(self, post_id: int, requesting_user: str | None) -> None:
        post = self._get(post_id)
        ensure_owner(post, requesting_user)

        self.db.delete(post)
        self.db.commit()
        logger.info('Post %s deleted by %r.', post_id, requesting_user)
