"""Post model definitions."""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, DateTime, String, Text
from board.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """Represents a post on one of the category boards."""
    __tablename__ = "posts"
    # Ids are never reused after a delete.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    author = Column(String, index=True, nullable=False)  # username copy, not a FK
    category = Column(String, index=True, nullable=False)
    # SQLite drops the offset on storage; values are always UTC.
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    views = Column(Integer, default=0, nullable=False)
