"""User model definitions."""

from sqlalchemy import Column, Integer, String
from board.database import Base


class User(Base):
    """Represents a registered board member."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
