import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from board.auth.passwords import hash_password
from board.core.errors import InvalidInput, UsernameTaken
from board.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """Persists usernames together with their bcrypt password hashes."""

    def __init__(self, db: Session):
        self.db = db

    def register(self, username: str | None, password: str | None) -> User:
        if not username or not password:
            raise InvalidInput()

        user = User(username=username, password_hash=hash_password(password))
        self.db.add(user)
        try:
            # The unique index on users.username decides who wins a race.
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Registration rejected, username %r already exists.", username)
            raise UsernameTaken() from exc

        self.db.refresh(user)
        logger.info("Registered user %r.", username)
        return user

    def find_by_username(self, username: str | None) -> User | None:
        if not username:
            return None
        return self.db.query(User).filter(User.username == username).first()
