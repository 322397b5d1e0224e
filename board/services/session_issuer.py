import logging

from sqlalchemy.orm import Session

from board.auth import jwt_handler
from board.auth.passwords import verify_password
from board.core.errors import InvalidInput, InvalidPassword, UserNotFound
from board.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)


class SessionIssuer:
    def __init__(self, db: Session, credentials: CredentialStore | None = None):
        self.credentials = credentials or CredentialStore(db)

    def authenticate(self, username: str | None, password: str | None) -> tuple[str, dict]:
        """Check a username/password pair and issue a bearer token for it.

        Returns the token and the public view of the user, which only ever
        holds the username.
        """
        if not username or not password:
            raise InvalidInput()

        user = self.credentials.find_by_username(username)
        if user is None:
            logger.warning("Login failed, unknown user %r.", username)
            raise UserNotFound()

        if not verify_password(password, user.password_hash):
            logger.warning("Login failed, wrong password for %r.", username)
            raise InvalidPassword()

        token = jwt_handler.create_access_token(user.username)
        logger.info("Login successful for %r.", user.username)
        return token, {"username": user.username}
