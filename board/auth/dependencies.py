import logging

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from board.auth import jwt_handler
from board.core.errors import InvalidToken, Unauthenticated

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def authorize(token: str | None) -> str:
    """Resolve the acting username from a bearer token.

    Raises ``Unauthenticated`` when no token was sent and ``InvalidToken``
    when the signature does not verify or the payload carries no username.
    """
    if not token:
        raise Unauthenticated()

    try:
        payload = jwt_handler.decode_access_token(token)
    except jwt.PyJWTError as exc:
        logger.warning("Rejected bearer token: %s", exc)
        raise InvalidToken() from exc

    username = payload.get("username")
    if not isinstance(username, str) or not username:
        raise InvalidToken()
    return username


def get_current_username(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    token = credentials.credentials if credentials else None
    try:
        return authorize(token)
    except (Unauthenticated, InvalidToken) as exc:
        raise exc.to_http() from exc
