import jwt

from board.core import config


def create_access_token(username: str) -> str:
    # Sessions do not expire, so no "exp" claim is issued.
    payload = {"username": username}
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
