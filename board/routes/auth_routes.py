import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from board.auth.dependencies import get_current_username
from board.core.errors import BoardError
from board.database import get_db
from board.services.credential_store import CredentialStore
from board.services.session_issuer import SessionIssuer

router = APIRouter(tags=['auth'])

logger = logging.getLogger(__name__)


class CredentialsRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class PublicUserResponse(BaseModel):
    username: str


class LoginResponse(BaseModel):
    token: str
    user: PublicUserResponse


class MessageResponse(BaseModel):
    message: str


def database_unavailable(exc: SQLAlchemyError) -> HTTPException:
    logger.error('Database error: %s', exc)
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail='Database unavailable. Verify DATABASE_URL.',
    )


@router.post('/register', response_model=MessageResponse)
def register(data: CredentialsRequest, db: Session = Depends(get_db)):
    try:
        CredentialStore(db).register(data.username, data.password)
    except BoardError as exc:
        raise exc.to_http() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise database_unavailable(exc) from exc

    return {'message': 'User created'}


@router.post('/login', response_model=LoginResponse)
def login(data: CredentialsRequest, db: Session = Depends(get_db)):
    try:
        token, user = SessionIssuer(db).authenticate(data.username, data.password)
    except BoardError as exc:
        raise exc.to_http() from exc
    except SQLAlchemyError as exc:
        raise database_unavailable(exc) from exc

    return {'token': token, 'user': user}


@router.get('/me', response_model=PublicUserResponse)
def me(current_user: str = Depends(get_current_username)):
    return {'username': current_user}
