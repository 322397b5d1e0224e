"""Failures raised by the board services.

Each error carries the HTTP status the API answers with, so the route layer
can translate any of them into an ``HTTPException`` without a lookup table.
"""

from fastapi import HTTPException, status


class BoardError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    message = 'Request failed.'

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message

    def to_http(self) -> HTTPException:
        return HTTPException(status_code=self.status_code, detail=self.message)


class InvalidInput(BoardError):
    message = 'Missing fields'


class Conflict(BoardError):
    message = 'Conflict'


class UsernameTaken(Conflict):
    message = 'Username already exists'


class UserNotFound(BoardError):
    message = 'User not found'


class InvalidPassword(BoardError):
    status_code = status.HTTP_403_FORBIDDEN
    message = 'Invalid password'


class Unauthenticated(BoardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = 'Not authenticated'


class InvalidToken(BoardError):
    status_code = status.HTTP_403_FORBIDDEN
    message = 'Invalid token'


class Forbidden(BoardError):
    status_code = status.HTTP_403_FORBIDDEN
    message = 'Not authorized'


class NotFound(BoardError):
    status_code = status.HTTP_404_NOT_FOUND
    message = 'Post not found'
