from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, field_validator
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from board.auth.dependencies import get_current_username
from board.core.errors import BoardError
from board.database import get_db
from board.routes.auth_routes import MessageResponse, database_unavailable
from board.services.post_repository import PostRepository

router = APIRouter(tags=['posts'])


class CreatePostRequest(BaseModel):
    title: str
    content: str
    category: str


class UpdatePostRequest(BaseModel):
    content: str


class PostResponse(BaseModel):
    id: int
    title: str
    content: str
    author: str
    category: str
    created_at: datetime
    views: int

    class Config:
        from_attributes = True

    @field_validator('created_at')
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


@router.get('/posts', response_model=list[PostResponse])
def list_posts(category: str | None = Query(default=None), db: Session = Depends(get_db)):
    try:
        return PostRepository(db).list_posts(category)
    except SQLAlchemyError as exc:
        raise database_unavailable(exc) from exc


@router.get('/search', response_model=list[PostResponse])
def search_posts(q: str | None = Query(default=None), db: Session = Depends(get_db)):
    try:
        return PostRepository(db).search(q)
    except SQLAlchemyError as exc:
        raise database_unavailable(exc) from exc


@router.get('/posts/{post_id}', response_model=PostResponse)
def get_post(post_id: int, db: Session = Depends(get_db)):
    try:
        return PostRepository(db).get_by_id(post_id)
    except BoardError as exc:
        raise exc.to_http() from exc
    except SQLAlchemyError as exc:
        raise database_unavailable(exc) from exc


@router.post('/posts', response_model=PostResponse)
def create_post(
    data: CreatePostRequest,
    current_user: str = Depends(get_current_username),
    db: Session = Depends(get_db),
):
    try:
        return PostRepository(db).create(
            title=data.title,
            content=data.content,
            category=data.category,
            author=current_user,
        )
    except SQLAlchemyError as exc:
        db.rollback()
        raise database_unavailable(exc) from exc


@router.put('/posts/{post_id}', response_model=MessageResponse)
def update_post(
    post_id: int,
    data: UpdatePostRequest,
    current_user: str = Depends(get_current_username),
    db: Session = Depends(get_db),
):
    try:
        PostRepository(db).update_content(post_id, data.content, current_user)
    except BoardError as exc:
        raise exc.to_http() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise database_unavailable(exc) from exc

    return {'message': 'Updated'}


@router.delete('/posts/{post_id}', response_model=MessageResponse)
def delete_post(
    post_id: int,
    current_user: str = Depends(get_current_username),
    db: Session = Depends(get_db),
):
    try:
        PostRepository(db).delete(post_id, current_user)
    except BoardError as exc:
        raise exc.to_http() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise database_unavailable(exc) from exc

    return {'message': 'Deleted'}
