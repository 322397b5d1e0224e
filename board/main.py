import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from board.core import config
from board.core.errors import InvalidInput, NotFound
from board.database import init_db
from board.routes import auth_routes, post_routes

app = FastAPI(title='BaseballUSA Board API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials='*' not in config.CORS_ALLOW_ORIGINS,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    try:
        init_db()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL.')


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={'message': exc.detail},
        headers=getattr(exc, 'headers', None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.info('Rejected malformed request to %s: %s', request.url.path, errors)

    # A post id that is not an integer can never name a stored post.
    if any(tuple(error.get('loc', ()))[:1] == ('path',) for error in errors):
        return JSONResponse(
            status_code=NotFound.status_code,
            content={'message': NotFound.message},
        )

    if all(error.get('type') == 'missing' for error in errors):
        message = InvalidInput.message
    else:
        message = 'Invalid request'
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'message': message},
    )


@app.get('/health')
def health():
    return {'status': 'Server is healthy'}


app.include_router(auth_routes.router, prefix='/api')
app.include_router(post_routes.router, prefix='/api')
