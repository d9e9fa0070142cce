import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from .error import ClientError, ServerError
from .schemas import ErrorResponse
from .utils.rate_limit import RateLimiter

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _error_response(status_code: int, code: str, message: str, errors=None) -> JSONResponse:
    body = ErrorResponse(code=code, message=message, errors=errors)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True)
    )


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.code} {exc.message}")
    return _error_response(exc.status_code, exc.code, exc.message, exc.errors)


def _field_name(loc) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "header")]
    return ".".join(parts) or "request"


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = [f"{_field_name(e['loc'])}: {e['msg']}" for e in exc.errors()]
    logger.warning(f"Validation failed on {request.url.path}: {errors}")
    return _error_response(
        status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "Validation failed", errors
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error_response(exc.status_code, "NOT_FOUND", "Route not found")
    return _error_response(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


def _server_error_handlers(environment: str):
    hide_details = environment == "production"

    async def handle_server_error(request: Request, exc: ServerError):
        logger.error(f"Server error: {exc.code} {exc.message}")
        message = "Internal server error" if hide_details else exc.message
        return _error_response(exc.status_code, exc.code, message)

    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", "Internal server error"
        )

    return handle_server_error, handle_unexpected_error


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    from src.depends import engine, notification_dispatcher

    if app.state.auto_create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables ensured")

    yield

    await notification_dispatcher.drain()
    await engine.dispose()


def create_app(ApplicationConfig) -> FastAPI:
    configure_logging(ApplicationConfig.LOG_LEVEL)

    app = FastAPI(title="Movie Reviewer API", version="1.0.0", lifespan=lifespan)
    app.state.auto_create_tables = ApplicationConfig.AUTO_CREATE_TABLES
    app.state.rate_limiter = RateLimiter.from_config(ApplicationConfig)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import auth, comments, health_check, ratings, user

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(user.router, prefix=prefix, tags=["User"])
    app.include_router(comments.router, prefix=prefix, tags=["Comments"])
    app.include_router(ratings.router, prefix=prefix, tags=["Ratings"])

    handle_server_error, handle_unexpected_error = _server_error_handlers(
        ApplicationConfig.ENVIRONMENT
    )
    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(SQLAlchemyError, handle_unexpected_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
