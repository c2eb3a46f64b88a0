from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError
from sqlmodel import Session
import logging
import traceback
from taskdeck.core.config import settings
from taskdeck.core.database import engine, init_db
from taskdeck.core.exceptions import (
    TaskDeckException,
    ValidationError,
    NotFoundError,
    ConfigurationError,
    TransientStoreError,
)

# Import models to register them with SQLModel
from taskdeck import models  # noqa: F401

# Import API router
from taskdeck.api.v1 import api_router
from taskdeck.services.catalog_service import seed_default_cards

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(levelname)s - %(name)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database and the default catalog on startup."""
    init_db()
    if settings.seed_default_cards:
        with Session(engine) as session:
            seed_default_cards(session)
    yield


app = FastAPI(title="TaskDeck API", version="1.0.0", lifespan=lifespan)


def _format_validation_errors(errors) -> str:
    parts = []
    for error in errors:
        # Drop the leading "body"/"path"/"query" marker
        loc = ".".join(str(part) for part in error.get("loc", ())[1:])
        parts.append(f"{loc}: {error.get('msg')}" if loc else error.get("msg", ""))
    return "; ".join(parts) or "Invalid request"


# Add exception handler for validation errors to log details
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log validation errors and answer with a 400 and a readable message."""
    logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": _format_validation_errors(exc.errors()),
            "type": "ValidationError",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


# Add exception handler for custom application exceptions
@app.exception_handler(TaskDeckException)
async def taskdeck_exception_handler(request: Request, exc: TaskDeckException):
    """Handle custom application exceptions."""
    if isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if isinstance(exc, (ConfigurationError, TransientStoreError)):
        logger.error(f"Application error on {request.method} {request.url.path}: {type(exc).__name__}: {str(exc)}")
    else:
        logger.warning(f"Application exception on {request.method} {request.url.path}: {type(exc).__name__}: {str(exc)}")
    return JSONResponse(
        status_code=status_code,
        content={"message": str(exc), "type": type(exc).__name__},
    )


@app.exception_handler(OperationalError)
async def store_exception_handler(request: Request, exc: OperationalError):
    """Database unreachable or failing outside an explicit store call."""
    logger.error(f"Store error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "message": "The data store is unavailable. Please try again.",
            "type": TransientStoreError.__name__,
        },
    )


# Add global exception handler for unhandled errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch all unhandled exceptions and answer with a structured 500."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)

    # In development, show full error details
    if settings.is_development:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": str(exc),
                "type": type(exc).__name__,
                "traceback": traceback.format_exc()
            },
        )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "message": "An internal server error occurred. Please try again later.",
            "type": "InternalServerError"
        },
    )


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    return {
        "message": "TaskDeck API",
        "status": "running",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        }
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}


# Include API router
app.include_router(api_router, prefix=settings.api_prefix)
