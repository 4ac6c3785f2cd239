"""FastAPI HTTP server setup."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
import logging

from config import settings
from database import db_manager
from services import NotFoundError

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info("Starting task manager server...")
    db_manager.initialize()
    logger.info("Task manager server started successfully")

    yield

    logger.info("Shutting down task manager server...")
    db_manager.close()
    logger.info("Task manager server shut down")


# Create FastAPI app
app = FastAPI(
    title="Task Manager",
    description="Task tracking service with user assignment",
    version=VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Errors are returned as plain text, the body being the message itself
@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return PlainTextResponse(str(exc), status_code=404)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return PlainTextResponse(message, status_code=400)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
    return PlainTextResponse("Internal server error", status_code=500)


from .endpoints import router
from .user_endpoints import router as user_router

app.include_router(router, prefix=settings.api_prefix)
app.include_router(user_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Task Manager",
        "version": VERSION,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    database_ok = db_manager.ping()

    return {
        "status": "healthy" if database_ok else "degraded",
        "database": database_ok
    }
