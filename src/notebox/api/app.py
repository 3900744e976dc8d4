"""FastAPI application for the Notebox REST API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notebox import __version__
from notebox.api.middleware import request_logging_middleware
from notebox.api.routes import form, health, notes
from notebox.core.config import NOTEBOX_CORS_ORIGINS
from notebox.core.errors import (
    AlreadyExists,
    CorruptStoreError,
    InvalidNoteError,
    NotFound,
    StorageIOError,
)
from notebox.core.store import NoteStore, get_note_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Notebox API starting up...")
    if getattr(app.state, "store", None) is None:
        app.state.store = get_note_store()
    logger.info("Serving notes from %s", app.state.store.path)
    yield
    logger.info("Notebox API shutting down...")


async def _not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": "Note not found"})


async def _already_exists_handler(
    request: Request, exc: AlreadyExists
) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": "Note already exists"})


async def _invalid_note_handler(
    request: Request, exc: InvalidNoteError
) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def _corrupt_store_handler(
    request: Request, exc: CorruptStoreError
) -> JSONResponse:
    logger.error("%s", exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Cache is not in the correct format"},
    )


async def _storage_io_handler(request: Request, exc: StorageIOError) -> JSONResponse:
    logger.error("%s", exc)
    return JSONResponse(
        status_code=500, content={"detail": "Failed to persist notes"}
    )


def create_app(store: NoteStore | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Note store to serve. When omitted, the default store is
            opened during application startup.
    """
    app = FastAPI(
        title="Notes API",
        description="API documentation for the Notes service",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=NOTEBOX_CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_logging_middleware)

    app.add_exception_handler(NotFound, _not_found_handler)
    app.add_exception_handler(AlreadyExists, _already_exists_handler)
    app.add_exception_handler(InvalidNoteError, _invalid_note_handler)
    app.add_exception_handler(CorruptStoreError, _corrupt_store_handler)
    app.add_exception_handler(StorageIOError, _storage_io_handler)

    # Include routers
    app.include_router(form.router, tags=["Form"])
    app.include_router(notes.router, tags=["Notes"])
    app.include_router(health.router, tags=["Health"])

    return app


# Create the default app instance
app = create_app()
