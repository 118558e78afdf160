from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from proverbs.core.config import Settings, get_settings
from proverbs.lifecycle import Lifecycle
from proverbs.repositories.json_storage import StorageError
from proverbs.routers import proverbs as proverbs_router
from proverbs.services.proverb_store import ProverbStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ProverbStore] = None,
    listening: Optional[Callable[[], bool]] = None,
) -> FastAPI:
    """
    Build the API application.

    Without ``store`` the snapshot named by the settings is loaded when the
    app starts up. A supplied store is served as-is and is only saved on
    shutdown when ``settings`` are passed as well. ``listening`` tells whether
    the server bound its socket; when it returns False at shutdown nothing is
    saved.
    """
    if settings is None and store is None:
        settings = get_settings()
    lifecycle = Lifecycle(settings.data_file if settings else None, listening)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            app.state.store = lifecycle.start(store)
        except StorageError as exc:
            logger.critical("Cannot load proverbs: %s", exc)
            raise
        yield
        logger.info("Shutting down, flushing proverbs")
        lifecycle.drain(app.state.store)

    app = FastAPI(title="Proverbs API", lifespan=lifespan)
    app.state.lifecycle = lifecycle
    if store is not None:
        app.state.store = store

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    app.include_router(proverbs_router.router)
    return app
