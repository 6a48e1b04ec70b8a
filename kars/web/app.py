"""
Application FastAPI de KARS.

Initialise l'application web avec le Container DI, monte les routes de
l'API JSON et traduit les erreurs du domaine en codes HTTP.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from ..container import Container
from ..core.entities.media import NoProgressError
from ..core.errors import DataCorruption, InvalidIdentifier, UnknownMediaType
from ..services.library import ItemNotFoundError
from .routes.explore import router as explore_router
from .routes.items import router as items_router
from .routes.stats import router as stats_router


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI a utiliser (un nouveau est cree si None)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise le Container DI au demarrage et ferme les clients a l'arret."""
        app.state.container = container or Container()
        app.state.container.database.init()
        yield
        await app.state.container.explore_service().close()
        app.state.container.shutdown_resources()

    app = FastAPI(title="KARS", lifespan=lifespan)

    # Pas d'authentification : toutes les origines sont acceptees
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InvalidIdentifier)
    async def invalid_identifier_handler(request: Request, exc: InvalidIdentifier):
        return _error(status.HTTP_400_BAD_REQUEST, exc)

    @app.exception_handler(UnknownMediaType)
    async def unknown_media_type_handler(request: Request, exc: UnknownMediaType):
        return _error(status.HTTP_400_BAD_REQUEST, exc)

    @app.exception_handler(NoProgressError)
    async def no_progress_handler(request: Request, exc: NoProgressError):
        return _error(status.HTTP_400_BAD_REQUEST, exc)

    @app.exception_handler(ItemNotFoundError)
    async def not_found_handler(request: Request, exc: ItemNotFoundError):
        return _error(status.HTTP_404_NOT_FOUND, exc)

    @app.exception_handler(DataCorruption)
    async def data_corruption_handler(request: Request, exc: DataCorruption):
        logger.error(f"{request.method} {request.url.path}: {exc}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)

    app.include_router(items_router)
    app.include_router(explore_router)
    app.include_router(stats_router)
    return app


app = create_app()
