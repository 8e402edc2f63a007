"""
Application FastAPI de Guava.

Initialise l'application web avec le Container DI, enregistre les handlers
d'erreurs (toutes les erreurs JSON passent par l'enveloppe) et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..container import Container
from ..core.errors import CatalogError
from .envelope import envelope_response
from .routes.content import router as content_router
from .routes.home import router as home_router
from .routes.playlists import router as playlists_router


async def _catalog_error_handler(request: Request, exc: CatalogError):
    """Rend une CatalogError avec son code et son message public uniquement."""
    if exc.status_code >= 500:
        logger.error(
            "Erreur backend",
            path=request.url.path,
            error=exc.detail,
            cause=repr(exc.__cause__) if exc.__cause__ else None,
        )
    else:
        logger.info("Requete rejetee", path=request.url.path, status=exc.status_code)
    return envelope_response(exc.status_code, error=exc.public_message)


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    """Enveloppe les erreurs HTTP du framework (route inconnue, methode refusee)."""
    message = exc.detail if isinstance(exc.detail, str) else None
    response = envelope_response(exc.status_code, error=message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    """Parametre manquant ou invalide : 400."""
    logger.info("Parametre invalide", path=request.url.path, errors=str(exc.errors()))
    return envelope_response(status.HTTP_400_BAD_REQUEST, error="Bad Request")


async def _unhandled_error_handler(request: Request, exc: Exception):
    """Erreur inattendue : detail journalise, message generique au client."""
    logger.opt(exception=exc).error("Erreur non geree", path=request.url.path)
    return envelope_response(status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Cree l'application FastAPI.

    Args :
        container : Container DI a utiliser (un Container par defaut sinon)

    Retourne :
        L'application configuree
    """
    container = container or Container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise le schema au demarrage et libere l'engine a l'arret."""
        container.database.init()
        logger.info(
            "Demarrage de Guava",
            version=__version__,
            store=container.config().masked_connection_string,
        )
        yield
        container.engine().dispose()

    app = FastAPI(title="Guava", version=__version__, lifespan=lifespan)
    app.state.container = container

    app.add_exception_handler(CatalogError, _catalog_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    # Routes
    app.include_router(home_router)
    app.include_router(playlists_router)
    app.include_router(content_router)
    return app


app = create_app()
