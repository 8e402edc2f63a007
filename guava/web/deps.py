"""
Dependances partagees de l'application web.

Fournit le Container, une session SQLModel par requete et les services
construits sur cette session.
"""

from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from ..container import Container
from ..infrastructure.persistence.database import get_session
from ..services.content import ContentService
from ..services.playlist import PlaylistService


def get_container(request: Request) -> Container:
    """Retourne le Container attache a l'application."""
    return request.app.state.container


def get_db_session(
    container: Annotated[Container, Depends(get_container)],
) -> Iterator[Session]:
    """Ouvre une session pour la duree de la requete."""
    yield from get_session(container.engine())


def get_content_service(
    container: Annotated[Container, Depends(get_container)],
    session: Annotated[Session, Depends(get_db_session)],
) -> ContentService:
    """ContentService lie a la session de la requete."""
    return container.content_service(
        repository=container.content_repository(session=session)
    )


def get_playlist_service(
    container: Annotated[Container, Depends(get_container)],
    session: Annotated[Session, Depends(get_db_session)],
) -> PlaylistService:
    """PlaylistService lie a la session de la requete."""
    return container.playlist_service(
        repository=container.playlist_repository(session=session)
    )
