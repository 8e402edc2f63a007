"""
Routes des playlists : listing du catalogue et contenu d'une playlist.

Les handlers sont synchrones : FastAPI les execute dans son threadpool
pendant les acces au store.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from ...core.errors import PlaylistNotFoundError
from ...services.playlist import PlaylistService
from ..deps import get_playlist_service
from ..envelope import envelope_response

router = APIRouter()


@router.get("/playlists")
@router.get("/playlist")
def list_playlists(
    service: Annotated[PlaylistService, Depends(get_playlist_service)],
):
    """Liste les playlists (nom + identifiant, sans contenu)."""
    summaries = service.list_all()
    return envelope_response(
        status.HTTP_200_OK,
        result=[summary.to_dict() for summary in summaries],
    )


@router.get("/playlist/{identifier}/content")
def playlist_content(
    identifier: str,
    service: Annotated[PlaylistService, Depends(get_playlist_service)],
):
    """
    Retourne le document complet d'une playlist.

    Playlist absente : 204 avec {"success": true, "result": {}}.
    Echec du store : BackendError, rendue en 500 par le handler d'erreurs.
    """
    try:
        playlist = service.get_by_identifier(identifier)
    except PlaylistNotFoundError:
        # Sous uvicorn, h11 refuse le corps d'un 204 : le client ne recoit que le statut
        return envelope_response(status.HTTP_204_NO_CONTENT)
    return envelope_response(status.HTTP_200_OK, result=playlist.to_dict())
