"""
Routes des contenus : resolution du hash et telechargement de l'asset.

Le telechargement ne passe pas par l'enveloppe : les octets du fichier sont
diffuses tels quels. Seul l'echec (contenu ou fichier introuvable) est
rendu en JSON enveloppe.
"""

import os
from typing import Annotated, BinaryIO, Iterator

from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse
from loguru import logger

from ...core.errors import NotFoundError
from ...services.content import ContentService
from ..deps import get_content_service
from ..envelope import envelope_response

router = APIRouter(prefix="/content")

# Taille des blocs diffuses (64 KB)
CHUNK_SIZE = 64 * 1024

BINARY_MEDIA_TYPE = "application/octet-stream"


def _iter_stream(stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Diffuse le flux par blocs puis le ferme."""
    with stream:
        while chunk := stream.read(chunk_size):
            yield chunk


@router.get("/{content_id}/hash")
def content_hash(
    content_id: str,
    service: Annotated[ContentService, Depends(get_content_service)],
):
    """Retourne le hash de stockage d'un contenu."""
    try:
        file_hash = service.resolve_hash(content_id)
    except NotFoundError:
        return envelope_response(status.HTTP_404_NOT_FOUND, error="content not found")
    return envelope_response(status.HTTP_200_OK, result=file_hash)


@router.get("/{content_id}/download")
def download_content(
    content_id: str,
    service: Annotated[ContentService, Depends(get_content_service)],
):
    """Diffuse les octets de l'asset d'un contenu."""
    try:
        stream = service.open_asset(content_id)
    except NotFoundError:
        return envelope_response(status.HTTP_404_NOT_FOUND, error="file not found")

    # Le flux n'appartient a la reponse qu'une fois celle-ci construite
    try:
        size = os.fstat(stream.fileno()).st_size
        return StreamingResponse(
            _iter_stream(stream),
            status_code=status.HTTP_200_OK,
            media_type=BINARY_MEDIA_TYPE,
            headers={"Content-Length": str(size)},
        )
    except OSError as exc:
        stream.close()
        logger.error(
            "Taille de l'asset illisible, rapporte comme absent",
            content_id=content_id,
            error=str(exc),
        )
        return envelope_response(status.HTTP_404_NOT_FOUND, error="file not found")
    except Exception:
        stream.close()
        raise
