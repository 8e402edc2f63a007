"""
Route d'index.

Repond "OK" en texte brut, pour les sondes de disponibilite.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def index() -> str:
    """Index du service."""
    return "OK"
