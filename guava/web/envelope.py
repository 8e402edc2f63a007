"""
Enveloppe de reponse commune a tous les endpoints JSON.

Structure :
    succes : {"success": true, "result": <payload ou {}>}
    echec  : {"success": false, "error": <message ou "Internal Server Error">}

"success" est toujours derive du code de statut : l'enveloppe et le code
HTTP ne peuvent jamais se contredire. Les telechargements binaires ne
passent pas par l'enveloppe.
"""

from typing import Any, Optional

from fastapi.responses import JSONResponse

DEFAULT_ERROR_MESSAGE = "Internal Server Error"


def is_success(status_code: int) -> bool:
    """Indique si un code de statut appartient a la classe 2xx."""
    return 200 <= status_code < 300


def envelope(
    status_code: int,
    result: Optional[Any] = None,
    error: Optional[str] = None,
) -> dict[str, Any]:
    """
    Construit le corps enveloppe d'une reponse.

    Args :
        status_code : Code HTTP de la reponse
        result : Payload de succes (ignore en cas d'echec)
        error : Message d'erreur (ignore en cas de succes)

    Retourne :
        Le corps a serialiser en JSON
    """
    success = is_success(status_code)
    body: dict[str, Any] = {"success": success}
    if success:
        body["result"] = result if result is not None else {}
    else:
        body["error"] = error or DEFAULT_ERROR_MESSAGE
    return body


def envelope_response(
    status_code: int,
    result: Optional[Any] = None,
    error: Optional[str] = None,
) -> JSONResponse:
    """Construit la reponse JSON enveloppee avec le meme code de statut."""
    return JSONResponse(
        content=envelope(status_code, result=result, error=error),
        status_code=status_code,
        media_type="application/json",
    )
