"""
Erreurs du catalogue.

Chaque erreur porte le code HTTP et le message public qui lui correspondent.
Le message public est le seul texte expose au client ; le detail (message de
l'exception, cause chainee) reste dans les logs.
"""

from typing import Optional


class CatalogError(Exception):
    """Erreur de base du catalogue (500 par defaut)."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, detail: str = "", public_message: Optional[str] = None) -> None:
        """
        Initialise l'erreur.

        Args :
            detail : Detail interne, journalise mais jamais renvoye au client
            public_message : Message renvoye au client (defaut: default_message)
        """
        self.detail = detail
        self.public_message = public_message or self.default_message
        super().__init__(detail or self.public_message)


class NotFoundError(CatalogError):
    """Aucun enregistrement ou fichier correspondant."""

    status_code = 404
    default_message = "not found"


class ContentNotFoundError(NotFoundError):
    """Aucun hash resolu pour un content_id."""

    default_message = "content not found"


class AssetNotFoundError(NotFoundError):
    """Asset absent ou illisible sur le stockage."""

    default_message = "file not found"


class PlaylistNotFoundError(NotFoundError):
    """Aucune playlist avec cet identifiant (requete valide, zero resultat)."""

    default_message = "playlist not found"


class BadRequestError(CatalogError):
    """Parametre de chemin manquant ou invalide."""

    status_code = 400
    default_message = "Bad Request"


class BackendError(CatalogError):
    """Echec du store ou du systeme de fichiers."""

    status_code = 500
