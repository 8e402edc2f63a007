"""
Service des playlists.

PlaylistService charge le document complet d'une playlist et produit le
listing leger du catalogue.

Trois issues distinctes pour get_by_identifier :
- trouvee : document complet
- absente : PlaylistNotFoundError (requete valide, zero resultat)
- store en echec : BackendError
"Vide" et "casse" ne sont jamais confondus.
"""

from loguru import logger

from guava.core.entities.catalog import Playlist, PlaylistSummary
from guava.core.errors import BackendError, BadRequestError, PlaylistNotFoundError
from guava.core.ports.repositories import IPlaylistRepository


class PlaylistService:
    """
    Service d'agregation et de listing des playlists.

    Attributes:
        allow_partial_listing: Si True, list_all retourne les playlists lues
            avant une erreur du store au lieu d'echouer
    """

    def __init__(self, repository: IPlaylistRepository, allow_partial_listing: bool = False) -> None:
        self._repository = repository
        self.allow_partial_listing = allow_partial_listing

    def get_by_identifier(self, identifier: str) -> Playlist:
        """
        Charge une playlist complete par identifiant exact.

        Raises :
            BadRequestError : Si identifier est vide
            PlaylistNotFoundError : Si aucune playlist ne correspond
            BackendError : Si le store a echoue
        """
        if not identifier:
            raise BadRequestError("identifiant vide", public_message="missing playlist identifier")

        try:
            playlist = self._repository.get_by_identifier(identifier)
        except BackendError as exc:
            logger.error("Echec du store", identifier=identifier, error=exc.detail)
            raise

        if playlist is None:
            logger.info("Playlist absente", identifier=identifier)
            raise PlaylistNotFoundError(f"Aucune playlist {identifier!r}")

        return playlist

    def list_all(self) -> list[PlaylistSummary]:
        """
        Liste toutes les playlists en projection legere.

        L'ordre est celui du store et n'est pas garanti.

        Raises :
            BackendError : Si le store echoue et que les resultats partiels
                ne sont pas autorises
        """
        summaries: list[PlaylistSummary] = []
        try:
            for summary in self._repository.iter_summaries():
                summaries.append(summary)
        except BackendError as exc:
            if not self.allow_partial_listing:
                logger.error("Listing interrompu", read=len(summaries), error=exc.detail)
                raise
            logger.warning(
                "Listing interrompu, resultats partiels retournes",
                read=len(summaries),
                error=exc.detail,
            )
        return summaries
