"""
Service de resolution de contenu.

ContentService resout un identifiant de contenu stable vers son hash de
stockage, puis ouvre l'asset correspondant.

Politique d'erreur (choix explicite) :
- Un content_id sans enregistrement et un echec du store sont tous deux
  rapportes comme ContentNotFoundError. Le client ne distingue pas
  "n'a jamais existe" de "temporairement injoignable".
- L'echec du store est journalise en ERROR avec sa cause, pour que
  l'exploitation puisse le distinguer d'une simple absence.
"""

from typing import BinaryIO

from loguru import logger

from guava.core.errors import BackendError, BadRequestError, ContentNotFoundError
from guava.core.ports.file_system import IAssetStore
from guava.core.ports.repositories import IContentRepository


class ContentService:
    """
    Service de resolution content_id -> hash -> asset.

    Sans etat : une instance est creee par requete avec le repository
    lie a la session de la requete.
    """

    def __init__(self, repository: IContentRepository, asset_store: IAssetStore) -> None:
        """
        Initialise le service.

        Args :
            repository : Repository de lecture des contenus
            asset_store : Store des assets adresses par hash
        """
        self._repository = repository
        self._asset_store = asset_store

    def resolve_hash(self, content_id: str) -> str:
        """
        Resout un content_id vers son hash de stockage.

        Args :
            content_id : Identifiant opaque non vide

        Retourne :
            Le hash de l'enregistrement correspondant

        Raises :
            BadRequestError : Si content_id est vide
            ContentNotFoundError : Si aucun enregistrement ne correspond
                ou si le store a echoue
        """
        if not content_id:
            raise BadRequestError("content_id vide", public_message="missing content id")

        try:
            record = self._repository.get_by_content_id(content_id)
        except BackendError as exc:
            logger.error(
                "Echec du store pendant la resolution, rapporte comme absent",
                content_id=content_id,
                error=exc.detail,
            )
            raise ContentNotFoundError(exc.detail) from exc

        if record is None:
            logger.info("Contenu inconnu", content_id=content_id)
            raise ContentNotFoundError(f"Aucun contenu pour {content_id!r}")

        if not record.hash:
            logger.error("Contenu sans hash, rapporte comme absent", content_id=content_id)
            raise ContentNotFoundError(f"Contenu {content_id!r} sans hash")

        logger.debug("Hash resolu", content_id=content_id, hash=record.hash)
        return record.hash

    def open_asset(self, content_id: str) -> BinaryIO:
        """
        Resout un content_id puis ouvre l'asset correspondant.

        Raises :
            BadRequestError : Si content_id est vide
            ContentNotFoundError : Si le hash ne peut pas etre resolu
            AssetNotFoundError : Si l'asset ne peut pas etre ouvert
        """
        file_hash = self.resolve_hash(content_id)
        return self._asset_store.open(file_hash)
